"""
Pairwise-signal ordering engine.

Computes a deterministic total order over a set of identifiers from the
rules held in a ``ConstraintStore``.  Each pair is reduced to a
``Signals`` tuple and looked up in ``DECISION_TABLE``; contradictions
raise an ``OrderingConflictError`` subclass naming the identifiers.

Conflict detection is pairwise only: every distinct pair is checked
before sorting, but no global cycle detection is attempted, so chains of
edges without a direct rule between their ends are not guaranteed to be
transitive.

Usage::

    from schemabuilder.ordering.constraints import ConstraintStore
    from schemabuilder.ordering.engine import OrderingEngine

    store = ConstraintStore()
    store.declare_after("User", ["Node"])
    OrderingEngine(store).order(["User", "Node", "Query"])
    # ['Query', 'Node', 'User']
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from itertools import combinations
from typing import Iterable, NoReturn, Optional

from schemabuilder.errors import (
    ConflictInAError,
    ConflictInBError,
    ConflictInBothError,
    OrderingConflictError,
    UnknownCombinationError,
)
from schemabuilder.ordering.constraints import ConstraintStore
from schemabuilder.ordering.otel import emit_ordering_conflict
from schemabuilder.ordering.signals import DECISION_TABLE, Decision, Signals
from schemabuilder.types import ConflictScope

logger = logging.getLogger(__name__)

_CONFLICTS: dict[ConflictScope, type[OrderingConflictError]] = {
    ConflictScope.A: ConflictInAError,
    ConflictScope.B: ConflictInBError,
    ConflictScope.BOTH: ConflictInBothError,
}


class OrderingEngine:
    """Orders identifiers according to a ``ConstraintStore``.

    Args:
        constraints: The rules to interpret.
        table: Decision table override (tests only).
    """

    def __init__(
        self,
        constraints: ConstraintStore,
        table: Optional[dict[Signals, Decision]] = None,
    ) -> None:
        self._constraints = constraints
        self._table = DECISION_TABLE if table is None else table

    def signals(self, a: str, b: str) -> Signals:
        c = self._constraints
        return Signals(
            a_start=c.is_start(a),
            b_start=c.is_start(b),
            a_end=c.is_end(a),
            b_end=c.is_end(b),
            a_follows_b=c.must_follow(a, b),
            b_follows_a=c.must_follow(b, a),
        )

    def compare(self, a: str, b: str) -> int:
        """Return -1 if ``a`` sorts first, 1 if ``b`` does, 0 if unordered.

        Raises:
            OrderingConflictError: If the rules for the pair contradict.
        """
        if a == b:
            return 0
        signals = self.signals(a, b)
        decision = self._table.get(signals)
        if decision is None:
            self._fail(UnknownCombinationError(a, b, signals))
        if decision.conflict is not None:
            self._fail(_CONFLICTS[decision.conflict](a, b, signals))
        return decision.order

    def check(self, identifiers: Iterable[str]) -> None:
        """Compare every distinct pair, raising on the first conflict."""
        for a, b in combinations(identifiers, 2):
            self.compare(a, b)

    def order(self, identifiers: Iterable[str]) -> list[str]:
        """Stable-sort ``identifiers``; unordered pairs keep input order."""
        ids = list(dict.fromkeys(identifiers))
        self.check(ids)
        ordered = sorted(ids, key=cmp_to_key(self.compare))
        logger.debug("Computed order: %s", ordered)
        return ordered

    @staticmethod
    def _fail(err: OrderingConflictError) -> NoReturn:
        logger.warning("%s", err)
        emit_ordering_conflict(err)
        raise err
