"""
Storage for relative-ordering rules between identifiers.

Rules are kept as adjacency sets keyed by identifier, never as a built
graph.  Nothing is validated here; contradictions only surface when
``OrderingEngine`` interprets the rules for a pair.

Usage::

    from schemabuilder.ordering.constraints import ConstraintStore

    store = ConstraintStore()               # Query, Mutation, ... start first
    store.declare_after("User", ["Node"])
    store.mark_end("Scalars")
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

# Conventional schema root fragments, executed first unless overridden.
DEFAULT_START: tuple[str, ...] = ("index", "Query", "Mutation", "Subscription")


class ConstraintStore:
    """Holds after/before edges and the start/end partitions.

    Args:
        start: Identifiers pre-seeded into the start partition.
            Defaults to ``DEFAULT_START``; pass an empty iterable for none.
        end: Identifiers pre-seeded into the end partition.
    """

    def __init__(
        self,
        start: Optional[Iterable[str]] = None,
        end: Optional[Iterable[str]] = None,
    ) -> None:
        self._after: dict[str, frozenset[str]] = {}
        self._before: dict[str, frozenset[str]] = {}
        self._start: set[str] = set(DEFAULT_START if start is None else start)
        self._end: set[str] = set(end or ())

    def declare_after(self, identifier: str, others: Iterable[str]) -> None:
        """``identifier`` must sort after every member of ``others``.

        Replaces any earlier after-set for ``identifier``; an empty
        ``others`` is a no-op.
        """
        others = frozenset(others)
        if others:
            self._after[identifier] = others
            logger.debug("'%s' after %s", identifier, sorted(others))

    def declare_before(self, identifier: str, others: Iterable[str]) -> None:
        """``identifier`` must sort before every member of ``others``.

        Replaces any earlier before-set for ``identifier``; an empty
        ``others`` is a no-op.
        """
        others = frozenset(others)
        if others:
            self._before[identifier] = others
            logger.debug("'%s' before %s", identifier, sorted(others))

    def mark_start(self, *identifiers: str) -> None:
        self._start.update(identifiers)

    def mark_end(self, *identifiers: str) -> None:
        self._end.update(identifiers)

    def reset_start(self, identifiers: Iterable[str]) -> None:
        """Replace the whole start partition (e.g. to drop the defaults)."""
        self._start = set(identifiers)

    def reset_end(self, identifiers: Iterable[str]) -> None:
        self._end = set(identifiers)

    # -- queries used by the ordering engine --------------------------------

    def is_start(self, identifier: str) -> bool:
        return identifier in self._start

    def is_end(self, identifier: str) -> bool:
        return identifier in self._end

    def must_follow(self, identifier: str, other: str) -> bool:
        """True if ``identifier`` must sort after ``other``.

        Either phrasing of the edge counts: ``other`` in the after-set of
        ``identifier``, or ``identifier`` in the before-set of ``other``.
        """
        return other in self._after.get(identifier, ()) or identifier in self._before.get(
            other, ()
        )

    def after_set(self, identifier: str) -> frozenset[str]:
        return self._after.get(identifier, frozenset())

    def before_set(self, identifier: str) -> frozenset[str]:
        return self._before.get(identifier, frozenset())

    @property
    def start(self) -> frozenset[str]:
        return frozenset(self._start)

    @property
    def end(self) -> frozenset[str]:
        return frozenset(self._end)
