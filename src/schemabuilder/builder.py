"""
Per-assembly context object tying registry, rules and aggregation together.

A ``SchemaBuilder`` owns one ``Registry`` and one ``ConstraintStore``;
create a fresh builder for every assembly run.

Usage::

    from schemabuilder import SchemaBuilder

    builder = (
        SchemaBuilder()
        .add_definitions("Query", "type Query { me: User }")
        .add_definitions("User", "type User { id: ID! }")
        .add_resolvers("Query", {"Query": {"me": resolve_me}})
        .after("User", "Node")
    )
    builder.import_from("schema/")
    payload = builder.build()

    # Or hand the payload straight to an executable-schema factory
    schema = builder.get_schema(make_executable_schema)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, TypeVar, Union

from schemabuilder.aggregator import Aggregator, SchemaPayload
from schemabuilder.config import SchemaBuilderConfig, get_config
from schemabuilder.importer import FragmentImporter
from schemabuilder.ordering.constraints import ConstraintStore
from schemabuilder.ordering.engine import OrderingEngine
from schemabuilder.ordering.schema import OrderingRulesSpec
from schemabuilder.registry import Registry
from schemabuilder.types import FragmentKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SchemaBuilder:
    """
    Collects fragments and ordering rules, then assembles a schema payload.

    Args:
        start: Start partition seed; defaults to ``config.default_start``.
        end: End partition seed; defaults to ``config.default_end``.
        config: Configuration; defaults to ``get_config()``.
    """

    def __init__(
        self,
        start: Optional[Iterable[str]] = None,
        end: Optional[Iterable[str]] = None,
        config: Optional[SchemaBuilderConfig] = None,
    ):
        self.config = config or get_config()
        self.registry = Registry()
        self.constraints = ConstraintStore(
            start=self.config.default_start if start is None else start,
            end=self.config.default_end if end is None else end,
        )
        self.engine = OrderingEngine(self.constraints)
        self.aggregator = Aggregator(self.registry, self.engine)

    # -- registration -----------------------------------------------------

    def register(self, kind: FragmentKind, identifier: str, fragment: Any) -> "SchemaBuilder":
        self.registry.register(kind, identifier, fragment)
        return self

    def add_definitions(self, identifier: str, definitions: Any) -> "SchemaBuilder":
        """Add type definitions (SDL text or a pre-parsed document)."""
        return self.register(FragmentKind.DEFINITIONS, identifier, definitions)

    def add_resolvers(self, identifier: str, resolvers: Mapping[str, Any]) -> "SchemaBuilder":
        return self.register(FragmentKind.RESOLVERS, identifier, resolvers)

    def add_directives(self, identifier: str, directives: Mapping[str, Any]) -> "SchemaBuilder":
        return self.register(FragmentKind.DIRECTIVES, identifier, directives)

    def after(self, identifier: str, *others: str) -> "SchemaBuilder":
        """``identifier`` sorts after each of ``others`` (replaces earlier rule)."""
        self.constraints.declare_after(identifier, others)
        return self

    def before(self, identifier: str, *others: str) -> "SchemaBuilder":
        """``identifier`` sorts before each of ``others`` (replaces earlier rule)."""
        self.constraints.declare_before(identifier, others)
        return self

    def start(self, *identifiers: str) -> "SchemaBuilder":
        self.constraints.mark_start(*identifiers)
        return self

    def end(self, *identifiers: str) -> "SchemaBuilder":
        self.constraints.mark_end(*identifiers)
        return self

    def apply_rules(self, spec: OrderingRulesSpec) -> "SchemaBuilder":
        """Declare every rule of a loaded ordering-rules file."""
        if spec.start is not None:
            self.constraints.reset_start(spec.start)
        self.constraints.mark_end(*spec.end)
        for rule in spec.rules:
            self.constraints.declare_after(rule.id, rule.after)
            self.constraints.declare_before(rule.id, rule.before)
            if rule.start:
                self.constraints.mark_start(rule.id)
            if rule.end:
                self.constraints.mark_end(rule.id)
        logger.debug("Applied %d ordering rule(s)", len(spec.rules))
        return self

    def import_from(
        self,
        path: Union[str, Path],
        extensions: Optional[Iterable[str]] = None,
    ) -> int:
        """Import every top-level unit in ``path``; returns the unit count."""
        importer = FragmentImporter(self)
        return importer.import_from(
            path, self.config.extensions if extensions is None else extensions
        )

    # -- queries ----------------------------------------------------------

    def has(self, kind: FragmentKind, identifier: str) -> bool:
        return self.registry.has(kind, identifier)

    def has_any(self, identifier: str) -> bool:
        return self.registry.has_any(identifier)

    def order(self, kind: Optional[FragmentKind] = None) -> list[str]:
        """Computed order for ``kind``, or for every known identifier."""
        if kind is None:
            return self.engine.order(self.registry.known_ids())
        return self.aggregator.ordered_ids(kind)

    # -- assembly ---------------------------------------------------------

    def build(self) -> SchemaPayload:
        """Ordered definitions plus merged resolvers and directives."""
        payload = self.aggregator.build()
        logger.info(
            "Built schema payload from %d fragment(s)", len(self.registry)
        )
        return payload

    def get_schema(self, factory: Callable[..., T]) -> T:
        """Call ``factory(type_defs=..., resolvers=..., directives=...)``."""
        return factory(**self.build().as_kwargs())
