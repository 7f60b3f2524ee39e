"""
Applies the computed order to registered fragments.

Definitions are collected into an ordered list; resolver and directive
sets are deep-merged left to right so that a fragment sorted later wins
conflicting leaf values.  Nothing in the registry or constraint store is
mutated, so repeated calls return identical results.

Usage::

    aggregator = Aggregator(registry, OrderingEngine(constraints))
    payload = aggregator.build()
    payload.definitions   # ["type Query { ... }", "type User { ... }"]
    payload.resolvers     # {"Query": {...}, "User": {...}}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from schemabuilder.merge import deep_merge
from schemabuilder.ordering.engine import OrderingEngine
from schemabuilder.ordering.otel import emit_build_result
from schemabuilder.registry import Registry
from schemabuilder.types import FragmentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaPayload:
    """The aggregated inputs for an executable-schema factory."""

    definitions: list[Any] = field(default_factory=list)
    resolvers: dict[str, Any] = field(default_factory=dict)
    directives: dict[str, Any] = field(default_factory=dict)

    def as_kwargs(self) -> dict[str, Any]:
        """Keyword arguments in the shape schema factories commonly take."""
        return {
            "type_defs": list(self.definitions),
            "resolvers": self.resolvers,
            "directives": self.directives,
        }


class Aggregator:
    """Orders and combines the fragments of one registry."""

    def __init__(self, registry: Registry, engine: OrderingEngine) -> None:
        self._registry = registry
        self._engine = engine

    def ordered_ids(self, kind: FragmentKind) -> list[str]:
        return self._engine.order(self._registry.all_ids(kind))

    def order_and_list(self, kind: FragmentKind) -> list[Any]:
        """Fragments of ``kind`` in computed order."""
        fragments = self._registry.fragments(kind)
        return [fragments[i] for i in self.ordered_ids(kind)]

    def order_and_merge(self, kind: FragmentKind) -> dict[str, Any]:
        """Fragments of ``kind`` deep-merged in computed order.

        Raises:
            TypeError: If a registered fragment is not a mapping.
        """
        fragments = self._registry.fragments(kind)
        ordered = []
        for identifier in self.ordered_ids(kind):
            fragment = fragments[identifier]
            if not isinstance(fragment, Mapping):
                raise TypeError(
                    f"Cannot merge {FragmentKind(kind).value} for '{identifier}': "
                    f"expected a mapping, got {type(fragment).__name__}"
                )
            ordered.append(fragment)
        return deep_merge(*ordered)

    def build(self) -> SchemaPayload:
        """Assemble all kinds; rules are checked across every known identifier first.

        Raises:
            OrderingConflictError: If any two registered identifiers conflict,
                whatever kinds they were registered under.
        """
        self._engine.check(self._registry.known_ids())
        payload = SchemaPayload(
            definitions=self.order_and_list(FragmentKind.DEFINITIONS),
            resolvers=self.order_and_merge(FragmentKind.RESOLVERS),
            directives=self.order_and_merge(FragmentKind.DIRECTIVES),
        )
        emit_build_result(payload)
        return payload
