"""
Keyed fragment storage with per-kind uniqueness.

The registry holds one insertion-ordered collection per
``FragmentKind`` plus the set of identifiers known under any kind.
It contains no ordering logic.

Usage::

    from schemabuilder.registry import Registry
    from schemabuilder.types import FragmentKind

    registry = Registry()
    registry.register(FragmentKind.DEFINITIONS, "User", "type User { id: ID! }")
    registry.has(FragmentKind.DEFINITIONS, "User")   # True
    registry.has_any("User")                          # True
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from schemabuilder.errors import DuplicateIdentifierError
from schemabuilder.types import FragmentKind

logger = logging.getLogger(__name__)


class Registry:
    """Per-assembly storage for definitions, resolvers and directives."""

    def __init__(self) -> None:
        self._fragments: dict[FragmentKind, dict[str, Any]] = {
            kind: {} for kind in FragmentKind
        }
        self._known: dict[str, None] = {}
        self._lock = threading.Lock()

    def register(self, kind: FragmentKind, identifier: str, fragment: Any) -> None:
        """Store ``fragment`` under ``identifier`` for ``kind``.

        Raises:
            DuplicateIdentifierError: If ``identifier`` already has a
                fragment of this kind.
        """
        kind = FragmentKind(kind)
        with self._lock:
            bucket = self._fragments[kind]
            if identifier in bucket:
                raise DuplicateIdentifierError(identifier, kind)
            bucket[identifier] = fragment
            self._known[identifier] = None
        logger.debug("Registered %s for '%s'", kind.value, identifier)

    def has(self, kind: FragmentKind, identifier: str) -> bool:
        with self._lock:
            return identifier in self._fragments[FragmentKind(kind)]

    def has_any(self, identifier: str) -> bool:
        with self._lock:
            return identifier in self._known

    def get(self, kind: FragmentKind, identifier: str) -> Any:
        """Return the fragment for ``identifier``; ``KeyError`` if absent."""
        with self._lock:
            return self._fragments[FragmentKind(kind)][identifier]

    def all_ids(self, kind: FragmentKind) -> tuple[str, ...]:
        """Snapshot of identifiers for ``kind`` in registration order."""
        with self._lock:
            return tuple(self._fragments[FragmentKind(kind)])

    def fragments(self, kind: FragmentKind) -> dict[str, Any]:
        """Snapshot copy of the identifier -> fragment mapping for ``kind``."""
        with self._lock:
            return dict(self._fragments[FragmentKind(kind)])

    def known_ids(self) -> tuple[str, ...]:
        """Every identifier registered under any kind, in first-seen order."""
        with self._lock:
            return tuple(self._known)

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._fragments.values())
