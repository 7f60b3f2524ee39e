"""
Exception taxonomy for schema assembly.

All errors are fatal to the current assembly run: nothing is retried and
no partial payload is returned.

- ``DuplicateIdentifierError``: an identifier registered twice for one
  kind, or seen twice across imported units.
- ``OrderingConflictError``: contradictory ordering rules for a pair of
  identifiers.  Subclassed by where the contradiction lies.
- ``FragmentImportError``: a unit could not be loaded by the importer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from schemabuilder.types import ConflictScope, FragmentKind

if TYPE_CHECKING:
    from schemabuilder.ordering.signals import Signals


class SchemaBuilderError(Exception):
    """Base class for all schemabuilder errors."""


class DuplicateIdentifierError(SchemaBuilderError):
    """Raised when an identifier is registered more than once.

    Attributes:
        identifier: The offending identifier.
        kind: The fragment kind, or ``None`` when the duplicate was
            detected across imported units rather than within one kind.
    """

    def __init__(self, identifier: str, kind: Optional[FragmentKind] = None) -> None:
        self.identifier = identifier
        self.kind = kind
        if kind is None:
            msg = f"Duplicate identifier '{identifier}'"
        else:
            msg = f"Duplicate identifier '{identifier}' for {kind.value}"
        super().__init__(msg)


class OrderingConflictError(SchemaBuilderError):
    """Raised when ordering rules for a pair of identifiers contradict.

    Attributes:
        signals: The signal tuple computed for the pair.
        identifiers: The identifier(s) the conflict is attributed to.
    """

    scope: Optional[ConflictScope] = None

    def __init__(self, a: str, b: str, signals: "Signals") -> None:
        self.a = a
        self.b = b
        self.signals = signals
        self.identifiers = self._blamed(a, b)
        super().__init__(self._message())

    def _blamed(self, a: str, b: str) -> tuple[str, ...]:
        if self.scope is ConflictScope.A:
            return (a,)
        if self.scope is ConflictScope.B:
            return (b,)
        return (a, b)

    def _message(self) -> str:
        names = " and ".join(f"'{i}'" for i in self.identifiers)
        return f"Ordering conflict in {names} (signal word {self.signals.bits})"

    @property
    def word(self) -> int:
        """The packed 6-bit signal word."""
        return self.signals.word


class ConflictInAError(OrderingConflictError):
    """The first identifier of the compared pair carries contradictory rules."""

    scope = ConflictScope.A


class ConflictInBError(OrderingConflictError):
    """The second identifier of the compared pair carries contradictory rules."""

    scope = ConflictScope.B


class ConflictInBothError(OrderingConflictError):
    """Both identifiers demand precedence over each other."""

    scope = ConflictScope.BOTH


class UnknownCombinationError(OrderingConflictError):
    """A signal word missing from the decision table.

    Indicates an incomplete table, not a conflict in user rules.
    """

    def _message(self) -> str:
        return (
            f"Unknown signal combination {self.signals.bits} "
            f"for '{self.a}' and '{self.b}'"
        )


class FragmentImportError(SchemaBuilderError):
    """Raised when the importer cannot load a unit."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot import fragments from {path}: {reason}")
