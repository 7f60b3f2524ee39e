"""
Pairwise ordering signals and the decision table that interprets them.

For two distinct identifiers A and B six booleans are computed:

====  =============================================
bit   meaning
====  =============================================
5     A is in the start partition
4     B is in the start partition
3     A is in the end partition
2     B is in the end partition
1     A must follow B (B in after(A) or A in before(B))
0     B must follow A
====  =============================================

``DECISION_TABLE`` maps every one of the 64 tuples to a ``Decision``:
an order (-1 A first, 0 unordered, +1 B first) or a conflict scope.
It is built once from the rules in ``_decide`` and is antisymmetric:
swapping A and B negates the order and mirrors the conflict scope.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from schemabuilder.types import ConflictScope

SIGNAL_COUNT = 6


class Signals(NamedTuple):
    """The six pairwise signals for (A, B)."""

    a_start: bool
    b_start: bool
    a_end: bool
    b_end: bool
    a_follows_b: bool
    b_follows_a: bool

    @classmethod
    def from_word(cls, word: int) -> "Signals":
        if not 0 <= word < 1 << SIGNAL_COUNT:
            raise ValueError(f"Signal word out of range: {word}")
        return cls(
            *(bool(word >> (SIGNAL_COUNT - 1 - i) & 1) for i in range(SIGNAL_COUNT))
        )

    @property
    def word(self) -> int:
        word = 0
        for flag in self:
            word = word << 1 | int(flag)
        return word

    @property
    def bits(self) -> str:
        return format(self.word, f"0{SIGNAL_COUNT}b")

    def swapped(self) -> "Signals":
        """Signals for (B, A)."""
        return Signals(
            a_start=self.b_start,
            b_start=self.a_start,
            a_end=self.b_end,
            b_end=self.a_end,
            a_follows_b=self.b_follows_a,
            b_follows_a=self.a_follows_b,
        )


class Decision(NamedTuple):
    order: int
    conflict: Optional[ConflictScope] = None


UNORDERED = Decision(0)
A_FIRST = Decision(-1)
B_FIRST = Decision(1)


def _scope(in_a: bool, in_b: bool) -> ConflictScope:
    if in_a and in_b:
        return ConflictScope.BOTH
    return ConflictScope.A if in_a else ConflictScope.B


def _rank(start: bool, end: bool) -> int:
    if start:
        return 0
    return 2 if end else 1


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _decide(s: Signals) -> Decision:
    a_torn = s.a_start and s.a_end
    b_torn = s.b_start and s.b_end
    if a_torn or b_torn:
        return Decision(0, _scope(a_torn, b_torn))

    if s.a_follows_b and s.b_follows_a:
        return Decision(0, ConflictScope.BOTH)

    partition = _sign(_rank(s.a_start, s.a_end) - _rank(s.b_start, s.b_end))
    edge = 1 if s.a_follows_b else -1 if s.b_follows_a else 0

    if partition and edge and partition != edge:
        # The marked side(s) demand the opposite of the declared edge.
        return Decision(0, _scope(s.a_start or s.a_end, s.b_start or s.b_end))

    return Decision(edge or partition)


def build_decision_table() -> dict[Signals, Decision]:
    """Enumerate all signal words into an explicit signals -> decision table."""
    return {
        signals: _decide(signals)
        for signals in (Signals.from_word(w) for w in range(1 << SIGNAL_COUNT))
    }


DECISION_TABLE: dict[Signals, Decision] = build_decision_table()
