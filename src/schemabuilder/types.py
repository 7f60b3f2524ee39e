"""
Core type enums for schemabuilder.

Example:
    from schemabuilder.types import FragmentKind

    kind = FragmentKind("resolvers")  # FragmentKind.RESOLVERS
"""

from __future__ import annotations

from enum import Enum


class FragmentKind(str, Enum):
    """The three kinds of fragment a unit can contribute."""

    DEFINITIONS = "definitions"
    RESOLVERS = "resolvers"
    DIRECTIVES = "directives"


class ConflictScope(str, Enum):
    """Which side of a compared pair an ordering conflict is attributed to."""

    A = "a"
    B = "b"
    BOTH = "both"
