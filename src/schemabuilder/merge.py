"""
Recursive structural merge with last-writer-wins leaves.

Mappings merge key by key.  Everything else (scalars, sequences,
callables, objects) is an atomic leaf replaced by the later source;
sequences are never merged element-wise.  Sources are never mutated:
nested mappings are copied into the result.

Example:
    >>> deep_merge({"Query": {"x": 1}}, {"Query": {"x": 2, "y": 3}})
    {'Query': {'x': 2, 'y': 3}}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_into(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``source`` into ``target`` in place and return ``target``."""
    for key, value in source.items():
        if isinstance(value, Mapping):
            existing = target.get(key)
            if not isinstance(existing, dict):
                existing = target[key] = {}
            merge_into(existing, value)
        else:
            target[key] = value
    return target


def deep_merge(*sources: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``sources`` left to right into a fresh dict."""
    result: dict[str, Any] = {}
    for source in sources:
        merge_into(result, source)
    return result
