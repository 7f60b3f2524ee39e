"""
OTel span event emission helpers for schema ordering and assembly.

Guarded by ``_HAS_OTEL``: without OpenTelemetry installed, or outside a
recording span, only the log lines are written.

Usage::

    from schemabuilder.ordering.otel import emit_build_result, emit_ordering_conflict

    emit_ordering_conflict(err)
    emit_build_result(payload)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

try:
    from opentelemetry import trace as otel_trace

    _HAS_OTEL = True
except ImportError:  # pragma: no cover
    _HAS_OTEL = False

if TYPE_CHECKING:
    from schemabuilder.aggregator import SchemaPayload
    from schemabuilder.errors import OrderingConflictError

logger = logging.getLogger(__name__)

Attributes = dict[str, "str | int | float | bool"]


def _record(name: str, attributes: Attributes) -> None:
    if not _HAS_OTEL:
        return
    span = otel_trace.get_current_span()
    if span and span.is_recording():
        span.add_event(name=name, attributes=attributes)


def emit_ordering_conflict(err: "OrderingConflictError") -> None:
    """Event name: ``schema.ordering.conflict``"""
    _record("schema.ordering.conflict", {
        "ordering.conflict": type(err).__name__,
        "ordering.a": err.a,
        "ordering.b": err.b,
        "ordering.identifiers": ",".join(err.identifiers),
        "ordering.signal_word": err.signals.word,
    })


def emit_build_result(payload: "SchemaPayload") -> None:
    """Event name: ``schema.build.complete``"""
    logger.debug(
        "Schema payload assembled: %d definition(s), %d resolver type(s), %d directive(s)",
        len(payload.definitions),
        len(payload.resolvers),
        len(payload.directives),
    )
    _record("schema.build.complete", {
        "schema.definitions": len(payload.definitions),
        "schema.resolver_types": len(payload.resolvers),
        "schema.directives": len(payload.directives),
    })
