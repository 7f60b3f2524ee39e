"""
Constrained ordering of fragment identifiers.

Public API::

    from schemabuilder.ordering import (
        # Rules storage
        ConstraintStore,
        DEFAULT_START,
        # Signals and decision table
        Signals,
        Decision,
        DECISION_TABLE,
        # Engine
        OrderingEngine,
        # Rules file
        OrderingRule,
        OrderingRulesSpec,
        OrderingRulesLoader,
    )
"""

from schemabuilder.ordering.constraints import DEFAULT_START, ConstraintStore
from schemabuilder.ordering.engine import OrderingEngine
from schemabuilder.ordering.loader import OrderingRulesLoader
from schemabuilder.ordering.schema import OrderingRule, OrderingRulesSpec
from schemabuilder.ordering.signals import DECISION_TABLE, Decision, Signals

__all__ = [
    # Rules storage
    "ConstraintStore",
    "DEFAULT_START",
    # Signals
    "Signals",
    "Decision",
    "DECISION_TABLE",
    # Engine
    "OrderingEngine",
    # Rules file
    "OrderingRule",
    "OrderingRulesSpec",
    "OrderingRulesLoader",
]
