"""
Pydantic v2 models for the ordering-rules YAML format.

A rules file declares, per identifier, which identifiers it must follow
or precede and whether it is pinned to the start or end partition.  An
optional top-level ``start`` list replaces the default start partition.

All models use ``extra="forbid"`` to reject unknown keys at parse time.

Usage::

    from schemabuilder.ordering.schema import OrderingRulesSpec
    import yaml

    with open("ordering.yaml") as fh:
        raw = yaml.safe_load(fh)
    spec = OrderingRulesSpec.model_validate(raw)
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OrderingRule(BaseModel):
    """Ordering rules declared for a single identifier."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, description="Fragment identifier")
    after: list[str] = Field(
        default_factory=list, description="Identifiers this one must follow"
    )
    before: list[str] = Field(
        default_factory=list, description="Identifiers this one must precede"
    )
    start: bool = Field(False, description="Pin to the start partition")
    end: bool = Field(False, description="Pin to the end partition")


class OrderingRulesSpec(BaseModel):
    """Root model for an ordering-rules YAML file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(
        ..., min_length=1, description="Rules schema version (e.g. 0.1.0)"
    )
    contract_type: Literal["schema_ordering"] = Field(
        ..., description="Must be 'schema_ordering'"
    )
    start: Optional[list[str]] = Field(
        None, description="Replaces the default start partition when set"
    )
    end: list[str] = Field(
        default_factory=list, description="Identifiers pinned to the end partition"
    )
    rules: list[OrderingRule] = Field(
        default_factory=list, description="Per-identifier ordering rules"
    )
    description: Optional[str] = Field(None, description="Human-readable notes")

    @model_validator(mode="after")
    def _unique_rule_ids(self) -> "OrderingRulesSpec":
        seen: set[str] = set()
        for rule in self.rules:
            if rule.id in seen:
                raise ValueError(f"Duplicate rule for identifier '{rule.id}'")
            seen.add(rule.id)
        return self
