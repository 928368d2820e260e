"""
Base Pydantic models for colb.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ColbBaseModel(BaseModel):
    """Base model for all colb Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - use_enum_values: Disabled, profiles keep their BuildType enum
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )


class ImmutableModel(ColbBaseModel):
    """Immutable base model for values that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )
