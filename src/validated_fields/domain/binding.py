"""Shared, container-owned validation state for one field, and its external mutators."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from validated_fields.domain.states import ValidationState


class StateBinding(BaseModel):
    """
    Holds one field's ValidationState. The owner (usually a form) keeps the
    binding; the field reads it and writes its recomputed state back.
    """

    model_config = ConfigDict(validate_assignment=True)

    value: ValidationState = ValidationState.NEUTRAL


def trigger_error(binding: StateBinding) -> None:
    """Mark the field invalid, e.g. on a failed submit. The only way into invalid in triggered mode."""
    binding.value = ValidationState.INVALID


def reset_validation(binding: StateBinding) -> None:
    binding.value = ValidationState.NEUTRAL
