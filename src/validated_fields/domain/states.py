"""Field validation FSM: state enums and the pure transition function."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class ValidationState(str, Enum):
    """Display state of one text field."""

    NEUTRAL = "neutral"
    VALID = "valid"
    INVALID = "invalid"
    FOCUSED = "focused"

    @property
    def description(self) -> str:
        return self.value.capitalize()


class ValidationMode(str, Enum):
    """When a field may show itself invalid."""

    IMMEDIATE = "immediate"  # as soon as the predicate fails
    TRIGGERED = "triggered"  # only after trigger_error (e.g. on submit)


class ButtonValidationState(str, Enum):
    """State of a form's submit button."""

    DISABLED = "disabled"
    ENABLED = "enabled"
    ERROR = "error"

    @property
    def description(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        return _BUTTON_COLORS[self]

    @property
    def is_enabled(self) -> bool:
        return self is not ButtonValidationState.DISABLED


_BUTTON_COLORS = {
    ButtonValidationState.DISABLED: "gray",
    ButtonValidationState.ENABLED: "green",
    ButtonValidationState.ERROR: "red",
}


def next_state(
    prior: ValidationState,
    *,
    text: str,
    is_focused: bool,
    predicate_result: bool,
    mode: ValidationMode,
) -> ValidationState:
    """
    Pure transition for a text or focus change. Rules apply in this order and
    the first match wins:

    1. triggered mode and already invalid -> invalid (only a reset clears it)
    2. focused -> focused
    3. empty text -> neutral
    4. predicate passes -> valid
    5. immediate mode -> invalid
    6. otherwise -> neutral
    """
    if mode == ValidationMode.TRIGGERED and prior == ValidationState.INVALID:
        return ValidationState.INVALID
    if is_focused:
        return ValidationState.FOCUSED
    if not text:
        return ValidationState.NEUTRAL
    if predicate_result:
        return ValidationState.VALID
    if mode == ValidationMode.IMMEDIATE:
        return ValidationState.INVALID
    return ValidationState.NEUTRAL


def button_state(
    field_states: Iterable[ValidationState],
    *,
    has_empty_required: bool,
) -> ButtonValidationState:
    """Submit button for a form: error beats disabled beats enabled."""
    if any(s == ValidationState.INVALID for s in field_states):
        return ButtonValidationState.ERROR
    if has_empty_required:
        return ButtonValidationState.DISABLED
    return ButtonValidationState.ENABLED
