"""Validated text field: binds text and focus events to the validation FSM and a color scheme."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from validated_fields.config.models import DEFAULT_COLORS, ColorScheme
from validated_fields.domain import binding as binding_ops
from validated_fields.domain.binding import StateBinding
from validated_fields.domain.states import ValidationMode, ValidationState, next_state
from validated_fields.domain.validators import FieldType, Validator, default_validator

logger = logging.getLogger(__name__)


class FieldDisplay(BaseModel):
    """What a renderer needs to draw the field for its current state."""

    state: ValidationState
    border_color: str
    error_message: str | None = None
    is_secure: bool = False


def _not_blank(value: str) -> bool:
    return bool(value.strip())


class ValidatedTextField:
    """
    One text input with validation. The host UI calls on_text_changed and
    on_focus_changed; the field recomputes its state into the bound
    StateBinding, which the host (or a form) reads back.
    """

    def __init__(
        self,
        placeholder: str,
        field_type: FieldType,
        *,
        text: str = "",
        header: str | None = None,
        validator: Validator | None = None,
        error_message: str | None = None,
        validation_state: StateBinding | None = None,
        colors: ColorScheme = DEFAULT_COLORS,
        mode: ValidationMode = ValidationMode.IMMEDIATE,
    ) -> None:
        self.placeholder = placeholder
        self.type = field_type
        self.header = header
        self.validator = validator
        self.error_message = error_message
        self.colors = colors
        self.mode = ValidationMode(mode)
        # Without an owner the field keeps a private binding
        self.binding = validation_state if validation_state is not None else StateBinding()
        self._text = text
        self._focused = False

    # --- Convenience constructors ---

    @classmethod
    def immediate(
        cls,
        placeholder: str,
        field_type: FieldType,
        *,
        header: str | None = None,
        validator: Validator | None = None,
        error_message: str | None = None,
        colors: ColorScheme = DEFAULT_COLORS,
    ) -> ValidatedTextField:
        """Shows invalid as soon as the predicate fails."""
        return cls(
            placeholder,
            field_type,
            header=header,
            validator=validator,
            error_message=error_message,
            colors=colors,
            mode=ValidationMode.IMMEDIATE,
        )

    @classmethod
    def triggered(
        cls,
        placeholder: str,
        field_type: FieldType,
        *,
        validation_state: StateBinding,
        header: str | None = None,
        validator: Validator | None = None,
        error_message: str | None = None,
        colors: ColorScheme = DEFAULT_COLORS,
    ) -> ValidatedTextField:
        """Shows invalid only after trigger_error on the given binding."""
        return cls(
            placeholder,
            field_type,
            header=header,
            validator=validator,
            error_message=error_message,
            validation_state=validation_state,
            colors=colors,
            mode=ValidationMode.TRIGGERED,
        )

    @classmethod
    def name_field(
        cls,
        placeholder: str = "Name",
        *,
        validation_state: StateBinding | None = None,
        colors: ColorScheme = DEFAULT_COLORS,
    ) -> ValidatedTextField:
        return cls.triggered(
            placeholder,
            "letters_only",
            validator=_not_blank,
            error_message="validation.name.invalid",
            validation_state=validation_state if validation_state is not None else StateBinding(),
            colors=colors,
        )

    @classmethod
    def email_field(
        cls,
        *,
        validation_state: StateBinding | None = None,
        colors: ColorScheme = DEFAULT_COLORS,
    ) -> ValidatedTextField:
        return cls.triggered(
            "Email",
            "email",
            error_message="validation.email.invalid",
            validation_state=validation_state if validation_state is not None else StateBinding(),
            colors=colors,
        )

    @classmethod
    def password_field(
        cls,
        *,
        validation_state: StateBinding | None = None,
        colors: ColorScheme = DEFAULT_COLORS,
    ) -> ValidatedTextField:
        return cls.triggered(
            "Password",
            "password",
            error_message="validation.password.requirements",
            validation_state=validation_state if validation_state is not None else StateBinding(),
            colors=colors,
        )

    # --- External mutators ---

    @staticmethod
    def trigger_error(state: StateBinding) -> None:
        binding_ops.trigger_error(state)

    @staticmethod
    def reset_validation(state: StateBinding) -> None:
        binding_ops.reset_validation(state)

    # --- Events ---

    def on_text_changed(self, value: str) -> ValidationState:
        self._text = value
        return self._recompute()

    def on_focus_changed(self, focused: bool) -> ValidationState:
        self._focused = focused
        return self._recompute()

    def _recompute(self) -> ValidationState:
        prior = self.binding.value
        state = next_state(
            prior,
            text=self._text,
            is_focused=self._focused,
            predicate_result=self.is_valid,
            mode=self.mode,
        )
        if state != prior:
            logger.debug("%s: %s -> %s", self.placeholder, prior.value, state.value)
        self.binding.value = state
        return state

    # --- Read surface ---

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_focused(self) -> bool:
        return self._focused

    @property
    def state(self) -> ValidationState:
        return self.binding.value

    @property
    def show_error_only_when_triggered(self) -> bool:
        return self.mode == ValidationMode.TRIGGERED

    @property
    def predicate(self) -> Validator:
        """Custom validator if given, else the field type's default."""
        return self.validator or default_validator(self.type)

    @property
    def is_valid(self) -> bool:
        return self.predicate(self._text)

    @property
    def border_color(self) -> str:
        return self.colors.color_for(self.state)

    @property
    def is_error_visible(self) -> bool:
        return self.state == ValidationState.INVALID and self.error_message is not None

    def display(self) -> FieldDisplay:
        return FieldDisplay(
            state=self.state,
            border_color=self.border_color,
            error_message=self.error_message if self.is_error_visible else None,
            is_secure=self.type == "password",
        )
