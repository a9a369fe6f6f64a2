"""Form: owns the validation state of several fields and runs the submit flow."""

from __future__ import annotations

import logging

from validated_fields.config.models import FieldConfig, FormConfig
from validated_fields.domain.binding import StateBinding, reset_validation, trigger_error
from validated_fields.domain.rules import get_rule
from validated_fields.domain.states import ButtonValidationState, ValidationState, button_state
from validated_fields.domain.validators import (
    Validator,
    all_of,
    length_range,
    matches,
    maximum_length,
    minimum_length,
)
from validated_fields.widgets.field import ValidatedTextField

logger = logging.getLogger(__name__)


def build_validator(cfg: FieldConfig) -> Validator | None:
    """
    Combine the field's named rules, pattern and length bounds with all_of.
    The result replaces the field type default rather than adding to it.
    None when nothing is configured, so the field type default applies.
    """
    checks: list[Validator] = [get_rule(name) for name in cfg.rules]
    if cfg.pattern:
        checks.append(matches(cfg.pattern))
    if cfg.min_length is not None and cfg.max_length is not None:
        checks.append(length_range(cfg.min_length, cfg.max_length))
    elif cfg.min_length is not None:
        checks.append(minimum_length(cfg.min_length))
    elif cfg.max_length is not None:
        checks.append(maximum_length(cfg.max_length))
    if not checks:
        return None
    if len(checks) == 1:
        return checks[0]
    return all_of(checks)


class Form:
    """Fields built from config, in order. The form owns each field's StateBinding."""

    def __init__(self, config: FormConfig) -> None:
        self.config = config
        self._bindings: dict[str, StateBinding] = {}
        self._fields: dict[str, ValidatedTextField] = {}
        for cfg in config.fields:
            state = StateBinding()
            self._bindings[cfg.name] = state
            self._fields[cfg.name] = ValidatedTextField(
                cfg.placeholder,
                cfg.type,
                header=cfg.header,
                validator=build_validator(cfg),
                error_message=cfg.error_message,
                validation_state=state,
                colors=config.colors,
                mode=cfg.mode,
            )

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.config.fields]

    def field(self, name: str) -> ValidatedTextField:
        """Raises KeyError for an unknown field name."""
        try:
            return self._fields[name]
        except KeyError:
            raise KeyError(f"Unknown field: {name}") from None

    def set_text(self, name: str, value: str) -> None:
        self.field(name).on_text_changed(value)

    def focus(self, name: str) -> None:
        """Focus one field; every other focused field loses focus."""
        target = self.field(name)
        for other in self._fields.values():
            if other is not target and other.is_focused:
                other.on_focus_changed(False)
        target.on_focus_changed(True)

    def blur(self) -> None:
        for f in self._fields.values():
            if f.is_focused:
                f.on_focus_changed(False)

    def submit(self) -> bool:
        """
        Validate every field. Fields that fail (or are required and empty) are
        forced invalid via trigger_error. Returns True if the form is valid.
        """
        self.blur()
        failed: list[str] = []
        for cfg in self.config.fields:
            f = self._fields[cfg.name]
            if not f.text:
                ok = not cfg.required
            else:
                ok = f.is_valid
            if not ok:
                trigger_error(self._bindings[cfg.name])
                failed.append(cfg.name)
            elif f.state == ValidationState.INVALID:
                # Clear an earlier failed submit now that the value passes
                reset_validation(self._bindings[cfg.name])
                f.on_text_changed(f.text)
        if failed:
            logger.info("Form %r rejected; invalid fields: %s", self.config.name, ", ".join(failed))
        else:
            logger.info("Form %r submitted", self.config.name)
        return not failed

    def reset(self) -> None:
        for state in self._bindings.values():
            reset_validation(state)

    def values(self) -> dict[str, str]:
        return {name: f.text for name, f in self._fields.items()}

    def errors(self) -> dict[str, str | None]:
        """Field name -> error message for fields currently invalid."""
        return {
            name: f.error_message
            for name, f in self._fields.items()
            if f.state == ValidationState.INVALID
        }

    @property
    def button_state(self) -> ButtonValidationState:
        has_empty_required = any(
            cfg.required and not self._fields[cfg.name].text
            for cfg in self.config.fields
        )
        return button_state(
            (f.state for f in self._fields.values()),
            has_empty_required=has_empty_required,
        )
