"""Form: validator building, focus handling, submit flow, button state."""

from __future__ import annotations

import pytest

from validated_fields.config.models import FieldConfig, FormConfig
from validated_fields.domain.states import ButtonValidationState, ValidationState
from validated_fields.orchestration.form import Form, build_validator


def test_build_validator_none_when_unconfigured() -> None:
    cfg = FieldConfig(name="email", type="email", placeholder="Email")
    assert build_validator(cfg) is None


def test_build_validator_combines_rules_pattern_and_lengths() -> None:
    cfg = FieldConfig(
        name="code",
        type="alphanumeric",
        placeholder="Code",
        rules=["product_code"],
        pattern=r"[A-Z0-9]+",
        min_length=6,
        max_length=6,
    )
    check = build_validator(cfg)
    assert check is not None
    assert check("ABC123") is True
    assert check("abc123") is False  # pattern is case-sensitive
    assert check("ABC1234") is False


def test_build_validator_single_bounds() -> None:
    at_least = build_validator(FieldConfig(name="n", type="alphanumeric", placeholder="N", min_length=3))
    at_most = build_validator(FieldConfig(name="n", type="alphanumeric", placeholder="N", max_length=3))
    assert at_least is not None and at_most is not None
    assert at_least("  ab ") is False
    assert at_most(" ab ") is False


def test_unknown_field_raises(form: Form) -> None:
    with pytest.raises(KeyError, match="Unknown field"):
        form.field("phone")


def test_fields_share_form_colors(minimal_config: FormConfig) -> None:
    minimal_config = minimal_config.model_copy(update={"colors": minimal_config.colors.model_copy(update={"valid": "teal"})})
    form = Form(minimal_config)
    form.set_text("email", "a@b.com")
    assert form.field("email").border_color == "teal"


def test_focus_moves_between_fields(form: Form) -> None:
    form.focus("email")
    assert form.field("email").state == ValidationState.FOCUSED
    form.focus("age")
    assert form.field("email").state == ValidationState.NEUTRAL
    assert form.field("email").is_focused is False
    assert form.field("age").state == ValidationState.FOCUSED
    form.blur()
    assert form.field("age").state == ValidationState.NEUTRAL


def test_submit_valid_form(form: Form) -> None:
    form.set_text("email", "alice@example.com")
    assert form.submit() is True
    assert form.errors() == {}
    assert form.values() == {"email": "alice@example.com", "age": ""}
    assert form.button_state == ButtonValidationState.ENABLED


def test_submit_triggers_errors_on_failing_fields(form: Form) -> None:
    form.set_text("email", "not-an-email")
    form.set_text("age", "7")
    assert form.field("email").state == ValidationState.NEUTRAL  # triggered mode, no error yet
    assert form.submit() is False
    assert form.errors() == {"email": "Bad email", "age": "Bad age"}
    assert form.button_state == ButtonValidationState.ERROR


def test_submit_flags_empty_required_field(form: Form) -> None:
    assert form.button_state == ButtonValidationState.DISABLED
    assert form.submit() is False
    assert list(form.errors()) == ["email"]


def test_errors_stay_until_reset_then_resubmit(form: Form) -> None:
    form.set_text("email", "bad")
    form.submit()
    form.set_text("email", "good@example.com")
    assert form.field("email").state == ValidationState.INVALID
    form.reset()
    assert form.field("email").state == ValidationState.NEUTRAL
    assert form.submit() is True


def test_resubmit_clears_fixed_fields(form: Form) -> None:
    form.set_text("email", "bad")
    form.submit()
    form.set_text("email", "good@example.com")
    assert form.submit() is True
    assert form.field("email").state == ValidationState.VALID


def test_immediate_form_field(immediate_config: FormConfig) -> None:
    form = Form(immediate_config)
    form.set_text("password", "weakpass")
    assert form.field("password").state == ValidationState.INVALID
    form.set_text("password", "Valid1!Pass")
    assert form.field("password").state == ValidationState.VALID


def test_configured_checks_replace_type_default() -> None:
    only_length = build_validator(FieldConfig(name="email", type="email", placeholder="Email", max_length=50))
    assert only_length is not None
    assert only_length("not-an-email") is True

    with_rule = build_validator(
        FieldConfig(name="email", type="email", placeholder="Email", rules=["registration_email"], max_length=50)
    )
    assert with_rule is not None
    assert with_rule("not-an-email") is False
    assert with_rule("ada@example.com") is True
