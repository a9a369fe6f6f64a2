"""Pydantic models for color schemes and form configuration. Central contract for IDE and validation."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from validated_fields.domain.rules import RULES
from validated_fields.domain.states import ValidationMode, ValidationState
from validated_fields.domain.validators import FieldType


# --- Colors ---


class ColorScheme(BaseModel):
    """Border color for every validation state. Always complete: no partial schemes."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    neutral: str = Field(default="gray", min_length=1)
    valid: str = Field(default="green", min_length=1)
    invalid: str = Field(default="red", min_length=1)
    focused: str = Field(default="blue", min_length=1)

    def color_for(self, state: ValidationState) -> str:
        return getattr(self, ValidationState(state).value)


DEFAULT_COLORS = ColorScheme()
SYSTEM_COLORS = ColorScheme(
    neutral="systemGray4",
    valid="systemGreen",
    invalid="systemRed",
    focused="systemBlue",
)
MINT_COLORS = ColorScheme(valid="mint")

COLOR_SCHEMES: dict[str, ColorScheme] = {
    "default": DEFAULT_COLORS,
    "system": SYSTEM_COLORS,
    "mint": MINT_COLORS,
}


# --- Field configuration ---


class FieldConfig(BaseModel):
    """Configuration for a single form field."""

    name: str = Field(..., min_length=1, description="Unique field identifier (e.g. email, first_name)")
    type: FieldType = Field(..., description="Field type; selects the default validator")
    placeholder: str = Field(..., description="Placeholder / prompt text")
    header: str | None = Field(default=None, description="Optional label shown above the field")
    error_message: str | None = Field(default=None, description="Shown while the field is invalid")
    mode: ValidationMode = Field(default=ValidationMode.TRIGGERED)
    required: bool = True
    # Named rules from domain.rules, combined with pattern and length bounds via all_of.
    # Any of rules, pattern, min_length or max_length replaces the type default
    # validator: add the matching rule (e.g. registration_email) to keep that check.
    rules: list[str] = Field(
        default_factory=list,
        description="Named rules; when set (or pattern/lengths are set) they replace the type default",
    )
    pattern: str | None = Field(default=None, description="Optional full-match regex")
    min_length: int | None = Field(default=None, ge=0, description="Trimmed minimum length")
    max_length: int | None = Field(default=None, ge=0, description="Untrimmed maximum length")

    @field_validator("rules")
    @classmethod
    def _known_rules(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in RULES]
        if unknown:
            raise ValueError(f"unknown rule(s): {', '.join(unknown)}")
        return value

    @field_validator("pattern")
    @classmethod
    def _compilable_pattern(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"invalid pattern: {e}") from e
        return value

    @model_validator(mode="after")
    def _length_bounds_ordered(self) -> FieldConfig:
        if self.min_length is not None and self.max_length is not None and self.min_length > self.max_length:
            raise ValueError("min_length must not exceed max_length")
        return self


# --- Top-level form config ---


class FormConfig(BaseModel):
    """Full form configuration loaded from YAML."""

    name: str = Field(default="Form", description="Form display name")
    fields: list[FieldConfig] = Field(..., min_length=1, description="Fields in display order")
    colors: ColorScheme = Field(default=DEFAULT_COLORS, description="Scheme name or full color mapping")

    @field_validator("colors", mode="before")
    @classmethod
    def _named_scheme(cls, value: object) -> object:
        if isinstance(value, str):
            if value not in COLOR_SCHEMES:
                raise ValueError(f"unknown color scheme {value!r}; expected one of {', '.join(COLOR_SCHEMES)}")
            return COLOR_SCHEMES[value]
        return value

    @model_validator(mode="after")
    def _unique_field_names(self) -> FormConfig:
        seen: set[str] = set()
        for f in self.fields:
            if f.name in seen:
                raise ValueError(f"duplicate field name: {f.name}")
            seen.add(f.name)
        return self
