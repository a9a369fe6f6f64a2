"""Pytest fixtures: form configs, bindings, fields."""

from __future__ import annotations

from pathlib import Path

import pytest

from validated_fields.config.models import FieldConfig, FormConfig
from validated_fields.domain.binding import StateBinding
from validated_fields.domain.states import ValidationMode
from validated_fields.orchestration.form import Form


@pytest.fixture
def minimal_config() -> FormConfig:
    """Two triggered fields: a required email and an optional age."""
    return FormConfig(
        name="TestForm",
        fields=[
            FieldConfig(
                name="email",
                type="email",
                placeholder="Email",
                error_message="Bad email",
            ),
            FieldConfig(
                name="age",
                type="number",
                placeholder="Age",
                required=False,
                rules=["age"],
                error_message="Bad age",
            ),
        ],
    )


@pytest.fixture
def immediate_config() -> FormConfig:
    return FormConfig(
        name="Immediate",
        fields=[
            FieldConfig(name="password", type="password", placeholder="Password", mode=ValidationMode.IMMEDIATE),
        ],
    )


@pytest.fixture
def form(minimal_config: FormConfig) -> Form:
    return Form(minimal_config)


@pytest.fixture
def binding() -> StateBinding:
    return StateBinding()


@pytest.fixture
def configs_dir() -> Path:
    """Path to the shipped sample configs."""
    return Path(__file__).resolve().parent.parent / "configs"
