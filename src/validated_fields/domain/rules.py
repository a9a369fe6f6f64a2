"""Ready-made validation rules for common form fields, and a name -> rule registry for config."""

from __future__ import annotations

import re

from validated_fields.domain.validators import (
    Validator,
    all_of,
    is_letters_only,
    is_strong_password,
    is_valid_email,
    maximum_length,
    minimum_length,
    number_in_range,
    positive_integer,
)

PHONE_RE = re.compile(r"[\d\s\-()+]{10,15}")
USERNAME_RE = re.compile(r"[a-zA-Z0-9_]{3,20}")
# No underscore at either end
STRICT_USERNAME_RE = re.compile(r"[a-zA-Z0-9][a-zA-Z0-9_]{1,18}[a-zA-Z0-9]")
CURRENCY_RE = re.compile(r"\d+(\.\d{1,2})?")
EMPLOYEE_ID_RE = re.compile(r"EMP-\d{4}")
PRODUCT_CODE_RE = re.compile(r"[A-Z]{3}\d{3}")


# --- Names ---


def validate_first_name(value: str) -> bool:
    """2-50 code points once trimmed; letters, spaces, hyphens, apostrophes."""
    trimmed = value.strip()
    if not 2 <= len(trimmed) <= 50:
        return False
    return is_letters_only(trimmed)


def validate_last_name(value: str) -> bool:
    return validate_first_name(value)


def validate_full_name(value: str) -> bool:
    """At least two space-separated parts, each letters-only."""
    parts = value.split(" ")
    if len(parts) < 2:
        return False
    return all(part.strip() and is_letters_only(part.strip()) for part in parts)


# --- Passwords ---


def validate_basic_password(value: str) -> bool:
    return len(value) >= 6


def validate_medium_password(value: str) -> bool:
    """8+ characters with at least one letter and one digit."""
    has_letter = any(ch.isalpha() for ch in value)
    has_digit = any(ch.isdigit() for ch in value)
    return len(value) >= 8 and has_letter and has_digit


def validate_strong_password(value: str) -> bool:
    return is_strong_password(value)


# --- Numbers ---


validate_age = number_in_range(13, 120)
validate_adult_age = number_in_range(18, 120)


def validate_positive_integer(value: str) -> bool:
    return positive_integer(value)


def validate_currency(value: str) -> bool:
    """Digits with up to two decimal places."""
    return CURRENCY_RE.fullmatch(value) is not None


# --- Phone numbers ---


def validate_phone_number(value: str) -> bool:
    """10-15 characters of digits, spaces, hyphens, parentheses or plus."""
    return PHONE_RE.fullmatch(value) is not None


def validate_us_phone_number(value: str) -> bool:
    """10 digits, or 11 with a leading country code 1. Formatting is ignored."""
    digits = re.sub(r"\D", "", value)
    return len(digits) == 10 or (len(digits) == 11 and digits.startswith("1"))


# --- Usernames ---


def validate_username(value: str) -> bool:
    return USERNAME_RE.fullmatch(value) is not None


def validate_strict_username(value: str) -> bool:
    return STRICT_USERNAME_RE.fullmatch(value) is not None


# --- Business identifiers ---


def validate_employee_id(value: str) -> bool:
    """EMP-XXXX where X is a digit."""
    return EMPLOYEE_ID_RE.fullmatch(value) is not None


def validate_product_code(value: str) -> bool:
    """Three letters then three digits, case-insensitive."""
    return PRODUCT_CODE_RE.fullmatch(value.upper()) is not None


# --- Registration form presets ---

registration_first_name: Validator = all_of([validate_first_name, minimum_length(2), maximum_length(30)])
registration_email: Validator = is_valid_email
registration_password: Validator = validate_medium_password


RULES: dict[str, Validator] = {
    "first_name": validate_first_name,
    "last_name": validate_last_name,
    "full_name": validate_full_name,
    "basic_password": validate_basic_password,
    "medium_password": validate_medium_password,
    "strong_password": validate_strong_password,
    "age": validate_age,
    "adult_age": validate_adult_age,
    "positive_integer": validate_positive_integer,
    "currency": validate_currency,
    "phone_number": validate_phone_number,
    "us_phone_number": validate_us_phone_number,
    "username": validate_username,
    "strict_username": validate_strict_username,
    "employee_id": validate_employee_id,
    "product_code": validate_product_code,
    "registration_first_name": registration_first_name,
    "registration_email": registration_email,
    "registration_password": registration_password,
}


def get_rule(name: str) -> Validator:
    """Look up a rule by name. Raises KeyError listing the known names."""
    try:
        return RULES[name]
    except KeyError:
        known = ", ".join(sorted(RULES))
        raise KeyError(f"Unknown validation rule {name!r}; known rules: {known}") from None
