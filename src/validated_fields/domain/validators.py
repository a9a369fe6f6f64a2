"""Pure string validators and combinators. Total functions: never raise, malformed input is False."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Literal

Validator = Callable[[str], bool]

FieldType = Literal["email", "password", "decimal", "letters_only", "number", "alphanumeric"]

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
STRONG_PASSWORD_RE = re.compile(r'(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9])(?=.*[!@#$%^&*(),.?":{}|<>]).{8,}')
# Optional sign, ASCII digits only: no whitespace, underscores or prefix parsing
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_INT64_DIGITS = len(str(INT64_MAX))

# Name punctuation accepted alongside letters
_NAME_PUNCTUATION = frozenset(" -'")


def is_valid_email(value: str) -> bool:
    """Local part, '@', at least one domain label and a TLD of 2+ letters."""
    return EMAIL_RE.fullmatch(value) is not None


def is_strong_password(value: str) -> bool:
    """
    8+ characters with at least one uppercase letter, one lowercase letter,
    one digit and one of !@#$%^&*(),.?":{}|<>
    """
    return STRONG_PASSWORD_RE.fullmatch(value) is not None


def is_letters_only(value: str) -> bool:
    """Letters, spaces, hyphens and apostrophes (names). Empty is not a name."""
    if not value:
        return False
    return all(ch.isalpha() or ch in _NAME_PUNCTUATION for ch in value)


def is_not_empty(value: str) -> bool:
    return value != ""


def parse_int(value: str) -> int | None:
    """
    Parse the whole string as a signed 64-bit integer, or None.
    '12.5', ' 7', '7a' and anything outside [-2**63, 2**63 - 1] are None.
    """
    if INTEGER_RE.fullmatch(value) is None:
        return None
    # Bound the digit count before int(): very long strings raise in int()
    if len(value.lstrip("+-").lstrip("0")) > _INT64_DIGITS:
        return None
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def is_integer(value: str) -> bool:
    return parse_int(value) is not None


def is_decimal(value: str) -> bool:
    return DECIMAL_RE.fullmatch(value) is not None


def positive_integer(value: str) -> bool:
    number = parse_int(value)
    return number is not None and number > 0


# --- Factories ---


def minimum_length(min_length: int) -> Validator:
    """
    At least min_length characters after trimming surrounding whitespace.
    Lengths here count code points, not grapheme clusters: a decomposed
    accent or a multi-code-point emoji counts as more than one character.
    """

    def check(value: str) -> bool:
        return len(value.strip()) >= min_length

    return check


def maximum_length(max_length: int) -> Validator:
    """
    At most max_length characters. Unlike minimum_length and length_range,
    the raw value is measured: surrounding whitespace counts. Counts code
    points, like minimum_length.
    """

    def check(value: str) -> bool:
        return len(value) <= max_length

    return check


def length_range(min_length: int, max_length: int) -> Validator:
    """Trimmed length within [min_length, max_length], in code points."""

    def check(value: str) -> bool:
        trimmed = value.strip()
        return min_length <= len(trimmed) <= max_length

    return check


def number_in_range(minimum: int, maximum: int) -> Validator:
    """Whole-string integer within [minimum, maximum]."""

    def check(value: str) -> bool:
        number = parse_int(value)
        return number is not None and minimum <= number <= maximum

    return check


def matches(pattern: str | re.Pattern[str]) -> Validator:
    """Full-match against a regex. The pattern is compiled once, up front."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def check(value: str) -> bool:
        return compiled.fullmatch(value) is not None

    return check


# --- Combinators ---


def all_of(validators: Iterable[Validator]) -> Validator:
    """True only if every validator accepts the value."""
    checks = tuple(validators)

    def check(value: str) -> bool:
        return all(v(value) for v in checks)

    return check


def any_of(validators: Iterable[Validator]) -> Validator:
    """True if at least one validator accepts the value."""
    checks = tuple(validators)

    def check(value: str) -> bool:
        return any(v(value) for v in checks)

    return check


_DEFAULTS: dict[str, Validator] = {
    "email": is_valid_email,
    "password": is_strong_password,
    "decimal": is_decimal,
    "number": is_integer,
    "letters_only": is_letters_only,
    "alphanumeric": is_not_empty,
}


def default_validator(field_type: str) -> Validator:
    """Built-in predicate for a field type; anything unrecognised falls back to non-empty."""
    return _DEFAULTS.get(field_type, is_not_empty)
