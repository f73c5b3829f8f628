"""
Leaf predicates used by the rule validators.

Every function here is a pure check of (value, parameter) and never raises
for unexpected input types; a value that cannot be checked simply fails.
"""

import math
import re
from typing import Any, Iterable

DEFAULT_DATE_FORMAT = "dd/mm/yyyy"

_DAY = r"(0[1-9]|[12][0-9]|3[01])"
_MONTH = r"(0[1-9]|1[0-2])"
_YEAR = r"[0-9]{4}"

DATE_PATTERNS = {
    "dd/mm/yyyy": re.compile(rf"^{_DAY}/{_MONTH}/{_YEAR}$"),
    "dd-mm-yyyy": re.compile(rf"^{_DAY}-{_MONTH}-{_YEAR}$"),
    "mm/dd/yyyy": re.compile(rf"^{_MONTH}/{_DAY}/{_YEAR}$"),
    "mm-dd-yyyy": re.compile(rf"^{_MONTH}-{_DAY}-{_YEAR}$"),
    "yyyy/mm/dd": re.compile(rf"^{_YEAR}/{_MONTH}/{_DAY}$"),
    "yyyy-mm-dd": re.compile(rf"^{_YEAR}-{_MONTH}-{_DAY}$"),
}

PHONE_PATTERN = re.compile(r"^[0-9]{10}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_INTEGER_LITERAL = re.compile(r"^[+-]?[0-9]+(\.0*)?$")
_DECIMAL_LITERAL = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def is_present(value: Any) -> bool:
    """Missing keys are read as None, so both count as absent."""
    return value is not None


def as_text(value: Any) -> str:
    """
    Render a value the way it would appear in a text field.

    Examples:
        >>> as_text(1234567890.0)
        '1234567890'
        >>> as_text("abc")
        'abc'
    """
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any) -> float | int | None:
    """
    Coerce a value to a number, or None if it is not numeric.

    Examples:
        >>> to_number("42")
        42.0
        >>> to_number(" 3.5 ")
        3.5
        >>> to_number("abc") is None
        True

    Strings must be plain ASCII decimal literals, so "1_000", "inf" and
    "nan" are not numbers.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int | float):
        return None if isinstance(value, float) and math.isnan(value) else value
    if isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_LITERAL.fullmatch(text):
            return None
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def is_integer(value: Any) -> bool:
    """
    True for integers, integer-valued floats and integer literal strings.

    Examples:
        >>> is_integer(10)
        True
        >>> is_integer("10.0")
        True
        >>> is_integer("1e3")
        False
        >>> is_integer(10.5)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer()
    if isinstance(value, str):
        return bool(_INTEGER_LITERAL.fullmatch(value.strip()))
    return False


def is_whole_number(value: Any) -> bool:
    number = to_number(value)
    if number is None or not math.isfinite(number):
        return False
    return float(number).is_integer()


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_phone_shape(value: Any) -> bool:
    return bool(PHONE_PATTERN.fullmatch(as_text(value)))


def resolve_date_format(date_format: str | None) -> str:
    """Fall back to dd/mm/yyyy for a missing or unsupported format name."""
    if date_format in DATE_PATTERNS:
        return date_format
    return DEFAULT_DATE_FORMAT


def is_valid_date(value: Any, date_format: str | None = None) -> bool:
    """
    Structural date check against one of the supported format names.

    Calendar correctness is not checked, so 31/02/2024 passes.

    Examples:
        >>> is_valid_date("25/12/2024")
        True
        >>> is_valid_date("2024-12-25", "yyyy-mm-dd")
        True
        >>> is_valid_date("13/13/2024", "dd/mm/yyyy")
        False
    """
    pattern = DATE_PATTERNS[resolve_date_format(date_format)]
    return bool(pattern.fullmatch(as_text(value)))


def is_email_shape(value: Any) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(as_text(value)))


def in_range_min(value: Any, minimum: float) -> bool:
    number = to_number(value)
    return number is not None and number >= minimum


def in_range_max(value: Any, maximum: float) -> bool:
    number = to_number(value)
    return number is not None and number <= maximum


def _length(value: Any) -> int | None:
    try:
        return len(value)
    except TypeError:
        return None


def length_at_least(value: Any, n: int) -> bool:
    length = _length(value)
    return length is not None and length >= n


def length_at_most(value: Any, n: int) -> bool:
    length = _length(value)
    return length is not None and length <= n


def length_exactly(value: Any, n: int) -> bool:
    return _length(value) == n


def _same_value(value: Any, candidate: Any) -> bool:
    """Equality without bool/int crossover; ints and floats still compare numerically."""
    if isinstance(value, bool) or isinstance(candidate, bool):
        return type(value) is type(candidate) and value == candidate
    if isinstance(value, int | float) and isinstance(candidate, int | float):
        return value == candidate
    return type(value) is type(candidate) and value == candidate


def is_one_of(value: Any, allowed: Iterable[Any]) -> bool:
    """
    Examples:
        >>> is_one_of("basic", ["basic", "premium"])
        True
        >>> is_one_of(True, [1])
        False
        >>> is_one_of(1.0, [1])
        True
    """
    return any(_same_value(value, candidate) for candidate in allowed)
