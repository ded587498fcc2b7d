"""Trivial value providers used to check that library linkage works."""

_FUTZ_VALUE = 7
_BASE_VALUE = 3


def get_futz_value() -> int:
    """Return the futz value."""
    return _FUTZ_VALUE


def get_base_value() -> int:
    """Return the base value."""
    return _BASE_VALUE


def get_combined_value() -> int:
    """Return the base value plus the futz value."""
    return get_base_value() + get_futz_value()