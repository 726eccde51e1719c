"""Parsing of bracketed array strings stored in feature attributes."""

from ._shared import _numpy


def _split_array(array_string):
    body = array_string.replace("[", "").replace("]", "").strip()
    if not body:
        return []
    return [item.strip() for item in body.split(",")]


def _parse_numbers(array_string, convert, dtype):
    values = []
    for item in _split_array(array_string):
        try:
            values.append(convert(item))
        except ValueError:
            return None
    return _numpy.array(values, dtype=dtype)


def parse_int_array(array_string):
    """
    Parse ``"[1,2,3]"`` into an integer array.

    Returns None if any item is not an integer; ``"[]"`` gives an empty
    array.
    """
    return _parse_numbers(array_string, int, _numpy.int64)


def parse_float_array(array_string):
    """Parse ``"[1.4,2.12]"`` into a float array, or None if an item is not a number."""
    return _parse_numbers(array_string, float, _numpy.float64)


def parse_bool_array(array_string):
    """Parse ``"[true,false]"``; items other than ``true`` (any case) are False."""
    return _numpy.array(
        [item.lower() == "true" for item in _split_array(array_string)], dtype=bool
    )
