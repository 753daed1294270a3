"""Coercion of raw text values from the environment and ``.env`` files."""

from __future__ import annotations

import re
from typing import Union

__all__ = ["convert_type", "parse_number"]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY = re.compile(r"([+-]?)Infinity")
_PREFIXED = {
    "0x": (16, re.compile(r"[0-9a-fA-F]+")),
    "0o": (8, re.compile(r"[0-7]+")),
    "0b": (2, re.compile(r"[01]+")),
}

Scalar = Union[bool, int, float, str]


def parse_number(text: str) -> int | float | None:
    """Parse ``text`` with a permissive numeric grammar.

    Surrounding whitespace is ignored and a blank string is ``0``. Accepts
    signed decimal integers, decimals with optional exponent, unsigned
    ``0x``/``0o``/``0b`` literals and ``[+-]Infinity``. Returns ``None``
    when ``text`` is not a number.
    """
    stripped = text.strip()
    if not stripped:
        return 0

    prefixed = _PREFIXED.get(stripped[:2].lower())
    if prefixed is not None:
        base, digits = prefixed
        if digits.fullmatch(stripped[2:]):
            return int(stripped[2:], base)
        return None

    if _INTEGER.fullmatch(stripped):
        return int(stripped)
    if _DECIMAL.fullmatch(stripped):
        return float(stripped)

    match = _INFINITY.fullmatch(stripped)
    if match:
        return float("-inf") if match.group(1) == "-" else float("inf")
    return None


def convert_type(value: str) -> Scalar:
    """Convert a raw string into a boolean, a number or leave it as is."""
    if value == "true":
        return True
    if value == "false":
        return False
    if value.replace(" ", "") == "":
        return value
    number = parse_number(value)
    if number is not None:
        return number
    return value
