"""Small value helpers shared by rule handlers and error formatting."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .exceptions import ArgumentError

_CAMEL_BOUNDARY = re.compile(r"(?<=[^\s_])([A-Z])")
_NUMERIC = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")


def camel_to_label(text: str) -> str:
    """Convert a field key into a human readable label.

    A space is inserted before each internal capital letter and only the
    first letter of the result is capitalized. Underscores become spaces.

    Args:
        text: Field key such as ``"firstName"`` or ``"first_name"``

    Returns:
        Label such as ``"First Name"`` or ``"First name"``
    """
    spaced = _CAMEL_BOUNDARY.sub(r" \1", text).replace("_", " ")
    return spaced[:1].upper() + spaced[1:]


def is_empty(value: Any) -> bool:
    """Check whether a value counts as "not provided".

    None, whitespace-only strings, empty lists/tuples and empty mappings are
    empty. Everything else, including ``0`` and ``False``, is not.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    if isinstance(value, Mapping):
        return len(value) == 0
    return False


def clean_object(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``options`` without the keys whose value is None."""
    return {key: value for key, value in options.items() if value is not None}


def is_numeric(text: str) -> bool:
    """Check whether a string holds a signed integer or decimal number.

    Args:
        text: String to inspect

    Returns:
        True for strings like ``"42"``, ``"-3.5"``, ``".5"`` or ``"+7."``

    Raises:
        ArgumentError: If ``text`` is not a string
    """
    if not isinstance(text, str):
        raise ArgumentError(
            "is_numeric only accepts strings",
            context={"argument": "text", "received": type(text).__name__},
        )
    return bool(_NUMERIC.match(text))


def loose_str(value: Any) -> str:
    """Render a value the way loose string comparison sees it.

    Booleans and None use their lowercase literal names and integral floats
    drop the trailing ``.0``, so ``True`` matches ``"true"`` and ``2.0``
    matches ``"2"``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
