"""Plain-text rendering of values and a coloured debug printer."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from typing import Any, TextIO

TERM_RED = "\033[31m"
TERM_RESET = "\033[0m"
DEBUG_TAG = "[[ DEBUG ]] "
FLOAT_PRECISION = 16


def format_value(value: Any) -> str:
    """Render a value the way a solution prints it.

    Containers are flattened with single spaces between elements, mapping
    entries become ``key:value``, booleans print as ``1``/``0`` and floats
    in fixed notation with 16 digits after the point. Sets are sorted when
    their elements allow it. Anything else uses ``str``.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:.{FLOAT_PRECISION}f}"
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return value.decode()
    if isinstance(value, Mapping):
        return " ".join(
            f"{format_value(k)}:{format_value(v)}" for k, v in value.items()
        )
    if isinstance(value, (set, frozenset)):
        try:
            items: Iterable = sorted(value)
        except TypeError:
            items = value
        return " ".join(format_value(v) for v in items)
    if isinstance(value, Iterable):
        return " ".join(format_value(v) for v in value)
    return str(value)


def dump(value: Any, stream: TextIO | None = None) -> None:
    """Write ``value`` as a red debug line to ``stream`` (standard error by default)."""
    out = sys.stderr if stream is None else stream
    out.write(f"{TERM_RED}{DEBUG_TAG}{format_value(value)}{TERM_RESET}\n")
    out.flush()