"""Serialized byte sizes of JSON leaf values and structural punctuation.

Numbers and booleans are measured from the ``json`` module's own rendering,
which is the renderer used by ``json_stat_extractor.render``, so the size
accounting stays consistent with what the package prints.
"""

from __future__ import annotations

import json

from json_stat_extractor.stats.nodes import ScalarStat

__all__ = [
    "BRACKETS_SIZE",
    "COLON_SIZE",
    "COMMA_SIZE",
    "CURLY_BRACKETS_SIZE",
    "DOUBLE_QUOTES_SIZE",
    "NULL_SIZE",
    "int_size",
    "name_size",
    "scalar_size",
    "scalar_stat",
    "text_size",
]

DOUBLE_QUOTES_SIZE = 2
CURLY_BRACKETS_SIZE = 2
BRACKETS_SIZE = 2
COLON_SIZE = 1
COMMA_SIZE = 1
NULL_SIZE = 4


def text_size(text: str) -> int:
    """Return the UTF-8 byte length of ``text`` without quotes.

    Lone surrogates (legal in JSON ``\\uD800`` escapes) are counted as their
    three-byte encoded form rather than failing.
    """
    return len(text.encode("utf-8", errors="surrogatepass"))


def name_size(name: str) -> int:
    """Bytes taken by an object member name: quotes, name, and colon."""
    return DOUBLE_QUOTES_SIZE + text_size(name) + COLON_SIZE


def int_size(value: int) -> int:
    """Return the length of the decimal rendering of ``value``.

    Counts digits arithmetically, so ints past the interpreter's
    int-to-str conversion limit are still sized.
    """
    magnitude = abs(value)
    # lower bound from bit length (301029 / 10**6 < log10(2))
    digits = max(1, magnitude.bit_length() * 301029 // 1_000_000)
    while magnitude >= 10**digits:
        digits += 1
    return digits + (1 if value < 0 else 0)


def scalar_size(value: str | int | float | bool | None) -> int:
    """Return the serialized size of a JSON leaf value.

    Escape-sequence expansion in strings is not counted.

    Raises:
        TypeError: If ``value`` is not a JSON leaf type.
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, bool):
        return len(json.dumps(value))
    if value is None:
        return NULL_SIZE
    if isinstance(value, str):
        return text_size(value) + DOUBLE_QUOTES_SIZE
    if isinstance(value, int):
        return int_size(value)
    if isinstance(value, float):
        return len(json.dumps(value))
    raise TypeError(f"Unsupported JSON scalar type: {type(value)!r}")


def scalar_stat(value: str | int | float | bool | None) -> ScalarStat:
    size = scalar_size(value)
    return ScalarStat(size=size, max_size=size, min_size=size)
