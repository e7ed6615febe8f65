"""Statistics node dataclasses and the StatKind StrEnum.

Provides the output types produced by StatExtractor: one frozen node per
JSON value, mirroring the shape of the source document, plus the
AttributeStat entries attached to object and array nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "ArrayStat",
    "AttributeStat",
    "JsonStat",
    "ObjectPairs",
    "ObjectStat",
    "ScalarStat",
    "StatKind",
]


class StatKind(StrEnum):
    """Enumeration of the three statistics node kinds.

    - SCALAR -> "scalar" : a leaf value (string, number, bool, null)
    - OBJECT -> "object" : a JSON object {}
    - ARRAY  -> "array"  : a JSON array []
    """

    SCALAR = auto()
    OBJECT = auto()
    ARRAY = auto()


class ObjectPairs(list[tuple[str, Any]]):
    """A JSON object kept as its ordered (name, value) pairs.

    Produced by the loader's ``object_pairs_hook`` so that a name repeated in
    the source object stays a separate member instead of collapsing into one
    dict entry.
    """


@dataclass(frozen=True, slots=True)
class AttributeStat:
    """Size statistics for one attribute name.

    Attributes:
        name:     The attribute name as it appears in the source.
        size:     Serialized size of the value.  For array-merged entries this
                  is the truncated average over every occurrence.
        count:    Number of occurrences (always 1 inside an ObjectStat).
        max_size: Largest value size seen for this name.
        min_size: Smallest value size seen for this name.
    """

    name: str
    size: int
    count: int
    max_size: int
    min_size: int


@dataclass(frozen=True, slots=True)
class ScalarStat:
    """Size of a single leaf value.  All three sizes are equal."""

    size: int
    max_size: int
    min_size: int
    kind: StatKind = field(default=StatKind.SCALAR, init=False)


@dataclass(frozen=True, slots=True)
class ObjectStat:
    """Size of one object occurrence and its per-member attributes.

    ``count`` is always 1 and ``min_size == max_size == size``.
    """

    size: int
    count: int
    max_size: int
    min_size: int
    attributes: tuple[AttributeStat, ...] = ()
    kind: StatKind = field(default=StatKind.OBJECT, init=False)


@dataclass(frozen=True, slots=True)
class ArrayStat:
    """Size of an array and the per-element spread.

    ``count`` is the number of elements; ``min_size``/``max_size`` range over
    element sizes (separators excluded).  ``attributes`` merges the attribute
    statistics of every object element by name.
    """

    size: int
    count: int
    max_size: int
    min_size: int
    attributes: tuple[AttributeStat, ...] = ()
    kind: StatKind = field(default=StatKind.ARRAY, init=False)


JsonStat = ScalarStat | ObjectStat | ArrayStat
