"""StatExtractor: walks a parsed JSON value and builds its statistics tree.

Uses recursive dispatch over the three value shapes:
- scalars are measured directly (see ``sizing``),
- objects sum their members' sizes plus names and punctuation,
- arrays reduce their element sizes and merge object attributes by name.

The walk tracks depth and a JSON Pointer path (RFC 6901) so that a document
nested deeper than ``ExtractorConfig.max_depth`` fails with
``RecursionLimitExceeded`` naming the offending node.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from json_stat_extractor.config import ExtractorConfig
from json_stat_extractor.errors import RecursionLimitExceeded
from json_stat_extractor.stats.merge import merge_attributes
from json_stat_extractor.stats.nodes import (
    ArrayStat,
    AttributeStat,
    JsonStat,
    ObjectPairs,
    ObjectStat,
)
from json_stat_extractor.stats.sizing import (
    BRACKETS_SIZE,
    COMMA_SIZE,
    CURLY_BRACKETS_SIZE,
    name_size,
    scalar_stat,
)

__all__ = ["JsonValue", "StatExtractor"]

# Type alias for valid JSON values
JsonValue = (
    dict[str, Any] | ObjectPairs | list[Any] | str | int | float | bool | None
)


def _pointer_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


@dataclass
class StatExtractor:
    """Converts any parsed JSON value into a JsonStat tree.

    ``ObjectPairs`` is checked before ``list`` because it subclasses list but
    represents an object.  Scalars are delegated to ``scalar_stat``, which
    checks bool before int.

    Example::
        extractor = StatExtractor()
        stat = extractor.extract({"test": "test"})
        # stat: ObjectStat(size=15, count=1, ..., attributes=(AttributeStat("test", 6, ...),))
    """

    config: ExtractorConfig = field(default_factory=ExtractorConfig)

    def extract(self, value: JsonValue) -> JsonStat:
        """Return the statistics tree for ``value``.

        Raises:
            RecursionLimitExceeded: If ``value`` nests deeper than
                ``config.max_depth`` or than the interpreter can recurse.
            TypeError: If ``value`` contains a non-JSON Python type.
        """
        try:
            return self._extract(value, depth=0, path="")
        except RecursionError as exc:
            raise RecursionLimitExceeded(self.config.max_depth) from exc

    def _extract(self, value: JsonValue, depth: int, path: str) -> JsonStat:
        if depth > self.config.max_depth:
            raise RecursionLimitExceeded(self.config.max_depth, depth=depth, path=path)

        if isinstance(value, dict):
            return self._extract_object(value.items(), depth, path)

        if isinstance(value, ObjectPairs):
            return self._extract_object(value, depth, path)

        if isinstance(value, list):
            return self._extract_array(value, depth, path)

        return scalar_stat(value)

    def _extract_object(
        self, members: Iterable[tuple[str, Any]], depth: int, path: str
    ) -> ObjectStat:
        """Build an ObjectStat with one single-occurrence attribute per member.

        Args:
            members: The object's (name, value) pairs in source order.
            depth:   Depth of the object itself.
            path:    JSON Pointer path to the object.
        """
        attributes: list[AttributeStat] = []
        inner_size = 0
        for name, member in members:
            if not isinstance(name, str):
                raise TypeError(f"Unsupported JSON object key: {type(name)!r}")
            member_path = f"{path}/{_pointer_token(name)}"
            member_size = self._extract(member, depth + 1, member_path).size
            attributes.append(
                AttributeStat(
                    name=name,
                    size=member_size,
                    count=1,
                    max_size=member_size,
                    min_size=member_size,
                )
            )
            inner_size += member_size + name_size(name)

        total_size = inner_size + CURLY_BRACKETS_SIZE
        return ObjectStat(
            size=total_size,
            count=1,
            max_size=total_size,
            min_size=total_size,
            attributes=tuple(attributes),
        )

    def _extract_array(self, items: list[Any], depth: int, path: str) -> ArrayStat:
        """Build an ArrayStat from the per-element statistics.

        An empty array reports size 0, not the two bytes of ``[]``.
        """
        item_stats = [
            self._extract(item, depth + 1, f"{path}/{idx}")
            for idx, item in enumerate(items)
        ]
        count = len(item_stats)
        if count == 0:
            return ArrayStat(size=0, count=0, max_size=0, min_size=0)

        sizes = np.fromiter(
            (stat.size for stat in item_stats), dtype=np.int64, count=count
        )
        total_size = int(sizes.sum()) + (count - 1) * COMMA_SIZE + BRACKETS_SIZE
        attributes = merge_attributes(
            stat.attributes for stat in item_stats if isinstance(stat, ObjectStat)
        )
        return ArrayStat(
            size=total_size,
            count=count,
            max_size=int(sizes.max()),
            min_size=int(sizes.min()),
            attributes=attributes,
        )
