"""Group-by-name merge of attribute statistics across array elements.

Each object element of an array contributes its AttributeStat entries; the
entries are folded into one accumulator per name in a single pass.  The merged
``size`` is the truncated integer average of the contributing sizes.  This is
an approximation: ``[{"a": "x"}, {"a": "xy"}]`` reports ``size=3`` for ``a``
although the true mean is 3.5.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from json_stat_extractor.stats.nodes import AttributeStat

__all__ = ["merge_attributes"]


@dataclass(slots=True)
class _Accumulator:
    entries: int = 0
    size_sum: int = 0
    count_sum: int = 0
    min_size: int | None = None
    max_size: int | None = None

    def add(self, attr: AttributeStat) -> None:
        self.entries += 1
        self.size_sum += attr.size
        self.count_sum += attr.count
        if self.min_size is None or attr.min_size < self.min_size:
            self.min_size = attr.min_size
        if self.max_size is None or attr.max_size > self.max_size:
            self.max_size = attr.max_size

    def to_stat(self, name: str) -> AttributeStat:
        return AttributeStat(
            name=name,
            size=self.size_sum // self.entries if self.entries else 0,
            count=self.count_sum,
            max_size=self.max_size if self.max_size is not None else 0,
            min_size=self.min_size if self.min_size is not None else 0,
        )


def merge_attributes(
    groups: Iterable[Iterable[AttributeStat]],
) -> tuple[AttributeStat, ...]:
    """Merge attribute statistics by name.

    Args:
        groups: One iterable of AttributeStat per contributing object.

    Returns:
        One merged AttributeStat per distinct name, in order of the name's
        first occurrence.
    """
    accumulators: dict[str, _Accumulator] = {}
    for attributes in groups:
        for attr in attributes:
            acc = accumulators.get(attr.name)
            if acc is None:
                acc = accumulators[attr.name] = _Accumulator()
            acc.add(attr)
    return tuple(acc.to_stat(name) for name, acc in accumulators.items())
