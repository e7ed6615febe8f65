"""ExtractorConfig: immutable settings for statistics extraction.

Holds the recursion guard and the loader's duplicate-key policy.  Validation
happens once, in ``__post_init__``, so an invalid config never reaches the
extractor.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_MAX_DEPTH", "ExtractorConfig"]

DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    """Immutable configuration for StatExtractor and the JSON loader.

    Attributes:
        max_depth: Deepest nesting level accepted; the root value is depth 0.
            Deeper documents raise ``RecursionLimitExceeded``.  Must be >= 1.
        keep_duplicate_keys: When True the loader keeps every member of an
            object whose names repeat.  When False the last value for a name
            wins, as with a plain ``dict``.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    keep_duplicate_keys: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            msg = f"max_depth must be an int, got {type(self.max_depth).__name__}"
            raise TypeError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
