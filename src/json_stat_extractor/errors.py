"""Exception types raised by json-stat-extractor."""

from __future__ import annotations

__all__ = ["JsonStatError", "RecursionLimitExceeded"]


class JsonStatError(ValueError):
    """Base class for errors raised while extracting statistics."""


class RecursionLimitExceeded(JsonStatError):
    """The document nests deeper than can be walked.

    Raised when a node sits deeper than the configured ``max_depth``, or when
    the interpreter's own recursion limit is hit first (``depth`` is None).

    Attributes:
        limit: The configured maximum depth.
        depth: Depth of the node that crossed the limit (root is 0).
        path:  JSON Pointer (RFC 6901) of that node; "" when unknown.
    """

    def __init__(self, limit: int, depth: int | None = None, path: str = "") -> None:
        self.limit = limit
        self.depth = depth
        self.path = path
        if depth is None:
            msg = f"JSON nesting exceeds the interpreter recursion limit (max_depth={limit})"
        else:
            msg = f"JSON nesting depth {depth} exceeds max_depth={limit}"
        if path:
            msg += f" at {path!r}"
        super().__init__(msg)
