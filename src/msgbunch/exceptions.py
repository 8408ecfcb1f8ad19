"""Custom exception hierarchy for msgbunch."""

from __future__ import annotations

__all__ = [
    "BuilderConsumedError",
    "ConfigError",
    "MsgBunchError",
    "OversizedInputError",
    "UnsplittableSectionError",
]


class MsgBunchError(Exception):
    """Base exception for all msgbunch errors."""


class ConfigError(MsgBunchError):
    """Raised when configuration loading or validation fails."""


class BuilderConsumedError(MsgBunchError):
    """Raised when a builder is used after ``build()`` was called."""


class UnsplittableSectionError(MsgBunchError):
    """Raised when an oversized section has no acceptable split point.

    Attributes:
        window: The text that was scanned for a split point.
        limit: The chunk limit in effect.
    """

    def __init__(self, window: str, limit: int) -> None:
        self.window = window
        self.limit = limit
        preview = window[:40] + ("..." if len(window) > 40 else "")
        super().__init__(
            f"No split point found within the first {limit} characters of section {preview!r}"
        )


class OversizedInputError(MsgBunchError):
    """Raised in strict mode when one ``add`` call cannot fit in two chunks."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Text of {length} characters would leave a chunk over the {limit} limit")
