"""Result container for length-bounded message chunks.

A ``MsgBunch`` is the frozen output of ``MsgBunchBuilder.build()``: an ordered
sequence of strings, each ready to be sent as one message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from msgbunch.builder import MsgBunchBuilder, SplitPredicate

__all__ = ["MSG_LIMIT", "MsgBunch"]

# Discord's per-message character limit, counted in code points
MSG_LIMIT = 2000


@dataclass(frozen=True)
class MsgBunch:
    """A collection of strings which are all within the character limit."""

    messages: tuple[str, ...] = ("",)

    @classmethod
    def builder(
        cls,
        *,
        limit: int = MSG_LIMIT,
        split_predicate: SplitPredicate | None = None,
        strict: bool = False,
    ) -> MsgBunchBuilder:
        """Shorthand for ``MsgBunchBuilder(...)``.

        ``split_predicate`` defaults to the builder's punctuation predicate.
        """
        from msgbunch.builder import MsgBunchBuilder, default_split_predicate

        if split_predicate is None:
            split_predicate = default_split_predicate
        return MsgBunchBuilder(
            limit=limit,
            split_predicate=split_predicate,
            strict=strict,
        )

    def into_inner(self) -> list[str]:
        """Return the chunks as a new list owned by the caller."""
        return list(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)

    def __getitem__(self, index: int) -> str:
        return self.messages[index]
