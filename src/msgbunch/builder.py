"""Incremental builder that packs text into length-bounded chunks.

Text appended with ``add`` fills the current chunk and spills into the next
one at exactly the limit. Text added between ``begin_section`` and
``end_section`` is staged and merged as a whole:

- A section that fits the room left in the current chunk is appended to it
- A section that does not fit starts a new chunk instead of being torn
- A section longer than the limit is cut after characters accepted by a
  split predicate, scanning backward from the limit
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from msgbunch.bunch import MSG_LIMIT, MsgBunch
from msgbunch.exceptions import (
    BuilderConsumedError,
    OversizedInputError,
    UnsplittableSectionError,
)

if TYPE_CHECKING:
    from msgbunch.config import MsgBunchConfig

__all__ = [
    "DEFAULT_SPLIT_CHARS",
    "MsgBunchBuilder",
    "SplitPredicate",
    "default_split_predicate",
    "split_on",
]

logger = logging.getLogger(__name__)

SplitPredicate = Callable[[str], bool]

# Punctuation after which an oversized section may be cut
DEFAULT_SPLIT_CHARS = ";,.?!):-"

_DEFAULT_SPLIT_SET = frozenset(DEFAULT_SPLIT_CHARS)


def default_split_predicate(char: str) -> bool:
    """Accept any character from ``DEFAULT_SPLIT_CHARS`` as a split point."""
    return char in _DEFAULT_SPLIT_SET


def split_on(chars: str) -> SplitPredicate:
    """Build a split predicate accepting any character in ``chars``."""
    accepted = frozenset(chars)

    def predicate(char: str) -> bool:
        return char in accepted

    return predicate


def _find_split(text: str, limit: int, predicate: SplitPredicate) -> int | None:
    """Return the index just after the last accepted character in ``text[:limit]``."""
    for i in range(min(limit, len(text)) - 1, -1, -1):
        if predicate(text[i]):
            return i + 1
    return None


def _split_section(section: str, limit: int, predicate: SplitPredicate) -> list[str]:
    """Cut a section into pieces of at most ``limit`` characters.

    Raises:
        UnsplittableSectionError: If some piece has no acceptable split point.
    """
    pieces: list[str] = []
    remaining = section

    while len(remaining) > limit:
        cut = _find_split(remaining, limit, predicate)
        if cut is None:
            logger.error(
                "No split point in %d character section fragment (limit=%d)",
                len(remaining),
                limit,
            )
            raise UnsplittableSectionError(remaining[:limit], limit)
        pieces.append(remaining[:cut])
        remaining = remaining[cut:]

    pieces.append(remaining)
    return pieces


def _split_lines(text: str) -> list[str]:
    """Split text on LF or CRLF endings, ignoring a final empty line."""
    lines = text.split("\n")
    tail = lines.pop()
    result = [line[:-1] if line.endswith("\r") else line for line in lines]
    if tail:
        result.append(tail)
    return result


class MsgBunchBuilder:
    """Builds a ``MsgBunch`` while controlling where messages may be split.

    Usage::

        builder = MsgBunchBuilder()
        (
            builder.begin_section()
            .add("Hello, ")
            .add(user_name)
            .add("!\\n")
            .end_section()
            .add_lines(motd)
        )
        for message in builder.build():
            send(message)
    """

    def __init__(
        self,
        *,
        limit: int = MSG_LIMIT,
        split_predicate: SplitPredicate = default_split_predicate,
        strict: bool = False,
    ) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self._limit = limit
        self.split_predicate = split_predicate
        self.strict = strict
        self._messages: list[str] = [""]
        self._chars_num = 0
        # Staged section parts; None while no section is open
        self._section: list[str] | None = None
        self._section_size = 0
        self._consumed = False

    @classmethod
    def from_config(cls, config: MsgBunchConfig) -> MsgBunchBuilder:
        """Create a builder from the ``[bunch]`` section of a config.

        Raises:
            ConfigError: If the config holds invalid values.
        """
        from msgbunch.config import validate_config

        validate_config(config)
        bunch = config.bunch
        return cls(
            limit=bunch.limit,
            split_predicate=split_on(bunch.split_chars),
            strict=bunch.strict,
        )

    @property
    def limit(self) -> int:
        """Maximum chunk length in characters."""
        return self._limit

    @property
    def messages(self) -> tuple[str, ...]:
        """Chunks committed so far, excluding any open section."""
        return tuple(self._messages)

    def is_in_section(self) -> bool:
        """Whether a section is currently open."""
        return self._section is not None

    def add(self, text: str) -> MsgBunchBuilder:
        """Append text, splitting into a new chunk if necessary.

        Inside a section the text is only staged. Outside a section, text
        that overflows the current chunk fills it up to the limit and the
        rest starts the next chunk. Only one split happens per call, so a
        single string longer than the limit can leave an oversized chunk.

        Args:
            text: Text to append.

        Returns:
            This builder, for chaining.

        Raises:
            OversizedInputError: In strict mode, if the text would leave a
                chunk over the limit.
            BuilderConsumedError: If ``build()`` was already called.
        """
        self._ensure_usable()
        if not text:
            return self

        size = len(text)

        if self._section is not None:
            self._section.append(text)
            self._section_size += size
        elif self._chars_num + size > self._limit:
            room = max(self._limit - self._chars_num, 0)
            rest = text[room:]
            if len(rest) > self._limit:
                if self.strict:
                    logger.error(
                        "Refusing %d characters: chunk of %d would exceed limit %d",
                        size,
                        len(rest),
                        self._limit,
                    )
                    raise OversizedInputError(size, self._limit)
                logger.warning(
                    "Adding %d characters leaves a %d character chunk over the %d limit",
                    size,
                    len(rest),
                    self._limit,
                )
            self._messages[-1] += text[:room]
            self._messages.append(rest)
            self._chars_num = len(rest)
            logger.debug("Split %d characters at offset %d into a new chunk", size, room)
        else:
            self._messages[-1] += text
            self._chars_num += size

        return self

    def begin_section(self) -> MsgBunchBuilder:
        """Open a section. Does nothing if one is already open."""
        self._ensure_usable()
        if self._section is None:
            self._section = []
            self._section_size = 0
        return self

    def end_section(self) -> MsgBunchBuilder:
        """Close the open section using the builder's split predicate."""
        return self.end_section_with(self.split_predicate)

    def end_section_with(self, predicate: SplitPredicate) -> MsgBunchBuilder:
        """Close the open section, splitting it with ``predicate`` if too long.

        The section is appended to the current chunk when it fits. Otherwise
        it is placed in new chunks, leaving the current chunk untouched. A
        section longer than the limit is cut just after the last character
        within the limit for which ``predicate`` returns true, repeatedly.

        Does nothing if no section is open.

        Args:
            predicate: Called with single characters; true marks a
                character after which the section may be cut.

        Returns:
            This builder, for chaining.

        Raises:
            UnsplittableSectionError: If an oversized fragment has no
                acceptable split point. The builder is left unchanged and
                the section stays open.
            BuilderConsumedError: If ``build()`` was already called.
        """
        self._ensure_usable()
        if self._section is None:
            return self

        section = "".join(self._section)
        size = self._section_size

        if self._chars_num + size <= self._limit:
            self._messages[-1] += section
            self._chars_num += size
        else:
            pieces = _split_section(section, self._limit, predicate)
            self._messages.extend(pieces)
            self._chars_num = len(pieces[-1])
            logger.debug(
                "Moved %d character section into %d new chunk(s)",
                size,
                len(pieces),
            )

        self._section = None
        self._section_size = 0
        return self

    def add_lines(self, text: str) -> MsgBunchBuilder:
        """Add each line of ``text`` as its own section, newline included."""
        for line in _split_lines(text):
            self.begin_section().add(line).add("\n").end_section()
        return self

    def build(self) -> MsgBunch:
        """Close any open section and return the finished ``MsgBunch``.

        The builder cannot be used afterwards.

        Raises:
            UnsplittableSectionError: If the open section cannot be split.
            BuilderConsumedError: If ``build()`` was already called.
        """
        self.end_section()
        self._consumed = True
        return MsgBunch(tuple(self._messages))

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise BuilderConsumedError("MsgBunchBuilder was already built")
