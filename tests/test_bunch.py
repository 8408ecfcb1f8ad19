"""Tests for msgbunch.bunch module — the result container."""

from __future__ import annotations

import dataclasses

import pytest

from msgbunch.bunch import MSG_LIMIT, MsgBunch


class TestMsgLimit:
    def test_discord_limit(self):
        assert MSG_LIMIT == 2000


class TestMsgBunch:
    def test_frozen(self):
        bunch = MsgBunch(("a", "b"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            bunch.messages = ("c",)  # type: ignore[misc]

    def test_default_is_single_empty_chunk(self):
        assert MsgBunch().messages == ("",)

    def test_iteration_preserves_order(self):
        bunch = MsgBunch(("first", "second", "third"))
        assert list(bunch) == ["first", "second", "third"]

    def test_len_and_index(self):
        bunch = MsgBunch(("first", "second"))
        assert len(bunch) == 2
        assert bunch[0] == "first"
        assert bunch[-1] == "second"

    def test_into_inner_returns_independent_list(self):
        bunch = MsgBunch(("first", "second"))
        inner = bunch.into_inner()
        assert inner == ["first", "second"]
        inner.append("third")
        assert bunch.messages == ("first", "second")

    def test_equality(self):
        assert MsgBunch(("a",)) == MsgBunch(("a",))
        assert MsgBunch(("a",)) != MsgBunch(("b",))
