"""Tests for msgbunch.exceptions module."""

from __future__ import annotations

import pytest

from msgbunch.exceptions import (
    BuilderConsumedError,
    ConfigError,
    MsgBunchError,
    OversizedInputError,
    UnsplittableSectionError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [BuilderConsumedError, ConfigError, OversizedInputError, UnsplittableSectionError],
    )
    def test_subclasses_base(self, exc_type):
        assert issubclass(exc_type, MsgBunchError)

    def test_base_is_exception(self):
        assert issubclass(MsgBunchError, Exception)


class TestUnsplittableSectionError:
    def test_attributes(self):
        err = UnsplittableSectionError("abcdef", 6)
        assert err.window == "abcdef"
        assert err.limit == 6
        assert "6" in str(err)

    def test_long_window_preview_truncated(self):
        err = UnsplittableSectionError("a" * 500, 500)
        assert "a" * 41 not in str(err)
        assert "..." in str(err)


class TestOversizedInputError:
    def test_attributes(self):
        err = OversizedInputError(4500, 2000)
        assert err.length == 4500
        assert err.limit == 2000
        assert "4500" in str(err)
