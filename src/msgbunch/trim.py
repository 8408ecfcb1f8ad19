"""Whitespace decomposition helper."""

from __future__ import annotations

__all__ = ["split_trim"]

# Unicode White_Space property; str.isspace() also accepts U+001C..U+001F
_WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def split_trim(text: str) -> tuple[str, str, str]:
    """Split a string into leading whitespace, core text and trailing whitespace.

    The three parts always concatenate back to ``text``. If the string only
    consists of whitespace, everything lands in the trailing part. If it has
    no surrounding whitespace, both trim parts are empty. Information
    separators (U+001C..U+001F) are not whitespace here.

    Example::

        >>> split_trim("   hi  \\n\\n there \\t\\n")
        ('   ', 'hi  \\n\\n there', ' \\t\\n')
    """
    start = text.rstrip(_WHITESPACE)
    end_trim = text[len(start) :]
    text_part = start.lstrip(_WHITESPACE)
    front_trim = start[: len(start) - len(text_part)]
    return front_trim, text_part, end_trim
