"""Number parsing and tokenising with C library semantics."""

from __future__ import annotations

import re

__all__ = ["LONG_MAX", "LONG_MIN", "strtol", "tokenize"]

LONG_MAX = (1 << 63) - 1
LONG_MIN = -(1 << 63)

_WHITESPACE = " \t\n\r\f\v"


def _digit_value(ch: str) -> int | None:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return None


def strtol(text: str | bytes, base: int = 10) -> tuple[int, int]:
    """Parse a signed integer from the start of ``text``.

    Returns the value and the index where parsing stopped.  Base 0 picks
    16 for a ``0x`` prefix, 8 for a leading ``0`` and 10 otherwise.  Values
    out of range are clamped to ``LONG_MAX`` or ``LONG_MIN``.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    text = text.split("\0", 1)[0]
    length = len(text)

    def at(index: int) -> str:
        return text[index] if index < length else ""

    pos = 0
    while at(pos) and at(pos) in _WHITESPACE:
        pos += 1

    sign = 1
    if at(pos) == "-":
        sign = -1
        pos += 1
    elif at(pos) == "+":
        pos += 1

    if base == 0:
        if at(pos) == "0":
            if at(pos + 1) in ("x", "X"):
                base = 16
                pos += 2
            else:
                base = 8
                pos += 1
        else:
            base = 10
    elif base == 16 and at(pos) == "0" and at(pos + 1) in ("x", "X"):
        pos += 2

    cutoff, cutlim = divmod(LONG_MAX, base)
    result = 0
    while pos < length:
        digit = _digit_value(text[pos])
        if digit is None or digit >= base:
            break
        if result > cutoff or (result == cutoff and digit > cutlim):
            return (LONG_MAX if sign == 1 else LONG_MIN), pos
        result = result * base + digit
        pos += 1
    return result * sign, pos


def tokenize(text: str, delims: str = "/") -> list[str]:
    """Split ``text`` on any of the characters in ``delims``, dropping empty tokens."""
    text = text.split("\0", 1)[0]
    if not delims:
        return [text] if text else []
    pattern = "[" + re.escape(delims) + "]+"
    return [token for token in re.split(pattern, text) if token]