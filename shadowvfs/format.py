"""printf-style formatting on top of the specification parser.

``sprintf`` returns the whole formatted text.  ``snprintf`` behaves like
a bounded buffer of ``size`` bytes: it returns the text that fits,
terminator included, together with the length the full text would have.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from shadowvfs.fmtspec import Conversion, Opt, parse_spec
from shadowvfs.intconv import convert, render

__all__ = ["sprintf", "snprintf"]


def _next_arg(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _star_arg(args: Iterator[object], what: str) -> int:
    value = _next_arg(args)
    if not isinstance(value, int):
        raise TypeError(f"{what} given by '*' must be an int, got {type(value).__name__}")
    return value


def _format(fmt: str, args: tuple[object, ...]) -> str:
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    out: list[str] = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            out.append(fmt[pos:])
            break
        out.append(fmt[pos:percent])

        spec = parse_spec(fmt, percent)
        if spec is None:
            out.append("%")
            pos = percent + 1
            continue
        pos = percent + spec.length

        changes: dict[str, object] = {}
        if spec.field_width_opt is Opt.STAR:
            width = _star_arg(remaining, "field width")
            changes["field_width_opt"] = Opt.LITERAL
            changes["field_width"] = abs(width)
            if width < 0:
                changes["left_justified"] = True
        if spec.prec_opt is Opt.STAR:
            prec = _star_arg(remaining, "precision")
            changes["prec"] = prec
            changes["prec_opt"] = Opt.LITERAL if prec >= 0 else Opt.NONE
        if changes:
            spec = replace(spec, **changes)

        arg = None if spec.conversion is Conversion.PERCENT else _next_arg(remaining)
        out.append(render(spec, convert(spec, arg)))
    return "".join(out)


def sprintf(fmt: str, *args: object) -> str:
    """Format ``args`` according to ``fmt`` and return the full text."""
    return _format(fmt, args)


def snprintf(size: int, fmt: str, *args: object) -> tuple[str, int]:
    """Format into a buffer of ``size`` bytes.

    Returns the text that fits (at most ``size - 1`` characters, leaving
    room for the terminator) and the length of the untruncated text.
    """
    if size < 0:
        raise ValueError("buffer size must not be negative")
    text = _format(fmt, args)
    return text[: max(size - 1, 0)], len(text)