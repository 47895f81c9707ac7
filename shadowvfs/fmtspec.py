"""Parsing of printf-style conversion specifications.

The supported set is the integer, character, string and pointer
conversions with flags, field width, precision and length modifiers.
Floating point, binary and write-back conversions are not recognised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

__all__ = ["Opt", "LengthModifier", "Conversion", "FormatSpec", "parse_spec"]


class Opt(Enum):
    """How a field width or precision was given."""

    NONE = auto()
    LITERAL = auto()
    STAR = auto()


class LengthModifier(Enum):
    """Length modifier preceding the conversion character."""

    NONE = auto()
    SHORT = auto()  # h
    LONG_DOUBLE = auto()  # L (only meaningful for floats, never parsed here)
    CHAR = auto()  # hh
    LONG = auto()  # l
    LONG_LONG = auto()  # ll
    INTMAX = auto()  # j
    SIZET = auto()  # z
    PTRDIFFT = auto()  # t


class Conversion(Enum):
    """Conversion character of a specification."""

    PERCENT = auto()  # %
    CHAR = auto()  # c
    STRING = auto()  # s
    SIGNED_INT = auto()  # d, i
    OCTAL = auto()  # o
    HEX_INT = auto()  # x, X
    UNSIGNED_INT = auto()  # u
    POINTER = auto()  # p


@dataclass
class FormatSpec:
    """A parsed conversion specification.

    ``length`` is the number of characters of the format string the
    specification occupies, starting at its ``%``.
    """

    conversion: Conversion
    length: int
    prepend: str = ""
    alt_form: bool = False
    field_width_opt: Opt = Opt.NONE
    field_width: int = 0
    left_justified: bool = False
    leading_zero_pad: bool = False
    prec_opt: Opt = Opt.NONE
    prec: int = 0
    length_modifier: LengthModifier = LengthModifier.NONE
    uppercase: bool = False


_INTEGER_CONVERSIONS = {
    "d": (Conversion.SIGNED_INT, False),
    "i": (Conversion.SIGNED_INT, False),
    "o": (Conversion.OCTAL, False),
    "u": (Conversion.UNSIGNED_INT, False),
    "x": (Conversion.HEX_INT, False),
    "X": (Conversion.HEX_INT, True),
}

_SINGLE_MODIFIERS = {
    "j": LengthModifier.INTMAX,
    "z": LengthModifier.SIZET,
    "t": LengthModifier.PTRDIFFT,
}


def parse_spec(fmt: str, pos: int = 0) -> FormatSpec | None:
    """Parse the specification starting at ``fmt[pos]``, which must be ``%``.

    Returns ``None`` when the text after ``%`` is not a valid
    specification, in which case the ``%`` is meant to be printed as is.
    """
    if not 0 <= pos < len(fmt) or fmt[pos] != "%":
        raise ValueError(f"no conversion specification at position {pos}")

    def at(index: int) -> str:
        return fmt[index] if index < len(fmt) else ""

    cur = pos + 1
    prepend = ""
    alt_form = False
    left_justified = False
    leading_zero_pad = False

    while (ch := at(cur)) in ("-", "0", "+", " ", "#") and ch:
        if ch == "-":
            left_justified = True
            leading_zero_pad = False
        elif ch == "0":
            leading_zero_pad = not left_justified
        elif ch == "+":
            prepend = "+"
        elif ch == " ":
            if not prepend:
                prepend = " "
        else:
            alt_form = True
        cur += 1

    field_width_opt = Opt.NONE
    field_width = 0
    if at(cur) == "*":
        field_width_opt = Opt.STAR
        cur += 1
    else:
        while at(cur).isdigit() and at(cur) in "0123456789":
            field_width_opt = Opt.LITERAL
            field_width = field_width * 10 + int(at(cur))
            cur += 1

    prec = 0
    prec_opt = Opt.NONE
    if at(cur) == ".":
        cur += 1
        if at(cur) == "*":
            prec_opt = Opt.STAR
            cur += 1
        else:
            if at(cur) == "-":
                cur += 1
                prec_opt = Opt.NONE
            else:
                prec_opt = Opt.LITERAL
            while at(cur) and at(cur) in "0123456789":
                prec = prec * 10 + int(at(cur))
                cur += 1

    length_modifier = LengthModifier.NONE
    ch = at(cur)
    if ch == "h":
        cur += 1
        length_modifier = LengthModifier.SHORT
        if at(cur) == "h":
            length_modifier = LengthModifier.CHAR
            cur += 1
    elif ch == "l":
        cur += 1
        length_modifier = LengthModifier.LONG
        if at(cur) == "l":
            length_modifier = LengthModifier.LONG_LONG
            cur += 1
    elif ch in _SINGLE_MODIFIERS and ch:
        cur += 1
        length_modifier = _SINGLE_MODIFIERS[ch]

    ch = at(cur)
    cur += 1
    uppercase = False
    if ch == "%":
        conversion = Conversion.PERCENT
        prec_opt = Opt.NONE
    elif ch == "c":
        conversion = Conversion.CHAR
        prec_opt = Opt.NONE
    elif ch == "s":
        conversion = Conversion.STRING
        leading_zero_pad = False
    elif ch == "p":
        conversion = Conversion.POINTER
        prec_opt = Opt.NONE
    elif ch and ch in _INTEGER_CONVERSIONS:
        conversion, uppercase = _INTEGER_CONVERSIONS[ch]
        if prec_opt is not Opt.NONE:
            leading_zero_pad = False
    else:
        return None

    return FormatSpec(
        conversion=conversion,
        length=cur - pos,
        prepend=prepend,
        alt_form=alt_form,
        field_width_opt=field_width_opt,
        field_width=field_width,
        left_justified=left_justified,
        leading_zero_pad=leading_zero_pad,
        prec_opt=prec_opt,
        prec=prec,
        length_modifier=length_modifier,
        uppercase=uppercase,
    )