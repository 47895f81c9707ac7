"""Conversion of a single printf argument and its padding into text.

``convert`` turns an argument into the pieces of its representation
(sign, radix prefix, digits) according to a parsed specification, and
``render`` lays those pieces out with precision and field-width padding.
Integer arguments are truncated to the width that their length modifier
names, as a 64-bit machine would.
"""

from __future__ import annotations

from dataclasses import dataclass

from shadowvfs.fmtspec import Conversion, FormatSpec, LengthModifier, Opt

__all__ = ["Converted", "digits", "convert", "render"]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_BITS = {
    LengthModifier.NONE: 32,
    LengthModifier.SHORT: 16,
    LengthModifier.LONG_DOUBLE: 32,
    LengthModifier.CHAR: 8,
    LengthModifier.LONG: 64,
    LengthModifier.LONG_LONG: 64,
    LengthModifier.INTMAX: 64,
    LengthModifier.SIZET: 64,
    LengthModifier.PTRDIFFT: 64,
}

_POINTER_BITS = 64

_UNSIGNED_BASES = {
    Conversion.OCTAL: 8,
    Conversion.HEX_INT: 16,
    Conversion.UNSIGNED_INT: 10,
}


@dataclass(frozen=True)
class Converted:
    """The converted pieces of one argument.

    ``text`` is the payload in reading order, ``sign`` the sign character
    (or ``""``), ``prefix`` a ``0x``/``0X`` radix prefix (or ``""``),
    ``zero`` whether the numeric value was zero and ``prec`` the precision
    that applies to the payload.
    """

    text: str
    sign: str = ""
    prefix: str = ""
    zero: bool = False
    prec: int = 0


def digits(value: int, base: int = 10, uppercase: bool = False) -> str:
    """Return the digits of a non-negative ``value`` in ``base``."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base {base}")
    if value < 0:
        raise ValueError("value must not be negative")
    out = []
    while True:
        value, d = divmod(value, base)
        out.append(_DIGITS[d])
        if not value:
            break
    text = "".join(reversed(out))
    return text.upper() if uppercase else text


def _require_int(arg: object, spec: FormatSpec) -> int:
    if not isinstance(arg, int):
        raise TypeError(
            f"{spec.conversion.name.lower()} conversion needs an int, "
            f"got {type(arg).__name__}"
        )
    return arg


def _as_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _as_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _convert_char(arg: object) -> str:
    if isinstance(arg, int):
        return chr(arg & 0xFF)
    if isinstance(arg, (bytes, bytearray)) and len(arg) == 1:
        return chr(arg[0])
    if isinstance(arg, str) and len(arg) == 1:
        return arg
    raise TypeError("char conversion needs an int or a single character")


def _convert_string(spec: FormatSpec, arg: object) -> str:
    if isinstance(arg, (bytes, bytearray)):
        arg = bytes(arg).decode("latin-1")
    if not isinstance(arg, str):
        raise TypeError(f"string conversion needs a str, got {type(arg).__name__}")
    text = arg.split("\0", 1)[0]
    if spec.prec_opt is Opt.LITERAL:
        text = text[: max(spec.prec, 0)]
    return text


def convert(spec: FormatSpec, arg: object = None) -> Converted:
    """Convert ``arg`` as ``spec`` asks, without any padding."""
    conversion = spec.conversion

    if conversion is Conversion.PERCENT:
        return Converted(text="%", prec=spec.prec)

    if conversion is Conversion.CHAR:
        return Converted(text=_convert_char(arg), prec=spec.prec)

    if conversion is Conversion.STRING:
        return Converted(text=_convert_string(spec, arg), prec=spec.prec)

    if conversion is Conversion.POINTER:
        address = 0 if arg is None else _require_int(arg, spec)
        address = _as_unsigned(address, _POINTER_BITS)
        return Converted(text=digits(address, 16), prefix="0x", prec=spec.prec)

    bits = _BITS[spec.length_modifier]
    empty = spec.prec_opt is Opt.LITERAL and spec.prec == 0

    if conversion is Conversion.SIGNED_INT:
        value = _as_signed(_require_int(arg, spec), bits)
        sign = "-" if value < 0 else spec.prepend
        text = "" if value == 0 and empty else digits(abs(value))
        return Converted(text=text, sign=sign, zero=value == 0, prec=spec.prec)

    value = _as_unsigned(_require_int(arg, spec), bits)
    prec = spec.prec
    if value == 0 and empty:
        text = ""
        if conversion is Conversion.OCTAL and spec.alt_form:
            prec = 1
    else:
        text = digits(value, _UNSIGNED_BASES[conversion], spec.uppercase)

    prefix = ""
    if value and spec.alt_form:
        if conversion is Conversion.OCTAL:
            text = "0" + text
        elif conversion is Conversion.HEX_INT:
            prefix = "0X" if spec.uppercase else "0x"
    return Converted(text=text, prefix=prefix, zero=value == 0, prec=prec)


def _pad_char(spec: FormatSpec, converted: Converted) -> str:
    if spec.field_width_opt is not Opt.LITERAL:
        return ""
    if not spec.leading_zero_pad:
        return " "
    if spec.conversion in (Conversion.STRING, Conversion.CHAR, Conversion.PERCENT):
        return ""
    if spec.prec_opt is Opt.LITERAL and converted.prec == 0 and converted.zero:
        return " "
    return "0"


def render(spec: FormatSpec, converted: Converted) -> str:
    """Lay out ``converted`` with the precision and field width of ``spec``."""
    pad = _pad_char(spec, converted)
    text = converted.text
    sign = converted.sign
    prefix = converted.prefix

    prec_pad = 0
    if spec.conversion is not Conversion.STRING:
        prec_pad = max(0, converted.prec - len(text))

    field_pad = spec.field_width - len(text) - (1 if sign else 0)
    field_pad -= len(prefix) + prec_pad
    field_pad = max(0, field_pad)

    parts: list[str] = []
    if not spec.left_justified and pad:
        if pad == "0":
            parts.append(sign)
            sign = ""
            parts.append(prefix)
            parts.append(pad * field_pad)
        else:
            parts.append(pad * field_pad)
            parts.append(prefix)
    else:
        parts.append(prefix)

    if spec.conversion is Conversion.STRING:
        parts.append(text)
    else:
        parts.append(sign)
        parts.append("0" * prec_pad)
        parts.append(text)

    if spec.left_justified and pad:
        parts.append(pad * field_pad)
    return "".join(parts)