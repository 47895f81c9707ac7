import pytest

from shadowvfs.fmtspec import parse_spec
from shadowvfs.intconv import Converted, convert, digits, render


def fmt(spec_text, arg=None):
    spec = parse_spec(spec_text)
    assert spec is not None
    return render(spec, convert(spec, arg))


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("value", [0, 1, 7, 255, 4096, 2**63 - 1, 2**64 - 1])
def test_digits_round_trip(value, base):
    assert int(digits(value, base), base) == value


def test_digits_uppercase_matches_lowercase_upper():
    assert digits(48879, 16, True) == digits(48879, 16, False).upper()


def test_digits_of_zero():
    assert digits(0, 16) == "0"


@pytest.mark.parametrize("base", [0, 1, 37])
def test_digits_rejects_bad_base(base):
    with pytest.raises(ValueError):
        digits(10, base)


def test_digits_rejects_negative():
    with pytest.raises(ValueError):
        digits(-1, 10)


@pytest.mark.parametrize(
    "spec_text, arg",
    [
        ("%d", 0),
        ("%d", 42),
        ("%d", -42),
        ("%i", 17),
        ("%5d", 42),
        ("%-5d", 42),
        ("%05d", -7),
        ("%+d", 3),
        ("%+5d", 3),
        ("%-+5d", 3),
        ("% d", 42),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#08x", 255),
        ("%.3d", 5),
        ("%.3d", -5),
        ("%o", 8),
        ("%u", 12345),
        ("%10x", 3054),
    ],
)
def test_matches_python_formatting(spec_text, arg):
    assert fmt(spec_text, arg) == spec_text % arg


def test_alt_octal_gets_leading_zero():
    assert fmt("%#o", 8) == "0" + fmt("%o", 8)


def test_int_truncated_to_32_bits():
    assert fmt("%d", 2**32 + 5) == fmt("%d", 5)


def test_char_modifier_is_signed():
    assert fmt("%hhd", 255) == fmt("%d", -1)


def test_short_unsigned_wraps():
    assert int(fmt("%hu", -1)) == 2**16 - 1


def test_long_keeps_64_bits():
    value = 2**40 + 123
    assert fmt("%ld", value) == str(value)
    assert fmt("%llu", -1) == str(2**64 - 1)


def test_zero_with_zero_precision_prints_nothing():
    assert fmt("%.0d", 0) == ""
    assert fmt("%5.0d", 0) == " " * 5


def test_alt_octal_zero_precision_prints_single_zero():
    assert fmt("%#.0o", 0) == "0"


def test_pointer_has_hex_prefix():
    assert fmt("%p", 0x1000) == "0x" + digits(0x1000, 16)
    assert fmt("%p", None) == "0x0"


def test_char_conversion():
    assert fmt("%c", "a") == "a"
    assert fmt("%c", 65) == chr(65)
    assert fmt("%3c", "a") == "a".rjust(3)


def test_zero_flag_disables_padding_for_char():
    assert fmt("%05c", "a") == "a"


def test_string_precision_and_width():
    assert fmt("%.2s", "hello") == "he"
    assert fmt("%-6s", "ab") == "ab".ljust(6)
    assert fmt("%06s", "ab") == "ab".rjust(6)
    assert fmt("%s", "ab\0cd") == "ab"


def test_percent():
    assert fmt("%%") == "%"


def test_convert_pieces():
    spec = parse_spec("%#x")
    converted = convert(spec, 255)
    assert converted == Converted(text=digits(255, 16), prefix="0x", zero=False, prec=0)


def test_convert_negative_sign():
    converted = convert(parse_spec("%d"), -9)
    assert converted.sign == "-"
    assert converted.text == "9"


def test_wrong_argument_types():
    with pytest.raises(TypeError):
        convert(parse_spec("%d"), "x")
    with pytest.raises(TypeError):
        convert(parse_spec("%s"), 5)
    with pytest.raises(TypeError):
        convert(parse_spec("%c"), "ab")