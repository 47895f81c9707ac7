import pytest

from shadowvfs.format import snprintf, sprintf


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (-42,)),
        ("%+d", (7,)),
        ("% d", (7,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%#X", (255,)),
        ("%o", (8,)),
        ("%.3d", (5,)),
        ("%8.3d", (-5,)),
        ("%s and %s", ("left", "right")),
        ("%10s|", ("abc",)),
        ("%-10s|", ("abc",)),
        ("%.2s", ("abcdef",)),
        ("%c%c", ("o", "k")),
        ("100%%", ()),
        ("%*d", (6, 3)),
        ("%.*s", (3, "abcdef")),
    ],
)
def test_matches_python_percent_formatting(fmt, args):
    assert sprintf(fmt, *args) == fmt % args


def test_vfs_trace_address_format():
    assert sprintf("0x%.16llx", 0x1000) == "0x0000000000001000"


def test_lowercase_size_string_from_debug_print():
    assert sprintf("%-*s%s (%s): %lu bytes", 4, "", "dev", "DIR", 0) == "    dev (DIR): 0 bytes"


def test_negative_star_width_left_justifies():
    assert sprintf("%*d|", -4, 7) == sprintf("%-4d|", 7)


def test_negative_star_precision_is_ignored():
    assert sprintf("%.*d", -1, 42) == sprintf("%d", 42)


def test_invalid_specification_prints_percent_literally():
    assert sprintf("%q") == "%q"


def test_text_after_nul_is_ignored():
    assert sprintf("abc\0%d") == "abc"


def test_unsigned_wraps_negative_values():
    assert sprintf("%hhu", -1) == sprintf("%u", 255)


def test_too_few_arguments_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "x")


@pytest.mark.parametrize("size", [0, 1, 3, 5, 11, 50])
def test_snprintf_truncates_to_prefix(size):
    full = sprintf("vendor_id: %s\n", "Generic")
    text, length = snprintf(size, "vendor_id: %s\n", "Generic")
    assert length == len(full)
    assert full.startswith(text)
    assert len(text) == min(len(full), max(size - 1, 0))


def test_snprintf_rejects_negative_size():
    with pytest.raises(ValueError):
        snprintf(-1, "%d", 1)