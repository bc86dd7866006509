from crayon.conversions.hex import parse_hex, format_hex
import numpy as np
import pytest


@pytest.mark.parametrize("value, expected", [
    ("#FFFFFF", (1.0, 1.0, 1.0, 1.0)),
    ("#000000", (0.0, 0.0, 0.0, 1.0)),
    ("#0000007F", (0.0, 0.0, 0.0, 127 / 255)),
    ("#F00", (1.0, 0.0, 0.0, 1.0)),
    ("#F000", (1.0, 0.0, 0.0, 0.0)),
    ("#00FF00", (0.0, 1.0, 0.0, 1.0)),
    ("#0000FF00", (0.0, 0.0, 1.0, 0.0)),
    ("#FFFF007F", (1.0, 1.0, 0.0, 127 / 255)),
    ("ff8000", (1.0, 128 / 255, 0.0, 1.0)),
    ("#aBc", (0xAA / 255, 0xBB / 255, 0xCC / 255, 1.0)),
])
def test_parse_hex(value, expected):
    assert np.allclose(parse_hex(value), expected, rtol=0, atol=1e-12)


@pytest.mark.parametrize("value", [
    "",
    "#",
    "#12",
    "#12345",
    "#1234567",
    "#123456789",
    "#GGGGGG",
    "0x1234",
    "#+12345",
    "#FF_FFF",
    " #FFF",
    "##FFF",
    None,
    0xFFFFFF,
])
def test_parse_hex_rejects(value):
    assert parse_hex(value) is None


def test_format_hex():
    assert format_hex((1.0, 1.0, 1.0, 1.0)) == "#FFFFFF"
    assert format_hex((1.0, 0.0, 0.0, 127 / 255), with_alpha=True) == "#FF00007F"
    assert format_hex((0.0, 0.0, 1.0, 1.0), prefix=None) == "0000FF"
    assert format_hex((0.0, 0.0, 1.0, 1.0), prefix="") == "0000FF"
    assert format_hex((0.0, 0.0, 1.0, 1.0), prefix="0x") == "0x0000FF"
    # half steps round up
    assert format_hex((0.5, 0.5, 0.5, 1.0)) == "#808080"


@pytest.mark.parametrize("value", [
    "#000000", "#FFFFFF", "#FF8000", "#123456", "#ABCDEF", "#7F7F7F", "#010203", "#fedcba",
])
def test_hex_round_trip(value):
    assert format_hex(parse_hex(value)) == value.upper()
