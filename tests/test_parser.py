import pytest

from sizefill.size.errors import FailureKind, InvalidFormat
from sizefill.size.parser import MAGNITUDE, ParsedMagnitude, normalize, parse_magnitude
from sizefill.size.units import Unit


def test_normalize_comma_and_case():
    assert normalize("123,456K") == "123.456k"


def test_no_dot_is_integer_part():
    p = parse_magnitude("123")
    assert p == ParsedMagnitude(integer_part="123", fraction_part=None, unit=Unit.NONE)
    assert p.fraction_length == 0


def test_dot_splits_integer_and_fraction():
    p = parse_magnitude("123.456m")
    assert p.integer_part == "123"
    assert p.fraction_part == "456"
    assert p.unit is Unit.MEGA
    assert p.digits == "123456"


def test_empty_integer_part_defaults_to_zero():
    p = parse_magnitude(".456m")
    assert p.integer_part == "0"
    assert p.fraction_part == "456"


def test_separator_and_case_equivalence():
    assert parse_magnitude("123,456K") == parse_magnitude("123.456k")


@pytest.mark.parametrize(
    "raw",
    ["", "123.m", "123.", ".", "abc", "-5k", "5kb", "1.2.3k", " 5k", "5 k", "1e3", "5k\n"],
)
def test_rejects_malformed(raw):
    with pytest.raises(InvalidFormat) as exc:
        parse_magnitude(raw)
    assert exc.value.kind == FailureKind.INVALID_FORMAT


def test_none_input():
    with pytest.raises(InvalidFormat):
        parse_magnitude(None)


def test_grammar_groups():
    m = MAGNITUDE.match("123.456m")
    assert m.groups() == ("123.", "123", "456", "m")
    m = MAGNITUDE.match("123")
    assert m.groups() == (None, None, "123", None)
