"""Tests for the cty.dat grammar."""
import pytest

from conftest import FINLAND_LINE, SAMPLE_CTY
from ctydat.parser import ParseError, parse_cty
from models.country import (
    CoordinatesOverride, ContinentOverride, CqZoneOverride, ExactCallsign,
    ItuZoneOverride, PrefixToken, TimeOffsetOverride
)

FINLAND_MULTILINE = """Finland:                  15:  18:  EU:   61.38:   -24.82:    -2.0:  OH:
        OF,OG,OH,OI,OJ,=OH/RX3AMI/LH,
        =OF100FI/1/LH,=OF1AD/S,=OF1LD/S,=OF1TX/S,=OH0HG/1,=OH0J/1,=OH0JJS/1,
        =OH2ET/LH,=OH2ET/LS,=OH2ET/S,
        =OH0KAG/9,=OH9AR/S,=OH9TM/S,=OH9TO/S;
    """


def test_parse_single_record():
    """Every field of a one-line record is extracted."""
    records = parse_cty(FINLAND_LINE)

    assert len(records) == 1
    country = records[0]
    assert country.country_name == "Finland"
    assert country.cq_zone == 15
    assert country.itu_zone == 18
    assert country.continent == "EU"
    assert country.latitude == 61.38
    assert country.longitude == -24.82
    assert country.time_offset == -2.0
    assert country.primary_prefix == "OH"
    assert country.alias_list == (PrefixToken("OH"), ExactCallsign("OH2ET/SA"))


def test_parse_multiline_alias_list():
    """Alias list continues across lines; trailing whitespace is ignored."""
    records = parse_cty(FINLAND_MULTILINE)

    assert len(records) == 1
    country = records[0]
    assert country.country_name == "Finland"
    assert country.latitude == 61.38
    assert country.alias_list[:5] == tuple(PrefixToken(p) for p in ("OF", "OG", "OH", "OI", "OJ"))
    assert country.alias_list[5] == ExactCallsign("OH/RX3AMI/LH")
    assert country.alias_list[-1] == ExactCallsign("OH9TO/S")
    assert len(country.alias_list) == 20


def test_parse_several_records():
    """Records are returned in file order."""
    records = parse_cty(SAMPLE_CTY)

    assert [r.country_name for r in records] == ["Finland", "United States", "Hawaii"]
    assert records[1].cq_zone == 5
    assert records[1].itu_zone == 8
    assert records[2].primary_prefix == "KH6"


def test_parse_empty_input():
    """Empty or whitespace-only text yields no records."""
    assert parse_cty("") == []
    assert parse_cty("  \n\n\t\n") == []


def test_parse_crlf_line_endings():
    """Windows line endings are accepted."""
    text = SAMPLE_CTY.replace("\n", "\r\n")
    records = parse_cty(text)

    assert len(records) == 3
    assert records[0].alias_list[-1] == ExactCallsign("OH2ET", (CqZoneOverride(14), ContinentOverride("AS")))


def test_parse_cr_line_endings():
    """A bare carriage return also ends a record."""
    text = (
        "Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH;\r"
        "Aland Islands: 15: 18: EU: 60.13: -20.37: -2.0: OH0: OH0;\r"
    )
    records = parse_cty(text)

    assert [r.country_name for r in records] == ["Finland", "Aland Islands"]
    assert records[1].alias_list == (PrefixToken("OH0"),)


def test_zone_override_delimiters():
    """Parentheses give the CQ zone, square brackets the ITU zone."""
    records = parse_cty(SAMPLE_CTY)

    alias = records[0].alias_list[6]
    assert alias == ExactCallsign("OH0J/1", (CqZoneOverride(16), ItuZoneOverride(19)))


def test_all_override_kinds():
    """Every override kind is recognised after a single prefix."""
    records = parse_cty(SAMPLE_CTY)

    alias = records[1].alias_list[4]
    assert isinstance(alias, PrefixToken)
    assert alias.token == "KH6"
    assert alias.overrides == (
        CqZoneOverride(31),
        ItuZoneOverride(61),
        CoordinatesOverride(21.12, 157.48),
        ContinentOverride("OC"),
        TimeOffsetOverride(10.0),
    )


def test_override_order_is_kept():
    """Overrides keep the order in which they are written."""
    records = parse_cty("Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH~-3.0~(3)(4);\n")

    assert records[0].alias_list[0].overrides == (
        TimeOffsetOverride(-3.0), CqZoneOverride(3), CqZoneOverride(4)
    )


def test_trailing_blanks_after_terminator():
    """Blanks between ';' and the line break are tolerated."""
    records = parse_cty("Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH;   \n")
    assert records[0].alias_list == (PrefixToken("OH"),)


def test_missing_terminator():
    """A record without ';' is rejected."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH,OG\n")

    assert exc_info.value.found is None


def test_non_numeric_cq_zone():
    """A non-numeric CQ zone is rejected with its label and position."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: xx: 18: EU: 61.38: -24.82: -2.0: OH: OH;\n")

    error = exc_info.value
    assert error.label == "CQ zone"
    assert error.position == 9
    assert error.line == 1
    assert error.column == 10
    assert error.found == "x"
    assert "CQ zone" in str(error)


def test_zone_overflow():
    """Zones must fit an unsigned byte."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: 15: 256: EU: 61.38: -24.82: -2.0: OH: OH;\n")

    assert exc_info.value.label == "ITU zone"
    assert exc_info.value.detail


def test_very_long_zone():
    """A huge digit run is a zone error, not an integer conversion error."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: " + "1" * 5000 + ": 18: EU: 61.38: -24.82: -2.0: OH: OH;\n")

    assert exc_info.value.label == "CQ zone"
    assert exc_info.value.position == 9
    assert exc_info.value.detail


@pytest.mark.parametrize("override, label", [
    ("(" + "9" * 5000 + ")", "CQ zone"),
    ("[" + "9" * 5000 + "]", "ITU zone"),
])
def test_very_long_zone_override(override, label):
    head = "Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH"
    with pytest.raises(ParseError) as exc_info:
        parse_cty(head + override + ";\n")

    assert exc_info.value.label == label
    assert exc_info.value.position == len(head) + 1


def test_zone_leading_zeros():
    records = parse_cty("Finland: 0015: 18: EU: 61.38: -24.82: -2.0: OH: OH(0005);\n")

    assert records[0].cq_zone == 15
    assert records[0].alias_list == (PrefixToken("OH", (CqZoneOverride(5),)),)


def test_short_continent():
    """A one-letter continent is rejected."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: 15: 18: E: 61.38: -24.82: -2.0: OH: OH;\n")

    assert exc_info.value.label == "Continent"


def test_long_continent():
    """A three-letter continent leaves a character where ':' is expected."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: 15: 18: EUR: 61.38: -24.82: -2.0: OH: OH;\n")

    assert exc_info.value.found == "R"


def test_malformed_float():
    """Latitude with two decimal points is rejected."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: 15: 18: EU: 61.3.8: -24.82: -2.0: OH: OH;\n")

    assert exc_info.value.label == "Latitude"


def test_short_country_name():
    """Country names shorter than four characters are rejected."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Fij: 15: 18: OC: 61.38: -24.82: -2.0: 3D2: 3D2;\n")

    assert exc_info.value.label == "Country name"
    assert exc_info.value.position == 0


def test_missing_line_break():
    """The ';' must be followed by a line break."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH;")
    assert exc_info.value.label == "Line break"

    with pytest.raises(ParseError):
        parse_cty("Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH; X\n")


def test_empty_alias():
    """An empty alias between separators is rejected."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH,;\n")

    assert exc_info.value.label == "DXCC prefix"


def test_unterminated_override():
    """An override without its closing delimiter is rejected."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland: 15: 18: EU: 61.38: -24.82: -2.0: OH: OH(15;\n")

    assert exc_info.value.found == ";"


def test_error_in_later_record_reports_line():
    """Errors carry the line of the offending record."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty(FINLAND_LINE + "!!\n")

    assert exc_info.value.label == "Country name"
    assert exc_info.value.line == 2
    assert exc_info.value.column == 1


@pytest.mark.parametrize("char", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_separator_control_chars_are_not_whitespace(char):
    """ASCII separator controls around ':' are rejected."""
    with pytest.raises(ParseError) as exc_info:
        parse_cty("Finland:" + char + "15: 18: EU: 61.38: -24.82: -2.0: OH: OH;\n")

    assert exc_info.value.label == "CQ zone"
    assert exc_info.value.position == 8
    assert exc_info.value.found == char


def test_unicode_whitespace_around_separator():
    records = parse_cty("Finland: 15:\u300018: EU: 61.38: -24.82: -2.0: OH: OH;\n")
    assert records[0].itu_zone == 18
