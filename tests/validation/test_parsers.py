import logging
import re
from datetime import date
import pytest
from congregation_scheduler.constants import MONTHS
from congregation_scheduler.models import MeetingType
from congregation_scheduler.validation.parsers import (
    DateSpec,
    normalize_date,
    parse_meeting_type,
    parse_month_name,
    parse_portuguese_date,
)

ISO_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@pytest.mark.unit
class TestParsePortugueseDate:
    """Test parser function parse_portuguese_date()."""

    @pytest.mark.parametrize(
        "value", ["2024-10-11", "2024-02-29", "1999-12-31", "2025-01-01", "2030-06-15"]
    )
    def test_iso_dates_are_unchanged(self, value, today):
        parsed: DateSpec = parse_portuguese_date(value, today)
        assert parsed.value == value
        assert parsed.fallback is False

    def test_iso_with_surrounding_whitespace(self, today):
        assert normalize_date("  2024-10-11 ", today) == "2024-10-11"

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("sábado, 4 de outubro", "2024-10-04"),
            ("4 de outubro", "2024-10-04"),
            ("Quarta-feira, 8 de OUT", "2024-10-08"),
            ("quarta-feira, 8 de out de 2025", "2025-10-08"),
            ("1 de jan", "2024-01-01"),
            ("15 de março", "2024-03-15"),
            ("15 de marco", "2024-03-15"),
            ("04/10/2024", "2024-10-04"),
            ("4/10/2025", "2025-10-04"),
            ("4/10", "2024-10-04"),
            ("Domingo 06/10", "2024-10-06"),
        ],
    )
    def test_portuguese_formats(self, value, expected, today):
        parsed = parse_portuguese_date(value, today)
        assert parsed.value == expected
        assert parsed.raw == value
        assert parsed.fallback is False

    @pytest.mark.parametrize("name, month", sorted(MONTHS.items()))
    def test_every_month_name_and_abbreviation(self, name, month, today):
        assert normalize_date(f"15 de {name}", today) == f"2024-{month:02d}-15"

    def test_missing_year_uses_reference_year(self):
        # No look-ahead: a January date seen in December stays in the same year.
        assert normalize_date("5 de janeiro", date(2024, 12, 20)) == "2024-01-05"

    def test_invalid_day_falls_through_to_next_pattern(self, today):
        assert normalize_date("31 de fevereiro ou 04/10/2024", today) == "2024-10-04"

    @pytest.mark.parametrize(
        "value",
        ["", "   ", "garbage", "de outubro", "4 de foo", "31 de fevereiro", "2023-02-30", "99/99"],
    )
    def test_unparseable_falls_back_to_today(self, value, today):
        parsed = parse_portuguese_date(value, today)
        assert parsed.value == "2024-10-01"
        assert parsed.fallback is True
        assert ISO_PATTERN.match(parsed.value)

    def test_fallback_logs_warning(self, today, caplog):
        with caplog.at_level(logging.WARNING):
            parse_portuguese_date("sem data", today)
        assert "Não foi possível fazer parse da data" in caplog.text

    def test_defaults_to_current_date(self):
        parsed = parse_portuguese_date("not a date")
        assert parsed.value == date.today().isoformat()
        assert parsed.fallback is True


@pytest.mark.unit
class TestParseMonthName:
    @pytest.mark.parametrize(
        "token, expected",
        [("outubro", 10), ("OUT", 10), ("Março", 3), ("dez", 12), ("foo", None), ("", None)],
    )
    def test_month_lookup(self, token, expected):
        assert parse_month_name(token) == expected


@pytest.mark.unit
class TestParseMeetingType:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("meio_semana", MeetingType.MIDWEEK),
            ("fim_semana", MeetingType.WEEKEND),
            (" FIM_SEMANA ", MeetingType.WEEKEND),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_meeting_type(value) == expected

    @pytest.mark.parametrize("value", ["outro_tipo", "", None, 3])
    def test_invalid_raises(self, value):
        with pytest.raises(ValueError, match="Invalid meeting type"):
            parse_meeting_type(value)
