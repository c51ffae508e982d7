import logging
import re
from dataclasses import dataclass
from datetime import date
from congregation_scheduler.constants import DATE_FORMAT, MEETING_TYPES, MONTHS
from congregation_scheduler.models import MeetingType
from congregation_scheduler.validation.helpers import strip_accents

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
# "4 de outubro", "sábado, 4 de outubro", "quarta-feira, 8 de out de 2025"
DAY_MONTH_NAME = re.compile(r"(\d{1,2})\s+de\s+([^\W\d_]+)\.?(?:\s+de\s+(\d{4}))?")
DAY_MONTH_YEAR = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")
DAY_MONTH = re.compile(r"(\d{1,2})/(\d{1,2})")


@dataclass(frozen=True)
class DateSpec:
    """Data class representing a normalized calendar date."""

    value: str
    raw: str
    fallback: bool = False


def parse_month_name(token: str) -> int | None:
    """Map a Portuguese month name or 3-letter abbreviation to its number."""
    if not token:
        return None
    return MONTHS.get(strip_accents(token.strip().lower()))


def _build_date(year: int, month: int, day: int) -> str | None:
    try:
        return date(year, month, day).strftime(DATE_FORMAT)
    except ValueError:
        return None


def _match_month_name(text: str, year: int) -> str | None:
    match = DAY_MONTH_NAME.search(text)
    if not match:
        return None
    month = parse_month_name(match.group(2))
    if month is None:
        return None
    explicit_year = int(match.group(3)) if match.group(3) else year
    return _build_date(explicit_year, month, int(match.group(1)))


def _match_day_month_year(text: str, year: int) -> str | None:
    match = DAY_MONTH_YEAR.search(text)
    if not match:
        return None
    return _build_date(int(match.group(3)), int(match.group(2)), int(match.group(1)))


def _match_day_month(text: str, year: int) -> str | None:
    match = DAY_MONTH.search(text)
    if not match:
        return None
    return _build_date(year, int(match.group(2)), int(match.group(1)))


# Tried in order; the first pattern that yields a real date wins.
DATE_MATCHERS = (_match_month_name, _match_day_month_year, _match_day_month)


def parse_portuguese_date(value: str, today: date | None = None) -> DateSpec:
    """
    Convert a free-text Portuguese date into ISO ``YYYY-MM-DD``.

    Accepts ISO dates, "4 de outubro", "sábado, 4 de outubro", "04/10/2024" and
    "4/10". A missing year is taken from ``today`` (the current date by default).

    Never raises: unparseable input falls back to ``today`` and the returned
    DateSpec is flagged with ``fallback=True``.
    """
    today = today or date.today()
    raw = value
    text = value.strip() if isinstance(value, str) else ""

    if ISO_DATE.match(text):
        year, month, day = (int(part) for part in text.split("-"))
        if _build_date(year, month, day):
            return DateSpec(value=text, raw=raw)

    lowered = text.lower()
    for matcher in DATE_MATCHERS:
        parsed = matcher(lowered, today.year)
        if parsed:
            return DateSpec(value=parsed, raw=raw)

    logging.warning(f"Não foi possível fazer parse da data: {raw!r}")
    return DateSpec(value=today.strftime(DATE_FORMAT), raw=raw, fallback=True)


def normalize_date(value: str, today: date | None = None) -> str:
    return parse_portuguese_date(value, today).value


def parse_meeting_type(value: str) -> MeetingType:
    """
    Parse meeting type string to MeetingType enum.

    Accepts "meio_semana" and "fim_semana", ignoring case and surrounding whitespace.

    Raises:
        ValueError: If input is not one of the known meeting types
    """
    if not isinstance(value, str) or value.strip().lower() not in MEETING_TYPES:
        raise ValueError(f"Invalid meeting type: {value}")
    return MeetingType.from_string(value)
