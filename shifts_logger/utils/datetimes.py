"""날짜/시간 유틸리티.

Date/time parsing and formatting helpers.

Shift times travel as strings in either the day-first console format
(``dd-MM-yyyy HH:mm`` or ``dd/MM/yyyy HH:mm``) or ISO 8601. Everything is
stored as naive wall-clock time; timezone-aware values are converted to
UTC first.
"""

from datetime import date, datetime, timezone

# Day-first formats accepted in addition to ISO 8601
DAY_FIRST_FORMATS: tuple[str, ...] = (
    "%d-%m-%Y %H:%M",
    "%d/%m/%Y %H:%M",
    "%d-%m-%Y %H:%M:%S",
    "%d/%m/%Y %H:%M:%S",
)

# Display format used by the console
DISPLAY_FORMAT: str = "%d-%m-%Y %H:%M"


def to_naive(value: datetime) -> datetime:
    """Drop timezone info, converting aware values to UTC first."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_datetime(value: str | datetime) -> datetime:
    """Parse a shift timestamp.

    Args:
        value: A datetime, a day-first string, or an ISO 8601 string
               (a trailing ``Z`` is accepted)

    Returns:
        datetime: Naive datetime

    Raises:
        ValueError: When the string matches none of the supported formats
    """
    if isinstance(value, datetime):
        return to_naive(value)

    text: str = value.strip()
    if not text:
        raise ValueError("Date/time value cannot be empty")

    for fmt in DAY_FIRST_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        return to_naive(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        raise ValueError(
            f"Unable to parse '{value}' as a date/time. "
            "Use dd-MM-yyyy HH:mm, dd/MM/yyyy HH:mm or ISO 8601."
        ) from None


def parse_date(value: str | date) -> date:
    """Parse a calendar date in ``dd-MM-yyyy``, ``dd/MM/yyyy`` or ISO form.

    A full timestamp is accepted too; only its date part is kept.
    """
    if isinstance(value, datetime):
        return to_naive(value).date()
    if isinstance(value, date):
        return value

    text: str = value.strip()
    for fmt in ("%d-%m-%Y", "%d/%m/%Y", "%Y-%m-%d"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return parse_datetime(text).date()


def format_datetime(value: datetime) -> str:
    """Render a timestamp in the console display format."""
    return value.strftime(DISPLAY_FORMAT)
