"""입력 검증 규칙.

Field validation rules shared by the API services and the console client.

Each validator checks one entity's fields in a fixed order and returns the
first failure message, or None when the input is acceptable. They never
touch the database; existence and overlap checks live in the services.
"""

import re
from datetime import datetime

EMAIL_PATTERN: re.Pattern[str] = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
POST_CODE_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9\s\-]+$")

MIN_PHONE_DIGITS: int = 10
MAX_NAME_LENGTH: int = 100
MAX_EMAIL_LENGTH: int = 254
MAX_PHONE_LENGTH: int = 20

CONTACT_METHOD_REQUIRED: str = "At least one contact method (email or phone) is required."
END_BEFORE_START: str = "End time must be after start time."
POST_CODE_INVALID: str = "Post code must be at least 3 characters with letters or digits."


def clean(value: str | None) -> str | None:
    """Trim a string; blank values become None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def phone_digit_count(phone_number: str) -> int:
    """Count digits, ignoring spaces, dashes, brackets and dots."""
    return sum(1 for ch in phone_number if ch.isdigit())


def validate_email(email: str) -> str | None:
    if len(email) > MAX_EMAIL_LENGTH:
        return "Email address cannot exceed 254 characters."
    if not EMAIL_PATTERN.match(email):
        return "Email must be in basic format: user@domain.extension"
    return None


def validate_phone_number(phone_number: str) -> str | None:
    if len(phone_number) > MAX_PHONE_LENGTH:
        return "Phone number cannot exceed 20 characters."
    if phone_digit_count(phone_number) < MIN_PHONE_DIGITS:
        return "Phone number must contain at least 10 digits."
    return None


def validate_worker(name: str | None, email: str | None, phone_number: str | None) -> str | None:
    """Validate worker fields.

    Args:
        name: Required, at most 100 characters after trimming
        email: Optional, ``user@domain.extension``
        phone_number: Optional, at least 10 digits

    Returns:
        str | None: First failure message, or None when valid
    """
    name, email, phone_number = clean(name), clean(email), clean(phone_number)

    if name is None:
        return "Worker name is required."
    if len(name) > MAX_NAME_LENGTH:
        return "Worker name cannot exceed 100 characters."
    if email is None and phone_number is None:
        return CONTACT_METHOD_REQUIRED
    if email is not None:
        error = validate_email(email)
        if error:
            return error
    if phone_number is not None:
        error = validate_phone_number(phone_number)
        if error:
            return error
    return None


def validate_post_code(post_code: str | None) -> str | None:
    post_code = clean(post_code)
    if post_code is None:
        return "Post code is required."
    if len(post_code) > 20:
        return "Post code cannot exceed 20 characters."
    if len(post_code) < 3 or not POST_CODE_PATTERN.match(post_code):
        return POST_CODE_INVALID
    return None


def _check_length(value: str | None, label: str, minimum: int, maximum: int) -> str | None:
    value = clean(value)
    if value is None:
        return f"{label} is required."
    if len(value) < minimum:
        return f"{label} must be at least {minimum} characters."
    if len(value) > maximum:
        return f"{label} cannot exceed {maximum} characters."
    return None


def validate_location(
    name: str | None,
    address: str | None,
    town: str | None,
    county: str | None,
    post_code: str | None,
    country: str | None,
) -> str | None:
    """Validate location fields; every field is required.

    Returns:
        str | None: First failure message, or None when valid
    """
    checks = (
        lambda: _check_length(name, "Location name", 1, 100),
        lambda: _check_length(address, "Address", 3, 200),
        lambda: _check_length(town, "Town", 1, 100),
        lambda: _check_length(county, "County", 1, 100),
        lambda: validate_post_code(post_code),
        lambda: _check_length(country, "Country", 2, 100),
    )
    for check in checks:
        error = check()
        if error:
            return error
    return None


def validate_shift_fields(
    worker_id: int | None,
    location_id: int | None,
    start_time: datetime | None,
    end_time: datetime | None,
) -> str | None:
    """Validate shift references and times without touching the database."""
    if worker_id is None or worker_id <= 0:
        return "WorkerId must be greater than zero."
    if location_id is None or location_id <= 0:
        return "LocationId must be greater than zero."
    return validate_shift_times(start_time, end_time)


def validate_shift_times(start_time: datetime | None, end_time: datetime | None) -> str | None:
    if start_time is None:
        return "Start time is required."
    if end_time is None:
        return "End time is required."
    if end_time <= start_time:
        return END_BEFORE_START
    return None


def intervals_overlap(
    start_a: datetime,
    end_a: datetime,
    start_b: datetime,
    end_b: datetime,
) -> bool:
    """Whether two half-open intervals [start, end) intersect.

    Touching intervals (one ends exactly when the other starts) do not overlap.
    """
    return start_a < end_b and start_b < end_a


def duration_minutes(start_time: datetime, end_time: datetime) -> int:
    """Whole minutes between start and end."""
    return int((end_time - start_time).total_seconds() // 60)
