"""콘솔 출력 모듈.

Plain-text rendering of envelopes and entity tables.
"""

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from shifts_logger.schemas.common import ApiResponse, PaginatedApiResponse
from shifts_logger.utils.datetimes import format_datetime, parse_datetime

Output = Callable[[str], None]

WORKER_COLUMNS: tuple[tuple[str, str], ...] = (
    ("worker_id", "ID"),
    ("name", "Name"),
    ("email", "Email"),
    ("phone_number", "Phone"),
)
LOCATION_COLUMNS: tuple[tuple[str, str], ...] = (
    ("location_id", "ID"),
    ("name", "Name"),
    ("address", "Address"),
    ("town", "Town"),
    ("county", "County"),
    ("post_code", "Post Code"),
    ("country", "Country"),
)
SHIFT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("shift_id", "ID"),
    ("worker_name", "Worker"),
    ("location_name", "Location"),
    ("start_time", "Start"),
    ("end_time", "End"),
    ("duration_minutes", "Minutes"),
)


def _cell(key: str, value: Any) -> str:
    if value is None:
        return "-"
    if key in ("start_time", "end_time"):
        if isinstance(value, datetime):
            return format_datetime(value)
        try:
            return format_datetime(parse_datetime(str(value)))
        except ValueError:
            return str(value)
    return str(value)


def render_table(rows: Sequence[dict[str, Any]], columns: Sequence[tuple[str, str]]) -> list[str]:
    """Lay rows out as fixed-width text lines (header, rule, one line per row)."""
    cells = [[_cell(key, row.get(key)) for key, _ in columns] for row in rows]
    widths = [
        max([len(title)] + [len(line[i]) for line in cells])
        for i, (_, title) in enumerate(columns)
    ]
    header = "  ".join(title.ljust(w) for (_, title), w in zip(columns, widths))
    lines = [header, "  ".join("-" * w for w in widths)]
    lines.extend("  ".join(c.ljust(w) for c, w in zip(line, widths)) for line in cells)
    return lines


def show_table(rows: Sequence[dict[str, Any]], columns: Sequence[tuple[str, str]], out: Output = print) -> None:
    for line in render_table(rows, columns):
        out(line)


def show_record(row: dict[str, Any], columns: Sequence[tuple[str, str]], out: Output = print) -> None:
    width = max(len(title) for _, title in columns)
    for key, title in columns:
        out(f"{title.rjust(width)}: {_cell(key, row.get(key))}")


def show_error(message: str, out: Output = print) -> None:
    out(f"Error: {message}")


def show_response(response: ApiResponse[Any], columns: Sequence[tuple[str, str]], out: Output = print) -> bool:
    """Print a single-entity or list envelope; returns False when it failed."""
    if response.request_failed:
        show_error(f"{response.message} ({response.response_code})", out)
        return False
    out(response.message)
    if isinstance(response.data, list):
        if response.data:
            show_table(response.data, columns, out)
    elif isinstance(response.data, dict):
        show_record(response.data, columns, out)
    return True


def show_page(response: PaginatedApiResponse[Any], columns: Sequence[tuple[str, str]], out: Output = print) -> bool:
    if not show_response(response, columns, out):
        return False
    if response.total_count:
        out(
            f"Page {response.page_number} of {response.total_pages} "
            f"({response.total_count} total, {response.page_size} per page)"
        )
    return True
