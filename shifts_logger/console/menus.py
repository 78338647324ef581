"""콘솔 메뉴 모듈.

Interactive menus for workers, locations and shifts.

Input is checked with the same validation rules the API applies before
anything is sent; the API's answer (success or failure) is always shown
as-is.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any

from shifts_logger.console import display
from shifts_logger.console.api_client import ApiClient
from shifts_logger.console.prompts import Prompter
from shifts_logger.console.services import LocationService, ShiftService, WorkerService
from shifts_logger.schemas.common import PaginatedApiResponse
from shifts_logger.utils.datetimes import parse_datetime
from shifts_logger.utils.validation import validate_location, validate_shift_fields, validate_worker

BACK: str = "0"


class EntityMenu(ABC):
    """Shared list/browse/view/delete flow; subclasses add entity prompts."""

    title: str = ""
    entity: str = ""
    columns: Sequence[tuple[str, str]] = ()
    sort_fields: Sequence[str] = ()
    filter_fields: Sequence[str] = ()

    def __init__(self, service: Any, prompter: Prompter) -> None:
        self.service = service
        self.prompter = prompter
        self.out = prompter.out

    def actions(self) -> list[tuple[str, str, Callable[[], None]]]:
        return [
            ("1", f"List {self.entity}s", self.list_all),
            ("2", f"Filter, search and sort {self.entity}s", self.filter),
            ("3", f"View {self.entity} by ID", self.view),
            ("4", f"Create {self.entity}", self.create),
            ("5", f"Update {self.entity}", self.update),
            ("6", f"Delete {self.entity}", self.delete),
        ]

    def run(self) -> None:
        actions = self.actions()
        handlers = {key: handler for key, _, handler in actions}
        options = [(key, text) for key, text, _ in actions] + [(BACK, "Back")]
        while True:
            choice = self.prompter.choose(self.title, options)
            if choice == BACK:
                return
            handlers[choice]()

    def browse(self, filters: dict[str, Any]) -> None:
        """Show pages of a list, moving with next/previous until the user leaves."""
        filters = dict(filters)
        filters.setdefault("page_number", 1)
        while True:
            response: PaginatedApiResponse[Any] = self.service.get_page(filters)
            if not display.show_page(response, self.columns, self.out):
                return
            options: list[tuple[str, str]] = []
            if response.has_next_page:
                options.append(("n", "Next page"))
            if response.has_previous_page:
                options.append(("p", "Previous page"))
            if not options:
                return
            options.append(("q", "Done"))
            choice = self.prompter.choose("Navigate", options)
            if choice == "n":
                filters["page_number"] = response.page_number + 1
            elif choice == "p":
                filters["page_number"] = response.page_number - 1
            else:
                return

    def list_all(self) -> None:
        self.browse({})

    def filter(self) -> None:
        filters: dict[str, Any] = {}
        self.out("Leave a field blank to skip it.")
        for field in self.filter_fields:
            filters[field] = self.prompter.text(field.replace("_", " ").capitalize(), required=False)
        filters["search"] = self.prompter.text("Search text", required=False)
        filters["sort_by"] = self.prompter.text(f"Sort by ({', '.join(self.sort_fields)})", required=False)
        filters["sort_order"] = self.prompter.text("Sort order (asc/desc)", required=False)
        filters["page_size"] = self.prompter.integer("Page size", required=False)
        self.browse(filters)

    def _ask_id(self) -> int:
        return self.prompter.integer(f"{self.entity.capitalize()} ID")

    def view(self) -> None:
        display.show_response(self.service.get(self._ask_id()), self.columns, self.out)

    def delete(self) -> None:
        record_id = self._ask_id()
        if not self.prompter.confirm(f"Delete {self.entity} {record_id}?"):
            self.out("Cancelled.")
            return
        display.show_response(self.service.delete(record_id), self.columns, self.out)

    def _current(self, record_id: int) -> dict[str, Any] | None:
        """Fetch a record to edit; None (after showing why) when it can't be loaded."""
        response = self.service.get(record_id)
        if response.request_failed:
            display.show_error(f"{response.message} ({response.response_code})", self.out)
            return None
        display.show_record(response.data, self.columns, self.out)
        return response.data

    @abstractmethod
    def create(self) -> None: ...

    @abstractmethod
    def update(self) -> None: ...


class WorkerMenu(EntityMenu):
    title = "Workers"
    entity = "worker"
    columns = display.WORKER_COLUMNS
    sort_fields = ("worker_id", "name", "email", "phone_number")
    filter_fields = ("name", "email", "phone_number")

    def actions(self) -> list[tuple[str, str, Callable[[], None]]]:
        return super().actions() + [
            ("7", "Workers by email domain", self.by_email_domain),
            ("8", "Workers by phone area code", self.by_phone_area_code),
            ("9", "Workers without email", self.without_email),
        ]

    def _ask_fields(self, current: dict[str, Any] | None = None) -> tuple[str, str | None, str | None]:
        current = current or {}
        while True:
            name = self.prompter.text("Name", default=current.get("name"))
            email = self.prompter.text("Email (optional)", required=False, default=current.get("email"))
            phone = self.prompter.text("Phone number (optional)", required=False, default=current.get("phone_number"))
            error = validate_worker(name, email, phone)
            if error is None:
                return name, email, phone
            display.show_error(error, self.out)

    def create(self) -> None:
        name, email, phone = self._ask_fields()
        display.show_response(self.service.create(name, email, phone), self.columns, self.out)

    def update(self) -> None:
        worker_id = self._ask_id()
        current = self._current(worker_id)
        if current is None:
            return
        name, email, phone = self._ask_fields(current)
        display.show_response(self.service.update(worker_id, name, email, phone), self.columns, self.out)

    def by_email_domain(self) -> None:
        domain = self.prompter.text("Email domain (e.g. company.com)")
        display.show_response(self.service.by_email_domain(domain), self.columns, self.out)

    def by_phone_area_code(self) -> None:
        area_code = self.prompter.text("Phone area code (e.g. +44)")
        display.show_response(self.service.by_phone_area_code(area_code), self.columns, self.out)

    def without_email(self) -> None:
        display.show_response(self.service.without_email(), self.columns, self.out)


class LocationMenu(EntityMenu):
    title = "Locations"
    entity = "location"
    columns = display.LOCATION_COLUMNS
    sort_fields = ("location_id", "name", "address", "town", "county", "post_code", "country")
    filter_fields = ("name", "address", "town", "county", "post_code", "country")

    _prompts: tuple[tuple[str, str], ...] = (
        ("name", "Name"),
        ("address", "Address"),
        ("town", "Town"),
        ("county", "County"),
        ("post_code", "Post code"),
        ("country", "Country"),
    )

    def actions(self) -> list[tuple[str, str, Callable[[], None]]]:
        return super().actions() + [
            ("7", "Locations by country", self.by_country),
            ("8", "Locations by county", self.by_county),
            ("9", "List countries", self.countries),
        ]

    def _ask_fields(self, current: dict[str, Any] | None = None) -> dict[str, str]:
        current = current or {}
        while True:
            fields = {key: self.prompter.text(label, default=current.get(key)) for key, label in self._prompts}
            error = validate_location(**fields)
            if error is None:
                return fields
            display.show_error(error, self.out)

    def create(self) -> None:
        display.show_response(self.service.create(self._ask_fields()), self.columns, self.out)

    def update(self) -> None:
        location_id = self._ask_id()
        current = self._current(location_id)
        if current is None:
            return
        fields = self._ask_fields(current)
        display.show_response(self.service.update(location_id, fields), self.columns, self.out)

    def by_country(self) -> None:
        country = self.prompter.text("Country")
        display.show_response(self.service.by_country(country), self.columns, self.out)

    def by_county(self) -> None:
        county = self.prompter.text("County")
        display.show_response(self.service.by_county(county), self.columns, self.out)

    def countries(self) -> None:
        response = self.service.countries()
        if response.request_failed:
            display.show_error(f"{response.message} ({response.response_code})", self.out)
            return
        self.out(response.message)
        for country in response.data or []:
            self.out(f"  {country}")


class ShiftMenu(EntityMenu):
    title = "Shifts"
    entity = "shift"
    columns = display.SHIFT_COLUMNS
    sort_fields = ("shift_id", "worker_id", "location_id", "start_time", "end_time", "location_name", "duration")
    filter_fields = ("worker_id", "location_id", "location_name", "min_duration_minutes", "max_duration_minutes")

    def actions(self) -> list[tuple[str, str, Callable[[], None]]]:
        return super().actions() + [
            ("7", "Shifts in a date range", self.by_date_range),
            ("8", "Shifts of a worker", self.by_worker),
            ("9", "Shifts at a location", self.by_location),
        ]

    def filter(self) -> None:
        filters: dict[str, Any] = {}
        self.out("Leave a field blank to skip it.")
        filters["worker_id"] = self.prompter.integer("Worker ID", required=False)
        filters["location_id"] = self.prompter.integer("Location ID", required=False)
        filters["location_name"] = self.prompter.text("Location name", required=False)
        start_date = self.prompter.day("Starting on or after", required=False)
        end_date = self.prompter.day("Ending on or before", required=False)
        filters["start_date"] = start_date.isoformat() if start_date else None
        filters["end_date"] = end_date.isoformat() if end_date else None
        filters["min_duration_minutes"] = self.prompter.integer("Minimum minutes", minimum=0, required=False)
        filters["max_duration_minutes"] = self.prompter.integer("Maximum minutes", minimum=0, required=False)
        filters["search"] = self.prompter.text("Search text", required=False)
        filters["sort_by"] = self.prompter.text(f"Sort by ({', '.join(self.sort_fields)})", required=False)
        filters["sort_order"] = self.prompter.text("Sort order (asc/desc)", required=False)
        filters["page_size"] = self.prompter.integer("Page size", required=False)
        self.browse(filters)

    def _ask_fields(self, current: dict[str, Any] | None = None) -> tuple:
        current = current or {}
        while True:
            worker_id = self.prompter.integer("Worker ID", default=current.get("worker_id"))
            location_id = self.prompter.integer("Location ID", default=current.get("location_id"))
            start_time = self.prompter.timestamp("Start", default=current.get("start_time"))
            end_time = self.prompter.timestamp("End", default=current.get("end_time"))
            error = validate_shift_fields(worker_id, location_id, start_time, end_time)
            if error is None:
                return worker_id, location_id, start_time, end_time
            display.show_error(error, self.out)

    def create(self) -> None:
        display.show_response(self.service.create(*self._ask_fields()), self.columns, self.out)

    def update(self) -> None:
        shift_id = self._ask_id()
        current = self._current(shift_id)
        if current is None:
            return
        current = dict(current)
        for key in ("start_time", "end_time"):
            current[key] = parse_datetime(current[key])
        display.show_response(self.service.update(shift_id, *self._ask_fields(current)), self.columns, self.out)

    def by_date_range(self) -> None:
        start_date = self.prompter.day("From")
        end_date = self.prompter.day("To")
        if end_date < start_date:
            display.show_error("End date must be on or after start date.", self.out)
            return
        display.show_response(self.service.by_date_range(start_date, end_date), self.columns, self.out)

    def by_worker(self) -> None:
        worker_id = self.prompter.integer("Worker ID")
        display.show_response(self.service.by_worker(worker_id), self.columns, self.out)

    def by_location(self) -> None:
        location_id = self.prompter.integer("Location ID")
        display.show_response(self.service.by_location(location_id), self.columns, self.out)


class MainMenu:
    def __init__(self, api: ApiClient, prompter: Prompter) -> None:
        self.prompter = prompter
        self.menus: dict[str, EntityMenu] = {
            "1": WorkerMenu(WorkerService(api), prompter),
            "2": LocationMenu(LocationService(api), prompter),
            "3": ShiftMenu(ShiftService(api), prompter),
        }

    def run(self) -> None:
        self.prompter.out("Shifts Logger")
        options = [("1", "Workers"), ("2", "Locations"), ("3", "Shifts"), (BACK, "Exit")]
        while True:
            choice = self.prompter.choose("Main menu", options)
            if choice == BACK:
                self.prompter.out("Goodbye.")
                return
            self.menus[choice].run()


def main() -> None:
    """Console entry point (``python -m shifts_logger.console``)."""
    with ApiClient() as api:
        try:
            MainMenu(api, Prompter()).run()
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye.")
