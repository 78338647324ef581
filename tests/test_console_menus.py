"""Console menu tests driven by scripted input and a mocked API."""

import json

import httpx
import pytest

from shifts_logger.console.api_client import ApiClient
from shifts_logger.console.menus import EntityMenu, MainMenu
from shifts_logger.console.prompts import Prompter


class Script:
    """Feeds scripted answers to the menus and records everything printed."""

    def __init__(self, *answers: str) -> None:
        self.answers = iter(answers)
        self.lines: list[str] = []

    def input(self, prompt: str) -> str:
        self.lines.append(prompt)
        return next(self.answers)

    def out(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def run(script: Script, handler) -> None:
    api = ApiClient(client=httpx.Client(transport=httpx.MockTransport(handler), base_url="http://api"))
    MainMenu(api, Prompter(input_fn=script.input, out=script.out)).run()


def envelope(data=None, **extra) -> dict:
    body = {"request_failed": False, "response_code": 200, "message": "ok", "data": data, "total_count": 0}
    body.update(extra)
    return body


class TestWorkerMenu:
    def test_create_reprompts_until_valid(self):
        requests = []

        def handler(request):
            requests.append(json.loads(request.content))
            data = {"worker_id": 7, **requests[-1]}
            return httpx.Response(201, json=envelope(data, response_code=201, message="Worker created successfully."))

        script = Script(
            "1", "4",
            "Jane Doe", "", "",               # no contact method: rejected locally
            "Jane Doe", "jane@company.com", "",
            "0", "0",
        )
        run(script, handler)

        assert requests == [{"name": "Jane Doe", "email": "jane@company.com", "phone_number": None}]
        assert "At least one contact method (email or phone) is required." in script.text
        assert "Worker created successfully." in script.text

    def test_list_pages_forward(self):
        pages = []

        def handler(request):
            page = int(request.url.params["page_number"])
            pages.append(page)
            rows = [{"worker_id": page, "name": f"Worker {page}", "email": None, "phone_number": "07700900123"}]
            return httpx.Response(200, json=envelope(
                rows, total_count=11, page_number=page, page_size=10, total_pages=2,
                has_next_page=page < 2, has_previous_page=page > 1,
            ))

        script = Script("1", "1", "n", "q", "0", "0")
        run(script, handler)

        assert pages == [1, 2]
        assert "Page 2 of 2" in script.text
        assert "Worker 2" in script.text

    def test_api_unreachable_is_reported(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        script = Script("1", "3", "5", "0", "0")
        run(script, handler)

        assert "Could not reach the API" in script.text


class TestShiftMenu:
    def test_create_rejects_end_before_start_then_shows_server_error(self):
        requests = []

        def handler(request):
            requests.append(json.loads(request.content))
            return httpx.Response(400, json={
                "request_failed": True,
                "response_code": 400,
                "message": "Shift overlaps an existing shift (ID 3) for this worker at this location.",
                "data": None,
                "total_count": 0,
            })

        script = Script(
            "3", "4",
            "1", "1", "15-01-2025 17:00", "15-01-2025 09:00",   # end before start: rejected locally
            "1", "1", "15-01-2025 16:00", "15/01/2025 19:00",
            "0", "0",
        )
        run(script, handler)

        assert "End time must be after start time." in script.text
        assert requests == [{
            "worker_id": 1,
            "location_id": 1,
            "start_time": "2025-01-15T16:00:00",
            "end_time": "2025-01-15T19:00:00",
        }]
        assert "Shift overlaps an existing shift (ID 3)" in script.text

    def test_view_shows_display_format(self):
        def handler(request):
            return httpx.Response(200, json=envelope({
                "shift_id": 4, "worker_id": 1, "worker_name": "John Smith",
                "location_id": 2, "location_name": "London Office",
                "start_time": "2025-01-15T09:00:00", "end_time": "2025-01-15T17:00:00",
                "duration_minutes": 480,
            }, total_count=1))

        script = Script("3", "3", "4", "0", "0")
        run(script, handler)

        assert "15-01-2025 09:00" in script.text
        assert "London Office" in script.text


class TestMainMenu:
    def test_invalid_choice_reprompts(self):
        script = Script("9", "0")
        run(script, lambda request: httpx.Response(200, json=envelope()))
        assert "Invalid selection." in script.text
        assert script.lines[-1] == "Goodbye."


class TestWorkerUpdateMenu:
    def test_update_can_clear_email(self):
        sent = []

        def handler(request):
            current = {"worker_id": 3, "name": "John Smith", "email": "john.smith@company.com", "phone_number": "+44 7911 123456"}
            if request.method == "PUT":
                sent.append(json.loads(request.content))
                return httpx.Response(200, json=envelope({**current, **sent[-1], "worker_id": 3}, message="Worker updated successfully."))
            return httpx.Response(200, json=envelope(current, total_count=1))

        script = Script(
            "1", "5", "3",
            "",    # keep name
            "-",   # clear email
            "",    # keep phone
            "0", "0",
        )
        run(script, handler)

        assert sent == [{"name": "John Smith", "email": None, "phone_number": "+44 7911 123456"}]
        assert "Worker updated successfully." in script.text

    def test_clearing_both_contacts_is_rejected_locally(self):
        sent = []

        def handler(request):
            current = {"worker_id": 3, "name": "John Smith", "email": "john.smith@company.com", "phone_number": None}
            if request.method == "PUT":
                sent.append(json.loads(request.content))
                return httpx.Response(200, json=envelope(sent[-1]))
            return httpx.Response(200, json=envelope(current, total_count=1))

        script = Script(
            "1", "5", "3",
            "", "-", "",                           # no contact method left
            "", "", "+44 7700 900123",             # keep email, add phone
            "0", "0",
        )
        run(script, handler)

        assert "At least one contact method (email or phone) is required." in script.text
        assert sent == [{"name": "John Smith", "email": "john.smith@company.com", "phone_number": "+44 7700 900123"}]


class TestEntityMenu:
    def test_base_menu_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            EntityMenu(None, Prompter())
