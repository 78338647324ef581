"""Console API client tests against httpx.MockTransport."""

import json
from datetime import date, datetime

import httpx

from shifts_logger.console.api_client import ApiClient
from shifts_logger.console.services import ShiftService, WorkerService


def make_api(handler) -> ApiClient:
    return ApiClient(client=httpx.Client(transport=httpx.MockTransport(handler), base_url="http://api"))


def envelope(data=None, **extra) -> dict:
    body = {"request_failed": False, "response_code": 200, "message": "ok", "data": data, "total_count": 0}
    body.update(extra)
    return body


class TestApiClient:
    def test_success_envelope(self):
        api = make_api(lambda request: httpx.Response(200, json=envelope({"worker_id": 1}, total_count=1)))
        response = api.get("/api/workers/1")
        assert response.request_failed is False
        assert response.data == {"worker_id": 1}

    def test_failure_envelope_passed_through(self):
        body = {"request_failed": True, "response_code": 404, "message": "Worker with ID 9 not found.",
                "data": None, "total_count": 0}
        api = make_api(lambda request: httpx.Response(404, json=body))
        response = api.get("/api/workers/9")
        assert response.request_failed is True
        assert response.response_code == 404
        assert response.message == "Worker with ID 9 not found."

    def test_connection_error_becomes_500_envelope(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        response = make_api(refuse).get("/api/workers")
        assert response.request_failed is True
        assert response.response_code == 500
        assert "Could not reach the API" in response.message

    def test_timeout_becomes_500_envelope(self):
        def slow(request):
            raise httpx.ReadTimeout("too slow", request=request)

        response = make_api(slow).get("/api/workers")
        assert response.request_failed is True
        assert response.response_code == 500

    def test_non_json_body_becomes_500_envelope(self):
        api = make_api(lambda request: httpx.Response(502, text="<html>Bad Gateway</html>"))
        response = api.get("/api/workers")
        assert response.request_failed is True
        assert response.response_code == 500

    def test_paginated_envelope(self):
        body = envelope([{"worker_id": 1}], total_count=11, page_number=1, page_size=10,
                        total_pages=2, has_next_page=True, has_previous_page=False)
        page = make_api(lambda request: httpx.Response(200, json=body)).request_page("/api/workers")
        assert page.has_next_page is True
        assert page.total_pages == 2

    def test_unset_params_not_sent(self):
        seen = {}

        def capture(request):
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=envelope([]))

        make_api(capture).request_page("/api/workers", {"name": "jo", "email": None, "search": ""})
        assert seen["params"] == {"name": "jo"}


class TestConsoleServices:
    def test_worker_create_sends_body(self):
        seen = {}

        def capture(request):
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json=envelope({"worker_id": 5}, response_code=201))

        response = WorkerService(make_api(capture)).create("Jane", "jane@x.com", None)
        assert response.response_code == 201
        assert seen == {
            "method": "POST",
            "path": "/api/workers",
            "body": {"name": "Jane", "email": "jane@x.com", "phone_number": None},
        }

    def test_shift_times_sent_as_iso(self):
        seen = {}

        def capture(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json=envelope({}))

        ShiftService(make_api(capture)).create(1, 2, datetime(2025, 1, 15, 9), datetime(2025, 1, 15, 17))
        assert seen["body"]["start_time"] == "2025-01-15T09:00:00"
        assert seen["body"]["end_time"] == "2025-01-15T17:00:00"

    def test_date_range_query(self):
        seen = {}

        def capture(request):
            seen["url"] = request.url
            return httpx.Response(200, json=envelope([]))

        ShiftService(make_api(capture)).by_date_range(date(2025, 1, 1), date(2025, 1, 31))
        assert seen["url"].path == "/api/shifts/by-date-range"
        assert dict(seen["url"].params) == {"start_date": "2025-01-01", "end_date": "2025-01-31"}
