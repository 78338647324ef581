"""콘솔 API 서비스.

Console-side services: one per resource, each a thin wrapper over ApiClient.
"""

from datetime import date, datetime
from typing import Any

from shifts_logger.console.api_client import ApiClient
from shifts_logger.schemas.common import ApiResponse, PaginatedApiResponse


class WorkerService:
    path: str = "/api/workers"

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def get_page(self, filters: dict[str, Any] | None = None) -> PaginatedApiResponse[Any]:
        return self.api.request_page(self.path, filters)

    def get(self, worker_id: int) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/{worker_id}")

    def create(self, name: str, email: str | None, phone_number: str | None) -> ApiResponse[Any]:
        return self.api.post(self.path, {"name": name, "email": email, "phone_number": phone_number})

    def update(
        self, worker_id: int, name: str, email: str | None, phone_number: str | None
    ) -> ApiResponse[Any]:
        return self.api.put(
            f"{self.path}/{worker_id}",
            {"name": name, "email": email, "phone_number": phone_number},
        )

    def delete(self, worker_id: int) -> ApiResponse[Any]:
        return self.api.delete(f"{self.path}/{worker_id}")

    def by_email_domain(self, domain: str) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/by-email-domain", {"domain": domain})

    def by_phone_area_code(self, area_code: str) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/by-phone-area-code", {"area_code": area_code})

    def without_email(self) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/without-email")


class LocationService:
    path: str = "/api/locations"

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def get_page(self, filters: dict[str, Any] | None = None) -> PaginatedApiResponse[Any]:
        return self.api.request_page(self.path, filters)

    def get(self, location_id: int) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/{location_id}")

    def create(self, fields: dict[str, str]) -> ApiResponse[Any]:
        return self.api.post(self.path, fields)

    def update(self, location_id: int, fields: dict[str, str]) -> ApiResponse[Any]:
        return self.api.put(f"{self.path}/{location_id}", fields)

    def delete(self, location_id: int) -> ApiResponse[Any]:
        return self.api.delete(f"{self.path}/{location_id}")

    def by_country(self, country: str) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/by-country/{country}")

    def by_county(self, county: str) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/by-county/{county}")

    def countries(self) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/countries")


class ShiftService:
    """Shift calls; timestamps are sent as ISO 8601."""

    path: str = "/api/shifts"

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    @staticmethod
    def _body(worker_id: int, location_id: int, start_time: datetime, end_time: datetime) -> dict[str, Any]:
        return {
            "worker_id": worker_id,
            "location_id": location_id,
            "start_time": start_time.isoformat(),
            "end_time": end_time.isoformat(),
        }

    def get_page(self, filters: dict[str, Any] | None = None) -> PaginatedApiResponse[Any]:
        return self.api.request_page(self.path, filters)

    def get(self, shift_id: int) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/{shift_id}")

    def create(
        self, worker_id: int, location_id: int, start_time: datetime, end_time: datetime
    ) -> ApiResponse[Any]:
        return self.api.post(self.path, self._body(worker_id, location_id, start_time, end_time))

    def update(
        self,
        shift_id: int,
        worker_id: int,
        location_id: int,
        start_time: datetime,
        end_time: datetime,
    ) -> ApiResponse[Any]:
        return self.api.put(
            f"{self.path}/{shift_id}", self._body(worker_id, location_id, start_time, end_time)
        )

    def delete(self, shift_id: int) -> ApiResponse[Any]:
        return self.api.delete(f"{self.path}/{shift_id}")

    def by_date_range(self, start_date: date, end_date: date) -> ApiResponse[Any]:
        return self.api.get(
            f"{self.path}/by-date-range",
            {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
        )

    def by_worker(self, worker_id: int) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/worker/{worker_id}")

    def by_location(self, location_id: int) -> ApiResponse[Any]:
        return self.api.get(f"{self.path}/location/{location_id}")
