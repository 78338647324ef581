"""Shift CRUD API tests: overlap validation, time rules and lookups."""

from datetime import datetime

from httpx import AsyncClient
from sqlalchemy import func, select

from shifts_logger.models import Shift
from tests.conftest import make_location, make_shift, make_worker

URL = "/api/shifts"


def shift_body(worker_id: int, location_id: int, start: str, end: str) -> dict:
    return {"worker_id": worker_id, "location_id": location_id, "start_time": start, "end_time": end}


async def shift_count(db) -> int:
    return (await db.execute(select(func.count()).select_from(Shift))).scalar()


class TestShiftCreate:
    async def test_create_shift(self, client: AsyncClient, worker, location):
        res = await client.post(URL, json=shift_body(worker.id, location.id, "15-01-2025 09:00", "15-01-2025 17:00"))
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["shift_id"] > 0
        assert data["worker_name"] == "John Smith"
        assert data["location_name"] == "London Office"
        assert data["start_time"] == "2025-01-15T09:00:00"
        assert data["end_time"] == "2025-01-15T17:00:00"
        assert data["duration_minutes"] == 480

    async def test_iso_and_slash_formats_accepted(self, client: AsyncClient, worker, location):
        res = await client.post(URL, json=shift_body(worker.id, location.id, "2025-01-15T09:00:00", "15/01/2025 10:30"))
        assert res.status_code == 201
        assert res.json()["data"]["duration_minutes"] == 90

    async def test_back_to_back_then_overlap(self, client: AsyncClient, db, worker, location):
        """09:00-17:00 then 17:00-18:00 both succeed; a shift from 16:00 overlaps."""
        first = await client.post(URL, json=shift_body(worker.id, location.id, "2025-01-15T09:00", "2025-01-15T17:00"))
        assert first.status_code == 201
        second = await client.post(URL, json=shift_body(worker.id, location.id, "2025-01-15T17:00", "2025-01-15T18:00"))
        assert second.status_code == 201

        third = await client.post(URL, json=shift_body(worker.id, location.id, "2025-01-15T16:00", "2025-01-15T19:00"))
        assert third.status_code == 400
        body = third.json()
        assert body["request_failed"] is True
        assert "overlaps" in body["message"]
        assert f"ID {first.json()['data']['shift_id']}" in body["message"]
        assert await shift_count(db) == 2

    async def test_same_time_other_location_allowed(self, client: AsyncClient, db, worker, location, shift):
        other = await make_location(db, name="Leeds Service Centre")
        res = await client.post(URL, json=shift_body(worker.id, other.id, "2025-01-15T10:00", "2025-01-15T12:00"))
        assert res.status_code == 201

    async def test_same_time_other_worker_allowed(self, client: AsyncClient, db, location, shift):
        other = await make_worker(db, name="Sarah Johnson", email="sarah@company.com")
        res = await client.post(URL, json=shift_body(other.id, location.id, "2025-01-15T10:00", "2025-01-15T12:00"))
        assert res.status_code == 201

    async def test_end_before_start_rejected(self, client: AsyncClient, db, worker, location):
        res = await client.post(URL, json=shift_body(worker.id, location.id, "2025-01-15T17:00", "2025-01-15T09:00"))
        assert res.status_code == 400
        assert res.json()["message"] == "End time must be after start time."
        assert await shift_count(db) == 0

    async def test_end_equal_to_start_rejected(self, client: AsyncClient, worker, location):
        res = await client.post(URL, json=shift_body(worker.id, location.id, "2025-01-15T09:00", "2025-01-15T09:00"))
        assert res.status_code == 400

    async def test_time_rule_checked_before_any_lookup(self, client: AsyncClient):
        """Unknown ids do not matter when the times are already invalid."""
        res = await client.post(URL, json=shift_body(77, 88, "2025-01-15T17:00", "2025-01-15T09:00"))
        assert res.status_code == 400
        assert res.json()["message"] == "End time must be after start time."

    async def test_unknown_worker_rejected(self, client: AsyncClient, location):
        res = await client.post(URL, json=shift_body(999, location.id, "2025-01-15T09:00", "2025-01-15T17:00"))
        assert res.status_code == 400
        assert res.json()["message"] == "Worker with ID 999 does not exist."

    async def test_unknown_location_rejected(self, client: AsyncClient, worker):
        res = await client.post(URL, json=shift_body(worker.id, 999, "2025-01-15T09:00", "2025-01-15T17:00"))
        assert res.status_code == 400
        assert res.json()["message"] == "Location with ID 999 does not exist."

    async def test_zero_worker_id_rejected(self, client: AsyncClient, location):
        res = await client.post(URL, json=shift_body(0, location.id, "2025-01-15T09:00", "2025-01-15T17:00"))
        assert res.status_code == 400
        assert res.json()["message"] == "WorkerId must be greater than zero."

    async def test_unparseable_time_rejected(self, client: AsyncClient, worker, location):
        res = await client.post(URL, json=shift_body(worker.id, location.id, "tomorrow", "2025-01-15T17:00"))
        assert res.status_code == 400
        body = res.json()
        assert body["request_failed"] is True
        assert body["message"].startswith("Validation failed")
        assert "start_time" in body["message"]


class TestShiftUpdate:
    async def test_update_own_interval_not_an_overlap(self, client: AsyncClient, shift):
        """Extending a shift is compared against other shifts only."""
        res = await client.put(f"{URL}/{shift.id}", json=shift_body(
            shift.worker_id, shift.location_id, "2025-01-15T08:00", "2025-01-15T18:00"
        ))
        assert res.status_code == 200
        assert res.json()["data"]["duration_minutes"] == 600

    async def test_update_into_overlap_rejected(self, client: AsyncClient, db, worker, location, shift):
        later = await make_shift(db, worker, location, datetime(2025, 1, 15, 18), datetime(2025, 1, 15, 22))
        res = await client.put(f"{URL}/{later.id}", json=shift_body(
            worker.id, location.id, "2025-01-15T16:00", "2025-01-15T22:00"
        ))
        assert res.status_code == 400
        assert f"ID {shift.id}" in res.json()["message"]

        unchanged = (await client.get(f"{URL}/{later.id}")).json()["data"]
        assert unchanged["start_time"] == "2025-01-15T18:00:00"

    async def test_update_moves_shift_to_another_worker(self, client: AsyncClient, db, location, shift):
        other = await make_worker(db, name="Mike Davis", email="mike@company.com")
        res = await client.put(f"{URL}/{shift.id}", json=shift_body(
            other.id, location.id, "2025-01-15T09:00", "2025-01-15T17:00"
        ))
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["worker_id"] == other.id
        assert data["worker_name"] == "Mike Davis"

    async def test_update_nonexistent_shift(self, client: AsyncClient, worker, location):
        res = await client.put(f"{URL}/999", json=shift_body(worker.id, location.id, "2025-01-15T09:00", "2025-01-15T17:00"))
        assert res.status_code == 404
        assert res.json()["message"] == "Shift with ID 999 not found."


class TestShiftReadDelete:
    async def test_get_shift(self, client: AsyncClient, shift):
        res = await client.get(f"{URL}/{shift.id}")
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["worker_name"] == "John Smith"
        assert data["location_name"] == "London Office"

    async def test_delete_shift(self, client: AsyncClient, db, shift):
        res = await client.delete(f"{URL}/{shift.id}")
        assert res.status_code == 200
        assert await shift_count(db) == 0

    async def test_delete_nonexistent_shift(self, client: AsyncClient):
        res = await client.delete(f"{URL}/999")
        assert res.status_code == 404


class TestShiftLookups:
    async def test_by_date_range(self, client: AsyncClient, db, worker, location):
        await make_shift(db, worker, location, datetime(2025, 1, 10, 9), datetime(2025, 1, 10, 17))
        inside = await make_shift(db, worker, location, datetime(2025, 1, 12, 9), datetime(2025, 1, 12, 17))
        last_day = await make_shift(db, worker, location, datetime(2025, 1, 14, 20), datetime(2025, 1, 14, 23))
        await make_shift(db, worker, location, datetime(2025, 1, 14, 23, 30), datetime(2025, 1, 15, 1))
        await make_shift(db, worker, location, datetime(2025, 1, 15, 9), datetime(2025, 1, 15, 17))

        res = await client.get(f"{URL}/by-date-range", params={"start_date": "2025-01-11", "end_date": "2025-01-14"})
        assert res.status_code == 200
        body = res.json()
        assert [s["shift_id"] for s in body["data"]] == [inside.id, last_day.id]
        assert body["total_count"] == 2

    async def test_by_date_range_reversed(self, client: AsyncClient):
        res = await client.get(f"{URL}/by-date-range", params={"start_date": "2025-01-14", "end_date": "2025-01-11"})
        assert res.status_code == 400

    async def test_by_worker(self, client: AsyncClient, db, worker, location, shift):
        other = await make_worker(db, name="Other", email="other@company.com")
        await make_shift(db, other, location, datetime(2025, 1, 16, 9), datetime(2025, 1, 16, 17))

        res = await client.get(f"{URL}/worker/{worker.id}")
        assert res.status_code == 200
        assert [s["shift_id"] for s in res.json()["data"]] == [shift.id]

    async def test_by_unknown_worker(self, client: AsyncClient):
        res = await client.get(f"{URL}/worker/999")
        assert res.status_code == 404

    async def test_by_location(self, client: AsyncClient, location, shift):
        res = await client.get(f"{URL}/location/{location.id}")
        assert res.status_code == 200
        assert res.json()["total_count"] == 1
