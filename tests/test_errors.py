"""Error envelope tests: unhandled errors, malformed requests, health check."""

from httpx import AsyncClient

from shifts_logger.services.worker_service import worker_service


async def test_health(client: AsyncClient):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


class TestErrorEnvelope:
    async def test_unhandled_error_is_generic_500(self, client: AsyncClient, monkeypatch):
        async def boom(*args, **kwargs):
            raise RuntimeError("database exploded")

        monkeypatch.setattr(worker_service, "get_worker", boom)

        res = await client.get("/api/workers/1")
        assert res.status_code == 500
        body = res.json()
        assert body == {
            "request_failed": True,
            "response_code": 500,
            "message": "An unexpected error occurred.",
            "data": None,
            "total_count": 0,
        }

    async def test_malformed_json_is_bad_request(self, client: AsyncClient):
        res = await client.post(
            "/api/workers", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert res.status_code == 400
        body = res.json()
        assert body["request_failed"] is True
        assert body["response_code"] == 400

    async def test_non_integer_id_is_bad_request(self, client: AsyncClient):
        res = await client.get("/api/shifts/abc")
        assert res.status_code == 400
        assert "shift_id" in res.json()["message"]

    async def test_unknown_route_uses_envelope(self, client: AsyncClient):
        res = await client.get("/api/nothing-here")
        assert res.status_code == 404
        body = res.json()
        assert body["request_failed"] is True
        assert body["response_code"] == 404
