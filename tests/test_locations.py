"""Location CRUD API tests, including country/county lookups and the delete guard."""

from httpx import AsyncClient

from tests.conftest import make_location

URL = "/api/locations"

NEW_LOCATION = {
    "name": "Leeds Service Centre",
    "address": "8 Wellington Place",
    "town": "Leeds",
    "county": "West Yorkshire",
    "post_code": "LS1 4AP",
    "country": "UK",
}


class TestLocationCreate:
    async def test_create_location(self, client: AsyncClient):
        res = await client.post(URL, json=NEW_LOCATION)
        assert res.status_code == 201
        body = res.json()
        assert body["response_code"] == 201
        data = body["data"]
        assert data["location_id"] > 0
        assert {k: data[k] for k in NEW_LOCATION} == NEW_LOCATION

    async def test_create_trims_fields(self, client: AsyncClient):
        res = await client.post(URL, json={**NEW_LOCATION, "town": "  Leeds  "})
        assert res.status_code == 201
        assert res.json()["data"]["town"] == "Leeds"

    async def test_create_with_bad_post_code(self, client: AsyncClient):
        res = await client.post(URL, json={**NEW_LOCATION, "post_code": "L$"})
        assert res.status_code == 400
        assert res.json()["message"] == "Post code must be at least 3 characters with letters or digits."

    async def test_create_with_missing_fields(self, client: AsyncClient):
        res = await client.post(URL, json={"name": "Only A Name"})
        assert res.status_code == 400
        assert res.json()["request_failed"] is True


class TestLocationRead:
    async def test_get_location(self, client: AsyncClient, location):
        res = await client.get(f"{URL}/{location.id}")
        assert res.status_code == 200
        assert res.json()["data"]["name"] == "London Office"

    async def test_get_nonexistent_location(self, client: AsyncClient):
        res = await client.get(f"{URL}/404")
        assert res.status_code == 404
        assert res.json()["message"] == "Location with ID 404 not found."


class TestLocationUpdate:
    async def test_update_location(self, client: AsyncClient, location):
        res = await client.put(f"{URL}/{location.id}", json={**NEW_LOCATION, "name": "Renamed Office"})
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["location_id"] == location.id
        assert data["name"] == "Renamed Office"
        assert data["town"] == "Leeds"

    async def test_update_nonexistent_location(self, client: AsyncClient):
        res = await client.put(f"{URL}/999", json=NEW_LOCATION)
        assert res.status_code == 404


class TestLocationDelete:
    async def test_delete_unreferenced_location(self, client: AsyncClient, location):
        res = await client.delete(f"{URL}/{location.id}")
        assert res.status_code == 200
        assert (await client.get(f"{URL}/{location.id}")).status_code == 404

    async def test_delete_location_with_shifts_blocked(self, client: AsyncClient, location, shift):
        res = await client.delete(f"{URL}/{location.id}")
        assert res.status_code == 400
        assert "London Office" in res.json()["message"]
        assert (await client.get(f"{URL}/{location.id}")).status_code == 200


class TestLocationLookups:
    async def test_by_country(self, client: AsyncClient, db):
        await make_location(db, name="London", country="United Kingdom")
        await make_location(db, name="Dublin", country="Ireland", county="Dublin")

        res = await client.get(f"{URL}/by-country/kingdom")
        assert res.status_code == 200
        body = res.json()
        assert [loc["name"] for loc in body["data"]] == ["London"]
        assert body["total_count"] == 1

    async def test_by_county(self, client: AsyncClient, db):
        await make_location(db, name="Exeter", county="Devon")
        await make_location(db, name="Plymouth", county="Devon")
        await make_location(db, name="Leeds", county="West Yorkshire")

        res = await client.get(f"{URL}/by-county/devon")
        assert [loc["name"] for loc in res.json()["data"]] == ["Exeter", "Plymouth"]

    async def test_countries_distinct_and_sorted(self, client: AsyncClient, db):
        await make_location(db, name="A", country="UK")
        await make_location(db, name="B", country="Ireland")
        await make_location(db, name="C", country="UK")

        res = await client.get(f"{URL}/countries")
        assert res.status_code == 200
        body = res.json()
        assert body["data"] == ["Ireland", "UK"]
        assert body["total_count"] == 2
