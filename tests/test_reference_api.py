"""Tests untuk data referensi: wilayah, instansi, periode pelaporan."""

API = "/api/v1"


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200


class TestRegions:

    async def test_default_province(self, client, reference_data):
        response = await client.get(f"{API}/regions")
        assert response.status_code == 200
        body = response.json()
        assert body["province"]["code"] == "35"
        assert body["regencies"][0]["display_name"] == "Kota Surabaya"
        assert body["summary"] == {"regencies": 1, "kabupaten": 0, "kota": 1, "districts": 1, "villages": 1}

    async def test_unknown_province(self, client, reference_data):
        response = await client.get(f"{API}/regions", params={"province_code": "99"})
        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    async def test_districts_with_villages(self, client, reference_data):
        response = await client.get(f"{API}/regions/1/districts")
        assert response.status_code == 200
        body = response.json()
        assert body["regency"]["name"] == "Surabaya"
        assert body["districts"][0]["villages"][0]["name"] == "Warugunung"

    async def test_villages(self, client, reference_data):
        response = await client.get(f"{API}/districts/1/villages")
        assert response.status_code == 200
        body = response.json()
        assert body["district"]["name"] == "Karang Pilang"
        assert [village["code"] for village in body["villages"]] == ["3578011001"]

    async def test_unknown_regency(self, client, reference_data):
        assert (await client.get(f"{API}/regions/99/districts")).status_code == 404


class TestInstansi:

    async def test_levels(self, client, reference_data):
        response = await client.get(f"{API}/instansi-levels")
        assert response.status_code == 200
        codes = [level["code"] for level in response.json()]
        assert codes[0] == "provinsi"
        assert len(codes) == 5

    async def test_instansi(self, client, reference_data):
        response = await client.get(f"{API}/instansi")
        assert response.status_code == 200
        assert [item["slug"] for item in response.json()] == ["dinkes-jatim"]


class TestReportingSettings:

    async def test_default_setting(self, client, reference_data):
        response = await client.get(f"{API}/reporting-settings")
        assert response.status_code == 200
        assert response.json()["reporting_deadline"] is None

    async def test_save_setting(self, client, reference_data, reviewer_headers):
        payload = {"reporting_year": 2025, "reporting_deadline": "2025-12-31"}
        response = await client.post(f"{API}/reporting-settings", json=payload, headers=reviewer_headers)
        assert response.status_code == 200
        assert response.json()["updated_by"] == "reviewer-1"

        current = await client.get(f"{API}/reporting-settings")
        assert current.json()["reporting_year"] == 2025
        assert current.json()["reporting_deadline"] == "2025-12-31"

    async def test_deadline_before_year_rejected(self, client, reference_data, reviewer_headers):
        payload = {"reporting_year": 2025, "reporting_deadline": "2024-12-31"}
        response = await client.post(f"{API}/reporting-settings", json=payload, headers=reviewer_headers)
        assert response.status_code == 422

    async def test_requires_reviewer(self, client, reference_data, user_headers):
        payload = {"reporting_year": 2025}
        response = await client.post(f"{API}/reporting-settings", json=payload, headers=user_headers)
        assert response.status_code == 403
