"""Tests untuk resolusi template Evaluasi/Laporan dan editor admin."""

from src.models.laporan_template import LaporanTemplate, LaporanSection

API = "/api/v1"


async def _seed_base_laporan_template(session, sections=2):
    template = LaporanTemplate(
        instansi_id=1, instansi_level_id=1, name="Template Provinsi", year=None, is_default=True
    )
    session.add(template)
    await session.flush()
    for position in range(1, sections + 1):
        session.add(LaporanSection(
            template_id=template.id, code=str(position), title=f"Kegiatan {position}", sequence=position
        ))
    await session.commit()
    return template


class TestEvaluasiTemplate:

    async def test_builtin_when_no_clusters(self, client, reference_data):
        response = await client.get(f"{API}/templates/evaluasi", params={"instansi_level_code": "provinsi"})
        assert response.status_code == 200
        body = response.json()
        assert body["source"] == "builtin"
        assert len(body["clusters"]) == 4
        assert body["total_questions"] == 16
        question_ids = [q["id"] for cluster in body["clusters"] for q in cluster["questions"]]
        assert question_ids == list(range(1, 17))

    async def test_unknown_level_code_falls_back(self, client, reference_data):
        response = await client.get(f"{API}/templates/evaluasi", params={"instansi_level_code": "planet"})
        assert response.status_code == 200
        assert response.json()["source"] == "builtin"

    async def test_admin_save_then_resolve(self, client, reference_data, reviewer_headers):
        payload = {
            "instansi_level_id": 1,
            "clusters": [{"title": "Klaster A", "questions": [{"text": "Q1"}, {"text": "Q2"}]}],
        }
        response = await client.post(f"{API}/admin/templates/evaluasi", json=payload, headers=reviewer_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["source"] == "server"
        assert body["total_questions"] == 2
        cluster = body["clusters"][0]
        q1, q2 = cluster["questions"]

        # Q2 dibuang, Q3 baru, Q1 diedit
        payload = {
            "instansi_level_id": 1,
            "clusters": [{
                "id": cluster["id"],
                "title": "Klaster A",
                "questions": [{"id": q1["id"], "text": "Q1 edit"}, {"text": "Q3"}],
            }],
        }
        response = await client.post(f"{API}/admin/templates/evaluasi", json=payload, headers=reviewer_headers)
        assert response.status_code == 200

        resolved = await client.get(f"{API}/templates/evaluasi", params={"instansi_level_code": "provinsi"})
        body = resolved.json()
        assert body["source"] == "server"
        questions = body["clusters"][0]["questions"]
        assert [q["question_text"] for q in questions] == ["Q1 edit", "Q3"]
        assert [q["sequence"] for q in questions] == [1, 2]
        assert questions[0]["id"] == q1["id"]
        assert q2["id"] not in {q["id"] for q in questions}

        # level lain tetap memakai bank bawaan
        other = await client.get(f"{API}/templates/evaluasi", params={"instansi_level_id": 2})
        assert other.json()["source"] == "builtin"

    async def test_admin_save_requires_reviewer(self, client, reference_data, user_headers):
        payload = {"instansi_level_id": 1, "clusters": [{"title": "Klaster A", "questions": []}]}
        response = await client.post(f"{API}/admin/templates/evaluasi", json=payload, headers=user_headers)
        assert response.status_code == 403

    async def test_admin_save_unknown_level(self, client, reference_data, reviewer_headers):
        payload = {"instansi_level_id": 99, "clusters": [{"title": "Klaster A", "questions": []}]}
        response = await client.post(f"{API}/admin/templates/evaluasi", json=payload, headers=reviewer_headers)
        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "instansi_level_id"


class TestLaporanTemplate:

    async def test_base_template_used_for_any_year(self, client, session, reference_data):
        await _seed_base_laporan_template(session)
        response = await client.get(
            f"{API}/templates/laporan",
            params={"year": 2027, "instansi_id": 1, "instansi_level_id": 1},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["source"] == "base"
        assert body["requested_year"] == 2027
        assert len(body["sections"]) == 2

    async def test_slug_resolution(self, client, session, reference_data):
        await _seed_base_laporan_template(session, sections=1)
        response = await client.get(
            f"{API}/templates/laporan",
            params={"instansi_slug": "dinkes-jatim", "instansi_level_id": 1},
        )
        assert response.json()["source"] == "base"

    async def test_unknown_slug_is_404(self, client, reference_data):
        response = await client.get(f"{API}/templates/laporan", params={"instansi_slug": "tidak-ada"})
        assert response.status_code == 404
        assert response.json()["code"] == "not_found"

    async def test_none_when_unconfigured(self, client, reference_data):
        response = await client.get(f"{API}/templates/laporan", params={"year": 2025, "instansi_level_id": 3})
        body = response.json()
        assert body["source"] == "none"
        assert body["template"] is None
        assert body["sections"] == []

    async def test_admin_save_clones_for_year(self, client, session, reference_data, reviewer_headers):
        base = await _seed_base_laporan_template(session)
        base_sections = (await client.get(
            f"{API}/templates/laporan", params={"instansi_id": 1, "instansi_level_id": 1}
        )).json()["sections"]

        payload = {
            "year": 2026,
            "instansi_id": 1,
            "instansi_level_id": 1,
            "sections": [
                {"id": base_sections[0]["id"], "title": "Kegiatan 1 revisi"},
                {"title": "Kegiatan baru", "has_budget": False},
            ],
        }
        response = await client.post(
            f"{API}/admin/templates/laporan/{base.id}", json=payload, headers=reviewer_headers
        )
        assert response.status_code == 200
        body = response.json()
        assert body["id"] != base.id
        assert body["year"] == 2026
        assert body["is_default"] is False
        assert [s["title"] for s in body["sections"]] == ["Kegiatan 1 revisi", "Kegiatan baru"]
        assert [s["has_budget"] for s in body["sections"]] == [True, False]

        resolved = (await client.get(
            f"{API}/templates/laporan", params={"year": 2026, "instansi_id": 1, "instansi_level_id": 1}
        )).json()
        assert resolved["source"] == "year"
        assert resolved["template"]["id"] == body["id"]

        # template dasar tidak berubah
        base_again = (await client.get(
            f"{API}/templates/laporan", params={"year": 2025, "instansi_id": 1, "instansi_level_id": 1}
        )).json()
        assert base_again["source"] == "base"
        assert [s["title"] for s in base_again["sections"]] == ["Kegiatan 1", "Kegiatan 2"]

    async def test_admin_save_unknown_template(self, client, reference_data, reviewer_headers):
        response = await client.post(
            f"{API}/admin/templates/laporan/tidak-ada",
            json={"sections": [{"title": "A"}]},
            headers=reviewer_headers,
        )
        assert response.status_code == 404

    async def test_admin_list(self, client, session, reference_data, reviewer_headers):
        await _seed_base_laporan_template(session)
        response = await client.get(f"{API}/admin/templates/laporan", headers=reviewer_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        assert len(body["items"][0]["sections"]) == 2


class TestCategories:

    async def test_list_default_bands(self, client, reference_data):
        response = await client.get(f"{API}/evaluasi/categories")
        assert response.status_code == 200
        assert [c["label"] for c in response.json()] == ["Kurang", "Cukup", "Baik"]

    async def test_replace_bands(self, client, reference_data, reviewer_headers):
        payload = {"categories": [
            {"label": "Rendah", "min_score": 0, "max_score": 59, "color_class": "text-red-600"},
            {"label": "Tinggi", "min_score": 60, "max_score": 100, "color_class": "text-green-600"},
        ]}
        response = await client.put(f"{API}/evaluasi/categories", json=payload, headers=reviewer_headers)
        assert response.status_code == 200
        assert [c["slug"] for c in response.json()] == ["rendah", "tinggi"]

    async def test_gap_rejected(self, client, reference_data, reviewer_headers):
        payload = {"categories": [
            {"label": "Rendah", "min_score": 0, "max_score": 49},
            {"label": "Tinggi", "min_score": 60, "max_score": 100},
        ]}
        response = await client.put(f"{API}/evaluasi/categories", json=payload, headers=reviewer_headers)
        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "validation_error"
        assert all(error["field"] == "categories" for error in body["errors"])

        unchanged = await client.get(f"{API}/evaluasi/categories")
        assert len(unchanged.json()) == 3

    async def test_requires_reviewer(self, client, reference_data, user_headers):
        payload = {"categories": [{"label": "Semua", "min_score": 0, "max_score": 100}]}
        response = await client.put(f"{API}/evaluasi/categories", json=payload, headers=user_headers)
        assert response.status_code == 403
