"""Tests untuk endpoint submission Evaluasi."""

from sqlalchemy import update

from src.models.evaluasi_template import EvaluationCategory
from src.models.enums import SubmissionType
from src.repositories.status_log import SubmissionStatusLogRepository
from src.templates.default_evaluasi import DEFAULT_EVALUASI_CLUSTERS

API = "/api/v1/evaluasi/submissions"


def _builtin_answers(yes_count):
    questions = [question for cluster in DEFAULT_EVALUASI_CLUSTERS for question in cluster["questions"]]
    return [
        {
            "question_id": question["id"],
            "question_text": question["text"],
            "answer_value": 1 if index < yes_count else 0,
        }
        for index, question in enumerate(questions)
    ]


def _payload(**overrides):
    payload = {
        "instansi_id": 1,
        "instansi_name": "Dinas Kesehatan Provinsi Jawa Timur",
        "instansi_level_id": 1,
        "origin_regency_id": 1,
        "origin_district_id": 1,
        "origin_village_id": 1,
        "pejabat_nama": "Budi",
        "employee_male_count": 10,
        "employee_female_count": 12,
        "evaluation_date": "2025-01-14",
        "answers": _builtin_answers(12),
    }
    payload.update(overrides)
    return payload


async def _create(client, headers, **overrides):
    response = await client.post(API, json=_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreate:

    async def test_score_and_category(self, client, reference_data, user_headers):
        body = await _create(client, user_headers)
        assert body["score"] == 75
        assert body["category_label"] == "Cukup"
        assert body["category"]["slug"] == "cukup"
        assert body["status"] == "pending"
        assert body["submission_code"].startswith("EVL-")
        assert body["report_year"] == 2025
        assert body["instansi_level_text"] == "Instansi Tingkat Provinsi"
        assert body["origin_regency_name"] == "Kota Surabaya"
        assert body["origin_village_name"] == "Warugunung"
        assert len(body["answers"]) == 16
        assert len(body["status_logs"]) == 1
        assert body["status_logs"][0]["previous_status"] is None
        assert body["status_logs"][0]["new_status"] == "pending"

    async def test_invalid_answer_creates_nothing(self, client, reference_data, user_headers):
        answers = _builtin_answers(12)
        answers[3]["answer_value"] = 2
        response = await client.post(API, json=_payload(answers=answers), headers=user_headers)
        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "validation_error"
        assert {"field": "answers[3].answer_value", "question_id": 4}.items() <= body["errors"][0].items()

        listing = await client.get(API, headers=user_headers)
        assert listing.json()["total"] == 0

    async def test_non_integer_answer_rejected(self, client, reference_data, user_headers):
        answers = _builtin_answers(12)
        answers[0]["answer_value"] = True
        answers[1]["answer_value"] = "1"
        response = await client.post(API, json=_payload(answers=answers), headers=user_headers)
        assert response.status_code == 422
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"answers[0].answer_value", "answers[1].answer_value"} <= fields

        listing = await client.get(API, headers=user_headers)
        assert listing.json()["total"] == 0

    async def test_all_errors_reported(self, client, reference_data, user_headers):
        response = await client.post(
            API,
            json=_payload(instansi_level_id=99, origin_district_id=42, employee_male_count=-3),
            headers=user_headers,
        )
        assert response.status_code == 422
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"instansi_level_id", "origin_district_id", "employee_male_count"} <= fields

    async def test_late_when_after_deadline(self, client, reference_data, user_headers, reviewer_headers):
        setting = await client.post(
            "/api/v1/reporting-settings",
            json={"reporting_year": 2024, "reporting_deadline": "2024-01-31"},
            headers=reviewer_headers,
        )
        assert setting.status_code == 200

        late = await _create(client, user_headers, report_year=2024)
        on_time = await _create(client, user_headers, report_year=2025)
        assert late["is_late"] is True
        assert on_time["is_late"] is False

    async def test_requires_token(self, client, reference_data):
        response = await client.post(API, json=_payload())
        assert response.status_code == 401


class TestCategoryBands:

    async def test_uncovered_score_saved_without_category(self, client, session, reference_data,
                                                          user_headers):
        # Band Cukup dipersempit sehingga 71-75 tidak tercakup
        await session.execute(
            update(EvaluationCategory).where(EvaluationCategory.slug == "cukup").values(max_score=70)
        )
        await session.commit()

        body = await _create(client, user_headers)
        assert body["score"] == 75
        assert body["category"] is None
        assert body["category_label"] is None
        assert body["status"] == "pending"

    async def test_band_change_keeps_stored_category(self, client, reference_data, user_headers,
                                                     reviewer_headers):
        created = await _create(client, user_headers)
        assert created["category_label"] == "Cukup"

        bands = {"categories": [
            {"label": "Rendah", "min_score": 0, "max_score": 80},
            {"label": "Tinggi", "min_score": 81, "max_score": 100},
        ]}
        response = await client.put("/api/v1/evaluasi/categories", json=bands, headers=reviewer_headers)
        assert response.status_code == 200

        detail = (await client.get(f"{API}/{created['id']}", headers=user_headers)).json()
        assert detail["score"] == 75
        assert detail["category_label"] == "Cukup"

        listing = (await client.get(API, headers=user_headers)).json()
        assert listing["items"][0]["category_label"] == "Cukup"


class TestAccess:

    async def test_owner_sees_only_own(self, client, reference_data, user_headers, other_user_headers,
                                       reviewer_headers):
        await _create(client, user_headers)
        await _create(client, other_user_headers)

        own = await client.get(API, headers=user_headers)
        assert own.json()["total"] == 1

        everything = await client.get(API, headers=reviewer_headers)
        assert everything.json()["total"] == 2

    async def test_detail_of_other_user_forbidden(self, client, reference_data, user_headers,
                                                  other_user_headers, reviewer_headers):
        created = await _create(client, user_headers)

        assert (await client.get(f"{API}/{created['id']}", headers=other_user_headers)).status_code == 403
        assert (await client.get(f"{API}/{created['id']}", headers=user_headers)).status_code == 200
        assert (await client.get(f"{API}/{created['id']}", headers=reviewer_headers)).status_code == 200

    async def test_unknown_submission(self, client, reference_data, reviewer_headers):
        response = await client.get(f"{API}/tidak-ada", headers=reviewer_headers)
        assert response.status_code == 404


class TestStatusAndDelete:

    async def test_verify_once(self, client, reference_data, user_headers, reviewer_headers):
        created = await _create(client, user_headers)

        response = await client.patch(
            f"{API}/{created['id']}/status",
            json={"status": "verified", "remarks": "sesuai"},
            headers=reviewer_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "verified"
        assert body["verified_by"] == "reviewer-1"
        assert body["remarks"] == "sesuai"
        assert len(body["status_logs"]) == 2

        again = await client.patch(
            f"{API}/{created['id']}/status", json={"status": "rejected"}, headers=reviewer_headers
        )
        assert again.status_code == 409
        assert again.json()["code"] == "conflict"

    async def test_status_requires_reviewer(self, client, reference_data, user_headers):
        created = await _create(client, user_headers)
        response = await client.patch(
            f"{API}/{created['id']}/status", json={"status": "verified"}, headers=user_headers
        )
        assert response.status_code == 403

    async def test_delete_keeps_status_logs(self, client, session, reference_data, user_headers,
                                            reviewer_headers):
        created = await _create(client, user_headers)

        response = await client.delete(f"{API}/{created['id']}", headers=reviewer_headers)
        assert response.status_code == 200
        assert response.json()["data"]["submission_code"] == created["submission_code"]

        assert (await client.get(f"{API}/{created['id']}", headers=reviewer_headers)).status_code == 404
        logs = await SubmissionStatusLogRepository(session).count_for_submission(
            SubmissionType.EVALUASI, created["id"]
        )
        assert logs == 1


async def test_pdf_download(client, reference_data, user_headers):
    created = await _create(client, user_headers)
    response = await client.get(f"{API}/{created['id']}/pdf", headers=user_headers)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert created["submission_code"] in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")
