"""Tests untuk endpoint submission Laporan."""

import pytest

from src.core.exceptions import ConflictError
from src.models.enums import SubmissionStatus, SubmissionType
from src.models.laporan_submission import LaporanSubmission
from src.models.laporan_template import LaporanTemplate, LaporanSection
from src.repositories.status_log import SubmissionStatusLogRepository

API = "/api/v1/laporan/submissions"


async def _seed_template(session):
    template = LaporanTemplate(instansi_id=1, instansi_level_id=1, name="Template Provinsi", year=2025)
    session.add(template)
    await session.flush()
    target_only = LaporanSection(
        template_id=template.id, code="1", title="Sosialisasi GERMAS", has_budget=False, sequence=1
    )
    full = LaporanSection(template_id=template.id, code="2", title="Senam bersama", sequence=2)
    session.add_all([target_only, full])
    await session.commit()
    return template, target_only, full


def _payload(template, target_only, full, **overrides):
    payload = {
        "template_id": template.id,
        "instansi_id": 1,
        "instansi_name": "Dinas Kesehatan Provinsi Jawa Timur",
        "instansi_level_id": 1,
        "origin_regency_id": 1,
        "report_year": 2025,
        "sections": [
            {"section_id": target_only.id, "section_title": target_only.title,
             "target_year": "12 kali", "budget_year": "tidak ditampilkan"},
            {"section_id": full.id, "section_title": full.title,
             "target_year": "52", "budget_year": 2500000},
        ],
    }
    payload.update(overrides)
    return payload


async def _create(client, session, headers, **overrides):
    template, target_only, full = await _seed_template(session)
    response = await client.post(API, json=_payload(template, target_only, full, **overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_snapshots_sections(client, session, reference_data, user_headers):
    body = await _create(client, session, user_headers)
    assert body["submission_code"].startswith("LPR-")
    assert body["status"] == "pending"
    assert body["origin_regency_name"] == "Kota Surabaya"
    assert body["report_level"] == "Instansi Tingkat Provinsi"
    assert body["template_name"] == "Template Provinsi (2025)"

    first, second = body["sections"]
    assert first["has_budget"] is False
    assert first["budget_year"] == "tidak ditampilkan"
    assert second["budget_year"] == "2500000"
    assert [section["sequence"] for section in body["sections"]] == [1, 2]
    assert len(body["status_logs"]) == 1


async def test_unknown_section_and_regency(client, session, reference_data, user_headers):
    template, target_only, full = await _seed_template(session)
    payload = _payload(template, target_only, full, origin_regency_id=77)
    payload["sections"][1]["section_id"] = "tidak-ada"
    response = await client.post(API, json=payload, headers=user_headers)
    assert response.status_code == 422
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"origin_regency_id", "sections[1].section_id"}


async def test_section_from_other_template(client, session, reference_data, user_headers):
    template, target_only, full = await _seed_template(session)
    _, _, foreign = await _seed_template(session)
    payload = _payload(template, target_only, full)
    payload["sections"][1]["section_id"] = foreign.id
    response = await client.post(API, json=payload, headers=user_headers)
    assert response.status_code == 422
    assert response.json()["errors"] == [{
        "field": "sections[1].section_id",
        "message": "Section bukan bagian dari template yang dipilih",
    }]


async def test_template_edit_keeps_section_flags(client, session, reference_data, user_headers,
                                                 reviewer_headers):
    created = await _create(client, session, user_headers)
    full_section = created["sections"][1]

    # Section pertama dihapus dari template, section kedua anggarannya dimatikan
    edit = await client.post(
        f"/api/v1/admin/templates/laporan/{created['template_id']}",
        json={"sections": [
            {"id": full_section["section_id"], "title": full_section["section_title"], "has_budget": False},
        ]},
        headers=reviewer_headers,
    )
    assert edit.status_code == 200
    assert len(edit.json()["sections"]) == 1

    detail = (await client.get(f"{API}/{created['id']}", headers=user_headers)).json()
    first, second = detail["sections"]
    assert first["has_budget"] is False
    assert first["budget_year"] == "tidak ditampilkan"
    assert second["has_budget"] is True
    assert second["budget_year"] == "2500000"


async def test_unknown_template(client, session, reference_data, user_headers):
    template, target_only, full = await _seed_template(session)
    payload = _payload(template, target_only, full, template_id="tidak-ada")
    response = await client.post(API, json=payload, headers=user_headers)
    assert response.status_code == 404


async def test_value_too_long(client, session, reference_data, user_headers):
    template, target_only, full = await _seed_template(session)
    payload = _payload(template, target_only, full)
    payload["sections"][0]["target_semester_1"] = "x" * 121
    response = await client.post(API, json=payload, headers=user_headers)
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "sections[0].target_semester_1"


async def test_verify_adds_one_log(client, session, reference_data, user_headers, reviewer_headers):
    created = await _create(client, session, user_headers)

    response = await client.patch(
        f"{API}/{created['id']}/status",
        json={"status": "verified", "notes": "lengkap"},
        headers=reviewer_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "verified"
    assert body["notes"] == "lengkap"
    assert len(body["status_logs"]) == 2
    transition = [log for log in body["status_logs"] if log["new_status"] == "verified"]
    assert len(transition) == 1
    assert transition[0]["previous_status"] == "pending"
    assert transition[0]["remarks"] == "lengkap"

    rejected = await client.patch(
        f"{API}/{created['id']}/status", json={"status": "rejected"}, headers=reviewer_headers
    )
    assert rejected.status_code == 409

    detail = await client.get(f"{API}/{created['id']}", headers=reviewer_headers)
    assert detail.json()["status"] == "verified"
    assert len(detail.json()["status_logs"]) == 2


async def test_concurrent_review_keeps_first_decision(client, session, session_factory, reference_data,
                                                      user_headers):
    created = await _create(client, session, user_headers)

    async with session_factory() as first, session_factory() as second:
        seen_by_first = await first.get(LaporanSubmission, created["id"])
        seen_by_second = await second.get(LaporanSubmission, created["id"])

        await SubmissionStatusLogRepository(first).record_transition(
            SubmissionType.LAPORAN, seen_by_first, SubmissionStatus.VERIFIED, "notes", None,
            {"id": "reviewer-1", "nama": "Reviewer Satu"},
        )
        with pytest.raises(ConflictError):
            await SubmissionStatusLogRepository(second).record_transition(
                SubmissionType.LAPORAN, seen_by_second, SubmissionStatus.REJECTED, "notes", "ditolak",
                {"id": "reviewer-2", "nama": "Reviewer Dua"},
            )

    async with session_factory() as fresh:
        stored = await fresh.get(LaporanSubmission, created["id"])
        assert stored.status == SubmissionStatus.VERIFIED
        assert stored.verified_by == "reviewer-1"
        assert stored.notes is None

        logs = await SubmissionStatusLogRepository(fresh).list_for_submission(
            SubmissionType.LAPORAN, created["id"]
        )
        assert len(logs) == 2
        assert SubmissionStatus.REJECTED not in {log.new_status for log in logs}


async def test_list_filters(client, session, reference_data, user_headers, reviewer_headers):
    created = await _create(client, session, user_headers)

    by_status = await client.get(API, params={"status": "pending"}, headers=reviewer_headers)
    assert by_status.json()["total"] == 1
    other_year = await client.get(API, params={"report_year": 2030}, headers=reviewer_headers)
    assert other_year.json()["total"] == 0
    search = await client.get(API, params={"search": created["submission_code"]}, headers=user_headers)
    assert search.json()["items"][0]["id"] == created["id"]


async def test_delete_requires_reviewer(client, session, reference_data, user_headers, reviewer_headers):
    created = await _create(client, session, user_headers)
    assert (await client.delete(f"{API}/{created['id']}", headers=user_headers)).status_code == 403
    assert (await client.delete(f"{API}/{created['id']}", headers=reviewer_headers)).status_code == 200
    assert (await client.delete(f"{API}/{created['id']}", headers=reviewer_headers)).status_code == 404


async def test_pdf_download(client, session, reference_data, user_headers, other_user_headers):
    created = await _create(client, session, user_headers)

    forbidden = await client.get(f"{API}/{created['id']}/pdf", headers=other_user_headers)
    assert forbidden.status_code == 403

    response = await client.get(f"{API}/{created['id']}/pdf", headers=user_headers)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")
