import datetime as dt

import pytest
from fastapi.testclient import TestClient

from athlete_monitor.core.enums import AthleteStatus
from athlete_monitor.core.errors import ConflictError
from athlete_monitor.models.assessment import Assessment
from athlete_monitor.models.athlete import Athlete
from athlete_monitor.models.user import User
from athlete_monitor.schemas.assessment import AssessmentCreate
from athlete_monitor.services.assessments import submit_assessment

PRIMA_METRICS = {
    "Rehabilitasi": {"Cedera": 1, "Pemulihan": 9},
    "Pemeriksaan Fisik": {"Kekuatan": 9, "Kecepatan": 8, "Fleksibilitas": 8},
    "Kesehatan Mental": {"Motivasi": 9, "Fokus": 8, "Stress": 8},
    "Kualitas Tidur": {"Rata-rata Jam Tidur": 8, "Kualitas": 8},
}


def submit(client: TestClient, headers: dict, athlete_id: int, day: str, metrics: dict, **extra):
    return client.post(
        "/assessments",
        json={"athlete_id": athlete_id, "date": day, "metrics": metrics, **extra},
        headers=headers,
    )


def test_submit_assessment_classifies_and_updates_athlete(client: TestClient, medis_headers, athlete):
    response = submit(
        client, medis_headers, athlete["id"], "2025-10-10", PRIMA_METRICS, weight_kg=71.5, notes="ok"
    )
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["status"] == "Prima"

    detail = client.get(f"/athletes/{athlete['id']}", headers=medis_headers).json()
    assert detail["status"] == "Prima"
    assert detail["last_assessment_date"] == "2025-10-10"
    assert detail["latest_assessment"]["id"] == body["assessment_id"]
    assert detail["latest_assessment"]["weight_kg"] == 71.5


def test_duplicate_date_is_a_conflict(client: TestClient, medis_headers, athlete):
    first = submit(client, medis_headers, athlete["id"], "2025-10-10", PRIMA_METRICS)
    assert first.status_code == 201
    duplicate = submit(
        client, medis_headers, athlete["id"], "2025-10-10", {"Rehabilitasi": {"Cedera": 9}}
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"] == (
        "Assessment already exists for this athlete on the selected date."
    )

    detail = client.get(f"/athletes/{athlete['id']}", headers=medis_headers).json()
    assert detail["status"] == "Prima"
    assert len(client.get(f"/assessments/athlete/{athlete['id']}", headers=medis_headers).json()) == 1


def test_back_dated_assessment_keeps_latest_status(client: TestClient, medis_headers, athlete):
    submit(client, medis_headers, athlete["id"], "2025-10-10", PRIMA_METRICS)
    older = submit(
        client, medis_headers, athlete["id"], "2025-10-01", {"Rehabilitasi": {"Cedera": 9}}
    )
    assert older.status_code == 201
    assert older.json()["status"] == "Rehabilitasi"

    detail = client.get(f"/athletes/{athlete['id']}", headers=medis_headers).json()
    assert detail["status"] == "Prima"
    assert detail["last_assessment_date"] == "2025-10-10"

    newer = submit(client, medis_headers, athlete["id"], "2025-10-12", {"Rehabilitasi": {"Cedera": 9}})
    assert newer.status_code == 201
    detail = client.get(f"/athletes/{athlete['id']}", headers=medis_headers).json()
    assert detail["status"] == "Rehabilitasi"


def test_only_medical_staff_submit(client: TestClient, coach_headers, athlete):
    response = submit(client, coach_headers, athlete["id"], "2025-10-10", PRIMA_METRICS)
    assert response.status_code == 403


def test_athlete_of_other_team_is_not_found(client: TestClient, make_headers, athlete):
    rival = make_headers("rival@test.com", "medis", team_name="Tim Lawan")
    response = submit(client, rival, athlete["id"], "2025-10-10", PRIMA_METRICS)
    assert response.status_code == 404
    assert response.json()["detail"] == "Athlete not found."


def test_invalid_snapshot_is_rejected(client: TestClient, medis_headers, athlete):
    unknown = submit(client, medis_headers, athlete["id"], "2025-10-10", {"Nutrisi": {"Protein": 5}})
    assert unknown.status_code == 422
    out_of_range = submit(
        client, medis_headers, athlete["id"], "2025-10-10", {"Pemeriksaan Fisik": {"Kekuatan": 15}}
    )
    assert out_of_range.status_code == 422
    missing = client.post(
        "/assessments", json={"athlete_id": athlete["id"], "date": "2025-10-10"}, headers=medis_headers
    )
    assert missing.status_code == 422


def test_list_and_read_assessments(client: TestClient, medis_headers, coach_headers, athlete):
    submit(client, medis_headers, athlete["id"], "2025-10-01", {"Rehabilitasi": {"Pemulihan": 3}})
    created = submit(client, medis_headers, athlete["id"], "2025-10-05", PRIMA_METRICS).json()

    listing = client.get(f"/assessments/athlete/{athlete['id']}", headers=coach_headers)
    assert listing.status_code == 200
    assert [item["date"] for item in listing.json()] == ["2025-10-05", "2025-10-01"]

    single = client.get(f"/assessments/{created['assessment_id']}", headers=coach_headers)
    assert single.status_code == 200
    body = single.json()
    assert body["assessor_name"] == "Dr. Budi"
    metrics = {(m["category"], m["name"]): m["value"] for m in body["metrics"]}
    assert metrics[("Pemeriksaan Fisik", "Kekuatan")] == 9
    assert len(metrics) == 10

    assert client.get("/assessments/9999", headers=coach_headers).status_code == 404


def test_metric_structure(client: TestClient, coach_headers):
    response = client.get("/assessments/metrics/structure", headers=coach_headers)
    assert response.status_code == 200
    structure = response.json()
    assert structure["Rehabilitasi"] == ["Cedera", "Pemulihan"]
    assert "Rata-rata Jam Tidur" in structure["Kualitas Tidur"]


def test_concurrent_same_date_insert_rolls_back(
    client: TestClient, medis_headers, athlete, db_session, monkeypatch
):
    first = submit(client, medis_headers, athlete["id"], "2025-10-10", PRIMA_METRICS)
    assert first.status_code == 201

    # Hide the earlier row from the duplicate lookup, as if a second writer
    # read the table before the first one committed.
    real_query = db_session.query

    class _NoDuplicate:
        def filter(self, *args):
            return self

        def first(self):
            return None

    def query(*entities):
        if len(entities) == 1 and entities[0] is Assessment.id:
            return _NoDuplicate()
        return real_query(*entities)

    monkeypatch.setattr(db_session, "query", query)

    row = db_session.get(Athlete, athlete["id"])
    author = real_query(User).filter_by(email="medis@test.com").one()
    payload = AssessmentCreate(
        athlete_id=row.id,
        date=dt.date(2025, 10, 10),
        metrics={"Rehabilitasi": {"Cedera": 9}},
    )
    with pytest.raises(ConflictError):
        submit_assessment(db_session, row, author, payload)

    assert real_query(Assessment).filter_by(athlete_id=row.id).count() == 1
    db_session.refresh(row)
    assert row.status == AthleteStatus.PRIMA
    assert row.last_assessment_date == dt.date(2025, 10, 10)
