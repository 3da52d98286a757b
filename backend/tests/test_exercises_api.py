from fastapi.testclient import TestClient


def create_exercise(client: TestClient, headers: dict, name: str = "Squat") -> dict:
    response = client.post(
        "/exercises",
        json={"name": name, "type": "Strength", "focus_area": "Kekuatan Kaki"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_exercise_catalog(client: TestClient, medis_headers, coach_headers):
    create_exercise(client, medis_headers, "Squat")
    create_exercise(client, medis_headers, "Plank")

    listing = client.get("/exercises", headers=coach_headers)
    assert listing.status_code == 200
    assert [e["name"] for e in listing.json()] == ["Plank", "Squat"]

    forbidden = client.post(
        "/exercises",
        json={"name": "Lunge", "type": "Strength", "focus_area": "Kekuatan"},
        headers=coach_headers,
    )
    assert forbidden.status_code == 403


def test_training_program(client: TestClient, medis_headers, coach_headers, athlete):
    exercise = create_exercise(client, medis_headers)
    response = client.post(
        "/exercises/programs",
        json={
            "athlete_id": athlete["id"],
            "exercise_id": exercise["id"],
            "frequency": "3x/minggu",
            "intensity": "Sedang",
            "time": "45 menit",
            "type_fitt": "Resistance",
            "sets": 3,
            "reps": 12,
        },
        headers=medis_headers,
    )
    assert response.status_code == 201, response.text
    program = response.json()
    assert program["exercise"]["name"] == "Squat"
    assert program["sets"] == 3

    listing = client.get(f"/exercises/programs/athlete/{athlete['id']}", headers=coach_headers)
    assert [p["id"] for p in listing.json()] == [program["id"]]


def test_training_program_unknown_exercise(client: TestClient, medis_headers, athlete):
    response = client.post(
        "/exercises/programs",
        json={"athlete_id": athlete["id"], "exercise_id": 999},
        headers=medis_headers,
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Exercise not found."


def test_training_program_unknown_athlete(client: TestClient, medis_headers):
    exercise = create_exercise(client, medis_headers)
    response = client.post(
        "/exercises/programs",
        json={"athlete_id": 999, "exercise_id": exercise["id"]},
        headers=medis_headers,
    )
    assert response.status_code == 404
