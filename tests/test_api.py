"""End-to-end API tests against an in-memory database."""

from tests.conftest import sign_up

API = "/api/v1"


def _make_routine(client, headers, name="Push Day"):
    r = client.post(f"{API}/folders", json={"name": "Hypertrophy"}, headers=headers)
    assert r.status_code == 201, r.text
    r = client.post(f"{API}/routines", json={"name": name, "folder_id": r.json()["id"]}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["id"]


def _make_exercise(client, headers, routine_id, **fields):
    body = {"name": "Bench Press", "routine_id": routine_id, "reps_min": 8, "reps_max": 12, **fields}
    r = client.post(f"{API}/exercises", json=body, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["id"]


def test_health(client):
    assert client.get(f"{API}/health").json()["status"] == "ok"
    assert client.get("/").json()["status"] == "ok"


def test_auth_flow(client):
    headers = sign_up(client)
    r = client.get(f"{API}/auth/session", headers=headers)
    assert r.status_code == 200
    assert r.json()["email"] == "lifter@example.com"

    r = client.post(f"{API}/auth/sign-in", json={"email": "lifter@example.com", "password": "wrong-password"})
    assert r.status_code == 401
    r = client.post(f"{API}/auth/sign-in", json={"email": "Lifter@example.com", "password": "squat-every-day"})
    assert r.status_code == 200

    assert client.post(f"{API}/auth/sign-out", headers=headers).status_code == 204
    assert client.get(f"{API}/auth/session", headers=headers).status_code == 401


def test_duplicate_sign_up(client):
    sign_up(client)
    r = client.post(f"{API}/auth/sign-up", json={"email": "lifter@example.com", "password": "another-pass"})
    assert r.status_code == 409


def test_owned_endpoints_require_auth(client):
    assert client.get(f"{API}/folders").status_code == 401
    assert client.get(f"{API}/folders", headers={"Authorization": "Bearer nope"}).status_code == 401


def test_records_are_scoped_to_owner(client, auth_headers):
    routine_id = _make_routine(client, auth_headers)
    other = sign_up(client, email="other@example.com")
    assert client.get(f"{API}/folders", headers=other).json() == []
    r = client.post(f"{API}/exercises", json={"name": "Dip", "routine_id": routine_id}, headers=other)
    assert r.status_code == 404


def test_folder_routine_exercise_crud(client, auth_headers):
    routine_id = _make_routine(client, auth_headers)
    exercise_id = _make_exercise(client, auth_headers, routine_id)

    r = client.patch(f"{API}/exercises/{exercise_id}", json={"reps_max": 10}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["reps_max"] == 10
    r = client.patch(f"{API}/exercises/{exercise_id}", json={"reps_min": 11}, headers=auth_headers)
    assert r.status_code == 422

    r = client.get(f"{API}/exercises", params={"routine_id": routine_id}, headers=auth_headers)
    assert [e["id"] for e in r.json()] == [exercise_id]

    r = client.post(
        f"{API}/exercises",
        json={"name": "Bad", "routine_id": routine_id, "reps_min": 12, "reps_max": 8},
        headers=auth_headers,
    )
    assert r.status_code == 422

    assert client.delete(f"{API}/routines/{routine_id}", headers=auth_headers).status_code == 204
    assert client.get(f"{API}/exercises/{exercise_id}", headers=auth_headers).status_code == 404


def test_logging_attaches_recommendation(client, auth_headers):
    routine_id = _make_routine(client, auth_headers)
    bench = _make_exercise(client, auth_headers, routine_id)
    curl = _make_exercise(client, auth_headers, routine_id, name="Curl", equipment="dumbbell")

    r = client.post(f"{API}/exercises/{bench}/logs", json={"reps": 12, "weight": 60, "sets": 3}, headers=auth_headers)
    assert r.status_code == 201, r.text
    rec = r.json()["recommendation"]
    assert rec["action"] == "increase_weight"
    assert rec["new_weight"] == 62.5
    assert rec["target_reps"] == 8

    r = client.post(f"{API}/exercises/{curl}/logs", json={"reps": 12, "weight": 10}, headers=auth_headers)
    assert r.json()["recommendation"]["new_weight"] == 12.0

    r = client.post(f"{API}/exercises/{bench}/logs", json={"reps": 5, "weight": 62.5}, headers=auth_headers)
    assert r.json()["recommendation"]["action"] == "maintain"
    r = client.post(f"{API}/exercises/{bench}/logs", json={"reps": 6, "weight": 62.5}, headers=auth_headers)
    rec = r.json()["recommendation"]
    assert rec["action"] == "check_recovery"
    assert rec["needs_recovery_check"] is True

    r = client.get(f"{API}/logs", params={"exercise_id": bench}, headers=auth_headers)
    assert [log["reps"] for log in r.json()] == [6, 5, 12]


def test_active_workout_lifecycle(client, auth_headers):
    routine_id = _make_routine(client, auth_headers)

    r = client.post(f"{API}/workouts/active", json={"routine_id": routine_id}, headers=auth_headers)
    assert r.status_code == 409

    bench = _make_exercise(client, auth_headers, routine_id)
    r = client.post(f"{API}/workouts/active", json={"routine_id": routine_id}, headers=auth_headers)
    assert r.status_code == 201, r.text
    assert r.json()["exercise_ids"] == [bench]

    r = client.post(
        f"{API}/workouts/active/sets",
        json={"exercise_id": bench, "reps": 10, "weight": 50, "sets": 3},
        headers=auth_headers,
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["log"]["recommendation"]["action"] == "increase_reps"
    assert body["workout"]["total_sets"] == 3
    assert body["workout"]["total_volume"] == 1500

    r = client.post(f"{API}/workouts/active/complete", headers=auth_headers)
    assert r.status_code == 200
    summary = r.json()
    assert summary["status"] == "completed"
    assert summary["total_sets"] == 3
    assert summary["completed_exercises"] == [bench]

    assert client.get(f"{API}/workouts/active", headers=auth_headers).json() is None
    assert client.post(f"{API}/workouts/active/complete", headers=auth_headers).json() is None

    history = client.get(f"{API}/workouts", headers=auth_headers).json()
    assert len(history) == 1
    logs = client.get(f"{API}/logs", headers=auth_headers).json()
    assert logs[0]["workout_id"] == summary["id"]


def test_active_workout_errors(client, auth_headers):
    r = client.post(
        f"{API}/workouts/active",
        json={"routine_id": "00000000-0000-0000-0000-000000000042"},
        headers=auth_headers,
    )
    assert r.status_code == 404
    assert r.json()["detail"] == "Plan not found"

    r = client.post(
        f"{API}/workouts/active/sets",
        json={"exercise_id": "00000000-0000-0000-0000-000000000042", "reps": 5},
        headers=auth_headers,
    )
    assert r.status_code == 409

    routine_id = _make_routine(client, auth_headers)
    _make_exercise(client, auth_headers, routine_id)
    client.post(f"{API}/workouts/active", json={"routine_id": routine_id}, headers=auth_headers)
    r = client.post(
        f"{API}/workouts/active/sets",
        json={"exercise_id": "00000000-0000-0000-0000-000000000042", "reps": 5},
        headers=auth_headers,
    )
    assert r.status_code == 404
    assert client.post(f"{API}/workouts/active/cancel", headers=auth_headers).json()["status"] == "cancelled"


def test_progression_endpoints(client):
    r = client.post(
        f"{API}/progression/evaluate",
        json={"reps_done": 12, "weight": 100, "reps_min": 8, "reps_max": 12},
    )
    assert r.status_code == 200
    assert r.json()["new_weight"] == 102.5

    r = client.post(
        f"{API}/progression/evaluate",
        json={"reps_done": 12, "weight": 50, "reps_min": 8, "reps_max": 12, "equipment": "dumbbell", "unit": "lbs"},
    )
    assert r.json()["new_weight"] == 55

    r = client.post(
        f"{API}/progression/evaluate",
        json={"reps_done": 6, "weight": 100, "reps_min": 8, "reps_max": 12, "history": [{"reps_done": 7}]},
    )
    assert r.json()["action"] == "check_recovery"

    r = client.post(
        f"{API}/progression/evaluate",
        json={"reps_done": 6, "weight": 100, "reps_min": 12, "reps_max": 8},
    )
    assert r.status_code == 422

    r = client.post(
        f"{API}/progression/session",
        json={
            "session": {
                "exercises": [
                    {"name": "Squat", "reps": 10, "weight": 100, "reps_min": 6, "reps_max": 10},
                    {"name": "Row", "reps": 4, "weight": 60, "reps_min": 6, "reps_max": 10},
                ]
            },
            "previous_sessions": [],
        },
    )
    assert [(x["exercise_name"], x["action"]) for x in r.json()] == [
        ("Squat", "increase_weight"),
        ("Row", "maintain"),
    ]

    assert client.get(f"{API}/progression/one-rep-max", params={"weight": 100, "reps": 10}).json()["one_rep_max"] == 133
    assert client.get(f"{API}/progression/volume-load", params={"weight": 100, "reps": 10, "sets": 3}).json()["volume_load"] == 3000
    r = client.get(f"{API}/progression/weight-increment", params={"equipment": "unknown", "unit": "kg"})
    assert r.json()["increment"] == 2.5
    assert len(client.get(f"{API}/progression/rir-scale").json()) == 5


def test_recovery_endpoints(client):
    factors = client.get(f"{API}/recovery/factors").json()
    assert [f["id"] for f in factors] == ["sleep", "stress", "nutrition", "soreness", "energy"]

    r = client.post(f"{API}/recovery/score", json={"sleep": "poor", "stress": "low", "mood": "great"})
    assert r.status_code == 200
    body = r.json()
    assert body["total_impact"] == -1
    assert body["should_deload"] is False
    assert body["overall_recommendation"] == "Proceed with caution, listen to your body"


def test_sets_in_one_workout_are_not_earlier_sessions(client, auth_headers):
    routine_id = _make_routine(client, auth_headers)
    bench = _make_exercise(client, auth_headers, routine_id)
    client.post(f"{API}/workouts/active", json={"routine_id": routine_id}, headers=auth_headers)

    actions = []
    for _ in range(2):
        r = client.post(
            f"{API}/workouts/active/sets",
            json={"exercise_id": bench, "reps": 7, "weight": 60},
            headers=auth_headers,
        )
        assert r.status_code == 201, r.text
        actions.append(r.json()["log"]["recommendation"]["action"])
    assert actions == ["maintain", "maintain"]
    client.post(f"{API}/workouts/active/complete", headers=auth_headers)

    # next workout: the previous session's misses now count
    client.post(f"{API}/workouts/active", json={"routine_id": routine_id}, headers=auth_headers)
    r = client.post(
        f"{API}/workouts/active/sets",
        json={"exercise_id": bench, "reps": 7, "weight": 60},
        headers=auth_headers,
    )
    assert r.json()["log"]["recommendation"]["action"] == "check_recovery"
