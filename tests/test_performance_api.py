"""Stats, training sessions and coach evaluations."""


# ---------------------------------------------------------------------------
# Performance stats
# ---------------------------------------------------------------------------

def test_create_stat_defaults_goals_and_assists(client, coach, player_profile):
    response = client.post(
        "/api/stats",
        json={"playerId": player_profile["id"], "matchDate": "2025-10-24"},
        headers=coach["headers"],
    )

    assert response.status_code == 201
    body = response.json()
    assert body["goals"] == 0
    assert body["assists"] == 0
    assert body["matchDate"] == "2025-10-24"
    assert body["playerId"] == player_profile["id"]


def test_players_may_record_stats(client, player, player_profile):
    response = client.post(
        "/api/stats",
        json={"playerId": player_profile["id"], "matchDate": "2025-10-24", "passAccuracy": 87.5},
        headers=player["headers"],
    )

    assert response.status_code == 201
    assert response.json()["passAccuracy"] == 87.5


def test_create_stat_requires_player_and_match_date(client, coach, player_profile):
    for body in ({"playerId": player_profile["id"]}, {"matchDate": "2025-10-24"}, {}):
        response = client.post("/api/stats", json=body, headers=coach["headers"])
        assert response.status_code == 400
        assert response.json()["error"] == "playerId and matchDate required"


def test_pass_accuracy_must_be_a_percentage(client, coach, player_profile):
    response = client.post(
        "/api/stats",
        json={"playerId": player_profile["id"], "matchDate": "2025-10-24", "passAccuracy": 101},
        headers=coach["headers"],
    )

    assert response.status_code == 400
    assert "passAccuracy" in response.json()["message"]


def test_stat_for_unknown_player_is_rejected(client, coach):
    response = client.post(
        "/api/stats",
        json={"playerId": 9999, "matchDate": "2025-10-24"},
        headers=coach["headers"],
    )
    assert response.status_code == 400


def test_list_stats_for_player(client, coach, player_profile):
    for day in ("2025-10-10", "2025-10-03"):
        client.post(
            "/api/stats",
            json={"playerId": player_profile["id"], "matchDate": day},
            headers=coach["headers"],
        )

    response = client.get(f"/api/stats/{player_profile['id']}", headers=coach["headers"])

    assert response.status_code == 200
    assert [s["matchDate"] for s in response.json()] == ["2025-10-03", "2025-10-10"]


def test_list_stats_for_unknown_player_is_empty(client, coach):
    response = client.get("/api/stats/9999", headers=coach["headers"])

    assert response.status_code == 200
    assert response.json() == []


def test_list_stats_requires_token(client):
    assert client.get("/api/stats/1").status_code == 401


# ---------------------------------------------------------------------------
# Training sessions
# ---------------------------------------------------------------------------

def test_player_cannot_create_training_session(client, player, player_profile):
    body = {"playerId": player_profile["id"], "date": "2025-10-25", "workoutType": "Speed"}

    response = client.post("/api/training-sessions", json=body, headers=player["headers"])

    assert response.status_code == 403


def test_coach_creates_training_session(client, coach, player_profile):
    body = {
        "playerId": player_profile["id"],
        "date": "2025-10-25",
        "duration": 45,
        "workoutType": "Speed",
        "notes": "Sprint intervals",
    }

    response = client.post("/api/training-sessions", json=body, headers=coach["headers"])

    assert response.status_code == 201
    created = response.json()
    for field, value in body.items():
        assert created[field] == value

    listed = client.get(f"/api/training-sessions/{player_profile['id']}", headers=coach["headers"])
    assert [s["id"] for s in listed.json()] == [created["id"]]


def test_role_is_checked_before_body_validation(client, player):
    response = client.post("/api/training-sessions", json={}, headers=player["headers"])
    assert response.status_code == 403


def test_training_session_requires_player_and_date(client, coach, player_profile):
    response = client.post(
        "/api/training-sessions",
        json={"playerId": player_profile["id"]},
        headers=coach["headers"],
    )

    assert response.status_code == 400
    assert response.json()["error"] == "playerId and date required"


def test_players_can_read_training_sessions(client, player):
    response = client.get("/api/training-sessions/1", headers=player["headers"])

    assert response.status_code == 200
    assert response.json() == []


# ---------------------------------------------------------------------------
# Coach evaluations
# ---------------------------------------------------------------------------

def test_player_cannot_create_evaluation(client, coach, player, player_profile):
    body = {"playerId": player_profile["id"], "coachId": coach["id"], "rating": 7}

    response = client.post("/api/evaluations", json=body, headers=player["headers"])

    assert response.status_code == 403


def test_coach_creates_evaluation_and_listing_includes_coach(client, coach, player_profile):
    body = {
        "playerId": player_profile["id"],
        "coachId": coach["id"],
        "rating": 9,
        "strengths": "Pace",
        "weaknesses": "Heading",
        "comments": "Decisive",
    }

    created = client.post("/api/evaluations", json=body, headers=coach["headers"])
    assert created.status_code == 201
    assert created.json()["rating"] == 9

    listed = client.get(f"/api/evaluations/{player_profile['id']}", headers=coach["headers"])

    assert listed.status_code == 200
    (evaluation,) = listed.json()
    assert evaluation["coach"] == {"name": "Coach Carter", "email": "coach@club.com"}
    assert evaluation["strengths"] == "Pace"


def test_evaluation_requires_player_coach_and_rating(client, coach, player_profile):
    for body in (
        {"coachId": coach["id"], "rating": 5},
        {"playerId": player_profile["id"], "rating": 5},
        {"playerId": player_profile["id"], "coachId": coach["id"]},
    ):
        response = client.post("/api/evaluations", json=body, headers=coach["headers"])
        assert response.status_code == 400
        assert response.json()["error"] == "playerId, coachId, and rating required"


def test_evaluation_rating_is_range_checked(client, coach, player_profile):
    for rating in (0, 11):
        response = client.post(
            "/api/evaluations",
            json={"playerId": player_profile["id"], "coachId": coach["id"], "rating": rating},
            headers=coach["headers"],
        )
        assert response.status_code == 400


def test_evaluation_with_unknown_coach_is_rejected(client, coach, player_profile):
    response = client.post(
        "/api/evaluations",
        json={"playerId": player_profile["id"], "coachId": 9999, "rating": 5},
        headers=coach["headers"],
    )
    assert response.status_code == 400
