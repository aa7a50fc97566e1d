from fastapi import status

OTHER_USER = {"X-User-Id": "someone-else"}


def test_user_header_required(client):
    response = client.get("/api/chat-messages")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert "X-User-Id" in response.json()["error"]


# --- profile ---

def test_profile_missing_is_404(client, user_headers):
    response = client.get("/api/profile", headers=user_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Profile not found"


def test_profile_upsert_and_update(client, user_headers):
    response = client.put(
        "/api/profile",
        json={"full_name": "Jane", "role": "job_seeker", "target_role": "PM", "skills": ["SQL"], "experience_years": 2},
        headers=user_headers,
    )
    assert response.status_code == 200
    created = response.json()
    assert created["user_id"] == "user-123"
    assert created["skills"] == ["SQL"]

    response = client.put("/api/profile", json={"full_name": "Jane D.", "target_role": "Senior PM"}, headers=user_headers)
    updated = response.json()
    assert updated["id"] == created["id"]
    assert updated["target_role"] == "Senior PM"
    # Fields left out of the body are kept
    assert updated["skills"] == ["SQL"]
    assert updated["experience_years"] == 2

    assert client.get("/api/profile", headers=user_headers).json()["full_name"] == "Jane D."


def test_settings_save_keeps_readiness_score_and_avatar(client, user_headers):
    client.put(
        "/api/profile",
        json={"full_name": "Jane", "career_readiness_score": 80, "avatar_url": "https://cdn.test/jane.png"},
        headers=user_headers,
    )
    settings_form = {
        "full_name": "Jane Doe",
        "job_title": "Analyst",
        "target_role": "Data Scientist",
        "experience_years": 3,
        "skills": ["Python", "SQL"],
        "role": "job_seeker",
    }
    response = client.put("/api/profile", json=settings_form, headers=user_headers)
    assert response.status_code == 200

    profile = client.get("/api/profile", headers=user_headers).json()
    assert profile["career_readiness_score"] == 80
    assert profile["avatar_url"] == "https://cdn.test/jane.png"
    assert profile["job_title"] == "Analyst"


def test_explicit_null_clears_a_profile_field(client, user_headers):
    client.put("/api/profile", json={"job_title": "Analyst"}, headers=user_headers)
    response = client.put("/api/profile", json={"job_title": None}, headers=user_headers)
    assert response.json()["job_title"] is None


# --- chat history ---

def test_chat_history_is_oldest_first_and_clearable(client, user_headers):
    for role, content in [("user", "hi"), ("assistant", "hello!"), ("user", "help me")]:
        response = client.post("/api/chat-messages", json={"role": role, "content": content}, headers=user_headers)
        assert response.status_code == 201
    client.post("/api/chat-messages", json={"role": "user", "content": "not yours"}, headers=OTHER_USER)

    history = client.get("/api/chat-messages", headers=user_headers).json()
    assert [m["content"] for m in history] == ["hi", "hello!", "help me"]

    limited = client.get("/api/chat-messages", params={"limit": 2}, headers=user_headers).json()
    assert [m["content"] for m in limited] == ["hi", "hello!"]

    response = client.delete("/api/chat-messages", headers=user_headers)
    assert response.json() == {"deleted": 3}
    assert client.get("/api/chat-messages", headers=user_headers).json() == []
    assert len(client.get("/api/chat-messages", headers=OTHER_USER).json()) == 1


def test_chat_message_role_is_validated(client, user_headers):
    response = client.post("/api/chat-messages", json={"role": "system", "content": "x"}, headers=user_headers)
    assert response.status_code == 400


# --- resume analyses ---

def test_resume_analyses_newest_first_with_latest(client, user_headers):
    for score in (40, 55, 81):
        client.post(
            "/api/resume-analyses",
            json={"resume_text": f"resume {score}", "target_role": "PM", "ats_score": score, "strengths": ["a"]},
            headers=user_headers,
        )
    analyses = client.get("/api/resume-analyses", headers=user_headers).json()
    assert [a["ats_score"] for a in analyses] == [81, 55, 40]

    latest = client.get("/api/resume-analyses/latest", headers=user_headers).json()
    assert latest["ats_score"] == 81
    assert latest["strengths"] == ["a"]


def test_latest_resume_analysis_missing(client):
    response = client.get("/api/resume-analyses/latest", headers=OTHER_USER)
    assert response.status_code == 404


# --- job analyses ---

def test_job_analyses(client, user_headers):
    response = client.post(
        "/api/job-analyses",
        json={
            "resume_text": "r",
            "job_description": "jd",
            "ats_score": 70,
            "matched_keywords": ["Python"],
            "missing_keywords": ["Go"],
        },
        headers=user_headers,
    )
    assert response.status_code == 201
    rows = client.get("/api/job-analyses", headers=user_headers).json()
    assert len(rows) == 1
    assert rows[0]["missing_keywords"] == ["Go"]


# --- career goals / roadmap blobs ---

def test_career_goal_keeps_roadmap_blob(client, user_headers):
    roadmap = {"title": "SRE", "phases": [{"id": "phase-1", "tasks": [{"id": "task-1", "resources": []}]}]}
    response = client.post(
        "/api/career-goals",
        json={"title": "SRE Roadmap", "description": "Ops journey", "roadmap": roadmap},
        headers=user_headers,
    )
    assert response.status_code == 201
    goals = client.get("/api/career-goals", headers=user_headers).json()
    assert goals[0]["roadmap"] == roadmap
    assert goals[0]["status"] == "active"


# --- skills + analytics ---

def test_skill_progress_ordered_by_level(client, user_headers):
    for name, level in [("Go", 20), ("Python", 90), ("SQL", 60)]:
        client.post("/api/skill-progress", json={"skill_name": name, "current_level": level}, headers=user_headers)
    skills = client.get("/api/skill-progress", headers=user_headers).json()
    assert [s["skill_name"] for s in skills] == ["Python", "SQL", "Go"]


def test_skill_level_bounds(client, user_headers):
    response = client.post("/api/skill-progress", json={"skill_name": "Go", "current_level": 140}, headers=user_headers)
    assert response.status_code == 400


def test_analytics_summary(client, user_headers):
    empty = client.get("/api/analytics", headers=user_headers).json()
    assert empty["resume_analyses"] == 0
    assert empty["average_ats_score"] == 0
    assert empty["score_history"] == []

    for score in (60, 70, 81):
        client.post("/api/resume-analyses", json={"resume_text": "r", "ats_score": score}, headers=user_headers)
    for level in (30, 50):
        client.post("/api/skill-progress", json={"skill_name": f"s{level}", "current_level": level}, headers=user_headers)
    client.post("/api/career-goals", json={"title": "PM Roadmap"}, headers=user_headers)

    summary = client.get("/api/analytics", headers=user_headers).json()
    assert summary["resume_analyses"] == 3
    assert summary["average_ats_score"] == 70
    assert summary["skills_tracked"] == 2
    assert summary["average_skill_level"] == 40
    assert summary["career_goals"] == 1
    assert [p["name"] for p in summary["score_history"]] == ["Analysis 1", "Analysis 2", "Analysis 3"]
    assert [p["score"] for p in summary["score_history"]] == [60, 70, 81]


def test_analytics_averages_round_halves_up(client, user_headers):
    for score in (72, 73):
        client.post("/api/resume-analyses", json={"resume_text": "r", "ats_score": score}, headers=user_headers)
    for level in (50, 51):
        client.post("/api/skill-progress", json={"skill_name": f"s{level}", "current_level": level}, headers=user_headers)

    summary = client.get("/api/analytics", headers=user_headers).json()
    assert summary["average_ats_score"] == 73
    assert summary["average_skill_level"] == 51
