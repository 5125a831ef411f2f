"""
Test suite for the current user's profile endpoints.
"""

from jobboard.models import Application, UserRole
from tests.conftest import auth_headers


class TestGetProfile:

    def test_profile_includes_user_and_profile(self, client, candidate):
        response = client.get("/api/users/profile", headers=auth_headers(candidate))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == candidate.id
        assert data["email"] == candidate.email
        assert "hashed_password" not in data
        assert data["profile"]["user_id"] == candidate.id
        assert data["profile"]["skills"] == []
        assert data["profile"]["work_experience"] == []

    def test_candidate_application_count_is_live(self, client, db_session, candidate, employer, make_job):
        for title in ("One", "Two"):
            db_session.add(Application(job_id=make_job(employer, title=title).id, candidate_id=candidate.id))
        db_session.commit()

        response = client.get("/api/users/profile", headers=auth_headers(candidate))

        assert response.json()["profile"]["profile_stats"]["applications"] == 2

    def test_missing_profile_is_created(self, client, db_session, make_user):
        user = make_user(UserRole.EMPLOYER)
        db_session.delete(user.profile)
        db_session.commit()

        response = client.get("/api/users/profile", headers=auth_headers(user))

        assert response.status_code == 200
        assert response.json()["profile"]["user_id"] == user.id

    def test_requires_authentication(self, client):
        assert client.get("/api/users/profile").status_code == 401


class TestUpdateProfile:

    def test_updates_user_and_profile_fields(self, client, candidate):
        response = client.put(
            "/api/users/profile",
            json={"headline": "Backend developer", "bio": "Ten years of Python", "resume_url": "http://files/cv.pdf"},
            headers=auth_headers(candidate),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["headline"] == "Backend developer"
        assert data["profile"]["bio"] == "Ten years of Python"
        assert data["profile"]["resume_url"] == "http://files/cv.pdf"
        assert data["name"] == candidate.name

    def test_skills_string_is_split(self, client, candidate):
        response = client.put(
            "/api/users/profile",
            json={"skills": "python, sql ,, docker"},
            headers=auth_headers(candidate),
        )

        assert response.status_code == 200
        assert response.json()["profile"]["skills"] == ["python", "sql", "docker"]

    def test_skills_list_is_kept(self, client, candidate):
        response = client.put(
            "/api/users/profile",
            json={"skills": ["go", "rust"]},
            headers=auth_headers(candidate),
        )

        assert response.json()["profile"]["skills"] == ["go", "rust"]

    def test_nested_records_are_stored(self, client, candidate):
        payload = {
            "work_experience": [
                {"title": "Engineer", "company": "Initech", "start_date": "2020-01", "current": True},
            ],
            "job_preferences": {"availability": "Immediate", "country": "Germany"},
        }

        client.put("/api/users/profile", json=payload, headers=auth_headers(candidate))
        data = client.get("/api/users/profile", headers=auth_headers(candidate)).json()

        experience = data["profile"]["work_experience"]
        assert len(experience) == 1
        assert experience[0]["company"] == "Initech"
        assert experience[0]["current"] is True
        assert data["profile"]["job_preferences"]["availability"] == "Immediate"
        assert data["profile"]["job_preferences"]["country"] == "Germany"

    def test_omitted_fields_are_unchanged(self, client, candidate):
        headers = auth_headers(candidate)
        client.put("/api/users/profile", json={"bio": "Keep me", "skills": ["python"]}, headers=headers)

        response = client.put("/api/users/profile", json={"location": "Lisbon"}, headers=headers)

        data = response.json()
        assert data["location"] == "Lisbon"
        assert data["profile"]["bio"] == "Keep me"
        assert data["profile"]["skills"] == ["python"]

    def test_name_cannot_be_cleared(self, client, candidate):
        response = client.put("/api/users/profile", json={"name": None}, headers=auth_headers(candidate))

        assert response.status_code == 400
        assert "name" in response.json()["detail"]
        assert client.get("/api/users/profile", headers=auth_headers(candidate)).json()["name"] == "Jane Candidate"

    def test_optional_user_field_can_be_cleared(self, client, candidate):
        headers = auth_headers(candidate)
        client.put("/api/users/profile", json={"headline": "Temporary"}, headers=headers)

        response = client.put("/api/users/profile", json={"headline": None}, headers=headers)

        assert response.status_code == 200
        assert response.json()["headline"] is None

    def test_empty_name_rejected(self, client, candidate):
        response = client.put("/api/users/profile", json={"name": ""}, headers=auth_headers(candidate))

        assert response.status_code == 400
