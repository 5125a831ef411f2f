"""
Unit tests for admin endpoints.

Tests:
- Admin dashboard stats
- User management
- System health checks
- The create_admin script
"""

from jobboard.models import Application, Company, Job, User, UserRole
from tests.conftest import DEFAULT_PASSWORD, auth_headers


class TestAdminStats:

    def test_counts_every_table(self, client, db_session, admin, employer, candidate, make_company, make_job):
        company = make_company(employer)
        job = make_job(employer, company=company)
        make_job(employer)
        db_session.add(Application(job_id=job.id, candidate_id=candidate.id))
        db_session.commit()

        response = client.get("/api/admin/stats", headers=auth_headers(admin))

        assert response.status_code == 200
        assert response.json() == {"users": 3, "jobs": 2, "companies": 1, "applications": 1}


class TestUserManagement:

    def test_list_users_newest_first(self, client, admin, candidate, employer):
        response = client.get("/api/admin/users", headers=auth_headers(admin))

        assert response.status_code == 200
        data = response.json()
        assert [user["id"] for user in data] == [employer.id, candidate.id, admin.id]
        assert set(data[0]) == {"id", "name", "email", "role", "created_at"}

    def test_get_user(self, client, admin, candidate):
        response = client.get(f"/api/admin/users/{candidate.id}", headers=auth_headers(admin))

        assert response.status_code == 200
        assert response.json()["email"] == candidate.email
        assert "hashed_password" not in response.json()

    def test_get_unknown_user(self, client, admin):
        response = client.get("/api/admin/users/99999", headers=auth_headers(admin))

        assert response.status_code == 404

    def test_delete_user_removes_owned_data(self, client, db_session, admin, employer, candidate, make_company, make_job):
        company = make_company(employer)
        job = make_job(employer, company=company)
        db_session.add(Application(job_id=job.id, candidate_id=candidate.id))
        db_session.commit()
        employer_id = employer.id

        response = client.delete(f"/api/admin/users/{employer_id}", headers=auth_headers(admin))

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully"}
        assert client.get(f"/api/admin/users/{employer_id}", headers=auth_headers(admin)).status_code == 404
        assert db_session.query(Company).count() == 0
        assert db_session.query(Job).count() == 0
        assert db_session.query(Application).count() == 0
        assert db_session.query(User).filter(User.id == candidate.id).count() == 1

    def test_delete_unknown_user(self, client, admin):
        response = client.delete("/api/admin/users/99999", headers=auth_headers(admin))

        assert response.status_code == 404

    def test_admin_accounts_cannot_be_deleted(self, client, admin, make_user):
        other_admin = make_user(UserRole.ADMIN)

        response = client.delete(f"/api/admin/users/{other_admin.id}", headers=auth_headers(admin))

        assert response.status_code == 400

    def test_non_admin_cannot_delete(self, client, employer, candidate):
        response = client.delete(f"/api/admin/users/{candidate.id}", headers=auth_headers(employer))

        assert response.status_code == 403


class TestHealthChecks:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "Job Board API is running"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "healthy"


class TestCreateAdminScript:

    def test_creates_admin(self, db_session):
        from create_admin import create_admin
        from jobboard.core.security import verify_password

        user = create_admin(db_session, email="Root@Example.com", password="s3cret-pass")

        assert user.role == UserRole.ADMIN
        assert user.email == "root@example.com"
        assert user.profile is not None
        assert verify_password("s3cret-pass", user.hashed_password)

    def test_promotes_and_resets_existing_user(self, db_session, candidate):
        from create_admin import create_admin
        from jobboard.core.security import verify_password

        user = create_admin(db_session, email=candidate.email, password="new-pass")

        assert user.id == candidate.id
        assert user.role == UserRole.ADMIN
        assert verify_password("new-pass", user.hashed_password)
        assert not verify_password(DEFAULT_PASSWORD, user.hashed_password)
