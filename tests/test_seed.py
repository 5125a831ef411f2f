"""
Tests for the demo data seeding script.
"""

from jobboard.models import Application, Company, Job, User, UserRole
from seed_db import DEMO_PASSWORD, seed
from tests.conftest import auth_headers


def test_seed_inserts_demo_data(db_session):
    seed(db_session)

    assert db_session.query(User).count() == 3
    assert db_session.query(Company).count() == 1
    assert db_session.query(Job).count() == 2
    assert db_session.query(Application).count() == 1
    roles = {user.role for user in db_session.query(User).all()}
    assert roles == {UserRole.ADMIN, UserRole.EMPLOYER, UserRole.CANDIDATE}


def test_seeded_accounts_can_log_in(client, db_session):
    seed(db_session)

    response = client.post("/api/auth/login", json={"email": "candidate@example.com", "password": DEMO_PASSWORD})

    assert response.status_code == 200
    assert response.json()["user"]["role"] == "CANDIDATE"


def test_seeded_employer_sees_application(client, db_session):
    seed(db_session)
    employer = db_session.query(User).filter(User.email == "employer@techcorp.com").one()

    response = client.get("/api/jobs/employer", headers=auth_headers(employer))

    counts = {job["title"]: job["application_count"] for job in response.json()}
    assert counts == {"Senior Frontend Developer": 1, "Backend Engineer": 0}
