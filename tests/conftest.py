"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Users of each role with auth headers
- Sample companies and jobs
"""

import os
import tempfile
import uuid

# Settings are read at import time, so the test environment must be in place first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="jobboard-uploads-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.core.database import Base, get_db
from jobboard.core.security import create_user_token, get_password_hash
from jobboard.models import Company, Job, JobType, Profile, User, UserRole
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEFAULT_PASSWORD = "TestPass123!"


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    """Factory creating a user (with profile) directly in the database."""
    def _make_user(role=UserRole.CANDIDATE, email=None, password=DEFAULT_PASSWORD, name=None, **fields):
        user = User(
            email=email or f"{role.value.lower()}_{uuid.uuid4().hex[:8]}@example.com",
            hashed_password=get_password_hash(password),
            name=name or f"Test {role.value.title()}",
            role=role,
            **fields
        )
        user.profile = Profile(skills=[], work_experience=[], job_preferences={}, profile_stats={})
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


def auth_headers(user):
    """Bearer headers for a user"""
    return {"Authorization": f"Bearer {create_user_token(user)}"}


@pytest.fixture
def candidate(make_user):
    return make_user(UserRole.CANDIDATE, name="Jane Candidate")


@pytest.fixture
def employer(make_user):
    return make_user(UserRole.EMPLOYER, name="Erin Employer")


@pytest.fixture
def other_employer(make_user):
    return make_user(UserRole.EMPLOYER, name="Oscar Other")


@pytest.fixture
def admin(make_user):
    return make_user(UserRole.ADMIN, name="Ada Admin")


@pytest.fixture
def make_company(db_session):
    def _make_company(employer, name="Tech Corp", **fields):
        company = Company(name=name, employer_id=employer.id, **fields)
        db_session.add(company)
        db_session.commit()
        db_session.refresh(company)
        return company

    return _make_company


@pytest.fixture
def make_job(db_session):
    def _make_job(employer, company=None, title="Backend Engineer", location="Remote", job_type=JobType.FULL_TIME, **fields):
        job = Job(
            title=title,
            description=fields.pop("description", "Build and run our Python services."),
            location=location,
            type=job_type,
            employer_id=employer.id,
            company_id=company.id if company else None,
            **fields
        )
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make_job


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Senior Python Developer",
        "description": "We are looking for a Senior Python Developer with 5+ years of experience.",
        "requirements": "Python, FastAPI, PostgreSQL",
        "salary": "$120k - $150k",
        "location": "San Francisco, CA (Remote)",
        "type": "FULL_TIME",
    }
