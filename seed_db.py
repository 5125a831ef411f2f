"""
Reset the database and fill it with demo data.

WARNING: drops every table first.

Creates:
- an admin (admin@example.com)
- an employer (employer@techcorp.com) with the company "Tech Corp"
- a candidate (candidate@example.com)
- two jobs under Tech Corp and one application

All demo accounts use the password "password123".

Run this script from the project root:
    python seed_db.py
"""

import os
import sys

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from jobboard.core.database import Base, SessionLocal, engine
from jobboard.core.security import get_password_hash
from jobboard.models import (
    Application,
    ApplicationStatus,
    Company,
    Job,
    JobType,
    Profile,
    User,
    UserRole,
)

DEMO_PASSWORD = "password123"


def seed(db) -> None:
    hashed_password = get_password_hash(DEMO_PASSWORD)

    admin = User(
        email="admin@example.com",
        hashed_password=hashed_password,
        name="Admin User",
        role=UserRole.ADMIN,
        headline="System Administrator",
        bio="I manage the job board.",
        location="New York, NY",
    )
    admin.profile = Profile(skills=[], work_experience=[], job_preferences={}, profile_stats={})

    employer = User(
        email="employer@techcorp.com",
        hashed_password=hashed_password,
        name="John Doe (Tech Corp)",
        role=UserRole.EMPLOYER,
        headline="Senior Recruiter at Tech Corp",
        bio="We are looking for top talent.",
        location="San Francisco, CA",
    )
    employer.profile = Profile(
        company_name="Tech Corp",
        company_url="https://techcorp.com",
        bio="Leading innovator in tech.",
        skills=[],
        work_experience=[],
        job_preferences={},
        profile_stats={},
    )

    candidate = User(
        email="candidate@example.com",
        hashed_password=hashed_password,
        name="Jane Smith",
        role=UserRole.CANDIDATE,
        headline="Full Stack Developer",
        bio="Passionate developer looking for new opportunities.",
        location="Austin, TX",
        skills="React, Node.js, TypeScript",
    )
    candidate.profile = Profile(
        bio="I am a passionate developer.",
        skills=["React", "Node.js", "TypeScript", "PostgreSQL"],
        work_experience=[{
            "title": "Software Engineer",
            "company": "Startup Inc",
            "start_date": "2021-01",
            "current": True,
            "location": "Remote",
        }],
        job_preferences={"availability": "Immediately", "expected_salary": "$120k"},
        profile_stats={},
    )

    company = Company(
        name="Tech Corp",
        description="Leading innovator in tech.",
        website="https://techcorp.com",
        location="San Francisco, CA",
        employer=employer,
    )

    frontend_job = Job(
        title="Senior Frontend Developer",
        description="We need a React expert with 5+ years of experience.",
        requirements="React, TypeScript, Tailwind CSS",
        salary="$120k - $150k",
        location="Remote",
        type=JobType.FULL_TIME,
        employer=employer,
        company=company,
    )
    backend_job = Job(
        title="Backend Engineer",
        description="Python and PostgreSQL experience required.",
        requirements="Python, FastAPI, PostgreSQL, SQLAlchemy",
        salary="$130k - $160k",
        location="San Francisco, CA",
        type=JobType.FULL_TIME,
        employer=employer,
        company=company,
    )

    application = Application(
        job=frontend_job,
        candidate=candidate,
        status=ApplicationStatus.APPLIED,
        cover_letter="I would love to join Tech Corp.",
    )

    db.add_all([admin, employer, candidate, company, frontend_job, backend_job, application])
    db.commit()


def main():
    import jobboard.models  # noqa: F401  Register models on Base.metadata

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed(db)
        print("Seeding finished successfully.")
    except Exception as e:
        db.rollback()
        print(f"Error seeding database: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
