"""
CRUD operations for Application model.
"""

from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.job import Job
from jobboard.models.user import User
from jobboard.schemas.application import ApplicationCreateRequest


class DuplicateApplicationError(Exception):
    """Raised when a candidate has already applied to the job."""


def get_by_id(db: Session, application_id: int) -> Optional[Application]:
    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.id == application_id)
        .first()
    )


def get_by_job_and_candidate(db: Session, job_id: int, candidate_id: int) -> Optional[Application]:
    return (
        db.query(Application)
        .filter(Application.job_id == job_id, Application.candidate_id == candidate_id)
        .first()
    )


def create(db: Session, application_data: ApplicationCreateRequest, candidate_id: int) -> Application:
    """
    Create an application for a candidate.

    Checks for an existing application first; the unique constraint on
    (job_id, candidate_id) covers a concurrent duplicate.

    Raises:
        DuplicateApplicationError: If the candidate already applied to the job
    """
    if get_by_job_and_candidate(db, application_data.job_id, candidate_id):
        raise DuplicateApplicationError()

    db_application = Application(
        job_id=application_data.job_id,
        candidate_id=candidate_id,
        cover_letter=application_data.cover_letter,
        resume_url=application_data.resume_url,
        status=ApplicationStatus.APPLIED,
    )
    db.add(db_application)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateApplicationError()
    db.refresh(db_application)

    return db_application


def get_by_candidate(db: Session, candidate_id: int) -> List[Application]:
    """A candidate's applications newest first, with each job and its employer."""
    return (
        db.query(Application)
        .options(joinedload(Application.job).joinedload(Job.employer))
        .filter(Application.candidate_id == candidate_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def get_by_job(db: Session, job_id: int) -> List[Application]:
    """Applications to a job, with each candidate and profile."""
    return (
        db.query(Application)
        .options(joinedload(Application.candidate).joinedload(User.profile))
        .filter(Application.job_id == job_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def get_by_job_ids(db: Session, job_ids: List[int]) -> List[Application]:
    """Applications across several jobs, newest first, with job and candidate."""
    if not job_ids:
        return []

    return (
        db.query(Application)
        .options(
            joinedload(Application.job),
            joinedload(Application.candidate).joinedload(User.profile),
        )
        .filter(Application.job_id.in_(job_ids))
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def update_status(db: Session, application: Application, status: ApplicationStatus) -> Application:
    application.status = status

    db.commit()
    db.refresh(application)

    return application


def count(db: Session) -> int:
    return db.query(Application).count()
