"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import List, Optional
from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session, joinedload
from jobboard.models.application import Application
from jobboard.models.company import Company
from jobboard.models.job import Job, JobType
from jobboard.models.user import User
from jobboard.schemas.job import JobCreateRequest, JobUpdateRequest


def _escape_like(term: str) -> str:
    """Make LIKE wildcards in user input match literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def create(db: Session, job_data: JobCreateRequest, employer_id: int) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data (company ownership already checked)
        employer_id: Owning employer

    Returns:
        Created Job instance with id
    """
    db_job = Job(**job_data.model_dump(), employer_id=employer_id)

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID, with its employer and company loaded.

    Returns:
        Job instance if found, None otherwise
    """
    return (
        db.query(Job)
        .options(joinedload(Job.employer), joinedload(Job.company))
        .filter(Job.id == job_id)
        .first()
    )


def get_multi(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    search: Optional[str] = None,
    company_id: Optional[int] = None,
    job_type: Optional[JobType] = None,
) -> List[Job]:
    """
    Retrieve jobs newest first with pagination and optional filtering.

    Args:
        db: Database session
        skip: Number of records to skip (offset)
        limit: Maximum number of records to return
        search: Case-insensitive match on title, location, employer name or company name
        company_id: Only jobs posted under this company
        job_type: Only jobs of this type

    Returns:
        List of Job instances
    """
    query = (
        db.query(Job)
        .join(User, Job.employer_id == User.id)
        .outerjoin(Company, Job.company_id == Company.id)
        .options(joinedload(Job.employer), joinedload(Job.company))
    )

    if search:
        pattern = f"%{_escape_like(search.strip())}%"
        query = query.filter(
            or_(
                Job.title.ilike(pattern, escape="\\"),
                Job.location.ilike(pattern, escape="\\"),
                User.name.ilike(pattern, escape="\\"),
                Company.name.ilike(pattern, escape="\\"),
            )
        )
    if company_id is not None:
        query = query.filter(Job.company_id == company_id)
    if job_type is not None:
        query = query.filter(Job.type == job_type)

    return (
        query.order_by(Job.created_at.desc(), Job.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def get_by_employer_with_counts(db: Session, employer_id: int) -> List[Job]:
    """
    Retrieve an employer's jobs newest first, each annotated with
    application_count computed by a correlated subquery.
    """
    application_count = (
        select(func.count(Application.id))
        .where(Application.job_id == Job.id)
        .correlate(Job)
        .scalar_subquery()
        .label("application_count")
    )

    rows = (
        db.query(Job, application_count)
        .filter(Job.employer_id == employer_id)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )

    jobs = []
    for job, count in rows:
        job.application_count = count or 0
        jobs.append(job)
    return jobs


def get_ids_by_employer(db: Session, employer_id: int) -> List[int]:
    return [row.id for row in db.query(Job.id).filter(Job.employer_id == employer_id).all()]


def update(db: Session, job: Job, update: JobUpdateRequest) -> Job:
    """Apply the fields set in the request to the job."""
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job: Job) -> None:
    """Delete a job and its applications."""
    db.delete(job)
    db.commit()


def count(db: Session) -> int:
    return db.query(Job).count()
