"""
Job listing endpoints.

Listing and detail are public. Creating, updating and deleting jobs is
restricted to EMPLOYER users, and only the owning employer may change or
remove a job.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_employer_user
from jobboard.crud import company as company_crud
from jobboard.crud import job as job_crud
from jobboard.models.job import JobType
from jobboard.models.user import User
from jobboard.schemas.admin import MessageResponse
from jobboard.schemas.job import (
    EmployerJobResponse,
    JobCreateRequest,
    JobDetailResponse,
    JobResponse,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


def _check_company_ownership(db: Session, company_id: Optional[int], employer: User) -> None:
    if company_id is None:
        return
    if not company_crud.get_owned(db, company_id, employer.id):
        logger.warning(f"Employer {employer.id} tried to post under company {company_id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only post jobs for your own companies"
        )


@router.get("", response_model=List[JobDetailResponse])
def list_jobs(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    search: Optional[str] = None,
    company_id: Optional[int] = None,
    type: Optional[JobType] = None,
    db: Session = Depends(get_db)
):
    """
    List jobs newest first, with employer and company.

    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: 100, max: 100)
        search: Case-insensitive match on title, location, employer or company name
        company_id: Only jobs posted under this company
        type: Only jobs of this type
    """
    if limit > 100:
        limit = 100

    return job_crud.get_multi(
        db,
        skip=skip,
        limit=limit,
        search=search,
        company_id=company_id,
        job_type=type,
    )


@router.get("/employer", response_model=List[EmployerJobResponse])
def list_employer_jobs(
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    """List the current employer's jobs with their application counts."""
    return job_crud.get_by_employer_with_counts(db, current_user.id)


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    job = job_crud.get_by_id(db, job_id)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.post("", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    """
    Create a new job posting owned by the current employer.

    When company_id is given the company must belong to the employer.
    """
    _check_company_ownership(db, request.company_id, current_user)

    new_job = job_crud.create(db, request, employer_id=current_user.id)
    logger.info(f"Created job {new_job.id}: {new_job.title} (employer {current_user.id})")

    return new_job


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    """Update a job owned by the current employer."""
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    if job.employer_id != current_user.id:
        logger.warning(f"Employer {current_user.id} tried to update job {job_id}")
        raise HTTPException(status_code=403, detail="Not authorized to update this job")

    if "company_id" in request.model_fields_set:
        _check_company_ownership(db, request.company_id, current_user)

    job = job_crud.update(db, job, request)
    logger.info(f"Updated job {job_id}")

    return job


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: int,
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    """Delete a job owned by the current employer, with its applications."""
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    if job.employer_id != current_user.id:
        logger.warning(f"Employer {current_user.id} tried to delete job {job_id}")
        raise HTTPException(status_code=403, detail="Not authorized to delete this job")

    job_crud.delete(db, job)
    logger.info(f"Deleted job {job_id}")

    return {"message": "Job deleted successfully"}
