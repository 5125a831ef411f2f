"""
Job application endpoints.

Candidates apply and list their own applications. Employers list the
applications to their jobs and move them through the status workflow.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_candidate_user, get_employer_user
from jobboard.crud import application as application_crud
from jobboard.crud import job as job_crud
from jobboard.crud.application import DuplicateApplicationError
from jobboard.models.user import User
from jobboard.schemas.application import (
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationStatusUpdateRequest,
    CandidateApplicationResponse,
    EmployerApplicationResponse,
    JobApplicationResponse,
)

router = APIRouter(prefix="/applications", tags=["Applications"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=ApplicationResponse)
def apply_for_job(
    request: ApplicationCreateRequest,
    current_user: User = Depends(get_candidate_user),
    db: Session = Depends(get_db)
):
    """
    Apply to a job as the current candidate.

    A candidate can apply to each job only once.
    """
    if not job_crud.get_by_id(db, request.job_id):
        raise HTTPException(status_code=404, detail="Job not found")

    try:
        application = application_crud.create(db, request, candidate_id=current_user.id)
    except DuplicateApplicationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Already applied to this job"
        )

    logger.info(f"Candidate {current_user.id} applied to job {request.job_id} (application {application.id})")
    return application


@router.get("/my", response_model=List[CandidateApplicationResponse])
def list_my_applications(
    current_user: User = Depends(get_candidate_user),
    db: Session = Depends(get_db)
):
    """List the current candidate's applications, newest first."""
    return application_crud.get_by_candidate(db, current_user.id)


@router.get("/employer", response_model=List[EmployerApplicationResponse])
def list_employer_applications(
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    """List applications across all of the current employer's jobs."""
    job_ids = job_crud.get_ids_by_employer(db, current_user.id)
    return application_crud.get_by_job_ids(db, job_ids)


@router.get("/job/{job_id}", response_model=List[JobApplicationResponse])
def list_job_applications(
    job_id: int,
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    """List applications to one of the current employer's jobs."""
    job = job_crud.get_by_id(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    if job.employer_id != current_user.id:
        logger.warning(f"Employer {current_user.id} tried to read applications of job {job_id}")
        raise HTTPException(status_code=403, detail="Not authorized to view these applications")

    return application_crud.get_by_job(db, job_id)


@router.put("/{application_id}/status", response_model=ApplicationResponse)
def update_application_status(
    application_id: int,
    request: ApplicationStatusUpdateRequest,
    current_user: User = Depends(get_employer_user),
    db: Session = Depends(get_db)
):
    """
    Move an application to a new workflow status.

    Only the employer who owns the job may do this.
    """
    application = application_crud.get_by_id(db, application_id)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")

    if application.job.employer_id != current_user.id:
        logger.warning(f"Employer {current_user.id} tried to update application {application_id}")
        raise HTTPException(status_code=403, detail="Not authorized to update this application")

    application = application_crud.update_status(db, application, request.status)
    logger.info(f"Application {application_id} moved to {application.status.value}")

    return application
