"""
Pydantic schemas for job applications.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from jobboard.models.application import ApplicationStatus
from jobboard.schemas.job import JobSummary, JobWithEmployerName
from jobboard.schemas.user import CandidateBrief


class ApplicationCreateRequest(BaseModel):
    job_id: int
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None


class ApplicationStatusUpdateRequest(BaseModel):
    status: ApplicationStatus


class ApplicationResponse(BaseModel):
    id: int
    job_id: int
    candidate_id: int
    status: ApplicationStatus
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CandidateApplicationResponse(ApplicationResponse):
    """Application in the candidate's own list, with the job applied to"""
    job: Optional[JobWithEmployerName] = None


class JobApplicationResponse(ApplicationResponse):
    """Application to one of the employer's jobs, with the candidate"""
    candidate: Optional[CandidateBrief] = None


class EmployerApplicationResponse(JobApplicationResponse):
    """Application across all of the employer's jobs"""
    job: Optional[JobSummary] = None
