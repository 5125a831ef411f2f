from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from jobboard.models.job import JobType
from jobboard.schemas.user import UserBrief
from jobboard.schemas.company import CompanyBrief


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    type: JobType
    requirements: Optional[str] = None
    salary: Optional[str] = None
    company_id: Optional[int] = None


class JobUpdateRequest(BaseModel):
    """Schema for a partial job update"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    type: Optional[JobType] = None
    requirements: Optional[str] = None
    salary: Optional[str] = None
    company_id: Optional[int] = None

    @field_validator("title", "description", "location", "type", mode="before")
    @classmethod
    def reject_null(cls, v):
        """Required columns may be omitted but not cleared."""
        if v is None:
            raise ValueError("may not be null")
        return v


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    title: str
    description: str
    requirements: Optional[str] = None
    salary: Optional[str] = None
    location: str
    type: JobType
    employer_id: int
    company_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobDetailResponse(JobResponse):
    """Job with its employer and company, as shown in listings"""
    employer: Optional[UserBrief] = None
    company: Optional[CompanyBrief] = None


class EmployerJobResponse(JobResponse):
    """Job on the employer dashboard with its number of applications"""
    application_count: int = 0


class EmployerName(BaseModel):
    name: str

    class Config:
        from_attributes = True


class JobWithEmployerName(JobResponse):
    employer: Optional[EmployerName] = None


class JobSummary(BaseModel):
    id: int
    title: str
    location: str
    type: JobType

    class Config:
        from_attributes = True
