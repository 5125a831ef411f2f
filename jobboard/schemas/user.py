"""
Pydantic schemas for authentication, users and profiles.

Profile blobs (work history, preferences, stats) are explicit records with
optional fields; they are stored as JSON on the Profile row.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional, Union
from datetime import datetime

from jobboard.models.user import UserRole, Gender


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=1)  # hashing truncates to bcrypt's 72 bytes
    name: str = Field(..., min_length=1, max_length=200)
    role: Optional[UserRole] = None
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    gender: Optional[Gender] = None
    phone_number: Optional[str] = None
    location: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class UserLoginRequest(BaseModel):
    """Request schema for user login."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserSummary(BaseModel):
    """Minimal user object returned alongside a token and kept by the client."""
    id: int
    email: str
    name: str
    role: UserRole

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    """JWT token response."""
    token: str
    token_type: str = "bearer"
    user: UserSummary


class UserResponse(BaseModel):
    """User record response (no password)."""
    id: int
    email: str
    name: str
    username: Optional[str] = None
    gender: Optional[Gender] = None
    role: UserRole
    headline: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None
    skills: Optional[str] = None
    profile_picture: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class AdminUserResponse(BaseModel):
    """Row in the admin user list."""
    id: int
    name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class WorkExperience(BaseModel):
    """One entry of a candidate's work history."""
    title: Optional[str] = None
    company: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: Optional[bool] = None
    location: Optional[str] = None
    description: Optional[str] = None


class JobPreferences(BaseModel):
    """Candidate availability, expectations and postal address."""
    availability: Optional[str] = None
    expected_salary: Optional[str] = None
    education: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    postcode: Optional[str] = None
    state: Optional[str] = None
    area: Optional[str] = None
    country: Optional[str] = None
    state_region: Optional[str] = None


class ProfileStats(BaseModel):
    views: Optional[int] = None
    applications: Optional[int] = None
    saved_jobs: Optional[int] = None
    completeness: Optional[int] = None


class ProfileResponse(BaseModel):
    id: int
    user_id: int
    bio: Optional[str] = None
    resume_url: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    company_name: Optional[str] = None
    company_url: Optional[str] = None
    work_experience: List[WorkExperience] = Field(default_factory=list)
    job_preferences: JobPreferences = Field(default_factory=JobPreferences)
    profile_stats: ProfileStats = Field(default_factory=ProfileStats)

    class Config:
        from_attributes = True


class UserProfileResponse(UserResponse):
    """User record with its profile, as returned by /users/profile."""
    profile: Optional[ProfileResponse] = None


class ProfileUpdateRequest(BaseModel):
    """
    Partial update of the current user's record and profile.

    Only fields present in the request body are written.
    """
    # User fields
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    headline: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None
    profile_picture: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    gender: Optional[Gender] = None

    # Profile fields
    bio: Optional[str] = None
    skills: Optional[Union[List[str], str]] = None
    resume_url: Optional[str] = None
    company_name: Optional[str] = None
    company_url: Optional[str] = None
    work_experience: Optional[List[WorkExperience]] = None
    job_preferences: Optional[JobPreferences] = None

    @field_validator("name", mode="before")
    @classmethod
    def reject_null_name(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("skills")
    @classmethod
    def split_skills(cls, v: Optional[Union[List[str], str]]) -> Optional[List[str]]:
        """Accept a comma-separated string or a list; drop blank entries."""
        if v is None:
            return v
        if isinstance(v, str):
            v = v.split(",")
        return [skill.strip() for skill in v if skill.strip()]


class UserBrief(BaseModel):
    """Public view of an employer attached to jobs and companies."""
    name: str
    email: str

    class Config:
        from_attributes = True


class CandidateBrief(BaseModel):
    """Candidate attached to an application, as seen by the employer."""
    id: int
    name: str
    email: str
    profile: Optional[ProfileResponse] = None

    class Config:
        from_attributes = True
