"""
Database models package.
"""

from jobboard.models.user import User, UserRole, Gender
from jobboard.models.profile import Profile
from jobboard.models.company import Company
from jobboard.models.job import Job, JobType
from jobboard.models.application import Application, ApplicationStatus

__all__ = [
    "User",
    "UserRole",
    "Gender",
    "Profile",
    "Company",
    "Job",
    "JobType",
    "Application",
    "ApplicationStatus",
]
