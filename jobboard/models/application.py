"""
Application model linking a CANDIDATE to a Job.

A candidate may apply to a given job at most once. The CRUD layer checks for
an existing row before inserting; the unique constraint catches the race
between two concurrent submissions.
"""

import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class ApplicationStatus(str, enum.Enum):
    """
    Workflow status, changed only by the employer who owns the job.

    - APPLIED: Submitted by the candidate
    - REVIEWING: Employer is reviewing
    - INTERVIEW: Candidate invited to interview
    - OFFER: Offer extended
    - REJECTED: Application declined
    """
    APPLIED = "APPLIED"
    REVIEWING = "REVIEWING"
    INTERVIEW = "INTERVIEW"
    OFFER = "OFFER"
    REJECTED = "REJECTED"


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "candidate_id", name="uq_applications_job_candidate"),
    )

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    candidate_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(
        Enum(ApplicationStatus, name="application_status"),
        default=ApplicationStatus.APPLIED,
        nullable=False,
        index=True,
    )
    resume_url = Column(String, nullable=True)
    cover_letter = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    job = relationship("Job", back_populates="applications")
    candidate = relationship("User", back_populates="applications")

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, candidate_id={self.candidate_id}, status={self.status})>"
