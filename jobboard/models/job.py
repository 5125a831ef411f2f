import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, ForeignKey, func
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class JobType(str, enum.Enum):
    """Employment type of a job listing."""
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"
    INTERNSHIP = "INTERNSHIP"
    REMOTE = "REMOTE"


class Job(Base):
    """
    Job listing posted by an EMPLOYER user.

    employer_id is the direct owner. company_id is optional; when set, the
    company must belong to the same employer (checked in the CRUD layer,
    not by the database).
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=True)
    salary = Column(String, nullable=True)
    location = Column(String, nullable=False)
    type = Column(Enum(JobType, name="job_type"), nullable=False, index=True)

    employer_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    employer = relationship("User", back_populates="jobs")
    company = relationship("Company", back_populates="jobs")
    applications = relationship("Application", back_populates="job", cascade="all, delete")

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', type={self.type})>"
