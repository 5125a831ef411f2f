"""
Profile model: extended, mostly free-form user attributes.

Created alongside the User at registration and removed only with it.
Nested blobs are validated against the records in jobboard.schemas.user
before they are written.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from jobboard.core.database import Base

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB, "postgresql")


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)

    bio = Column(Text, nullable=True)
    resume_url = Column(String, nullable=True)
    skills = Column(JSONType, default=list, nullable=False)
    company_name = Column(String, nullable=True)
    company_url = Column(String, nullable=True)

    # Structure matches WorkExperience / JobPreferences / ProfileStats schemas
    work_experience = Column(JSONType, default=list, nullable=False)
    job_preferences = Column(JSONType, default=dict, nullable=False)
    profile_stats = Column(JSONType, default=dict, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="profile")

    def __repr__(self):
        return f"<Profile(id={self.id}, user_id={self.user_id})>"
