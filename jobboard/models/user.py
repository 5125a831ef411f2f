"""
User model for authentication and role-based access.

Each User has exactly one role. EMPLOYER users own companies and post jobs,
CANDIDATE users submit applications, ADMIN users manage the system.
"""

import enum
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, func
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class UserRole(str, enum.Enum):
    CANDIDATE = "CANDIDATE"
    EMPLOYER = "EMPLOYER"
    ADMIN = "ADMIN"


class Gender(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class User(Base):
    """
    User account.

    The password is only ever stored as a bcrypt hash and is never part of
    a response schema.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    # Authentication credentials
    email = Column(String, unique=True, nullable=False, index=True)  # Stored lower-cased
    hashed_password = Column(String, nullable=False)

    # Identity
    name = Column(String, nullable=False)
    username = Column(String, unique=True, nullable=True, index=True)
    gender = Column(Enum(Gender, name="user_gender"), nullable=True)
    role = Column(Enum(UserRole, name="user_role"), default=UserRole.CANDIDATE, nullable=False, index=True)

    # Contact / public profile
    headline = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    phone_number = Column(String, nullable=True)
    skills = Column(Text, nullable=True)
    profile_picture = Column(Text, nullable=True)
    github_url = Column(String, nullable=True)
    linkedin_url = Column(String, nullable=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete")
    companies = relationship("Company", back_populates="employer", cascade="all, delete")
    jobs = relationship("Job", back_populates="employer", cascade="all, delete")
    applications = relationship("Application", back_populates="candidate", cascade="all, delete")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"
