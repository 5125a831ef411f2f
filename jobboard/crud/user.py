"""
CRUD operations for User and Profile models.

A Profile row is created together with every User and is only removed by
deleting the User.
"""

from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from jobboard.models.application import Application
from jobboard.models.profile import Profile
from jobboard.models.user import User, UserRole
from jobboard.schemas.user import ProfileUpdateRequest, UserRegisterRequest

# Fields of ProfileUpdateRequest that live on the User row; the rest go to Profile
USER_FIELDS = {
    "name",
    "headline",
    "location",
    "phone_number",
    "profile_picture",
    "github_url",
    "linkedin_url",
    "gender",
}


class DuplicateUserError(Exception):
    """Raised when the email or username is already registered."""


def get_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create(
    db: Session,
    user_data: UserRegisterRequest,
    hashed_password: str,
    role: UserRole = UserRole.CANDIDATE,
) -> User:
    """
    Create a user with an empty profile.

    Args:
        db: Database session
        user_data: Validated registration data
        hashed_password: bcrypt hash of the password
        role: Role to assign

    Returns:
        Created User instance with id

    Raises:
        DuplicateUserError: If a concurrent registration took the email or username
    """
    db_user = User(
        email=user_data.email.lower(),
        hashed_password=hashed_password,
        name=user_data.name,
        username=user_data.username,
        gender=user_data.gender,
        role=role,
        phone_number=user_data.phone_number,
        location=user_data.location,
    )
    db_user.profile = Profile(skills=[], work_experience=[], job_preferences={}, profile_stats={})

    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateUserError()
    db.refresh(db_user)

    return db_user


def get_multi(db: Session, skip: int = 0, limit: int = 100) -> List[User]:
    """List users, newest first."""
    return (
        db.query(User)
        .order_by(User.created_at.desc(), User.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def ensure_profile(db: Session, user: User) -> Profile:
    """Return the user's profile, creating an empty one if it is missing."""
    if user.profile is None:
        user.profile = Profile(skills=[], work_experience=[], job_preferences={}, profile_stats={})
        db.commit()
        db.refresh(user)
    return user.profile


def count_applications(db: Session, user_id: int) -> int:
    return db.query(Application).filter(Application.candidate_id == user_id).count()


def update_profile(db: Session, user: User, update: ProfileUpdateRequest) -> User:
    """
    Apply a partial update to a user and its profile.

    Only the fields set in the request are written. Nested profile records
    are stored as plain JSON.
    """
    profile = ensure_profile(db, user)
    changes = update.model_dump(exclude_unset=True)

    for field, value in changes.items():
        if field in USER_FIELDS:
            setattr(user, field, value)
        elif field == "work_experience":
            profile.work_experience = value or []
        elif field == "job_preferences":
            profile.job_preferences = value or {}
        elif field == "skills":
            profile.skills = value or []
        else:
            setattr(profile, field, value)

    db.commit()
    db.refresh(user)

    return user


def delete(db: Session, user: User) -> None:
    """Delete a user together with its profile, companies, jobs and applications."""
    db.delete(user)
    db.commit()


def count(db: Session) -> int:
    return db.query(User).count()
