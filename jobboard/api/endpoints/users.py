"""
Endpoints for the current user's own record and profile.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_current_user
from jobboard.crud import user as user_crud
from jobboard.models.user import User, UserRole
from jobboard.schemas.user import ProfileUpdateRequest, UserProfileResponse

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


def _profile_response(db: Session, user: User) -> UserProfileResponse:
    """Serialize a user with its profile; candidates get a live application count."""
    user_crud.ensure_profile(db, user)
    response = UserProfileResponse.model_validate(user)

    if user.role == UserRole.CANDIDATE and response.profile is not None:
        response.profile.profile_stats.applications = user_crud.count_applications(db, user.id)

    return response


@router.get("/profile", response_model=UserProfileResponse)
def get_profile(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Get the current user with their profile.

    A missing profile is created on the fly.
    """
    return _profile_response(db, current_user)


@router.put("/profile", response_model=UserProfileResponse)
def update_profile(
    request: ProfileUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Update the current user's record and profile.

    Only fields present in the body are changed. `skills` accepts a list or
    a comma-separated string.
    """
    user = user_crud.update_profile(db, current_user, request)
    logger.info(f"User {user.id} updated profile fields: {sorted(request.model_fields_set)}")
    return _profile_response(db, user)
