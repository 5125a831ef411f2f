"""
Admin API endpoints.

All routes require a user with the ADMIN role.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_admin_user
from jobboard.crud import application as application_crud
from jobboard.crud import company as company_crud
from jobboard.crud import job as job_crud
from jobboard.crud import user as user_crud
from jobboard.models.user import User, UserRole
from jobboard.schemas.admin import AdminStatsResponse, MessageResponse
from jobboard.schemas.user import AdminUserResponse, UserResponse

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(get_admin_user)])
logger = logging.getLogger(__name__)


@router.get("/stats", response_model=AdminStatsResponse)
def get_system_stats(db: Session = Depends(get_db)):
    """Get system-wide row counts."""
    return AdminStatsResponse(
        users=user_crud.count(db),
        jobs=job_crud.count(db),
        companies=company_crud.count(db),
        applications=application_crud.count(db),
    )


@router.get("/users", response_model=List[AdminUserResponse])
def list_all_users(db: Session = Depends(get_db)):
    """List all users, newest first."""
    return user_crud.get_multi(db, limit=1000)


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = user_crud.get_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Delete a user and all associated data (profile, companies, jobs, applications).

    Admin accounts cannot be deleted through the API.
    """
    user = user_crud.get_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    if user.role == UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Admin accounts cannot be deleted"
        )

    user_crud.delete(db, user)
    logger.info(f"Admin {admin_user.id} deleted user {user_id}")
    return {"message": "User deleted successfully"}
