"""
Authentication endpoints for user registration and login.

Implements JWT-based stateless authentication:
- POST /register: Create new user account (CANDIDATE or EMPLOYER)
- POST /login: Authenticate and receive a JWT
- GET /me: Get current user
"""

import logging
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.security import verify_password, get_password_hash, create_user_token
from jobboard.core.deps import get_current_user
from jobboard.crud import user as user_crud
from jobboard.crud.user import DuplicateUserError
from jobboard.models.user import User, UserRole
from jobboard.schemas.user import (
    UserRegisterRequest,
    UserLoginRequest,
    TokenResponse,
    UserResponse,
    UserSummary,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)

# Roles a user may pick at registration; ADMIN accounts are created by script
SELF_SERVICE_ROLES = {UserRole.CANDIDATE, UserRole.EMPLOYER}


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account.

    Creates the user with a hashed password and an empty profile, then
    returns a JWT for immediate login.
    """
    role = request.role or UserRole.CANDIDATE
    if role not in SELF_SERVICE_ROLES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid role. Must be CANDIDATE or EMPLOYER"
        )

    if user_crud.get_by_email(db, request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    if request.username and user_crud.get_by_username(db, request.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already taken"
        )

    try:
        new_user = user_crud.create(db, request, get_password_hash(request.password), role=role)
    except DuplicateUserError:
        logger.warning(f"Registration for {request.email} rejected by a unique constraint")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    logger.info(f"New user registered: {new_user.email} (id: {new_user.id}, role: {new_user.role.value})")

    return TokenResponse(
        token=create_user_token(new_user),
        user=UserSummary.model_validate(new_user)
    )


@router.post("/login", response_model=TokenResponse)
def login(
    request: UserLoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return a JWT.

    Unknown email and wrong password get the same answer.
    """
    user = user_crud.get_by_email(db, request.email)
    if not user or not verify_password(request.password, user.hashed_password):
        logger.info(f"Failed login attempt for {request.email}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials"
        )

    logger.info(f"User logged in: {user.email} (role: {user.role.value})")

    return TokenResponse(
        token=create_user_token(user),
        user=UserSummary.model_validate(user)
    )


@router.get("/me", response_model=UserResponse)
def get_current_user_profile(
    current_user: User = Depends(get_current_user)
):
    """
    Get current authenticated user.

    Requires valid JWT token in Authorization header.
    """
    return current_user
