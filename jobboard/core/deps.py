"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract user context.
"""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.security import decode_token
from jobboard.models.user import User, UserRole

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
# auto_error is off so a missing header is reported as 401, not 403
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate the current user from JWT token.

    This dependency:
    1. Extracts the Bearer token from Authorization header
    2. Decodes and validates the JWT (signature and expiry)
    3. Fetches the user named by the "sub" claim

    Raises:
        HTTPException 401: If the token is missing, invalid or the user no longer exists
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = decode_token(credentials.credentials)
        user_id = int(payload.get("sub"))
    except (JWTError, TypeError, ValueError):
        raise credentials_exception

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise credentials_exception

    return user


def require_role(*roles: UserRole):
    """
    Build a dependency that admits only users whose role is in `roles`.

    Usage:
        @router.post("/", dependencies=[Depends(require_role(UserRole.EMPLOYER))])
        def create(...): ...

    or, to also receive the user:
        current_user: User = Depends(require_role(UserRole.EMPLOYER))

    Raises:
        HTTPException 403: If the user's role is not allowed
    """
    allowed = set(roles)

    async def role_checker(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            logger.warning(
                f"User {user.id} with role {user.role.value} denied; requires {sorted(r.value for r in allowed)}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied"
            )
        return user

    return role_checker


get_candidate_user = require_role(UserRole.CANDIDATE)
get_employer_user = require_role(UserRole.EMPLOYER)
get_admin_user = require_role(UserRole.ADMIN)
