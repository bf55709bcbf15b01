from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from app.core.config import settings
from app.db.repository import PortalRepository
from app.db.supabase import get_repository
from app.schemas.user import User, UserRole, role_at_least
from fastapi import Depends, Header, HTTPException, status


def create_access_token(user_id: str, remember: bool = False) -> str:
    """Issue a signed token; `remember` keeps the session for days instead of hours."""
    if remember:
        lifetime = timedelta(days=settings.REMEMBER_ME_EXPIRE_DAYS)
    else:
        lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    payload = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def get_current_user_id(authorization: str = Header(None)) -> str:
    """
    Extract and verify the user ID from the bearer token.
    The frontend sends the access token in the Authorization header.
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
        )

    # Extract token from "Bearer <token>" format
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
        )

    token = parts[1]

    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )

        user_id = payload.get("sub")
        if not user_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token: no user ID",
            )

        return user_id

    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )


def get_current_user(
    user_id: str = Depends(get_current_user_id),
    repo: PortalRepository = Depends(get_repository),
) -> User:
    """Resolve the token's user; the role always comes from the store."""
    user = repo.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User no longer exists",
        )
    return User.model_validate(user.model_dump(exclude={"password_hash"}))


def get_optional_user(
    authorization: str = Header(None),
    repo: PortalRepository = Depends(get_repository),
) -> Optional[User]:
    """
    Like get_current_user but returns None instead of raising if not authenticated.
    Useful for endpoints that work for both authenticated and anonymous users.
    """
    if not authorization:
        return None

    try:
        return get_current_user(get_current_user_id(authorization), repo)
    except HTTPException:
        return None


def require_role(minimum: UserRole):
    """Dependency factory: the current user must hold `minimum` or a higher role."""

    def dependency(user: User = Depends(get_current_user)) -> User:
        if not role_at_least(user.role, minimum):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{minimum.value} role or higher required",
            )
        return user

    return dependency
