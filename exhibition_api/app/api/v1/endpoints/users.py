"""
User endpoints for API v1.

Provide login, a "who am I" lookup and the admin‑only user list.  There is no registration and
there are no passwords: logging in with a known username returns a
bearer token that carries the user's role.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from exhibition_api.app.api.deps import get_settings, get_user_service
from exhibition_api.app.core.config import Settings
from exhibition_api.app.core.security import create_access_token, get_current_user, require_roles
from exhibition_api.app.models.user import User
from exhibition_api.app.schemas.user import Token, UserLogin, UserRead
from exhibition_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/login", response_model=Token)
async def login_user(
    credentials: UserLogin,
    users: UserService = Depends(get_user_service),
    app_settings: Settings = Depends(get_settings),
) -> Token:
    """Authenticate a user by username and return a token.

    Returns HTTP 401 if the username is unknown.
    """
    user = users.login(credentials.username)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token(
        {"sub": user.username, "role": user.role},
        expires_delta=app_settings.access_token_expire_minutes * 60,
        secret_key=app_settings.secret_key,
    )
    return Token(access_token=token)


@router.get("/", response_model=List[UserRead])
async def list_users(
    users: UserService = Depends(get_user_service),
    current_user: User = Depends(require_roles("admin")),
) -> List[UserRead]:
    """List every known user (admin only)."""
    return [UserRead.model_validate(u) for u in users.list_users()]


@router.get("/me", response_model=UserRead)
async def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    """Return the user the bearer token belongs to."""
    return UserRead.model_validate(current_user)
