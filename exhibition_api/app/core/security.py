"""
Security helpers for token authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed
the username (``sub``), the user's role and an expiration timestamp
(``exp``).  A secret key from the application settings is used to sign
and verify the token.

Users have no passwords in this application, so a token only proves
that the holder logged in with a known username.
"""

import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..api.deps import get_settings, get_user_service
from ..models.user import User
from ..services.user_service import UserService
from .config import Settings, settings


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[int] = None,
    secret_key: Optional[str] = None,
) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field representing the
    expiration time as a UNIX timestamp.  A standard header with
    algorithm HS256 is used.  The token is a string of the form
    ``header.payload.signature``, where each part is base64url
    encoded.  Clients must include this token in the ``Authorization``
    header as ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. {"sub": "admin", "role": "admin"}).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.  A negative
        value produces an already expired token.
    secret_key : Optional[str]
        Signing key.  Defaults to ``settings.secret_key``.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature = _sign(signing_input, secret_key or settings.secret_key)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(token: str, secret_key: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Splits the token into header, payload and signature, verifies the
    HMAC signature and checks the ``exp`` field.  If validation
    succeeds, returns the payload dictionary; otherwise returns
    ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, secret_key or settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
        # Constant‑time comparison to prevent timing attacks
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if not isinstance(exp, int) or exp < int(time.time()):
        return None
    return data


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    app_settings: Settings = Depends(get_settings),
    users: UserService = Depends(get_user_service),
) -> User:
    """Dependency that retrieves the current authenticated user.

    If the request does not contain an ``Authorization`` header or the
    token is invalid/expired, an HTTP 401 error is raised.  The token
    subject is resolved through the application's ``UserService`` so
    that tokens for unknown users are rejected as well.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials, secret_key=app_settings.secret_key)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = users.get_user(str(payload.get("sub", "")))
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User no longer exists",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


# ---------------------------------------------------------------------------
# Role-based access control (RBAC) helpers
# ---------------------------------------------------------------------------

def require_roles(*roles: str) -> Callable[..., User]:
    """Dependency factory to enforce that the current user has one of the specified roles.

    Use this in FastAPI endpoints via ``Depends(require_roles("admin"))``
    to restrict a route to administrators.  If the authenticated user's
    role is not listed, an HTTP 403 error is raised.
    """

    def _role_dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return _role_dependency
