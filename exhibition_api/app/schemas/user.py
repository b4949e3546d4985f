"""
Pydantic models for user data and authentication.
"""

from pydantic import BaseModel, Field


class UserLogin(BaseModel):
    """Login payload.  Usernames are matched case‑insensitively."""

    username: str = Field(..., min_length=1, examples=["admin"])


class UserRead(BaseModel):
    username: str
    role: str

    model_config = {
        "from_attributes": True,
    }


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
