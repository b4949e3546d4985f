"""User record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    username: str
    # "admin" or "user"
    role: str

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"
