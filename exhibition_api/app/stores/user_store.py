"""
In‑memory store for users.

The user list is fixed at construction time.  There is no
registration; the three default accounts cover the administrator and
regular visitor roles.
"""

from typing import Iterable, List, Optional

from ..models.user import User

DEFAULT_USERS = (
    User("admin", "admin"),
    User("john", "user"),
    User("guest", "user"),
)


class UserStore:
    """Holds the known users and resolves them by username."""

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self._users: List[User] = list(DEFAULT_USERS if users is None else users)

    def get_all(self) -> List[User]:
        return list(self._users)

    def login(self, username: str) -> Optional[User]:
        """Return the first user whose name matches ``username`` ignoring case."""
        wanted = username.casefold()
        for user in self._users:
            if user.username.casefold() == wanted:
                return user
        return None
