"""
Business logic for users.

The ``UserService`` wraps the in‑memory ``UserStore``.  Users are
identified by username only; there are no passwords.  A successful
login is turned into a bearer token by the API layer.
"""

import logging
from typing import List, Optional

from ..models.user import User
from ..stores.user_store import UserStore

logger = logging.getLogger(__name__)


class UserService:
    """Service for looking up users."""

    def __init__(self, store: Optional[UserStore] = None) -> None:
        self._store = store if store is not None else UserStore()

    def login(self, username: str) -> Optional[User]:
        """Return the user matching ``username`` or ``None``.

        The comparison ignores case, so ``"ADMIN"`` resolves to the
        ``admin`` account.
        """
        user = self._store.login(username)
        if user is None:
            logger.info("Login failed for %r", username)
        else:
            logger.info("User %s logged in", user.username)
        return user

    def get_user(self, username: str) -> Optional[User]:
        """Resolve a username without logging it as a login attempt."""
        return self._store.login(username)

    def list_users(self) -> List[User]:
        return self._store.get_all()
