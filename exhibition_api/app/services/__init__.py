"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The API
handlers only talk to services, so the in‑memory stores used here can
be swapped for another backend without changing the routes.
"""

from .exhibition_service import ExhibitionService, seed_sample_data
from .user_service import UserService

__all__ = ["ExhibitionService", "UserService", "seed_sample_data"]
