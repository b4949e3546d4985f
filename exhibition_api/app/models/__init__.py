"""
Domain records for the exhibition catalog.

These are plain dataclasses held by the in‑memory stores.  They are
kept separate from the Pydantic schemas in ``app.schemas`` so that the
service layer does not depend on the API representation.
"""

from .artwork import Artwork
from .gallery import Gallery
from .user import User

__all__ = ["Artwork", "Gallery", "User"]
