"""
In‑memory stores.

Each store owns the records of one entity type and supports add, list
and lookup by id.  Nothing is persisted; a store lives exactly as long
as the service that created it.
"""

from .artwork_store import ArtworkStore
from .gallery_store import GalleryStore
from .user_store import UserStore

__all__ = ["ArtworkStore", "GalleryStore", "UserStore"]
