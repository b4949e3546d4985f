"""In‑memory store for artworks."""

from ..models.artwork import Artwork
from .base import RecordStore


class ArtworkStore(RecordStore[Artwork]):
    """Owns every ``Artwork`` known to the catalog."""

    kind = "artwork"
