"""In‑memory store for galleries."""

from ..models.gallery import Gallery
from .base import RecordStore


class GalleryStore(RecordStore[Gallery]):
    """Owns every ``Gallery`` known to the catalog.

    Galleries returned by ``get_by_id`` are the stored instances, so
    linking an artwork through them mutates the store's copy.
    """

    kind = "gallery"
