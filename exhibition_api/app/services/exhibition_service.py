"""
Service layer for the exhibition catalog.

``ExhibitionService`` is the single entry point to the catalog.  It
owns one ``ArtworkStore`` and one ``GalleryStore``, builds records
from raw field values and links artworks into galleries.  API handlers
never touch the stores directly.

Lookups signal a missing record by returning ``None``.  Linking with
an unknown gallery or artwork id is skipped without raising; the
boolean result lets callers such as the HTTP layer report it if they
wish.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models.artwork import Artwork
from ..models.gallery import Gallery
from ..stores.artwork_store import ArtworkStore
from ..stores.gallery_store import GalleryStore

logger = logging.getLogger(__name__)

SAMPLE_GALLERIES = (
    (1, "Modern Art Gallery"),
    (2, "Classic Art Gallery"),
)

SAMPLE_ARTWORKS = (
    (101, "Sunset Dreams", "A. Sharma", 15000.0),
    (102, "City Lights", "R. Verma", 22000.0),
    (103, "Nature Bliss", "K. Rao", 18000.0),
)

# (gallery_id, artwork_id)
SAMPLE_LINKS = (
    (1, 101),
    (1, 102),
    (2, 103),
)


def seed_sample_data(service: "ExhibitionService") -> None:
    """Populate ``service`` with the fixed demo catalog.

    Two galleries and three artworks are added, then artworks 101 and
    102 are linked into gallery 1 and artwork 103 into gallery 2.
    Calling this on a service that already holds the sample records
    adds shadowed duplicates and links the artworks a second time.
    """
    for gallery_id, name in SAMPLE_GALLERIES:
        service.add_gallery(gallery_id, name)
    for artwork_id, title, artist, price in SAMPLE_ARTWORKS:
        service.add_artwork(artwork_id, title, artist, price)
    for gallery_id, artwork_id in SAMPLE_LINKS:
        service.add_artwork_to_gallery(gallery_id, artwork_id)
    logger.info(
        "Seeded %d galleries and %d artworks",
        len(SAMPLE_GALLERIES),
        len(SAMPLE_ARTWORKS),
    )


class ExhibitionService:
    """Facade over the artwork and gallery stores.

    Each instance has its own stores, so separate instances never share
    state.  Pass ``seed=False`` to start from an empty catalog.
    """

    def __init__(self, seed: bool = True) -> None:
        self._artworks = ArtworkStore()
        self._galleries = GalleryStore()
        if seed:
            seed_sample_data(self)

    def add_gallery(self, gallery_id: int, name: str) -> None:
        self._galleries.add(Gallery(id=gallery_id, name=name))
        logger.info("Added gallery %s (%s)", gallery_id, name)

    def add_artwork(self, artwork_id: int, title: str, artist: str, price: float) -> None:
        self._artworks.add(Artwork(id=artwork_id, title=title, artist=artist, price=price))
        logger.info("Added artwork %s (%s)", artwork_id, title)

    def add_artwork_to_gallery(self, gallery_id: int, artwork_id: int) -> bool:
        """Link an existing artwork into an existing gallery.

        Returns ``True`` when the link was made.  If either id is
        unknown nothing changes and ``False`` is returned.
        """
        gallery = self._galleries.get_by_id(gallery_id)
        artwork = self._artworks.get_by_id(artwork_id)
        if gallery is None or artwork is None:
            logger.debug(
                "Skipped linking artwork %s into gallery %s: %s not found",
                artwork_id,
                gallery_id,
                "gallery" if gallery is None else "artwork",
            )
            return False
        gallery.add_artwork(artwork.id)
        logger.info("Linked artwork %s into gallery %s", artwork_id, gallery_id)
        return True

    def get_galleries(self) -> List[Gallery]:
        return self._galleries.get_all()

    def get_artworks(self) -> List[Artwork]:
        return self._artworks.get_all()

    def get_gallery_by_id(self, gallery_id: int) -> Optional[Gallery]:
        return self._galleries.get_by_id(gallery_id)

    def get_artworks_in_gallery(self, gallery_id: int) -> List[Artwork]:
        """Return the artworks linked into a gallery in link order.

        An unknown gallery yields an empty list rather than ``None``.
        """
        gallery = self._galleries.get_by_id(gallery_id)
        if gallery is None:
            return []
        return self.resolve_artworks(gallery)

    def resolve_artworks(self, gallery: Gallery) -> List[Artwork]:
        """Turn the artwork ids linked into ``gallery`` into artworks, in link order.

        Works on the given instance, so a gallery shadowed by an earlier
        one with the same id still reports its own links.
        """
        artworks: List[Artwork] = []
        for artwork_id in gallery.artwork_ids:
            artwork = self._artworks.get_by_id(artwork_id)
            # Links are only made to stored artworks and artworks are never removed
            if artwork is not None:
                artworks.append(artwork)
        return artworks

    def get_artwork_by_id(self, artwork_id: int) -> Optional[Artwork]:
        return self._artworks.get_by_id(artwork_id)
