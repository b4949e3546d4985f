"""Gallery record."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Gallery:
    """A gallery that displays a number of artworks.

    The gallery does not own its artworks.  It keeps the identifiers of
    linked artworks in link order and the service resolves them through
    the artwork store when they are read.  The same artwork may be
    linked more than once.
    """

    id: int
    name: str
    artwork_ids: List[int] = field(default_factory=list)

    def add_artwork(self, artwork_id: int) -> None:
        self.artwork_ids.append(artwork_id)

    def __str__(self) -> str:
        return f"{self.id} | {self.name} (Artworks: {len(self.artwork_ids)})"
