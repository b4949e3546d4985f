"""Artwork record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Artwork:
    """A single artwork listed in the catalog.

    Artworks are immutable once created.  The ``id`` is assigned by the
    caller and is not checked for uniqueness; see ``ArtworkStore`` for
    how duplicate identifiers are resolved.

    Attributes:
        id: Caller‑assigned identifier.
        title: Title of the work.
        artist: Name of the artist.
        price: Asking price, expected to be non‑negative.
    """

    id: int
    title: str
    artist: str
    price: float

    def __str__(self) -> str:
        return f"{self.id} | {self.title} by {self.artist} | ₹{self.price}"
