"""
Pydantic models for artwork data.

``ArtworkCreate`` is the request body for adding an artwork and
``ArtworkRead`` the response shape.  Both share the fields declared on
``ArtworkBase``.  Prices must be finite and non‑negative.
"""

from pydantic import BaseModel, Field


class ArtworkBase(BaseModel):
    title: str = Field(..., examples=["Sunset Dreams"])
    artist: str = Field(..., examples=["A. Sharma"])
    price: float = Field(..., ge=0, allow_inf_nan=False, examples=[15000])


class ArtworkCreate(ArtworkBase):
    """Schema for adding an artwork.  The id is chosen by the caller."""

    id: int = Field(..., examples=[104])


class ArtworkRead(ArtworkBase):
    """Schema for reading an artwork from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
