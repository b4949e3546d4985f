"""
Pydantic models for gallery data.

A gallery is returned together with the artworks linked into it, in
link order.  The stored record only keeps artwork ids, so the API
layer resolves them through ``ExhibitionService`` before building a
``GalleryRead``.
"""

from typing import List

from pydantic import BaseModel, Field

from .artwork import ArtworkRead


class GalleryCreate(BaseModel):
    """Schema for adding a gallery."""

    id: int = Field(..., examples=[3])
    name: str = Field(..., examples=["Contemporary Sculpture Hall"])


class GalleryRead(BaseModel):
    """Schema for reading a gallery from the API."""

    id: int
    name: str
    artworks: List[ArtworkRead] = Field(default_factory=list)

    model_config = {
        "from_attributes": True,
    }
