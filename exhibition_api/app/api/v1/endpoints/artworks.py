"""
Artwork endpoints for API v1.

Artworks can be listed and retrieved by anyone; adding an artwork
requires the ``admin`` role.  Prices must be non‑negative, which is
enforced by the request schema.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from exhibition_api.app.api.deps import get_exhibition_service
from exhibition_api.app.core.security import require_roles
from exhibition_api.app.models.user import User
from exhibition_api.app.schemas.artwork import ArtworkCreate, ArtworkRead
from exhibition_api.app.services.exhibition_service import ExhibitionService

router = APIRouter()


@router.get("/", response_model=List[ArtworkRead])
async def list_artworks(
    service: ExhibitionService = Depends(get_exhibition_service),
) -> List[ArtworkRead]:
    """Return all artworks in the order they were added."""
    return [ArtworkRead.model_validate(a) for a in service.get_artworks()]


@router.get("/{artwork_id}", response_model=ArtworkRead)
async def get_artwork(
    artwork_id: int,
    service: ExhibitionService = Depends(get_exhibition_service),
) -> ArtworkRead:
    """Retrieve a single artwork by ID.  Returns HTTP 404 if not found."""
    artwork = service.get_artwork_by_id(artwork_id)
    if artwork is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artwork not found")
    return ArtworkRead.model_validate(artwork)


@router.post("/", response_model=ArtworkRead, status_code=status.HTTP_201_CREATED)
async def create_artwork(
    artwork_in: ArtworkCreate,
    service: ExhibitionService = Depends(get_exhibition_service),
    current_user: User = Depends(require_roles("admin")),
) -> ArtworkRead:
    """Add an artwork (admin only)."""
    service.add_artwork(artwork_in.id, artwork_in.title, artwork_in.artist, artwork_in.price)
    return ArtworkRead(**artwork_in.model_dump())
