"""
Gallery endpoints for API v1.

Listing and reading galleries is public.  Creating a gallery and
linking artworks into it is restricted to administrators.  Galleries
are returned with their linked artworks resolved.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from exhibition_api.app.api.deps import get_exhibition_service
from exhibition_api.app.core.security import require_roles
from exhibition_api.app.models.gallery import Gallery
from exhibition_api.app.models.user import User
from exhibition_api.app.schemas.artwork import ArtworkRead
from exhibition_api.app.schemas.gallery import GalleryCreate, GalleryRead
from exhibition_api.app.services.exhibition_service import ExhibitionService

router = APIRouter()


def _to_gallery_read(service: ExhibitionService, gallery: Gallery) -> GalleryRead:
    return GalleryRead(
        id=gallery.id,
        name=gallery.name,
        artworks=[ArtworkRead.model_validate(a) for a in service.resolve_artworks(gallery)],
    )


@router.get("/", response_model=List[GalleryRead])
async def list_galleries(
    service: ExhibitionService = Depends(get_exhibition_service),
) -> List[GalleryRead]:
    """Return all galleries in the order they were added."""
    return [_to_gallery_read(service, g) for g in service.get_galleries()]


@router.get("/{gallery_id}", response_model=GalleryRead)
async def get_gallery(
    gallery_id: int,
    service: ExhibitionService = Depends(get_exhibition_service),
) -> GalleryRead:
    """Retrieve a single gallery by ID.  Returns HTTP 404 if not found."""
    gallery = service.get_gallery_by_id(gallery_id)
    if gallery is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery not found")
    return _to_gallery_read(service, gallery)


@router.post("/", response_model=GalleryRead, status_code=status.HTTP_201_CREATED)
async def create_gallery(
    gallery_in: GalleryCreate,
    service: ExhibitionService = Depends(get_exhibition_service),
    current_user: User = Depends(require_roles("admin")),
) -> GalleryRead:
    """Add a gallery (admin only).

    Identifiers are not checked for uniqueness.  If the id is already
    taken the new gallery is stored but lookups keep returning the
    existing one.
    """
    service.add_gallery(gallery_in.id, gallery_in.name)
    return GalleryRead(id=gallery_in.id, name=gallery_in.name, artworks=[])


@router.get("/{gallery_id}/artworks", response_model=List[ArtworkRead])
async def list_gallery_artworks(
    gallery_id: int,
    service: ExhibitionService = Depends(get_exhibition_service),
) -> List[ArtworkRead]:
    """Return the artworks linked into a gallery.

    An unknown gallery yields an empty list, not a 404.
    """
    return [ArtworkRead.model_validate(a) for a in service.get_artworks_in_gallery(gallery_id)]


@router.post("/{gallery_id}/artworks/{artwork_id}", response_model=GalleryRead)
async def link_artwork(
    gallery_id: int,
    artwork_id: int,
    service: ExhibitionService = Depends(get_exhibition_service),
    current_user: User = Depends(require_roles("admin")),
) -> GalleryRead:
    """Link an artwork into a gallery (admin only).

    Returns HTTP 404 when either the gallery or the artwork does not
    exist; in that case nothing is changed.
    """
    if not service.add_artwork_to_gallery(gallery_id, artwork_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gallery or artwork not found")
    return _to_gallery_read(service, service.get_gallery_by_id(gallery_id))
