"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers (galleries, artworks, users)
under a unified prefix.  When new domains are introduced, update this
file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import artworks, galleries, users

router = APIRouter()

router.include_router(galleries.router, prefix="/galleries", tags=["galleries"])
router.include_router(artworks.router, prefix="/artworks", tags=["artworks"])
router.include_router(users.router, prefix="/users", tags=["users"])
