"""
Top‑level API router.

This router aggregates the resource routers under a unified prefix
(``/api``, applied in ``main.create_app``).  Playlists and their
tracks share the ``/playlists`` prefix; the tracks router defines the
nested ``/{playlist_id}/tracks`` paths itself.
"""

from fastapi import APIRouter

from .endpoints import health, playlists, tracks

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
router.include_router(tracks.router, prefix="/playlists", tags=["tracks"])
