"""
Playlist endpoints.

These routes provide CRUD operations for playlists under
``/api/playlists``.  Request bodies are accepted as raw JSON and
parsed by the service layer, which raises ``NotFoundError`` or
``ValidationError``; the handlers translate those into HTTP 404 and
400 responses.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from playlist_api.app.api.request_bodies import (
    PLAYLIST_CREATE_BODY,
    PLAYLIST_REPLACE_BODY,
    PLAYLIST_UPDATE_BODY,
)
from playlist_api.app.core.errors import PlaylistAPIError
from playlist_api.app.schemas.playlist import PlaylistRead, PlaylistSummary
from playlist_api.app.services.playlist_service import PlaylistService, get_playlist_service

router = APIRouter()


@router.get("", response_model=List[PlaylistSummary])
@router.get("/", response_model=List[PlaylistSummary], include_in_schema=False)
async def list_playlists(
    q: Optional[str] = Query(None, description="Search by name/description/tag"),
    service: PlaylistService = Depends(get_playlist_service),
) -> List[PlaylistSummary]:
    """List playlists in creation order.

    Each entry carries ``trackCount``.  When ``q`` is given only
    playlists whose name, description or one of the tags contains it
    (case-insensitively) are returned.
    """
    return service.list_playlists(q)


@router.get("/{playlist_id}", response_model=PlaylistRead)
async def get_playlist(
    playlist_id: int,
    service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistRead:
    """Retrieve a playlist with all of its tracks.

    Returns HTTP 404 if the playlist does not exist.
    """
    try:
        return service.get_playlist(playlist_id)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.post(
    "",
    response_model=PlaylistRead,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=PLAYLIST_CREATE_BODY,
)
@router.post("/", response_model=PlaylistRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_playlist(
    payload: Any = Body(None),
    service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistRead:
    """Create a playlist.  ``name`` must be a non-empty string."""
    try:
        return service.create_playlist(payload)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.put("/{playlist_id}", response_model=PlaylistRead, openapi_extra=PLAYLIST_REPLACE_BODY)
async def replace_playlist(
    playlist_id: int,
    payload: Any = Body(None),
    service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistRead:
    """Replace a playlist.

    Everything but the id is overwritten, including the track list.
    """
    try:
        return service.replace_playlist(playlist_id, payload)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.patch("/{playlist_id}", response_model=PlaylistRead, openapi_extra=PLAYLIST_UPDATE_BODY)
async def update_playlist(
    playlist_id: int,
    payload: Any = Body(None),
    service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistRead:
    """Update a playlist (partial).  Unknown fields are ignored."""
    try:
        return service.update_playlist(playlist_id, payload)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.delete("/{playlist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_playlist(
    playlist_id: int,
    service: PlaylistService = Depends(get_playlist_service),
) -> None:
    """Delete a playlist together with its tracks."""
    try:
        service.delete_playlist(playlist_id)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return None
