"""
Track endpoints.

Tracks are nested under their playlist:
``/api/playlists/{playlist_id}/tracks``.  A missing playlist yields
``{"error": "Playlist not found"}`` and a missing track
``{"error": "Track not found"}``, both with HTTP 404.
"""

from typing import Any, List, Optional, Union

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from playlist_api.app.api.request_bodies import TRACK_CREATE_BODY, TRACK_REPLACE_BODY, TRACK_UPDATE_BODY
from playlist_api.app.core.errors import PlaylistAPIError
from playlist_api.app.schemas.track import TrackRead
from playlist_api.app.services.track_service import TrackService, get_track_service

router = APIRouter()


@router.get("/{playlist_id}/tracks", response_model=List[TrackRead])
async def list_tracks(
    playlist_id: int,
    q: Optional[str] = Query(None, description="Search by title or artist"),
    service: TrackService = Depends(get_track_service),
) -> List[TrackRead]:
    """List or search the tracks of a playlist."""
    try:
        return service.list_tracks(playlist_id, q)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.get("/{playlist_id}/tracks/{track_id}", response_model=TrackRead)
async def get_track(
    playlist_id: int,
    track_id: int,
    service: TrackService = Depends(get_track_service),
) -> TrackRead:
    """Get a single track in the playlist."""
    try:
        return service.get_track(playlist_id, track_id)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.post(
    "/{playlist_id}/tracks",
    response_model=Union[TrackRead, List[TrackRead]],
    status_code=status.HTTP_201_CREATED,
    openapi_extra=TRACK_CREATE_BODY,
)
async def add_tracks(
    playlist_id: int,
    payload: Any = Body(None),
    service: TrackService = Depends(get_track_service),
) -> Union[TrackRead, List[TrackRead]]:
    """Add a track (or multiple tracks) to the playlist.

    Every track needs a non-empty ``title``; if one of them does not
    have it nothing is added.  An object in gives an object out, an
    array gives an array.
    """
    try:
        return service.add_tracks(playlist_id, payload)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.put(
    "/{playlist_id}/tracks/{track_id}", response_model=TrackRead, openapi_extra=TRACK_REPLACE_BODY
)
async def replace_track(
    playlist_id: int,
    track_id: int,
    payload: Any = Body(None),
    service: TrackService = Depends(get_track_service),
) -> TrackRead:
    """Replace a track in the playlist, keeping its id and position."""
    try:
        return service.replace_track(playlist_id, track_id, payload)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.patch(
    "/{playlist_id}/tracks/{track_id}", response_model=TrackRead, openapi_extra=TRACK_UPDATE_BODY
)
async def update_track(
    playlist_id: int,
    track_id: int,
    payload: Any = Body(None),
    service: TrackService = Depends(get_track_service),
) -> TrackRead:
    """Update a track (partial) in the playlist."""
    try:
        return service.update_track(playlist_id, track_id, payload)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.delete("/{playlist_id}/tracks/{track_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_track(
    playlist_id: int,
    track_id: int,
    service: TrackService = Depends(get_track_service),
) -> None:
    """Remove a track from the playlist."""
    try:
        service.delete_track(playlist_id, track_id)
    except PlaylistAPIError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return None
