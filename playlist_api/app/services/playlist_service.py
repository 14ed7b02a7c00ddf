"""
Business logic for playlists.

``PlaylistService`` implements list/search, retrieval, creation,
replacement, partial update and deletion of playlists on top of a
``PlaylistStore``.  Every method holds the store lock for its whole
duration and parses the request payload before mutating anything.
"""

import logging
from typing import Any, List, Optional

from fastapi import Depends

from playlist_api.app.core.errors import NotFoundError
from playlist_api.app.core.store import Playlist, PlaylistStore, Track, get_store
from playlist_api.app.schemas.playlist import (
    PlaylistCreate,
    PlaylistRead,
    PlaylistReplace,
    PlaylistSummary,
    PlaylistUpdate,
)
from playlist_api.app.schemas.track import TrackDraft
from playlist_api.app.services.track_service import track_to_read

logger = logging.getLogger(__name__)

NOT_FOUND = "Not found"


def playlist_to_read(playlist: Playlist) -> PlaylistRead:
    """Convert a store record into its response schema."""
    return PlaylistRead(
        id=playlist.id,
        name=playlist.name,
        description=playlist.description,
        tags=list(playlist.tags),
        tracks=[track_to_read(t) for t in playlist.tracks],
    )


def matches_playlist(playlist: Playlist, needle: str) -> bool:
    return (
        needle in playlist.name.lower()
        or needle in playlist.description.lower()
        or any(needle in tag.lower() for tag in playlist.tags)
    )


class PlaylistService:
    """Service for managing playlists.

    Identifiers come from the store's counters; a deleted playlist's id
    is never handed out again.
    """

    def __init__(self, store: PlaylistStore) -> None:
        self.store = store

    def _playlist(self, playlist_id: int) -> Playlist:
        playlist = self.store.find_playlist(playlist_id)
        if playlist is None:
            raise NotFoundError(NOT_FOUND)
        return playlist

    def list_playlists(self, q: Optional[str] = None) -> List[PlaylistSummary]:
        """Return playlists in insertion order, each with ``trackCount``.

        ``q`` is trimmed and matched case-insensitively as a substring of
        the name, the description or any tag.
        """
        needle = (q or "").strip().lower()
        with self.store.lock:
            playlists = self.store.playlists
            if needle:
                playlists = [p for p in playlists if matches_playlist(p, needle)]
            return [
                PlaylistSummary(
                    **playlist_to_read(p).model_dump(),
                    track_count=len(p.tracks),
                )
                for p in playlists
            ]

    def get_playlist(self, playlist_id: int) -> PlaylistRead:
        with self.store.lock:
            return playlist_to_read(self._playlist(playlist_id))

    def create_playlist(self, payload: Any) -> PlaylistRead:
        data = PlaylistCreate.parse(payload if payload is not None else {})
        with self.store.lock:
            playlist = self.store.add_playlist(
                Playlist(
                    id=self.store.allocate_playlist_id(),
                    name=data.name,
                    description=data.description,
                    tags=data.tags,
                )
            )
        logger.info("Created playlist %s", playlist.id)
        return playlist_to_read(playlist)

    def replace_playlist(self, playlist_id: int, payload: Any) -> PlaylistRead:
        """Replace a whole playlist, keeping only its id.

        Supplied tracks keep a valid ``id`` that is neither repeated in
        the request nor held by a track of another playlist; any other
        track gets a freshly allocated one.
        """
        with self.store.lock:
            self._playlist(playlist_id)
            data = PlaylistReplace.parse(payload if payload is not None else {})
            updated = Playlist(
                id=playlist_id,
                name=data.name,
                description=data.description,
                tags=data.tags,
                tracks=self._normalize_tracks(playlist_id, data.tracks),
            )
            self.store.replace_playlist(updated)
            logger.info("Replaced playlist %s (%d tracks)", playlist_id, len(updated.tracks))
            return playlist_to_read(updated)

    def _normalize_tracks(self, playlist_id: int, drafts: List[TrackDraft]) -> List[Track]:
        tracks: List[Track] = []
        seen = self.store.track_ids_outside(playlist_id)
        for draft in drafts:
            if draft.id is not None and draft.id not in seen:
                track_id = draft.id
                self.store.reserve_track_id(track_id)
            else:
                track_id = self.store.allocate_track_id()
            seen.add(track_id)
            tracks.append(
                Track(
                    id=track_id,
                    title=draft.title,
                    artist=draft.artist,
                    url=draft.url,
                    duration_sec=draft.duration_sec,
                )
            )
        return tracks

    def update_playlist(self, playlist_id: int, payload: Any) -> PlaylistRead:
        """Apply the supplied ``name``, ``description`` and ``tags``."""
        with self.store.lock:
            playlist = self._playlist(playlist_id)
            data = PlaylistUpdate.parse(payload if payload is not None else {})
            changes = data.model_dump(exclude_unset=True)
            for key, value in changes.items():
                setattr(playlist, key, value)
            logger.info("Updated playlist %s: %s", playlist_id, sorted(changes))
            return playlist_to_read(playlist)

    def delete_playlist(self, playlist_id: int) -> None:
        with self.store.lock:
            if not self.store.remove_playlist(playlist_id):
                raise NotFoundError(NOT_FOUND)
        logger.info("Deleted playlist %s", playlist_id)


def get_playlist_service(store: PlaylistStore = Depends(get_store)) -> PlaylistService:
    return PlaylistService(store)
