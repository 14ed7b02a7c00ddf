"""
Business logic for tracks.

Tracks only exist inside a playlist, so every operation first looks
up the parent playlist and raises ``NotFoundError("Playlist not
found")`` when it is missing.  Payloads are parsed completely before
the store is touched; a batch create with one invalid item leaves the
playlist unchanged.
"""

import logging
from typing import Any, List, Optional, Union

from fastapi import Depends

from playlist_api.app.core.errors import NotFoundError, ValidationError
from playlist_api.app.core.store import Playlist, PlaylistStore, Track, get_store
from playlist_api.app.schemas.track import TrackCreate, TrackRead, TrackReplace, TrackUpdate

logger = logging.getLogger(__name__)

PLAYLIST_NOT_FOUND = "Playlist not found"
TRACK_NOT_FOUND = "Track not found"


def track_to_read(track: Track) -> TrackRead:
    """Convert a store record into its response schema."""
    return TrackRead(
        id=track.id,
        title=track.title,
        artist=track.artist,
        url=track.url,
        duration_sec=track.duration_sec,
    )


def matches_track(track: Track, needle: str) -> bool:
    return needle in track.title.lower() or needle in track.artist.lower()


class TrackService:
    """Service for the tracks of a playlist."""

    def __init__(self, store: PlaylistStore) -> None:
        self.store = store

    def _playlist(self, playlist_id: int) -> Playlist:
        playlist = self.store.find_playlist(playlist_id)
        if playlist is None:
            raise NotFoundError(PLAYLIST_NOT_FOUND)
        return playlist

    def _track(self, playlist: Playlist, track_id: int) -> Track:
        track = self.store.find_track(playlist, track_id)
        if track is None:
            raise NotFoundError(TRACK_NOT_FOUND)
        return track

    def list_tracks(self, playlist_id: int, q: Optional[str] = None) -> List[TrackRead]:
        """Return the playlist's tracks, optionally filtered by ``q``.

        ``q`` is matched case-insensitively as a substring of the title
        or the artist.  A blank ``q`` returns every track.
        """
        needle = (q or "").strip().lower()
        with self.store.lock:
            playlist = self._playlist(playlist_id)
            tracks = playlist.tracks
            if needle:
                tracks = [t for t in tracks if matches_track(t, needle)]
            return [track_to_read(t) for t in tracks]

    def get_track(self, playlist_id: int, track_id: int) -> TrackRead:
        with self.store.lock:
            playlist = self._playlist(playlist_id)
            return track_to_read(self._track(playlist, track_id))

    def add_tracks(self, playlist_id: int, payload: Any) -> Union[TrackRead, List[TrackRead]]:
        """Append one track or a batch of tracks to a playlist.

        The response mirrors the payload: a single object yields a single
        track, a list yields a list in input order.
        """
        with self.store.lock:
            playlist = self._playlist(playlist_id)
            is_batch = isinstance(payload, list)
            items = payload if is_batch else [payload]
            if not items:
                raise ValidationError("Track payload required")
            try:
                parsed = [TrackCreate.parse(item) for item in items]
            except ValidationError:
                logger.debug("Rejected track payload for playlist %s", playlist_id)
                raise
            created = []
            for data in parsed:
                track = Track(
                    id=self.store.allocate_track_id(),
                    title=data.title,
                    artist=data.artist,
                    url=data.url,
                    duration_sec=data.duration_sec,
                )
                playlist.tracks.append(track)
                created.append(track)
            logger.info(
                "Added tracks %s to playlist %s",
                ", ".join(str(t.id) for t in created),
                playlist_id,
            )
            result = [track_to_read(t) for t in created]
            return result if is_batch else result[0]

    def replace_track(self, playlist_id: int, track_id: int, payload: Any) -> TrackRead:
        """Replace a track in place, keeping its id and position."""
        with self.store.lock:
            playlist = self._playlist(playlist_id)
            current = self._track(playlist, track_id)
            data = TrackReplace.parse(payload if payload is not None else {})
            updated = Track(
                id=current.id,
                title=data.title,
                artist=data.artist,
                url=data.url,
                duration_sec=data.duration_sec,
            )
            playlist.tracks[playlist.tracks.index(current)] = updated
            logger.info("Replaced track %s in playlist %s", track_id, playlist_id)
            return track_to_read(updated)

    def update_track(self, playlist_id: int, track_id: int, payload: Any) -> TrackRead:
        """Apply a partial update.

        Only the supplied fields among ``title``, ``artist``, ``url`` and
        ``durationSec`` change; an invalid duration keeps the old value.
        """
        with self.store.lock:
            playlist = self._playlist(playlist_id)
            track = self._track(playlist, track_id)
            data = TrackUpdate.parse(payload if payload is not None else {})
            changes = data.model_dump(exclude_unset=True)
            if changes.get("duration_sec", 0) is None:
                del changes["duration_sec"]
            for key, value in changes.items():
                setattr(track, key, value)
            logger.info("Updated track %s in playlist %s: %s", track_id, playlist_id, sorted(changes))
            return track_to_read(track)

    def delete_track(self, playlist_id: int, track_id: int) -> None:
        with self.store.lock:
            playlist = self._playlist(playlist_id)
            track = self._track(playlist, track_id)
            playlist.tracks.remove(track)
            logger.info("Deleted track %s from playlist %s", track_id, playlist_id)


def get_track_service(store: PlaylistStore = Depends(get_store)) -> TrackService:
    return TrackService(store)
