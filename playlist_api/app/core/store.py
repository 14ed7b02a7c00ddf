"""
In-memory storage for playlists and their tracks.

The ``PlaylistStore`` is the single authority for playlist and track
state and for identifier allocation.  Nothing is persisted; the data
lives as long as the process.  One store is created per application
by ``main.create_app`` and handed to the services through the
``get_store`` dependency.

Every read and write must happen while holding ``PlaylistStore.lock``
so that a request's mutations are never observed half applied.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Set

from fastapi import Request

logger = logging.getLogger(__name__)


@dataclass
class Track:
    id: int
    title: str
    artist: str = ""
    url: str = ""
    duration_sec: int = 0


@dataclass
class Playlist:
    id: int
    name: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    tracks: List[Track] = field(default_factory=list)


DEMO_TRACKS = [
    ("Blinding Lights", "The Weeknd", 200),
    ("Levitating", "Dua Lipa", 203),
    ("Watermelon Sugar", "Harry Styles", 174),
    ("Save Your Tears", "The Weeknd", 195),
    ("Peaches", "Justin Bieber", 198),
]


class PlaylistStore:
    """Ordered registry of playlists with store-wide id counters.

    Playlist and track ids are allocated from two counters that only
    ever grow, so an id is never handed out twice even after the
    entity holding it has been deleted.  Track ids are shared by all
    playlists.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.playlists: List[Playlist] = []
        self._next_playlist_id = 1
        self._next_track_id = 1

    # ------------------------------------------------------------------
    # Identifier allocation
    # ------------------------------------------------------------------
    def allocate_playlist_id(self) -> int:
        with self.lock:
            playlist_id = self._next_playlist_id
            self._next_playlist_id += 1
            return playlist_id

    def allocate_track_id(self) -> int:
        with self.lock:
            track_id = self._next_track_id
            self._next_track_id += 1
            return track_id

    def reserve_track_id(self, track_id: int) -> None:
        """Advance the track counter past an id supplied by a client."""
        with self.lock:
            if track_id >= self._next_track_id:
                self._next_track_id = track_id + 1

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def find_playlist(self, playlist_id: int) -> Optional[Playlist]:
        with self.lock:
            return next((p for p in self.playlists if p.id == playlist_id), None)

    @staticmethod
    def find_track(playlist: Playlist, track_id: int) -> Optional[Track]:
        """Return the track with ``track_id`` from ``playlist`` only."""
        return next((t for t in playlist.tracks if t.id == track_id), None)

    def track_ids_outside(self, playlist_id: int) -> Set[int]:
        """Return the ids of every track held by the other playlists."""
        with self.lock:
            return {t.id for p in self.playlists if p.id != playlist_id for t in p.tracks}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_playlist(self, playlist: Playlist) -> Playlist:
        with self.lock:
            self.playlists.append(playlist)
            return playlist

    def replace_playlist(self, playlist: Playlist) -> bool:
        """Swap the stored playlist carrying ``playlist.id`` in place."""
        with self.lock:
            for index, existing in enumerate(self.playlists):
                if existing.id == playlist.id:
                    self.playlists[index] = playlist
                    return True
            return False

    def remove_playlist(self, playlist_id: int) -> bool:
        with self.lock:
            for index, existing in enumerate(self.playlists):
                if existing.id == playlist_id:
                    del self.playlists[index]
                    return True
            return False

    def __len__(self) -> int:
        with self.lock:
            return len(self.playlists)

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------
    def seed_demo_data(self) -> None:
        """Load the demo playlist (id 1) with its five tracks (ids 1-5)."""
        with self.lock:
            tracks = [
                Track(id=self.allocate_track_id(), title=title, artist=artist, duration_sec=duration)
                for title, artist, duration in DEMO_TRACKS
            ]
            self.add_playlist(
                Playlist(
                    id=self.allocate_playlist_id(),
                    name="Default Playlist",
                    description="demo playlist",
                    tags=["demo", "default"],
                    tracks=tracks,
                )
            )
        logger.info("Seeded demo playlist with %d tracks", len(tracks))


def get_store(request: Request) -> PlaylistStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
