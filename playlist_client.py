"""Playlist API client.

This module defines a simple client wrapper around the Playlist REST
API served by ``playlist_api.app.main``.  The client uses the
``requests`` library internally to make HTTP calls.

The client exposes one method per API operation:

* :meth:`list_playlists`, :meth:`get_playlist`, :meth:`create_playlist`,
  :meth:`replace_playlist`, :meth:`update_playlist`, :meth:`delete_playlist`
* :meth:`list_tracks`, :meth:`get_track`, :meth:`add_tracks`,
  :meth:`replace_track`, :meth:`update_track`, :meth:`delete_track`
* :meth:`health`

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list / ``False``
where noted) and ``error`` is a dictionary with keys ``status_code``
and ``message``.  Network errors are reported the same way and never
raised.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PlaylistAPIClient:
    """Client for interacting with the Playlist API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            timeout: Timeout in seconds applied to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/api/playlists``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for empty responses such as 204.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _search(q: Optional[str]) -> Optional[Dict[str, str]]:
        return {"q": q} if q else None

    # ------------------------------------------------------------------
    # Playlist operations
    # ------------------------------------------------------------------
    def list_playlists(self, q: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve playlists, optionally filtered by ``q``.

        Returns:
            A tuple ``(playlists, error)``.  ``playlists`` is empty on failure.
        """
        data, error = self._request("GET", "/api/playlists", params=self._search(q))
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_playlist(self, playlist_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/playlists/{playlist_id}")

    def create_playlist(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/api/playlists", json_body=payload)

    def replace_playlist(self, playlist_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/api/playlists/{playlist_id}", json_body=payload)

    def update_playlist(self, playlist_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/api/playlists/{playlist_id}", json_body=payload)

    def delete_playlist(self, playlist_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a playlist.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/api/playlists/{playlist_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Track operations
    # ------------------------------------------------------------------
    def list_tracks(self, playlist_id: Any, q: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request(
            "GET", f"/api/playlists/{playlist_id}/tracks", params=self._search(q)
        )
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_track(self, playlist_id: Any, track_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/playlists/{playlist_id}/tracks/{track_id}")

    def add_tracks(self, playlist_id: Any, tracks: Any) -> Tuple[Optional[Any], Optional[Error]]:
        """Add one track (a dict) or several (a list of dicts).

        The returned data mirrors the shape of ``tracks``.
        """
        return self._request("POST", f"/api/playlists/{playlist_id}/tracks", json_body=tracks)

    def replace_track(self, playlist_id: Any, track_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/api/playlists/{playlist_id}/tracks/{track_id}", json_body=payload)

    def update_track(self, playlist_id: Any, track_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/api/playlists/{playlist_id}/tracks/{track_id}", json_body=payload)

    def delete_track(self, playlist_id: Any, track_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/api/playlists/{playlist_id}/tracks/{track_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Service
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/api/health")
