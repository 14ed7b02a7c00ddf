"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Playlists and tracks each expose a router defined in
``api/endpoints``; the business logic lives in ``services`` and the
in‑memory store in ``core.store``.
"""

from .main import app  # noqa: F401
