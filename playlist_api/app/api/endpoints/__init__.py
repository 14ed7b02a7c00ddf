"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
resource (playlists, tracks, health).  The routers are aggregated in
``api/router.py``.
"""
