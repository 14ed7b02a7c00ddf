"""
Service layer abstraction.

Each service encapsulates business logic for a resource.  Services
receive the ``PlaylistStore`` they operate on, so the in‑memory store
used here could be swapped for persistent storage without changing the
API handlers.
"""
