"""
Pydantic schema definitions for API payloads.

Each operation parses its request body into a dedicated input model
(``PlaylistCreate``, ``TrackUpdate`` ...) and responds with a read
model.  Schemas are separated from the store records in ``core.store``
to decouple the API representation from the in‑memory data.
"""
