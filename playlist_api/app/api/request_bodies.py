"""
OpenAPI request bodies for the write endpoints.

Handlers take the body as raw JSON so the service layer can produce
the API's own error messages; the input shapes are documented here and
attached to each route through ``openapi_extra``.
"""

from typing import Any, Dict

TRACK_INPUT = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "example": "Blinding Lights"},
        "artist": {"type": "string", "example": "The Weeknd"},
        "url": {"type": "string", "example": "https://example.com/track.mp3"},
        "durationSec": {"type": "integer", "minimum": 0, "example": 200},
    },
}

PLAYLIST_INPUT = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "example": "My Playlist"},
        "description": {"type": "string", "example": "Notes"},
        "tags": {"type": "array", "items": {"type": "string"}, "example": ["demo"]},
    },
}

TRACK_DRAFT = {
    "type": "object",
    "properties": {"id": {"type": "integer", "minimum": 1}, **TRACK_INPUT["properties"]},
}


def json_body(schema: Dict[str, Any], *, required=(), description: str = "") -> Dict[str, Any]:
    """Build an ``openapi_extra`` mapping that documents a JSON body."""
    body_schema = dict(schema)
    if required:
        body_schema["required"] = list(required)
    return {
        "requestBody": {
            "description": description,
            "content": {"application/json": {"schema": body_schema}},
        }
    }


PLAYLIST_CREATE_BODY = json_body(
    PLAYLIST_INPUT, required=["name"], description="name (required), description, tags"
)
PLAYLIST_REPLACE_BODY = json_body(
    {
        "type": "object",
        "properties": {
            **PLAYLIST_INPUT["properties"],
            "tracks": {"type": "array", "items": TRACK_DRAFT},
        },
    },
    required=["name"],
    description="Full playlist: name, description, tags, tracks",
)
PLAYLIST_UPDATE_BODY = json_body(PLAYLIST_INPUT, description="Any of name, description, tags")

TRACK_CREATE_BODY = json_body(
    {
        "oneOf": [
            dict(TRACK_INPUT, required=["title"]),
            {"type": "array", "minItems": 1, "items": dict(TRACK_INPUT, required=["title"])},
        ]
    },
    description="A track object or an array of track objects",
)
TRACK_REPLACE_BODY = json_body(
    TRACK_INPUT, required=["title"], description="title (required), artist, url, durationSec"
)
TRACK_UPDATE_BODY = json_body(TRACK_INPUT, description="Any of title, artist, url, durationSec")
