"""
Pydantic schemas for playlists.

``PlaylistRead`` is returned by the single-playlist endpoints and
``PlaylistSummary`` by the list endpoint, which adds the computed
``trackCount``.  Input models: ``PlaylistCreate`` (``POST``),
``PlaylistReplace`` (``PUT``, may carry a full track list) and
``PlaylistUpdate`` (``PATCH``).
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from .base import Payload, optional_string, required_string, string_list
from .track import TrackDraft, TrackRead


class PlaylistRead(BaseModel):
    """Schema for reading a playlist, including its tracks."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["My Playlist"])
    description: str = Field("", examples=["Notes"])
    tags: List[str] = Field(default_factory=list, examples=[["demo", "default"]])
    tracks: List[TrackRead] = Field(default_factory=list)


class PlaylistSummary(PlaylistRead):
    """Playlist entry of the list endpoint."""

    track_count: int = Field(..., alias="trackCount", examples=[5])


class PlaylistCreate(Payload):
    """Schema for creating a playlist.

    ``name`` is required; ``description`` defaults to ``""`` and ``tags``
    to an empty list.  New playlists always start without tracks.
    """

    name: str = Field(None, validate_default=True)
    description: str = ""
    tags: List[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        return required_string(value, "name")

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, value: Any) -> str:
        return optional_string(value, "description")

    @field_validator("tags", mode="before")
    @classmethod
    def check_tags(cls, value: Any) -> List[str]:
        return string_list(value, "tags")


class PlaylistReplace(PlaylistCreate):
    """Schema for replacing a playlist together with its tracks.

    ``tracks`` that is not a list is treated as empty; each entry must
    be an object and is normalized through ``TrackDraft``.
    """

    tracks: List[TrackDraft] = Field(default_factory=list)

    @field_validator("tracks", mode="before")
    @classmethod
    def check_tracks(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        if not all(isinstance(item, dict) for item in value):
            raise PydanticCustomError(
                "track_type", "Each track must be an object", {"custom": True}
            )
        return value


class PlaylistUpdate(Payload):
    """Schema for a partial playlist update.

    All fields are optional; only provided values are applied.
    Provided values follow the same type rules as ``PlaylistCreate``.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        return required_string(value, "name")

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, value: Any) -> str:
        return optional_string(value, "description")

    @field_validator("tags", mode="before")
    @classmethod
    def check_tags(cls, value: Any) -> List[str]:
        return string_list(value, "tags")
