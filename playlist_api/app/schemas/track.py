"""
Pydantic schemas for tracks.

``TrackRead`` is the response representation.  The input models map
one to one to the track operations: ``TrackCreate`` for each item of
a single or batch create, ``TrackReplace`` for ``PUT`` and
``TrackUpdate`` for ``PATCH``.  ``TrackDraft`` is the lenient form
used when a whole playlist is replaced together with its tracks.

JSON uses ``durationSec``; Python code uses ``duration_sec``.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import (
    Payload,
    as_integer,
    as_string,
    normalize_duration,
    optional_string,
    required_string,
)


class TrackRead(BaseModel):
    """Schema for reading a track from the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., examples=[1])
    title: str = Field(..., examples=["Blinding Lights"])
    artist: str = Field("", examples=["The Weeknd"])
    url: str = Field("", examples=["https://example.com/track.mp3"])
    duration_sec: int = Field(0, alias="durationSec", ge=0, examples=[200])


class TrackCreate(Payload):
    """Schema for one track of a create request.

    ``title`` must be a non-blank string.  ``artist`` and ``url`` default
    to an empty string; a missing or invalid ``durationSec`` becomes 0.
    """

    title: str = Field(None, validate_default=True)
    artist: str = ""
    url: str = ""
    duration_sec: int = Field(0, alias="durationSec")

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, value: Any) -> str:
        return required_string(value, "title", allow_blank=False)

    @field_validator("artist", "url", mode="before")
    @classmethod
    def check_optional_text(cls, value: Any, info) -> str:
        return optional_string(value, info.field_name)

    @field_validator("duration_sec", mode="before")
    @classmethod
    def check_duration(cls, value: Any) -> int:
        return normalize_duration(value)


class TrackReplace(TrackCreate):
    """Schema for replacing a track; same rules as creation."""

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, value: Any) -> str:
        return required_string(value, "title")


class TrackUpdate(Payload):
    """Schema for a partial track update.

    Only supplied fields are applied.  An invalid ``durationSec`` is
    parsed to ``None`` and the stored value is kept.
    """

    title: Optional[str] = None
    artist: Optional[str] = None
    url: Optional[str] = None
    duration_sec: Optional[int] = Field(None, alias="durationSec")

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, value: Any) -> str:
        return required_string(value, "title", allow_blank=False)

    @field_validator("artist", "url", mode="before")
    @classmethod
    def check_optional_text(cls, value: Any, info) -> str:
        return optional_string(value, info.field_name)

    @field_validator("duration_sec", mode="before")
    @classmethod
    def check_duration(cls, value: Any) -> Optional[int]:
        return normalize_duration(value, fallback=None)


class TrackDraft(Payload):
    """A track embedded in a playlist replacement.

    Nothing is rejected here: a missing or invalid ``id`` is ``None`` (the
    service allocates a fresh one) and wrong-typed text fields become ``""``.
    """

    id: Optional[int] = None
    title: str = ""
    artist: str = ""
    url: str = ""
    duration_sec: int = Field(0, alias="durationSec")

    @field_validator("id", mode="before")
    @classmethod
    def check_id(cls, value: Any) -> Optional[int]:
        number = as_integer(value)
        return number if number is not None and number > 0 else None

    @field_validator("title", "artist", "url", mode="before")
    @classmethod
    def check_text(cls, value: Any) -> str:
        return as_string(value)

    @field_validator("duration_sec", mode="before")
    @classmethod
    def check_duration(cls, value: Any) -> int:
        return normalize_duration(value)
