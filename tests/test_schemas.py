import pytest

from playlist_api.app.core.errors import ValidationError
from playlist_api.app.schemas.base import is_valid_duration, normalize_duration
from playlist_api.app.schemas.playlist import PlaylistCreate, PlaylistReplace, PlaylistUpdate
from playlist_api.app.schemas.track import TrackCreate, TrackDraft, TrackReplace, TrackUpdate


@pytest.mark.parametrize("value", [0, 1, 200, 200.0])
def test_valid_durations(value) -> None:
    assert is_valid_duration(value)


@pytest.mark.parametrize("value", [-5, 1.5, "200", True, None, [1]])
def test_invalid_durations_fall_back(value) -> None:
    assert not is_valid_duration(value)
    assert normalize_duration(value) == 0
    assert normalize_duration(value, fallback=None) is None


def test_playlist_create_defaults() -> None:
    data = PlaylistCreate.parse({"name": "Road Trip", "extra": 1})
    assert data.name == "Road Trip"
    assert data.description == ""
    assert data.tags == []


@pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": 5}, {"name": None}])
def test_playlist_create_requires_name(payload) -> None:
    with pytest.raises(ValidationError, match="name is required"):
        PlaylistCreate.parse(payload)


def test_playlist_create_rejects_non_object() -> None:
    with pytest.raises(ValidationError, match="JSON object"):
        PlaylistCreate.parse(["name"])


def test_playlist_create_rejects_bad_tags() -> None:
    with pytest.raises(ValidationError, match="tags must be a list of strings"):
        PlaylistCreate.parse({"name": "x", "tags": ["ok", 1]})


def test_playlist_replace_normalizes_tracks() -> None:
    data = PlaylistReplace.parse(
        {
            "name": "x",
            "tracks": [
                {"id": 3, "title": "A", "durationSec": 10},
                {"id": "7", "title": 9, "artist": None, "durationSec": -1},
            ],
        }
    )
    first, second = data.tracks
    assert (first.id, first.title, first.duration_sec) == (3, "A", 10)
    assert second.id is None
    assert second.title == ""
    assert second.artist == ""
    assert second.duration_sec == 0


def test_playlist_replace_tracks_not_a_list_is_empty() -> None:
    assert PlaylistReplace.parse({"name": "x", "tracks": "nope"}).tracks == []


def test_playlist_replace_rejects_non_object_track() -> None:
    with pytest.raises(ValidationError, match="Each track must be an object"):
        PlaylistReplace.parse({"name": "x", "tracks": [1]})


def test_playlist_update_only_sets_supplied_fields() -> None:
    data = PlaylistUpdate.parse({"description": "x", "unknown": True})
    assert data.model_dump(exclude_unset=True) == {"description": "x"}


def test_playlist_update_validates_supplied_fields() -> None:
    with pytest.raises(ValidationError, match="description must be a string"):
        PlaylistUpdate.parse({"description": 5})
    with pytest.raises(ValidationError, match="name is required"):
        PlaylistUpdate.parse({"name": ""})


def test_track_create_uses_alias_and_defaults() -> None:
    data = TrackCreate.parse({"title": "Song", "durationSec": -5})
    assert data.title == "Song"
    assert data.artist == ""
    assert data.url == ""
    assert data.duration_sec == 0


def test_track_create_rejects_blank_title() -> None:
    with pytest.raises(ValidationError, match="title is required"):
        TrackCreate.parse({"title": "   "})


def test_track_replace_requires_title() -> None:
    with pytest.raises(ValidationError, match="title is required"):
        TrackReplace.parse({"artist": "x"})


def test_track_update_invalid_duration_is_none() -> None:
    data = TrackUpdate.parse({"durationSec": "long"})
    assert data.model_dump(exclude_unset=True) == {"duration_sec": None}


def test_track_update_rejects_non_string_artist() -> None:
    with pytest.raises(ValidationError, match="artist must be a string"):
        TrackUpdate.parse({"artist": 1})


def test_track_draft_rejects_boolean_id() -> None:
    assert TrackDraft.parse({"id": True}).id is None
    assert TrackDraft.parse({"id": 4.0}).id == 4


def test_duration_is_read_only_from_camel_case_key() -> None:
    assert TrackCreate.parse({"title": "Song", "duration_sec": 9}).duration_sec == 0
    assert TrackUpdate.parse({"duration_sec": 9}).model_dump(exclude_unset=True) == {}
    assert TrackDraft.parse({"title": "Song", "duration_sec": 9}).duration_sec == 0
