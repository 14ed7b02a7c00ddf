import pytest


@pytest.fixture
def playlist_id(client) -> int:
    return client.post("/api/playlists", json={"name": "Road Trip"}).json()["id"]


def test_list_tracks(client) -> None:
    r = client.get("/api/playlists/1/tracks")
    assert r.status_code == 200
    assert [t["id"] for t in r.json()] == [1, 2, 3, 4, 5]


def test_search_tracks_by_title_or_artist(client) -> None:
    by_artist = client.get("/api/playlists/1/tracks", params={"q": "weeknd"}).json()
    assert [t["title"] for t in by_artist] == ["Blinding Lights", "Save Your Tears"]
    by_title = client.get("/api/playlists/1/tracks", params={"q": "PEACH"}).json()
    assert [t["id"] for t in by_title] == [5]


def test_list_tracks_missing_playlist(client) -> None:
    r = client.get("/api/playlists/999/tracks")
    assert r.status_code == 404
    assert r.json() == {"error": "Playlist not found"}


def test_get_track(client) -> None:
    r = client.get("/api/playlists/1/tracks/2")
    assert r.status_code == 200
    assert r.json() == {
        "id": 2,
        "title": "Levitating",
        "artist": "Dua Lipa",
        "url": "",
        "durationSec": 203,
    }


def test_get_track_not_found(client, playlist_id) -> None:
    assert client.get("/api/playlists/999/tracks/1").json() == {"error": "Playlist not found"}
    # track 1 exists, but in another playlist
    r = client.get(f"/api/playlists/{playlist_id}/tracks/1")
    assert r.status_code == 404
    assert r.json() == {"error": "Track not found"}


def test_add_single_track_with_negative_duration(client, playlist_id) -> None:
    r = client.post(f"/api/playlists/{playlist_id}/tracks", json={"title": "Song", "durationSec": -5})
    assert r.status_code == 201
    body = r.json()
    assert isinstance(body, dict)
    assert body["title"] == "Song"
    assert body["durationSec"] == 0
    assert body["artist"] == ""
    assert body["url"] == ""
    assert body["id"] >= 6


def test_add_batch_tracks(client, store) -> None:
    r = client.post("/api/playlists/1/tracks", json=[{"title": "A"}, {"title": "B", "durationSec": 100}])
    assert r.status_code == 201
    body = r.json()
    assert isinstance(body, list)
    assert [t["title"] for t in body] == ["A", "B"]
    assert body[0]["id"] != body[1]["id"]
    assert body[1]["durationSec"] == 100
    tracks = client.get("/api/playlists/1/tracks").json()
    assert len(tracks) == 7
    assert [t["title"] for t in tracks[-2:]] == ["A", "B"]
    assert client.get("/api/playlists").json()[0]["trackCount"] == 7


def test_add_batch_with_invalid_item_is_atomic(client) -> None:
    before = client.get("/api/playlists/1/tracks").json()
    r = client.post("/api/playlists/1/tracks", json=[{"title": "A"}, {}])
    assert r.status_code == 400
    assert "title" in r.json()["error"]
    assert client.get("/api/playlists/1/tracks").json() == before


def test_add_tracks_rejections(client) -> None:
    assert client.post("/api/playlists/1/tracks", json=[]).json() == {"error": "Track payload required"}
    assert client.post("/api/playlists/1/tracks", json={"title": "  "}).status_code == 400
    assert client.post("/api/playlists/1/tracks", json={"title": 3}).status_code == 400
    assert client.post("/api/playlists/1/tracks").status_code == 400
    assert client.post("/api/playlists/999/tracks", json={"title": "x"}).status_code == 404


def test_track_ids_are_shared_across_playlists(client, playlist_id) -> None:
    a = client.post("/api/playlists/1/tracks", json={"title": "A"}).json()
    b = client.post(f"/api/playlists/{playlist_id}/tracks", json={"title": "B"}).json()
    assert b["id"] == a["id"] + 1


def test_replace_track_keeps_id_and_position(client) -> None:
    r = client.put("/api/playlists/1/tracks/3", json={"title": "New", "durationSec": 1.5})
    assert r.status_code == 200
    assert r.json() == {"id": 3, "title": "New", "artist": "", "url": "", "durationSec": 0}
    tracks = client.get("/api/playlists/1/tracks").json()
    assert tracks[2]["title"] == "New"


def test_replace_track_errors(client) -> None:
    assert client.put("/api/playlists/1/tracks/3", json={"artist": "x"}).status_code == 400
    assert client.get("/api/playlists/1/tracks/3").json()["title"] == "Watermelon Sugar"
    assert client.put("/api/playlists/1/tracks/999", json={"title": "x"}).json() == {"error": "Track not found"}
    assert client.put("/api/playlists/999/tracks/3", json={"title": "x"}).json() == {"error": "Playlist not found"}


def test_patch_track(client) -> None:
    r = client.patch("/api/playlists/1/tracks/1", json={"artist": "Someone", "bogus": 1})
    assert r.status_code == 200
    assert r.json() == {
        "id": 1,
        "title": "Blinding Lights",
        "artist": "Someone",
        "url": "",
        "durationSec": 200,
    }


def test_patch_track_duration(client) -> None:
    assert client.patch("/api/playlists/1/tracks/1", json={"durationSec": 321}).json()["durationSec"] == 321
    r = client.patch("/api/playlists/1/tracks/1", json={"durationSec": -1, "url": "http://x"})
    assert r.status_code == 200
    assert r.json()["durationSec"] == 321
    assert r.json()["url"] == "http://x"


def test_patch_track_errors(client) -> None:
    assert client.patch("/api/playlists/1/tracks/1", json={"title": ""}).status_code == 400
    assert client.patch("/api/playlists/1/tracks/999", json={"title": "x"}).status_code == 404


def test_delete_track(client) -> None:
    r = client.delete("/api/playlists/1/tracks/2")
    assert r.status_code == 204
    assert [t["id"] for t in client.get("/api/playlists/1/tracks").json()] == [1, 3, 4, 5]
    r = client.delete("/api/playlists/1/tracks/2")
    assert r.status_code == 404
    assert r.json() == {"error": "Track not found"}


def test_deleted_track_id_is_not_reused(client) -> None:
    client.delete("/api/playlists/1/tracks/5")
    created = client.post("/api/playlists/1/tracks", json={"title": "x"}).json()
    assert created["id"] == 6


def test_snake_case_duration_key_is_ignored(client) -> None:
    r = client.patch("/api/playlists/1/tracks/1", json={"duration_sec": 7})
    assert r.status_code == 200
    assert r.json()["durationSec"] == 200
    r = client.post("/api/playlists/1/tracks", json={"title": "x", "duration_sec": 9})
    assert r.status_code == 201
    assert r.json()["durationSec"] == 0


def test_non_string_artist_or_url_is_rejected(client) -> None:
    r = client.post("/api/playlists/1/tracks", json={"title": "x", "artist": 1})
    assert r.status_code == 400
    assert r.json() == {"error": "artist must be a string"}
    r = client.put("/api/playlists/1/tracks/2", json={"title": "x", "url": 5})
    assert r.status_code == 400
    assert r.json() == {"error": "url must be a string"}
    assert client.get("/api/playlists/1/tracks/2").json()["title"] == "Levitating"
    r = client.post("/api/playlists/1/tracks", json={"title": "x", "artist": None})
    assert r.status_code == 201
    assert r.json()["artist"] == ""
