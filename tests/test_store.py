from playlist_api.app.core.store import Playlist, PlaylistStore, Track


def test_id_counters_are_strictly_increasing() -> None:
    store = PlaylistStore()
    assert [store.allocate_playlist_id() for _ in range(3)] == [1, 2, 3]
    assert [store.allocate_track_id() for _ in range(3)] == [1, 2, 3]


def test_playlist_ids_are_not_reused_after_delete() -> None:
    store = PlaylistStore()
    first = store.add_playlist(Playlist(id=store.allocate_playlist_id(), name="a"))
    assert store.remove_playlist(first.id)
    second = store.add_playlist(Playlist(id=store.allocate_playlist_id(), name="b"))
    assert second.id > first.id
    assert store.find_playlist(first.id) is None


def test_reserve_track_id_moves_counter_forward_only() -> None:
    store = PlaylistStore()
    store.reserve_track_id(10)
    assert store.allocate_track_id() == 11
    store.reserve_track_id(3)
    assert store.allocate_track_id() == 12


def test_find_track_is_scoped_to_playlist() -> None:
    store = PlaylistStore()
    one = store.add_playlist(Playlist(id=1, name="one", tracks=[Track(id=1, title="x")]))
    two = store.add_playlist(Playlist(id=2, name="two", tracks=[Track(id=2, title="y")]))
    assert store.find_track(one, 1).title == "x"
    assert store.find_track(one, 2) is None
    assert store.find_track(two, 2).title == "y"


def test_replace_and_remove_missing_playlist() -> None:
    store = PlaylistStore()
    assert not store.replace_playlist(Playlist(id=42, name="ghost"))
    assert not store.remove_playlist(42)
    assert len(store) == 0


def test_seed_demo_data() -> None:
    store = PlaylistStore()
    store.seed_demo_data()
    assert len(store) == 1
    playlist = store.find_playlist(1)
    assert playlist.name == "Default Playlist"
    assert playlist.tags == ["demo", "default"]
    assert [t.id for t in playlist.tracks] == [1, 2, 3, 4, 5]
    assert playlist.tracks[0].title == "Blinding Lights"
    assert playlist.tracks[0].duration_sec == 200
    assert store.allocate_playlist_id() == 2
    assert store.allocate_track_id() == 6


def test_track_ids_outside_skips_own_playlist() -> None:
    store = PlaylistStore()
    store.add_playlist(Playlist(id=1, name="one", tracks=[Track(id=1, title="x"), Track(id=2, title="y")]))
    store.add_playlist(Playlist(id=2, name="two", tracks=[Track(id=3, title="z")]))
    assert store.track_ids_outside(1) == {3}
    assert store.track_ids_outside(2) == {1, 2}
    assert store.track_ids_outside(99) == {1, 2, 3}
