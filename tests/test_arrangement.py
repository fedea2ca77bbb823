"""
Tests for arrangement operations.
"""
import pytest

from stepseq.core.arrangement import (
    add_track,
    clear_track,
    delete_track,
    get_bass_notes,
    init_beats,
    init_tracks,
    next_track_id,
    rename_track_sample,
    set_volume,
    toggle_beat,
    toggle_mute,
)
from stepseq.core.beat import Beat
from stepseq.core.config import GRID_CONFIG, TrackType
from stepseq.core.track import Track


class TestInitBeats:

    @pytest.mark.parametrize("n", [0, 1, 4, 16, 32])
    def test_length_and_empty(self, n):
        beats = init_beats(n)
        assert len(beats) == n
        assert all(beat is None for beat in beats)

    def test_default_size(self):
        assert len(init_beats()) == GRID_CONFIG.grid_size

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            init_beats(-1)


class TestInitTracks:

    def test_five_tracks_in_order(self, starter_tracks):
        assert [t.id for t in starter_tracks] == [1, 2, 3, 4, 5]

    def test_presets(self, starter_tracks):
        assert [t.name for t in starter_tracks] == [
            "hihat-reso", "hihat-plain", "snare-vinyl01", "kick-electro01", "bass",
        ]
        assert [t.vol for t in starter_tracks] == [0.4, 0.4, 0.9, 0.8, 0.3]
        assert [t.type for t in starter_tracks] == [TrackType.DRUM] * 4 + [TrackType.BASS]
        assert not any(t.muted for t in starter_tracks)

    def test_grids_empty(self, starter_tracks):
        for track in starter_tracks:
            assert track.beats == (None,) * 16

    def test_fresh_value_each_call(self):
        assert init_tracks() == init_tracks()


class TestBassNotes:

    def test_vocabulary(self):
        notes = get_bass_notes()
        assert len(notes) == 11
        assert notes[0] == "A1"
        assert notes[-1] == "A3"


class TestBeat:

    def test_with_note(self):
        assert Beat.with_note("E2") == Beat(note="E2", vol=1.0, dur="4n")

    @pytest.mark.parametrize("note", [None, ""])
    def test_with_note_falls_back_to_default(self, note):
        assert Beat.with_note(note) == Beat()


class TestAddTrack:

    def test_appends_with_next_id(self, starter_tracks):
        tracks = add_track(starter_tracks)
        assert len(tracks) == len(starter_tracks) + 1
        new = tracks[-1]
        assert new.id == 6
        assert new.type == TrackType.DRUM
        assert new.name == "kick-electro01"
        assert new.vol == 0.8
        assert not new.muted
        assert new.beats == init_beats(16)

    def test_id_after_gap(self, starter_tracks):
        tracks = delete_track(starter_tracks, 2)
        tracks = add_track(tracks)
        assert tracks[-1].id == 6
        assert len({t.id for t in tracks}) == len(tracks)

    def test_empty_arrangement_gets_id_one(self):
        tracks = add_track(())
        assert len(tracks) == 1
        assert tracks[0].id == 1

    def test_next_track_id(self, starter_tracks):
        assert next_track_id(starter_tracks) == 6
        assert next_track_id([]) == 1

    def test_input_untouched(self, starter_tracks):
        before = tuple(starter_tracks)
        add_track(starter_tracks)
        assert starter_tracks == before


class TestClearTrack:

    def test_clears_only_target(self, tracks_with_beats):
        tracks = clear_track(tracks_with_beats, 4)
        assert tracks[3].beats == init_beats(16)
        assert tracks[3].name == tracks_with_beats[3].name
        assert tracks[4] == tracks_with_beats[4]
        assert tracks[4].filled_count == 1

    def test_grid_size_kept(self, tracks_with_beats):
        tracks = clear_track(tracks_with_beats, 5)
        assert all(len(t.beats) == 16 for t in tracks)


class TestDeleteTrack:

    def test_removes_and_keeps_order(self, starter_tracks):
        tracks = delete_track(starter_tracks, 3)
        assert [t.id for t in tracks] == [1, 2, 4, 5]

    def test_delete_all(self, starter_tracks):
        tracks = starter_tracks
        for track in starter_tracks:
            tracks = delete_track(tracks, track.id)
        assert tracks == ()


class TestToggleBeat:

    def test_fill_empty_slot(self, starter_tracks):
        tracks = toggle_beat(starter_tracks, 4, 0, "C3")
        assert tracks[3].beats[0] == Beat(note="C3", vol=1, dur="4n")
        assert tracks[3].beats[1:] == (None,) * 15

    def test_double_toggle_is_identity(self, starter_tracks):
        tracks = toggle_beat(starter_tracks, 4, 0, "C3")
        tracks = toggle_beat(tracks, 4, 0, "C3")
        assert tracks == starter_tracks

    def test_clearing_ignores_note(self, starter_tracks):
        tracks = toggle_beat(starter_tracks, 4, 0, "C3")
        tracks = toggle_beat(tracks, 4, 0, "G2")
        assert tracks[3].beats[0] is None

    def test_missing_note_uses_default(self, starter_tracks):
        tracks = toggle_beat(starter_tracks, 1, 5)
        assert tracks[0].beats[5] == Beat()
        tracks = toggle_beat(starter_tracks, 1, 5, "")
        assert tracks[0].beats[5].note == GRID_CONFIG.default_note

    @pytest.mark.parametrize("index", [-1, 16, 100])
    def test_out_of_range_is_noop(self, tracks_with_beats, index):
        assert toggle_beat(tracks_with_beats, 4, index, "C3") == tracks_with_beats

    def test_other_tracks_untouched(self, tracks_with_beats):
        tracks = toggle_beat(tracks_with_beats, 1, 3, "A4")
        assert tracks[1:] == tracks_with_beats[1:]


class TestSetVolume:

    def test_sets_exact_value(self, starter_tracks):
        tracks = set_volume(starter_tracks, 2, 0.65)
        assert tracks[1].vol == 0.65
        assert tracks[0] == starter_tracks[0]

    @pytest.mark.parametrize("vol,expected", [(1.5, 1.0), (-0.2, 0.0), (0.0, 0.0), (1.0, 1.0)])
    def test_clamped_to_unit_range(self, starter_tracks, vol, expected):
        tracks = set_volume(starter_tracks, 1, vol)
        assert tracks[0].vol == expected

    def test_nan_rejected(self, starter_tracks):
        with pytest.raises(ValueError):
            set_volume(starter_tracks, 1, float("nan"))

    def test_nan_for_unknown_id_is_noop(self, starter_tracks):
        assert set_volume(starter_tracks, 99, float("nan")) == starter_tracks


class TestToggleMute:

    def test_flips_and_keeps_volume(self, starter_tracks):
        tracks = toggle_mute(starter_tracks, 3)
        assert tracks[2].muted
        assert tracks[2].vol == starter_tracks[2].vol
        tracks = toggle_mute(tracks, 3)
        assert tracks == starter_tracks


class TestRenameTrackSample:

    def test_renames(self, starter_tracks):
        tracks = rename_track_sample(starter_tracks, 5, "bass-sub")
        assert tracks[4].name == "bass-sub"
        assert tracks[4].beats == starter_tracks[4].beats


class TestNoOps:
    """Unknown track ids leave the arrangement unchanged for every operation."""

    @pytest.mark.parametrize("op,args", [
        (clear_track, ()),
        (delete_track, ()),
        (toggle_beat, (0, "C3")),
        (set_volume, (0.5,)),
        (toggle_mute, ()),
        (rename_track_sample, ("snare-x",)),
    ])
    def test_unknown_id(self, tracks_with_beats, op, args):
        assert op(tracks_with_beats, 99, *args) == tracks_with_beats

    def test_empty_arrangement(self):
        assert clear_track((), 1) == ()
        assert toggle_beat([], 1, 0, "A4") == ()


class TestImmutability:

    def test_list_input_not_mutated(self, starter_tracks):
        tracks = list(starter_tracks)
        snapshot = list(tracks)
        toggle_beat(tracks, 1, 0, "A4")
        delete_track(tracks, 1)
        add_track(tracks)
        assert tracks == snapshot

    def test_returns_tuple(self, starter_tracks):
        assert isinstance(toggle_mute(list(starter_tracks), 1), tuple)

    def test_track_beats_are_frozen(self):
        beats = [None, None]
        track = Track(id=1, beats=beats)
        beats[0] = Beat()
        assert track.beats == (None, None)

    def test_track_is_frozen(self, starter_tracks):
        with pytest.raises(AttributeError):
            starter_tracks[0].vol = 0.1
