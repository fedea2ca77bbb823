"""
Arrangement operations for stepseq.

Every function takes the current arrangement (an ordered sequence of tracks)
and returns a new tuple of tracks; inputs are never mutated. Unknown track ids
and out-of-range beat indices are silent no-ops: the arrangement comes back
unchanged.
"""
from __future__ import annotations
import math
from typing import Callable, Optional

import numpy as np

from stepseq.utils.logger import logger
from .beat import Beat
from .config import GRID_CONFIG, PRESET_CONFIG
from .track import Track
from .types import Arrangement, Beats, TrackSequence


def init_beats(n: int = GRID_CONFIG.grid_size) -> Beats:
    """Return a grid of `n` empty slots."""
    if n < 0:
        raise ValueError(f"Grid size must be non-negative, got {n}")
    return (None,) * n


def init_tracks() -> Arrangement:
    """Starter arrangement: four drum tracks and one bass track, ids 1..5."""
    return tuple(
        Track(
            id=i,
            type=track_type,
            name=name,
            vol=vol,
            muted=False,
            beats=init_beats(GRID_CONFIG.grid_size),
        )
        for i, (track_type, name, vol) in enumerate(PRESET_CONFIG.starter_tracks, start=1)
    )


def get_bass_notes() -> tuple[str, ...]:
    """Ordered vocabulary of bass pitches."""
    return PRESET_CONFIG.bass_notes


def next_track_id(tracks: TrackSequence) -> int:
    """max(existing ids) + 1, or 1 for an empty arrangement."""
    if not tracks:
        return 1
    return max(t.id for t in tracks) + 1


def find_track(tracks: TrackSequence, track_id: int) -> Optional[Track]:
    """Get track by id safely."""
    for track in tracks:
        if track.id == track_id:
            return track
    return None


def _update_track(
    tracks: TrackSequence,
    track_id: int,
    update: Callable[[Track], Track],
    action: str,
) -> Arrangement:
    if find_track(tracks, track_id) is None:
        logger.debug(f"{action}: no track with id {track_id}, arrangement unchanged")
        return tuple(tracks)
    return tuple(update(t) if t.id == track_id else t for t in tracks)


def add_track(tracks: TrackSequence) -> Arrangement:
    """Append a default drum track with a fresh id and an empty grid."""
    track = Track(
        id=next_track_id(tracks),
        type=PRESET_CONFIG.new_track_type,
        name=PRESET_CONFIG.new_track_name,
        vol=PRESET_CONFIG.new_track_vol,
        muted=False,
        beats=init_beats(GRID_CONFIG.grid_size),
    )
    logger.debug(f"Track added: {track.id}")
    return (*tracks, track)


def clear_track(tracks: TrackSequence, track_id: int) -> Arrangement:
    """Reset the track's grid to all-empty, keeping every other field."""
    return _update_track(
        tracks, track_id,
        lambda t: t.with_beats(init_beats(GRID_CONFIG.grid_size)),
        "clear_track",
    )


def delete_track(tracks: TrackSequence, track_id: int) -> Arrangement:
    """Remove the track with `track_id`, preserving the order of the rest."""
    if find_track(tracks, track_id) is None:
        logger.debug(f"delete_track: no track with id {track_id}, arrangement unchanged")
    return tuple(t for t in tracks if t.id != track_id)


def toggle_beat(
    tracks: TrackSequence,
    track_id: int,
    index: int,
    note: Optional[str] = None,
) -> Arrangement:
    """
    Fill an empty slot with a default beat carrying `note`, or empty a filled one.
    `note` is ignored when the slot is cleared.
    """
    track = find_track(tracks, track_id)
    if track is not None and not 0 <= index < len(track.beats):
        logger.debug(f"toggle_beat: index {index} out of range for track {track_id}")
        return tuple(tracks)

    def toggle(t: Track) -> Track:
        beats = list(t.beats)
        beats[index] = Beat.with_note(note) if beats[index] is None else None
        return t.with_beats(beats)

    return _update_track(tracks, track_id, toggle, "toggle_beat")


def set_volume(tracks: TrackSequence, track_id: int, vol: float) -> Arrangement:
    """
    Set the track volume, clamped to [0, 1].
    An unknown id is a no-op; NaN raises ValueError only for an existing track.
    """
    if find_track(tracks, track_id) is None:
        logger.debug(f"set_volume: no track with id {track_id}, arrangement unchanged")
        return tuple(tracks)
    if math.isnan(vol):
        raise ValueError("Volume must be a number, got NaN")
    clamped = float(np.clip(vol, GRID_CONFIG.min_vol, GRID_CONFIG.max_vol))
    if clamped != vol:
        logger.debug(f"set_volume: {vol} clamped to {clamped}")
    return _update_track(tracks, track_id, lambda t: t.with_changes(vol=clamped), "set_volume")


def toggle_mute(tracks: TrackSequence, track_id: int) -> Arrangement:
    """Flip the mute flag; the stored volume is untouched."""
    return _update_track(
        tracks, track_id, lambda t: t.with_changes(muted=not t.muted), "toggle_mute"
    )


def rename_track_sample(tracks: TrackSequence, track_id: int, sample_name: str) -> Arrangement:
    return _update_track(
        tracks, track_id, lambda t: t.with_changes(name=sample_name), "rename_track_sample"
    )
