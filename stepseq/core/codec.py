"""
Occupancy-only text codec for beat grids.

A grid encodes to a string of '0' (empty) and '1' (filled) characters.
Note, volume and duration of filled slots are not stored; decoding
rebuilds every filled slot as a default Beat.
"""
from __future__ import annotations
import math
from typing import Iterable, Optional

from stepseq.utils.logger import logger
from .beat import Beat
from .config import GRID_CONFIG, TrackType
from .track import Track
from .types import Arrangement, Beats, EncodedTrack, TrackSequence

FILLED = "1"
EMPTY = "0"

TRACK_FIELDS = ("id", "type", "name", "vol", "muted", "beats")


class DecodeError(ValueError):
    """Raised when an encoded grid or track cannot be decoded."""


def encode_beats(beats: Iterable[Optional[Beat]]) -> str:
    return "".join(EMPTY if beat is None else FILLED for beat in beats)


def decode_beats(encoded: str, grid_size: Optional[int] = GRID_CONFIG.grid_size) -> Beats:
    """
    Decode a '0'/'1' string into a grid.
    Pass grid_size=None to accept any length.
    """
    if not isinstance(encoded, str):
        raise DecodeError(f"Encoded beats must be a string, got {type(encoded).__name__}")
    if grid_size is not None and len(encoded) != grid_size:
        raise DecodeError(f"Encoded beats have length {len(encoded)}, expected {grid_size}")

    beats = []
    for i, char in enumerate(encoded):
        if char == FILLED:
            beats.append(Beat())
        elif char == EMPTY:
            beats.append(None)
        else:
            raise DecodeError(f"Invalid character {char!r} at position {i}")
    return tuple(beats)


def encode_track(track: Track) -> EncodedTrack:
    """Plain JSON-ready dict of the track with its beats encoded."""
    return {
        "id": track.id,
        "type": track.type.value,
        "name": track.name,
        "vol": track.vol,
        "muted": track.muted,
        "beats": encode_beats(track.beats),
    }


def decode_track(encoded: EncodedTrack, grid_size: Optional[int] = GRID_CONFIG.grid_size) -> Track:
    """
    Rebuild a Track from its encoded dict.
    Volumes outside [0, 1] (or NaN) and non-bool mute flags are rejected.
    """
    missing = [key for key in TRACK_FIELDS if key not in encoded]
    if missing:
        raise DecodeError(f"Encoded track is missing fields: {', '.join(missing)}")

    try:
        track_type = TrackType(encoded["type"])
    except ValueError as e:
        raise DecodeError(f"Unknown track type {encoded['type']!r}") from e

    try:
        track_id = int(encoded["id"])
        vol = float(encoded["vol"])
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Invalid id or volume in encoded track: {e}") from e

    if math.isnan(vol) or not GRID_CONFIG.min_vol <= vol <= GRID_CONFIG.max_vol:
        raise DecodeError(f"Track volume {vol} is outside [{GRID_CONFIG.min_vol}, {GRID_CONFIG.max_vol}]")
    if not isinstance(encoded["muted"], bool):
        raise DecodeError(f"Track 'muted' must be a bool, got {encoded['muted']!r}")

    return Track(
        id=track_id,
        type=track_type,
        name=encoded["name"],
        vol=vol,
        muted=encoded["muted"],
        beats=decode_beats(encoded["beats"], grid_size),
    )


def encode_tracks(tracks: TrackSequence) -> list[EncodedTrack]:
    return [encode_track(t) for t in tracks]


def decode_tracks(
    encoded_tracks: Iterable[EncodedTrack],
    grid_size: Optional[int] = GRID_CONFIG.grid_size,
) -> Arrangement:
    tracks = tuple(decode_track(e, grid_size) for e in encoded_tracks)
    logger.debug(f"Decoded {len(tracks)} tracks")
    return tracks
