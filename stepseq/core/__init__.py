"""
stepseq Core Module

This module contains the arrangement logic:
- arrangement: Pure track/beat operations
- codec: Occupancy-only beat grid encoding
- generator: Randomized arrangements and songs
- Song: Tempo plus arrangement
- ArrangementHistory: Snapshot-based undo/redo
"""
from .beat import Beat
from .track import Track
from .song import Song
from .history import ArrangementHistory
from .codec import (
    DecodeError,
    decode_beats,
    decode_track,
    decode_tracks,
    encode_beats,
    encode_track,
    encode_tracks,
)
from .arrangement import (
    add_track,
    clear_track,
    delete_track,
    get_bass_notes,
    init_beats,
    init_tracks,
    rename_track_sample,
    set_volume,
    toggle_beat,
    toggle_mute,
)
from .generator import random_arrangement, random_song
from .config import (
    GRID_CONFIG,
    HISTORY_CONFIG,
    PRESET_CONFIG,
    RANDOM_CONFIG,
    TrackType,
)

__all__ = [
    # Value types
    'Beat',
    'Track',
    'Song',
    'ArrangementHistory',
    # Operations
    'init_beats',
    'init_tracks',
    'get_bass_notes',
    'add_track',
    'clear_track',
    'delete_track',
    'toggle_beat',
    'set_volume',
    'toggle_mute',
    'rename_track_sample',
    'random_arrangement',
    'random_song',
    # Codec
    'DecodeError',
    'encode_beats',
    'decode_beats',
    'encode_track',
    'decode_track',
    'encode_tracks',
    'decode_tracks',
    # Config
    'GRID_CONFIG',
    'HISTORY_CONFIG',
    'PRESET_CONFIG',
    'RANDOM_CONFIG',
    'TrackType',
]
