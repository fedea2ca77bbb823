"""
Centralized configuration for stepseq.
All magic numbers and default settings in one place.
"""
from dataclasses import dataclass
from enum import Enum


class TrackType(str, Enum):
    """Instrument kind of a track. Informational only."""
    DRUM = "drum"
    BASS = "bass"


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Beat grid and default beat settings."""
    grid_size: int = 16
    default_note: str = "A4"
    default_vol: float = 1.0
    default_dur: str = "4n"
    min_vol: float = 0.0
    max_vol: float = 1.0


@dataclass(frozen=True, slots=True)
class PresetConfig:
    """Presets for newly created tracks."""
    new_track_type: TrackType = TrackType.DRUM
    new_track_name: str = "kick-electro01"
    new_track_vol: float = 0.8
    bass_notes: tuple[str, ...] = (
        "A1", "C2", "D2", "E2", "G2", "A2", "C3", "D3", "E3", "G3", "A3",
    )
    # (type, name, vol) of the starter arrangement, ids assigned in order
    starter_tracks: tuple[tuple[TrackType, str, float], ...] = (
        (TrackType.DRUM, "hihat-reso", 0.4),
        (TrackType.DRUM, "hihat-plain", 0.4),
        (TrackType.DRUM, "snare-vinyl01", 0.9),
        (TrackType.DRUM, "kick-electro01", 0.8),
        (TrackType.BASS, "bass", 0.3),
    )


@dataclass(frozen=True, slots=True)
class RandomConfig:
    """Randomized arrangement generation."""
    min_drum_tracks: int = 3
    max_drum_tracks: int = 12  # inclusive
    drum_fill_probability: float = 0.25
    bass_fill_probability: float = 0.8
    drum_note: str = "A4"
    bass_track_name: str = "bassline"
    min_bpm: int = 75
    max_bpm: int = 150  # exclusive
    default_bpm: int = 120


@dataclass(frozen=True, slots=True)
class HistoryConfig:
    """Undo/Redo configuration."""
    max_depth: int = 50


# Global config instances (immutable singletons)
GRID_CONFIG = GridConfig()
PRESET_CONFIG = PresetConfig()
RANDOM_CONFIG = RandomConfig()
HISTORY_CONFIG = HistoryConfig()
