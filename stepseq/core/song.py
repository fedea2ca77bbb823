"""
Song abstraction for stepseq.
Pairs an arrangement with its tempo and handles whole-song encoding.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .codec import DecodeError, decode_tracks, encode_tracks
from .config import GRID_CONFIG, RANDOM_CONFIG
from .track import Track
from .types import Arrangement, TrackSequence


@dataclass(frozen=True)
class Song:
    """
    An arrangement plus its tempo.
    Tracks are kept as a tuple; the song is a value and is never mutated.
    """
    bpm: int = field(default=RANDOM_CONFIG.default_bpm)
    tracks: Arrangement = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tracks", tuple(self.tracks))

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    def get_active_tracks(self) -> list[Track]:
        """Tracks that should be played (not muted)."""
        return [t for t in self.tracks if not t.muted]

    def with_tracks(self, tracks: TrackSequence) -> "Song":
        return replace(self, tracks=tuple(tracks))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form with occupancy-encoded beat grids."""
        return {"bpm": self.bpm, "tracks": encode_tracks(self.tracks)}

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        grid_size: Optional[int] = GRID_CONFIG.grid_size,
    ) -> "Song":
        if "bpm" not in data or "tracks" not in data:
            raise DecodeError("Encoded song needs both 'bpm' and 'tracks'")
        return cls(bpm=int(data["bpm"]), tracks=decode_tracks(data["tracks"], grid_size))
