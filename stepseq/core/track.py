from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional

from .beat import Beat
from .config import TrackType


@dataclass(frozen=True)
class Track:
    """
    One instrument lane of an arrangement: sample name, volume, mute flag
    and a fixed-size grid of beats (None marks an empty slot).
    """
    id: int
    type: TrackType = TrackType.DRUM
    name: str = ""
    vol: float = 1.0
    muted: bool = False
    beats: tuple[Optional[Beat], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Lists handed in by callers are frozen so the track cannot be aliased
        object.__setattr__(self, "beats", tuple(self.beats))
        object.__setattr__(self, "type", TrackType(self.type))

    def with_changes(self, **changes: Any) -> "Track":
        """Return a copy of the track with the given fields replaced."""
        return replace(self, **changes)

    def with_beats(self, beats: Iterable[Optional[Beat]]) -> "Track":
        return replace(self, beats=tuple(beats))

    @property
    def filled_count(self) -> int:
        """Number of occupied slots."""
        return sum(1 for beat in self.beats if beat is not None)

    @property
    def grid_size(self) -> int:
        return len(self.beats)

    def __repr__(self) -> str:
        return (f"Track(id={self.id}, type={self.type.value}, name='{self.name}', "
                f"vol={self.vol:.2f}, muted={self.muted}, "
                f"filled={self.filled_count}/{self.grid_size})")
