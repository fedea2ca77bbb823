from dataclasses import dataclass, field
from typing import Optional

from .config import GRID_CONFIG


@dataclass(frozen=True)
class Beat:
    """
    A filled slot in a track's grid.
    Empty slots are represented by None, never by a partial Beat.
    """
    note: str = field(default=GRID_CONFIG.default_note)
    vol: float = field(default=GRID_CONFIG.default_vol)
    dur: str = field(default=GRID_CONFIG.default_dur)

    @classmethod
    def with_note(cls, note: Optional[str] = None) -> 'Beat':
        """Default beat carrying `note`, falling back to the default note."""
        return cls(note=note or GRID_CONFIG.default_note)
