"""
Type definitions for the stepseq core module.
Provides type aliases shared by the model, codec and generator.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

import numpy as np

if TYPE_CHECKING:
    from .beat import Beat
    from .track import Track

# A grid slot is either a Beat or None (empty)
Slot = Optional["Beat"]
Beats = tuple[Slot, ...]

# Ordered tracks; order is display/playback order
Arrangement = tuple["Track", ...]
TrackSequence = Sequence["Track"]

# Persisted form of a track: plain JSON-ready dict with beats as '0'/'1' string
EncodedTrack = dict[str, Any]

# Opaque sample names supplied by the caller
SampleNames = Sequence[str]

# Randomness source accepted by the generator
RandomSource = Union[np.random.Generator, int, None]
