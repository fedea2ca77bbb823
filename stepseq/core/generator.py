"""
Randomized arrangement generation.

Sample names are supplied by the caller. Randomness comes from a
numpy Generator so results are reproducible with a seed.
"""
from __future__ import annotations

import numpy as np

from stepseq.utils.logger import logger
from .arrangement import get_bass_notes
from .beat import Beat
from .config import GRID_CONFIG, RANDOM_CONFIG, TrackType
from .song import Song
from .track import Track
from .types import Arrangement, Beats, RandomSource, SampleNames


def _as_generator(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _random_drum_beats(rng: np.random.Generator) -> Beats:
    filled = rng.random(GRID_CONFIG.grid_size) < RANDOM_CONFIG.drum_fill_probability
    return tuple(Beat(note=RANDOM_CONFIG.drum_note) if f else None for f in filled)


def _random_bass_beats(rng: np.random.Generator) -> Beats:
    notes = get_bass_notes()
    filled = rng.random(GRID_CONFIG.grid_size) < RANDOM_CONFIG.bass_fill_probability
    picks = rng.integers(0, len(notes), size=GRID_CONFIG.grid_size)
    return tuple(
        Beat(note=notes[pick]) if f else None
        for f, pick in zip(filled, picks)
    )


def random_arrangement(samples: SampleNames, rng: RandomSource = None) -> Arrangement:
    """
    Generate 3-12 drum tracks with random samples, volumes and sparse grids,
    followed by one dense bass track.
    """
    if len(samples) == 0:
        raise ValueError("Cannot generate an arrangement from an empty sample list")
    rng = _as_generator(rng)

    drum_count = int(rng.integers(RANDOM_CONFIG.min_drum_tracks, RANDOM_CONFIG.max_drum_tracks + 1))
    tracks = [
        Track(
            id=i + 1,
            type=TrackType.DRUM,
            name=samples[int(rng.integers(len(samples)))],
            vol=float(rng.random()),
            muted=False,
            beats=_random_drum_beats(rng),
        )
        for i in range(drum_count)
    ]
    tracks.append(Track(
        id=drum_count + 1,
        type=TrackType.BASS,
        name=RANDOM_CONFIG.bass_track_name,
        vol=float(rng.random()),
        muted=False,
        beats=_random_bass_beats(rng),
    ))

    logger.debug(f"Random arrangement generated: {drum_count} drum tracks + bass")
    return tuple(tracks)


def random_song(samples: SampleNames, rng: RandomSource = None) -> Song:
    """Random arrangement with a tempo in [75, 150) bpm."""
    rng = _as_generator(rng)
    bpm = int(rng.integers(RANDOM_CONFIG.min_bpm, RANDOM_CONFIG.max_bpm))
    return Song(bpm=bpm, tracks=random_arrangement(samples, rng))
