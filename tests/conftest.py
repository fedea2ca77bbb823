"""
Pytest configuration and fixtures for stepseq tests.
"""
import pytest
import numpy as np

from stepseq.core.arrangement import init_tracks, toggle_beat
from stepseq.core.history import ArrangementHistory


@pytest.fixture
def starter_tracks():
    """The fixed five-track starter arrangement."""
    return init_tracks()


@pytest.fixture
def tracks_with_beats(starter_tracks):
    """Starter arrangement with a few beats placed on the kick and bass."""
    tracks = toggle_beat(starter_tracks, 4, 0, "A4")
    tracks = toggle_beat(tracks, 4, 8, "A4")
    tracks = toggle_beat(tracks, 5, 2, "E2")
    return tracks


@pytest.fixture
def sample_names() -> list[str]:
    """Fixed sample-name list standing in for the sample library."""
    return ["kick-808", "snare-tight", "hihat-closed", "clap-room", "tom-low"]


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def history(starter_tracks) -> ArrangementHistory:
    return ArrangementHistory(starter_tracks, max_depth=10)
