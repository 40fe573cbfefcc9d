import random

import pytest

from flappy.data_models import Playfield
from flappy.highscore_db import MemoryHighScore
from flappy.pipe_generator import PipeGenerator
from flappy.session import GameSession


class RecordingPresentation:
    def __init__(self):
        self.snapshots = []

    def render(self, snapshot):
        self.snapshots.append(snapshot)


class FixedRandom(random.Random):
    """Always draws the same value in [0, 1)."""

    def __init__(self, value):
        super().__init__()
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def playfield():
    return Playfield(800, 600)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryHighScore()


@pytest.fixture
def presentation():
    return RecordingPresentation()


@pytest.fixture
def make_session(playfield, store, presentation, rng):
    def _make(**kwargs):
        kwargs.setdefault("store", store)
        kwargs.setdefault("presentation", presentation)
        kwargs.setdefault("rng", rng)
        return GameSession(kwargs.pop("playfield", playfield), **kwargs)
    return _make


@pytest.fixture
def fixed_random():
    """Factory for a random source that always draws the given value."""
    return FixedRandom


@pytest.fixture
def centred_generator(fixed_random):
    """Gap always in the middle of a 600px playfield: top 200, bottom 200."""
    return PipeGenerator(fixed_random(0.5))
