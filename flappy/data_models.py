"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

from .constants import BIRD_X, SCREEN_HEIGHT, SCREEN_WIDTH


class GameState(Enum):
    """Exactly one of these holds for a session at any time."""
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class Playfield:
    """Playfield dimensions, owned by the presentation layer."""
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT


@dataclass
class Bird:
    """The player's bird. Only y and velocity change while running."""
    x: float = BIRD_X
    y: float = SCREEN_HEIGHT / 2
    velocity: float = 0.0

    @classmethod
    def at_rest(cls, playfield: Playfield, x: float = BIRD_X) -> "Bird":
        return cls(x=x, y=playfield.height / 2, velocity=0.0)


@dataclass
class Pipe:
    """A gap-pipe. `passed` flips to True once, when the bird clears it."""
    x: float
    top_height: float
    bottom_height: float
    passed: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of a session, handed to observers."""
    state: GameState
    bird: Bird
    pipes: Tuple[Pipe, ...] = field(default_factory=tuple)
    score: int = 0
    high_score: int = 0

    @classmethod
    def capture(cls, state, bird, pipes, score, high_score) -> "Snapshot":
        return cls(
            state=state,
            bird=replace(bird),
            pipes=tuple(replace(p) for p in pipes),
            score=score,
            high_score=high_score,
        )
