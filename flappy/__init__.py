"""
Flappy Bird simulation: physics, pipes, collision/scoring and the game session.
"""

from .collision import CollisionScorer
from .data_models import Bird, GameState, Pipe, Playfield, Snapshot
from .driver import FixedTickDriver
from .highscore_db import HighScoreDB, MemoryHighScore
from .physics_core import PhysicsCore
from .pipe_generator import PipeGenerator
from .session import GameSession

__all__ = [
    "Bird", "CollisionScorer", "FixedTickDriver", "GameSession", "GameState",
    "HighScoreDB", "MemoryHighScore", "Pipe", "Playfield", "PhysicsCore",
    "PipeGenerator", "Snapshot",
]
