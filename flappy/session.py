"""
session.py: The authoritative game session (Idle -> Running -> Over -> Idle).
"""

import logging
import random
from typing import List, Optional

from .collision import CollisionScorer
from .constants import BIRD_X
from .data_models import Bird, GameState, Pipe, Playfield, Snapshot
from .physics_core import PhysicsCore
from .pipe_generator import PipeGenerator
from .ports import Persistence, Presentation

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the bird, the pipe sequence, the score and the state. All
    operations are expected to be called from a single thread, one at a time.
    The playfield is passed in by the caller on every operation.
    """

    def __init__(self, playfield: Playfield, store: Persistence,
                 presentation: Optional[Presentation] = None,
                 rng: Optional[random.Random] = None,
                 physics: Optional[PhysicsCore] = None,
                 generator: Optional[PipeGenerator] = None,
                 scorer: Optional[CollisionScorer] = None,
                 start_x: float = BIRD_X):
        self.store = store
        self.presentation = presentation
        self.physics = physics or PhysicsCore()
        self.generator = generator or PipeGenerator(rng)
        self.scorer = scorer or CollisionScorer()
        self.start_x = start_x

        self.state = GameState.IDLE
        self.bird = Bird.at_rest(playfield, x=start_x)
        self.pipes: List[Pipe] = []
        self.score = 0
        self.high_score = self._load_high_score()
        self.render()

    def _load_high_score(self) -> int:
        best = self.store.load()
        logger.info("Loaded high score %d", best)
        return best

    # -------- Operations --------

    def jump(self, playfield: Playfield):
        """
        First jump starts the run and spawns the first pipe without touching
        the bird. Later jumps set the bird's velocity. Ignored once over.
        """
        if self.state is GameState.IDLE:
            self.pipes = [self.generator.make_pipe(playfield)]
            self.state = GameState.RUNNING
            logger.info("Run started on %sx%s playfield", playfield.width, playfield.height)
        elif self.state is GameState.RUNNING:
            self.physics.jump(self.bird)
        else:
            return
        self.render()

    def tick(self, playfield: Playfield) -> bool:
        """
        One simulation step: bird, then pipes, then collision and scoring.
        Returns True while the run continues.
        """
        if self.state is not GameState.RUNNING:
            return False

        if not self.physics.step_bird(self.bird, playfield.height):
            self._game_over("out of bounds")
            return False

        self.pipes = self.generator.step(self.pipes, playfield)

        passed = self.scorer.resolve(self.bird, self.pipes, playfield.height)
        if passed is None:
            self._game_over("hit a pipe")
            return False

        if passed:
            self._add_score(passed)
        self.render()
        return True

    def reset(self, playfield: Playfield):
        """Back to Idle with the bird centred. Only valid after a game over."""
        if self.state is not GameState.OVER:
            return
        self.bird = Bird.at_rest(playfield, x=self.start_x)
        self.pipes = []
        self.score = 0
        self.state = GameState.IDLE
        logger.info("Session reset")
        self.render()

    # -------- Helpers --------

    def _game_over(self, cause: str):
        self.state = GameState.OVER
        logger.info("Game over (%s) with score %d", cause, self.score)
        self.render()

    def _add_score(self, passed: int):
        self.score += passed
        logger.debug("Passed %d pipe(s), score now %d", passed, self.score)
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.save(self.high_score)
            logger.info("New high score %d", self.high_score)

    @property
    def is_running(self) -> bool:
        return self.state is GameState.RUNNING

    def snapshot(self) -> Snapshot:
        return Snapshot.capture(self.state, self.bird, self.pipes, self.score, self.high_score)

    def render(self):
        """Pushes the current snapshot to the presentation, if there is one."""
        if self.presentation is not None:
            self.presentation.render(self.snapshot())
