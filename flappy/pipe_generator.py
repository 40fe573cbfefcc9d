"""
pipe_generator.py: Procedural pipe spawning, scrolling and retirement.
"""

import logging
import random
from typing import List, Optional

from .constants import PIPE_GAP, PIPE_MARGIN, PIPE_SPAWN_THRESHOLD, PIPE_SPEED, PIPE_WIDTH
from .data_models import Pipe, Playfield

logger = logging.getLogger(__name__)


class PipeGenerator:
    """
    Owns the spawn/scroll/retire policy for the pipe sequence. The sequence
    itself belongs to the session; it is kept in spawn order, which is
    ascending x order with the newest (rightmost) pipe last.
    """

    def __init__(self, rng: Optional[random.Random] = None, pipe_width: float = PIPE_WIDTH,
                 gap: float = PIPE_GAP, speed: float = PIPE_SPEED,
                 spawn_threshold: float = PIPE_SPAWN_THRESHOLD, margin: float = PIPE_MARGIN):
        self.rng = rng if rng is not None else random.Random()
        self.pipe_width = pipe_width
        self.gap = gap
        self.speed = speed
        self.spawn_threshold = spawn_threshold
        self.margin = margin

    def random_top_height(self, playfield_height: float) -> float:
        """
        Uniform draw in [margin, playfield_height - gap - margin). A playfield
        too short for the gap collapses the range to the margin.
        """
        span = max(playfield_height - self.gap - 2 * self.margin, 0.0)
        return self.rng.random() * span + self.margin

    def make_pipe(self, playfield: Playfield) -> Pipe:
        """Generates a new pipe at the right edge of the playfield."""
        top_height = self.random_top_height(playfield.height)
        pipe = Pipe(
            x=float(playfield.width),
            top_height=top_height,
            bottom_height=playfield.height - top_height - self.gap,
        )
        logger.debug("Spawned pipe at x=%.1f top=%.1f", pipe.x, pipe.top_height)
        return pipe

    def is_off_screen(self, pipe: Pipe) -> bool:
        return pipe.x <= -self.pipe_width

    def needs_spawn(self, pipes: List[Pipe], playfield: Playfield) -> bool:
        return not pipes or pipes[-1].x < playfield.width - self.spawn_threshold

    def step(self, pipes: List[Pipe], playfield: Playfield) -> List[Pipe]:
        """
        One generator pass: scroll every pipe left, drop the ones fully past
        the left edge, then append a fresh pipe if the newest one has moved
        far enough in (or none are left). Returns the new sequence.
        """
        for pipe in pipes:
            pipe.x -= self.speed

        kept = [p for p in pipes if not self.is_off_screen(p)]
        if len(kept) != len(pipes):
            logger.debug("Retired %d pipe(s)", len(pipes) - len(kept))

        if self.needs_spawn(kept, playfield):
            kept.append(self.make_pipe(playfield))
        return kept
