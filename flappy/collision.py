"""
collision.py: Bird-vs-pipe collision and pipe-pass scoring.
"""

from typing import Iterable, List, Optional

from .constants import BIRD_HEIGHT, BIRD_WIDTH, PIPE_WIDTH
from .data_models import Bird, Pipe


class CollisionScorer:
    """Runs after physics and pipes have advanced for the tick."""

    def __init__(self, bird_width: float = BIRD_WIDTH, bird_height: float = BIRD_HEIGHT,
                 pipe_width: float = PIPE_WIDTH):
        self.bird_width = bird_width
        self.bird_height = bird_height
        self.pipe_width = pipe_width

    def hits_pipe(self, bird: Bird, pipe: Pipe, playfield_height: float) -> bool:
        """True when the bird is inside the pipe's column and outside its gap."""
        in_column = bird.x + self.bird_width > pipe.x and bird.x < pipe.x + self.pipe_width
        if not in_column:
            return False
        above_gap = bird.y < pipe.top_height
        below_gap = bird.y + self.bird_height > playfield_height - pipe.bottom_height
        return above_gap or below_gap

    def find_collision(self, bird: Bird, pipes: Iterable[Pipe],
                       playfield_height: float) -> Optional[Pipe]:
        for pipe in pipes:
            if self.hits_pipe(bird, pipe, playfield_height):
                return pipe
        return None

    def has_cleared(self, bird: Bird, pipe: Pipe) -> bool:
        return bird.x > pipe.x + self.pipe_width

    def mark_passed(self, bird: Bird, pipes: List[Pipe]) -> int:
        """Marks every newly cleared pipe as passed and returns how many there were."""
        newly_passed = 0
        for pipe in pipes:
            if not pipe.passed and self.has_cleared(bird, pipe):
                pipe.passed = True
                newly_passed += 1
        return newly_passed

    def resolve(self, bird: Bird, pipes: List[Pipe], playfield_height: float) -> Optional[int]:
        """
        Collision is checked across all pipes first. Returns None on a hit
        (nothing is scored that tick), otherwise the number of pipes passed.
        """
        if self.find_collision(bird, pipes, playfield_height) is not None:
            return None
        return self.mark_passed(bird, pipes)
