"""
physics_core.py: Deterministic bird kinematics and boundary checks.
"""

from typing import Optional

from .constants import BIRD_HEIGHT, GRAVITY, JUMP_IMPULSE, MAX_TILT, TILT_FACTOR
from .data_models import Bird


class PhysicsCore:
    """
    Per-tick bird physics. Velocity is in pixels per tick and gravity in
    pixels per tick squared; there is no delta time.
    """

    def __init__(self, gravity: float = GRAVITY, jump_impulse: float = JUMP_IMPULSE,
                 bird_height: float = BIRD_HEIGHT):
        self.gravity = gravity
        self.jump_impulse = jump_impulse
        self.bird_height = bird_height

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """
        Returns the position and velocity after one tick. The position moves
        by the velocity from before gravity is added.
        """
        return y + velocity, velocity + self.gravity

    def is_out_of_bounds(self, y: float, playfield_height: float) -> bool:
        """Checks the bird's top edge against the ceiling and its bottom edge against the floor."""
        return y <= 0 or y >= playfield_height - self.bird_height

    def step_bird(self, bird: Bird, playfield_height: float) -> bool:
        """
        Advances the bird by one tick. Returns False when the move would leave
        the playfield; the bird keeps its last valid position in that case.
        """
        new_y, new_velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)
        if self.is_out_of_bounds(new_y, playfield_height):
            return False

        bird.y = new_y
        bird.velocity = new_velocity
        return True

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.jump_impulse

    def jump(self, bird: Bird):
        bird.velocity = self.flap()

    @staticmethod
    def tilt(velocity: float, factor: float = TILT_FACTOR,
             max_angle: Optional[float] = MAX_TILT) -> float:
        """Display rotation in degrees for a given velocity (nose down is positive)."""
        angle = velocity * factor
        if max_angle is not None:
            angle = min(angle, max_angle)
        return angle
