"""
physics_core.py: Deterministic kinematics, scoring latch and collision logic.
"""

import math
import random
from typing import Optional

from .config import GameConfig
from .data_models import AvatarSnapshot, ObstacleSnapshot

MAX_ROTATION = math.pi / 4


class Avatar:
    """
    The player's bird. Horizontal position is fixed; only y and velocity move.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.x = self.config.avatar_x
        self.y = self.config.avatar_start_y
        self.width = self.config.bird_width
        self.height = self.config.bird_height
        self.velocity = self.config.start_velocity
        self.rotation = 0.0
        self.wing_up = False
        self.flap_counter = 0

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def update(self) -> bool:
        """
        Advances the avatar one tick.
        Returns True when the avatar touched the ground this tick.
        """
        cfg = self.config
        self.velocity += cfg.gravity
        self.y += self.velocity

        self.rotation = max(-MAX_ROTATION, min(MAX_ROTATION, self.velocity * cfg.rotation_scale))

        # Ceiling holds the bird in place instead of ending the run
        if self.y < 0:
            self.y = 0.0
            self.velocity = 0.0

        grounded = False
        if self.y + self.height > cfg.floor_y:
            self.y = float(cfg.floor_y - self.height)
            grounded = True

        self.flap_counter += 1
        if self.flap_counter >= cfg.flap_speed:
            self.wing_up = not self.wing_up
            self.flap_counter = 0

        return grounded

    def jump(self):
        """Sets (not adds) the upward impulse and restarts the wing animation."""
        self.velocity = self.config.jump_impulse
        self.wing_up = True
        self.flap_counter = 0

    def snapshot(self) -> AvatarSnapshot:
        return AvatarSnapshot(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            velocity=self.velocity,
            rotation=self.rotation,
            wing_up=self.wing_up,
        )


class Obstacle:
    """A pipe pair with a vertical gap, scrolling leftwards."""

    def __init__(self, x: float, gap_start: float, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.x = float(x)
        self.width = self.config.pipe_width
        self.gap_start = float(gap_start)
        self.gap_end = self.gap_start + self.config.pipe_gap
        self.counted = False

    @classmethod
    def spawn(cls, x: float, config: GameConfig, rng: random.Random) -> "Obstacle":
        """Creates a pipe whose gap is drawn from the configured safe range."""
        gap_start = rng.uniform(config.gap_start_min, config.gap_start_max)
        return cls(x, gap_start, config)

    @property
    def right(self) -> float:
        return self.x + self.width

    def update(self, avatar: Avatar) -> bool:
        """
        Moves the pipe one tick.
        Returns True exactly once: the tick its right edge first passes the avatar.
        """
        self.x -= self.config.pipe_speed

        if not self.counted and self.right < avatar.x:
            self.counted = True
            return True
        return False

    def is_colliding(self, avatar: Avatar) -> bool:
        """Checks the inset hitbox of the avatar against both pipe halves."""
        inset = self.config.hitbox_inset

        if avatar.right - inset > self.x and avatar.left + inset < self.right:
            if avatar.top + inset < self.gap_start:
                return True
            if avatar.bottom - inset > self.gap_end:
                return True
        return False

    def is_off_screen(self) -> bool:
        return self.right < 0

    def snapshot(self) -> ObstacleSnapshot:
        return ObstacleSnapshot(
            x=self.x,
            width=self.width,
            gap_start=self.gap_start,
            gap_end=self.gap_end,
            counted=self.counted,
        )
