"""
obstacle_field.py: Spawning, scrolling and pruning of the live pipes.
"""

import logging
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .config import GameConfig
from .physics_core import Avatar, Obstacle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldTickResult:
    collided: bool = False
    cleared: int = 0      # Pipes that passed the avatar this tick


class ObstacleField:
    """
    Owns the live pipes in spawn order: the newest pipe (largest x) is last.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self._obstacles: List[Obstacle] = []

    def __len__(self) -> int:
        return len(self._obstacles)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._obstacles)

    def clear(self):
        self._obstacles.clear()

    def should_spawn(self, current_frame: int) -> bool:
        """
        First pipe arrives the tick after the initial delay runs out,
        then one every `pipe_spacing` ticks (delay 120, spacing 300: 121, 421, ...).
        """
        delay = self.config.initial_pipe_delay
        if current_frame <= delay:
            return False
        return (current_frame - delay - 1) % self.config.pipe_spacing == 0

    def _spawn(self, current_frame: int):
        obstacle = Obstacle.spawn(self.config.screen_width, self.config, self.rng)
        self._obstacles.append(obstacle)
        logger.debug("Spawned pipe at frame %d with gap [%.1f, %.1f]",
                     current_frame, obstacle.gap_start, obstacle.gap_end)

    def tick(self, avatar: Avatar, current_frame: int) -> FieldTickResult:
        """
        Spawns on schedule, then moves, scores, collides and prunes every pipe.
        Reports collisions; it never ends the game by itself.
        """
        if self.should_spawn(current_frame):
            self._spawn(current_frame)

        collided = False
        cleared = 0

        # Newest to oldest so pruning by index is safe
        for i in range(len(self._obstacles) - 1, -1, -1):
            obstacle = self._obstacles[i]
            if obstacle.update(avatar):
                cleared += 1

            if obstacle.is_colliding(avatar):
                collided = True

            if obstacle.is_off_screen():
                del self._obstacles[i]

        return FieldTickResult(collided=collided, cleared=cleared)
