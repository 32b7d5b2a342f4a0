"""
data_models.py: State tags, commands and the read-only snapshots handed to rendering.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class GameState(Enum):
    """Session lifecycle: WAITING -> PLAYING -> GAME_OVER -> (restart) -> PLAYING."""
    WAITING = "waiting"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Command(Enum):
    """Events accepted by the session state machine."""
    BEGIN = "begin"
    FLAP = "flap"
    RESTART = "restart"
    COLLIDE = "collide"   # Raised internally by the tick driver, never by input


@dataclass(frozen=True)
class AvatarSnapshot:
    x: float
    y: float
    width: int
    height: int
    velocity: float
    rotation: float
    wing_up: bool


@dataclass(frozen=True)
class ObstacleSnapshot:
    x: float
    width: int
    gap_start: float
    gap_end: float
    counted: bool


@dataclass(frozen=True)
class GameSnapshot:
    """Everything the renderer and score display may look at for one frame."""
    state: GameState
    score: int
    frame: int
    avatar: AvatarSnapshot
    obstacles: Tuple[ObstacleSnapshot, ...]
    playfield_width: int
    playfield_height: int
    floor_y: int
    final_score: Optional[int] = None
