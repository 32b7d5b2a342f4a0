"""Flappy Arcade: a headless-testable flappy simulation with a pygame front end."""

from .config import GameConfig
from .data_models import AvatarSnapshot, Command, GameSnapshot, GameState, ObstacleSnapshot
from .game_engine import GameSession, transition
from .obstacle_field import FieldTickResult, ObstacleField
from .physics_core import Avatar, Obstacle

__all__ = [
    "GameSession",
    "GameConfig",
    "GameState",
    "Command",
    "transition",
    "Avatar",
    "Obstacle",
    "ObstacleField",
    "FieldTickResult",
    "GameSnapshot",
    "AvatarSnapshot",
    "ObstacleSnapshot",
]
