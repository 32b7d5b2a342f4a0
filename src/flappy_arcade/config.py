"""
config.py: Frozen tuning parameters for one session, defaulting to constants.py.
"""

from dataclasses import dataclass

from .constants import (
    BIRD_HEIGHT, BIRD_WIDTH, FLAP_SPEED, GRAVITY, GROUND_HEIGHT, HITBOX_INSET,
    INITIAL_PIPE_DELAY, JUMP_IMPULSE, PIPE_GAP, PIPE_MARGIN_BOTTOM,
    PIPE_MARGIN_TOP, PIPE_SPACING, PIPE_SPEED, PIPE_WIDTH, ROTATION_SCALE,
    SCREEN_HEIGHT, SCREEN_WIDTH, START_VELOCITY,
)


@dataclass(frozen=True)
class GameConfig:
    """Tunable numeric parameters, fixed for the lifetime of a session."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    ground_height: int = GROUND_HEIGHT

    bird_width: int = BIRD_WIDTH
    bird_height: int = BIRD_HEIGHT
    flap_speed: int = FLAP_SPEED

    gravity: float = GRAVITY
    jump_impulse: float = JUMP_IMPULSE
    start_velocity: float = START_VELOCITY
    rotation_scale: float = ROTATION_SCALE

    pipe_speed: float = PIPE_SPEED
    pipe_width: int = PIPE_WIDTH
    pipe_gap: int = PIPE_GAP
    pipe_spacing: int = PIPE_SPACING
    initial_pipe_delay: int = INITIAL_PIPE_DELAY
    pipe_margin_top: int = PIPE_MARGIN_TOP
    pipe_margin_bottom: int = PIPE_MARGIN_BOTTOM
    hitbox_inset: int = HITBOX_INSET

    def __post_init__(self) -> None:
        if self.pipe_spacing <= 0:
            raise ValueError(f"pipe_spacing must be positive, got {self.pipe_spacing}")
        if self.flap_speed <= 0:
            raise ValueError(f"flap_speed must be positive, got {self.flap_speed}")
        if self.hitbox_inset <= 0:
            raise ValueError(f"hitbox_inset must be positive, got {self.hitbox_inset}")
        if self.gap_start_max < self.gap_start_min:
            raise ValueError(
                "playfield too short for the pipe gap: "
                f"gap start range [{self.gap_start_min}, {self.gap_start_max}] is empty"
            )

    @property
    def floor_y(self) -> int:
        return self.screen_height - self.ground_height

    @property
    def avatar_x(self) -> float:
        return self.screen_width / 3

    @property
    def avatar_start_y(self) -> float:
        return self.screen_height / 4

    @property
    def gap_start_min(self) -> float:
        return float(self.pipe_margin_top)

    @property
    def gap_start_max(self) -> float:
        """Largest gap start that still keeps the bottom margin above the floor."""
        return float(self.floor_y - self.pipe_margin_bottom - self.pipe_gap)
