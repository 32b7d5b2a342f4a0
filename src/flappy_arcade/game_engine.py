"""
game_engine.py: The authoritative session: state machine, tick driver and scoring.
"""

import logging
import random
from typing import Callable, List, Optional

from .config import GameConfig
from .data_models import Command, GameSnapshot, GameState
from .obstacle_field import ObstacleField
from .physics_core import Avatar

logger = logging.getLogger(__name__)

ScoreListener = Callable[[int], None]

_TRANSITIONS = {
    (GameState.WAITING, Command.BEGIN): GameState.PLAYING,
    (GameState.PLAYING, Command.COLLIDE): GameState.GAME_OVER,
    (GameState.GAME_OVER, Command.RESTART): GameState.WAITING,
}


def transition(state: GameState, command: Command) -> GameState:
    """
    Pure state function. Pairs missing from the table leave the state unchanged,
    which is how invalid commands are ignored.
    """
    return _TRANSITIONS.get((state, command), state)


class GameSession:
    """
    Owns the avatar, the pipes and the counters. The outside world talks to it
    through commands and reads it through snapshot().
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self._score_listeners: List[ScoreListener] = []
        self._game_over_listeners: List[ScoreListener] = []
        self.field = ObstacleField(self.config, self.rng)
        self.reset()

    def reset(self):
        """Rebuilds a fresh session in the WAITING state."""
        self.state = GameState.WAITING
        self.avatar = Avatar(self.config)
        self.field.clear()
        self.frame = 0
        self.score = 0
        self.final_score: Optional[int] = None

    # ---------- Listeners ----------

    def add_score_listener(self, callback: ScoreListener):
        self._score_listeners.append(callback)

    def add_game_over_listener(self, callback: ScoreListener):
        self._game_over_listeners.append(callback)

    # ---------- Commands ----------

    def dispatch(self, command: Command) -> GameState:
        """Routes an input command; commands that do not apply are dropped."""
        if command is Command.BEGIN:
            self.begin()
        elif command is Command.FLAP:
            self.flap()
        elif command is Command.RESTART:
            self.restart()
        else:
            logger.debug("Ignoring %s from input: only the tick driver raises it", command.value)
        return self.state

    def begin(self):
        new_state = transition(self.state, Command.BEGIN)
        if new_state is self.state:
            logger.debug("Ignoring begin while %s", self.state.value)
            return

        self.state = new_state
        self.avatar.velocity = self.config.start_velocity
        logger.info("Game started")

    def flap(self):
        if self.state is not GameState.PLAYING:
            logger.debug("Ignoring flap while %s", self.state.value)
            return
        self.avatar.jump()

    def restart(self):
        """From GAME_OVER: wipe the session and go straight back into play."""
        new_state = transition(self.state, Command.RESTART)
        if new_state is self.state:
            logger.debug("Ignoring restart while %s", self.state.value)
            return

        logger.info("Restarting after final score %s", self.final_score)
        self.reset()
        self.state = new_state
        for callback in self._score_listeners:
            callback(self.score)
        self.begin()

    # ---------- Simulation ----------

    def tick(self):
        """One simulation step. Does nothing unless the game is being played."""
        if self.state is not GameState.PLAYING:
            return

        self.frame += 1

        grounded = self.avatar.update()
        result = self.field.tick(self.avatar, self.frame)

        if result.cleared:
            self.score += result.cleared
            logger.debug("Cleared pipe at frame %d, score %d", self.frame, self.score)
            for callback in self._score_listeners:
                callback(self.score)

        if grounded or result.collided:
            self._game_over(reason="ground" if grounded else "pipe")

    def _game_over(self, reason: str):
        self.state = transition(self.state, Command.COLLIDE)
        self.final_score = self.score
        logger.info("Game over (%s) at frame %d, score %d", reason, self.frame, self.score)
        for callback in self._game_over_listeners:
            callback(self.score)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            state=self.state,
            score=self.score,
            frame=self.frame,
            avatar=self.avatar.snapshot(),
            obstacles=tuple(o.snapshot() for o in self.field),
            playfield_width=self.config.screen_width,
            playfield_height=self.config.screen_height,
            floor_y=self.config.floor_y,
            final_score=self.final_score,
        )
