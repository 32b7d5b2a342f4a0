"""
input_adapter.py: Translates pygame events into session commands.
"""

import logging
from typing import Iterable, List, Optional

import pygame

from .data_models import Command, GameState

logger = logging.getLogger(__name__)

# Commands that move the state machine; nothing else is delivered after one in the same frame
_STATE_CHANGING = (Command.BEGIN, Command.RESTART)


class InputAdapter:
    """Space / click to begin and flap, Space / R / restart button to play again."""

    def __init__(self, restart_button: Optional[pygame.Rect] = None) -> None:
        self.restart_button = restart_button
        self.quit_requested = False

    def command_for(self, event: pygame.event.Event, state: GameState) -> Optional[Command]:
        """Maps a single event to a command valid for `state`, or None."""
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return None

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.quit_requested = True
                return None
            if event.key == pygame.K_SPACE:
                return {
                    GameState.WAITING: Command.BEGIN,
                    GameState.PLAYING: Command.FLAP,
                    GameState.GAME_OVER: Command.RESTART,
                }[state]
            if event.key == pygame.K_r and state is GameState.GAME_OVER:
                return Command.RESTART
            return None

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if state is GameState.WAITING:
                return Command.BEGIN
            if state is GameState.PLAYING:
                return Command.FLAP
            if self.restart_button is not None and self.restart_button.collidepoint(event.pos):
                return Command.RESTART
        return None

    def translate(self, events: Iterable[pygame.event.Event], state: GameState) -> List[Command]:
        """
        Converts one frame's worth of events.
        Each command kind is delivered at most once per frame, and a begin or restart
        ends the batch so one physical press cannot start and flap at the same time.
        """
        commands: List[Command] = []
        closed = False
        for event in events:
            # Still looked at after the batch closes so a quit is never lost
            command = self.command_for(event, state)
            if command is None:
                continue
            if closed or command in commands:
                logger.debug("Suppressed duplicate %s in one frame", command.value)
                continue
            commands.append(command)
            if command in _STATE_CHANGING:
                closed = True
        return commands
