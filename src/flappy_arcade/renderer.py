"""
renderer.py: Stateless pygame drawing of a GameSnapshot.
"""

import math
from typing import Optional, Tuple

import pygame

from .constants import (
    BEAK_COLOR, BIRD_COLOR, BUTTON_COLOR, GROUND_COLOR, GROUND_STRIPE_COLOR,
    PIPE_COLOR, PIPE_LIP_COLOR, SKY_COLOR, TEXT_COLOR, WING_COLOR,
)
from .data_models import AvatarSnapshot, GameSnapshot, GameState

Fonts = Tuple[pygame.font.Font, pygame.font.Font]

PIPE_LIP = 5
PIPE_LIP_HEIGHT = 20
BEAK_LENGTH = 10


def restart_button_rect(width: int, height: int) -> pygame.Rect:
    """Geometry of the restart button on the game-over panel, shared with input handling."""
    rect = pygame.Rect(0, 0, 120, 36)
    rect.center = (width // 2, height // 2 + 40)
    return rect


def load_fonts() -> Fonts:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, 48), pygame.font.Font(None, 22)


def _draw_background(surface: pygame.Surface, snapshot: GameSnapshot):
    width, floor_y = snapshot.playfield_width, snapshot.floor_y
    surface.fill(SKY_COLOR)
    ground_height = snapshot.playfield_height - floor_y
    pygame.draw.rect(surface, GROUND_COLOR, (0, floor_y, width, ground_height))
    for x in range(0, width, 30):
        pygame.draw.rect(surface, GROUND_STRIPE_COLOR, (x, floor_y + 10, 15, 10))


def _draw_pipes(surface: pygame.Surface, snapshot: GameSnapshot):
    floor_y = snapshot.floor_y
    for pipe in snapshot.obstacles:
        x, w = int(pipe.x), pipe.width
        top = int(pipe.gap_start)
        bottom = int(pipe.gap_end)

        pygame.draw.rect(surface, PIPE_COLOR, (x, 0, w, top))
        pygame.draw.rect(surface, PIPE_LIP_COLOR, (x - PIPE_LIP, top - PIPE_LIP_HEIGHT, w + 2 * PIPE_LIP, PIPE_LIP_HEIGHT))

        pygame.draw.rect(surface, PIPE_COLOR, (x, bottom, w, floor_y - bottom))
        pygame.draw.rect(surface, PIPE_LIP_COLOR, (x - PIPE_LIP, bottom, w + 2 * PIPE_LIP, PIPE_LIP_HEIGHT))


def _draw_bird(surface: pygame.Surface, bird: AvatarSnapshot):
    w, h = bird.width, bird.height
    sprite = pygame.Surface((w + 2 * BEAK_LENGTH, h), pygame.SRCALPHA)
    cx, cy = sprite.get_width() // 2, h // 2

    pygame.draw.circle(sprite, BIRD_COLOR, (cx, cy), min(w, h) // 2 + 2)
    pygame.draw.circle(sprite, (0, 0, 0), (cx + w // 4, cy - h // 6), max(2, w // 10))
    pygame.draw.polygon(sprite, BEAK_COLOR, [
        (cx + w // 2, cy), (cx + w // 2 + BEAK_LENGTH, cy - 5), (cx + w // 2 + BEAK_LENGTH, cy + 5)
    ])
    wing_y = cy - h // 3 if bird.wing_up else cy + h // 4
    wing = pygame.Rect(0, 0, 2 * w // 3, h // 2)
    wing.center = (cx - w // 4, wing_y)
    pygame.draw.ellipse(sprite, WING_COLOR, wing)

    # Screen y grows downwards, pygame rotates counter-clockwise
    rotated = pygame.transform.rotate(sprite, -math.degrees(bird.rotation))
    center = (int(bird.x + w / 2), int(bird.y + h / 2))
    surface.blit(rotated, rotated.get_rect(center=center))


def _blit_centered(surface: pygame.Surface, text: pygame.Surface, y: int):
    surface.blit(text, (surface.get_width() // 2 - text.get_width() // 2, y))


def draw_frame(surface: pygame.Surface, snapshot: GameSnapshot, fonts: Optional[Fonts] = None):
    """Draws one frame; reads only the snapshot."""
    large_font, font = fonts or load_fonts()
    width, height = snapshot.playfield_width, snapshot.playfield_height

    _draw_background(surface, snapshot)
    _draw_pipes(surface, snapshot)
    _draw_bird(surface, snapshot.avatar)

    if snapshot.state is GameState.WAITING:
        bar = pygame.Surface((width, 40), pygame.SRCALPHA)
        bar.fill((0, 0, 0, 128))
        surface.blit(bar, (0, height - 40))
        _blit_centered(surface, font.render("Click or press Space to fly", True, TEXT_COLOR), height - 28)

    elif snapshot.state is GameState.PLAYING:
        _blit_centered(surface, large_font.render(str(snapshot.score), True, TEXT_COLOR), 20)

    else:
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 110))
        surface.blit(overlay, (0, 0))
        _blit_centered(surface, large_font.render("Game Over", True, TEXT_COLOR), height // 2 - 70)
        final = snapshot.final_score if snapshot.final_score is not None else snapshot.score
        _blit_centered(surface, font.render(f"Score: {final}", True, TEXT_COLOR), height // 2 - 20)

        button = restart_button_rect(width, height)
        pygame.draw.rect(surface, BUTTON_COLOR, button, border_radius=6)
        label = font.render("Restart", True, TEXT_COLOR)
        surface.blit(label, label.get_rect(center=button.center))
