import pygame
import pytest

from flappy_arcade.constants import GROUND_COLOR, SKY_COLOR
from flappy_arcade.data_models import Command
from flappy_arcade.game_engine import GameSession
from flappy_arcade.renderer import draw_frame, load_fonts, restart_button_rect


@pytest.fixture(scope="module")
def fonts():
    pygame.font.init()
    yield load_fonts()
    pygame.font.quit()


@pytest.fixture
def surface(config):
    return pygame.Surface((config.screen_width, config.screen_height))


def test_waiting_frame_draws_sky_and_ground(session, surface, fonts):
    snap = session.snapshot()
    draw_frame(surface, snap, fonts)
    assert surface.get_at((5, 5))[:3] == SKY_COLOR
    assert surface.get_at((20, snap.floor_y + 2))[:3] == GROUND_COLOR


def test_playing_frame_with_pipes(session, surface, fonts):
    session.dispatch(Command.BEGIN)
    for _ in range(200):
        session.avatar.velocity = 0
        session.tick()
    snap = session.snapshot()
    assert snap.obstacles

    draw_frame(surface, snap, fonts)
    pipe = snap.obstacles[0]
    assert surface.get_at((int(pipe.x) + pipe.width // 2, 2))[:3] != SKY_COLOR


def test_game_over_frame_does_not_touch_session(session, surface, fonts):
    session.begin()
    session.avatar.y = session.config.floor_y
    session.tick()
    before = session.snapshot()

    draw_frame(surface, before, fonts)
    assert session.snapshot() == before


def test_restart_button_is_centered():
    rect = restart_button_rect(300, 500)
    assert rect.centerx == 150
    assert rect.width > 0 and rect.height > 0
