import random
from dataclasses import FrozenInstanceError

import pytest

from flappy_arcade.data_models import Command, GameState
from flappy_arcade.game_engine import GameSession, transition

W, P, G = GameState.WAITING, GameState.PLAYING, GameState.GAME_OVER


@pytest.mark.parametrize("state, command, expected", [
    (W, Command.BEGIN, P),
    (W, Command.FLAP, W),
    (W, Command.RESTART, W),
    (W, Command.COLLIDE, W),
    (P, Command.BEGIN, P),
    (P, Command.FLAP, P),
    (P, Command.RESTART, P),
    (P, Command.COLLIDE, G),
    (G, Command.BEGIN, G),
    (G, Command.FLAP, G),
    (G, Command.RESTART, W),
    (G, Command.COLLIDE, G),
])
def test_transition_table(state, command, expected):
    assert transition(state, command) is expected


def crash(session):
    """Drops the bird onto the floor and ticks until the game ends."""
    session.avatar.y = session.config.floor_y - session.avatar.height
    session.avatar.velocity = 1.0
    session.tick()
    assert session.state is GameState.GAME_OVER


def test_new_session_is_waiting_and_fresh(session):
    assert session.state is GameState.WAITING
    assert session.score == 0
    assert session.frame == 0
    assert len(session.field) == 0
    assert session.final_score is None


def test_tick_does_nothing_until_begin(session):
    y = session.avatar.y
    for _ in range(10):
        session.tick()
    assert session.frame == 0
    assert session.avatar.y == y


def test_flap_ignored_while_waiting(session):
    session.dispatch(Command.FLAP)
    assert session.state is GameState.WAITING
    assert session.avatar.velocity == session.config.start_velocity


def test_begin_starts_play_with_upward_drift(session):
    session.avatar.velocity = 3.0
    assert session.dispatch(Command.BEGIN) is GameState.PLAYING
    assert session.avatar.velocity == session.config.start_velocity


def test_flap_while_playing_keeps_state(session):
    session.begin()
    session.tick()
    assert session.dispatch(Command.FLAP) is GameState.PLAYING
    assert session.avatar.velocity == session.config.jump_impulse


def test_restart_ignored_unless_game_over(session):
    session.begin()
    for _ in range(5):
        session.tick()
    session.dispatch(Command.RESTART)
    assert session.state is GameState.PLAYING
    assert session.frame == 5


def test_collide_command_from_input_is_ignored(session):
    session.begin()
    assert session.dispatch(Command.COLLIDE) is GameState.PLAYING


def test_free_fall_ends_on_ground(session):
    session.begin()
    for _ in range(1000):
        if session.state is not GameState.PLAYING:
            break
        session.tick()
    assert session.state is GameState.GAME_OVER
    assert session.avatar.y == session.config.floor_y - session.avatar.height
    assert session.final_score == session.score

    frame = session.frame
    session.tick()
    session.flap()
    assert session.frame == frame
    assert session.state is GameState.GAME_OVER


def test_avatar_stays_in_bounds_while_playing(session):
    session.begin()
    floor_top = session.config.floor_y - session.avatar.height
    for i in range(200):
        if i % 20 == 0:
            session.flap()
        session.tick()
        assert session.state is GameState.PLAYING
        assert 0 <= session.avatar.y <= floor_top
        if session.avatar.y == 0:
            assert session.avatar.velocity == 0


def test_score_counts_each_pipe_once(hover_config):
    session = GameSession(hover_config, rng=random.Random(7))
    scores = []
    session.add_score_listener(scores.append)
    session.begin()

    for _ in range(83):
        session.tick()
    assert session.score == 0
    session.tick()
    assert session.frame == 84
    assert session.score == 1

    for _ in range(500):
        session.tick()
    assert session.state is GameState.PLAYING
    assert scores == list(range(1, session.score + 1))
    assert session.score == 6


def test_game_over_listener_receives_final_score(hover_config):
    session = GameSession(hover_config, rng=random.Random(7))
    finals = []
    session.add_game_over_listener(finals.append)
    session.begin()
    for _ in range(200):
        session.tick()
    crash(session)
    assert finals == [2]
    assert session.final_score == 2


def test_restart_resets_and_autostarts(session):
    session.begin()
    for _ in range(130):
        session.avatar.velocity = 0
        session.tick()
    assert len(session.field) == 1
    session.score = 5
    crash(session)
    assert session.final_score == 5

    scores = []
    session.add_score_listener(scores.append)
    assert session.dispatch(Command.RESTART) is GameState.PLAYING
    assert scores == [0]
    assert session.score == 0
    assert session.frame == 0
    assert session.final_score is None
    assert len(session.field) == 0
    assert session.avatar.y == session.config.avatar_start_y
    assert session.avatar.velocity == session.config.start_velocity


def test_restart_empties_the_same_field_and_respawns_on_schedule(session):
    field = session.field
    session.begin()
    for _ in range(130):
        session.avatar.velocity = 0
        session.tick()
    crash(session)
    assert len(field) == 1

    session.restart()
    assert session.field is field
    assert len(field) == 0

    for _ in range(120):
        session.avatar.velocity = 0
        session.tick()
    assert len(field) == 0
    session.avatar.velocity = 0
    session.tick()
    assert session.frame == 121
    assert len(field) == 1


def test_snapshot_is_read_only_view(session):
    session.begin()
    for _ in range(125):
        session.tick()
    snap = session.snapshot()
    assert snap.state is GameState.PLAYING
    assert snap.frame == 125
    assert snap.avatar.y == session.avatar.y
    assert [o.x for o in snap.obstacles] == [o.x for o in session.field]
    assert snap.floor_y == session.config.floor_y

    with pytest.raises(FrozenInstanceError):
        snap.score = 99
    with pytest.raises(FrozenInstanceError):
        snap.avatar.y = 0

    session.tick()
    assert snap.frame == 125


def test_same_seed_same_pipes(config):
    def gaps(seed):
        session = GameSession(config, rng=random.Random(seed))
        session.begin()
        session.avatar.y = 100
        for _ in range(121):
            session.avatar.velocity = 0
            session.tick()
        return [o.gap_start for o in session.field]

    assert gaps(3) == gaps(3)
    assert len(gaps(3)) == 1
