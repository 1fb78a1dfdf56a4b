import copy
import math
import random

import pytest

from flappy.constants import SCREEN_HEIGHT, BIRD_HEIGHT, PIPE_GAP, PIPE_MARGIN, RESPAWN_Y
from flappy.data_models import GameState, Pipe, SoundEvent
from flappy.physics_engine import GameEngine


@pytest.fixture
def still_engine(sounds):
    """No gravity and no automatic pipes, so a test controls the pipes."""
    return GameEngine(gravity=0.0, pipe_spawn_interval=10 ** 9,
                      rng=random.Random(0), on_sound=sounds.append)


@pytest.fixture
def playing(still_engine):
    ctx = still_engine.new_context()
    ctx.state = GameState.PLAYING
    ctx.frame = 1
    return ctx


def test_new_context_is_at_start(ctx):
    assert ctx.state == GameState.START
    assert ctx.bird.y == RESPAWN_Y
    assert ctx.pipes == []
    assert ctx.score == 0


@pytest.mark.parametrize("state", [GameState.START, GameState.GAME_OVER])
def test_step_is_noop_unless_playing(engine, ctx, state):
    ctx.state = state
    ctx.pipes.append(Pipe(x=100, gap_y=150))
    before = copy.deepcopy(ctx)
    for t in range(10):
        engine.step(ctx, now=float(t))
    assert ctx == before


def test_first_step_from_top(engine, ctx, sounds):
    engine.flap(ctx, now=0.0)
    ctx.bird.y = 0.0
    ctx.bird.velocity = 0.0

    engine.step(ctx, now=0.0)

    assert ctx.bird.velocity == 0.25
    assert ctx.bird.y == 0.25
    assert ctx.state == GameState.PLAYING
    assert SoundEvent.HIT not in sounds


def test_pipe_spawns_on_first_frame(engine, ctx):
    engine.flap(ctx, now=0.0)
    engine.step(ctx, now=0.0)
    assert len(ctx.pipes) == 1
    assert ctx.pipes[0].x == 320 - 2
    assert ctx.frame == 1


def test_spawned_gaps_stay_in_safe_band(sounds):
    engine = GameEngine(gravity=0.0, pipe_spawn_interval=1, rng=random.Random(7),
                        on_sound=sounds.append)
    ctx = engine.new_context()
    ctx.state = GameState.PLAYING
    for t in range(50):
        engine.step(ctx, now=float(t))

    assert len(ctx.pipes) == 50
    for pipe in ctx.pipes:
        assert PIPE_MARGIN <= pipe.gap_y <= SCREEN_HEIGHT - PIPE_GAP - PIPE_MARGIN


def test_pipe_removed_once_off_screen(still_engine, playing):
    leaving = Pipe(x=320, gap_y=200)
    behind = Pipe(x=400, gap_y=200)
    playing.pipes.extend([leaving, behind])

    # Right edge is at 320 + 52 and must drop below zero
    for _ in range(186):
        still_engine.step(playing, now=0.0)
    assert len(playing.pipes) == 2
    assert leaving.right == 0

    still_engine.step(playing, now=0.0)
    assert playing.pipes == [behind]
    assert behind.x == 400 - 2 * 187
    assert playing.state == GameState.PLAYING


def test_score_when_centers_meet(still_engine, playing, sounds):
    pipe = Pipe(x=163, gap_y=200)
    playing.pipes.append(pipe)
    assert playing.bird.center.x == 67
    assert pipe.center_x == 189

    for _ in range(60):
        still_engine.step(playing, now=0.0)
    assert pipe.center_x == 69
    assert playing.score == 0

    still_engine.step(playing, now=0.0)
    assert pipe.center_x == 67
    assert playing.score == 1
    assert pipe.passed

    for _ in range(30):
        still_engine.step(playing, now=0.0)
    assert playing.score == 1
    assert sounds.count(SoundEvent.SCORE) == 1


def test_each_pipe_scores_once(still_engine, playing):
    playing.pipes.extend([Pipe(x=120, gap_y=200), Pipe(x=260, gap_y=200)])
    for _ in range(200):
        still_engine.step(playing, now=0.0)
    assert playing.score == 2
    assert playing.state == GameState.PLAYING


def test_pipe_collision_ends_game(still_engine, playing, sounds):
    playing.score = 4
    playing.pipes.append(Pipe(x=60, gap_y=300))

    still_engine.step(playing, now=10.0)

    assert playing.state == GameState.GAME_OVER
    assert playing.high_score == 4
    assert playing.restart_at == pytest.approx(10.5)
    assert sounds == [SoundEvent.HIT]


def test_overlapping_pipes_hit_once(still_engine, playing, sounds):
    playing.pipes.extend([Pipe(x=40, gap_y=300), Pipe(x=60, gap_y=20)])
    frame = playing.frame

    still_engine.step(playing, now=1.0)

    assert sounds == [SoundEvent.HIT]
    assert playing.frame == frame
    assert all(p.x < 60 for p in playing.pipes)


def test_floor_collision_clamps_bird(engine, ctx, sounds):
    engine.flap(ctx, now=0.0)
    ctx.bird.y = SCREEN_HEIGHT - BIRD_HEIGHT
    ctx.bird.velocity = 1.0

    engine.step(ctx, now=1.0)
    engine.step(ctx, now=1.0)

    assert ctx.state == GameState.GAME_OVER
    assert ctx.bird.y == SCREEN_HEIGHT - BIRD_HEIGHT
    assert sounds.count(SoundEvent.HIT) == 1


def test_ceiling_collision_clamps_bird(engine, ctx):
    engine.flap(ctx, now=0.0)
    ctx.bird.y = 0.5
    ctx.bird.velocity = -2.0

    engine.step(ctx, now=1.0)

    assert ctx.state == GameState.GAME_OVER
    assert ctx.bird.y == 0


def test_game_over_freezes_bird(engine, ctx):
    engine.flap(ctx, now=0.0)
    ctx.bird.y = 0.5
    ctx.bird.velocity = -2.0
    engine.step(ctx, now=1.0)
    bird = copy.deepcopy(ctx.bird)

    for _ in range(20):
        engine.step(ctx, now=2.0)
    assert ctx.bird == bird


def test_flap_starts_game(engine, ctx, sounds):
    assert engine.flap(ctx, now=3.0)
    assert ctx.state == GameState.PLAYING
    assert ctx.bird.velocity == -5.0
    assert ctx.bird.flapping
    assert ctx.flap_until == pytest.approx(3.5)
    assert sounds == [SoundEvent.FLAP]


def test_flap_while_playing_keeps_game(engine, ctx):
    engine.flap(ctx, now=0.0)
    for t in range(5):
        engine.step(ctx, now=t / 60)
    pipes = list(ctx.pipes)
    frame = ctx.frame

    assert engine.flap(ctx, now=0.1)
    assert ctx.frame == frame
    assert ctx.pipes == pipes
    assert ctx.bird.velocity == -5.0


def test_flap_animation_ends(engine, ctx):
    engine.flap(ctx, now=0.0)
    engine.step(ctx, now=0.4)
    assert ctx.bird.flapping
    engine.step(ctx, now=0.5)
    assert not ctx.bird.flapping


def test_restart_waits_for_cooldown(engine, ctx, sounds):
    engine.flap(ctx, now=0.0)
    ctx.score = 2
    ctx.bird.y = 0.5
    ctx.bird.velocity = -2.0
    engine.step(ctx, now=5.0)
    assert ctx.state == GameState.GAME_OVER

    assert not engine.flap(ctx, now=5.0)
    assert not engine.flap(ctx, now=5.49)
    assert ctx.state == GameState.GAME_OVER
    assert ctx.score == 2

    assert engine.flap(ctx, now=5.5)
    assert ctx.state == GameState.PLAYING
    assert ctx.score == 0
    assert ctx.high_score == 2
    assert ctx.pipes == []
    assert ctx.bird.angle == 0.0
    assert sounds.count(SoundEvent.FLAP) == 2


def test_high_score_never_drops(engine, ctx):
    now = 0.0
    highs = []
    for score in (3, 1, 5, 0):
        engine.flap(ctx, now=now)
        ctx.score = score
        ctx.bird.y = SCREEN_HEIGHT
        engine.step(ctx, now=now)
        highs.append(ctx.high_score)
        now += 1.0
    assert highs == [3, 3, 5, 5]


def test_background_scrolls_and_wraps(sounds):
    engine = GameEngine(gravity=0.0, pipe_spawn_interval=10 ** 9,
                        background_width=2.0, on_sound=sounds.append)
    ctx = engine.new_context()
    ctx.state = GameState.PLAYING
    ctx.frame = 1

    engine.step(ctx, now=0.0)
    assert ctx.bg_x == -0.5
    for _ in range(3):
        engine.step(ctx, now=0.0)
    assert ctx.bg_x == 0.0


def test_rotation_follows_fall(engine, ctx):
    engine.flap(ctx, now=0.0)
    engine.step(ctx, now=0.0)
    assert ctx.bird.angle < 0

    ctx.bird.velocity = 4.0
    ctx.bird.y = 100.0
    angle = ctx.bird.angle
    engine.step(ctx, now=0.0)
    assert ctx.bird.angle > angle
    assert ctx.bird.angle < math.pi / 6
