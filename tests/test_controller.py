import math
import random

import pytest

from config import (
    BASE_SPEED,
    FIRST_SPAWN_DELAY_MS,
    GRAVITY_Y_BASE,
    GROUND_Y,
    JUMP_VEL_BASE,
    MAX_SPEED,
    PLAYER_X,
    SPAWN_MIN_GAP_MS,
    SPEED_RAMP_RATE,
    TOUCH_SLIDE_EXPONENT,
    TOUCH_SLIDE_MS_BASE,
    TOUCH_SLIDE_MS_MIN,
)
from core.clock import SimulationClock
from core.runtime import PlayerBody
from runner.controller import RunController
from runner.gestures import Command
from runner.spawner import make_obstacle
from runner.state import (
    SLIDING,
    STANDING,
    ObstacleKind,
    PlayerState,
    RunPhase,
    profile,
)

from conftest import make_world


def test_new_controller_waits_for_start(controller, world):
    assert controller.phase is RunPhase.NOT_STARTED
    assert world.paused
    assert controller.player.grounded
    assert controller.player.hitbox is STANDING


def test_advance_is_noop_before_start(controller):
    for i in range(10):
        controller.advance(i * 16, 16)
    assert controller.run.score == 0
    assert controller.run.speed == BASE_SPEED


def test_advance_is_noop_after_game_over(running):
    running.advance(16, 16)
    running.trigger_game_over()
    score, speed = running.run.score, running.run.speed
    for i in range(10):
        running.advance(32 + i * 16, 16)
        running.update(32 + i * 16, 16)
    assert running.run.score == score
    assert running.run.speed == speed


def test_speed_is_monotonic_and_capped(running):
    prev = running.run.speed
    now = 0.0
    for _ in range(3000):
        now += 20
        running.advance(now, 20)
        assert running.run.speed >= prev
        assert running.run.speed <= MAX_SPEED
        prev = running.run.speed
    assert running.run.speed == MAX_SPEED


def test_score_matches_exact_sum_over_one_second(running):
    dt = 16.67
    speed = BASE_SPEED
    expected = 0.0
    now = 0.0
    while now + dt <= 1000.0:
        now += dt
        running.advance(now, dt)
        speed = min(MAX_SPEED, speed + dt * SPEED_RAMP_RATE)
        expected += dt * speed / 1000.0
    assert running.run.score == pytest.approx(expected)
    # Roughly one second of distance at ~base speed (px)
    assert 355 < running.run.score < 370


def test_gravity_scales_with_speed_factor(running, world):
    running.run.speed = 720
    running.advance(16, 16)
    f = running.speed_factor()
    assert f == pytest.approx(running.run.speed / BASE_SPEED)
    assert world.player.gravity_y == pytest.approx(GRAVITY_Y_BASE * f)


def test_speed_factor_is_clamped(running):
    running.run.speed = 10
    assert running.speed_factor() == 1.0
    running.run.speed = 10_000
    assert running.speed_factor() == MAX_SPEED / BASE_SPEED


def test_jump_velocity_scales_with_sqrt_of_speed_factor(running):
    assert running.jump_velocity() == pytest.approx(-JUMP_VEL_BASE)
    running.run.speed = BASE_SPEED * 2.25
    assert running.jump_velocity() == pytest.approx(-JUMP_VEL_BASE * 1.5)


def test_jump_from_ground(running, world):
    assert running.try_jump(0)
    assert world.player.velocity_y == pytest.approx(-JUMP_VEL_BASE)


def test_jump_while_airborne_is_noop(running, world):
    running.try_jump(0)
    world.step(16)
    assert not running.player.grounded
    velocity = world.player.velocity_y
    hitbox = (world.player.size, world.player.offset)

    assert not running.try_jump(16)
    assert world.player.velocity_y == velocity
    assert (world.player.size, world.player.offset) == hitbox


def test_jump_ends_slide(running, world):
    running.start_slide_for(0, 1000)
    assert running.player.sliding
    running.try_jump(10)
    assert not running.player.sliding
    assert running.player.hitbox is STANDING
    assert world.player.size == STANDING.size


def test_hitbox_profiles_by_name():
    assert profile("standing") is STANDING
    assert profile("sliding") is SLIDING
    with pytest.raises(ValueError):
        profile("crouching")


def test_slide_switches_hitbox(running, world):
    assert running.start_slide_for(0, 300)
    assert running.player.sliding
    assert running.player.hitbox is SLIDING
    assert world.player.size == SLIDING.size
    assert world.player.offset == SLIDING.offset


def test_slide_extension_never_shortens(running):
    running.start_slide_for(500, 1000)
    running.start_slide_for(500, 200)
    assert running.player.slide_end_time == 1500
    running.start_slide_for(900, 800)
    assert running.player.slide_end_time == 1700


def test_slide_while_airborne_is_noop(running, world):
    running.try_jump(0)
    world.step(16)
    assert not running.start_slide_for(16, 500)
    assert not running.player.sliding
    assert running.player.hitbox is STANDING


def test_slide_ends_after_window_unless_held(running):
    running.start_slide_for(0, 220)
    running.maybe_end_slide(100)
    assert running.player.sliding
    running.maybe_end_slide(300, held=True)
    assert running.player.sliding
    running.maybe_end_slide(300)
    assert not running.player.sliding
    assert running.player.hitbox is STANDING


def test_touch_slide_duration_shrinks_with_speed(running):
    assert running.touch_slide_duration_ms() == TOUCH_SLIDE_MS_BASE
    running.run.speed = MAX_SPEED
    f = MAX_SPEED / BASE_SPEED
    expected = round(TOUCH_SLIDE_MS_BASE * (1 / f) ** TOUCH_SLIDE_EXPONENT)
    assert running.touch_slide_duration_ms() == expected
    assert TOUCH_SLIDE_MS_MIN <= expected < TOUCH_SLIDE_MS_BASE


def test_swipe_slide_command_uses_touch_duration(running):
    running.run.speed = 600
    duration = running.touch_slide_duration_ms()
    running.apply(Command.SWIPE_SLIDE, 100)
    assert running.player.slide_end_time == 100 + duration


def test_game_over_is_idempotent(running, world, game_overs):
    running.run.score = 42.7
    assert running.trigger_game_over()
    assert not running.trigger_game_over()
    assert running.phase is RunPhase.GAME_OVER
    assert world.paused
    assert game_overs == [42.7]


def test_game_over_cannot_happen_before_start(controller, game_overs):
    assert not controller.trigger_game_over()
    assert controller.phase is RunPhase.NOT_STARTED
    assert game_overs == []


def test_restart_resets_the_run(running, world):
    now = 0
    for _ in range(200):
        now += 16
        running.advance(now, 16)
    running.obstacles.append(make_obstacle(ObstacleKind.HIGH, x=600))
    old = list(running.obstacles)
    running.start_slide_for(now, 1000)
    running.trigger_game_over()

    assert running.begin(5000)
    assert running.phase is RunPhase.RUNNING
    assert running.run.score == 0
    assert running.run.speed == BASE_SPEED
    assert running.obstacles == []
    assert all(not o.alive for o in old)
    assert not running.player.sliding
    assert running.player.hitbox is STANDING
    assert running.player.grounded
    assert running.player.vertical_velocity == 0
    assert world.player.x == PLAYER_X
    assert world.player.bottom == pytest.approx(GROUND_Y)
    assert not world.paused
    assert running.spawner.next_spawn_at == 5000 + FIRST_SPAWN_DELAY_MS


def test_begin_while_running_is_noop(running):
    running.advance(16, 16)
    score = running.run.score
    assert not running.begin(32)
    assert running.run.score == score


def test_first_obstacle_spawns_after_delay(running):
    running.update(FIRST_SPAWN_DELAY_MS - 1, 16)
    assert running.obstacles == []
    running.update(FIRST_SPAWN_DELAY_MS, 16)
    assert len(running.obstacles) == 1


def test_overlap_with_hurdle_ends_the_run(running, game_overs):
    running.obstacles.append(make_obstacle(ObstacleKind.LOW, x=PLAYER_X))
    running.update(16, 16)
    assert running.phase is RunPhase.GAME_OVER
    assert len(game_overs) == 1


def test_standing_player_hits_bar_but_sliding_player_passes(running):
    running.obstacles.append(make_obstacle(ObstacleKind.HIGH, x=PLAYER_X))
    running.start_slide_for(0, 1000)
    running.update(16, 16)
    assert running.phase is RunPhase.RUNNING

    running.end_slide()
    running.update(32, 16)
    assert running.phase is RunPhase.GAME_OVER


def test_simulation_freezes_after_game_over(running):
    running.obstacles.append(make_obstacle(ObstacleKind.HIGH, x=500))
    running.trigger_game_over()
    running.update(5000, 16)
    assert running.obstacles[0].x == 500


def test_controllers_are_independent():
    a = RunController(make_world(), rng=random.Random(1))
    b = RunController(make_world(), rng=random.Random(2))
    a.begin(0)
    a.advance(16, 16)
    assert b.phase is RunPhase.NOT_STARTED
    assert b.run.score == 0
    assert a.run.score > 0


def test_hooks_fire_on_transitions(world):
    events = []
    c = RunController(
        world,
        on_start=lambda: events.append("start"),
        on_jump=lambda: events.append("jump"),
        on_slide=lambda: events.append("slide"),
        on_game_over=lambda score: events.append("over"),
    )
    c.apply(Command.START, 0)
    c.apply(Command.SWIPE_SLIDE, 10)
    c.apply(Command.SWIPE_SLIDE, 20)
    c.apply(Command.JUMP, 30)
    c.trigger_game_over()
    assert events == ["start", "slide", "jump", "over"]


def test_held_slide_key_keeps_sliding_through_update(running):
    now = 0
    for _ in range(30):
        now += 16
        running.update(now, 16, slide_held=True)
        assert running.player.sliding
    running.update(now + 16, 16)
    # The keyboard minimum window is still open right after release
    assert running.player.sliding
    running.update(now + 16 + 300, 16)
    assert not running.player.sliding
    assert math.isclose(running.player.slide_end_time, now + 220)


def test_stalled_frame_keeps_obstacle_spacing(running):
    clock = SimulationClock()
    while not running.obstacles:
        now, dt = clock.tick(16)
        running.update(now, dt)

    # A long hitch right after a spawn must not bunch the next obstacle up
    now, dt = clock.tick(1200)
    running.update(now, dt)
    while len(running.obstacles) < 2:
        now, dt = clock.tick(16)
        running.update(now, dt)

    first, second = running.obstacles
    min_spacing = BASE_SPEED * SPAWN_MIN_GAP_MS / 1000.0
    assert second.x - first.x >= min_spacing


def test_player_state_reads_contact_from_the_body(world):
    state = PlayerState(body=world.player)
    world.reset_player(PLAYER_X)
    assert state.grounded
    world.player.velocity_y = -300
    assert state.vertical_velocity == -300
    assert isinstance(world.player, PlayerBody)
