import random

import pytest

from config import GRAVITY_Y_BASE, GROUND_Y, HEIGHT, PLAYER_TEXTURE_SIZE, PLAYER_X, WIDTH
from core.physics import ArcadeBody, ArcadeWorld
from runner.controller import RunController


def make_world() -> ArcadeWorld:
    player = ArcadeBody(
        PLAYER_X, GROUND_Y, texture_size=PLAYER_TEXTURE_SIZE, gravity_y=GRAVITY_Y_BASE
    )
    return ArcadeWorld(width=WIDTH, height=HEIGHT, ground_y=GROUND_Y, player=player)


@pytest.fixture
def world():
    return make_world()


@pytest.fixture
def game_overs():
    return []


@pytest.fixture
def controller(world, game_overs):
    return RunController(
        world, rng=random.Random(1234), on_game_over=game_overs.append
    )


@pytest.fixture
def running(controller):
    controller.begin(0)
    return controller
