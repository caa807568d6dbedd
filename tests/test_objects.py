import copy

import pytest

from tankbattle.direction import Direction
from tankbattle.objects import GameObject, Mine, Shell, Tank, Wall


def test_game_object_is_abstract():
    with pytest.raises(TypeError):
        GameObject(0, 0)


def test_symbols():
    assert Mine(0, 0).symbol == "@"
    assert Wall(0, 0).symbol == "#"
    assert Shell(0, 0, Direction.UP, 1).symbol == "*"
    assert Tank(2, 0, 0, Direction.LEFT).symbol == "2"


def test_position_and_move_to():
    shell = Shell(3, 4, Direction.DOWN, 1)
    assert shell.position == (3, 4)
    shell.move_to(7, 1)
    assert shell.position == (7, 1)
    tank = Tank(1, 2, 2, Direction.LEFT)
    tank.move_to(5, 6)
    assert tank.position == (5, 6)


def test_kind_flags():
    kinds = [Tank(1, 0, 0, Direction.UP), Shell(0, 0, Direction.UP, 1), Mine(0, 0), Wall(0, 0)]
    flags = [(o.is_tank, o.is_shell, o.is_mine, o.is_wall) for o in kinds]
    for i, row in enumerate(flags):
        assert sum(row) == 1
        assert row[i] is True
    assert all(o.collidable for o in kinds)
    assert Wall(0, 0).destroyable
    assert not Mine(0, 0).destroyable


def test_shell_keeps_direction_and_owner():
    shell = Shell(1, 1, Direction.UP_LEFT, 2)
    assert shell.direction == Direction.UP_LEFT
    assert shell.player_id == 2


def test_wall_falls_after_two_hits():
    wall = Wall(1, 1)
    assert not wall.destroyed
    wall.hit()
    assert not wall.destroyed
    wall.hit()
    assert wall.destroyed


def test_new_tank_state():
    tank = Tank(1, 2, 3, Direction.LEFT)
    assert tank.player_id == 1
    assert tank.direction == Direction.LEFT
    assert tank.shells_left == 16
    assert tank.shoot_cooldown == 0
    assert not tank.in_backward_move


def test_shoot_spends_shell_and_blocks_until_cooldown():
    tank = Tank(1, 0, 0, Direction.UP)
    before = tank.shells_left
    tank.shoot()
    assert tank.shells_left == before - 1
    assert tank.shoot_cooldown == 5
    tank.shoot()
    assert tank.shells_left == before - 1
    for _ in range(5):
        tank.decrease_shoot_cooldown()
    assert tank.shoot_cooldown == 0
    tank.decrease_shoot_cooldown()
    assert tank.shoot_cooldown == 0
    tank.shoot()
    assert tank.shells_left == before - 2


def test_shoot_without_ammo_does_nothing():
    tank = Tank(1, 0, 0, Direction.UP)
    tank.shells_left = 0
    tank.shoot()
    assert tank.shells_left == 0
    assert tank.shoot_cooldown == 0


def test_backward_move_cycle():
    tank = Tank(2, 0, 0, Direction.RIGHT)
    tank.increase_wait_time()
    assert tank.backward_move_step == 1
    tank.cancel_backward_move()
    tank.start_backward_move()
    assert tank.in_backward_move
    assert tank.backward_move_step == 1
    tank.increase_wait_time()
    tank.start_backward_move()
    assert tank.backward_move_step == 2
    for _ in range(10):
        tank.increase_wait_time()
    assert tank.backward_move_step == 5
    tank.cancel_backward_move()
    assert not tank.in_backward_move
    assert tank.backward_move_step == 0


def test_copy_of_tank_is_independent():
    tank = Tank(1, 0, 0, Direction.UP)
    clone = copy.copy(tank)
    clone.direction = Direction.DOWN
    assert tank.direction == Direction.UP
    assert clone.position == tank.position