import pytest

from tankbattle.algorithm import Action, TankAlgorithm
from tankbattle.board import GameBoard
from tankbattle.direction import Direction
from tankbattle.objects import Shell, Tank


class StillAlgorithm(TankAlgorithm):
    def next_action(self, board, player_id):
        return Action.NONE

    @property
    def name(self):
        return "StillAlgorithm"


@pytest.fixture
def setup():
    board = GameBoard(5, 5)
    tank = Tank(1, 3, 2, Direction.LEFT)
    board.tanks.append(tank)
    return board, tank, StillAlgorithm()


def test_action_values_are_strings():
    assert Action.SHOOT == "SHOOT"
    assert str(Action.MOVE_BACKWARD) == "MOVE_BACKWARD"
    assert Action("ROTATE_LEFT_QUARTER") is Action.ROTATE_LEFT_QUARTER


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        TankAlgorithm()


def test_subclass_works(setup):
    board, _, algo = setup
    assert algo.name == "StillAlgorithm"
    assert algo.next_action(board, 1) is Action.NONE


def test_no_shells_means_no_danger(setup):
    board, tank, algo = setup
    assert not algo.is_shell_approaching(board, tank)


@pytest.mark.parametrize(
    "position,direction,expected",
    [
        ((0, 2), Direction.RIGHT, True),
        ((0, 2), Direction.LEFT, False),
        ((4, 2), Direction.LEFT, True),
        ((3, 4), Direction.UP, True),
        ((3, 0), Direction.UP, False),
        ((3, 0), Direction.DOWN, True),
        ((1, 0), Direction.DOWN_RIGHT, True),
        ((1, 0), Direction.UP_LEFT, False),
        ((4, 3), Direction.UP_LEFT, True),
        ((1, 1), Direction.DOWN_RIGHT, False),
    ],
)
def test_shell_approaching(setup, position, direction, expected):
    board, tank, algo = setup
    board.add_shell(Shell(*position, direction, 2))
    assert algo.is_shell_approaching(board, tank) is expected


def test_find_safe_direction_is_none(setup):
    board, _, algo = setup
    assert algo.find_safe_direction(board, 1) is Action.NONE
    assert algo.find_safe_direction(board, 2) is Action.NONE


def test_in_direction_same_position(setup):
    board, _, algo = setup
    assert not algo.is_in_direction(board, (1, 1), (1, 1), 1, 0)


def test_in_direction_no_movement(setup):
    board, _, algo = setup
    assert not algo.is_in_direction(board, (1, 1), (3, 3), 0, 0)


def test_in_direction_same_row_any_way(setup):
    board, _, algo = setup
    assert algo.is_in_direction(board, (1, 1), (4, 1), -1, 0)
    assert algo.is_in_direction(board, (2, 0), (2, 4), 0, 1)


def test_in_direction_diagonal(setup):
    board, _, algo = setup
    assert algo.is_in_direction(board, (0, 0), (2, 2), 1, 1)
    assert not algo.is_in_direction(board, (0, 0), (1, 2), 1, 1)


def test_in_direction_wraps_around(setup):
    board, _, algo = setup
    assert algo.is_in_direction(board, (4, 4), (1, 1), 1, 1)
    assert not algo.is_in_direction(board, (0, 0), (2, 0), 0, 1)