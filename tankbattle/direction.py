"""Eight compass directions on a toroidal grid, and helpers around them."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """A facing direction. The value is the short code used in board files and logs."""

    UP = "U"
    UP_RIGHT = "UR"
    RIGHT = "R"
    DOWN_RIGHT = "DR"
    DOWN = "D"
    DOWN_LEFT = "DL"
    LEFT = "L"
    UP_LEFT = "UL"

    def __str__(self) -> str:
        return self.value

    def movement(self) -> tuple[int, int]:
        """Return the (dx, dy) step one cell in this direction; y grows downwards."""
        return _MOVEMENT[self]

    def rotate_left(self) -> Direction:
        """Turn 45 degrees anticlockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % len(_CLOCKWISE)]

    def rotate_right(self) -> Direction:
        """Turn 45 degrees clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % len(_CLOCKWISE)]

    def rotate_left_quarter(self) -> Direction:
        """Turn 90 degrees anticlockwise."""
        return self.rotate_left().rotate_left()

    def rotate_right_quarter(self) -> Direction:
        """Turn 90 degrees clockwise."""
        return self.rotate_right().rotate_right()

    @classmethod
    def parse(cls, code: str) -> Direction:
        """Return the direction for a short code; unknown codes give UP."""
        try:
            return cls(code)
        except ValueError:
            return cls.UP


_CLOCKWISE: tuple[Direction, ...] = tuple(Direction)

_MOVEMENT: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.UP_RIGHT: (1, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN_RIGHT: (1, 1),
    Direction.DOWN: (0, 1),
    Direction.DOWN_LEFT: (-1, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP_LEFT: (-1, -1),
}


def direction_from_delta(dx: int, dy: int) -> Direction:
    """Return the direction pointing along the sign of (dx, dy); (0, 0) gives UP."""
    if dx == 0 and dy < 0:
        return Direction.UP
    if dx > 0 and dy < 0:
        return Direction.UP_RIGHT
    if dx > 0 and dy == 0:
        return Direction.RIGHT
    if dx > 0 and dy > 0:
        return Direction.DOWN_RIGHT
    if dx == 0 and dy > 0:
        return Direction.DOWN
    if dx < 0 and dy > 0:
        return Direction.DOWN_LEFT
    if dx < 0 and dy == 0:
        return Direction.LEFT
    if dx < 0 and dy < 0:
        return Direction.UP_LEFT
    return Direction.UP


def action_to_move(current: Direction, dx: int, dy: int) -> str:
    """Return the action that heads a tank facing ``current`` towards (dx, dy)."""
    target = direction_from_delta(dx, dy)
    if current == target:
        return "MOVE_FORWARD"
    if current.rotate_left() == target:
        return "ROTATE_LEFT"
    if current.rotate_right() == target:
        return "ROTATE_RIGHT"
    return "ROTATE_LEFT"


def all_directions() -> list[Direction]:
    """Return every direction in the order the algorithms scan them."""
    return [
        Direction.UP,
        Direction.LEFT,
        Direction.RIGHT,
        Direction.DOWN_LEFT,
        Direction.UP_LEFT,
        Direction.UP_RIGHT,
        Direction.DOWN_RIGHT,
        Direction.DOWN,
    ]