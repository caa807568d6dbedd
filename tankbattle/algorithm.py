"""Actions a tank can take and the base class for the algorithms choosing them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from .board import GameBoard
from .objects import Tank


class Action(str, Enum):
    """An action a tank may take in one step."""

    NONE = "NONE"
    MOVE_FORWARD = "MOVE_FORWARD"
    MOVE_BACKWARD = "MOVE_BACKWARD"
    ROTATE_LEFT = "ROTATE_LEFT"
    ROTATE_RIGHT = "ROTATE_RIGHT"
    ROTATE_LEFT_QUARTER = "ROTATE_LEFT_QUARTER"
    ROTATE_RIGHT_QUARTER = "ROTATE_RIGHT_QUARTER"
    SHOOT = "SHOOT"

    def __str__(self) -> str:
        return self.value


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class TankAlgorithm(ABC):
    """Decides what a player's tank does each step."""

    @abstractmethod
    def next_action(self, board: GameBoard, player_id: int) -> Action:
        """Return the action the player's tank takes this step."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the algorithm, as shown in the game log."""

    def is_shell_approaching(self, board: GameBoard, tank: Tank) -> bool:
        """Whether any shell on the board is flying straight at the tank."""
        tx, ty = tank.position
        for shell in board.shells:
            sx, sy = shell.position
            mx, my = shell.direction.movement()
            if my == 0 and sy == ty:
                if (mx > 0 and sx < tx) or (mx < 0 and sx > tx):
                    return True
            elif mx == 0 and sx == tx:
                if (my > 0 and sy < ty) or (my < 0 and sy > ty):
                    return True
            elif abs(sx - tx) == abs(sy - ty):
                delta_x, delta_y = tx - sx, ty - sy
                if mx != 0 and _sign(mx) == _sign(delta_x):
                    if my != 0 and _sign(my) == _sign(delta_y):
                        return True
        return False

    def find_safe_direction(self, board: GameBoard, player_id: int) -> Action:
        """Default evasion: stay put."""
        return Action.NONE

    def is_in_direction(
        self,
        board: GameBoard,
        start: tuple[int, int],
        end: tuple[int, int],
        dx: int,
        dy: int,
    ) -> bool:
        """Whether walking from ``start`` by (dx, dy), wrapping, ever reaches ``end``."""
        if start == end or (dx == 0 and dy == 0):
            return False
        if dy == 0 and start[1] == end[1]:
            return True
        if dx == 0 and start[0] == end[0]:
            return True

        x, y = start
        for _ in range(board.width * board.height):
            x = (x + dx + board.width) % board.width
            y = (y + dy + board.height) % board.height
            if (x, y) == end:
                return True
            if (x, y) == start:
                break
        return False