"""An aggressive tank algorithm: shoot on sight, turn towards the enemy, chase it."""

from __future__ import annotations

import copy
import logging
from collections import deque

from .algorithm import Action, TankAlgorithm
from .board import GameBoard
from .direction import Direction, all_directions, direction_from_delta
from .objects import Tank

logger = logging.getLogger(__name__)

LOOKAHEAD_TICKS = 3
DEFAULT_BFS_STEPS = 5

_STEP_TO_DIRECTION: dict[tuple[int, int], Direction] = {
    d.movement(): d for d in Direction
}

_ROTATIONS = {
    Action.ROTATE_LEFT: Direction.rotate_left,
    Action.ROTATE_RIGHT: Direction.rotate_right,
    Action.ROTATE_LEFT_QUARTER: Direction.rotate_left_quarter,
    Action.ROTATE_RIGHT_QUARTER: Direction.rotate_right_quarter,
}

_State = tuple[int, int, Direction]


class OffensiveAlgorithm(TankAlgorithm):
    """Dodges shells when threatened, otherwise hunts the opposing tank."""

    def __init__(self) -> None:
        self._cached_path: list[tuple[int, int]] = []
        self._cached_enemy_pos: tuple[int, int] = (-1, -1)

    @property
    def name(self) -> str:
        return "OffensiveAlgorithm"

    def evasion_action(self, board: GameBoard, tank: Tank) -> Action:
        """Return a dodging action if a shell is flying at the tank, else NONE."""
        if self.is_shell_approaching(board, tank):
            x, y = tank.position
            move = self.safe_move(board, x, y, tank.direction, tank.player_id)
            if move is not Action.NONE:
                return move
        return Action.NONE

    def enemy_in_sight(self, board: GameBoard, my_tank: Tank, enemy_tank: Tank) -> bool:
        """Whether the enemy lies along the tank's facing with no wall in between."""
        dx, dy = my_tank.direction.movement()
        if not self.is_in_direction(board, my_tank.position, enemy_tank.position, dx, dy):
            logger.debug("enemy is not in our facing direction")
            return False
        return self.has_clear_path(board, my_tank.position, enemy_tank.position)

    def has_clear_path(
        self, board: GameBoard, start: tuple[int, int], end: tuple[int, int]
    ) -> bool:
        """Whether a straight line from ``start`` to ``end`` crosses no wall."""
        if start == end:
            return True
        x0, y0 = start
        x1, y1 = end
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy

        while True:
            if (x0, y0) != start and board.cell_has_wall(
                x0 % board.width, y0 % board.height
            ):
                return False
            if (x0, y0) == end:
                return True
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def can_shoot_now(self, tank: Tank) -> bool:
        """Whether the gun is cooled down and ammunition remains."""
        return tank.shoot_cooldown == 0 and tank.shells_left > 0

    def best_rotation_to_enemy(
        self, board: GameBoard, my_tank: Tank, enemy_tank: Tank
    ) -> tuple[bool, Direction]:
        """Return (line of sight after turning, direction that points at the enemy)."""
        mx, my = my_tank.position
        ex, ey = enemy_tank.position
        dx, dy = ex - mx, ey - my

        if abs(dx) > board.width // 2:
            dx += -board.width if dx > 0 else board.width
        if abs(dy) > board.height // 2:
            dy += -board.height if dy > 0 else board.height

        best = direction_from_delta(dx, dy)
        turned = copy.copy(my_tank)
        turned.direction = best
        return self.enemy_in_sight(board, turned, enemy_tank), best

    def rotation_action(self, tank: Tank, target: Direction) -> Action:
        """Return the single rotation turning the tank to ``target``, or NONE."""
        current = tank.direction
        if current is target:
            return Action.NONE
        if current.rotate_right() is target:
            return Action.ROTATE_RIGHT
        if current.rotate_right_quarter() is target:
            return Action.ROTATE_RIGHT_QUARTER
        if current.rotate_left() is target:
            return Action.ROTATE_LEFT
        if current.rotate_left_quarter() is target:
            return Action.ROTATE_LEFT_QUARTER
        return Action.NONE

    def is_aimed_after_rotation(
        self, board: GameBoard, my_tank: Tank, enemy_tank: Tank, rotation: str
    ) -> bool:
        """Line-of-sight check for a tank about to rotate.

        The rotation is applied to a copy only; sight is judged from the
        tank's current facing.
        """
        turned = copy.copy(my_tank)
        rotate = _ROTATIONS.get(rotation)
        if rotate is not None:
            turned.direction = rotate(my_tank.direction)
        return self.enemy_in_sight(board, my_tank, enemy_tank)

    def _bfs_path(
        self,
        board: GameBoard,
        tank: Tank,
        goal: tuple[int, int],
        max_steps: int = DEFAULT_BFS_STEPS,
    ) -> list[tuple[int, int]]:
        start: _State = (*tank.position, tank.direction)
        came_from: dict[_State, _State | None] = {start: None}
        queue: deque[_State] = deque([start])
        goal_state: _State | None = None
        steps = 0

        while queue and (max_steps == -1 or steps < max_steps):
            for _ in range(len(queue)):
                state = queue.popleft()
                x, y, facing = state
                if (x, y) == goal:
                    goal_state = state
                    break
                for new_dir in (
                    facing.rotate_left_quarter(),
                    facing.rotate_left(),
                    facing,
                    facing.rotate_right(),
                    facing.rotate_right_quarter(),
                ):
                    dx, dy = new_dir.movement()
                    nxt = ((x + dx) % board.width, (y + dy) % board.height, new_dir)
                    if board.objects_at(nxt[0], nxt[1]) or nxt in came_from:
                        continue
                    came_from[nxt] = state
                    queue.append(nxt)
            if goal_state is not None:
                break
            steps += 1

        if goal_state is None:
            return []

        path: list[tuple[int, int]] = []
        current: _State | None = goal_state
        while current is not None:
            path.append((current[0], current[1]))
            current = came_from[current]
        path.pop()
        path.reverse()
        return path

    def chase_action(self, board: GameBoard, my_tank: Tank, enemy_tank: Tank) -> Action:
        """Return a step along a path towards the enemy, or a way to break free."""
        my_pos = my_tank.position
        enemy_pos = enemy_tank.position

        if not self._cached_path or self._cached_enemy_pos != enemy_pos:
            self._cached_path = self._bfs_path(board, my_tank, enemy_pos)
            self._cached_enemy_pos = enemy_pos

        if len(self._cached_path) < 2:
            dx, dy = my_tank.direction.movement()
            nx, ny = board.wrap(my_pos[0] + dx, my_pos[1] + dy)
            objects = board.objects_at(nx, ny)
            if self._is_tile_safe(board, nx, ny):
                return Action.MOVE_FORWARD
            if self.can_shoot_now(my_tank) and any(
                obj.is_wall or obj.is_tank for obj in objects
            ):
                return Action.SHOOT
            return Action.ROTATE_RIGHT

        next_x, next_y = self._cached_path[1]
        dx = (next_x - my_pos[0] + board.width) % board.width
        dy = (next_y - my_pos[1] + board.height) % board.height
        if dx > board.width // 2:
            dx -= board.width
        if dy > board.height // 2:
            dy -= board.height

        desired = _STEP_TO_DIRECTION.get((dx, dy))
        if desired is None:
            return Action.NONE
        rotation = self.rotation_action(my_tank, desired)
        if rotation is not Action.NONE:
            return rotation
        return Action.MOVE_FORWARD

    def next_action(self, board: GameBoard, player_id: int) -> Action:
        """Return the action for the player's tank this step."""
        my_tank = board.player_tank(player_id)
        enemy_tank = board.player_tank(2 if player_id == 1 else 1)
        if my_tank is None or enemy_tank is None:
            return Action.NONE

        if self.is_shell_approaching(board, my_tank):
            logger.debug("shell approaching player %d", player_id)
            return self.evasion_action(board, my_tank)

        if self.can_shoot_now(my_tank) and self.enemy_in_sight(board, my_tank, enemy_tank):
            return Action.SHOOT

        dx, dy = my_tank.direction.movement()
        if self.is_in_direction(board, my_tank.position, enemy_tank.position, dx, dy):
            if self.can_shoot_now(my_tank):
                return Action.SHOOT
            nx, ny = board.wrap(my_tank.position[0] + dx, my_tank.position[1] + dy)
            if not board.objects_at(nx, ny):
                return Action.MOVE_FORWARD

        can_see, desired = self.best_rotation_to_enemy(board, my_tank, enemy_tank)
        if my_tank.direction is not desired:
            rotation = self.rotation_action(my_tank, desired)
            if can_see and rotation is not Action.NONE:
                return rotation

        return self.chase_action(board, my_tank, enemy_tank)

    def _danger_level(self, board: GameBoard, x: int, y: int) -> tuple[bool, bool]:
        immediate = near = False
        for shell in board.shells:
            sx, sy = shell.position
            sdx, sdy = shell.direction.movement()
            for tick in range(1, LOOKAHEAD_TICKS + 1):
                cells = {
                    (
                        (sx + sdx * k) % board.width,
                        (sy + sdy * k) % board.height,
                    )
                    for k in (2 * tick - 1, 2 * tick)
                }
                if (x, y) in cells:
                    if tick == 1:
                        immediate = True
                    else:
                        near = True
                    break
            if immediate:
                break
        return immediate, near

    def _rotate_towards_safe_tile(
        self, board: GameBoard, tank: Tank, x: int, y: int, current_dir: Direction
    ) -> Action:
        for candidate in all_directions():
            if candidate is current_dir:
                continue
            dx, dy = candidate.movement()
            if self._is_tile_safe(board, *board.wrap(x + dx, y + dy)):
                rotation = self.rotation_action(tank, candidate)
                if rotation is not Action.NONE:
                    return rotation
        return Action.NONE

    def _backward_if_reversing(
        self, board: GameBoard, tank: Tank, x: int, y: int, current_dir: Direction
    ) -> Action:
        if tank.in_backward_move:
            dx, dy = current_dir.movement()
            if self._is_tile_safe(board, *board.wrap(x - dx, y - dy)):
                return Action.MOVE_BACKWARD
        return Action.NONE

    def safe_move(
        self,
        board: GameBoard,
        x: int,
        y: int,
        current_dir: Direction,
        player_id: int,
    ) -> Action:
        """Choose an action that keeps the tank at (x, y) out of shells' way."""
        tank = board.player_tank(player_id)
        if tank is None:
            return Action.NONE

        immediate, near = self._danger_level(board, x, y)
        dx, dy = current_dir.movement()
        forward = board.wrap(x + dx, y + dy)

        if immediate:
            if self.can_shoot_now(tank) and self.can_shoot_shell(board, x, y, current_dir):
                return Action.SHOOT
            if self._is_tile_safe(board, *forward):
                return Action.MOVE_FORWARD
            backward = self._backward_if_reversing(board, tank, x, y, current_dir)
            if backward is not Action.NONE:
                return backward
            rotation = self._rotate_towards_safe_tile(board, tank, x, y, current_dir)
            if rotation is not Action.NONE:
                return rotation
            return Action.ROTATE_RIGHT

        if near:
            rotation = self._rotate_towards_safe_tile(board, tank, x, y, current_dir)
            if rotation is not Action.NONE:
                return rotation

        if self._is_tile_safe(board, *forward):
            return Action.MOVE_FORWARD
        backward = self._backward_if_reversing(board, tank, x, y, current_dir)
        if backward is not Action.NONE:
            return backward
        return Action.ROTATE_RIGHT

    def _is_tile_safe(self, board: GameBoard, tx: int, ty: int) -> bool:
        tx, ty = board.wrap(tx, ty)
        if any(not obj.is_shell for obj in board.objects_at(tx, ty)):
            return False
        for shell in board.shells:
            sx, sy = shell.position
            sdx, sdy = shell.direction.movement()
            if (sx + sdx, sy + sdx) == (tx, ty) or (sx + 2 * sdx, sy + 2 * sdy) == (tx, ty):
                return False
        return True

    def can_shoot_shell(self, board: GameBoard, x: int, y: int, direction: Direction) -> bool:
        """Whether any shell lies straight ahead along an orthogonal facing."""
        for shell in board.shells:
            sx, sy = shell.position
            if direction is Direction.LEFT and sy == y and sx < x:
                return True
            if direction is Direction.RIGHT and sy == y and sx > x:
                return True
            if direction is Direction.UP and sx == x and sy < y:
                return True
            if direction is Direction.DOWN and sx == x and sy > y:
                return True
        return False