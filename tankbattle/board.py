"""The toroidal game board: what sits where, loading from a file, rendering."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .direction import Direction
from .objects import GameObject, Mine, Shell, Tank, Wall

logger = logging.getLogger(__name__)

_DIMENSIONS = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)")
_VALID_CELLS = frozenset("12#@ ")
DEFAULT_ERRORS_FILE = "input_errors.txt"


class BoardLoadError(Exception):
    """Raised when a board file cannot be read or lacks a tank for each player."""


class GameBoard:
    """A width x height grid whose edges wrap around."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Board dimensions must be positive")
        self.width = width
        self.height = height
        self.tanks: list[Tank] = []
        self.shells: list[Shell] = []
        self.mines: list[Mine] = []
        self.walls: list[Wall] = []

    def load_from_file(
        self, path: str | Path, errors_path: str | Path = DEFAULT_ERRORS_FILE
    ) -> list[str]:
        """Fill the board from a board file and return the warnings found.

        Recoverable problems (bad characters, duplicate tanks, missing rows) are
        also written to ``errors_path``. A missing player tank raises
        :class:`BoardLoadError`.
        """
        self.clear()
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except OSError as exc:
            raise BoardLoadError(f"Failed to open file: {path}") from exc

        match = _DIMENSIONS.match(text)
        if match is None:
            raise BoardLoadError(f"Invalid board dimensions in file: {path}")
        file_width, file_height = int(match.group(1)), int(match.group(2))

        warnings: list[str] = []
        if file_width != self.width or file_height != self.height:
            warnings.append(
                f"Warning: File dimensions ({file_width}x{file_height}) don't match "
                f"board dimensions ({self.width}x{self.height})"
            )

        end_of_header = text.find("\n", match.end())
        rest = "" if end_of_header == -1 else text[end_of_header + 1:]
        lines = rest.split("\n") if rest else []
        if rest.endswith("\n"):
            lines.pop()

        has_player1 = has_player2 = False
        has_warnings = False

        for y, line in enumerate(lines[: self.height]):
            for x in range(self.width):
                cell = line[x] if x < len(line) else " "
                if cell not in _VALID_CELLS:
                    warnings.append(
                        f"Warning: Invalid character '{cell}' at ({x},{y}), "
                        "treated as space"
                    )
                    has_warnings = True
                    continue
                if cell == "1":
                    if has_player1:
                        warnings.append(
                            f"Warning: Duplicate player 1 tank at ({x},{y}), "
                            "keeping first occurrence"
                        )
                        has_warnings = True
                    else:
                        self.tanks.append(Tank(1, x, y, Direction.LEFT))
                        has_player1 = True
                elif cell == "2":
                    if has_player2:
                        warnings.append(
                            f"Warning: Duplicate player 2 tank at ({x},{y}), "
                            "keeping first occurrence"
                        )
                        has_warnings = True
                    else:
                        self.tanks.append(Tank(2, x, y, Direction.RIGHT))
                        has_player2 = True
                elif cell == "#":
                    self.walls.append(Wall(x, y))
                elif cell == "@":
                    self.mines.append(Mine(x, y))

        for missing in range(min(len(lines), self.height), self.height):
            warnings.append(f"Warning: Missing row {missing}, filled with spaces")
            has_warnings = True

        if not (has_player1 and has_player2):
            raise BoardLoadError("Board must contain a tank for player 1 and player 2")

        if has_warnings and warnings:
            try:
                Path(errors_path).write_text(
                    "".join(f"{w}\n" for w in warnings), encoding="utf-8"
                )
            except OSError:
                logger.warning("Could not write input errors to %s", errors_path)

        return warnings

    def clear(self) -> None:
        """Remove every object from the board."""
        self.tanks.clear()
        self.shells.clear()
        self.mines.clear()
        self.walls.clear()

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Bring a position at most one board length outside back onto the board."""
        if x < 0:
            x += self.width
        if x >= self.width:
            x -= self.width
        if y < 0:
            y += self.height
        if y >= self.height:
            y -= self.height
        return x, y

    def objects_at(self, x: int, y: int) -> list[GameObject]:
        """Return tanks, shells, mines and standing walls on a cell, in that order."""
        x, y = self.wrap(x, y)
        found: list[GameObject] = []
        found.extend(t for t in self.tanks if t.position == (x, y))
        found.extend(s for s in self.shells if s.position == (x, y))
        found.extend(m for m in self.mines if m.position == (x, y))
        found.extend(
            w for w in self.walls if w.position == (x, y) and not w.destroyed
        )
        return found

    def player_tank(self, player_id: int) -> Tank | None:
        """Return the tank of a player, or None if it is gone."""
        return next((t for t in self.tanks if t.player_id == player_id), None)

    def add_shell(self, shell: Shell) -> None:
        """Put a new shell on the board."""
        self.shells.append(shell)

    @staticmethod
    def _remove(items: list, target: GameObject) -> None:
        items[:] = [item for item in items if item is not target]

    def remove_shell(self, shell: Shell) -> None:
        """Take a shell off the board."""
        self._remove(self.shells, shell)

    def remove_wall(self, wall: Wall) -> None:
        """Take a wall off the board."""
        self._remove(self.walls, wall)

    def remove_mine(self, mine: Mine) -> None:
        """Take a mine off the board."""
        self._remove(self.mines, mine)

    def remove_tank(self, tank: Tank) -> None:
        """Take a tank off the board."""
        self._remove(self.tanks, tank)

    def contains_shell(self, shell: Shell) -> bool:
        """Whether this very shell is still on the board."""
        return any(s is shell for s in self.shells)

    def set_shells(self, shells: Iterable[Shell]) -> None:
        """Replace all shells on the board."""
        self.shells[:] = list(shells)

    def cell_has_obstacle(self, x: int, y: int) -> bool:
        """Whether a cell holds anything other than tanks and mines."""
        for obj in self.objects_at(x, y):
            if not obj.is_tank and not obj.is_mine:
                logger.debug("Obstacle detected at (%d, %d)", x, y)
                return True
        return False

    def cell_has_wall(self, x: int, y: int) -> bool:
        """Whether a standing wall is on a cell."""
        for obj in self.objects_at(x, y):
            if obj.is_wall:
                logger.debug("Wall detected at (%d, %d)", x, y)
                return True
        return False

    def is_cell_empty(self, x: int, y: int) -> bool:
        """Whether no collidable object is on a cell."""
        return not any(obj.collidable for obj in self.objects_at(x, y))

    def grid_lines(self) -> list[str]:
        """Render the board as one string per row; tanks draw over everything."""
        grid = [[" "] * self.width for _ in range(self.height)]

        def mark(objects: Iterable[GameObject], char_of) -> None:
            for obj in objects:
                x, y = obj.position
                if 0 <= x < self.width and 0 <= y < self.height:
                    grid[y][x] = char_of(obj)

        mark(self.walls, lambda _: "#")
        mark(self.mines, lambda _: "@")
        mark(self.shells, lambda _: "o")
        mark(self.tanks, lambda t: chr(ord("0") + t.player_id))
        return ["".join(row) for row in grid]

    def _direction_lines(self) -> list[str]:
        return [f"{t.player_id}: {t.direction.value}" for t in self.tanks]

    def display(self) -> None:
        """Print the board with coordinates and a legend."""
        out = [
            f"\nCurrent Board ({self.width}x{self.height}):",
            "-------------------------",
            "   " + "".join(f" {x}" for x in range(self.width)),
        ]
        out.extend(
            f"{y:>2} " + "".join(f" {c}" for c in row)
            for y, row in enumerate(self.grid_lines())
        )
        out.extend(
            [
                "",
                "Legend:",
                "  #: Wall",
                "  @: Mine",
                "  o: Shell",
                "  1: Player 1 Tank",
                "  2: Player 2 Tank",
            ]
        )
        print("\n".join(out))

    def write_to_file(self, path: str | Path) -> None:
        """Save the board size, grid and tank directions to a file."""
        lines = [f"{self.width}x{self.height}", *self.grid_lines(), "Directions:"]
        lines.extend(self._direction_lines())
        Path(path).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")

    def step_log(self, step_number: int) -> str:
        """Return the log entry describing the board after a step."""
        lines = [f"Step {step_number}:", *self.grid_lines(), "Directions:"]
        lines.extend(self._direction_lines())
        return "".join(f"{line}\n" for line in lines) + "\n"