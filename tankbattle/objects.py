"""Things that occupy cells on the board: tanks, shells, mines and walls."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .direction import Direction

INITIAL_SHELLS = 16
SHOOT_COOLDOWN = 5
MAX_BACKWARD_STEP = 5
WALL_HITS_TO_DESTROY = 2


class GameObject(ABC):
    """An object sitting on one cell of the board."""

    is_tank = False
    is_shell = False
    is_mine = False
    is_wall = False
    collidable = True
    destroyable = False

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    @property
    @abstractmethod
    def symbol(self) -> str:
        """Character used to draw the object."""

    @property
    def position(self) -> tuple[int, int]:
        """The (x, y) cell the object occupies."""
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        """Place the object on another cell."""
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y})"


class Mine(GameObject):
    """A mine that destroys a tank driving onto it."""

    is_mine = True

    @property
    def symbol(self) -> str:
        return "@"


class Wall(GameObject):
    """A wall that falls after being hit twice."""

    is_wall = True
    destroyable = True

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y)
        self.hits = 0

    @property
    def symbol(self) -> str:
        return "#"

    def hit(self) -> None:
        """Register one shell hit."""
        self.hits += 1

    @property
    def destroyed(self) -> bool:
        """Whether the wall has taken enough hits to fall."""
        return self.hits >= WALL_HITS_TO_DESTROY


class Shell(GameObject):
    """A shell flying in a fixed direction, fired by one player."""

    is_shell = True

    def __init__(self, x: int, y: int, direction: Direction, player_id: int) -> None:
        super().__init__(x, y)
        self.direction = direction
        self.player_id = player_id

    @property
    def symbol(self) -> str:
        return "*"

    def __repr__(self) -> str:
        return (
            f"Shell(x={self.x}, y={self.y}, direction={self.direction.name}, "
            f"player_id={self.player_id})"
        )


class Tank(GameObject):
    """A player's tank with ammunition, a gun cooldown and a backward-move state.

    ``backward_move_step`` is 0 when not reversing, 1-2 while waiting and 3 when
    the backward move happens; it never exceeds 5.
    """

    is_tank = True

    def __init__(self, player_id: int, x: int, y: int, direction: Direction) -> None:
        super().__init__(x, y)
        self.player_id = player_id
        self.direction = direction
        self.shells_left = INITIAL_SHELLS
        self.shoot_cooldown = 0
        self.backward_move_step = 0

    @property
    def symbol(self) -> str:
        return str(self.player_id)

    def decrease_shoot_cooldown(self) -> None:
        """Count one step off the gun cooldown."""
        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= 1

    def shoot(self) -> None:
        """Spend a shell and start the cooldown, if the gun is ready."""
        if self.shells_left > 0 and self.shoot_cooldown == 0:
            self.shells_left -= 1
            self.shoot_cooldown = SHOOT_COOLDOWN

    def start_backward_move(self) -> None:
        """Begin waiting for a backward move unless already doing so."""
        if self.backward_move_step == 0:
            self.backward_move_step = 1

    def cancel_backward_move(self) -> None:
        """Leave the backward-move state."""
        self.backward_move_step = 0

    def increase_wait_time(self) -> None:
        """Advance the backward-move counter, up to its limit."""
        if self.backward_move_step < MAX_BACKWARD_STEP:
            self.backward_move_step += 1

    @property
    def in_backward_move(self) -> bool:
        """Whether a backward move is pending or in progress."""
        return self.backward_move_step > 0

    def __repr__(self) -> str:
        return (
            f"Tank(player_id={self.player_id}, x={self.x}, y={self.y}, "
            f"direction={self.direction.name})"
        )