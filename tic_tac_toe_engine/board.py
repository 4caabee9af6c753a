from collections.abc import Iterator, Sequence
from enum import Enum
from typing import Final, TypeAlias

from tic_tac_toe_engine.exception import OutOfBoundsError

BOARD_SIZE: Final = 3

Position: TypeAlias = tuple[int, int]  # (column, row)
Line: TypeAlias = tuple[Position, Position, Position]


class Cell(Enum):
    EMPTY = " "
    X = "X"
    O = "O"


class Player(Enum):
    X = "X"
    O = "O"

    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    @property
    def cell(self) -> Cell:
        return Cell.X if self is Player.X else Cell.O


def _build_lines() -> tuple[Line, ...]:
    span = range(BOARD_SIZE)
    lines: list[Line] = []

    lines.extend(tuple((col, row) for row in span) for col in span)  # Vertical lines
    lines.extend(tuple((col, row) for col in span) for row in span)  # Horizontal lines
    lines.append(tuple((i, i) for i in span))  # First diagonal
    lines.append(tuple((i, BOARD_SIZE - 1 - i) for i in span))  # Second diagonal
    return tuple(lines)


LINES: Final = _build_lines()


class Board:
    """3x3 grid of cells addressed by (column, row).

    The board only answers questions about itself. It does not know whose turn it is
    and does not check the moves written to it: that is the owning game's job.
    """

    def __init__(self) -> None:
        self._cells: list[list[Cell]] = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[Cell]]) -> "Board":
        """Build a board from a nested sequence indexed as columns[col][row]."""
        if len(columns) != BOARD_SIZE or any(len(column) != BOARD_SIZE for column in columns):
            msg = f"Expected a {BOARD_SIZE}x{BOARD_SIZE} grid of cells."
            raise ValueError(msg)

        board = cls()
        board._cells = [list(column) for column in columns]
        return board

    @property
    def columns(self) -> tuple[tuple[Cell, ...], ...]:
        return tuple(tuple(column) for column in self._cells)

    @staticmethod
    def in_bounds(position: Position) -> bool:
        col, row = position
        return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE

    def clone(self) -> "Board":
        copied = Board()
        copied._cells = [column[:] for column in self._cells]
        return copied

    def get(self, position: Position) -> Cell:
        if not self.in_bounds(position):
            msg = f"Position {position} out of bounds."
            raise OutOfBoundsError(msg)
        col, row = position
        return self._cells[col][row]

    def set(self, position: Position, player: Player) -> None:
        col, row = position
        self._cells[col][row] = player.cell

    def lines(self) -> Iterator[tuple[Cell, Cell, Cell]]:
        for line in LINES:
            first, second, third = (self._cells[col][row] for col, row in line)
            yield first, second, third

    def empty_positions(self) -> list[Position]:
        return [
            (col, row) for col in range(BOARD_SIZE) for row in range(BOARD_SIZE) if self._cells[col][row] is Cell.EMPTY
        ]

    def is_full(self) -> bool:
        return all(all(cell is not Cell.EMPTY for cell in column) for column in self._cells)

    def winner(self) -> Player | None:
        for first, *rest in self.lines():
            if first is Cell.EMPTY:
                continue
            if all(cell is first for cell in rest):
                return Player(first.value)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board.from_columns({self.columns!r})"
