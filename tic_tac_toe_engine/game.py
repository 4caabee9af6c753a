import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from tic_tac_toe_engine.board import Board, Cell, Player, Position
from tic_tac_toe_engine.exception import CellOccupiedError, GameOverError, InvalidMoveError, OutOfBoundsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Win:
    player: Player


@dataclass(frozen=True, slots=True)
class Draw:
    pass


@dataclass(frozen=True, slots=True)
class Switch:
    pass


@dataclass(frozen=True, slots=True)
class NoChange:
    pass


MoveOutcome: TypeAlias = Win | Draw | Switch | NoChange


@dataclass(slots=True)
class Record:
    """Win/loss/draw tally spanning every round played by one game."""

    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def wins(self, player: Player) -> int:
        return self.x_wins if player is Player.X else self.o_wins


class Game:
    """Turn-taking state machine around a single board.

    play() is the only way to change a round in progress. Every rejected move,
    whatever the reason, comes back as NoChange and leaves the game untouched.
    reset() starts a new round but keeps the record.
    """

    def __init__(self) -> None:
        self._board = Board()
        self._turn = Player.X
        self._ongoing = True
        self._winner: Player | None = None
        self._record = Record()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> Player:
        return self._turn

    @property
    def ongoing(self) -> bool:
        return self._ongoing

    @property
    def winner(self) -> Player | None:
        return self._winner

    @property
    def record(self) -> Record:
        return self._record

    def validate(self, position: Position) -> None:
        """Raise the reason play() would reject this position, or return None if it would be accepted."""
        if not self._ongoing:
            raise GameOverError("Game over.")

        if not Board.in_bounds(position):
            msg = f"Position {position} out of bounds."
            raise OutOfBoundsError(msg)

        if self._board.get(position) is not Cell.EMPTY:
            msg = f"Cell {position} occupied."
            raise CellOccupiedError(msg)

    def play(self, position: Position) -> MoveOutcome:
        try:
            self.validate(position)
        except InvalidMoveError as e:
            logger.debug("Rejected move %s by %s: %s", position, self._turn.value, e)
            return NoChange()

        self._board.set(position, self._turn)
        logger.debug("Player %s played %s", self._turn.value, position)

        winner = self._board.winner()
        if winner is not None:
            self._ongoing = False
            self._winner = winner
            match winner:
                case Player.X:
                    self._record.x_wins += 1
                case Player.O:
                    self._record.o_wins += 1
            logger.info("Player %s wins", winner.value)
            return Win(winner)

        if self._board.is_full():
            self._ongoing = False
            self._record.draws += 1
            logger.info("Round ended in a draw")
            return Draw()

        self._turn = self._turn.other()
        return Switch()

    def play_all(self, positions: Iterable[Position]) -> list[MoveOutcome]:
        return [self.play(position) for position in positions]

    def reset(self) -> None:
        self._board = Board()
        self._turn = Player.X
        self._ongoing = True
        self._winner = None
        logger.info("New round started, record: %s", self._record)
