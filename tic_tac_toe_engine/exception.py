class GameError(Exception):
    pass


class InvalidMoveError(GameError):
    pass


class GameOverError(InvalidMoveError):
    pass


class CellOccupiedError(InvalidMoveError):
    pass


class OutOfBoundsError(InvalidMoveError, IndexError):
    pass
