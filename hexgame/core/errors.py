# hexgame/core/errors.py


class HexError(Exception):
    """Base class for every error raised by the Hex engine."""


class InvalidDimensions(HexError, ValueError):
    """Board requested with fewer than two rows or columns."""

    def __init__(self, rows: int, cols: int):
        super().__init__(f"Board must be at least 2x2, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols


class IllegalMove(HexError, ValueError):
    """
    Raised by callers (the game session) when a move fails the legality gate.
    The board itself never raises this: applying an illegal move is a
    precondition violation.
    """

    def __init__(self, row: int, col: int, reason: str = "cell is occupied or off the board"):
        super().__init__(f"Illegal move ({row}, {col}): {reason}")
        self.row = row
        self.col = col


class NoLegalMoves(HexError):
    """Predictor invoked on a board without empty cells."""
