# hexgame/core/constants.py
from enum import IntEnum


class Player(IntEnum):
    EMPTY = 0
    PLAYER_A = 1  # Connects column 0 to the last column
    PLAYER_B = 2  # Connects row 0 to the last row


def other_player(player: Player) -> Player:
    return Player.PLAYER_B if player == Player.PLAYER_A else Player.PLAYER_A


SYMBOLS = {Player.EMPTY: ".", Player.PLAYER_A: "X", Player.PLAYER_B: "O"}

# --- Board Topology ---
# Offsets (d_row, d_col) in order: right, left, upper-left, upper-right,
# lower-left, lower-right
HEX_DIRECTIONS = [(0, 1), (0, -1), (-1, 0), (-1, 1), (1, -1), (1, 0)]
MIN_DIMENSION = 2

# --- Predictor Defaults ---
DEFAULT_DEPTH = 2
DEFAULT_TRIALS = 10

# Marks a cell as taken while the search tree is being built.
# Only its non-emptiness matters.
PLACEHOLDER = Player.PLAYER_A
