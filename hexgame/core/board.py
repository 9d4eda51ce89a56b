# hexgame/core/board.py
import logging
from collections import deque
from contextlib import contextmanager
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .constants import HEX_DIRECTIONS, MIN_DIMENSION, SYMBOLS, Player, other_player
from .errors import InvalidDimensions

logger = logging.getLogger(__name__)

Move = Tuple[int, int]


class Cell(NamedTuple):
    row: int
    col: int
    owner: Player


class Board:
    def __init__(self, rows: int, cols: int):
        """
        Rhombic Hex board with (row, col) indexing.
        Row 0 is the TOP edge, column 0 is the LEFT edge.
        PLAYER_A connects column 0 to column cols-1.
        PLAYER_B connects row 0 to row rows-1.
        """
        if rows < MIN_DIMENSION or cols < MIN_DIMENSION:
            raise InvalidDimensions(rows, cols)
        self._rows = rows
        self._cols = cols
        self._grid = [[Player.EMPTY for _ in range(cols)] for _ in range(rows)]
        self.winner: Optional[Player] = None

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> "Board":
        """Builds a board from a row-major matrix of owner values (0, 1, 2)."""
        if matrix and any(len(row) != len(matrix[0]) for row in matrix):
            raise ValueError(f"Matrix rows differ in length: {[len(row) for row in matrix]}")
        board = cls(len(matrix), len(matrix[0]) if matrix else 0)
        for r, row in enumerate(matrix):
            for c, val in enumerate(row):
                if val != Player.EMPTY:
                    board.apply(r, c, Player(val))
        return board

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    # --- Cell Queries ---

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def is_legal(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and empty. Never raises."""
        if not self.in_bounds(row, col):
            return False
        return self._grid[row][col] == Player.EMPTY

    def owner(self, row: int, col: int) -> Player:
        return self._grid[row][col]

    def neighbors(self, row: int, col: int) -> Iterator[Move]:
        for dr, dc in HEX_DIRECTIONS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self._rows and 0 <= nc < self._cols:
                yield nr, nc

    def empty_cells(self) -> List[Move]:
        """Empty cells in row-major order."""
        return [
            (r, c)
            for r in range(self._rows)
            for c in range(self._cols)
            if self._grid[r][c] == Player.EMPTY
        ]

    def is_full(self) -> bool:
        return all(val != Player.EMPTY for row in self._grid for val in row)

    def cells(self) -> Iterator[Cell]:
        for r in range(self._rows):
            for c in range(self._cols):
                yield Cell(r, c, self._grid[r][c])

    def to_matrix(self) -> List[List[int]]:
        return [[int(val) for val in row] for row in self._grid]

    # --- Mutation ---

    def apply(self, row: int, col: int, player: Player):
        """Places a stone. Caller must have checked is_legal(row, col)."""
        self._grid[row][col] = player

    def clear(self, row: int, col: int):
        self._grid[row][col] = Player.EMPTY

    @contextmanager
    def placed(self, row: int, col: int, player: Player):
        """Applies one move for the duration of the block, then clears it."""
        self.apply(row, col, player)
        try:
            yield self
        finally:
            self.clear(row, col)

    @contextmanager
    def filled(self, moves: Sequence[Move], first_player: Player):
        """
        Assigns `moves` alternately to both players, starting with
        `first_player`, and clears every one of them on exit.
        """
        applied = []
        try:
            player = first_player
            for r, c in moves:
                self.apply(r, c, player)
                applied.append((r, c))
                player = other_player(player)
            yield self
        finally:
            for r, c in applied:
                self.clear(r, c)

    # --- Connectivity ---

    def is_connected(self, player: Player) -> bool:
        """
        Breadth-first search from the player's starting edge.
        Has no side effects; check_connected() also records the winner.
        """
        if player == Player.PLAYER_A:
            starts = [(r, 0) for r in range(self._rows)]
        else:
            starts = [(0, c) for c in range(self._cols)]

        visited = [[False] * self._cols for _ in range(self._rows)]
        queue = deque()
        for r, c in starts:
            if self._grid[r][c] == player:
                visited[r][c] = True
                queue.append((r, c))

        while queue:
            r, c = queue.popleft()
            for nr, nc in self.neighbors(r, c):
                if visited[nr][nc] or self._grid[nr][nc] != player:
                    continue
                if self._on_target_edge(player, nr, nc):
                    return True
                visited[nr][nc] = True
                queue.append((nr, nc))
        return False

    def check_connected(self, player: Player) -> bool:
        if self.is_connected(player):
            if self.winner != player:
                logger.info("Player %s connected its edges", player.name)
            self.winner = player
            return True
        return False

    def _on_target_edge(self, player: Player, row: int, col: int) -> bool:
        if player == Player.PLAYER_A:
            return col == self._cols - 1
        return row == self._rows - 1

    # --- Formatting ---

    def render(self) -> str:
        """
        ASCII rhombus. Each row is shifted right by its index so the six
        neighbors of a cell touch it through '-', '\\' and '/' edges.
        """
        lines = []
        for r in range(self._rows):
            indent = "  " * r
            lines.append(indent + " - ".join(SYMBOLS[val] for val in self._grid[r]))
            if r != self._rows - 1:
                lines.append(indent + " /".join([" \\"] * self._cols))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
