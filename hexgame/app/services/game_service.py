"""
Game Service - Centralized Game Logic

A HexGame session is the single source of truth for one game. It handles:
- Legality gating of human moves
- Asking the predictor for robot moves
- Winner detection after every move
- Move history and snapshots

The board and predictor know nothing about turns or seats; this layer does.
"""

import logging
import time
from typing import List, Optional, Tuple

from hexgame.app.core.config import registry
from hexgame.app.core.events import GameEvents, game_events
from hexgame.app.models.enums import GameStatus, PlayerType
from hexgame.app.schemas.game_schema import GameCreate, GameSnapshot, MoveRecord
from hexgame.core.board import Board
from hexgame.core.constants import Player, other_player
from hexgame.core.errors import IllegalMove
from hexgame.core.predictor import MovePredictor

logger = logging.getLogger(__name__)


class HexGame:
    def __init__(self, rows: int, cols: int,
                 player_1: PlayerType = PlayerType.HUMAN,
                 player_2: PlayerType = PlayerType.ROBOT,
                 predictor: Optional[MovePredictor] = None,
                 events: Optional[GameEvents] = None):
        self.board = Board(rows, cols)
        self.seats = {Player.PLAYER_A: player_1, Player.PLAYER_B: player_2}
        self.predictor = predictor or MovePredictor()
        self.events = events or game_events
        self.current_turn = Player.PLAYER_A
        self.winner: Optional[Player] = None
        self.status = GameStatus.IN_PROGRESS
        self.history: List[MoveRecord] = []

    @classmethod
    def from_request(cls, request: GameCreate, events: Optional[GameEvents] = None) -> "HexGame":
        """Builds a session with the predictor preset named in the request."""
        config = registry.resolve(request.preset)
        return cls(request.rows, request.cols, request.player_1, request.player_2,
                   predictor=config.build(), events=events)

    @property
    def is_over(self) -> bool:
        return self.status == GameStatus.COMPLETED

    def is_human_turn(self) -> bool:
        return self.seats[self.current_turn] == PlayerType.HUMAN

    def play_human_move(self, row: int, col: int) -> GameSnapshot:
        """Validates and applies a human move. Raises IllegalMove on any rejection."""
        start_time = time.time()

        if self.is_over:
            raise IllegalMove(row, col, "game is already over")
        if not self.is_human_turn():
            raise IllegalMove(row, col, f"it is the robot's turn ({self.current_turn.name})")
        if not self.board.is_legal(row, col):
            raise IllegalMove(row, col)

        self._apply_move(row, col, round(time.time() - start_time, 3))
        return self.snapshot()

    def step_robot_turn(self) -> Tuple[int, int]:
        """Executes one robot turn and returns the move it played."""
        if self.is_over:
            raise IllegalMove(-1, -1, "game is already over")
        if self.is_human_turn():
            raise IllegalMove(-1, -1, f"it is the human's turn ({self.current_turn.name})")

        # --- TIMER START ---
        start_time = time.time()
        row, col = self.predictor.compute_next_move(self.board, self.current_turn)
        duration = round(time.time() - start_time, 3)

        # The predictor must hand back a legal cell; anything else is a bug
        if not self.board.is_legal(row, col):
            raise IllegalMove(row, col, "predictor returned an occupied cell")

        self._apply_move(row, col, duration)
        return row, col

    def _apply_move(self, row: int, col: int, duration: float):
        player = self.current_turn
        self.board.apply(row, col, player)
        self.history.append(MoveRecord(player=int(player), row=row, col=col, duration=duration))
        logger.info("%s played (%d, %d)", player.name, row, col)

        # Check both players after every move, as the board may be filled by either
        if self.board.check_connected(Player.PLAYER_A) or self.board.check_connected(Player.PLAYER_B):
            self.winner = self.board.winner
            self.status = GameStatus.COMPLETED
            logger.info("Game over, winner: %s", self.winner.name)
            self.events.notify_complete(self, self.winner)
        else:
            self.current_turn = other_player(player)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            rows=self.board.rows,
            cols=self.board.cols,
            status=self.status,
            winner=int(self.winner) if self.winner else None,
            current_turn=int(self.current_turn),
            board=self.board.to_matrix(),
            rendered=self.board.render(),
            history=list(self.history),
            player_1_type=self.seats[Player.PLAYER_A],
            player_2_type=self.seats[Player.PLAYER_B],
        )
