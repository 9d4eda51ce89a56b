# hexgame/core/predictor.py
import logging
import random
from typing import Optional, Tuple

from .board import Board
from .constants import DEFAULT_DEPTH, DEFAULT_TRIALS, PLACEHOLDER, Player, other_player
from .errors import NoLegalMoves
from .search_tree import SearchNode

logger = logging.getLogger(__name__)


class MovePredictor:
    def __init__(self, depth: int = DEFAULT_DEPTH, trials: int = DEFAULT_TRIALS,
                 rng: Optional[random.Random] = None):
        if depth < 1:
            raise ValueError(f"depth must be >= 1, got {depth}")
        if trials < 1:
            raise ValueError(f"trials must be >= 1, got {trials}")
        self.depth = depth
        self.trials = trials
        self.rng = rng if rng is not None else random.Random()

    def compute_next_move(self, board: Board, player: Player) -> Tuple[int, int]:
        return self.analyze(board, player)["best_move"]

    def analyze(self, board: Board, player: Player) -> dict:
        """
        Root Entry Point.
        Builds the lookahead tree, scores its leaves with random playouts and
        resolves it with minimax. The board is left exactly as it was found.
        """
        empty = board.empty_cells()
        if not empty:
            raise NoLegalMoves(f"No empty cells on {board.rows}x{board.cols} board")

        # 1. Narrow the search when fewer cells remain than plies requested
        depth = min(self.depth, len(empty))

        # 2. Enumerate every move sequence of length `depth`
        root = SearchNode()
        self._expand(board, root, depth)

        # 3. Replay each sequence with real players and roll out the leaves
        self._evaluate(board, root, player)

        # 4. Minimax: maximize at the root, alternate below.
        # Strict '>' keeps the first root move (row-major) on ties.
        scores = {}
        best_value = -1.0
        best_move = None
        for child in root.children:
            value = self._minimax(child, False, player)
            scores[child.move] = value
            if value > best_value:
                best_value = value
                best_move = child.move

        nodes = root.size()
        rollouts = sum(leaf.trials for leaf in _leaves(root))
        logger.debug(
            "Predictor for %s: move=%s value=%.3f depth=%d nodes=%d rollouts=%d",
            player.name, best_move, best_value, depth, nodes, rollouts,
        )

        return {
            "best_move": best_move,
            "best_value": best_value,
            "scores": scores,
            "depth": depth,
            "nodes_explored": nodes,
            "rollouts": rollouts,
        }

    def _expand(self, board: Board, node: SearchNode, remaining: int):
        if remaining <= 0:
            return
        for r, c in board.empty_cells():
            child = node.add_child((r, c))
            with board.placed(r, c, PLACEHOLDER):
                self._expand(board, child, remaining - 1)

    def _evaluate(self, board: Board, node: SearchNode, to_move: Player):
        if node.is_leaf:
            self._rollout(board, node, to_move)
            return
        for child in node.children:
            r, c = child.move
            with board.placed(r, c, to_move):
                self._evaluate(board, child, other_player(to_move))

    def _rollout(self, board: Board, node: SearchNode, to_move: Player):
        """
        Fills every remaining cell in random order, alternating from `to_move`.
        A full Hex board has exactly one connected player, so testing
        PLAYER_A alone decides each trial.
        """
        moves = board.empty_cells()
        for _ in range(self.trials):
            self.rng.shuffle(moves)
            with board.filled(moves, to_move):
                if board.is_connected(Player.PLAYER_A):
                    node.record(Player.PLAYER_A)
                else:
                    node.record(Player.PLAYER_B)

    def _minimax(self, node: SearchNode, maximizing: bool, player: Player) -> float:
        if node.is_leaf:
            return node.win_probability(player)
        values = [self._minimax(child, not maximizing, player) for child in node.children]
        return max(values) if maximizing else min(values)


def _leaves(node: SearchNode):
    if node.is_leaf:
        yield node
        return
    for child in node.children:
        yield from _leaves(child)


def compute_next_move(board: Board, player: Player, depth: int = DEFAULT_DEPTH,
                      trials: int = DEFAULT_TRIALS,
                      rng: Optional[random.Random] = None) -> Tuple[int, int]:
    return MovePredictor(depth, trials, rng).compute_next_move(board, player)
