# hexgame/core/search_tree.py
from typing import Dict, List, Optional, Tuple

from .constants import Player


class SearchNode:
    """
    One hypothetical move below the current position.
    Nodes own their children outright; the tree lives for a single search.
    """

    def __init__(self, move: Optional[Tuple[int, int]] = None):
        self.move = move
        self.children: List["SearchNode"] = []
        self.wins: Dict[Player, int] = {Player.PLAYER_A: 0, Player.PLAYER_B: 0}

    def add_child(self, move: Tuple[int, int]) -> "SearchNode":
        child = SearchNode(move)
        self.children.append(child)
        return child

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def trials(self) -> int:
        return self.wins[Player.PLAYER_A] + self.wins[Player.PLAYER_B]

    def record(self, winner: Player):
        self.wins[winner] += 1

    def win_probability(self, player: Player) -> float:
        if self.trials == 0:
            return 0.0
        return self.wins[player] / self.trials

    def size(self) -> int:
        """Number of nodes in this subtree, including this one."""
        return 1 + sum(child.size() for child in self.children)

    def __repr__(self) -> str:
        return f"SearchNode(move={self.move}, children={len(self.children)}, wins={dict(self.wins)})"
