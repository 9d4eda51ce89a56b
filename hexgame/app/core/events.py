import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

class GameEvents:
    def __init__(self):
        self._on_complete_listeners: List[Callable] = []

    def subscribe_complete(self, callback: Callable):
        self._on_complete_listeners.append(callback)

    def notify_complete(self, game, winner):
        # A failing listener must not stop the others or the game itself
        for listener in self._on_complete_listeners:
            try:
                listener(game, winner)
            except Exception:
                logger.exception("Game completion listener %r failed", listener)

game_events = GameEvents()
