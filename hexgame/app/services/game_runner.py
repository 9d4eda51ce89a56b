"""
Game Runner - plays robot against robot until one side connects.

Hex cannot end in a draw, so the loop always terminates within rows * cols moves.
"""

import logging
from typing import Optional

from hexgame.app.core.config import PredictorConfig, registry
from hexgame.app.core.events import GameEvents
from hexgame.app.models.enums import PlayerType
from hexgame.app.schemas.game_schema import GameSnapshot
from hexgame.app.services.game_service import HexGame

logger = logging.getLogger(__name__)


def play_robot_match(rows: int, cols: int, config: Optional[PredictorConfig] = None,
                     events: Optional[GameEvents] = None) -> GameSnapshot:
    config = config or registry.resolve("default")
    game = HexGame(
        rows, cols,
        player_1=PlayerType.ROBOT,
        player_2=PlayerType.ROBOT,
        predictor=config.build(),
        events=events,
    )
    logger.info("Starting robot match on %dx%d board (depth=%d, trials=%d)",
                rows, cols, config.depth, config.trials)

    while not game.is_over:
        game.step_robot_turn()

    return game.snapshot()
