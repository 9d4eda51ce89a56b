from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from hexgame.app.models.enums import GameStatus, PlayerType

class MoveRecord(BaseModel):
    model_config = ConfigDict(extra='ignore')

    player: int
    row: int
    col: int
    duration: Optional[float] = 0.0

class GameCreate(BaseModel):
    # Dimensions are validated by the Board itself (InvalidDimensions)
    rows: int = 7
    cols: int = 7
    player_1: PlayerType = PlayerType.HUMAN
    player_2: PlayerType = PlayerType.ROBOT
    preset: str = "default"

class GameSnapshot(BaseModel):
    rows: int
    cols: int
    status: GameStatus
    winner: Optional[int] = None
    current_turn: int
    board: List[List[int]]
    rendered: str
    history: List[MoveRecord]
    player_1_type: PlayerType
    player_2_type: PlayerType
