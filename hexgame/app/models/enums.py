from enum import StrEnum

class GameStatus(StrEnum):
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

class PlayerType(StrEnum):
    HUMAN = "human"
    ROBOT = "robot"
