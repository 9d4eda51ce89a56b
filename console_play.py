import logging
import os

from hexgame.app.models.enums import PlayerType
from hexgame.app.schemas.game_schema import GameCreate
from hexgame.app.services.game_service import HexGame
from hexgame.core.constants import Player
from hexgame.core.errors import IllegalMove, InvalidDimensions

logging.basicConfig(level=os.getenv("HEX_LOG_LEVEL", "WARNING"))


def ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt))
        except ValueError:
            print("Please enter a valid number.")


def main():
    print("=======================================")
    print("   HEX: Human vs Robot")
    print("=======================================")

    rows = ask_int("How many rows would you like? It must be greater than one. ")
    cols = ask_int("How many columns would you like? It must be greater than one. ")
    seat = ask_int("Would you like to be player 1 or 2? ")
    if seat not in (1, 2):
        print("Player must be 1 or 2.")
        return

    human = Player(seat)
    request = GameCreate(
        rows=rows,
        cols=cols,
        player_1=PlayerType.HUMAN if human == Player.PLAYER_A else PlayerType.ROBOT,
        player_2=PlayerType.HUMAN if human == Player.PLAYER_B else PlayerType.ROBOT,
        preset=os.getenv("HEX_PRESET", "default"),
    )
    try:
        game = HexGame.from_request(request)
    except InvalidDimensions as e:
        print(e)
        return
    except KeyError as e:
        print(e.args[0])
        return

    if human == Player.PLAYER_A:
        print(f"\nYour objective is to connect a tile from column 0 to a tile from column {cols - 1}")
    else:
        print(f"\nYour objective is to connect a tile from row 0 to a tile from row {rows - 1}")

    while not game.is_over:

        # --- Human Turn ---
        if game.is_human_turn():
            print("\n" + game.board.render())
            row = ask_int("Please input the row in which you would like to place your next move: ")
            col = ask_int("Please input the column in which you would like to place your next move: ")
            try:
                game.play_human_move(row, col)
            except IllegalMove as e:
                print(e)
                continue
            print(f"You have played your move at [{row}, {col}]")

        # --- Robot Turn ---
        else:
            print("\nRobot is thinking of its next move...")
            row, col = game.step_robot_turn()
            print(f"Robot has played a move at [{row}, {col}]")

    # --- End Game ---
    print("\n" + game.board.render())
    winner_name = "Human" if game.winner == human else "Robot"
    print(f"\nGame Over! Winner is player {int(game.winner)} ({winner_name})")


if __name__ == "__main__":
    main()
