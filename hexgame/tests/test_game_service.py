import random
import unittest

from hexgame.app.core.config import PredictorConfig
from hexgame.app.core.events import GameEvents
from hexgame.app.models.enums import GameStatus, PlayerType
from hexgame.app.schemas.game_schema import GameCreate
from hexgame.app.services.game_runner import play_robot_match
from hexgame.app.services.game_service import HexGame
from hexgame.core.board import Board
from hexgame.core.constants import Player
from hexgame.core.errors import IllegalMove, InvalidDimensions
from hexgame.core.predictor import MovePredictor

A = Player.PLAYER_A
B = Player.PLAYER_B


class TestHexGame(unittest.TestCase):
    def setUp(self):
        self.events = GameEvents()
        self.completed = []
        self.events.subscribe_complete(lambda game, winner: self.completed.append(winner))

    def _human_game(self, rows=2, cols=2):
        return HexGame(rows, cols, PlayerType.HUMAN, PlayerType.HUMAN, events=self.events)

    def test_human_move_switches_turn_and_records_history(self):
        game = self._human_game(3, 3)
        snapshot = game.play_human_move(1, 1)

        self.assertEqual(game.current_turn, B)
        self.assertEqual(snapshot.board[1][1], int(A))
        self.assertEqual(len(snapshot.history), 1)
        self.assertEqual((snapshot.history[0].row, snapshot.history[0].col), (1, 1))
        self.assertEqual(snapshot.status, GameStatus.IN_PROGRESS)
        self.assertIsNone(snapshot.winner)

    def test_illegal_human_moves_are_rejected(self):
        game = self._human_game(3, 3)
        game.play_human_move(0, 0)
        for row, col in [(0, 0), (-1, 2), (3, 0)]:
            with self.assertRaises(IllegalMove):
                game.play_human_move(row, col)
        # Rejected moves change nothing
        self.assertEqual(game.current_turn, B)
        self.assertEqual(len(game.history), 1)

    def test_win_completes_game_and_notifies(self):
        game = self._human_game()
        game.play_human_move(0, 0)  # A
        game.play_human_move(1, 0)  # B
        snapshot = game.play_human_move(0, 1)  # A connects column 0 to column 1

        self.assertEqual(snapshot.status, GameStatus.COMPLETED)
        self.assertEqual(snapshot.winner, int(A))
        self.assertEqual(game.winner, A)
        self.assertEqual(self.completed, [A])

        with self.assertRaises(IllegalMove):
            game.play_human_move(1, 1)

    def test_failing_listener_is_logged_not_raised(self):
        def broken(game, winner):
            raise RuntimeError("listener down")

        self.events.subscribe_complete(broken)
        game = self._human_game()
        game.play_human_move(0, 0)
        game.play_human_move(1, 0)
        with self.assertLogs("hexgame.app.core.events", level="ERROR"):
            game.play_human_move(0, 1)
        self.assertTrue(game.is_over)
        self.assertEqual(self.completed, [A])

    def test_robot_turn_plays_legal_move(self):
        game = HexGame(3, 3, PlayerType.HUMAN, PlayerType.ROBOT,
                       predictor=MovePredictor(depth=2, trials=5, rng=random.Random(4)),
                       events=self.events)
        with self.assertRaises(IllegalMove):
            game.step_robot_turn()

        game.play_human_move(1, 1)
        self.assertFalse(game.is_human_turn())
        with self.assertRaises(IllegalMove):
            game.play_human_move(0, 0)

        row, col = game.step_robot_turn()
        self.assertNotEqual((row, col), (1, 1))
        self.assertEqual(game.board.owner(row, col), B)
        self.assertEqual(game.current_turn, A)
        self.assertEqual(len(game.history), 2)

    def test_from_request_uses_preset(self):
        request = GameCreate(rows=4, cols=5, player_1=PlayerType.ROBOT, preset="easy")
        game = HexGame.from_request(request, events=self.events)
        self.assertEqual((game.board.rows, game.board.cols), (4, 5))
        self.assertEqual(game.seats[A], PlayerType.ROBOT)
        self.assertEqual(game.seats[B], PlayerType.ROBOT)

        with self.assertRaises(InvalidDimensions):
            HexGame.from_request(GameCreate(rows=1, cols=5))

    def test_snapshot_reports_seats(self):
        game = HexGame(2, 3, PlayerType.ROBOT, PlayerType.HUMAN, events=self.events)
        snapshot = game.snapshot()
        self.assertEqual(snapshot.player_1_type, PlayerType.ROBOT)
        self.assertEqual(snapshot.player_2_type, PlayerType.HUMAN)
        self.assertEqual((snapshot.rows, snapshot.cols), (2, 3))
        self.assertEqual(snapshot.rendered, game.board.render())


class TestRobotMatch(unittest.TestCase):
    def test_robot_match_always_has_a_winner(self):
        events = GameEvents()
        winners = []
        events.subscribe_complete(lambda game, winner: winners.append(winner))

        for seed in range(3):
            config = PredictorConfig(depth=1, trials=5, seed=seed)
            snapshot = play_robot_match(3, 3, config, events=events)

            self.assertEqual(snapshot.status, GameStatus.COMPLETED)
            self.assertIn(snapshot.winner, (int(A), int(B)))
            self.assertLessEqual(len(snapshot.history), 9)

            cells = [(move.row, move.col) for move in snapshot.history]
            self.assertEqual(len(cells), len(set(cells)))
            # Players alternate, A first
            self.assertEqual([move.player for move in snapshot.history],
                             [1 + i % 2 for i in range(len(cells))])
            self.assertTrue(Board.from_matrix(snapshot.board).is_connected(Player(snapshot.winner)))

        self.assertEqual(len(winners), 3)

    def test_robot_match_is_reproducible(self):
        config = PredictorConfig(depth=2, trials=3, seed=21)
        first = play_robot_match(3, 3, config, events=GameEvents())
        second = play_robot_match(3, 3, config, events=GameEvents())
        self.assertEqual(first.board, second.board)
        self.assertEqual(first.winner, second.winner)


if __name__ == '__main__':
    unittest.main()
