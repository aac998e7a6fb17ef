import unittest

from tetris import Game
from tetris_piece import I, O, Z
from tetris_stats import GameStatistics


class FixedRandom:
    def __init__(self, kind):
        self.kind = kind

    def next_id(self):
        return self.kind


class TestGameStatistics(unittest.TestCase):
    def test_given_tetris_when_resolved_then_counts_lines_tetris_and_perfect_clear(self):
        game = Game(FixedRandom(I))
        stats = GameStatistics().attach(game)
        for y in range(16, 20):
            for x in range(9):
                game.board.grid[y][x] = O
        game.rotate()
        while game.move_right():
            pass
        game.drop()
        game.finish_line_clear()
        self.assertEqual(stats.tetrises, 1)
        self.assertEqual(stats.lines_cleared, 4)
        self.assertEqual(stats.perfect_clears, 1)

    def test_given_reset_during_clear_window_when_never_resolved_then_nothing_counted(self):
        game = Game(FixedRandom(I))
        stats = GameStatistics().attach(game)
        for y in range(16, 20):
            for x in range(9):
                game.board.grid[y][x] = O
        game.rotate()
        while game.move_right():
            pass
        game.drop()
        self.assertTrue(game.animating)
        game.reset()
        self.assertEqual(stats.lines_cleared, 0)
        self.assertEqual(stats.tetrises, 0)
        self.assertEqual(stats.perfect_clears, 0)

    def test_given_game_over_when_recorded_then_games_and_best_score(self):
        game = Game(FixedRandom(I))
        stats = GameStatistics().attach(game)
        game.score = 1234
        for x in range(3, 7):
            game.board.grid[0][x] = Z
        game.drop()
        self.assertTrue(game.game_over)
        self.assertEqual(stats.games_played, 1)
        self.assertEqual(stats.best_score, 1234)

    def test_given_level_ups_and_time_when_reset_then_zeroed(self):
        stats = GameStatistics()
        stats.update_highest_level(4)
        stats.update_highest_level(2)
        stats.add_play_time(3_723_000)
        self.assertEqual(stats.highest_level, 4)
        self.assertEqual(stats.play_time_text(), "01:02:03")
        stats.reset()
        self.assertEqual(stats.as_dict(), GameStatistics().as_dict())


if __name__ == "__main__":
    unittest.main()
