
"""Session statistics collected from engine notifications"""
import logging
from dataclasses import asdict, dataclass

logger = logging.getLogger("tetris.stats")


@dataclass
class GameStatistics:
    games_played: int = 0
    lines_cleared: int = 0
    tetrises: int = 0
    perfect_clears: int = 0
    highest_level: int = 1
    best_score: int = 0
    play_time_ms: float = 0.0

    def attach(self, game):
        """Subscribe to a Game's notifications."""
        self._game = game
        ev = game.events
        # counted when the clear resolves: a reset mid-window scores nothing
        ev.clear_resolved.connect(self.record_clear)
        ev.perfect_clear.connect(self.record_perfect_clear)
        ev.level_up.connect(self.update_highest_level)
        ev.game_over.connect(self._on_game_over)
        return self

    def record_clear(self, count: int):
        self.lines_cleared += count
        if count == 4:
            self.tetrises += 1

    def record_perfect_clear(self):
        self.perfect_clears += 1

    def update_highest_level(self, level: int):
        self.highest_level = max(self.highest_level, level)

    def record_game(self, score: int):
        self.games_played += 1
        self.best_score = max(self.best_score, score)

    def _on_game_over(self):
        self.record_game(self._game.score)
        logger.info("games=%d best=%d", self.games_played, self.best_score)

    def add_play_time(self, ms: float):
        self.play_time_ms += ms

    def play_time_text(self) -> str:
        s = int(self.play_time_ms // 1000)
        return f"{s // 3600:02d}:{s // 60 % 60:02d}:{s % 60:02d}"

    def reset(self):
        self.games_played = self.lines_cleared = self.tetrises = self.perfect_clears = 0
        self.highest_level = 1
        self.best_score = 0
        self.play_time_ms = 0.0

    def as_dict(self) -> dict:
        return asdict(self)
