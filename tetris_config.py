
CONFIG = {
    # Board
    "COLS": 10,
    "ROWS": 20,

    # Speed (ms per gravity step): max(MIN, BASE - (level-1)*STEP)
    "SPEED_BASE_MS": 500,
    "SPEED_STEP_MS": 40,
    "SPEED_MIN_MS": 100,

    # Scoring & progression
    "LINES_PER_LEVEL": 10,
    "SCORE_TABLE": {1: 100, 2: 300, 3: 500, 4: 800},
    "PERFECT_CLEAR_BONUS": 0,
    "LINE_CLEAR_DELAY_MS": 500,

    # Piece source: "uniform" or "nes"
    "RANDOMIZER": "uniform",
    "SEED": None,
    "NES_FIRST_PIECE_AVOID_SZO": True,

    # Driver feel
    "CELL_SIZE": 32,
    "DAS_MS": 170,
    "ARR_MS": 30,
    "SOFT_DROP_MS": 40,

    "LOG_LEVEL": "WARNING",
}
