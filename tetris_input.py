
"""DAS/ARR controller feeding engine moves"""
from tetris_config import CONFIG

class ShiftRepeat:
    """
    Horizontal auto-shift for a held arrow key.

    The press moves one column at once; after DAS_MS of holding, one column
    per ARR_MS. ARR_MS == 0 slides to the wall in a single frame.
    update() returns signed column steps for this frame.
    """
    def __init__(self, instant_steps: int = None):
        self.instant_steps = instant_steps or CONFIG["COLS"]
        self.reset()

    def reset(self, direction: int = 0):
        self.direction = direction
        self.held_ms = 0.0
        self.repeat_ms = 0.0
        self.pressed = False

    def update(self, dt, left, right) -> int:
        direction = (1 if right else 0) - (1 if left else 0)
        if direction != self.direction:
            self.reset(direction)
        if not direction:
            return 0
        self.held_ms += dt
        if not self.pressed:
            self.pressed = True
            return direction
        if self.held_ms < CONFIG["DAS_MS"]:
            return 0
        arr = CONFIG["ARR_MS"]
        if arr <= 0:
            return direction * self.instant_steps
        self.repeat_ms += dt
        steps = int(self.repeat_ms // arr)
        self.repeat_ms -= steps * arr
        return direction * steps

def apply_shift(game, steps: int) -> int:
    """Move the current piece |steps| columns; returns the columns actually moved."""
    move = game.move_right if steps > 0 else game.move_left
    moved = 0
    for _ in range(abs(steps)):
        if not move():
            break
        moved += 1
    return moved
