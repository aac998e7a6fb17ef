
"""Board grid: occupancy, collide, commit, full rows, compaction"""
from typing import Iterable, List, Tuple
from tetris_config import CONFIG
from tetris_piece import Piece

EMPTY = 0


class Board:
    """Grid of kind ids indexed [y][x]; row 0 is the top."""

    def __init__(self, cols: int = None, rows: int = None):
        self.cols = cols if cols is not None else CONFIG["COLS"]
        self.rows = rows if rows is not None else CONFIG["ROWS"]
        self.grid: List[List[int]] = [[EMPTY] * self.cols for _ in range(self.rows)]

    def __getitem__(self, xy: Tuple[int, int]) -> int:
        x, y = xy
        return self.grid[y][x]

    def __setitem__(self, xy: Tuple[int, int], v: int):
        x, y = xy
        self.grid[y][x] = v

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def is_occupied(self, x: int, y: int) -> bool:
        return self.grid[y][x] != EMPTY

    def collides(self, piece: Piece) -> bool:
        """True if any cell is outside the walls/floor or on a filled cell."""
        for bx, by in piece.cells():
            if bx < 0 or bx >= self.cols or by >= self.rows:
                return True
            if by >= 0 and self.grid[by][bx]:
                return True
        return False

    def commit(self, piece: Piece):
        """Write the piece id into its cells; cells above the top are dropped."""
        for bx, by in piece.cells():
            if self.in_bounds(bx, by):
                self.grid[by][bx] = piece.id

    def full_rows(self) -> List[int]:
        return [y for y in range(self.rows - 1, -1, -1) if all(self.grid[y])]

    def clear_and_compact(self, rows: Iterable[int]):
        # Topmost first: deleting row y only shifts the rows above it
        for y in sorted(set(rows)):
            del self.grid[y]
            self.grid.insert(0, [EMPTY] * self.cols)

    def is_clear(self) -> bool:
        return not any(any(r) for r in self.grid)

    def filled(self) -> int:
        return sum(1 for r in self.grid for v in r if v)

    def rows_snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(r) for r in self.grid)

    def __repr__(self):
        return "\n".join("".join("." if not v else str(v) for v in r) for r in self.grid)
