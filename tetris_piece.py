
"""Shape library and piece model"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

Mask = List[List[int]]
Cell = Tuple[int, int]

# Kind ids double as board cell values (0 is empty)
I, O, T, S, Z, J, L = range(1, 8)

NAMES: Dict[int, str] = {I: "I", O: "O", T: "T", S: "S", Z: "Z", J: "J", L: "L"}

SHAPES: Dict[int, Mask] = {
    I: [[1,1,1,1]],
    O: [[1,1],[1,1]],
    T: [[0,1,0],[1,1,1]],
    S: [[0,1,1],[1,1,0]],
    Z: [[1,1,0],[0,1,1]],
    J: [[1,0,0],[1,1,1]],
    L: [[0,0,1],[1,1,1]],
}

COLORS: Dict[int, Tuple[int,int,int]] = {
    I: (102,224,255),
    O: (255,224,102),
    T: (200,119,255),
    S: (94,224,142),
    Z: (255,102,119),
    J: (106,119,255),
    L: (255,158,94),
}


@dataclass(frozen=True)
class PieceKind:
    id: int
    name: str
    mask: Tuple[Tuple[int, ...], ...]
    color: Tuple[int,int,int]


KINDS: Dict[int, PieceKind] = {
    k: PieceKind(k, NAMES[k], tuple(tuple(r) for r in SHAPES[k]), COLORS[k])
    for k in SHAPES
}


def kind_of(kind_id: int) -> PieceKind:
    return KINDS[kind_id]


def rotate_cw(m: Mask) -> Mask:
    """new[x][y] = old[h-1-y][x]; rows and columns swap for non-square masks."""
    return [list(r) for r in zip(*m[::-1])]


class Piece:
    """A live piece: kind, board origin and its current (possibly rotated) mask."""

    def __init__(self, kind: PieceKind, x: int = 0, y: int = 0):
        self.kind = kind
        self.x = x
        self.y = y
        self.shape: Mask = [list(r) for r in kind.mask]

    @classmethod
    def of(cls, kind_id: int, x: int = 0, y: int = 0) -> "Piece":
        return cls(kind_of(kind_id), x, y)

    @property
    def id(self) -> int:
        return self.kind.id

    @property
    def color(self) -> Tuple[int,int,int]:
        return self.kind.color

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def translate(self, dx: int, dy: int):
        self.x += dx
        self.y += dy

    def rotate(self):
        self.shape = rotate_cw(self.shape)

    def cells(self) -> Iterator[Cell]:
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r

    def clone(self) -> "Piece":
        p = Piece(self.kind, self.x, self.y)
        p.shape = [r[:] for r in self.shape]
        return p

    def __repr__(self):
        return f"Piece({self.kind.name}, x={self.x}, y={self.y}, shape={self.shape})"
