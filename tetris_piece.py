"""Piece model: shapes, rotation states, bounding offsets"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Cell = Tuple[int, int]  # (col, row)


class PieceKind(str, Enum):
    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


SHAPES: Dict[str, List[List[int]]] = {
    "I": [[1,1,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
    "O": [[1,1],[1,1]],
    "S": [[0,1,1],[1,1,0]],
    "T": [[0,1,0],[1,1,1]],
    "Z": [[1,1,0],[0,1,1]],
}

def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]

def matrix_cells(m) -> Tuple[Cell, ...]:
    return tuple((c, r) for r, row in enumerate(m) for c, v in enumerate(row) if v)

def _rotation_states(shape: List[List[int]]) -> List[Tuple[Cell, ...]]:
    """Distinct clockwise rotations of ``shape``, spawn orientation first."""
    states: List[Tuple[Cell, ...]] = []
    m = shape
    for _ in range(4):
        cells = matrix_cells(m)
        if cells not in states:
            states.append(cells)
        m = rotate_cw(m)
    return states

ROTATIONS: Dict[str, List[Tuple[Cell, ...]]] = {t: _rotation_states(s) for t, s in SHAPES.items()}


@dataclass(frozen=True)
class Piece:
    t: str
    rotation: int = 0

    def __post_init__(self):
        if self.t not in ROTATIONS:
            raise ValueError(f"unknown piece kind {self.t!r}")
        if not 0 <= self.rotation < len(ROTATIONS[self.t]):
            raise ValueError(f"piece {self.t} has no rotation state {self.rotation}")

    @staticmethod
    def spawn(t: str) -> "Piece":
        return Piece(PieceKind(t).value, 0)

    def rotate(self) -> "Piece":
        """Next clockwise rotation state; pure."""
        return Piece(self.t, (self.rotation + 1) % len(ROTATIONS[self.t]))

    def cells(self) -> Tuple[Cell, ...]:
        return ROTATIONS[self.t][self.rotation]

    def leftmost(self) -> int:
        return min(c for c, _ in self.cells())

    def rightmost(self) -> int:
        return max(c for c, _ in self.cells())

    def bottom(self) -> int:
        return max(r for _, r in self.cells())

    def width(self) -> int:
        return self.rightmost() - self.leftmost() + 1

    def height(self) -> int:
        return self.bottom() - min(r for _, r in self.cells()) + 1

    def placed(self, anchor: Cell) -> Tuple[Cell, ...]:
        """Absolute board cells with the piece origin at ``anchor``."""
        ax, ay = anchor
        return tuple((ax + c, ay + r) for c, r in self.cells())
