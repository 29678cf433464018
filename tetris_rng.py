"""Uniform random piece source"""
import random
from typing import Optional, Tuple
from tetris_piece import Piece, PieceKind

class PieceSource:
    PIECES = [k.value for k in PieceKind]
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def draw(self) -> Piece:
        return Piece.spawn(self.rng.choice(self.PIECES))

    def draw_pair(self) -> Tuple[Piece, Piece]:
        return self.draw(), self.draw()
