"""Board helpers: collide, fixate, sweep"""
from collections import Counter
from typing import FrozenSet, Iterable, List, Tuple
from tetris_config import COLS, ROWS
from tetris_piece import Cell, Piece

Board = FrozenSet[Cell]

EMPTY: Board = frozenset()


def make_board(cells: Iterable[Cell] = ()) -> Board:
    board = frozenset(cells)
    for c, r in board:
        if not (0 <= c < COLS and 0 <= r < ROWS):
            raise ValueError(f"cell {(c, r)} lies outside the {COLS}x{ROWS} board")
    return board

def collide(board: Board, piece: Piece, anchor: Cell) -> bool:
    """Floor and fixated-cell overlap only; column bounds are kept by the moves."""
    for c, r in piece.placed(anchor):
        if r >= ROWS: return True
        if (c, r) in board: return True
    return False

def fixate(board: Board, piece: Piece, anchor: Cell) -> Board:
    return board | frozenset(piece.placed(anchor))

def complete_rows(board: Board) -> List[int]:
    counts = Counter(r for _, r in board)
    return sorted(r for r, n in counts.items() if n == COLS)

def sweep(board: Board) -> Tuple[Board, int]:
    """Remove complete rows and drop the rows above; return (board, cleared)."""
    full = complete_rows(board)
    if not full:
        return board, 0
    kept = set()
    for c, r in board:
        if r in full: continue
        # shift by the cleared rows below this cell, not by len(full) for
        # everything above max(full); differs only when the cleared rows have a gap
        below = sum(1 for f in full if f > r)
        kept.add((c, r + below))
    return frozenset(kept), len(full)
