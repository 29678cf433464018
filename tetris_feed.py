"""Read-only render feed: abstract board coordinates for each observation"""
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple
from tetris_config import CONFIG, COLS, ROWS
from tetris_game import Fault, GameOver, Phase, Running
from tetris_piece import Cell, Piece


@dataclass(frozen=True)
class RenderFeed:
    outline: Tuple[int, int]          # (cols, rows) of the board
    phase: str
    score: int = 0
    current_kind: str = ""
    current: Tuple[Cell, ...] = ()
    fixated: FrozenSet[Cell] = frozenset()
    next_kind: str = ""
    next_cells: Tuple[Cell, ...] = ()
    message: str = ""


def preview_cells(piece: Optional[Piece]) -> Tuple[Cell, ...]:
    if piece is None:
        return ()
    return piece.placed(CONFIG["PREVIEW_ORIGIN"])


def observe(phase: Phase) -> RenderFeed:
    outline = (COLS, ROWS)
    name = type(phase).__name__
    if isinstance(phase, Running):
        s = phase.state
        return RenderFeed(
            outline=outline, phase=name, score=s.score,
            current_kind=s.piece.t, current=s.piece_cells(), fixated=s.board,
            next_kind=s.next_piece.t if s.next_piece else "",
            next_cells=preview_cells(s.next_piece),
        )
    if isinstance(phase, GameOver):
        return RenderFeed(outline=outline, phase=name, score=phase.score,
                          message=f"GAME OVER  score {phase.score}")
    if isinstance(phase, Fault):
        return RenderFeed(outline=outline, phase=name, message=phase.message)
    return RenderFeed(outline=outline, phase=name)
