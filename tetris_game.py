"""
Game state machine.

The whole game is an immutable phase value threaded through ``update``::

    phase, commands = new_game()
    phase, commands = update(phase, PiecesReady(current, nxt))
    phase, commands = update(phase, Tick())

Phases:

  • Uninitialized: waiting for the two initial pieces
  • Running: carries a GameState
  • GameOver: terminal, carries the final score
  • Fault: terminal, carries a diagnostic for an event the phase cannot accept

Nothing here blocks. Random pieces and the tick clock are requested through
commands; the driver fulfils them and feeds the results back as events.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Tuple, Type, Union

from tetris_board import Board, EMPTY, collide, fixate, sweep
from tetris_config import CONFIG, COLS
from tetris_events import (
    Command, DropStart, DropStop, Event, MoveLeft, MoveRight, NextPieceReady,
    NoOp, PiecesReady, RearmClock, RequestInitialPieces, RequestNextPiece,
    Rotate, Tick,
)
from tetris_piece import Cell, Piece

log = logging.getLogger(__name__)

ORIGIN: Cell = (0, 0)
POINTS_PER_ROW = 100


class GameError(Exception):
    """Base class for game errors."""


class ProtocolViolation(GameError):
    """An event arrived that the current phase cannot accept."""


def tick_interval_ms(fast_drop: bool) -> float:
    base = CONFIG["TICK_MS"]
    return base / CONFIG["FAST_DROP_DIVISOR"] if fast_drop else base


@dataclass(frozen=True)
class GameState:
    score: int
    piece: Piece
    anchor: Cell
    next_piece: Optional[Piece]   # None while a draw request is in flight
    board: Board
    fast_drop: bool = False

    def piece_cells(self) -> Tuple[Cell, ...]:
        return self.piece.placed(self.anchor)


@dataclass(frozen=True)
class Uninitialized:
    pass

@dataclass(frozen=True)
class Running:
    state: GameState

@dataclass(frozen=True)
class GameOver:
    score: int

@dataclass(frozen=True)
class Fault:
    message: str

Phase = Union[Uninitialized, Running, GameOver, Fault]
Step = Tuple[Phase, List[Command]]


def new_game() -> Step:
    return Uninitialized(), [RequestInitialPieces()]


def start(current: Piece, nxt: Piece) -> GameState:
    return GameState(score=0, piece=current, anchor=ORIGIN, next_piece=nxt, board=EMPTY)


# -------------------------------------------------------------
# Running transitions (GameState -> GameState | GameOver)
# -------------------------------------------------------------

def move_left(s: GameState) -> GameState:
    ax, ay = s.anchor
    if ax + s.piece.leftmost() - 1 < 0:
        return s
    if collide(s.board, s.piece, (ax - 1, ay)):
        return s
    return replace(s, anchor=(ax - 1, ay))

def move_right(s: GameState) -> GameState:
    ax, ay = s.anchor
    if ax + s.piece.rightmost() + 1 >= COLS:
        return s
    if collide(s.board, s.piece, (ax + 1, ay)):
        return s
    return replace(s, anchor=(ax + 1, ay))

def rotate(s: GameState) -> GameState:
    """Rotate clockwise, pulling the anchor left if the right edge would overhang."""
    turned = s.piece.rotate()
    ax, ay = s.anchor
    overhang = ax + turned.rightmost() - (COLS - 1)
    if overhang > 0:
        ax -= overhang
    if CONFIG["ROTATION_COLLISION_CHECK"]:
        if ax + turned.leftmost() < 0 or collide(s.board, turned, (ax, ay)):
            return s
    return replace(s, piece=turned, anchor=(ax, ay))

def set_fast_drop(s: GameState, on: bool) -> Tuple[GameState, List[Command]]:
    if s.fast_drop == on:
        return s, []
    interval = tick_interval_ms(on)
    log.debug("fast drop %s, tick every %s ms", "on" if on else "off", interval)
    return replace(s, fast_drop=on), [RearmClock(interval)]

def clear_rows(s: GameState) -> GameState:
    board, cleared = sweep(s.board)
    if not cleared:
        return s
    score = s.score + POINTS_PER_ROW * cleared
    log.info("cleared %d row(s), score %d", cleared, score)
    return replace(s, board=board, score=score)

def advance(s: GameState) -> GameState:
    if s.next_piece is None:
        raise ProtocolViolation("cannot spawn: next piece has not been drawn yet")
    log.debug("spawning %s", s.next_piece.t)
    return replace(s, piece=s.next_piece, anchor=ORIGIN, next_piece=None)

def tick(s: GameState) -> Tuple[Union[GameState, GameOver], List[Command]]:
    ax, ay = s.anchor
    if not collide(s.board, s.piece, (ax, ay + 1)):
        return replace(s, anchor=(ax, ay + 1)), []
    s = replace(s, board=fixate(s.board, s.piece, s.anchor))
    s = advance(clear_rows(s))
    if collide(s.board, s.piece, s.anchor):
        log.info("game over, final score %d", s.score)
        return GameOver(s.score), []
    return s, [RequestNextPiece()]

def receive_next(s: GameState, piece: Piece) -> GameState:
    if s.next_piece is not None:
        raise ProtocolViolation(f"next piece {piece.t} arrived but {s.next_piece.t} is already queued")
    return replace(s, next_piece=piece)


# -------------------------------------------------------------
# Dispatch
# -------------------------------------------------------------

def _on_uninitialized(phase: Uninitialized, event: Event) -> Step:
    if isinstance(event, PiecesReady):
        log.info("game started with %s, next %s", event.current.t, event.next.t)
        return Running(start(event.current, event.next)), []
    if isinstance(event, NextPieceReady):
        raise ProtocolViolation("next piece arrived before the game was initialized")
    return phase, []

_RUNNING: Dict[Type, Callable[[GameState, Event], Tuple[Union[GameState, GameOver], List[Command]]]] = {
    Tick: lambda s, e: tick(s),
    MoveLeft: lambda s, e: (move_left(s), []),
    MoveRight: lambda s, e: (move_right(s), []),
    Rotate: lambda s, e: (rotate(s), []),
    DropStart: lambda s, e: set_fast_drop(s, True),
    DropStop: lambda s, e: set_fast_drop(s, False),
    NoOp: lambda s, e: (s, []),
    NextPieceReady: lambda s, e: (receive_next(s, e.piece), []),
}

def _on_running(phase: Running, event: Event) -> Step:
    handler = _RUNNING.get(type(event))
    if handler is None:
        raise ProtocolViolation(f"{type(event).__name__} is not valid while the game is running")
    result, commands = handler(phase.state, event)
    if isinstance(result, GameOver):
        return result, commands
    return Running(result), commands


def update(phase: Phase, event: Event) -> Step:
    """Process one event; return the next phase and the commands to execute."""
    try:
        if isinstance(phase, Uninitialized):
            return _on_uninitialized(phase, event)
        if isinstance(phase, Running):
            return _on_running(phase, event)
    except ProtocolViolation as exc:
        log.error("fault in %s: %s", type(phase).__name__, exc)
        return Fault(str(exc)), []
    return phase, []
