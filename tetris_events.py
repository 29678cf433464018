"""Events consumed by the game state machine and commands it emits"""
from dataclasses import dataclass
from typing import Union
from tetris_piece import Piece


# ---------- events ----------
@dataclass(frozen=True)
class Tick: pass

@dataclass(frozen=True)
class MoveLeft: pass

@dataclass(frozen=True)
class MoveRight: pass

@dataclass(frozen=True)
class Rotate: pass

@dataclass(frozen=True)
class DropStart: pass

@dataclass(frozen=True)
class DropStop: pass

@dataclass(frozen=True)
class NoOp: pass

@dataclass(frozen=True)
class PiecesReady:
    """Both initial pieces have been drawn."""
    current: Piece
    next: Piece

@dataclass(frozen=True)
class NextPieceReady:
    piece: Piece

InputEvent = Union[Tick, MoveLeft, MoveRight, Rotate, DropStart, DropStop, NoOp]
Event = Union[InputEvent, PiecesReady, NextPieceReady]


# ---------- commands ----------
@dataclass(frozen=True)
class RequestInitialPieces: pass

@dataclass(frozen=True)
class RequestNextPiece: pass

@dataclass(frozen=True)
class RearmClock:
    interval_ms: float

Command = Union[RequestInitialPieces, RequestNextPiece, RearmClock]
