import pygame
from main import dispatch, execute
from tetris_board import make_board
from tetris_clock import TickClock
from tetris_config import ROWS
from tetris_events import (
    NextPieceReady, PiecesReady, RearmClock, RequestInitialPieces, RequestNextPiece, Tick,
)
from tetris_game import GameOver, GameState, Running, Uninitialized, new_game
from tetris_piece import Piece
from tetris_rng import PieceSource


def test_execute_returns_piece_draws_as_events():
    source = PieceSource(5)
    assert isinstance(execute(RequestInitialPieces(), source, TickClock()), PiecesReady)
    assert isinstance(execute(RequestNextPiece(), source, TickClock()), NextPieceReady)

def test_execute_rearms_clock(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda ev, ms: calls.append(ms))
    clock = TickClock()
    assert execute(RearmClock(50), PieceSource(5), clock) is None
    assert calls == [0, 50]

def test_back_to_back_ticks_get_the_drawn_piece_in_between():
    # first tick lands the I and spawns O, second tick lands O on (0, 2)
    state = GameState(0, Piece.spawn("I"), (4, ROWS - 1), Piece.spawn("O"), make_board({(0, 2)}))
    source = PieceSource(11)
    phase = dispatch(Running(state), Tick(), source, TickClock())
    assert phase.state.piece == Piece.spawn("O")
    assert phase.state.next_piece is not None
    phase = dispatch(phase, Tick(), source, TickClock())
    # the O fixates in the spawn rows, so the following spawn collides
    assert phase == GameOver(0)

def test_new_game_dispatch_reaches_running():
    phase, commands = new_game()
    assert phase == Uninitialized()
    event = execute(commands[0], PieceSource(2), TickClock())
    phase = dispatch(phase, event, PieceSource(2), TickClock())
    assert isinstance(phase, Running)
    assert phase.state.score == 0
