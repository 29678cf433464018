from tetris_config import CONFIG, COLS, ROWS
from tetris_feed import observe
from tetris_game import Fault, GameOver, GameState, Running, Uninitialized
from tetris_board import make_board
from tetris_piece import Piece


def test_running_feed_exposes_board_piece_and_preview(monkeypatch):
    monkeypatch.setitem(CONFIG, "PREVIEW_ORIGIN", (12, 1))
    state = GameState(400, Piece.spawn("I"), (3, 7), Piece.spawn("O"), make_board({(0, 19)}))
    feed = observe(Running(state))
    assert feed.outline == (COLS, ROWS)
    assert feed.phase == "Running"
    assert feed.score == 400
    assert feed.current_kind == "I"
    assert feed.current == ((3, 7), (4, 7), (5, 7), (6, 7))
    assert feed.fixated == {(0, 19)}
    assert feed.next_kind == "O"
    assert feed.next_cells == ((12, 1), (13, 1), (12, 2), (13, 2))

def test_pending_next_piece_has_no_preview():
    state = GameState(0, Piece.spawn("T"), (0, 0), None, make_board())
    feed = observe(Running(state))
    assert feed.next_kind == ""
    assert feed.next_cells == ()

def test_terminal_feeds_carry_message():
    over = observe(GameOver(700))
    assert over.score == 700
    assert "700" in over.message
    assert observe(Fault("bad event")).message == "bad event"

def test_uninitialized_feed_is_empty():
    feed = observe(Uninitialized())
    assert feed.phase == "Uninitialized"
    assert feed.current == () and feed.fixated == frozenset()
