import pytest
from tetris_piece import Piece, PieceKind, ROTATIONS


def test_rotation_state_counts():
    assert len(ROTATIONS["I"]) == 2
    assert len(ROTATIONS["O"]) == 1
    assert len(ROTATIONS["S"]) == 2
    assert len(ROTATIONS["Z"]) == 2
    for t in "JLT":
        assert len(ROTATIONS[t]) == 4

def test_states_are_normalised():
    for t, states in ROTATIONS.items():
        for cells in states:
            assert len(cells) == 4
            assert min(c for c, _ in cells) == 0
            assert min(r for _, r in cells) == 0

def test_i_piece_offsets():
    p = Piece.spawn("I")
    assert p.cells() == ((0, 0), (1, 0), (2, 0), (3, 0))
    assert (p.leftmost(), p.rightmost(), p.height()) == (0, 3, 1)
    v = p.rotate()
    assert (v.leftmost(), v.rightmost(), v.height()) == (0, 0, 4)
    assert v.rotate() == p

def test_rotation_cycles_back_to_spawn():
    p = Piece.spawn(PieceKind.T)
    assert p.rotate().rotate().rotate().rotate() == p
    assert Piece.spawn("O").rotate() == Piece.spawn("O")

def test_placed_translates_by_anchor():
    assert Piece.spawn("O").placed((3, 7)) == ((3, 7), (4, 7), (3, 8), (4, 8))

def test_bad_pieces_rejected():
    with pytest.raises(ValueError):
        Piece("X")
    with pytest.raises(ValueError):
        Piece("O", 1)
