from tetris_piece import PieceKind
from tetris_rng import PieceSource


def test_seeded_sources_agree():
    a, b = PieceSource(42), PieceSource(42)
    assert [a.draw() for _ in range(50)] == [b.draw() for _ in range(50)]

def test_draws_cover_every_kind_at_spawn_rotation():
    source = PieceSource(1)
    pieces = [source.draw() for _ in range(500)]
    assert {p.t for p in pieces} == {k.value for k in PieceKind}
    assert all(p.rotation == 0 for p in pieces)

def test_draw_pair_returns_two_pieces():
    cur, nxt = PieceSource(3).draw_pair()
    assert cur.rotation == 0 and nxt.rotation == 0
