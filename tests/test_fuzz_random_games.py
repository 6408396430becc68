# tests/test_fuzz_random_games.py
import random

import pytest
from gogrid.board_model import Board, MoveStatus


@pytest.mark.parametrize("scope", ["game", "move"])
def test_random_play_invariants(scope):
    rnd = random.Random(2024)
    b = Board(size=7, forbidden_scope=scope)
    color = 'B'
    for _ in range(300):
        x, y = rnd.randrange(-1, 8), rnd.randrange(-1, 8)
        before = b.get_board()
        outcome = b.attempt_move(x, y, color)
        if not outcome.accepted:
            assert outcome.status in (MoveStatus.OUT_OF_BOUNDS, MoveStatus.FORBIDDEN, MoveStatus.OCCUPIED)
            assert b.get_board() == before
            continue
        assert b.get((x, y)) == color or (x, y) in outcome.captured
        assert len(outcome.captured) == len(set(outcome.captured))
        assert all(before[cx][cy] not in (None, color) for cx, cy in outcome.captured)
        # forbidden points never hold a stone
        assert all(b.get(pt) is None for pt in b.forbidden_points())
        assert sum(len(r.cells) for r in b.territory_regions()) == b.empty_count()
        color = 'W' if color == 'B' else 'B'
    occupied = sum(1 for column in b.get_board() for v in column if v is not None)
    assert occupied + b.empty_count() == 49
