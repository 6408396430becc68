# tests/test_captures.py
import sys

from gogrid.board_model import Board


def test_single_capture():
    # 3x3, white in the center, black takes all four neighbours
    b = Board(size=3)
    b.play('W', (1, 1))
    b.play('B', (0, 1))
    b.play('B', (1, 0))
    b.play('B', (1, 2))
    outcome = b.attempt_move(2, 1, 'B')
    assert outcome.captured == [(1, 1)]
    assert b.get((1, 1)) is None
    assert b.is_forbidden(1, 1)
    assert b.captures == {'B': 1, 'W': 0}


def test_corner_capture_uses_board_edge():
    b = Board(size=5)
    b.play('W', (0, 0))
    b.play('B', (1, 0))
    assert b.get((0, 0)) == 'W'
    assert b.play('B', (0, 1)) == [(0, 0)]
    assert b.get((0, 0)) is None


def test_group_capture_removes_whole_group():
    b = Board(size=5)
    b.play('W', (1, 1))
    b.play('W', (1, 2))
    for pt in [(0, 1), (0, 2), (2, 1), (2, 2), (1, 0)]:
        assert b.play('B', pt) == []
    assert b.get((1, 1)) == 'W' and b.get((1, 2)) == 'W'
    assert b.play('B', (1, 3)) == [(1, 1), (1, 2)]
    assert b.get((1, 1)) is None and b.get((1, 2)) is None
    assert b.forbidden_points() == [(1, 1), (1, 2)]


def test_group_with_liberty_is_not_captured():
    b = Board(size=5)
    b.play('W', (1, 1))
    b.play('W', (1, 2))
    for pt in [(0, 1), (0, 2), (2, 1), (2, 2), (1, 0)]:
        b.play('B', pt)
    stones, libs = b.group_and_liberties((1, 1))
    assert stones == {(1, 1), (1, 2)}
    assert libs == {(1, 3)}
    assert not b.is_group_captured((1, 2))


def test_two_groups_captured_by_one_move():
    b = Board(size=5)
    b.play('W', (0, 0))
    b.play('W', (0, 2))
    b.play('B', (1, 0))
    b.play('B', (1, 2))
    b.play('B', (0, 3))
    assert b.play('B', (0, 1)) == [(0, 0), (0, 2)]
    assert b.captures['B'] == 2


def test_ring_group_is_traversed_once():
    # a white ring around an empty eye still has that eye as a liberty
    b = Board(size=5)
    ring = [(1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2), (3, 3)]
    for pt in ring:
        b.play('W', pt)
    stones, libs = b.group_and_liberties((1, 1))
    assert stones == set(ring)
    assert (2, 2) in libs
    assert len(libs) == 13


def test_own_color_neighbours_never_captured():
    b = Board(size=3)
    b.play('B', (0, 1))
    b.play('B', (1, 0))
    assert b.play('B', (0, 0)) == []
    assert b.get((0, 0)) == 'B'


def test_empty_or_outside_seed_has_no_group():
    b = Board(size=3)
    assert b.group_and_liberties((1, 1)) == (set(), set())
    assert b.group_and_liberties((5, 5)) == (set(), set())
    assert not b.is_group_captured((1, 1))


def test_stone_touching_one_group_twice_captures_it_once():
    b = Board(size=5)
    for pt in [(1, 1), (2, 1), (2, 2)]:
        b.play('W', pt)
    for pt in [(0, 1), (1, 0), (2, 0), (3, 1), (3, 2), (2, 3)]:
        assert b.play('B', pt) == []
    # (1,2) touches the L at (1,1) and at (2,2)
    outcome = b.attempt_move(1, 2, 'B')
    assert outcome.captured == [(1, 1), (2, 1), (2, 2)]
    assert b.captures == {'B': 3, 'W': 0}


def test_large_board_group_has_no_recursion_limit():
    n = 400
    b = Board(size=n)
    # white columns on even x, joined alternately at the bottom and top edge
    for x in range(0, n, 2):
        for y in range(n):
            b.play('W', (x, y))
        if x + 2 < n:
            b.play('W', (x + 1, n - 1 if (x // 2) % 2 == 0 else 0))
    stones, libs = b.group_and_liberties((0, 0))
    assert len(stones) == 200 * n + 199
    assert len(stones) > sys.getrecursionlimit()
    assert libs
    assert b.compute_territory() == (0, n * n - len(stones))
