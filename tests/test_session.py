# tests/test_session.py
from gogrid.board_model import Board, MoveStatus
from gogrid.session import GameSession


def _recorder(session):
    events = []
    session.subscribe(lambda event, payload: events.append((event, payload)))
    return events


def test_black_moves_first_and_turns_alternate():
    s = GameSession(size=5)
    assert s.is_black_turn
    assert s.turn_label() == "Black"
    s.cell_clicked(0, 0)
    assert s.current_color == 'W'
    s.cell_clicked(1, 1)
    assert s.is_black_turn
    assert s.board.get((0, 0)) == 'B'
    assert s.board.get((1, 1)) == 'W'


def test_rejected_move_keeps_turn():
    s = GameSession(size=5)
    events = _recorder(s)
    s.cell_clicked(2, 2)
    outcome = s.cell_clicked(2, 2)
    assert outcome.status == MoveStatus.OCCUPIED
    assert s.current_color == 'W'
    assert events[-1] == ("rejected", outcome)


def test_events_for_accepted_move():
    s = GameSession(size=5)
    events = _recorder(s)
    outcome = s.cell_clicked(3, 3)
    assert events == [("move", outcome), ("turn", 'W')]


def test_full_board_ends_game_and_latches():
    s = GameSession(size=1)
    events = _recorder(s)
    s.cell_clicked(0, 0)
    assert s.is_ended
    # no territory on either side: ties go to White
    assert s.winner == "White"
    assert s.win_text() == "White wins!"
    assert events[-1] == ("game_over", "White")
    ignored = s.cell_clicked(0, 0)
    assert ignored.status == MoveStatus.GAME_OVER
    assert s.board.get((0, 0)) == 'B'


def test_restart_returns_to_initial_state():
    s = GameSession(size=1)
    events = _recorder(s)
    s.cell_clicked(0, 0)
    s.restart_requested()
    assert not s.is_ended
    assert s.winner is None
    assert s.win_text() is None
    assert s.is_black_turn
    assert s.board.empty_count() == 1
    assert events[-1] == ("restart", None)


def test_winner_and_texts_follow_territory():
    b = Board(size=3)
    for y in range(3):
        b.play('B', (1, y))
    s = GameSession(board=b)
    assert s.board is b
    assert s.calculate_winner() == "Black"
    assert s.territory_texts() == ("Black Territory: 6", "White Territory: 0")


def test_failing_listener_does_not_break_session():
    s = GameSession(size=3)

    def boom(event, payload):
        raise RuntimeError("listener failed")

    s.subscribe(boom)
    events = _recorder(s)
    assert s.cell_clicked(1, 1).accepted
    assert [e for e, _ in events] == ["move", "turn"]
    s.unsubscribe(boom)
    s.cell_clicked(0, 0)
    assert s.current_color == 'B'


def test_rejection_texts_per_status():
    s = GameSession(size=3)
    s.cell_clicked(1, 1)
    assert s.rejection_text(s.cell_clicked(1, 1)) == "Cell is already occupied"
    assert s.rejection_text(s.cell_clicked(3, 0)) == "Outside the board"
    s.board.play('W', (0, 0))
    s.board.play('B', (1, 0))
    s.board.play('B', (0, 1))
    assert s.rejection_text(s.cell_clicked(0, 0)) == "Cannot place piece in forbidden position"
