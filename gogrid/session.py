# session.py
# Turn-taking and game-over bookkeeping around one Board.
from typing import Callable, List, Optional, Tuple

from gogrid import settings
from gogrid.board_model import Board, MoveOutcome, MoveStatus, Territory, opponent

DEBUG = settings.DEBUG

COLOR_NAMES = {'B': "Black", 'W': "White"}

REJECTION_TEXTS = {
    MoveStatus.FORBIDDEN: "Cannot place piece in forbidden position",
    MoveStatus.OCCUPIED: "Cell is already occupied",
    MoveStatus.OUT_OF_BOUNDS: "Outside the board",
    MoveStatus.GAME_OVER: "Game is over",
}

Listener = Callable[[str, object], None]


class GameSession:
    """
    Owns the Board and the state around it:
      - whose turn it is (Black starts)
      - the game-over latch and the winner
      - subscribers notified with (event, payload) after every change

    Events: "move" (MoveOutcome), "rejected" (MoveOutcome), "turn" (color),
    "game_over" (winner name), "restart" (None).
    """

    def __init__(self, board: Optional[Board] = None, size: Optional[int] = None):
        self.board: Board = board if board is not None else Board(size=size)
        self.current_color: str = 'B'
        self.is_ended: bool = False
        self.winner: Optional[str] = None
        self._listeners: List[Listener] = []

    # --- subscribers ---
    def subscribe(self, callback: Listener):
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Listener):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit(self, event: str, payload=None):
        for cb in list(self._listeners):
            try:
                cb(event, payload)
            except Exception as e:
                print("[GameSession] listener error on", event, ":", e)

    # --- queries ---
    @property
    def is_black_turn(self) -> bool:
        return self.current_color == 'B'

    def territory(self) -> Territory:
        return self.board.compute_territory()

    def calculate_winner(self) -> str:
        territory = self.territory()
        return "Black" if territory.black > territory.white else "White"

    def turn_label(self) -> str:
        return COLOR_NAMES[self.current_color]

    def territory_texts(self) -> Tuple[str, str]:
        territory = self.territory()
        return f"Black Territory: {territory.black}", f"White Territory: {territory.white}"

    @staticmethod
    def rejection_text(outcome: MoveOutcome) -> str:
        return REJECTION_TEXTS.get(outcome.status, "Invalid move")

    def win_text(self) -> Optional[str]:
        if self.winner is None:
            return None
        return f"{self.winner} wins!"

    # --- commands ---
    def cell_clicked(self, x: int, y: int) -> MoveOutcome:
        color = self.current_color
        if self.is_ended:
            if DEBUG:
                print("[GameSession] game is over, click at", (x, y), "ignored")
            return MoveOutcome(MoveStatus.GAME_OVER, (x, y), color, [])
        outcome = self.board.attempt_move(x, y, color)
        if not outcome.accepted:
            if DEBUG:
                print("[GameSession] invalid move:", outcome.status, (x, y))
            self._emit("rejected", outcome)
            return outcome
        self._emit("move", outcome)
        if self.board.check_win():
            self._end_game()
        else:
            self.current_color = opponent(color)
            self._emit("turn", self.current_color)
        return outcome

    def _end_game(self):
        self.is_ended = True
        self.winner = self.calculate_winner()
        if DEBUG:
            print("[GameSession]", self.win_text())
        self._emit("game_over", self.winner)

    def restart_requested(self):
        self.board.reset_board()
        self.current_color = 'B'
        self.is_ended = False
        self.winner = None
        if DEBUG:
            print("[GameSession] restart")
        self._emit("restart", None)
