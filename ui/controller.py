# ui/controller.py
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from gogrid import settings
from gogrid.session import GameSession
from ui.board_view import BoardView

DEBUG = settings.DEBUG


class Controller:
    """
    Связывает GameSession с BoardView и виджетами состояния:
      - клик по доске -> session.cell_clicked(x, y)
      - события сессии -> снимок доски, ярлыки хода/территории, баннер победы
      - кнопка restart -> session.restart_requested()
    """

    def __init__(self, board_view: BoardView, session: GameSession):
        self.view = board_view
        self.session = session

        self._lbl_black_turn: Optional[Gtk.Label] = None
        self._lbl_white_turn: Optional[Gtk.Label] = None
        self._lbl_black_territory: Optional[Gtk.Label] = None
        self._lbl_white_territory: Optional[Gtk.Label] = None
        self._lbl_status: Optional[Gtk.Label] = None
        self._lbl_win: Optional[Gtk.Label] = None
        self._btn_restart: Optional[Gtk.Button] = None

        board_view.on_click(self._on_click)
        session.subscribe(self._on_session_event)

    # --- integration points ---
    def attach_labels(self, black_turn: Gtk.Label, white_turn: Gtk.Label,
                      black_territory: Gtk.Label, white_territory: Gtk.Label,
                      status: Gtk.Label, win: Gtk.Label):
        self._lbl_black_turn = black_turn
        self._lbl_white_turn = white_turn
        self._lbl_black_territory = black_territory
        self._lbl_white_territory = white_territory
        self._lbl_status = status
        self._lbl_win = win
        self.refresh()

    def attach_restart_button(self, button: Gtk.Button):
        self._btn_restart = button
        button.connect("clicked", lambda _btn: self.session.restart_requested())
        self.refresh()

    # --- Board callbacks ---
    def _on_click(self, x: int, y: int):
        if DEBUG:
            print("[Controller] board click at", (x, y), "color:", self.session.current_color)
        self.session.cell_clicked(x, y)

    def _on_session_event(self, event: str, payload):
        if DEBUG:
            print("[Controller] session event:", event, payload)
        if event == "rejected":
            self._set_status(self.session.rejection_text(payload))
            return
        self._set_status("")
        self.refresh()

    def _set_status(self, text: str):
        if self._lbl_status is not None:
            self._lbl_status.set_property("label", text)

    # --- view refresh ---
    def refresh(self):
        board = self.session.board
        self.view.set_board(board.get_board(), board.forbidden_points(), board.territory_regions())
        self.view.set_banner(self.session.win_text())

        black_text, white_text = self.session.territory_texts()
        if self._lbl_black_territory is not None:
            self._lbl_black_territory.set_property("label", black_text)
        if self._lbl_white_territory is not None:
            self._lbl_white_territory.set_property("label", white_text)

        ended = self.session.is_ended
        if self._lbl_black_turn is not None:
            self._lbl_black_turn.set_visible(not ended and self.session.is_black_turn)
        if self._lbl_white_turn is not None:
            self._lbl_white_turn.set_visible(not ended and not self.session.is_black_turn)
        if self._lbl_win is not None:
            self._lbl_win.set_property("label", self.session.win_text() or "")
            self._lbl_win.set_visible(ended)
        if self._btn_restart is not None:
            self._btn_restart.set_visible(ended)
