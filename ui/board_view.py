# ui/board_view.py
import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk
import cairo
from typing import Callable, List, Optional, Tuple

from gogrid.goban_render import (
    on_draw,
    point_from_coords,
    draw_text_cr,
    DEFAULT_STYLE,
)


class BoardView(Gtk.Box):
    def __init__(self, board_size: int = 19):
        super().__init__(orientation=Gtk.Orientation.VERTICAL)

        self.board_size = board_size
        self._layout = {}

        # state, columns indexed [x][y]
        self.board_state: List[List[Optional[str]]] = [[None] * board_size for _ in range(board_size)]
        self.forbidden: List[Tuple[int, int]] = []
        self.regions: List[Tuple[list, Optional[str]]] = []
        self.banner: Optional[str] = None

        self.darea = Gtk.DrawingArea()
        self.darea.set_hexpand(True)
        self.darea.set_vexpand(True)
        self.darea.set_draw_func(self.on_draw, None)

        click = Gtk.GestureClick.new()
        click.connect("pressed", self._on_pressed)
        self.darea.add_controller(click)

        self.append(self.darea)

        self._click_cb: Optional[Callable[[int, int], None]] = None

    # Public API
    def on_click(self, callback: Callable[[int, int], None]):
        self._click_cb = callback

    def set_board(self, board_state, forbidden=(), regions=()):
        self.board_state = [column[:] for column in board_state]
        self.forbidden = list(forbidden)
        self.regions = [(region.cells, region.owner) for region in regions]
        self.darea.queue_draw()

    def set_banner(self, text: Optional[str]):
        self.banner = text
        self.darea.queue_draw()

    # Events
    def _on_pressed(self, gesture, n_press, px, py):
        if not self._layout:
            return
        pt = point_from_coords(self._layout, self.board_size, px, py)
        if pt is None:
            return
        if self._click_cb:
            try:
                self._click_cb(pt[0], pt[1])
            except Exception as e:
                print("[BoardView] click callback error:", e)

    # Drawing
    def on_draw(self, area, cr: cairo.Context, width: int, height: int, user_data):
        stones = [
            (x, y, color)
            for x, column in enumerate(self.board_state)
            for y, color in enumerate(column)
            if color is not None
        ]
        self._layout = on_draw(cr, self.board_size, width, height, stones, self.forbidden, self.regions)
        if self.banner:
            self._draw_banner(cr, width, height)

    def _draw_banner(self, cr: cairo.Context, width: int, height: int):
        cell = self._layout["grid"][4]
        font_px = max(12, int(cell * 1.2))
        cr.set_source_rgba(0, 0, 0, 0.45)
        cr.rectangle(0, height / 2.0 - font_px, width, font_px * 2)
        cr.fill()
        draw_text_cr(cr, width / 2.0, height / 2.0, self.banner, font_px,
                     align="center", valign="center", color=DEFAULT_STYLE['stone_white'])
