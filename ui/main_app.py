# ui/main_app.py
import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from gogrid import settings
from gogrid.session import GameSession
from ui.board_view import BoardView
from ui.controller import Controller


class MainWindow(Gtk.ApplicationWindow):
    def __init__(self, app, board_size: int = settings.BOARD_SIZE):
        super().__init__(application=app, title="gogrid")
        self.set_default_size(900, 960)

        self.session = GameSession(size=board_size)
        self.board_view = BoardView(board_size=board_size)
        self.controller = Controller(self.board_view, self.session)

        # верхняя панель: чей ход + территории
        top = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=12)
        top.set_margin_start(8)
        top.set_margin_end(8)
        top.set_margin_top(6)
        black_turn = Gtk.Label(label="Black to move")
        white_turn = Gtk.Label(label="White to move")
        black_territory = Gtk.Label()
        white_territory = Gtk.Label()
        for w in (black_turn, white_turn, black_territory, white_territory):
            top.append(w)

        # нижняя панель: сообщения, победитель, restart
        bottom = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=12)
        bottom.set_margin_start(8)
        bottom.set_margin_end(8)
        bottom.set_margin_bottom(6)
        status = Gtk.Label()
        win = Gtk.Label()
        restart = Gtk.Button(label="Restart")
        for w in (status, win, restart):
            bottom.append(w)

        self.controller.attach_labels(black_turn, white_turn, black_territory, white_territory, status, win)
        self.controller.attach_restart_button(restart)

        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        vbox.append(top)
        vbox.append(self.board_view)
        vbox.append(bottom)
        self.set_child(vbox)


class App(Gtk.Application):
    def __init__(self):
        super().__init__(application_id="org.gogrid.app")

    def do_activate(self):
        win = MainWindow(self)
        win.present()


def main():
    app = App()
    return app.run(None)


if __name__ == "__main__":
    raise SystemExit(main())
