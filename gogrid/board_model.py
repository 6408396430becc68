# board_model.py
from collections import deque, namedtuple
from typing import Dict, List, Optional, Set, Tuple

from gogrid import settings

DEBUG = settings.DEBUG

Point = Tuple[int, int]


# Exceptions
class IllegalMove(Exception):
    status = 'illegal'


class OutOfBounds(IllegalMove):
    status = 'out_of_bounds'


class ForbiddenPoint(IllegalMove):
    status = 'forbidden'


class OccupiedPoint(IllegalMove):
    status = 'occupied'


class BoardNotInitialized(RuntimeError): pass


class MoveStatus:
    ACCEPTED = 'accepted'
    OUT_OF_BOUNDS = OutOfBounds.status
    FORBIDDEN = ForbiddenPoint.status
    OCCUPIED = OccupiedPoint.status
    GAME_OVER = 'game_over'


class MoveOutcome(namedtuple('MoveOutcome', ['status', 'point', 'color', 'captured'])):
    __slots__ = ()

    @property
    def accepted(self) -> bool:
        return self.status == MoveStatus.ACCEPTED


Territory = namedtuple('Territory', ['black', 'white'])


class Region(namedtuple('Region', ['cells', 'border'])):
    """Maximal connected empty area and the colors of the stones touching it."""
    __slots__ = ()

    @property
    def owner(self) -> Optional[str]:
        if len(self.border) == 1:
            return next(iter(self.border))
        return None


def opponent(color):
    return 'W' if color == 'B' else 'B'


def normalize_color(color) -> str:
    """Accept 'B'/'W' or a bool (True is Black)."""
    if isinstance(color, bool):
        return 'B' if color else 'W'
    if color in ('B', 'W'):
        return color
    raise ValueError(f"Unknown color: {color!r}")


def _check_size(size):
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise ValueError("Board size must be a positive integer.")


class Cell:
    """One intersection. Coordinates are fixed; color is None, 'B' or 'W'."""
    __slots__ = ("_x", "_y", "color")

    def __init__(self, x: int, y: int):
        self._x = x
        self._y = y
        self.color: Optional[str] = None

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def has_piece(self) -> bool:
        return self.color is not None

    def is_black(self) -> bool:
        return self.color == 'B'

    def __repr__(self):
        return f"Cell(x={self._x}, y={self._y}, color={self.color!r})"


class Board:
    def __init__(self, size: Optional[int] = None, forbidden_scope: Optional[str] = None, initialize=True):
        size = settings.BOARD_SIZE if size is None else size
        _check_size(size)
        scope = settings.FORBIDDEN_SCOPE if forbidden_scope is None else forbidden_scope
        if scope not in settings.FORBIDDEN_SCOPES:
            raise ValueError(f"Unknown forbidden scope: {scope!r}")
        self.size = size
        self.forbidden_scope = scope
        self._cells: List[List[Cell]] = []  # indexed [x][y]
        self._forbidden: Set[Point] = set()
        self.captures: Dict[str, int] = {'B': 0, 'W': 0}  # stones removed BY each color
        if initialize:
            self.initialize()

    def initialize(self, size: Optional[int] = None):
        """Build a fresh grid of empty cells."""
        if size is not None:
            _check_size(size)
            self.size = size
        self._cells = [[Cell(x, y) for y in range(self.size)] for x in range(self.size)]
        self._forbidden = set()
        self.captures = {'B': 0, 'W': 0}
        if DEBUG:
            print("[Board] initialized", self.size, "x", self.size, "forbidden scope:", self.forbidden_scope)

    # --- helpers ---
    def _require_cells(self) -> List[List[Cell]]:
        if not self._cells:
            print("[Board] grid accessed before initialize()")
            raise BoardNotInitialized("Board grid was never initialized")
        return self._cells

    def in_bounds(self, x, y):
        if not isinstance(x, int) or not isinstance(y, int):
            return False
        return 0 <= x < self.size and 0 <= y < self.size

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        cells = self._require_cells()
        if not self.in_bounds(x, y):
            return None
        return cells[x][y]

    def get(self, point):
        if point is None: return None
        cell = self.cell_at(*point)
        return None if cell is None else cell.color

    def is_forbidden(self, x: int, y: int) -> bool:
        return (x, y) in self._forbidden

    def forbidden_points(self) -> List[Point]:
        return sorted(self._forbidden)

    def _neighbors(self, x, y):
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.size and 0 <= ny < self.size:
                yield nx, ny

    def group_and_liberties(self, point) -> Tuple[Set[Point], Set[Point]]:
        """Return (stones_set, liberties_set) for group containing point."""
        cells = self._require_cells()
        if point is None or not self.in_bounds(*point):
            return set(), set()
        color = cells[point[0]][point[1]].color
        if color is None: return set(), set()
        visited = set()
        liberties = set()
        stack = [tuple(point)]
        while stack:
            p = stack.pop()
            if p in visited: continue
            visited.add(p)
            for nx, ny in self._neighbors(*p):
                neighbor = cells[nx][ny].color
                if neighbor is None:
                    liberties.add((nx, ny))
                elif neighbor == color and (nx, ny) not in visited:
                    stack.append((nx, ny))
        return visited, liberties

    def is_group_captured(self, point) -> bool:
        stones, libs = self.group_and_liberties(point)
        return bool(stones) and not libs

    def _find_adjacent_enemy_groups_with_no_libs(self, point, color):
        """After placing color at point, find enemy groups with 0 liberties."""
        cells = self._cells
        enemy = opponent(color)
        seen = set()
        captured_groups = []
        for nx, ny in self._neighbors(*point):
            if cells[nx][ny].color != enemy or (nx, ny) in seen:
                continue
            stones, libs = self.group_and_liberties((nx, ny))
            seen |= stones
            if len(libs) == 0:
                captured_groups.append(stones)
        return captured_groups

    def _apply_capture(self, groups, color) -> List[Point]:
        removed = []
        for group in groups:
            for (x, y) in group:
                self._cells[x][y].color = None
                removed.append((x, y))
        self.captures[color] += len(removed)
        return sorted(removed)

    # --- main API ---
    def legal(self, x: int, y: int, color) -> bool:
        """Raise IllegalMove subclass if illegal, otherwise return True.
        Non-integer coordinates are treated as off the board."""
        normalize_color(color)
        cells = self._require_cells()
        if not self.in_bounds(x, y):
            raise OutOfBounds("Out of bounds")
        if (x, y) in self._forbidden:
            raise ForbiddenPoint("Cannot place piece in forbidden position")
        if cells[x][y].has_piece():
            raise OccupiedPoint("Cell is already occupied")
        return True

    def _commit(self, x, y, color) -> List[Point]:
        self._cells[x][y].color = color
        captured_groups = self._find_adjacent_enemy_groups_with_no_libs((x, y), color)
        captured = self._apply_capture(captured_groups, color)
        # own group is not checked: a move without liberties stays on the board
        if self.forbidden_scope == "move":
            self._forbidden = set(captured)
        else:
            self._forbidden.update(captured)
        if DEBUG and captured:
            print("[Board]", color, "at", (x, y), "captured", captured)
        return captured

    def attempt_move(self, x: int, y: int, color) -> MoveOutcome:
        """Place a stone if legal. Rejections are reported in the outcome, never raised."""
        color = normalize_color(color)
        try:
            self.legal(x, y, color)
        except IllegalMove as e:
            if DEBUG:
                print("[Board] rejected", color, "at", (x, y), "-", e)
            return MoveOutcome(e.status, (x, y), color, [])
        captured = self._commit(x, y, color)
        return MoveOutcome(MoveStatus.ACCEPTED, (x, y), color, captured)

    # convenience wrapper
    def play(self, color, point) -> List[Point]:
        """Like attempt_move but raises IllegalMove; returns the captured points."""
        color = normalize_color(color)
        x, y = point
        self.legal(x, y, color)
        return self._commit(x, y, color)

    def check_win(self) -> bool:
        return all(cell.has_piece() for column in self._require_cells() for cell in column)

    def empty_count(self) -> int:
        return sum(1 for column in self._require_cells() for cell in column if not cell.has_piece())

    def territory_regions(self) -> List[Region]:
        """Partition the empty cells into connected regions, each visited once."""
        cells = self._require_cells()
        n = self.size
        visited = [[False] * n for _ in range(n)]
        regions = []
        for x in range(n):
            for y in range(n):
                if visited[x][y] or cells[x][y].has_piece():
                    continue
                region = []
                border = set()
                queue = deque([(x, y)])
                visited[x][y] = True
                while queue:
                    px, py = queue.popleft()
                    region.append((px, py))
                    for nx, ny in self._neighbors(px, py):
                        color = cells[nx][ny].color
                        if color is not None:
                            border.add(color)
                        elif not visited[nx][ny]:
                            visited[nx][ny] = True
                            queue.append((nx, ny))
                regions.append(Region(region, frozenset(border)))
        return regions

    def compute_territory(self) -> Territory:
        scores = {'B': 0, 'W': 0}
        for region in self.territory_regions():
            if region.owner is not None:
                scores[region.owner] += len(region.cells)
        return Territory(scores['B'], scores['W'])

    def reset_board(self):
        self._forbidden.clear()
        for column in self._require_cells():
            for cell in column:
                cell.color = None
        self.captures = {'B': 0, 'W': 0}
        if DEBUG:
            print("[Board] reset")

    # utility for tests
    def pretty(self):
        cells = self._require_cells()
        rows = []
        for y in range(self.size):
            rows.append(''.join('.' if cells[x][y].color is None else cells[x][y].color for x in range(self.size)))
        return '\n'.join(rows)

    def get_board(self) -> List[List[Optional[str]]]:
        """Return a copy of the grid for the UI: columns of None/'B'/'W', indexed [x][y]."""
        return [[cell.color for cell in column] for column in self._require_cells()]
