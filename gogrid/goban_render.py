# coding: utf-8
"""
goban_render.py

Cairo drawing functions for the board:
- draw_panel (background)
- draw_grid
- draw_hoshi
- draw_territory (shading of owned empty regions)
- draw_forbidden (marks on captured-from points)
- draw_stones

Style comes from gogrid.env via python-dotenv (see gogrid.settings).
Column x runs left to right, row y runs top to bottom.
"""
import math
from typing import Dict, Iterable, List, Optional, Tuple

import gi
import cairo

gi.require_version("Pango", "1.0")
gi.require_version("PangoCairo", "1.0")
from gi.repository import Pango, PangoCairo

from gogrid.settings import getf, gets, get_rgb

DEFAULT_STYLE = {}

DEFAULT_STYLE['outer_margin_fixed'] = getf("OUTER_MARGIN_FIXED", 3)
DEFAULT_STYLE['inner_padding_fixed'] = getf("INNER_PADDING_FIXED", 6)
DEFAULT_STYLE['stone_radius_factor'] = getf("STONE_RADIUS_FACTOR", 0.46)
DEFAULT_STYLE['hoshi_radius_factor'] = getf("HOSHI_RADIUS_FACTOR", 0.12)
DEFAULT_STYLE['line_width_factor'] = getf("LINE_WIDTH_FACTOR", 0.03)
DEFAULT_STYLE['territory_mark_factor'] = getf("TERRITORY_MARK_FACTOR", 0.22)
DEFAULT_STYLE['forbidden_mark_factor'] = getf("FORBIDDEN_MARK_FACTOR", 0.2)

# Colors (r,g,b)
DEFAULT_STYLE['neutral_outside'] = tuple(float(x) for x in gets("NEUTRAL_OUTSIDE", "0.92,0.92,0.92").split(","))
DEFAULT_STYLE['board_bg'] = get_rgb("BOARD_BG", "#C0742A")
DEFAULT_STYLE['line_color'] = tuple(float(x) for x in gets("LINE_COLOR", "0.08,0.08,0.08").split(","))
DEFAULT_STYLE['star_color'] = tuple(float(x) for x in gets("STAR_COLOR", "0.08,0.08,0.08").split(","))
DEFAULT_STYLE['stone_black'] = tuple(float(x) for x in gets("STONE_BLACK", "0.03,0.03,0.03").split(","))
DEFAULT_STYLE['stone_white'] = tuple(float(x) for x in gets("STONE_WHITE", "0.99,0.99,0.99").split(","))
DEFAULT_STYLE['forbidden_color'] = get_rgb("FORBIDDEN_COLOR", "#B01E1E")

DEFAULT_STYLE['font_family'] = gets("FONT_FAMILY", "Sans")

# grid = (grid_left, grid_top, grid_right, grid_bottom, cell, x0, y0, grid_span)
Layout = Dict[str, tuple]


# Pango helper
def create_layout(cr: cairo.Context, font_size: int, text: str):
    layout = PangoCairo.create_layout(cr)
    desc = Pango.font_description_from_string(f"{DEFAULT_STYLE['font_family']} {font_size}")
    layout.set_font_description(desc)
    layout.set_text(text, -1)
    return layout


def draw_text_cr(cr: cairo.Context, x: float, y: float, text: str,
                 font_size: int, align: str = "center", valign: str = "center", color=(0, 0, 0)):
    layout = create_layout(cr, font_size, text)
    w, h = layout.get_pixel_size()
    ox = x
    oy = y
    if align == "center":
        ox = x - w / 2.0
    elif align == "right":
        ox = x - w
    if valign == "center":
        oy = y - h / 2.0
    elif valign == "bottom":
        oy = y - h
    cr.set_source_rgb(*color)
    cr.move_to(ox, oy)
    PangoCairo.show_layout(cr, layout)


def hoshi_points(board_size: int) -> List[Tuple[int, int]]:
    if board_size == 19:
        lines = (3, 9, 15)
    elif board_size == 13:
        lines = (3, 6, 9)
    elif board_size == 9:
        lines = (2, 4, 6)
    else:
        return []
    return [(x, y) for x in lines for y in lines]


def compute_layout(board_size: int, width: int, height: int) -> Layout:
    margin = DEFAULT_STYLE['outer_margin_fixed'] + DEFAULT_STYLE['inner_padding_fixed']
    side = max(0.0, min(width, height) - margin * 2)
    cell = side / board_size if board_size else 0.0
    board_left = (width - side) / 2.0
    board_top = (height - side) / 2.0
    half = cell / 2.0
    x0 = board_left + half
    y0 = board_top + half
    grid_span = (board_size - 1) * cell
    return {
        "viewport": (board_left - margin, board_top - margin, side + margin * 2, side + margin * 2),
        "stone_area": (board_left, board_top, side, side),
        "grid": (x0, y0, x0 + grid_span, y0 + grid_span, cell, x0, y0, grid_span),
    }


def cell_center(layout: Layout, x: int, y: int) -> Tuple[float, float]:
    grid_left, grid_top, grid_right, grid_bottom, cell, x0, y0, grid_span = layout["grid"]
    return x0 + x * cell, y0 + y * cell


def point_from_coords(layout: Layout, board_size: int, px: float, py: float) -> Optional[Tuple[int, int]]:
    cell = layout["grid"][4]
    if cell <= 0:
        return None
    x0, y0 = layout["grid"][5], layout["grid"][6]
    x = int(round((px - x0) / cell))
    y = int(round((py - y0) / cell))
    if 0 <= x < board_size and 0 <= y < board_size:
        return x, y
    return None


# Modular draw functions

def draw_panel(cr: cairo.Context, layout: Layout, width: int, height: int):
    cr.set_source_rgb(*DEFAULT_STYLE['neutral_outside'])
    cr.rectangle(0, 0, width, height)
    cr.fill()
    vp_left, vp_top, vp_w, vp_h = layout["viewport"]
    cr.set_source_rgb(*DEFAULT_STYLE['board_bg'])
    cr.rectangle(vp_left, vp_top, vp_w, vp_h)
    cr.fill()


def draw_grid(cr: cairo.Context, board_size: int, layout: Layout):
    grid_left, grid_top, grid_right, grid_bottom, cell, x0, y0, grid_span = layout["grid"]
    line_width = max(1.0, cell * DEFAULT_STYLE['line_width_factor'])
    cr.set_source_rgb(*DEFAULT_STYLE['line_color'])
    cr.set_line_width(line_width)
    for i in range(board_size):
        xi = x0 + i * cell
        cr.move_to(xi, grid_top)
        cr.line_to(xi, grid_bottom)
    for j in range(board_size):
        yj = y0 + j * cell
        cr.move_to(grid_left, yj)
        cr.line_to(grid_right, yj)
    cr.stroke()


def draw_hoshi(cr: cairo.Context, board_size: int, layout: Layout):
    cell = layout["grid"][4]
    hoshi_r = max(1.0, cell * DEFAULT_STYLE['hoshi_radius_factor'])
    cr.set_source_rgb(*DEFAULT_STYLE['star_color'])
    for x, y in hoshi_points(board_size):
        cx, cy = cell_center(layout, x, y)
        cr.arc(cx, cy, hoshi_r, 0, 2.0 * math.pi)
        cr.fill()


def draw_territory(cr: cairo.Context, layout: Layout, regions: Iterable):
    """regions: iterable of (cells, owner) with owner 'B', 'W' or None."""
    cell = layout["grid"][4]
    half = cell * DEFAULT_STYLE['territory_mark_factor'] / 2.0
    for points, owner in regions:
        if owner is None:
            continue
        cr.set_source_rgb(*DEFAULT_STYLE['stone_black' if owner == 'B' else 'stone_white'])
        for x, y in points:
            cx, cy = cell_center(layout, x, y)
            cr.rectangle(cx - half, cy - half, half * 2, half * 2)
        cr.fill()


def draw_forbidden(cr: cairo.Context, layout: Layout, points: Iterable[Tuple[int, int]]):
    cell = layout["grid"][4]
    d = cell * DEFAULT_STYLE['forbidden_mark_factor']
    cr.set_source_rgb(*DEFAULT_STYLE['forbidden_color'])
    cr.set_line_width(max(1.0, cell * DEFAULT_STYLE['line_width_factor'] * 2))
    for x, y in points:
        cx, cy = cell_center(layout, x, y)
        cr.move_to(cx - d, cy - d)
        cr.line_to(cx + d, cy + d)
        cr.move_to(cx + d, cy - d)
        cr.line_to(cx - d, cy + d)
    cr.stroke()


def draw_stones(cr: cairo.Context, layout: Layout, stones: Iterable[Tuple[int, int, str]]):
    cell = layout["grid"][4]
    stone_r = cell * DEFAULT_STYLE['stone_radius_factor']
    line_width = max(1.0, cell * DEFAULT_STYLE['line_width_factor'])
    for x, y, color in stones:
        cx, cy = cell_center(layout, x, y)
        if color == 'B':
            cr.set_source_rgb(*DEFAULT_STYLE['stone_black'])
            cr.arc(cx, cy, stone_r, 0, 2.0 * math.pi)
            cr.fill()
        else:
            cr.set_source_rgb(*DEFAULT_STYLE['stone_white'])
            cr.arc(cx, cy, stone_r, 0, 2.0 * math.pi)
            cr.fill_preserve()
            cr.set_source_rgb(0, 0, 0)
            cr.set_line_width(max(1.0, line_width * 0.9))
            cr.stroke()


def on_draw(cr: cairo.Context, board_size: int, width: int, height: int,
            stones: List[Tuple[int, int, str]], forbidden=(), regions=()) -> Layout:
    layout = compute_layout(board_size, width, height)
    draw_panel(cr, layout, width, height)
    draw_grid(cr, board_size, layout)
    draw_hoshi(cr, board_size, layout)
    draw_territory(cr, layout, regions)
    draw_forbidden(cr, layout, forbidden)
    draw_stones(cr, layout, stones)
    return layout
