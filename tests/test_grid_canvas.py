"""
Grid canvas widget:
- The largest creator grid is reachable through the scrollbars
- Hit testing follows the scrolled view
(Skipped when no display is available.)
"""

from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

from core import config
from core.clues import compute_clues
from core.grid import create_empty_grid
from core.types import MouseButton
from guis.grid_canvas import GridCanvas


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError:
        pytest.skip("No display available")
    window.withdraw()
    yield window
    window.destroy()


@pytest.fixture
def big_canvas(root):
    frame = tk.Frame(root)
    frame.pack(fill=tk.BOTH, expand=True)
    widget = GridCanvas(frame, width=300, height=200)
    grid = create_empty_grid(25)
    widget.set_grid(grid, compute_clues(grid))
    root.update()
    return widget


def test_scrollregion_covers_whole_grid(big_canvas):
    region = [float(v) for v in big_canvas.canvas.cget("scrollregion").split()]
    width, height = big_canvas.renderer.total_size(25, 25)
    assert region == [0.0, 0.0, width, height]
    assert height > 200, "Grid is taller than the visible canvas"
    assert big_canvas.canvas.cget("yscrollcommand"), "Vertical scrollbar attached"
    assert big_canvas.canvas.cget("xscrollcommand"), "Horizontal scrollbar attached"


def test_last_cell_is_paintable_after_scrolling(root, big_canvas):
    pressed = []
    big_canvas.set_callbacks(lambda r, c, b: pressed.append((r, c, b)), lambda r, c: None, lambda: None)

    big_canvas.canvas.xview_moveto(1.0)
    big_canvas.canvas.yview_moveto(1.0)
    root.update()

    x1, y1, x2, y2 = big_canvas.renderer.cell_to_pixel(24, 24)
    cx, cy = (x1 + x2) / 2, (y1 + y2) / 2
    event = SimpleNamespace(x=cx - big_canvas.canvas.canvasx(0), y=cy - big_canvas.canvas.canvasy(0))
    big_canvas._on_press(event, MouseButton.PRIMARY)

    assert pressed == [(24, 24, MouseButton.PRIMARY)]


def test_theme_colours_apply_on_next_redraw(root, big_canvas):
    green = config.THEMES['green']
    big_canvas.set_colors(green)
    big_canvas.redraw_grid()

    fills = {big_canvas.canvas.itemcget(item, "fill") for item in big_canvas.canvas.find_all()
             if big_canvas.canvas.type(item) == "rectangle"}
    assert green['panel_bg'] in fills
    assert config.THEMES['blue']['panel_bg'] not in fills
