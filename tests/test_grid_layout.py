"""
Canvas geometry of the grid renderer (no Tk window is created).
"""

import pytest

pytest.importorskip("tkinter")

from core.clues import line_clue
from render.grid_render import GridRenderer


class RecordingCanvas:
    """Stands in for tk.Canvas; keeps the position of every text item."""

    def __init__(self):
        self.texts = []

    def create_text(self, x, y, **kwargs):
        self.texts.append((x, y, kwargs.get("text")))
        return len(self.texts)


@pytest.fixture
def renderer():
    return GridRenderer(cell_size=24, clue_size=20)


def test_clue_area_grows_one_slot_per_extra_clue(renderer):
    assert renderer.clue_area_size(0) == renderer.clue_area_size(5) == 100
    assert renderer.clue_area_size(7) == 140


def test_long_row_clue_stays_inside_clue_area(renderer):
    """An alternating 25-cell row has 13 runs; all of them must be visible."""
    clue = line_clue([1, 0] * 12 + [1])
    assert len(clue) == 13

    renderer.layout(len(clue), 1)
    canvas = RecordingCanvas()
    renderer.draw_row_clue(canvas, 0, clue)

    ox, _ = renderer.grid_origin
    xs = [x for x, _, _ in canvas.texts]
    assert len(xs) == 13
    assert min(xs) - renderer.clue_size / 2 >= renderer.offset, f"clue drawn at x={min(xs)}, outside the clue area"
    assert max(xs) < ox


def test_long_column_clue_stays_inside_clue_area(renderer):
    clue = line_clue([1, 0] * 12 + [1])
    renderer.layout(1, len(clue))
    canvas = RecordingCanvas()
    renderer.draw_col_clue(canvas, 24, clue)

    _, oy = renderer.grid_origin
    ys = [y for _, y, _ in canvas.texts]
    assert min(ys) - renderer.clue_size / 2 >= renderer.offset, f"clue drawn at y={min(ys)}, outside the clue area"
    assert max(ys) < oy


def test_pixel_to_cell(renderer):
    renderer.layout(0, 0)
    ox, oy = renderer.grid_origin
    assert (ox, oy) == (110, 110)
    assert renderer.pixel_to_cell(ox, oy, 5, 5) == (0, 0)
    assert renderer.pixel_to_cell(ox + 2 * 24 + 1, oy + 3 * 24 + 1, 5, 5) == (3, 2)


@pytest.mark.parametrize("dx,dy", [(-1, 10), (10, -1), (5 * 24, 10), (10, 5 * 24)])
def test_pixel_outside_grid_is_none(renderer, dx, dy):
    ox, oy = renderer.grid_origin
    assert renderer.pixel_to_cell(ox + dx, oy + dy, 5, 5) is None


def test_cell_box_and_total_size(renderer):
    renderer.layout(2, 7)
    ox, oy = renderer.grid_origin
    assert renderer.cell_to_pixel(1, 2) == (ox + 48, oy + 24, ox + 72, oy + 48)
    assert renderer.total_size(5, 5) == (ox + 120 + 10, oy + 120 + 10)
