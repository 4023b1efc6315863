"""
Printable sheet export (matplotlib, no display needed).
"""

import os

import matplotlib
matplotlib.use("Agg")

import pytest
from matplotlib.figure import Figure

from render.puzzle_sheet import PuzzleSheetRenderer, save_puzzle_sheet


def test_render_onto_given_axis(sample_puzzles):
    fig = Figure()
    ax = fig.subplots()
    result = PuzzleSheetRenderer().render_puzzle(sample_puzzles[0], ax=ax)
    assert result is ax
    assert ax.get_title() == "Plus"

    # One text per clue number
    clue_count = sum(len(c) for c in sample_puzzles[0].rows) + sum(len(c) for c in sample_puzzles[0].cols)
    assert len(ax.texts) == clue_count


def test_solution_adds_filled_patches(sample_puzzles):
    renderer = PuzzleSheetRenderer()
    blank = renderer.render_puzzle(sample_puzzles[0])
    solved = renderer.render_puzzle(sample_puzzles[0], show_solution=True)
    # Plus has 9 filled cells
    assert len(solved.patches) - len(blank.patches) == 9


def test_figure_size_has_minimum(sample_puzzles):
    width, height = PuzzleSheetRenderer().figure_size(sample_puzzles[0])
    assert width >= 4.0 and height >= 4.0


@pytest.mark.parametrize("name", ["sheet.png", "sheet.pdf"])
def test_save_puzzle_sheet(sample_puzzles, tmp_path, name):
    path = str(tmp_path / name)
    assert save_puzzle_sheet(sample_puzzles[2], path, show_solution=True) == path
    assert os.path.getsize(path) > 0
