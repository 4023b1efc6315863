"""
Central configuration for Griddler.

Holds every tunable of the application: grid sizes, UI timings,
colour themes and storage locations.
"""
import os

# Creator grid sizes offered in the size selector
GRID_SIZES = (8, 10, 15, 20, 25)
DEFAULT_GRID_SIZE = 10
DEFAULT_PUZZLE_NAME = "New Puzzle"

# Messages vanish after this many milliseconds
MESSAGE_TIMEOUT_MS = 3000

# Canvas geometry (pixels)
CANVAS_CONFIG = {
    'cell_size': 24,          # Side of one grid cell
    'clue_size': 20,          # Slot reserved per clue for the first clues
    'base_clue_count': 5,     # Clues that fit in the default clue area
    'offset': 10,             # Margin around the whole drawing
}

# Colour themes (Tk colour names or hex strings)
THEMES = {
    'blue': {
        'primary': '#2563eb',
        'sidebar': '#1e40af',
        'panel_bg': '#eff6ff',
        'item_active': '#3b82f6',
        'grid_border': '#93c5fd',
        'filled': '#111111',
        'marked': '#fca5a5',
        'success': '#22c55e',
        'error': '#ef4444',
    },
    'green': {
        'primary': '#16a34a',
        'sidebar': '#166534',
        'panel_bg': '#f0fdf4',
        'item_active': '#22c55e',
        'grid_border': '#86efac',
        'filled': '#111111',
        'marked': '#fca5a5',
        'success': '#22c55e',
        'error': '#ef4444',
    },
    'purple': {
        'primary': '#9333ea',
        'sidebar': '#6b21a8',
        'panel_bg': '#faf5ff',
        'item_active': '#a855f7',
        'grid_border': '#d8b4fe',
        'filled': '#111111',
        'marked': '#fca5a5',
        'success': '#22c55e',
        'error': '#ef4444',
    },
}
DEFAULT_THEME = 'blue'

# Persistence
STORAGE_PATH = os.environ.get(
    "GRIDDLER_STORAGE",
    os.path.join(os.path.expanduser("~"), ".griddler", "puzzles.json"),
)
DEFAULT_PUZZLES_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "default_puzzles.json")
EXPORT_FILENAME = "griddler-puzzles.json"

LOG_LEVEL = os.environ.get("GRIDDLER_LOG_LEVEL", "INFO")
