# guis/__init__.py
"""
Griddler - GUI Package
Tkinter interface components and canvas management.
"""
from .grid_canvas import GridCanvas
from .status_bar import EnhancedStatusBar

__all__ = ['GridCanvas', 'EnhancedStatusBar']
