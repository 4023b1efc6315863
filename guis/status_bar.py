import tkinter as tk
from tkinter import ttk
from typing import Optional

class EnhancedStatusBar:
    """
    Bottom bar of the main window.

    Zones, left to right: user message, current puzzle, solve progress or
    creator validation, pointer position.
    """

    def __init__(self, parent: tk.Widget):
        self.frame = ttk.Frame(parent)
        self.frame.pack(side=tk.BOTTOM, fill=tk.X)

        self.main_status = tk.StringVar(value="Ready")
        self.puzzle_var = tk.StringVar(value="")
        self.validation_var = tk.StringVar(value="")
        self.position_var = tk.StringVar(value="")

        self._zone(self.main_status, anchor=tk.W, expand=True)
        self._zone(self.puzzle_var, anchor=tk.CENTER, width=24)
        self._zone(self.validation_var, anchor=tk.CENTER, width=22)
        self._zone(self.position_var, anchor=tk.E, width=12, separator=False)

    def _zone(self, variable: tk.StringVar, anchor: str, width: Optional[int] = None,
              expand: bool = False, separator: bool = True):
        label = ttk.Label(self.frame, textvariable=variable, relief=tk.SUNKEN,
                          anchor=anchor, padding=3, width=width)
        label.pack(side=tk.LEFT, fill=tk.X, expand=expand)
        if separator:
            ttk.Separator(self.frame, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=2)

    def update_main_status(self, status: str):
        self.main_status.set(status)

    def update_puzzle_info(self, name: Optional[str] = None, size: Optional[str] = None):
        """Show the puzzle being solved or edited; no arguments clears the zone."""
        if name is None:
            self.puzzle_var.set("")
        else:
            self.puzzle_var.set(f"{name} ({size})" if size else name)

    def update_validation_status(self, warnings: int, infos: int = 0):
        """Creator mode: summarize validate_creator_grid() results."""
        if warnings > 0:
            self.validation_var.set(f"⚠️ {warnings} warnings")
        elif infos > 0:
            self.validation_var.set(f"ℹ️ {infos} empty lines")
        else:
            self.validation_var.set("✅ Ready to save")

    def update_progress(self, filled: int, target: int):
        """Solve mode: painted cells against the cells the answer fills."""
        self.validation_var.set(f"Filled {filled} / {target}")

    def update_position(self, row: Optional[int] = None, col: Optional[int] = None):
        """Update mouse position info (1-based for display)."""
        if row is not None and col is not None:
            self.position_var.set(f"(r{row + 1}, c{col + 1})")
        else:
            self.position_var.set("")
