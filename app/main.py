"""
Griddler main application.
Solve stored nonogram puzzles or author new ones; the collection is kept in a
local JSON store and can be backed up, restored and imported from files.
"""

import tkinter as tk
from tkinter import ttk, messagebox, filedialog
import logging
import sys
import os
from typing import Callable, Optional

# Add project root to path first
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Then import project modules
from core import config, state as transitions
from core.clues import compute_clues
from core.exchange import export_puzzles, import_puzzles
from core.grid import count_filled, grid_shape
from core.puzzle import validate_creator_grid
from core.state import AppState
from core.storage import PuzzleStore
from core.types import Mode, MouseButton, PuzzleFormatError
from guis.grid_canvas import GridCanvas
from guis.status_bar import EnhancedStatusBar
from render.puzzle_sheet import save_puzzle_sheet
from utils.sizes import size_to_string

logger = logging.getLogger(__name__)

SOLVE_INSTRUCTIONS = """HOW TO SOLVE

• Left-click to fill a cell in black
• Right-click to mark a cell as "can't be black" (light red)
• Click and drag to fill or mark multiple cells at once
• Fill the grid according to the number clues on the rows and columns
• Each number represents a continuous group of black cells
• Groups are separated by at least one empty cell
• Darker gridlines appear every 5 cells (every 4 when the size divides by 4 only)"""

CREATE_INSTRUCTIONS = """HOW TO CREATE

• Click or drag to toggle cells between filled/empty
• The row and column clues update automatically
• Give your puzzle a name before saving
• Saved puzzles appear in the sidebar and can be edited or played"""

class GriddlerApp:
    """Nonogram solver and creator."""

    def __init__(self, store: Optional[PuzzleStore] = None):
        """Initialize the application."""
        self.root = tk.Tk()
        self.root.title("Griddler")
        self.root.geometry("1200x850")

        # Application state
        self.store = store or PuzzleStore()
        self.state = AppState()
        self._message_job: Optional[str] = None
        self._listed_ids: tuple = ()

        # UI variables
        self.mode_var = tk.StringVar(value=Mode.SOLVE.value)
        self.theme_var = tk.StringVar(value=self.state.theme)
        self.name_var = tk.StringVar(value=config.DEFAULT_PUZZLE_NAME)
        self.size_var = tk.StringVar(value=str(config.DEFAULT_GRID_SIZE))
        self.header_var = tk.StringVar()
        self.message_var = tk.StringVar()

        # UI Components
        self.canvas: GridCanvas = None
        self.enhanced_status_bar = EnhancedStatusBar(self.root)

        self._create_ui()
        self._load_collection()

    # =============================================================================
    # UI CONSTRUCTION
    # =============================================================================

    def _create_ui(self):
        """Create the user interface."""
        self._create_tab_bar()

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        # Left panel: file operations and puzzle list
        left_panel = ttk.Frame(main_frame, width=260)
        left_panel.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 5))
        left_panel.pack_propagate(False)

        # Right panel: active tab
        right_panel = ttk.Frame(main_frame)
        right_panel.pack(side=tk.RIGHT, fill=tk.BOTH, expand=True)

        self._create_sidebar(left_panel)
        self._create_main_panel(right_panel)

    def _create_tab_bar(self):
        bar = ttk.Frame(self.root)
        bar.pack(side=tk.TOP, fill=tk.X, padx=5, pady=(5, 0))

        for mode, label in ((Mode.SOLVE, "Solve"), (Mode.CREATE, "Create")):
            ttk.Radiobutton(bar, text=label, variable=self.mode_var, value=mode.value,
                            style="Toolbutton", command=self._change_tab).pack(side=tk.LEFT, padx=(0, 2))

        theme_box = ttk.Combobox(bar, textvariable=self.theme_var, values=list(config.THEMES),
                                 state="readonly", width=8)
        theme_box.pack(side=tk.RIGHT)
        theme_box.bind("<<ComboboxSelected>>", lambda e: self._dispatch(transitions.set_theme, self.theme_var.get()))
        ttk.Label(bar, text="Theme:").pack(side=tk.RIGHT, padx=(0, 4))

    def _create_sidebar(self, parent):
        file_frame = ttk.LabelFrame(parent, text="File Operations", padding=5)
        file_frame.pack(fill=tk.X, pady=(0, 10))

        ttk.Button(file_frame, text="Backup", command=self._backup_puzzles).pack(fill=tk.X, pady=2)
        ttk.Button(file_frame, text="Restore", command=self._restore_puzzles).pack(fill=tk.X, pady=2)
        ttk.Button(file_frame, text="Import", command=self._import_puzzles).pack(fill=tk.X, pady=2)

        list_frame = ttk.LabelFrame(parent, text="Puzzles", padding=5)
        list_frame.pack(fill=tk.BOTH, expand=True)

        self.puzzle_list = tk.Listbox(list_frame, activestyle="none", exportselection=False,
                                      font=("Arial", 10))
        scrollbar = ttk.Scrollbar(list_frame, orient=tk.VERTICAL, command=self.puzzle_list.yview)
        self.puzzle_list.config(yscrollcommand=scrollbar.set)
        self.puzzle_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.puzzle_list.bind("<<ListboxSelect>>", self._on_list_select)

    def _create_main_panel(self, parent):
        ttk.Label(parent, textvariable=self.header_var, font=("Arial", 16, "bold")).pack(anchor=tk.W, pady=(0, 5))

        # Solve controls
        self.solve_controls = ttk.Frame(parent)
        ttk.Button(self.solve_controls, text="Check Solution", command=self._check_solution).pack(side=tk.LEFT, padx=(0, 5))
        ttk.Button(self.solve_controls, text="Export Image", command=self._export_image).pack(side=tk.LEFT)

        # Creator controls
        self.creator_controls = ttk.Frame(parent)
        ttk.Label(self.creator_controls, text="Name:").pack(side=tk.LEFT)
        ttk.Entry(self.creator_controls, textvariable=self.name_var, width=24).pack(side=tk.LEFT, padx=(2, 10))
        self.name_var.trace_add("write", lambda *args: self._on_name_change())

        self.size_label = ttk.Label(self.creator_controls, text="Size:")
        self.size_box = ttk.Combobox(self.creator_controls, textvariable=self.size_var, state="readonly", width=8,
                                     values=[str(size) for size in config.GRID_SIZES])
        self.size_box.bind("<<ComboboxSelected>>", lambda e: self._change_creator_size())

        self.save_button = ttk.Button(self.creator_controls, text="Save Puzzle", command=self._save_creator_puzzle)
        self.new_button = ttk.Button(self.creator_controls, text="New Puzzle",
                                     command=lambda: self._dispatch(transitions.new_creator_puzzle))

        help_frame = ttk.LabelFrame(parent, text="Instructions", padding=5)
        help_frame.pack(side=tk.BOTTOM, fill=tk.X)
        self.help_text = tk.Text(help_frame, wrap=tk.WORD, height=8, font=("Arial", 9))
        self.help_text.pack(fill=tk.X)

        canvas_frame = ttk.Frame(parent)
        canvas_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True, pady=5)
        self.canvas = GridCanvas(canvas_frame, width=800, height=600)
        self.canvas.set_callbacks(self._on_pointer_down, self._on_pointer_enter, self._on_pointer_up)
        self.canvas.set_position_callback(self.enhanced_status_bar.update_position)

        self.message_label = tk.Label(parent, textvariable=self.message_var, fg="white", font=("Arial", 11, "bold"),
                                      padx=8, pady=4)

        # Controls sit between header and canvas
        self.solve_controls.pack(before=canvas_frame, anchor=tk.W)

    # =============================================================================
    # STATE DISPATCH
    # =============================================================================

    def _dispatch(self, transition: Callable, *args, timed_message: bool = True):
        """Apply a state transition, persist the collection if it changed, refresh the UI."""
        old = self.state
        try:
            self.state = transition(old, *args)
        except ValueError as e:
            messagebox.showerror("Error", str(e))
            return

        if self.state.puzzles is not old.puzzles:
            self._persist()
        if self.state.message and self.state.message != old.message:
            self._schedule_message_clear(timed_message)
        self._render()

    def _persist(self):
        try:
            self.store.save(self.state.puzzles)
        except OSError as e:
            logger.error("Could not save puzzles to %s: %s", self.store.path, e)
            messagebox.showerror("Storage Error", f"Could not save puzzles:\n{e}")

    def _schedule_message_clear(self, timed: bool):
        if self._message_job is not None:
            self.root.after_cancel(self._message_job)
            self._message_job = None
        if timed:
            self._message_job = self.root.after(config.MESSAGE_TIMEOUT_MS, self._clear_message)

    def _clear_message(self):
        self._message_job = None
        self._dispatch(transitions.clear_message)

    def _load_collection(self):
        """Load the stored collection; a corrupt store starts an empty session."""
        try:
            puzzles = self.store.load()
        except (OSError, PuzzleFormatError) as e:
            logger.error("Could not load puzzles from %s: %s", self.store.path, e)
            messagebox.showerror("Storage Error", f"Could not load saved puzzles:\n{e}")
            puzzles = []
        self.state = transitions.load_puzzles(self.state, puzzles)
        self._render()

    # =============================================================================
    # RENDERING
    # =============================================================================

    def _render(self):
        state = self.state
        colors = config.THEMES[state.theme]

        self._render_puzzle_list()
        self._render_tab_controls()
        self.canvas.set_colors(colors)

        if state.active_tab == Mode.SOLVE:
            puzzle = state.selected_puzzle
            self.canvas.set_grid(state.solve_grid, puzzle.clues if puzzle else None)
            self.header_var.set(puzzle.name if puzzle else "No puzzle selected")
        else:
            creator = state.creator
            self.canvas.set_grid(creator.grid, compute_clues(creator.grid))
            self.header_var.set(f"Edit: {creator.name}" if creator.edit_mode else "Create New Puzzle")
            if self.name_var.get() != creator.name:
                self.name_var.set(creator.name)
            self.size_var.set(str(creator.size))

        self._render_message(colors)
        self._update_status()

    def _render_puzzle_list(self):
        ids = self.state.puzzle_ids()
        if ids != self._listed_ids or self.puzzle_list.size() != len(ids):
            self.puzzle_list.delete(0, tk.END)
            for puzzle in self.state.puzzles:
                self.puzzle_list.insert(tk.END, f"{puzzle.name} ({puzzle.size})")
            self._listed_ids = ids
        else:
            # Names may change without ids changing
            for index, puzzle in enumerate(self.state.puzzles):
                label = f"{puzzle.name} ({puzzle.size})"
                if self.puzzle_list.get(index) != label:
                    self.puzzle_list.delete(index)
                    self.puzzle_list.insert(index, label)

        self.puzzle_list.selection_clear(0, tk.END)
        if self.state.selected_id in ids:
            index = ids.index(self.state.selected_id)
            self.puzzle_list.selection_set(index)
            self.puzzle_list.see(index)

    def _render_tab_controls(self):
        creating = self.state.active_tab == Mode.CREATE
        if creating:
            self.solve_controls.pack_forget()
            self.creator_controls.pack(before=self.canvas.canvas.master, anchor=tk.W)
            # Size can only change for a new puzzle
            for widget in (self.size_label, self.size_box, self.save_button, self.new_button):
                widget.pack_forget()
            if not self.state.creator.edit_mode:
                self.size_label.pack(side=tk.LEFT)
                self.size_box.pack(side=tk.LEFT, padx=(2, 10))
            self.save_button.config(text="Update Puzzle" if self.state.creator.edit_mode else "Save Puzzle")
            self.save_button.pack(side=tk.LEFT, padx=(0, 5))
            self.new_button.pack(side=tk.LEFT)
        else:
            self.creator_controls.pack_forget()
            self.solve_controls.pack(before=self.canvas.canvas.master, anchor=tk.W)

        text = CREATE_INSTRUCTIONS if creating else SOLVE_INSTRUCTIONS
        self.help_text.config(state=tk.NORMAL)
        self.help_text.delete("1.0", tk.END)
        self.help_text.insert(tk.END, text)
        self.help_text.config(state=tk.DISABLED)

    def _render_message(self, colors):
        message = self.state.message
        self.message_var.set(message)
        if not message:
            self.message_label.pack_forget()
            return
        self.message_label.config(bg=colors['error'] if self.state.message_is_error else colors['success'])
        self.message_label.pack(before=self.canvas.canvas.master, anchor=tk.W, pady=(5, 0))

    def _update_status(self):
        """Update status bar with progress (solve) or validation (create)."""
        state = self.state
        if state.active_tab == Mode.SOLVE:
            puzzle = state.selected_puzzle
            if puzzle is None:
                self.enhanced_status_bar.update_main_status("Solve Mode | No puzzles loaded")
                self.enhanced_status_bar.update_puzzle_info()
                self.enhanced_status_bar.validation_var.set("")
                return
            self.enhanced_status_bar.update_main_status(f"Solve Mode | Puzzles: {len(state.puzzles)}")
            self.enhanced_status_bar.update_puzzle_info(puzzle.name, puzzle.size)
            self.enhanced_status_bar.update_progress(count_filled(state.solve_grid), count_filled(puzzle.grid))
        else:
            creator = state.creator
            issues = validate_creator_grid(creator.grid)
            warnings = [i for i in issues if i.severity == "warning"]
            infos = [i for i in issues if i.severity == "info"]
            mode_text = "Edit Mode" if creator.edit_mode else "Create Mode"
            self.enhanced_status_bar.update_main_status(f"{mode_text} | Filled: {count_filled(creator.grid)}")
            self.enhanced_status_bar.update_puzzle_info(creator.name, size_to_string(*grid_shape(creator.grid)))
            self.enhanced_status_bar.update_validation_status(len(warnings), len(infos))

    # =============================================================================
    # EVENT HANDLERS
    # =============================================================================

    def _on_pointer_down(self, row: int, col: int, button: MouseButton):
        self.state = transitions.pointer_down(self.state, row, col, button)
        self._render_grid_only()

    def _on_pointer_enter(self, row: int, col: int):
        new_state = transitions.pointer_enter(self.state, row, col)
        if new_state is not self.state:
            self.state = new_state
            self._render_grid_only()

    def _on_pointer_up(self):
        self.state = transitions.pointer_up(self.state)

    def _render_grid_only(self):
        """Cheap refresh while painting: canvas and status bar."""
        state = self.state
        if state.active_tab == Mode.SOLVE:
            puzzle = state.selected_puzzle
            self.canvas.set_grid(state.solve_grid, puzzle.clues if puzzle else None)
        else:
            self.canvas.set_grid(state.creator.grid, compute_clues(state.creator.grid))
        self._update_status()

    def _change_tab(self):
        self._dispatch(transitions.switch_tab, Mode(self.mode_var.get()))

    def _on_list_select(self, event=None):
        selection = self.puzzle_list.curselection()
        if not selection:
            return
        index = selection[0]
        if index >= len(self.state.puzzles):
            return
        puzzle_id = self.state.puzzles[index].id
        self._dispatch(transitions.select_puzzle, puzzle_id)

    def _on_name_change(self):
        if self.state.active_tab == Mode.CREATE and self.name_var.get() != self.state.creator.name:
            self.state = transitions.set_creator_name(self.state, self.name_var.get())
            creator = self.state.creator
            self.header_var.set(f"Edit: {creator.name}" if creator.edit_mode else "Create New Puzzle")

    def _change_creator_size(self):
        self._dispatch(transitions.change_creator_size, int(self.size_var.get()))

    def _save_creator_puzzle(self):
        self._dispatch(transitions.save_creator_puzzle)

    def _check_solution(self):
        self._dispatch(transitions.submit_solution, timed_message=False)

    # =============================================================================
    # FILE OPERATIONS
    # =============================================================================

    def _backup_puzzles(self):
        """Save all puzzles to a file."""
        filename = filedialog.asksaveasfilename(
            defaultextension=".json",
            initialfile=config.EXPORT_FILENAME,
            filetypes=[("JSON files", "*.json"), ("All files", "*.*")],
            title="Backup Puzzles"
        )
        if not filename:
            return
        try:
            export_puzzles(self.state.puzzles, filename)
        except OSError as e:
            logger.error("Backup to %s failed: %s", filename, e)
            self._dispatch(transitions.set_message, "Error backing up puzzles. Please try again.", True)
            return
        self._dispatch(transitions.set_message, "Puzzles backed up successfully!")

    def _read_collection_file(self, title: str, error_message: str):
        """Ask for a collection file and read it; None when cancelled or unreadable."""
        filename = filedialog.askopenfilename(
            filetypes=[("JSON files", "*.json"), ("All files", "*.*")],
            title=title
        )
        if not filename:
            return None
        try:
            return import_puzzles(filename)
        except (OSError, PuzzleFormatError) as e:
            logger.error("Reading %s failed: %s", filename, e)
            self._dispatch(transitions.set_message, f"{error_message} ({e})", True)
            return None

    def _restore_puzzles(self):
        """Load puzzles from a file, replacing the current collection."""
        restored = self._read_collection_file("Restore Puzzles", "Error restoring puzzles. Please try again.")
        if restored:
            self._dispatch(transitions.restore_puzzles, restored)

    def _import_puzzles(self):
        """Add puzzles from a file; ids already present are skipped."""
        imported = self._read_collection_file("Import Puzzles", "Error importing puzzles. Please try again.")
        if imported:
            self._dispatch(lambda s, p: transitions.import_puzzles(s, p)[0], imported)

    def _export_image(self):
        """Export the selected puzzle as a printable sheet."""
        puzzle = self.state.selected_puzzle
        if puzzle is None:
            messagebox.showwarning("No Puzzle", "No puzzle selected.")
            return

        filename = filedialog.asksaveasfilename(
            defaultextension=".png",
            initialfile=f"{puzzle.name}.png",
            filetypes=[("PNG image", "*.png"), ("PDF document", "*.pdf"), ("All files", "*.*")],
            title="Export Puzzle Sheet"
        )
        if not filename:
            return

        show_solution = messagebox.askyesno("Export Image", "Include the solution?")
        try:
            save_puzzle_sheet(puzzle, filename, show_solution=show_solution)
            messagebox.showinfo("Export Success", f"Puzzle exported to {filename}")
        except (OSError, ValueError) as e:
            logger.error("Image export to %s failed: %s", filename, e)
            messagebox.showerror("Export Error", f"Failed to export puzzle: {str(e)}")

    def run(self):
        """Start the application."""
        self.root.mainloop()

def main():
    """Main entry point."""
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        app = GriddlerApp()
        app.run()
    except Exception as e:
        print(f"Error starting application: {e}")
        import traceback
        traceback.print_exc()

if __name__ == "__main__":
    main()
