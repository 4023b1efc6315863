"""
Size descriptor helpers ("10x10", "15x20") used in puzzle JSON.
"""
from typing import Tuple

def size_to_string(rows: int, cols: int) -> str:
    """Convert grid dimensions to the "RxC" descriptor stored in JSON."""
    return f"{rows}x{cols}"

def string_to_size(size_str: str) -> Tuple[int, int]:
    """
    Convert an "RxC" (or bare "N") descriptor back to (rows, cols).

    Raises:
        ValueError: If the descriptor is not two positive integers
    """
    parts = size_str.lower().replace(" ", "").split("x")
    if len(parts) == 1:
        parts = parts * 2
    if len(parts) != 2:
        raise ValueError(f"Invalid size descriptor: {size_str!r}")
    rows, cols = int(parts[0]), int(parts[1])
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Size must be positive: {size_str!r}")
    return rows, cols

def subgrid_size(size: int) -> int:
    """Spacing of the bold guide lines for a grid side of `size` cells."""
    if size % 5 == 0:
        return 5
    if size % 4 == 0:
        return 4
    return 5
