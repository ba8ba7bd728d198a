"""
NumPy line utilities for board games.

Lines are precomputed once per board shape as arrays of flat indices, so
winner detection and window scoring reduce to a single fancy-indexing
operation on board.ravel().
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

# (d_row, d_col) step of each line direction, in scan order
HORIZONTAL = (0, 1)
VERTICAL = (1, 0)
DIAGONAL = (1, 1)        # top-left to bottom-right
ANTI_DIAGONAL = (-1, 1)  # bottom-left to top-right

DIRECTIONS: Tuple[Tuple[int, int], ...] = (HORIZONTAL, VERTICAL, DIAGONAL, ANTI_DIAGONAL)


def in_bounds(shape: Tuple[int, int], r: int, c: int) -> bool:
    """Return True if (r, c) is inside a board of the given shape."""
    rows, cols = shape
    return 0 <= r < rows and 0 <= c < cols


def line_windows(rows: int, cols: int, length: int) -> np.ndarray:
    """
    Every straight run of `length` cells on a rows x cols board.

    Returns an int array of shape (N, length) holding flat indices,
    grouped by direction (horizontal, vertical, diagonal, anti-diagonal)
    and row-major by starting cell within each group. Windows never run
    off the board.
    """
    windows: List[List[int]] = []
    for dr, dc in DIRECTIONS:
        for r in range(rows):
            for c in range(cols):
                end_r = r + dr * (length - 1)
                end_c = c + dc * (length - 1)
                if not in_bounds((rows, cols), end_r, end_c):
                    continue
                windows.append([(r + i * dr) * cols + (c + i * dc) for i in range(length)])
    return np.array(windows, dtype=np.intp)


def winning_value(flat: np.ndarray, windows: np.ndarray, value: int) -> bool:
    """Return True if any window is filled entirely with `value`."""
    return bool(np.any(np.all(flat[windows] == value, axis=1)))


def first_complete_line(flat: np.ndarray, windows: np.ndarray) -> int:
    """
    Cell value of the first window (in table order) whose cells are all
    equal and non-empty, or 0 if there is none.
    """
    cells = flat[windows]
    complete = (cells[:, 0] != 0) & np.all(cells == cells[:, :1], axis=1)
    hits = np.flatnonzero(complete)
    return int(cells[hits[0], 0]) if hits.size else 0


def board_full(board: np.ndarray) -> bool:
    """Return True if the board has no empty cells."""
    return not np.any(board == 0)
