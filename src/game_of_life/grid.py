"""
Grid helpers for Conway's Game of Life.

A grid is a rectangular NumPy array of uint8 cells (0 = dead, 1 = alive).
Every function here returns a new array and leaves its input untouched.
"""

import numpy as np

DEAD = 0
ALIVE = 1

# Starting configuration shown when the app opens and restored on reset
INITIAL_GRID = (
    (0, 1, 0, 0, 1),
    (0, 1, 0, 0, 1),
    (0, 1, 0, 0, 1),
    (0, 0, 0, 0, 0),
    (1, 1, 1, 0, 0),
)

PATTERNS = {
    "blinker": (
        (0, 1, 0),
        (0, 1, 0),
        (0, 1, 0),
    ),
    "block": (
        (1, 1),
        (1, 1),
    ),
    # Glider pattern
    #   #
    #     #
    # # # #
    "glider": (
        (0, 1, 0),
        (0, 0, 1),
        (1, 1, 1),
    ),
}


class GridError(ValueError):
    """Base class for malformed grid input."""


class InvalidGridError(GridError):
    pass


class CoordinateOutOfRangeError(GridError):
    pass


def as_array(grid) -> np.ndarray:
    """View grid as a 2D array without copying or checking cell values."""
    try:
        array = np.asarray(grid)
    except ValueError as e:
        raise InvalidGridError("grid rows must all have the same length") from e
    if array.ndim != 2:
        raise InvalidGridError(f"grid must be two-dimensional, got {array.ndim} dimension(s)")
    return array


def validate_grid(grid) -> np.ndarray:
    """
    Return a uint8 copy of grid after checking it is a usable grid.

    Raises InvalidGridError for ragged rows, an empty dimension or any
    cell value other than 0/1.
    """
    array = as_array(grid)
    rows, cols = array.shape
    if rows < 1 or cols < 1:
        raise InvalidGridError(f"grid must be at least 1x1, got {rows}x{cols}")
    if not np.isin(array, (DEAD, ALIVE)).all():
        raise InvalidGridError("grid cells must be 0 or 1")
    return array.astype(np.uint8)


def check_coordinates(grid, row: int, col: int) -> None:
    rows, cols = as_array(grid).shape
    if not (0 <= row < rows and 0 <= col < cols):
        raise CoordinateOutOfRangeError(
            f"cell ({row}, {col}) is outside the {rows}x{cols} grid"
        )


def empty_grid(rows: int, cols: int) -> np.ndarray:
    if rows < 1 or cols < 1:
        raise InvalidGridError(f"grid must be at least 1x1, got {rows}x{cols}")
    return np.zeros((rows, cols), dtype=np.uint8)


def init_random(rows: int, cols: int, density: float = 0.3, seed: int | None = None) -> np.ndarray:
    """Initialize grid with random values."""
    if rows < 1 or cols < 1:
        raise InvalidGridError(f"grid must be at least 1x1, got {rows}x{cols}")
    if seed is not None:
        np.random.seed(seed)
    return (np.random.random((rows, cols)) < density).astype(np.uint8)


def toggle_cell(grid, row: int, col: int) -> np.ndarray:
    """Return a copy of grid with the cell at (row, col) flipped."""
    toggled = validate_grid(grid)
    check_coordinates(toggled, row, col)
    toggled[row, col] = DEAD if toggled[row, col] == ALIVE else ALIVE
    return toggled


def place_pattern(grid, pattern, row: int, col: int) -> np.ndarray:
    """
    Return a copy of grid with pattern's live cells stamped at (row, col).

    (row, col) is the pattern's top-left corner. Dead cells of the pattern
    leave the grid as it was. The whole pattern must fit inside the grid.
    """
    stamped = validate_grid(grid)
    shape = validate_grid(pattern)
    height, width = shape.shape
    rows, cols = stamped.shape
    if row < 0 or col < 0 or row + height > rows or col + width > cols:
        raise CoordinateOutOfRangeError(
            f"{height}x{width} pattern at ({row}, {col}) does not fit the {rows}x{cols} grid"
        )
    stamped[row:row + height, col:col + width] |= shape
    return stamped


def count_live_cells(grid) -> int:
    """Count total live cells in the grid."""
    return int(np.sum(as_array(grid) == ALIVE))


def format_grid(grid) -> str:
    array = as_array(grid)
    return "\n".join(
        "".join('#' if cell == ALIVE else '.' for cell in row)
        for row in array
    )


def print_grid(grid) -> None:
    """Print the grid to console."""
    print("\033[H", end="")  # Move cursor to home position
    print(format_grid(grid))
    print()
