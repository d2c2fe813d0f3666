"""
Conway's Game of Life - transition rules

Rules:
1. Any live cell with fewer than two live neighbors dies (underpopulation)
2. Any live cell with two or three live neighbors lives on
3. Any live cell with more than three live neighbors dies (overpopulation)
4. Any dead cell with exactly three live neighbors becomes alive (reproduction)

The grid does not wrap: cells outside the edges count as dead.
"""

import numpy as np

from game_of_life.grid import ALIVE, DEAD, as_array, check_coordinates, validate_grid


def count_live_neighbors(grid, row: int, col: int) -> int:
    """
    Count live neighbors for the cell at (row, col).
    Offsets that fall outside the grid are skipped, so edge cells have
    five candidates and corner cells three.
    """
    grid = as_array(grid)
    check_coordinates(grid, row, col)
    rows, cols = grid.shape

    count = 0
    for dr in range(-1, 2):
        for dc in range(-1, 2):
            if dr == 0 and dc == 0:
                continue  # Skip the cell itself
            r = row + dr
            c = col + dc
            if 0 <= r < rows and 0 <= c < cols and grid[r, c] == ALIVE:
                count += 1
    return count


def next_generation(grid) -> np.ndarray:
    """
    Compute the next generation of the grid.
    Pure Python implementation (slow but clear). Neighbor counts are read
    from the input only; the result is written to a fresh array.
    """
    current_grid = validate_grid(grid)
    rows, cols = current_grid.shape
    next_grid = np.zeros_like(current_grid)

    for row in range(rows):
        for col in range(cols):
            neighbors = count_live_neighbors(current_grid, row, col)

            if current_grid[row, col] == ALIVE:
                # Live cell: dies below two or above three neighbors
                next_grid[row, col] = ALIVE if neighbors in (2, 3) else DEAD
            else:
                # Dead cell
                next_grid[row, col] = ALIVE if neighbors == 3 else DEAD

    return next_grid


def next_generation_numpy(grid) -> np.ndarray:
    """
    Compute the next generation using NumPy operations.
    Vectorized implementation; a zero border stands in for the missing
    neighbors past the edges.
    """
    current_grid = validate_grid(grid)
    rows, cols = current_grid.shape
    padded = np.pad(current_grid, 1, mode="constant", constant_values=DEAD)

    neighbors = np.zeros(current_grid.shape, dtype=np.uint8)
    for dr in range(-1, 2):
        for dc in range(-1, 2):
            if dr == 0 and dc == 0:
                continue
            neighbors += padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + cols]

    # Birth: dead cell with exactly 3 neighbors
    birth = (current_grid == DEAD) & (neighbors == 3)
    # Survival: live cell with 2 or 3 neighbors
    survive = (current_grid == ALIVE) & ((neighbors == 2) | (neighbors == 3))

    return (birth | survive).astype(np.uint8)
