"""
Conway's Game of Life - Headless Console Runner

Usage: python -m game_of_life.sequential [generations] [visualize]
       python -m game_of_life.sequential --random [width] [height] [generations]
       python -m game_of_life.sequential --plot [generations] [output]
"""

import sys
import time

from game_of_life.grid import INITIAL_GRID, count_live_cells, init_random, print_grid, validate_grid
from game_of_life.rules import next_generation, next_generation_numpy


def simulate(grid, generations: int, use_numpy: bool = False) -> list:
    """Return the grid followed by each of the next `generations` generations."""
    if generations < 0:
        raise ValueError(f"generations cannot be negative, got {generations}")
    step_func = next_generation_numpy if use_numpy else next_generation
    snapshots = [validate_grid(grid)]
    for _ in range(generations):
        snapshots.append(step_func(snapshots[-1]))
    return snapshots


def run_simulation(grid, generations: int, visualize: bool = False,
                   use_numpy: bool = False, delay: float = 0.1) -> dict:
    """
    Run the Game of Life simulation and report on it.

    Args:
        grid: Starting grid (any rectangular 0/1 array-like)
        generations: Number of generations to simulate
        visualize: Whether to print each generation
        use_numpy: Use vectorized NumPy or the pure Python stepper
        delay: Pause between printed generations, in seconds

    Returns:
        Dictionary with statistics, the population per generation and the
        final grid
    """
    if generations < 0:
        raise ValueError(f"generations cannot be negative, got {generations}")
    grid = validate_grid(grid)
    height, width = grid.shape

    print("Game of Life Console Runner")
    print(f"Grid size: {width} x {height}")
    print(f"Generations: {generations}")
    print(f"Using {'NumPy vectorized' if use_numpy else 'pure Python'} implementation")
    print()

    initial_live = count_live_cells(grid)
    print(f"Initial live cells: {initial_live}")

    if visualize:
        print("\033[2J", end="")  # Clear screen
        print_grid(grid)

    step_func = next_generation_numpy if use_numpy else next_generation
    populations = [initial_live]

    start_time = time.perf_counter()
    for gen in range(generations):
        grid = step_func(grid)
        populations.append(count_live_cells(grid))

        if visualize:
            print_grid(grid)
            print(f"Generation: {gen + 1}, Live cells: {populations[-1]}")
            time.sleep(delay)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    print("\nSimulation complete!")
    print(f"Final live cells: {populations[-1]}")
    print(f"Total time: {elapsed_ms:.2f} ms")

    return {
        "width": width,
        "height": height,
        "generations": generations,
        "initial_live_cells": initial_live,
        "final_live_cells": populations[-1],
        "populations": populations,
        "total_time_ms": elapsed_ms,
        "final_grid": grid,
    }


def main(argv: list[str] | None = None):
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] == "--plot":
        from game_of_life.plot import save_run_figure

        generations = int(args[1]) if len(args) > 1 else 8
        output = args[2] if len(args) > 2 else "game_of_life.png"
        snapshots = simulate(INITIAL_GRID, generations)
        save_run_figure(snapshots, [count_live_cells(s) for s in snapshots], output)
        print(f"Figure saved to {output}")
        return

    if args and args[0] == "--random":
        width = int(args[1]) if len(args) > 1 else 64
        height = int(args[2]) if len(args) > 2 else 64
        generations = int(args[3]) if len(args) > 3 else 100
        run_simulation(init_random(height, width, seed=42), generations, use_numpy=True)
        return

    generations = int(args[0]) if len(args) > 0 else 10
    visualize = bool(int(args[1])) if len(args) > 1 else False
    run_simulation(INITIAL_GRID, generations, visualize=visualize)


if __name__ == "__main__":
    main()
