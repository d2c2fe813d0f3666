"""Conway's Game of Life on a bounded, non-wrapping grid."""

from game_of_life.grid import (
    ALIVE,
    DEAD,
    INITIAL_GRID,
    CoordinateOutOfRangeError,
    GridError,
    InvalidGridError,
)
from game_of_life.rules import count_live_neighbors, next_generation, next_generation_numpy
from game_of_life.simulation import AutoRunner, Simulation

__all__ = [
    "ALIVE",
    "DEAD",
    "INITIAL_GRID",
    "AutoRunner",
    "CoordinateOutOfRangeError",
    "GridError",
    "InvalidGridError",
    "Simulation",
    "count_live_neighbors",
    "next_generation",
    "next_generation_numpy",
]
