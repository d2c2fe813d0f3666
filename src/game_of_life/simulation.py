"""
Simulation state for the interactive demo.

Simulation owns the current grid snapshot and the auto-run schedule; the
window (or a test) drives it by calling step/toggle/start/pause/reset and
by feeding elapsed time to advance().
"""

import numpy as np

from game_of_life.grid import INITIAL_GRID, PATTERNS, place_pattern, toggle_cell, validate_grid
from game_of_life.rules import next_generation

DEFAULT_INTERVAL_MS = 500
MIN_INTERVAL_MS = 50
MAX_INTERVAL_MS = 2000


class AutoRunner:
    """
    Fixed-period schedule for automatic generation steps.

    Elapsed time is accumulated while the runner is active and converted to
    whole ticks by tick(). stop() drops whatever time had accumulated, so a
    restart waits a full interval before the first tick.
    """

    def __init__(self, interval_ms: int = DEFAULT_INTERVAL_MS):
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms} ms")
        self.interval_ms = DEFAULT_INTERVAL_MS
        self.set_interval(interval_ms)
        self.active = False
        self.elapsed_ms = 0

    def start(self) -> bool:
        if self.active:
            return False  # already scheduled
        self.active = True
        self.elapsed_ms = 0
        return True

    def stop(self):
        self.active = False
        self.elapsed_ms = 0

    def set_interval(self, interval_ms: int) -> int:
        self.interval_ms = max(MIN_INTERVAL_MS, min(interval_ms, MAX_INTERVAL_MS))
        return self.interval_ms

    def tick(self, elapsed_ms: float) -> int:
        """Return how many periods completed during elapsed_ms."""
        if not self.active:
            return 0
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time cannot be negative, got {elapsed_ms} ms")
        self.elapsed_ms += elapsed_ms
        due = int(self.elapsed_ms // self.interval_ms)
        self.elapsed_ms -= due * self.interval_ms
        return due


class Simulation:
    def __init__(self, initial=INITIAL_GRID, interval_ms: int = DEFAULT_INTERVAL_MS):
        self.initial = validate_grid(initial)  # private copy, never handed out
        self.grid = self.initial.copy()
        self.generation = 0
        self.runner = AutoRunner(interval_ms)

    @property
    def rows(self) -> int:
        return self.initial.shape[0]

    @property
    def cols(self) -> int:
        return self.initial.shape[1]

    @property
    def running(self) -> bool:
        return self.runner.active

    def step(self) -> np.ndarray:
        self.grid = next_generation(self.grid)
        self.generation += 1
        return self.grid

    def toggle(self, row: int, col: int) -> np.ndarray:
        self.grid = toggle_cell(self.grid, row, col)
        return self.grid

    def stamp(self, pattern_name: str, row: int, col: int) -> np.ndarray:
        if pattern_name not in PATTERNS:
            raise ValueError(
                f"unknown pattern {pattern_name!r}, expected one of {', '.join(sorted(PATTERNS))}"
            )
        self.grid = place_pattern(self.grid, PATTERNS[pattern_name], row, col)
        return self.grid

    def start(self) -> bool:
        return self.runner.start()

    def pause(self):
        self.runner.stop()

    def reset(self):
        self.pause()
        self.grid = self.initial.copy()
        self.generation = 0

    def advance(self, elapsed_ms: float) -> int:
        """Run every auto-step that came due in elapsed_ms."""
        steps = self.runner.tick(elapsed_ms)
        for _ in range(steps):
            self.step()
        return steps
