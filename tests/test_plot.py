import pytest

from game_of_life.plot import save_run_figure
from game_of_life.sequential import simulate


def test_save_run_figure(tmp_path):
    snapshots = simulate([[0, 1, 0], [0, 1, 0], [0, 1, 0]], 8)
    output = tmp_path / "blinker.png"
    assert save_run_figure(snapshots, [3] * len(snapshots), output) == output
    assert output.stat().st_size > 0


def test_save_run_figure_needs_snapshots(tmp_path):
    with pytest.raises(ValueError):
        save_run_figure([], [], tmp_path / "empty.png")


def test_save_run_figure_checks_population_length(tmp_path):
    snapshots = simulate([[1, 1], [1, 1]], 2)
    with pytest.raises(ValueError):
        save_run_figure(snapshots, [4, 4], tmp_path / "bad.png")
