"""
Figure export for a Game of Life run: the first generations as image panels
with the live-cell population underneath.
"""

import matplotlib.pyplot as plt
from matplotlib.gridspec import GridSpec

from game_of_life.grid import as_array

COLORS = {
    'primary': '#2E86AB',
    'success': '#06A77D',
}

TITLE_FONT = {'family': 'sans-serif', 'weight': 'bold', 'size': 14}
LABEL_FONT = {'family': 'sans-serif', 'weight': 'normal', 'size': 11}
MAX_PANELS = 6


def save_run_figure(snapshots, populations, output, dpi: int = 120):
    """Save snapshot panels and the population curve to `output`."""
    if not snapshots:
        raise ValueError("at least one snapshot is required")
    if len(populations) != len(snapshots):
        raise ValueError(
            f"got {len(populations)} population values for {len(snapshots)} snapshots"
        )

    panels = snapshots[:MAX_PANELS]
    fig = plt.figure(figsize=(2.2 * len(panels), 5.5))
    gs = GridSpec(2, len(panels), figure=fig, height_ratios=[1, 1.2])

    for i, grid in enumerate(panels):
        ax = fig.add_subplot(gs[0, i])
        ax.imshow(as_array(grid), cmap="binary", interpolation="nearest", vmin=0, vmax=1)
        ax.set_title(f"Gen {i}", **LABEL_FONT)
        ax.set_xticks([])
        ax.set_yticks([])

    ax = fig.add_subplot(gs[1, :])
    ax.plot(range(len(populations)), populations, marker='o',
            color=COLORS['primary'], markerfacecolor=COLORS['success'])
    ax.set_xlabel("Generation", **LABEL_FONT)
    ax.set_ylabel("Live cells", **LABEL_FONT)
    ax.grid(True, alpha=0.3)

    fig.suptitle("Conway's Game of Life", **TITLE_FONT)
    fig.tight_layout()
    fig.savefig(output, dpi=dpi)
    plt.close(fig)
    return output
