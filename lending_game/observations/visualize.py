"""
observations/visualize.py

You cannot understand what you do not watch.

Mean energy and head count per strategy, round by round.
matplotlib is imported lazily; nothing else in the package needs it.
"""

from __future__ import annotations
from typing import Dict, Optional, Sequence, Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from lending_game.environments.simulation import RoundRecord


def energy_series(
    records: Sequence[RoundRecord]
) -> Dict[str, Tuple[np.ndarray, np.ndarray, np.ndarray]]:
    """
    Per label: (rounds, counts, mean energies) as arrays.

    Rounds where a label has no living agents count as zero agents
    and NaN energy, so extinct strategies show as a gap.
    """
    labels = sorted({s.label for r in records for s in r.stats})
    rounds = np.array([r.round for r in records])
    series = {}

    for label in labels:
        counts = np.zeros(len(records), dtype=int)
        means = np.full(len(records), np.nan)
        for i, record in enumerate(records):
            for s in record.stats:
                if s.label == label:
                    counts[i] = s.count
                    means[i] = s.mean_energy
        series[label] = (rounds, counts, means)

    return series


class EnergyPlot:
    """Two stacked panels: mean energy above, living count below."""

    def __init__(self, figsize: tuple = (10, 8)):
        self.figsize = figsize
        self._plt = None
        self._fig = None
        self._axes = None

    def _setup_plot(self):
        import matplotlib.pyplot as plt
        self._plt = plt
        self._fig, self._axes = plt.subplots(2, 1, figsize=self.figsize, sharex=True)

    def render(self, records: Sequence[RoundRecord], title: Optional[str] = None) -> None:
        if self._plt is None:
            self._setup_plot()

        energy_ax, count_ax = self._axes
        energy_ax.clear()
        count_ax.clear()

        for label, (rounds, counts, means) in energy_series(records).items():
            energy_ax.plot(rounds, means, label=label)
            count_ax.step(rounds, counts, where='post', label=label)

        energy_ax.set_ylabel("mean energy")
        count_ax.set_ylabel("living agents")
        count_ax.set_xlabel("round")
        energy_ax.legend(loc='best')
        if title:
            energy_ax.set_title(title)

    def save(self, path: str) -> None:
        if self._fig is not None:
            self._fig.savefig(path, dpi=150)

    def show(self) -> None:
        if self._plt is not None:
            self._plt.show()

    def close(self) -> None:
        if self._plt is not None:
            self._plt.close(self._fig)


def plot_energy_history(
    records: Sequence[RoundRecord],
    save_path: Optional[str] = None,
    title: Optional[str] = None
) -> None:
    """Render a run's records; save to disk if a path is given, else show."""
    plot = EnergyPlot()
    try:
        plot.render(records, title=title)
        if save_path:
            plot.save(save_path)
        else:
            plot.show()
    finally:
        plot.close()
