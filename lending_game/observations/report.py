"""
observations/report.py

Watch. Count. Average.

The simulation does not format anything itself. It hands
aggregates to a reporter and moves on.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, TextIO, Tuple, TYPE_CHECKING
import sys

import numpy as np

from lending_game.core.agent import format_energy

if TYPE_CHECKING:
    from lending_game.core.agent import Agent


@dataclass(frozen=True)
class StrategyStats:
    """Living count and mean energy for one strategy label."""
    label: str
    count: int
    mean_energy: float


def aggregate_stats(agents: Sequence[Agent]) -> List[StrategyStats]:
    """Group agents by strategy label. Sorted by label, ascending."""
    energies: Dict[str, List[float]] = defaultdict(list)
    for agent in agents:
        energies[agent.type_label].append(agent.energy)

    return [
        StrategyStats(label, len(values), float(np.mean(values)))
        for label, values in sorted(energies.items())
    ]


class Reporter(ABC):
    """
    Receives what the simulation has to say.

    Write-only: nothing is ever read back.
    """

    @abstractmethod
    def report_population(self, agents: Sequence[Agent]) -> None:
        """Full listing of agents, once, before the first round."""
        pass

    @abstractmethod
    def report_round(self, round_index: int, stats: List[StrategyStats]) -> None:
        """Aggregates at the start of a round, before any encounter."""
        pass

    def report_final(self, stats: List[StrategyStats]) -> None:
        """Aggregates after the last round. Optional."""
        pass


class NullReporter(Reporter):
    """Says nothing."""

    def report_population(self, agents: Sequence[Agent]) -> None:
        pass

    def report_round(self, round_index: int, stats: List[StrategyStats]) -> None:
        pass


class ConsoleReporter(Reporter):
    """Plain text, one block per round."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream or sys.stdout)

    def report_population(self, agents: Sequence[Agent]) -> None:
        self._print("[" + ", ".join(str(agent) for agent in agents) + "]")

    def report_round(self, round_index: int, stats: List[StrategyStats]) -> None:
        self._print(f"Round {round_index}.")
        self._print_stats(stats)

    def report_final(self, stats: List[StrategyStats]) -> None:
        self._print("Final.")
        self._print_stats(stats)

    def _print_stats(self, stats: List[StrategyStats]) -> None:
        for s in stats:
            self._print(f"{s.label}:")
            self._print(f" - count: {s.count}")
            self._print(f" - mean energy: {format_energy(s.mean_energy)}")
        self._print()


class RecordingReporter(Reporter):
    """Keeps everything in memory, for studies and tests."""

    def __init__(self):
        self.population: List[Tuple[int, float, str]] = []
        self.rounds: List[Tuple[int, List[StrategyStats]]] = []
        self.final: Optional[List[StrategyStats]] = None

    def report_population(self, agents: Sequence[Agent]) -> None:
        self.population = [(a.id, a.energy, a.type_label) for a in agents]

    def report_round(self, round_index: int, stats: List[StrategyStats]) -> None:
        self.rounds.append((round_index, list(stats)))

    def report_final(self, stats: List[StrategyStats]) -> None:
        self.final = list(stats)

    def label_history(self, label: str) -> List[Tuple[int, int, float]]:
        """(round, count, mean_energy) for one label; missing rounds are skipped."""
        history = []
        for round_index, stats in self.rounds:
            for s in stats:
                if s.label == label:
                    history.append((round_index, s.count, s.mean_energy))
        return history
