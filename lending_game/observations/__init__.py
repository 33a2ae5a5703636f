"""
Observations: what the simulation tells the outside world.

- report: per-strategy aggregates and the collaborators that receive them
- visualize: optional energy plots (matplotlib)
"""

from .report import (
    StrategyStats,
    aggregate_stats,
    Reporter,
    NullReporter,
    ConsoleReporter,
    RecordingReporter,
)

__all__ = [
    "StrategyStats",
    "aggregate_stats",
    "Reporter",
    "NullReporter",
    "ConsoleReporter",
    "RecordingReporter",
]
