"""
Strategies: the behaviors agents bring to the table.

- ReputationTracker: keeps a running ledger per peer, lends to the worthy
- RandomizedStrategy: coin flips, no memory
- Presets: always_defect, always_cooperate, coin_flip
"""

from .reputation import ReputationTracker
from .randomized import (
    RandomizedStrategy,
    always_defect,
    always_cooperate,
    coin_flip,
)
from .registry import STRATEGY_REGISTRY, make_factory, register_strategy

__all__ = [
    "ReputationTracker",
    "RandomizedStrategy",
    "always_defect",
    "always_cooperate",
    "coin_flip",
    "STRATEGY_REGISTRY",
    "make_factory",
    "register_strategy",
]
