"""
Core components of the lending game.

- params: payoff constants
- strategy: the decision contract every behavior implements
- agent: identity, energy, and an owned strategy
- errors: what can go wrong
"""

from .agent import Agent
from .errors import (
    LendingGameError,
    StrategyConstructionError,
    InvariantViolation,
    ConfigError,
)
from .params import GameParams, DEFAULT_PARAMS
from .strategy import Strategy, LendDecision, BorrowDecision

__all__ = [
    "Agent",
    "LendingGameError",
    "StrategyConstructionError",
    "InvariantViolation",
    "ConfigError",
    "GameParams",
    "DEFAULT_PARAMS",
    "Strategy",
    "LendDecision",
    "BorrowDecision",
]
