"""
strategies/registry.py

Strategies by name, so rosters can live in configuration files.

A builder takes the run's payoffs, a seed, and free-form options.
A factory is a builder with all of that bound: call it, get a fresh strategy.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional
import numpy as np

from lending_game.core.errors import ConfigError
from lending_game.core.params import GameParams, DEFAULT_PARAMS
from lending_game.core.strategy import Strategy

from .randomized import RandomizedStrategy, always_defect, always_cooperate, coin_flip
from .reputation import ReputationTracker

StrategyBuilder = Callable[..., Strategy]
StrategyFactory = Callable[[], Strategy]


def _reputation(params: GameParams, seed: Any, **options: Any) -> Strategy:
    return ReputationTracker(params=params, **options)


def _randomized(params: GameParams, seed: Any, **options: Any) -> Strategy:
    return RandomizedStrategy(seed=seed, **options)


STRATEGY_REGISTRY: Dict[str, StrategyBuilder] = {
    "reputation_tracker": _reputation,
    "randomized": _randomized,
    "always_defect": lambda params, seed, **options: always_defect(seed=seed, **options),
    "always_cooperate": lambda params, seed, **options: always_cooperate(seed=seed, **options),
    "coin_flip": lambda params, seed, **options: coin_flip(seed=seed, **options),
}


def register_strategy(name: str, builder: StrategyBuilder) -> None:
    """Make a custom strategy available to configuration files."""
    if name in STRATEGY_REGISTRY:
        raise ConfigError(f"Strategy already registered: {name}")
    STRATEGY_REGISTRY[name] = builder


def make_factory(
    name: str,
    params: GameParams = DEFAULT_PARAMS,
    seed_sequence: Optional[np.random.SeedSequence] = None,
    options: Optional[Dict[str, Any]] = None
) -> StrategyFactory:
    """
    Bind a registered strategy into a zero-argument factory.

    Every call spawns a fresh child seed, so each strategy instance
    gets its own independent stream.
    """
    if name not in STRATEGY_REGISTRY:
        raise ConfigError(
            f"Unknown strategy: {name}. Available: {sorted(STRATEGY_REGISTRY)}"
        )

    builder = STRATEGY_REGISTRY[name]
    seeds = seed_sequence if seed_sequence is not None else np.random.SeedSequence()
    options = dict(options or {})

    def factory() -> Strategy:
        return builder(params, seeds.spawn(1)[0], **options)

    factory.__name__ = name
    return factory
