"""
lending_game/config.py

Configuration for a single run.

Everything a run needs is set here, at birth, and honored throughout:
payoffs, roster, round count, starting energy, seed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

import numpy as np
import yaml

from lending_game.core.agent import DEFAULT_INITIAL_ENERGY
from lending_game.core.errors import ConfigError
from lending_game.core.params import GameParams
from lending_game.environments.simulation import (
    AgentDefinition,
    LendingSimulation,
    RoundRecord,
    generate_agents,
)
from lending_game.observations.report import Reporter
from lending_game.strategies.registry import STRATEGY_REGISTRY, make_factory

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "configs" / "default.yaml"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _mapping(value: Any, what: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{what} must be a mapping, got {type(value).__name__}")
    return value


@dataclass
class RosterEntry:
    """`count` agents playing the registered strategy `strategy`."""
    strategy: str
    count: int
    options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.strategy not in STRATEGY_REGISTRY:
            raise ConfigError(
                f"Unknown strategy: {self.strategy}. "
                f"Available: {sorted(STRATEGY_REGISTRY)}"
            )
        if not _is_int(self.count) or self.count < 0:
            raise ConfigError(f"Roster count must be a non-negative integer, got {self.count!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RosterEntry":
        data = _mapping(data, "Roster entry")
        if "strategy" not in data or "count" not in data:
            raise ConfigError(f"Roster entry needs 'strategy' and 'count': {data}")
        if not isinstance(data["strategy"], str):
            raise ConfigError(f"Strategy name must be a string, got {data['strategy']!r}")
        return cls(
            strategy=data["strategy"],
            count=data["count"],
            options=dict(_mapping(data.get("options"), "Roster options")),
        )


@dataclass
class SimulationConfig:
    """The unchanging setup of a run."""
    params: GameParams = field(default_factory=GameParams)
    roster: List[RosterEntry] = field(default_factory=list)
    rounds: int = 20
    initial_energy: float = DEFAULT_INITIAL_ENERGY
    seed: Optional[int] = None

    def __post_init__(self):
        if not _is_int(self.rounds) or self.rounds < 0:
            raise ConfigError(f"Round count must be a non-negative integer, got {self.rounds!r}")
        if self.seed is not None and (not _is_int(self.seed) or self.seed < 0):
            raise ConfigError(f"Seed must be a non-negative integer or null, got {self.seed!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")
        roster = data.get("roster") or []
        if not isinstance(roster, list):
            raise ConfigError("'roster' must be a list of entries")

        try:
            params = GameParams.from_dict(_mapping(data.get("params"), "'params'"))
            initial_energy = float(data.get("initial_energy", DEFAULT_INITIAL_ENERGY))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Payoffs and initial energy must be numbers: {e}") from e

        return cls(
            params=params,
            roster=[RosterEntry.from_dict(entry) for entry in roster],
            rounds=data.get("rounds", 20),
            initial_energy=initial_energy,
            seed=data.get("seed"),
        )

    def build_roster(self) -> List[AgentDefinition]:
        """(factory, count) pairs; one seed sequence feeds every factory."""
        seeds = np.random.SeedSequence(self.seed)
        return [
            (make_factory(entry.strategy, self.params, child, entry.options), entry.count)
            for entry, child in zip(self.roster, seeds.spawn(len(self.roster)))
        ]

    def build_simulation(self, reporter: Optional[Reporter] = None) -> LendingSimulation:
        agents = generate_agents(self.build_roster(), self.initial_energy)
        return LendingSimulation(agents, self.params, reporter)


def load_config(config_path: Optional[Union[str, Path]] = None) -> SimulationConfig:
    """Load a run configuration from YAML. Defaults to the packaged roster."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {config_path}: {e}") from e

    logger.info(f"Loaded configuration from {config_path}")
    return SimulationConfig.from_dict(data or {})


def run_simulation(
    config: SimulationConfig,
    reporter: Optional[Reporter] = None
) -> List[RoundRecord]:
    """Build the population and run it for the configured rounds."""
    simulation = config.build_simulation(reporter)
    return simulation.run(config.rounds)
