"""
environments/simulation.py

Rounds of everyone meeting everyone.

Each round:
1. Report what the population looks like
2. Every unordered pair meets twice, once in each role
3. The exhausted are removed

The order of meetings is fixed. Reputation depends on it.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple
import logging

import numpy as np

from lending_game.core.agent import Agent, DEFAULT_INITIAL_ENERGY
from lending_game.core.errors import InvariantViolation, StrategyConstructionError
from lending_game.core.params import GameParams, DEFAULT_PARAMS
from lending_game.core.strategy import Strategy
from lending_game.observations.report import (
    Reporter,
    NullReporter,
    StrategyStats,
    aggregate_stats,
)

from .encounter import EncounterOutcome, encounter

logger = logging.getLogger(__name__)

AgentDefinition = Tuple[Callable[[], Strategy], int]


@dataclass
class RoundRecord:
    """What the population looked like at one report point."""
    round: int
    stats: List[StrategyStats]
    energies: Dict[int, float] = field(default_factory=dict)
    outcomes: Dict[str, int] = field(default_factory=dict)

    @property
    def population(self) -> int:
        return len(self.energies)


def generate_agents(
    agent_definitions: Iterable[AgentDefinition],
    initial_energy: float = DEFAULT_INITIAL_ENERGY
) -> List[Agent]:
    """
    Build a population from (strategy_factory, count) pairs.

    Ids are handed out in roster order and never repeat.
    A factory that fails aborts the whole build.
    """
    agents: List[Agent] = []
    next_id = 0

    for factory, count in agent_definitions:
        if count < 0:
            raise ValueError(f"Agent count must be non-negative, got {count}")
        for _ in range(count):
            try:
                strategy = factory()
            except Exception as e:
                name = getattr(factory, "__name__", repr(factory))
                raise StrategyConstructionError(
                    f"Strategy factory {name} failed: {e}"
                ) from e
            if not isinstance(strategy, Strategy):
                raise StrategyConstructionError(
                    f"Strategy factory returned {type(strategy).__name__}, not a Strategy"
                )
            agents.append(Agent(next_id, strategy, initial_energy))
            next_id += 1

    logger.info(f"Generated {len(agents)} agents")
    return agents


class LendingSimulation:
    """
    Drives the lending game round by round.

    Principles embodied:
    - Determinism: pairs meet in ascending index order, lender first
    - Locality of mutation: two agents at a time, addressed by index
    - Graceful extinction: an empty population just reports nothing
    """

    def __init__(
        self,
        agents: Sequence[Agent],
        params: GameParams = DEFAULT_PARAMS,
        reporter: Optional[Reporter] = None
    ):
        ids = [agent.id for agent in agents]
        duplicates = sorted(i for i, n in Counter(ids).items() if n > 1)
        if duplicates:
            raise InvariantViolation(f"Duplicate agent ids: {duplicates}")

        self.agents: List[Agent] = list(agents)
        self.params = params
        self.reporter = reporter or NullReporter()
        self.round = 0
        self.history: List[RoundRecord] = []

    # ==================== Round Phases ====================

    def play_round(self) -> Dict[EncounterOutcome, int]:
        """Every unordered pair meets twice: (i lends to j), then (j lends to i)."""
        outcomes: Dict[EncounterOutcome, int] = {o: 0 for o in EncounterOutcome}
        n = len(self.agents)

        for i in range(n):
            for j in range(i + 1, n):
                outcomes[encounter(self.agents[i], self.agents[j], self.params)] += 1
                outcomes[encounter(self.agents[j], self.agents[i], self.params)] += 1

        return outcomes

    def cull(self) -> List[Agent]:
        """Remove agents at zero energy or below. Returns the removed."""
        removed = [agent for agent in self.agents if not agent.alive]
        if removed:
            self.agents = [agent for agent in self.agents if agent.alive]
            logger.info(
                f"Round {self.round}: culled {len(removed)} agents, "
                f"{len(self.agents)} remain"
            )
        return removed

    def step(self) -> RoundRecord:
        """Report, encounter, cull. Advance one round."""
        record = self._snapshot()
        self.reporter.report_round(self.round, record.stats)

        outcomes = self.play_round()
        record.outcomes = {o.value: n for o, n in outcomes.items()}
        logger.debug(f"Round {self.round} outcomes: {record.outcomes}")

        self.cull()
        self.history.append(record)
        self.round += 1
        return record

    def run(self, rounds: int) -> List[RoundRecord]:
        """
        Run a fixed number of rounds, regardless of extinction.

        Returns one record per round (taken at its report point) plus
        a final record of the population after the last cull.
        """
        if rounds < 0:
            raise ValueError(f"Round count must be non-negative, got {rounds}")

        self.reporter.report_population(self.agents)
        logger.info(f"Running {rounds} rounds with {len(self.agents)} agents")

        for _ in range(rounds):
            self.step()

        final = self._snapshot()
        self.reporter.report_final(final.stats)
        logger.info(f"Simulation finished: {len(self.agents)} agents alive")
        return self.history + [final]

    # ==================== Utilities ====================

    def _snapshot(self) -> RoundRecord:
        return RoundRecord(
            round=self.round,
            stats=aggregate_stats(self.agents),
            energies={agent.id: agent.energy for agent in self.agents},
        )

    def get_energies(self) -> np.ndarray:
        """Energy levels of all living agents, in population order."""
        return np.array([agent.energy for agent in self.agents], dtype=np.float64)

    def __repr__(self) -> str:
        return (
            f"LendingSimulation(agents={len(self.agents)}, "
            f"round={self.round})"
        )
