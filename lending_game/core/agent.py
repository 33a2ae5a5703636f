"""
core/agent.py

An agent is a strategy with something to lose.

Identity, energy, behavior. Nothing more.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .strategy import Strategy


DEFAULT_INITIAL_ENERGY = 256.0


def format_energy(energy: float) -> str:
    """Shortest round-trip form; whole numbers print without a trailing .0."""
    text = repr(float(energy))
    return text[:-2] if text.endswith(".0") else text


class Agent:
    """
    A single participant in the lending game.

    Principles embodied:
    - Identity is stable: an id is assigned once and never reused
    - Behavior is owned: one strategy per agent, never shared
    - Survival is energy: at zero or below, the agent is gone
    """

    def __init__(
        self,
        agent_id: int,
        strategy: Strategy,
        energy: float = DEFAULT_INITIAL_ENERGY
    ):
        self.id = agent_id
        self.strategy = strategy
        self.energy = float(energy)

    @property
    def alive(self) -> bool:
        return self.energy > 0.0

    @property
    def type_label(self) -> str:
        return self.strategy.type_label

    def __str__(self) -> str:
        return f"{self.id}|{format_energy(self.energy)}|{self.type_label}"

    def __repr__(self) -> str:
        return (
            f"Agent(id={self.id}, "
            f"energy={self.energy:.2f}, "
            f"strategy={self.type_label!r})"
        )
