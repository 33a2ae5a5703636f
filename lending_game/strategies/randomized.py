"""
strategies/randomized.py

No memory, no grudges, just probabilities.

Each instance owns its own generator. Two randomized agents
never draw from the same stream.
"""

from __future__ import annotations
from typing import Optional, Union
import numpy as np

from lending_game.core.strategy import Strategy, LendDecision, BorrowDecision

SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


class RandomizedStrategy(Strategy):
    """
    Accepts and cooperates with fixed probabilities.

    Probabilities of exactly 0 or 1 are deterministic, since draws
    fall in [0, 1). The label keeps distinct configurations apart
    in reports.
    """

    def __init__(
        self,
        accept_probability: float,
        cooperate_probability: float,
        label: str = "random",
        seed: SeedLike = None
    ):
        for name, p in (
            ("accept_probability", accept_probability),
            ("cooperate_probability", cooperate_probability),
        ):
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {p}")

        self.accept_probability = float(accept_probability)
        self.cooperate_probability = float(cooperate_probability)
        self._label = label
        if isinstance(seed, np.random.Generator):
            # Never adopt a caller's generator; branch a private stream off it
            seed = seed.spawn(1)[0]
        self.rng = np.random.default_rng(seed)

    def accept_or_reject_request(self, peer_id: int) -> LendDecision:
        if self.rng.random() < self.accept_probability:
            return LendDecision.ACCEPT
        return LendDecision.REJECT

    def notify_about_rejection(self, peer_id: int) -> None:
        pass

    def coop_or_defect(self, peer_id: int) -> BorrowDecision:
        if self.rng.random() < self.cooperate_probability:
            return BorrowDecision.COOPERATE
        return BorrowDecision.DEFECT

    def notify_coop_or_defect(self, peer_id: int, cooperated: bool) -> None:
        pass

    @property
    def type_label(self) -> str:
        return self._label

    def clone(self) -> "RandomizedStrategy":
        # Spawned child stream: reproducible, but independent of ours
        return RandomizedStrategy(
            self.accept_probability,
            self.cooperate_probability,
            label=self._label,
            seed=self.rng.spawn(1)[0],
        )


# ==================== Presets ====================

def always_defect(seed: SeedLike = None) -> RandomizedStrategy:
    """Never lends, never cooperates. The adversarial baseline."""
    return RandomizedStrategy(0.0, 0.0, label="pure evil", seed=seed)


def always_cooperate(seed: SeedLike = None) -> RandomizedStrategy:
    """Lends to everyone, always returns the device."""
    return RandomizedStrategy(1.0, 1.0, label="pure good", seed=seed)


def coin_flip(seed: SeedLike = None) -> RandomizedStrategy:
    return RandomizedStrategy(0.5, 0.5, label="coin flip", seed=seed)
