"""
strategies/reputation.py

Remember who treated you well.

The score is a running ledger per peer. It blends two things:
- what the peer gave us when we borrowed from them
- how the peer treated us when we lent to them

Nothing is ever forgotten and nothing ever resets.
"""

from __future__ import annotations
from typing import Dict, Optional

from lending_game.core.params import GameParams, DEFAULT_PARAMS
from lending_game.core.strategy import Strategy, LendDecision, BorrowDecision


class ReputationTracker(Strategy):
    """
    Lends according to a per-peer reputation score.

    As lender: unknown peers are trusted only if optimistic; known peers
    are trusted while their score is positive (or exactly zero, if optimistic).

    As borrower: always cooperates, crediting the lender with `borrower_coop`.
    With `revenging=True` it instead defects once an existing score has
    dropped to zero or below.
    """

    def __init__(
        self,
        optimistic: bool = True,
        params: GameParams = DEFAULT_PARAMS,
        revenging: bool = False,
        label: Optional[str] = None
    ):
        self.optimistic = optimistic
        self.params = params
        self.revenging = revenging
        self.reputations: Dict[int, float] = {}
        if label is None:
            label = "reputation tracker" if optimistic else "pessimistic reputation tracker"
        self._label = label

    # ==================== Lender Side ====================

    def accept_or_reject_request(self, peer_id: int) -> LendDecision:
        score = self.reputations.get(peer_id)
        if score is None:
            trusted = self.optimistic
        else:
            trusted = score > 0.0 or (score == 0.0 and self.optimistic)
        return LendDecision.ACCEPT if trusted else LendDecision.REJECT

    def notify_coop_or_defect(self, peer_id: int, cooperated: bool) -> None:
        delta = self.params.lender_coop if cooperated else self.params.lender_defect
        self._credit(peer_id, delta)

    # ==================== Borrower Side ====================

    def notify_about_rejection(self, peer_id: int) -> None:
        pass

    def coop_or_defect(self, peer_id: int) -> BorrowDecision:
        known = peer_id in self.reputations
        score = self._credit(peer_id, self.params.borrower_coop)

        if self.revenging and known and score <= 0.0:
            return BorrowDecision.DEFECT
        return BorrowDecision.COOPERATE

    # ==================== Utilities ====================

    def score_for(self, peer_id: int) -> Optional[float]:
        """Current score for a peer, or None if we never met."""
        return self.reputations.get(peer_id)

    def _credit(self, peer_id: int, delta: float) -> float:
        score = self.reputations.get(peer_id, 0.0) + delta
        self.reputations[peer_id] = score
        return score

    @property
    def type_label(self) -> str:
        return self._label

    def clone(self) -> "ReputationTracker":
        copy = ReputationTracker(
            optimistic=self.optimistic,
            params=self.params,
            revenging=self.revenging,
            label=self._label,
        )
        copy.reputations = dict(self.reputations)
        return copy
