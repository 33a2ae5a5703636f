"""
environments/encounter.py

One request, at most one loan.

1. The lender decides whether to trust the borrower
2. If not, the borrower is told, and nothing else happens
3. If so, the borrower cooperates or defects, the lender is told,
   and both energies move by the agreed payoffs
"""

from __future__ import annotations
from enum import Enum

from lending_game.core.agent import Agent
from lending_game.core.errors import InvariantViolation
from lending_game.core.params import GameParams
from lending_game.core.strategy import LendDecision, BorrowDecision


class EncounterOutcome(Enum):
    """How a single encounter ended."""
    REJECTED = "rejected"
    COOPERATED = "cooperated"
    DEFECTED = "defected"


def encounter(lender: Agent, borrower: Agent, params: GameParams) -> EncounterOutcome:
    """
    Play the lend/borrow protocol once with fixed roles.

    Energy deltas are applied unconditionally; energy may go negative.
    """
    if lender is borrower or lender.id == borrower.id:
        raise InvariantViolation(f"Agent {lender.id} cannot lend to itself")

    if lender.strategy.accept_or_reject_request(borrower.id) is LendDecision.REJECT:
        borrower.strategy.notify_about_rejection(lender.id)
        return EncounterOutcome.REJECTED

    cooperated = borrower.strategy.coop_or_defect(lender.id) is BorrowDecision.COOPERATE
    lender.strategy.notify_coop_or_defect(borrower.id, cooperated)

    if cooperated:
        lender.energy += params.lender_coop
        borrower.energy += params.borrower_coop
        return EncounterOutcome.COOPERATED

    lender.energy += params.lender_defect
    borrower.energy += params.borrower_defect
    return EncounterOutcome.DEFECTED
