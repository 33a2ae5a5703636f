"""
core/params.py

Payoff constants for a single encounter.

Fixed at the start of a run, handed explicitly to whoever needs them.
Two simulations with different payoffs never see each other's numbers.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class GameParams:
    """
    Energy deltas applied after a granted request.

    The lender always pays something; the borrower always gains something.
    Defection shifts more of it to the borrower.
    """
    lender_coop: float = -1.0       # Lending effort + device wear
    lender_defect: float = -3.0     # Loses the device
    borrower_coop: float = 2.0      # Uses the device
    borrower_defect: float = 3.0    # Steals the device

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameParams":
        defaults = cls()
        return cls(
            lender_coop=float(data.get("lender_coop", defaults.lender_coop)),
            lender_defect=float(data.get("lender_defect", defaults.lender_defect)),
            borrower_coop=float(data.get("borrower_coop", defaults.borrower_coop)),
            borrower_defect=float(data.get("borrower_defect", defaults.borrower_defect)),
        )


DEFAULT_PARAMS = GameParams()
