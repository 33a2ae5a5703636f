"""
core/strategy.py

The contract every behavior honors.

A strategy sees only peer ids and its own memory.
It never touches energy, never sees another strategy's state.

Two roles, two decisions:
- As lender: accept or reject a request
- As borrower: cooperate or defect once trusted
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum


class LendDecision(Enum):
    """What a lender answers to a request."""
    ACCEPT = "accept"
    REJECT = "reject"


class BorrowDecision(Enum):
    """What a trusted borrower does with the loan."""
    COOPERATE = "cooperate"
    DEFECT = "defect"


class Strategy(ABC):
    """
    Abstract base for agent behaviors.

    A strategy must support:
    - The lender decision (accept_or_reject_request)
    - The borrower decision (coop_or_defect)
    - Notifications about how the other side acted
    - A stable label for grouping in reports
    - Cloning into an independent copy
    """

    @abstractmethod
    def accept_or_reject_request(self, peer_id: int) -> LendDecision:
        """Decide whether to lend to `peer_id`. Must not change state."""
        pass

    @abstractmethod
    def notify_about_rejection(self, peer_id: int) -> None:
        """Lender `peer_id` turned our request down."""
        pass

    @abstractmethod
    def coop_or_defect(self, peer_id: int) -> BorrowDecision:
        """Lender `peer_id` trusted us. Cooperate or defect."""
        pass

    @abstractmethod
    def notify_coop_or_defect(self, peer_id: int, cooperated: bool) -> None:
        """Borrower `peer_id` answered our trust."""
        pass

    @property
    @abstractmethod
    def type_label(self) -> str:
        """Stable, human-readable label. Used only for reporting."""
        pass

    @abstractmethod
    def clone(self) -> "Strategy":
        """Return an independent copy with the same policy and memory."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.type_label!r})"
