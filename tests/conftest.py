"""
Shared test doubles for the lending game.
"""

from typing import List, Tuple

import pytest

from lending_game.core.strategy import Strategy, LendDecision, BorrowDecision


class ScriptedStrategy(Strategy):
    """
    Fixed answers, and a shared log of every call it receives.

    Log entries are (call, owner_id, peer_id[, extra]).
    """

    def __init__(
        self,
        owner_id: int,
        log: List[Tuple],
        accept: bool = True,
        cooperate: bool = True,
        label: str = "scripted"
    ):
        self.owner_id = owner_id
        self.log = log
        self.accept = accept
        self.cooperate = cooperate
        self._label = label

    def accept_or_reject_request(self, peer_id):
        self.log.append(("accept_or_reject_request", self.owner_id, peer_id))
        return LendDecision.ACCEPT if self.accept else LendDecision.REJECT

    def notify_about_rejection(self, peer_id):
        self.log.append(("notify_about_rejection", self.owner_id, peer_id))

    def coop_or_defect(self, peer_id):
        self.log.append(("coop_or_defect", self.owner_id, peer_id))
        return BorrowDecision.COOPERATE if self.cooperate else BorrowDecision.DEFECT

    def notify_coop_or_defect(self, peer_id, cooperated):
        self.log.append(("notify_coop_or_defect", self.owner_id, peer_id, cooperated))

    @property
    def type_label(self):
        return self._label

    def clone(self):
        return ScriptedStrategy(self.owner_id, self.log, self.accept, self.cooperate, self._label)


@pytest.fixture
def call_log():
    return []
