"""
Environments: where agents meet.

- encounter: one lender, one borrower, one decision each
- simulation: rounds of all-pairs encounters, then culling
"""

from .encounter import EncounterOutcome, encounter
from .simulation import LendingSimulation, RoundRecord, generate_agents

__all__ = [
    "EncounterOutcome",
    "encounter",
    "LendingSimulation",
    "RoundRecord",
    "generate_agents",
]
