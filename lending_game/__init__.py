"""
Lending Game: a borrow/lend variant of the iterated prisoner's dilemma

Agents with pluggable strategies lend to and borrow from each other,
spend and earn energy, and die when it runs out. Watch which
behaviors survive.
"""

__version__ = "0.1.0"
