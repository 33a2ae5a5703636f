"""
core/errors.py

Failures the simulation refuses to paper over.
"""


class LendingGameError(Exception):
    """Base class for all lending game errors."""


class StrategyConstructionError(LendingGameError):
    """A roster factory could not produce a strategy. Startup aborts."""


class InvariantViolation(LendingGameError):
    """Internal bookkeeping broke: duplicate ids, self-encounters."""


class ConfigError(LendingGameError):
    """Configuration is malformed or names something that does not exist."""
