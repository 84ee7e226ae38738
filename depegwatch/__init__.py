"""Stablecoin price polling, depeg risk assessment and a command line monitor."""

__version__ = "0.1.0"
__all__ = ["risk", "poller", "cli"]