"""Depeg risk classification for stablecoin price histories."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

PEG = 1.0


@dataclass(frozen=True)
class PricePoint:
    """A single observed price at a Unix timestamp (seconds)."""

    timestamp: int
    price: float


class RiskLevel(enum.IntEnum):
    """Severity of a stablecoin's departure from its peg."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
    CRITICAL = 3


@dataclass(frozen=True)
class RiskAssessment:
    """The outcome of a risk calculation and why it was reached."""

    level: RiskLevel
    reason: str


class DepegRiskEngine:
    """Classifies a price history by its latest deviation from the peg."""

    critical_deviation = 0.03
    critical_volatility = 0.02
    high_deviation = 0.02
    medium_deviation = 0.01

    def calculate_risk(self, price_history: Sequence[PricePoint]) -> RiskAssessment:
        """Assess the risk of the most recent price in ``price_history``."""
        if not price_history:
            return RiskAssessment(RiskLevel.LOW, "No price history available.")

        latest = price_history[-1].price
        average = sum(point.price for point in price_history) / len(price_history)
        deviation = abs(latest - PEG)
        volatility = abs(latest - average)

        if deviation > self.critical_deviation and volatility > self.critical_volatility:
            return RiskAssessment(RiskLevel.CRITICAL, "Severe depeg and volatility")
        if deviation > self.high_deviation:
            return RiskAssessment(RiskLevel.HIGH, "Major price drop")
        if deviation > self.medium_deviation:
            return RiskAssessment(RiskLevel.MEDIUM, "Moderate depeg risk")
        return RiskAssessment(RiskLevel.LOW, "Stable")