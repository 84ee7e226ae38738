import pytest

from depegwatch.risk import DepegRiskEngine, PricePoint, RiskAssessment, RiskLevel


def _history(*prices):
    return [PricePoint(timestamp=i, price=p) for i, p in enumerate(prices)]


@pytest.fixture
def engine():
    return DepegRiskEngine()


def test_empty_history_is_low(engine):
    result = engine.calculate_risk([])
    assert result == RiskAssessment(RiskLevel.LOW, "No price history available.")


def test_on_peg_is_stable(engine):
    result = engine.calculate_risk(_history(1.0, 1.0, 1.0))
    assert result == RiskAssessment(RiskLevel.LOW, "Stable")


@pytest.mark.parametrize(
    "prices, level, reason",
    [
        ((1.0, 1.0, 0.985), RiskLevel.MEDIUM, "Moderate depeg risk"),
        ((1.015,), RiskLevel.MEDIUM, "Moderate depeg risk"),
        ((0.975, 0.975, 0.975), RiskLevel.HIGH, "Major price drop"),
        ((1.0, 1.0, 0.95), RiskLevel.CRITICAL, "Severe depeg and volatility"),
        ((0.998, 1.002, 0.999), RiskLevel.LOW, "Stable"),
    ],
)
def test_levels(engine, prices, level, reason):
    result = engine.calculate_risk(_history(*prices))
    assert result.level is level
    assert result.reason == reason


def test_steady_depeg_without_volatility_is_high_not_critical(engine):
    result = engine.calculate_risk(_history(0.95, 0.95, 0.95))
    assert result.level is RiskLevel.HIGH


def test_only_latest_price_drives_deviation(engine):
    recovered = engine.calculate_risk(_history(0.9, 0.9, 1.0))
    assert recovered.level is RiskLevel.LOW


def test_levels_rise_with_severity(engine):
    low = engine.calculate_risk(_history(1.0)).level
    medium = engine.calculate_risk(_history(0.985)).level
    high = engine.calculate_risk(_history(0.975)).level
    critical = engine.calculate_risk(_history(1.0, 1.0, 0.95)).level
    assert [low, medium, high, critical] == [
        RiskLevel.LOW,
        RiskLevel.MEDIUM,
        RiskLevel.HIGH,
        RiskLevel.CRITICAL,
    ]
    assert low < medium < high < critical