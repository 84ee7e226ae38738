import logging

import pytest

from depegwatch.cli import format_report, main, report
from depegwatch.risk import DepegRiskEngine, PricePoint


def _history(*prices):
    return [PricePoint(timestamp=i, price=p) for i, p in enumerate(prices)]


@pytest.fixture
def engine():
    return DepegRiskEngine()


def test_waiting_for_data(engine):
    assert format_report("dai", _history(1.0, 1.0), engine) == (
        logging.INFO,
        "[dai] Waiting for more data...",
    )


def test_stable_report(engine):
    assert format_report("tether", _history(1.0, 1.0, 1.0), engine) == (
        logging.INFO,
        "[tether] Stable | Reason: Stable",
    )


def test_medium_report(engine):
    level, message = format_report("dai", _history(1.0, 1.0, 0.985), engine)
    assert level == logging.WARNING
    assert message == "[dai] Risk: MEDIUM | Moderate depeg risk"


def test_high_report(engine):
    level, message = format_report("dai", _history(0.975, 0.975, 0.975), engine)
    assert level == logging.ERROR
    assert message == "[dai] Risk: HIGH | Major price drop"


def test_critical_report(engine):
    level, message = format_report("usd-coin", _history(1.0, 1.0, 0.95), engine)
    assert level == logging.CRITICAL
    assert message == "[usd-coin] Risk: CRITICAL | Severe depeg and volatility"


def test_report_logs_colored_message(engine, caplog):
    logger = logging.getLogger("depegwatch.test")
    with caplog.at_level(logging.DEBUG, logger="depegwatch.test"):
        level = report("tether", _history(1.0, 1.0, 0.985), engine, logger)
    assert level == logging.WARNING
    [record] = caplog.records
    assert record.levelno == logging.WARNING
    text = record.getMessage()
    assert "[tether] Risk: MEDIUM | Moderate depeg risk" in text
    assert text.startswith("\x1b[")


def test_report_unknown_coin_is_plain(engine, caplog):
    logger = logging.getLogger("depegwatch.test")
    with caplog.at_level(logging.DEBUG, logger="depegwatch.test"):
        report("frax", _history(1.0), engine, logger)
    assert [r.getMessage() for r in caplog.records] == ["[frax] Waiting for more data..."]


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0