"""Command line monitor that reports depeg risk for several stablecoins."""

from __future__ import annotations

import argparse
import contextlib
import logging
import time
from typing import Optional, Sequence, Tuple

from .poller import PricePoller
from .risk import DepegRiskEngine, PricePoint, RiskLevel

DEFAULT_COINS = ("tether", "usd-coin", "dai")
MIN_HISTORY = 3

COIN_COLORS = {
    "tether": (0, 128, 0),
    "usd-coin": (0, 0, 255),
    "dai": (255, 165, 0),
}

_LOG_LEVELS = {
    RiskLevel.LOW: logging.INFO,
    RiskLevel.MEDIUM: logging.WARNING,
    RiskLevel.HIGH: logging.ERROR,
    RiskLevel.CRITICAL: logging.CRITICAL,
}


def format_report(
    coin: str, history: Sequence[PricePoint], engine: DepegRiskEngine
) -> Tuple[int, str]:
    """Return the logging level and message describing ``coin``'s risk."""
    if len(history) < MIN_HISTORY:
        return logging.INFO, f"[{coin}] Waiting for more data..."
    assessment = engine.calculate_risk(history)
    if assessment.level is RiskLevel.LOW:
        message = f"[{coin}] Stable | Reason: {assessment.reason}"
    else:
        message = f"[{coin}] Risk: {assessment.level.name} | {assessment.reason}"
    return _LOG_LEVELS[assessment.level], message


def _colorize(coin: str, message: str) -> str:
    rgb = COIN_COLORS.get(coin)
    if rgb is None:
        return message
    r, g, b = rgb
    return f"\x1b[38;2;{r};{g};{b}m{message}\x1b[0m"


def report(
    coin: str,
    history: Sequence[PricePoint],
    engine: DepegRiskEngine,
    logger: logging.Logger,
) -> int:
    """Log the risk report for ``coin`` and return the level used."""
    level, message = format_report(coin, history, engine)
    logger.log(level, _colorize(coin, message))
    return level


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="depegwatch", description="Watch stablecoins for depeg risk."
    )
    parser.add_argument("coins", nargs="*", default=list(DEFAULT_COINS))
    parser.add_argument(
        "--interval", type=float, default=5.0, help="seconds between polls and reports"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="[%(asctime)s] [%(levelname)s] %(message)s"
    )
    logger = logging.getLogger("depegwatch")
    engine = DepegRiskEngine()

    with contextlib.ExitStack() as stack:
        pollers = {
            coin: stack.enter_context(PricePoller(coin, interval=args.interval))
            for coin in args.coins
        }
        try:
            while True:
                time.sleep(args.interval)
                for coin, poller in pollers.items():
                    report(coin, poller.history(), engine, logger)
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())