"""Background polling of stablecoin USD prices."""

from __future__ import annotations

import json
import logging
import threading
import time
import urllib.error
import urllib.request
from collections import deque
from typing import Callable, List, Optional

from .risk import PricePoint

logger = logging.getLogger(__name__)

API_URL = "https://api.coingecko.com/api/v3/simple/price"
USER_AGENT = "Mozilla/5.0 (DepegTracker/1.0)"
FALLBACK_PRICE = 1.0
RATE_LIMIT_BACKOFF = 15.0


class RateLimited(Exception):
    """The price service answered with a rate-limit response."""


def price_url(coin_id: str) -> str:
    """Return the price query URL for ``coin_id`` in USD."""
    return f"{API_URL}?ids={coin_id}&vs_currencies=usd"


def parse_price(body: str, coin_id: str, default: float = FALLBACK_PRICE) -> float:
    """Extract the USD price for ``coin_id`` from a response body.

    Raises RateLimited when the body signals rate limiting; returns
    ``default`` when the body cannot be read or lacks the price.
    """
    if "429" in body or "rate limit" in body:
        raise RateLimited(body)
    try:
        data = json.loads(body)
    except ValueError as exc:
        logger.error("[fetchPrice] Parse error: %s", exc)
        logger.debug("Raw JSON: %s", body)
        return default
    if not isinstance(data, dict):
        return default
    entry = data.get(coin_id)
    if not isinstance(entry, dict) or "usd" not in entry:
        return default
    value = entry["usd"]
    if not isinstance(value, (int, float)):
        logger.error("[fetchPrice] Parse error: usd price is not a number")
        logger.debug("Raw JSON: %s", body)
        return default
    return float(value)


def fetch_price(coin_id: str, timeout: float = 10.0) -> float:
    """Fetch the current USD price of ``coin_id``, falling back to the peg."""
    request = urllib.request.Request(price_url(coin_id), headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            raw = response.read()
    except urllib.error.HTTPError as exc:
        raw = exc.read() or b""
    except (urllib.error.URLError, OSError) as exc:
        logger.error("[fetchPrice] Request error: %s", exc)
        return FALLBACK_PRICE

    body = raw.decode("utf-8", errors="replace")
    try:
        return parse_price(body, coin_id, FALLBACK_PRICE)
    except RateLimited:
        logger.warning("[fetchPrice] Rate limited. Backing off...")
        logger.debug("%s", body)
        time.sleep(RATE_LIMIT_BACKOFF)
        return FALLBACK_PRICE


class PricePoller:
    """Polls a coin's price on a background thread and keeps a bounded history."""

    def __init__(
        self,
        coin_id: str,
        fetcher: Optional[Callable[[str], float]] = None,
        interval: float = 5.0,
        max_history: int = 100,
    ) -> None:
        if max_history < 1:
            raise ValueError("max_history must be at least 1")
        self.coin_id = coin_id
        self.interval = interval
        self._fetcher = fetcher or fetch_price
        self._history: deque[PricePoint] = deque(maxlen=max_history)
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._worker: Optional[threading.Thread] = None

    def start(self) -> None:
        """Begin polling on a background thread."""
        if self._worker is not None and self._worker.is_alive():
            raise RuntimeError(f"poller for {self.coin_id} is already running")
        self._stop.clear()
        self._worker = threading.Thread(
            target=self._run, name=f"poller-{self.coin_id}", daemon=True
        )
        self._worker.start()

    def stop(self) -> None:
        """Stop polling and wait for the background thread to finish."""
        self._stop.set()
        if self._worker is not None:
            self._worker.join()
            self._worker = None

    def history(self) -> List[PricePoint]:
        """Return a copy of the recorded prices, oldest first."""
        with self._lock:
            return list(self._history)

    def poll_once(self) -> PricePoint:
        """Fetch one price and record it."""
        price = self._fetcher(self.coin_id)
        point = PricePoint(int(time.time()), price)
        with self._lock:
            self._history.append(point)
        logger.info("[PricePoller] Latest Price: %s", price)
        return point

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                self.poll_once()
            except Exception:
                logger.exception("[PricePoller] Polling %s failed", self.coin_id)
            self._stop.wait(self.interval)

    def __enter__(self) -> "PricePoller":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()