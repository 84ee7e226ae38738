# depegwatch

depegwatch tracks the USD prices of stablecoins. It warns you when one of them
starts to move away from its $1.00 peg.

Each coin has a background poller. The poller asks the CoinGecko simple-price
API for the coin's current USD price at a fixed interval and keeps the most
recent readings. A risk engine reads that history and gives each coin one of
four levels:

| Level      | When                                                                                         |
|------------|----------------------------------------------------------------------------------------------|
| `CRITICAL` | latest price is more than 0.03 from $1.00 **and** more than 0.02 from the history's average  |
| `HIGH`     | latest price is more than 0.02 from $1.00                                                    |
| `MEDIUM`   | latest price is more than 0.01 from $1.00                                                    |
| `LOW`      | anything else, or an empty history                                                           |

The package uses only the standard library.

## Installation

```
pip install .
```

## Command line

```
depegwatch
```

With no arguments the command watches `tether`, `usd-coin` and `dai`. To watch
other coins, give their CoinGecko ids as arguments:

```
depegwatch tether dai --interval 10
```

`--interval` is the number of seconds between polls and between reports. The
default is 5. At each report the command logs one line per coin through Python's
`logging`:

- `[coin] Waiting for more data...` until the coin has at least three readings;
- `[coin] Stable | Reason: ...` at `LOW`, logged at INFO;
- `[coin] Risk: MEDIUM | ...`, `HIGH` or `CRITICAL`, logged at WARNING, ERROR or
  CRITICAL.

The lines for `tether`, `usd-coin` and `dai` are coloured with ANSI escape codes.
Press Ctrl-C to stop.

## Library use

Assessing a history:

```python
from depegwatch.risk import DepegRiskEngine, PricePoint

history = [PricePoint(timestamp=t, price=p) for t, p in [(0, 1.0), (5, 1.0), (10, 1.0), (15, 0.9)]]
assessment = DepegRiskEngine().calculate_risk(history)
print(assessment.level.name, assessment.reason)   # CRITICAL Severe depeg and volatility
```

`calculate_risk` returns a `RiskAssessment` that holds a `RiskLevel` (an
`IntEnum`, `LOW` to `CRITICAL`) and a reason string.

Polling a coin:

```python
from depegwatch.poller import PricePoller

with PricePoller("dai", interval=5.0, max_history=100) as poller:
    ...
    readings = poller.history()   # list of PricePoint, oldest first
```

`PricePoller` accepts an optional `fetcher`, which is a callable that takes a
coin id and returns a price. `poll_once()` takes and records a single reading
without starting the thread. The history keeps at most `max_history` readings
and drops the oldest first. An error raised by the fetcher is logged, and
polling continues.

You can also use these helpers from `depegwatch.poller` directly:

- `price_url(coin_id)`: builds the query URL.
- `parse_price(body, coin_id, default=1.0)`: reads the USD price from a
  response body. It raises `RateLimited` when the body mentions `429` or
  `rate limit`. It returns `default` when the body can't be parsed or has no
  price.
- `fetch_price(coin_id, timeout=10.0)`: fetches the price. A failed request or
  an unreadable response gives 1.0. A rate-limited response is logged and waits
  15 seconds before it returns 1.0.

The `depegwatch.cli` module also provides `format_report` and `report`, which
produce the log lines described above.

## What it does not do

depegwatch does not store readings: each history lives in memory only for as
long as its poller exists. It does not send alerts. Log output is the only
report.

## Tests

```
pip install .[test]
pytest
```