"""Daily price records, technical indicators and CSV loading for the price-direction problem."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Sequence

AVAILABLE_SOURCES = ("finect", "yfinance")

# Rows dropped from the front of a loaded dataset so every record has its EMA200.
_WARMUP_ROWS = 199


@dataclass
class StockPrice:
    """One day's NAV with derived indicators and the next-day direction label."""

    nav: float = 0.0
    ema20: float = 0.0
    ema50: float = 0.0
    ema200: float = 0.0
    momentum5: float = 0.0
    momentum20: float = 0.0
    rsi14: float = 0.0
    volatility20: float = 0.0
    direction: bool = False

    def to_features(self) -> list[float]:
        """Return the dimensionless feature vector fed to the network."""

        def ratio(ema: float) -> float:
            return self.nav / ema - 1.0 if ema > 0.0 else 0.0

        return [
            ratio(self.ema20),
            ratio(self.ema50),
            ratio(self.ema200),
            self.momentum5,
            self.momentum20,
            self.rsi14,
            self.volatility20,
        ]

    def __str__(self) -> str:
        return (
            "StockPrice {\n"
            f"  nav:          {self.nav:g}\n"
            f"  ema20:        {self.ema20:g}\n"
            f"  ema50:        {self.ema50:g}\n"
            f"  ema200:       {self.ema200:g}\n"
            f"  momentum5:    {self.momentum5:g}\n"
            f"  momentum20:   {self.momentum20:g}\n"
            f"  rsi14:        {self.rsi14:g}\n"
            f"  volatility20: {self.volatility20:g}\n"
            f"  direction:    {'UP' if self.direction else 'DOWN/FLAT'}\n"
            "}"
        )


def _check_period(period: int) -> None:
    if period < 1:
        raise ValueError("Indicator period must be >= 1")


def get_sma(prices: Sequence[StockPrice], position: int, period: int) -> float:
    """Simple moving average of NAV over the ``period`` days ending at ``position``."""
    _check_period(period)
    if position < period - 1:
        raise ValueError("Not enough data to calculate SMA")
    window = prices[position - period + 1 : position + 1]
    return sum(p.nav for p in window) / period


def get_ema(prices: Sequence[StockPrice], position: int, period: int) -> float:
    """Exponential moving average of NAV at ``position``, seeded with the first SMA."""
    _check_period(period)
    if position < period - 1:
        raise ValueError("Not enough data to calculate EMA")
    k = 2.0 / (period + 1.0)
    ema = get_sma(prices, period - 1, period)
    for price in prices[period : position + 1]:
        ema = price.nav * k + ema * (1.0 - k)
    return ema


def get_rsi(prices: Sequence[StockPrice], position: int, period: int = 14) -> float:
    """Relative strength index over the last ``period`` changes, scaled to [0, 1]."""
    _check_period(period)
    if position < period:
        raise ValueError("Not enough data to calculate RSI")
    window = prices[position - period : position + 1]
    changes = [cur.nav - prev.nav for prev, cur in zip(window, window[1:])]
    avg_gain = sum(c for c in changes if c > 0.0) / period
    avg_loss = -sum(c for c in changes if c <= 0.0) / period

    if avg_loss < 1e-10:
        return 1.0
    rs = avg_gain / avg_loss
    return (100.0 - 100.0 / (1.0 + rs)) / 100.0


def get_volatility(prices: Sequence[StockPrice], position: int, period: int = 20) -> float:
    """Population standard deviation of the last ``period`` daily log-returns."""
    _check_period(period)
    if position < period:
        raise ValueError("Not enough data to calculate volatility")
    window = prices[position - period : position + 1]
    returns = [math.log(cur.nav / prev.nav) for prev, cur in zip(window, window[1:])]
    mean = sum(returns) / period
    variance = sum((r - mean) ** 2 for r in returns) / period
    return math.sqrt(variance)


def _read_navs(file_path: str | os.PathLike[str]) -> list[float]:
    try:
        handle = open(file_path, encoding="utf-8", newline="")
    except OSError as exc:
        raise OSError(f"Failed to open CSV file: {os.fspath(file_path)}") from exc
    navs = []
    with handle:
        next(handle, None)  # header
        for line in handle:
            line = line.rstrip("\n")
            if not line:
                continue
            fields = line.split(",")
            nav_text = fields[1] if len(fields) > 1 else ""
            try:
                navs.append(float(nav_text))
            except ValueError as exc:
                raise ValueError(f"Invalid NAV value: {nav_text!r}") from exc
    return navs


def load_data(file_path: str | os.PathLike[str]) -> list[StockPrice]:
    """Load a ``date,nav`` CSV and return labelled records with every indicator filled in.

    The warm-up rows lacking an EMA200 and the final unlabelled row are dropped.
    """
    prices = [StockPrice(nav=nav) for nav in _read_navs(file_path)]
    if len(prices) <= _WARMUP_ROWS:
        raise ValueError(f"At least {_WARMUP_ROWS + 1} price rows are required")

    for i, price in enumerate(prices):
        if i >= 19:
            price.ema20 = get_ema(prices, i, 20)
        if i >= 49:
            price.ema50 = get_ema(prices, i, 50)
        if i >= 199:
            price.ema200 = get_ema(prices, i, 200)
        if i >= 5:
            price.momentum5 = price.nav / prices[i - 5].nav - 1.0
        if i >= 20:
            price.momentum20 = price.nav / prices[i - 20].nav - 1.0
        if i >= 14:
            price.rsi14 = get_rsi(prices, i, 14)
        if i >= 20:
            price.volatility20 = get_volatility(prices, i, 20)

    for today, tomorrow in zip(prices, prices[1:]):
        today.direction = tomorrow.nav > today.nav

    return prices[_WARMUP_ROWS:-1]