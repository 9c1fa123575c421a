"""Price curves over a range of underlying prices, for plotting.

``generate_price_curve`` re-prices the option at evenly spaced spots around
the base underlying price.  ``curve_arrays`` and ``payoff_at_expiry`` turn
a curve into the NumPy columns a plotting layer consumes.
"""

from __future__ import annotations

import math
import numpy as np

from .core import OptionParameters, InvalidParameter
from .black_scholes import call_price, put_price

__all__ = [
    "generate_price_curve",
    "curve_arrays",
    "payoff_at_expiry",
    "clamp_curve_request",
]

DEFAULT_PRICE_RANGE = 50.0
DEFAULT_NUM_POINTS = 100
PRICE_FLOOR = 0.01

# Bounds applied by interactive callers, not by generate_price_curve itself.
MIN_PRICE_RANGE = 1.0
MIN_NUM_POINTS = 50
MAX_NUM_POINTS = 1000

CurvePoint = tuple[float, float, float]


# ---------------------------------------------------------------------------
# Curve generation
# ---------------------------------------------------------------------------
def generate_price_curve(
    base: OptionParameters,
    price_range: float = DEFAULT_PRICE_RANGE,
    num_points: int = DEFAULT_NUM_POINTS,
) -> list[CurvePoint]:
    """Sweep the underlying price and price both legs at each sample.

    Parameters
    ----------
    base : OptionParameters
        Strike, expiry, rate and volatility are held fixed; the spot is the
        centre of the sweep.
    price_range : float
        Half-width of the sweep, must be > 0.
    num_points : int
        Number of samples, must be >= 2.  The sweep must also end above the
        0.01 price floor.

    Returns
    -------
    list of (underlying_price, call_price, put_price)
        Exactly ``num_points`` entries with strictly increasing price, from
        ``max(0.01, S - price_range)`` to ``S + price_range``.

    Raises
    ------
    InvalidParameter
        On a bad range or point count, or if any sample fails validation.
        No partial curve is returned.
    """
    if num_points <= 0:
        raise InvalidParameter(f"number of points must be positive, got {num_points}")
    if num_points < 2:
        raise InvalidParameter(f"number of points must be at least 2, got {num_points}")
    if not math.isfinite(price_range) or price_range <= 0.0:
        raise InvalidParameter(f"price range must be positive, got {price_range}")
    base.validate()

    start = max(PRICE_FLOOR, base.underlying_price - price_range)
    end = base.underlying_price + price_range
    if end <= start:
        raise InvalidParameter(
            f"price range {price_range} does not reach above the {PRICE_FLOOR} "
            f"floor from {base.underlying_price}"
        )
    step = (end - start) / (num_points - 1)

    curve: list[CurvePoint] = []
    for i in range(num_points):
        # direct index rather than running sum; last sample pinned to `end`
        spot = end if i == num_points - 1 else start + i * step
        sample = base.with_underlying(spot)
        curve.append((spot, call_price(sample), put_price(sample)))
    return curve


def curve_arrays(curve: list[CurvePoint]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split a curve into ``(prices, calls, puts)`` float arrays."""
    if not curve:
        empty = np.empty(0, dtype=float)
        return empty, empty.copy(), empty.copy()
    data = np.asarray(curve, dtype=float)
    return data[:, 0].copy(), data[:, 1].copy(), data[:, 2].copy()


def payoff_at_expiry(strike: float, prices) -> tuple[np.ndarray, np.ndarray]:
    """Intrinsic value at expiration: ``max(S - K, 0)`` and ``max(K - S, 0)``."""
    prices = np.asarray(prices, dtype=float)
    return np.maximum(prices - strike, 0.0), np.maximum(strike - prices, 0.0)


def clamp_curve_request(price_range: float, num_points: int) -> tuple[float, int]:
    """Apply the interactive-input bounds to a curve request."""
    return (max(float(price_range), MIN_PRICE_RANGE),
            int(np.clip(int(num_points), MIN_NUM_POINTS, MAX_NUM_POINTS)))
