"""Closed-form Black-Scholes pricing for European options.

Prices and Greeks are computed from validated ``OptionParameters`` using
the Abramowitz & Stegun normal CDF in :mod:`bspricer.normal`.  Greeks are
scaled for display: theta per calendar day, vega and rho per one
percentage point.
"""

from __future__ import annotations
import math
from math import exp, log, sqrt
from typing import Literal

from .core import OptionParameters, OptionPrices, InvalidParameter, CALL, PUT
from .normal import norm_cdf as _N, norm_pdf as _n

__all__ = [
    "d1_d2",
    "calculate_prices",
    "call_price",
    "put_price",
    "price",
    "parity_residual",
    "parity_holds",
]

DAYS_PER_YEAR = 365.25
PERCENT = 100.0
PARITY_TOLERANCE = 0.01


def d1_d2(params: OptionParameters) -> tuple[float, float]:
    S, K = params.underlying_price, params.strike_price
    T, r, sigma = params.time_to_expiration, params.risk_free_rate, params.volatility
    srt = sigma * sqrt(T)
    d1 = (log(S / K) + (r + 0.5 * sigma * sigma) * T) / srt
    d2 = d1 - srt
    return d1, d2


def _discount(params: OptionParameters) -> float:
    return exp(-params.risk_free_rate * params.time_to_expiration)


# Both the full computation and the single-leg entry points go through these
# two helpers so the prices they report are bit-identical.
def _call(S: float, K: float, disc: float, d1: float, d2: float) -> float:
    return S * _N(d1) - K * disc * _N(d2)


def _put(S: float, K: float, disc: float, d1: float, d2: float) -> float:
    return K * disc * _N(-d2) - S * _N(-d1)


# ---------------------------------------------------------------------------
# Full pricing
# ---------------------------------------------------------------------------
def calculate_prices(params: OptionParameters) -> OptionPrices:
    """Call/put prices and the five Greeks.

    Parameters
    ----------
    params : OptionParameters
        Re-validated before use.

    Returns
    -------
    OptionPrices

    Raises
    ------
    InvalidParameter
        If ``params`` does not satisfy the parameter invariant.
    """
    params.validate()
    S, K = params.underlying_price, params.strike_price
    T, r, sigma = params.time_to_expiration, params.risk_free_rate, params.volatility

    d1, d2 = d1_d2(params)
    disc = _discount(params)
    sqrt_T = math.sqrt(T)
    N_d1 = _N(d1)
    N_d2 = _N(d2)
    N_neg_d2 = _N(-d2)
    n_d1 = _n(d1)

    # Common
    gamma = n_d1 / (S * sigma * sqrt_T)
    vega  = S * n_d1 * sqrt_T
    decay = -(S * n_d1 * sigma) / (2.0 * sqrt_T)

    theta_c = decay - r * K * disc * N_d2
    theta_p = decay + r * K * disc * N_neg_d2
    rho_c   = K * T * disc * N_d2
    rho_p   = -K * T * disc * N_neg_d2

    return OptionPrices(
        call_price=_call(S, K, disc, d1, d2),
        put_price=_put(S, K, disc, d1, d2),
        delta_call=N_d1,
        delta_put=N_d1 - 1.0,
        gamma=gamma,
        theta_call=theta_c / DAYS_PER_YEAR,
        theta_put=theta_p / DAYS_PER_YEAR,
        vega=vega / PERCENT,
        rho_call=rho_c / PERCENT,
        rho_put=rho_p / PERCENT,
    )


# ---------------------------------------------------------------------------
# Single-leg pricing
# ---------------------------------------------------------------------------
def call_price(params: OptionParameters) -> float:
    params.validate()
    d1, d2 = d1_d2(params)
    return _call(params.underlying_price, params.strike_price, _discount(params), d1, d2)


def put_price(params: OptionParameters) -> float:
    params.validate()
    d1, d2 = d1_d2(params)
    return _put(params.underlying_price, params.strike_price, _discount(params), d1, d2)


def price(params: OptionParameters, kind: Literal["call", "put"] = CALL) -> float:
    if kind == CALL:
        return call_price(params)
    elif kind == PUT:
        return put_price(params)
    else:
        raise InvalidParameter(f"kind must be 'call' or 'put', got {kind!r}")


# ---------------------------------------------------------------------------
# Put-call parity
# ---------------------------------------------------------------------------
def parity_residual(params: OptionParameters, prices: OptionPrices | None = None) -> float:
    """Absolute gap |(C - P) - (S - K e^{-rT})|.

    ``prices`` may be passed to reuse an existing ``calculate_prices`` result.
    """
    if prices is None:
        prices = calculate_prices(params)
    lhs = prices.call_price - prices.put_price
    rhs = params.underlying_price - params.strike_price * _discount(params)
    return abs(lhs - rhs)


def parity_holds(
    params: OptionParameters,
    prices: OptionPrices | None = None,
    *,
    tol: float = PARITY_TOLERANCE,
) -> bool:
    return parity_residual(params, prices) < tol
