# black_scholes_vec.py
# Vectorised Black-Scholes pricing and Greeks.
# All public functions accept scalars *or* NumPy arrays and broadcast.

from __future__ import annotations
import numpy as np

from .core import InvalidParameter, CALL, PUT
from .normal import norm_cdf_vec as _N, norm_pdf_vec as _n
from .black_scholes import DAYS_PER_YEAR, PERCENT

__all__ = ["bs_price_vec", "bs_greeks_vec"]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _as_arrays(S, K, T, r, sigma):
    """Convert inputs to float arrays and apply the scalar parameter rules."""
    S, K, T, r, sigma = (np.asarray(x, dtype=float) for x in (S, K, T, r, sigma))
    for name, arr in (("underlying price", S), ("strike price", K),
                      ("time to expiration", T), ("risk free rate", r),
                      ("volatility", sigma)):
        if not np.all(np.isfinite(arr)):
            raise InvalidParameter(f"{name} must be finite")
    for name, arr in (("underlying price", S), ("strike price", K),
                      ("time to expiration", T), ("volatility", sigma)):
        if np.any(arr <= 0.0):
            raise InvalidParameter(f"{name} must be positive")
    return S, K, T, r, sigma


def _d1_d2(S, K, T, r, sigma):
    """Compute d1, d2 arrays.  All inputs broadcast."""
    sqrt_T = np.sqrt(T)
    sig_sqrt_T = sigma * sqrt_T
    d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return d1, d2


def _is_call(kind) -> np.ndarray:
    """Return boolean mask: True where kind == 'call'."""
    kind = np.asarray(kind)
    flat = [str(k) for k in kind.flat]
    bad = sorted(set(flat) - {CALL, PUT})
    if bad:
        raise InvalidParameter(f"kind must be 'call' or 'put', got {bad[0]!r}")
    if kind.ndim == 0:
        return np.bool_(flat[0] == CALL)
    return np.array([k == CALL for k in flat], dtype=bool).reshape(kind.shape)


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(S, K, T, r, sigma, kind) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).

    Raises
    ------
    InvalidParameter
        If any element breaks the parameter rules of ``OptionParameters``.
    """
    S, K, T, r, sigma = _as_arrays(S, K, T, r, sigma)
    d1, d2 = _d1_d2(S, K, T, r, sigma)
    disc = np.exp(-r * T)

    call_px = S * _N(d1) - K * disc * _N(d2)
    put_px  = K * disc * _N(-d2) - S * _N(-d1)

    is_call = _is_call(kind)
    return np.where(is_call, call_px, put_px)


# ---------------------------------------------------------------------------
# Vectorised Greeks
# ---------------------------------------------------------------------------
def bs_greeks_vec(S, K, T, r, sigma, kind) -> dict[str, np.ndarray]:
    """Vectorised Black-Scholes Greeks.

    Returns dict with keys: delta, gamma, vega, theta, rho.
    Scaled like ``OptionPrices``: theta per calendar day, vega and rho per
    one percentage point.
    """
    S, K, T, r, sigma = _as_arrays(S, K, T, r, sigma)
    d1, d2 = _d1_d2(S, K, T, r, sigma)
    disc = np.exp(-r * T)
    sqrt_T = np.sqrt(T)
    n_d1 = _n(d1)
    is_call = _is_call(kind)

    # Common
    gamma = n_d1 / (S * sigma * sqrt_T)
    vega  = S * n_d1 * sqrt_T
    decay = -(S * n_d1 * sigma) / (2.0 * sqrt_T)

    # Call-specific
    delta_c = _N(d1)
    theta_c = decay - r * K * disc * _N(d2)
    rho_c   = K * T * disc * _N(d2)

    # Put-specific
    delta_p = _N(d1) - 1.0
    theta_p = decay + r * K * disc * _N(-d2)
    rho_p   = -K * T * disc * _N(-d2)

    delta = np.where(is_call, delta_c, delta_p)
    theta = np.where(is_call, theta_c, theta_p) / DAYS_PER_YEAR
    rho   = np.where(is_call, rho_c, rho_p) / PERCENT

    return {"delta": delta, "gamma": gamma, "vega": vega / PERCENT,
            "theta": theta, "rho": rho}
