# bspricer — Black-Scholes pricing, Greeks and price curves
# Public API

# Data model
from .core import OptionParameters, OptionPrices, InvalidParameter, CALL, PUT

# Standard normal
from .normal import norm_cdf, norm_pdf, norm_cdf_vec, norm_pdf_vec

# Scalar pricers
from .black_scholes import (
    d1_d2, calculate_prices, call_price, put_price, price,
    parity_residual, parity_holds,
)

# Vectorised pricers
from .black_scholes_vec import bs_price_vec, bs_greeks_vec

# Curves
from .curve import (
    generate_price_curve, curve_arrays, payoff_at_expiry, clamp_curve_request,
    DEFAULT_PRICE_RANGE, DEFAULT_NUM_POINTS,
)

__all__ = [
    # Data model
    "OptionParameters", "OptionPrices", "InvalidParameter", "CALL", "PUT",
    # Normal
    "norm_cdf", "norm_pdf", "norm_cdf_vec", "norm_pdf_vec",
    # Scalar
    "d1_d2", "calculate_prices", "call_price", "put_price", "price",
    "parity_residual", "parity_holds",
    # Vectorised
    "bs_price_vec", "bs_greeks_vec",
    # Curves
    "generate_price_curve", "curve_arrays", "payoff_at_expiry",
    "clamp_curve_request", "DEFAULT_PRICE_RANGE", "DEFAULT_NUM_POINTS",
]

__version__ = "0.1.0"
