from __future__ import annotations
import math
import numbers
from dataclasses import dataclass, fields, replace
from typing import Optional


class InvalidParameter(ValueError):
    """Raised when pricing inputs violate the Black-Scholes domain."""


# ---------------------------------------------------------------------------
# Inputs — the five Black-Scholes scalars
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionParameters:
    """Validated Black-Scholes inputs for a European option.

    Parameters
    ----------
    underlying_price : float
        Spot price of the underlying, S > 0.
    strike_price : float
        Strike price, K > 0.
    time_to_expiration : float
        Time to expiry in years, T > 0.
    risk_free_rate : float
        Continuously-compounded risk-free rate.  May be zero or negative.
    volatility : float
        Annualised volatility, sigma > 0.

    Raises
    ------
    InvalidParameter
        If any field is non-finite or outside its domain.
    """
    underlying_price: float
    strike_price: float
    time_to_expiration: float    # years
    risk_free_rate: float        # continuous
    volatility: float

    def __post_init__(self):
        problem = _first_violation(self)
        if problem is not None:
            raise InvalidParameter(problem)

    def is_valid(self) -> bool:
        """Non-raising check of the parameter invariant."""
        return _first_violation(self) is None

    def validate(self) -> None:
        """Re-check the invariant, raising ``InvalidParameter`` on failure."""
        problem = _first_violation(self)
        if problem is not None:
            raise InvalidParameter(problem)

    def with_underlying(self, underlying_price: float) -> OptionParameters:
        """Copy with a different spot; the copy is validated on construction."""
        return replace(self, underlying_price=underlying_price)

    @classmethod
    def try_create(
        cls, S: float, K: float, T: float, r: float, sigma: float
    ) -> tuple[Optional[OptionParameters], Optional[str]]:
        """Build without raising.

        Returns ``(params, None)`` on success and ``(None, message)`` when
        the inputs are rejected.
        """
        try:
            return cls(S, K, T, r, sigma), None
        except InvalidParameter as exc:
            return None, str(exc)


_POSITIVE = {
    "underlying_price": "underlying price",
    "strike_price": "strike price",
    "time_to_expiration": "time to expiration",
    "volatility": "volatility",
}


def _first_violation(p: OptionParameters) -> Optional[str]:
    for f in fields(p):
        value = getattr(p, f.name)
        label = _POSITIVE.get(f.name, f.name.replace("_", " "))
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return f"{label} must be a real number, got {value!r}"
        if not math.isfinite(value):
            return f"{label} must be finite, got {value}"
        if f.name in _POSITIVE and value <= 0.0:
            return f"{label} must be positive, got {value}"
    return None


# ---------------------------------------------------------------------------
# Outputs — prices and display-scaled Greeks
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionPrices:
    """Call/put prices and Greeks for one set of inputs.

    ``gamma`` and ``vega`` are shared by both legs.  Theta is decay per
    calendar day; vega and rho are per one percentage point move.
    """
    call_price: float
    put_price: float
    delta_call: float
    delta_put: float
    gamma: float
    theta_call: float
    theta_put: float
    vega: float
    rho_call: float
    rho_put: float

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


CALL = "call"
PUT  = "put"
