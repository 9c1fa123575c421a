import argparse
import json
import logging
import sys

from .core import OptionParameters, InvalidParameter
from .black_scholes import calculate_prices, parity_residual, PARITY_TOLERANCE
from .curve import (
    generate_price_curve, clamp_curve_request,
    DEFAULT_PRICE_RANGE, DEFAULT_NUM_POINTS,
)

logger = logging.getLogger(__name__)

# Input floors applied before construction, as an interactive form would.
MIN_PRICE = 0.01
MIN_TIME = 0.001
MIN_VOL = 0.001


def format_currency(value: float) -> str:
    return f"${value:.2f}"


def format_percentage(value: float) -> str:
    return f"{value * 100.0:.2f}%"


def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--S", type=float, required=True, help="underlying price")
    parser.add_argument("--K", type=float, required=True, help="strike price")
    parser.add_argument("--T", type=float, required=True, help="years")
    parser.add_argument("--r", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--sigma", type=float, required=True, help="volatility")


def _params(args) -> OptionParameters:
    S = max(args.S, MIN_PRICE)
    K = max(args.K, MIN_PRICE)
    T = max(args.T, MIN_TIME)
    sigma = max(args.sigma, MIN_VOL)
    if (S, K, T, sigma) != (args.S, args.K, args.T, args.sigma):
        logger.debug("clamped inputs to S=%s K=%s T=%s sigma=%s", S, K, T, sigma)
    return OptionParameters(S, K, T, args.r, sigma)


def cmd_price(args):
    opt = _params(args)
    res = calculate_prices(opt)
    rows = [
        ("Risk-free Rate", format_percentage(opt.risk_free_rate)),
        ("Volatility", format_percentage(opt.volatility)),
        ("Call Price", format_currency(res.call_price)),
        ("Put Price", format_currency(res.put_price)),
        ("Delta (call)", f"{res.delta_call:.4f}"),
        ("Delta (put)", f"{res.delta_put:.4f}"),
        ("Gamma", f"{res.gamma:.6f}"),
        ("Theta (call, /day)", f"{res.theta_call:.4f}"),
        ("Theta (put, /day)", f"{res.theta_put:.4f}"),
        ("Vega (/1% vol)", f"{res.vega:.4f}"),
        ("Rho (call, /1% rate)", f"{res.rho_call:.4f}"),
        ("Rho (put, /1% rate)", f"{res.rho_put:.4f}"),
    ]
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        print(f"{label:<{width}}  {value}")

    gap = parity_residual(opt, res)
    if gap < PARITY_TOLERANCE:
        print("Put-Call Parity Check: valid")
    else:
        print(f"Put-Call Parity Check: difference {gap:.4f}")


def cmd_curve(args):
    opt = _params(args)
    price_range, num_points = clamp_curve_request(args.range, args.points)
    if (price_range, num_points) != (args.range, args.points):
        logger.debug("clamped curve request to range=%s points=%d",
                     price_range, num_points)
    curve = generate_price_curve(opt, price_range, num_points)
    if args.format == "json":
        json.dump([{"underlying_price": s, "call_price": c, "put_price": p}
                   for s, c, p in curve], sys.stdout, indent=2)
        print()
    else:
        print("underlying_price,call_price,put_price")
        for s, c, p in curve:
            print(f"{s:.6f},{c:.10f},{p:.10f}")


def main(argv=None):
    p = argparse.ArgumentParser(prog="bspricer",
                                description="Black-Scholes option pricing CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Prices + Greeks
    p_price = sub.add_parser("price", help="Black-Scholes prices and Greeks")
    add_common(p_price)
    p_price.set_defaults(func=cmd_price)

    # Curve over a spot range
    p_curve = sub.add_parser("curve", help="price curve over the underlying")
    add_common(p_curve)
    p_curve.add_argument("--range", type=float, default=DEFAULT_PRICE_RANGE,
                         help="half-width around S")
    p_curve.add_argument("--points", type=int, default=DEFAULT_NUM_POINTS)
    p_curve.add_argument("--format", choices=("csv", "json"), default="csv")
    p_curve.set_defaults(func=cmd_curve)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        args.func(args)
    except InvalidParameter as exc:
        logger.error("invalid parameters: %s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
