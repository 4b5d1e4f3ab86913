import argparse
import csv
import json
import logging
import sys

from .config import get_settings
from .core import validate, InvalidParameters, InvalidArgument
from .black_scholes import price_and_greeks
from .curve import generate_price_curve, price_curve_arrays
from .validation import put_call_parity

LOGGER = logging.getLogger(__name__)


def format_currency(value: float) -> str:
    return f"${value:.2f}"


def format_percentage(value: float) -> str:
    return f"{value * 100.0:.2f}%"


def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--S", type=float, required=True, help="underlying price")
    parser.add_argument("--K", type=float, required=True, help="strike price")
    parser.add_argument("--T", type=float, required=True, help="years")
    parser.add_argument("--r", type=float, required=True, help="cont. risk-free (decimal)")
    parser.add_argument("--sigma", type=float, required=True, help="volatility (decimal)")


def _params(args):
    return validate(args.S, args.K, args.T, args.r, args.sigma)


def cmd_price(args):
    params = _params(args)
    prices = price_and_greeks(params)
    parity = put_call_parity(params, prices, tolerance=get_settings().parity_tolerance)

    if args.json:
        print(json.dumps({"prices": prices.as_dict(), "parity": parity}, indent=2))
        return 0

    print(f"Underlying  {format_currency(params.underlying_price)}"
          f"   Strike {format_currency(params.strike_price)}"
          f"   T {params.time_to_expiration:.3f}y"
          f"   r {format_percentage(params.risk_free_rate)}"
          f"   sigma {format_percentage(params.volatility)}")
    print(f"Call price  {format_currency(prices.call_price)}")
    print(f"Put price   {format_currency(prices.put_price)}")
    print()
    print(f"{'':8}{'call':>12}{'put':>12}")
    print(f"{'delta':8}{prices.delta_call:12.4f}{prices.delta_put:12.4f}")
    print(f"{'gamma':8}{prices.gamma:12.4f}{prices.gamma:12.4f}")
    print(f"{'theta':8}{prices.theta_call:12.4f}{prices.theta_put:12.4f}")
    print(f"{'vega':8}{prices.vega:12.4f}{prices.vega:12.4f}")
    print(f"{'rho':8}{prices.rho_call:12.4f}{prices.rho_put:12.4f}")
    print()
    if parity["holds"]:
        print("Put-call parity: valid")
    else:
        print(f"Put-call parity: difference {parity['difference']:.4f}")
    return 0


def _plot(params, price_range, num_points, path):
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    data = price_curve_arrays(params, price_range, num_points)
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(data["underlying"], data["call"], label="Call")
    ax.plot(data["underlying"], data["put"], label="Put")
    ax.axvline(params.strike_price, color="grey", linestyle="--", linewidth=0.8, label="Strike")
    ax.set_xlabel("Underlying price")
    ax.set_ylabel("Option price")
    ax.set_title("Option prices vs underlying price")
    ax.legend()
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)


def cmd_curve(args):
    settings = get_settings()
    price_range = settings.curve_range if args.range is None else args.range
    num_points = settings.curve_points if args.points is None else args.points
    params = _params(args)
    curve = generate_price_curve(params, price_range, num_points)

    out = open(args.output, "w", newline="") if args.output else sys.stdout
    try:
        writer = csv.writer(out)
        writer.writerow(["underlying_price", "call_price", "put_price"])
        for point in curve:
            writer.writerow([f"{v:.6f}" for v in point])
    finally:
        if out is not sys.stdout:
            out.close()

    if args.plot:
        _plot(params, price_range, num_points, args.plot)
        LOGGER.info("plot written to %s", args.plot)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bspricer", description="Black-Scholes European option pricer")
    p.add_argument("--log-level", default=None, type=str.upper,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                   help="override BSPRICER_LOG_LEVEL")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_price = sub.add_parser("price", help="prices and Greeks")
    add_common(p_price)
    p_price.add_argument("--json", action="store_true", help="machine-readable output")
    p_price.set_defaults(func=cmd_price)

    p_curve = sub.add_parser("curve", help="price curve across underlying prices (CSV)")
    add_common(p_curve)
    p_curve.add_argument("--range", type=float, default=None, help="half-width in price units")
    p_curve.add_argument("--points", type=int, default=None)
    p_curve.add_argument("--output", default=None, help="CSV path (default: stdout)")
    p_curve.add_argument("--plot", default=None, help="PNG path; needs matplotlib")
    p_curve.set_defaults(func=cmd_curve)
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (InvalidParameters, InvalidArgument) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ImportError as exc:
        print(f"error: plotting requires matplotlib ({exc})", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
