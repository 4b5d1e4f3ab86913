"""Price curves across a swept underlying price.

Strike, expiry, rate and volatility are held at the base values while the
underlying price steps through ``[max(0.01, S - range), S + range]``.
When the floor kicks in the window is *not* recentred, so it can sit
off-centre around ``S``.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from .core import OptionParameters, PriceCurvePoint, InvalidArgument, InvalidParameters
from .black_scholes import call_price, put_price
from .normal import normal_cdf_vec

__all__ = ["MIN_PRICE", "curve_window", "generate_price_curve", "price_curve_arrays"]

LOGGER = logging.getLogger(__name__)

MIN_PRICE = 0.01


def curve_window(
    base: OptionParameters, price_range: float, num_points: int
) -> tuple[float, float, float]:
    """Return ``(start_price, end_price, step)`` for a curve request.

    ``step`` is 0.0 for a single-point curve.
    """
    if not base.is_valid():
        raise InvalidParameters()
    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)):
        raise InvalidArgument(f"num_points must be an integer, got {num_points!r}")
    if num_points <= 0:
        raise InvalidArgument(f"num_points must be positive, got {num_points}")
    if not math.isfinite(price_range) or price_range <= 0:
        raise InvalidArgument(f"price_range must be positive and finite, got {price_range}")

    start = max(MIN_PRICE, base.underlying_price - price_range)
    end = base.underlying_price + price_range
    if num_points == 1:
        return start, end, 0.0
    if end <= start:
        raise InvalidArgument(
            f"empty price window [{start}, {end}]; increase price_range"
        )
    return start, end, (end - start) / (num_points - 1)


def generate_price_curve(
    base: OptionParameters,
    price_range: float = 50.0,
    num_points: int = 100,
) -> list[PriceCurvePoint]:
    """Sample ``num_points`` (price, call, put) triples in ascending price order.

    Parameters
    ----------
    base : OptionParameters
        Supplies K, T, r and sigma; its underlying price centres the window.
    price_range : float
        Half-width of the window in price units (not a percentage).
    num_points : int
        Number of samples; a single point is taken at the window start.

    Raises
    ------
    InvalidArgument
        If ``num_points`` is not a positive integer.  Also raised, unlike
        the bare ``num_points <= 0`` rule, when ``price_range`` is zero,
        negative or non-finite, or when the window end does not exceed its
        start: every curve of two or more points is strictly ascending.
    InvalidParameters
        If ``base`` no longer passes validation.
    """
    start, end, step = curve_window(base, price_range, num_points)
    LOGGER.debug("sampling %d points over [%.4f, %.4f]", num_points, start, end)

    curve = []
    for i in range(num_points):
        s = start + i * step
        params = base.replace(underlying_price=s)
        curve.append(PriceCurvePoint(s, call_price(params), put_price(params)))
    return curve


def price_curve_arrays(
    base: OptionParameters,
    price_range: float = 50.0,
    num_points: int = 100,
) -> dict[str, np.ndarray]:
    """Vectorised :func:`generate_price_curve` for plotting.

    Returns
    -------
    dict
        ``"underlying"``, ``"call"``, ``"put"`` arrays of length ``num_points``.
    """
    start, end, step = curve_window(base, price_range, num_points)
    K = base.strike_price
    T = base.time_to_expiration
    r = base.risk_free_rate
    sigma = base.volatility

    S = start + np.arange(num_points, dtype=float) * step
    with np.errstate(all="ignore"):
        sqrt_T = np.sqrt(np.float64(T))
        d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T) / (sigma * sqrt_T)
        d2 = d1 - sigma * sqrt_T
        disc = np.exp(-np.float64(r) * T)

        call = S * normal_cdf_vec(d1) - K * disc * normal_cdf_vec(d2)
        put  = K * disc * normal_cdf_vec(-d2) - S * normal_cdf_vec(-d1)
    return {"underlying": S, "call": call, "put": put}
