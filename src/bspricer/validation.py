"""Model validation helpers.

Checks the closed-form engine against model identities (put-call parity)
and against an exact-erf Black-Scholes reference built on ``scipy.stats``.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from scipy.stats import norm

from .core import OptionParameters, OptionPrices, InvalidParameters
from .black_scholes import price_and_greeks, d1_d2
from .normal import normal_cdf_vec

__all__ = [
    "PARITY_TOLERANCE",
    "put_call_parity",
    "cdf_accuracy",
    "cross_check",
]

PARITY_TOLERANCE = 0.01


# ---------------------------------------------------------------------------
# Put-call parity
# ---------------------------------------------------------------------------

def put_call_parity(
    params: OptionParameters,
    prices: Optional[OptionPrices] = None,
    *,
    tolerance: float = PARITY_TOLERANCE,
) -> dict:
    """Compare ``C - P`` with ``S - K e^{-rT}``.

    Parameters
    ----------
    prices : OptionPrices, optional
        Previously computed result; priced from ``params`` when omitted.
    tolerance : float
        Absolute threshold for ``holds``.

    Returns
    -------
    dict
        ``"lhs"``, ``"rhs"``, ``"difference"``, ``"holds"``.
    """
    if not params.is_valid():
        raise InvalidParameters()
    if prices is None:
        prices = price_and_greeks(params)

    with np.errstate(all="ignore"):
        lhs = float(prices.call_price - prices.put_price)
        rhs = float(params.underlying_price - params.strike_price * np.exp(
            -np.float64(params.risk_free_rate) * params.time_to_expiration
        ))
    diff = abs(lhs - rhs)
    return {"lhs": lhs, "rhs": rhs, "difference": diff, "holds": bool(diff < tolerance)}


# ---------------------------------------------------------------------------
# Accuracy of the rational CDF approximation
# ---------------------------------------------------------------------------

def cdf_accuracy(grid=None) -> dict:
    """Deviation of the approximate normal CDF from ``scipy.stats.norm.cdf``.

    Parameters
    ----------
    grid : array-like, optional
        Evaluation points.  Default: 2001 points on ``[-8, 8]``.

    Returns
    -------
    dict
        ``"max_abs_error"``, ``"mean_abs_error"``, ``"argmax"``.
    """
    x = np.linspace(-8.0, 8.0, 2001) if grid is None else np.asarray(grid, dtype=float)
    err = np.abs(normal_cdf_vec(x) - norm.cdf(x))
    i = int(np.argmax(err))
    return {
        "max_abs_error": float(err[i]),
        "mean_abs_error": float(err.mean()),
        "argmax": float(x[i]),
    }


# ---------------------------------------------------------------------------
# Cross-check against exact Black-Scholes
# ---------------------------------------------------------------------------

def cross_check(params: OptionParameters) -> dict:
    """Engine prices versus Black-Scholes evaluated with the exact normal CDF.

    Returns
    -------
    dict
        ``"engine"`` and ``"exact"`` (each ``{"call", "put"}``) and
        ``"max_discrepancy"``.
    """
    engine = price_and_greeks(params)
    S = params.underlying_price
    K = params.strike_price
    T = params.time_to_expiration
    r = params.risk_free_rate

    d1, d2 = d1_d2(S, K, T, r, params.volatility)
    with np.errstate(all="ignore"):
        disc = np.exp(-np.float64(r) * T)
        call = S * norm.cdf(d1) - K * disc * norm.cdf(d2)
        put = K * disc * norm.cdf(-d2) - S * norm.cdf(-d1)

    return {
        "engine": {"call": engine.call_price, "put": engine.put_price},
        "exact": {"call": float(call), "put": float(put)},
        "max_discrepancy": float(max(abs(engine.call_price - call),
                                     abs(engine.put_price - put))),
    }
