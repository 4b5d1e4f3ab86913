from typing import Literal, Tuple

import numpy as np

from .core import OptionParameters, OptionPrices, InvalidParameters, CALL, PUT
from .normal import normal_cdf as _N, normal_pdf as _n

DAYS_PER_YEAR = 365.25
PER_POINT = 100.0


def _inputs(params: OptionParameters):
    """Re-check ``params`` and return (S, K, T, r, sigma) as float64."""
    if not params.is_valid():
        raise InvalidParameters()
    return (
        np.float64(params.underlying_price),
        np.float64(params.strike_price),
        np.float64(params.time_to_expiration),
        np.float64(params.risk_free_rate),
        np.float64(params.volatility),
    )


def d1_d2(S, K, T, r, sigma) -> Tuple[float, float]:
    """d1, d2 of the Black-Scholes formula.

    Not guarded against tiny sigma or T: float64 arithmetic with IEEE
    semantics, so the result may be huge, inf or nan but never raises.
    """
    S, K, T, r, sigma = (np.float64(x) for x in (S, K, T, r, sigma))
    with np.errstate(all="ignore"):
        sqrt_T = np.sqrt(T)
        d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T) / (sigma * sqrt_T)
        d2 = d1 - sigma * sqrt_T
    return d1, d2


def price_and_greeks(params: OptionParameters) -> OptionPrices:
    """Call/put prices and Greeks in one pass.

    Theta is per calendar day, vega and rho per 1-point move; see
    :class:`~bspricer.core.OptionPrices`.
    """
    S, K, T, r, sigma = _inputs(params)
    d1, d2 = d1_d2(S, K, T, r, sigma)

    with np.errstate(all="ignore"):
        N_d1     = _N(d1)
        N_d2     = _N(d2)
        N_neg_d1 = _N(-d1)
        N_neg_d2 = _N(-d2)
        n_d1     = _n(d1)
        disc     = np.exp(-r * T)
        sqrt_T   = np.sqrt(T)

        call = S * N_d1 - K * disc * N_d2
        put  = K * disc * N_neg_d2 - S * N_neg_d1

        decay   = -(S * n_d1 * sigma) / (2.0 * sqrt_T)
        theta_c = decay - r * K * disc * N_d2
        theta_p = decay + r * K * disc * N_neg_d2
        vega    = S * n_d1 * sqrt_T
        rho_c   = K * T * disc * N_d2
        rho_p   = -K * T * disc * N_neg_d2
        gamma   = n_d1 / (S * sigma * sqrt_T)

    return OptionPrices(
        call_price=float(call),
        put_price=float(put),
        delta_call=float(N_d1),
        delta_put=float(N_d1 - 1.0),
        gamma=float(gamma),
        theta_call=float(theta_c / DAYS_PER_YEAR),
        theta_put=float(theta_p / DAYS_PER_YEAR),
        vega=float(vega / PER_POINT),
        rho_call=float(rho_c / PER_POINT),
        rho_put=float(rho_p / PER_POINT),
    )


# Kept under the historical name as well.
calculate_prices = price_and_greeks


def call_price(params: OptionParameters) -> float:
    S, K, T, r, sigma = _inputs(params)
    d1, d2 = d1_d2(S, K, T, r, sigma)
    with np.errstate(all="ignore"):
        disc = np.exp(-r * T)
        return float(S * _N(d1) - K * disc * _N(d2))


def put_price(params: OptionParameters) -> float:
    S, K, T, r, sigma = _inputs(params)
    d1, d2 = d1_d2(S, K, T, r, sigma)
    with np.errstate(all="ignore"):
        disc = np.exp(-r * T)
        return float(K * disc * _N(-d2) - S * _N(-d1))


def price(params: OptionParameters, kind: Literal["call", "put"] = CALL) -> float:
    if kind == CALL:
        return call_price(params)
    elif kind == PUT:
        return put_price(params)
    else:
        raise ValueError("kind must be 'call' or 'put'")
