# normal.py
# Standard-normal CDF / PDF used by the closed-form pricer.
# The CDF is the Abramowitz & Stegun 7.1.26 rational approximation of erf,
# evaluated at |x|/sqrt(2); max absolute error 7.5e-8.

from __future__ import annotations
import math
import numpy as np

_A1 =  0.254829592
_A2 = -0.284496736
_A3 =  1.421413741
_A4 = -1.453152027
_A5 =  1.061405429
_P  =  0.3275911

INV_SQRT_2PI = 0.3989422804014327   # 1/sqrt(2*pi)
_INV_SQRT_2  = 1.0 / math.sqrt(2.0)

CDF_MAX_ERROR = 7.5e-8


def _erf_tail(z):
    """1 - erf(z) for z >= 0 (A&S 7.1.26)."""
    t = 1.0 / (1.0 + _P * z)
    return ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t * math.exp(-z * z)


def normal_cdf(x: float) -> float:
    """N(x).  Symmetric: N(-x) == 1 - N(x) up to rounding."""
    sign = -1.0 if x < 0 else 1.0
    y = 1.0 - _erf_tail(abs(x) * _INV_SQRT_2)
    return 0.5 * (1.0 + sign * y)


def normal_pdf(x: float) -> float:
    """phi(x)."""
    return INV_SQRT_2PI * math.exp(-0.5 * x * x)


# ---------------------------------------------------------------------------
# Vectorised versions (same formulas, NumPy broadcasting)
# ---------------------------------------------------------------------------
def normal_cdf_vec(x) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    sign = np.where(x < 0, -1.0, 1.0)
    z = np.abs(x) * _INV_SQRT_2
    t = 1.0 / (1.0 + _P * z)
    tail = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t * np.exp(-z * z)
    return 0.5 * (1.0 + sign * (1.0 - tail))


def normal_pdf_vec(x) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    return INV_SQRT_2PI * np.exp(-0.5 * x * x)
