from __future__ import annotations
import logging
import math
from dataclasses import dataclass, fields, replace
from typing import NamedTuple

LOGGER = logging.getLogger(__name__)

CALL = "call"
PUT  = "put"


class InvalidParameters(ValueError):
    """Raised when an option parameter set fails validation."""

    def __init__(self, message: str = "invalid option parameters"):
        super().__init__(message)


class InvalidArgument(ValueError):
    """Raised for a malformed non-financial argument (e.g. curve sample count)."""


def is_valid_parameters(S, K, T, r, sigma) -> bool:
    """Pure validity predicate: S, K, T, sigma > 0 and all five finite.

    The risk-free rate carries no sign constraint.  Values that cannot be
    represented as a float (e.g. ``10**400``) or are not numbers are invalid.
    """
    values = (S, K, T, r, sigma)
    try:
        if not all(math.isfinite(v) for v in values):
            return False
    except (OverflowError, TypeError):
        return False
    return S > 0.0 and K > 0.0 and T > 0.0 and sigma > 0.0


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionParameters:
    """Validated market + contract inputs for one European option.

    An instance only exists when every constraint holds; construction of an
    invalid combination raises :class:`InvalidParameters`, nothing is clamped.
    """
    underlying_price: float    # S
    strike_price: float        # K
    time_to_expiration: float  # T, years
    risk_free_rate: float      # r, continuous, may be negative
    volatility: float          # sigma, annualised

    def __post_init__(self):
        if not self.is_valid():
            LOGGER.debug(
                "rejected parameters S=%r K=%r T=%r r=%r sigma=%r",
                self.underlying_price, self.strike_price,
                self.time_to_expiration, self.risk_free_rate, self.volatility,
            )
            raise InvalidParameters()

    def is_valid(self) -> bool:
        return is_valid_parameters(
            self.underlying_price,
            self.strike_price,
            self.time_to_expiration,
            self.risk_free_rate,
            self.volatility,
        )

    def replace(self, **changes) -> OptionParameters:
        """Copy with some fields swapped; the copy is validated again."""
        return replace(self, **changes)


def validate(S: float, K: float, T: float, r: float, sigma: float) -> OptionParameters:
    """Build an :class:`OptionParameters` or raise :class:`InvalidParameters`."""
    return OptionParameters(
        underlying_price=S,
        strike_price=K,
        time_to_expiration=T,
        risk_free_rate=r,
        volatility=sigma,
    )


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionPrices:
    """Prices and Greeks for one parameter set.

    Units
    -----
    theta_* : currency per calendar day (raw theta / 365.25)
    vega    : currency per 1 vol point (raw vega / 100)
    rho_*   : currency per 1 rate point (raw rho / 100)
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


class PriceCurvePoint(NamedTuple):
    underlying_price: float
    call_price: float
    put_price: float
