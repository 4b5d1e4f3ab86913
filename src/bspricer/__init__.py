# bspricer: closed-form Black-Scholes pricer
# Public API

# Data model & validation
from .core import (
    OptionParameters, OptionPrices, PriceCurvePoint,
    InvalidParameters, InvalidArgument,
    validate, is_valid_parameters, CALL, PUT,
)

# Normal distribution
from .normal import normal_cdf, normal_pdf, normal_cdf_vec, normal_pdf_vec

# Pricing engine
from .black_scholes import price_and_greeks, calculate_prices, call_price, put_price, price

# Curve sampling
from .curve import generate_price_curve, price_curve_arrays

# Model validation
from .validation import put_call_parity, cdf_accuracy, cross_check

__all__ = [
    # Data model
    "OptionParameters", "OptionPrices", "PriceCurvePoint",
    "InvalidParameters", "InvalidArgument",
    "validate", "is_valid_parameters", "CALL", "PUT",
    # Normal distribution
    "normal_cdf", "normal_pdf", "normal_cdf_vec", "normal_pdf_vec",
    # Pricing
    "price_and_greeks", "calculate_prices", "call_price", "put_price", "price",
    # Curves
    "generate_price_curve", "price_curve_arrays",
    # Validation
    "put_call_parity", "cdf_accuracy", "cross_check",
]

__version__ = "1.0.0"
