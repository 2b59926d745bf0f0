"""
Option pricing implementations.

Provides Black-Scholes closed forms for vanilla and binary options.
"""

from option_valuation.options.pricing.black_scholes import (
    binary_price,
    calculate_d1_d2,
    put_call_parity_check,
    vanilla_price,
)

__all__ = [
    "binary_price",
    "calculate_d1_d2",
    "put_call_parity_check",
    "vanilla_price",
]
