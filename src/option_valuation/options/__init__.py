"""
European options: payoffs and closed-form prices.
"""

from option_valuation.options.base import AnalyticalSolution, Option, OptionType
from option_valuation.options.binary import BinaryOption
from option_valuation.options.vanilla import VanillaOption

__all__ = [
    "AnalyticalSolution",
    "BinaryOption",
    "Option",
    "OptionType",
    "VanillaOption",
]
