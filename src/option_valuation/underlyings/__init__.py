"""
Underlying assets.
"""

from option_valuation.underlyings.stock import Stock

__all__ = ["Stock"]
