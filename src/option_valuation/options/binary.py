"""
Binary (digital) European option paying one unit of cash when in the money.
"""

from typing import TYPE_CHECKING

import numpy as np

from option_valuation.options.base import Option, OptionType
from option_valuation.options.pricing.black_scholes import binary_price

if TYPE_CHECKING:
    from option_valuation.underlyings.stock import Stock


class BinaryOption(Option):
    """
    Cash-or-nothing binary call or put.

    A call pays 1 when S > K, a put pays 1 when S < K. Settling exactly at
    the strike pays nothing for either.
    """

    def payoff(self, underlying_price: float) -> float:
        if self.option_type == OptionType.CALL:
            in_the_money = underlying_price > self.strike_price
        else:
            in_the_money = underlying_price < self.strike_price
        return 1.0 if in_the_money else 0.0

    def payoff_vectorized(self, underlying_prices: np.ndarray) -> np.ndarray:
        prices = np.asarray(underlying_prices, dtype=float)
        if self.option_type == OptionType.CALL:
            in_the_money = prices > self.strike_price
        else:
            in_the_money = prices < self.strike_price
        return in_the_money.astype(float)

    def supports_analytical(self) -> bool:
        return True

    def calculate_price(self, stock: "Stock", interest_rate: float) -> float:
        """Black-Scholes price: e^(-rT) N(±d2)."""
        return binary_price(
            spot=stock.current_price,
            strike=self.strike_price,
            rate=interest_rate,
            volatility=stock.volatility,
            time_to_maturity=self.time_to_maturity,
            option_type=self.option_type,
        )
