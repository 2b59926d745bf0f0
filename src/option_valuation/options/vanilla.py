"""
Vanilla European option.

Call payoff: max(S - K, 0)
Put payoff: max(K - S, 0)
"""

from typing import TYPE_CHECKING

import numpy as np

from option_valuation.options.base import Option
from option_valuation.options.pricing.black_scholes import vanilla_price

if TYPE_CHECKING:
    from option_valuation.underlyings.stock import Stock


class VanillaOption(Option):
    """
    Vanilla European call or put.

    Examples
    --------
    >>> from option_valuation.options.base import OptionType
    >>> option = VanillaOption(OptionType.PUT, strike_price=100, time_to_maturity=1)
    >>> option.payoff(90.0)
    10.0
    """

    def payoff(self, underlying_price: float) -> float:
        intrinsic = self.option_type.direction * (underlying_price - self.strike_price)
        return max(0.0, intrinsic)

    def payoff_vectorized(self, underlying_prices: np.ndarray) -> np.ndarray:
        prices = np.asarray(underlying_prices, dtype=float)
        return np.maximum(self.option_type.direction * (prices - self.strike_price), 0.0)

    def supports_analytical(self) -> bool:
        return True

    def calculate_price(self, stock: "Stock", interest_rate: float) -> float:
        """
        Black-Scholes price of the option.

        Parameters
        ----------
        stock : Stock
            The underlying stock
        interest_rate : float
            Annual continuously compounded risk-free rate

        Returns
        -------
        float
            Option price
        """
        return vanilla_price(
            spot=stock.current_price,
            strike=self.strike_price,
            rate=interest_rate,
            volatility=stock.volatility,
            time_to_maturity=self.time_to_maturity,
            option_type=self.option_type,
        )
