"""
Plain Monte Carlo valuation model.

Prices any option by simulating terminal stock prices under risk-neutral
GBM and averaging discounted payoffs. Converges to the analytical price
at rate 1/√N.

See: Glasserman (2003) "Monte Carlo Methods in Financial Engineering", Ch. 1
"""

import logging
from typing import Optional

import numpy as np

from option_valuation.errors import ValidationError, require_integer
from option_valuation.options.base import Option
from option_valuation.options.simulation.estimators import sample_standard_error
from option_valuation.options.simulation.gbm import (
    apply_geometric_brownian_motion,
    draw_standard_normals,
)
from option_valuation.results.result import EstimationResult
from option_valuation.underlyings.stock import Stock
from option_valuation.valuation.base import SeedLike, ValuationModel

logger = logging.getLogger(__name__)


class MonteCarloValuationModel(ValuationModel):
    """
    Plain Monte Carlo valuation model.

    Parameters
    ----------
    number_of_trials : int
        Number of independent draws, must be > 1 so that the standard
        error can be estimated
    seed : int, optional
        Random seed for reproducibility

    Examples
    --------
    >>> from option_valuation import OptionType, Stock, VanillaOption
    >>> model = MonteCarloValuationModel(number_of_trials=100_000, seed=42)
    >>> option = VanillaOption(OptionType.CALL, strike_price=100, time_to_maturity=1)
    >>> result = model.value(option, Stock(100, 0.1), interest_rate=0.05)
    >>> print(f"Price: {result.value:.4f} ± {result.standard_error:.4f}")  # doctest: +SKIP
    """

    def __init__(self, number_of_trials: int, seed: SeedLike = None):
        number_of_trials = require_integer("number_of_trials", number_of_trials)
        if number_of_trials <= 1:
            raise ValidationError("number_of_trials", number_of_trials, "> 1")

        super().__init__(seed)
        self.number_of_trials = number_of_trials

    def value(
        self,
        option: Option,
        stock: Stock,
        interest_rate: float,
        rng: Optional[np.random.Generator] = None,
    ) -> EstimationResult:
        """
        Estimate the option value.

        1. Draw N standard normals Z
        2. S(T) = S(0) * exp((r - σ²/2)T + σ√T * Z)
        3. Discounted payoff e^(-rT) * payoff(S(T))
        4. Value = mean, SE = sample std (ddof=1) / √N

        Returns
        -------
        EstimationResult
            Estimated value and its standard error
        """
        generator = self._generator(rng)
        maturity = option.time_to_maturity

        draws = draw_standard_normals(generator, self.number_of_trials)
        terminal_prices = apply_geometric_brownian_motion(stock, maturity, interest_rate, draws)

        discount_factor = np.exp(-interest_rate * maturity)
        discounted_payoffs = discount_factor * option.payoff_vectorized(terminal_prices)

        result = EstimationResult(
            value=float(discounted_payoffs.mean()),
            standard_error=sample_standard_error(discounted_payoffs),
        )

        logger.debug(
            f"{self.name} valued {option} with {self.number_of_trials} trials: {result}"
        )
        return result

    def __repr__(self) -> str:
        return f"{self.name}(number_of_trials={self.number_of_trials}, seed={self.seed!r})"
