"""
Stratified Monte Carlo valuation model.

The probability space [0, 1) is cut into B equal-width strata with D draws
in each, so every slice of the normal distribution is sampled in exact
proportion. The estimate is the mean of the per-stratum means; its standard
error pools the within-stratum variances.

See: Glasserman (2003) "Monte Carlo Methods in Financial Engineering", Ch. 4.3
"""

import logging
from typing import Optional

import numpy as np

from option_valuation.errors import ValidationError, require_integer
from option_valuation.options.base import Option
from option_valuation.options.simulation.estimators import stratified_standard_error
from option_valuation.options.simulation.gbm import (
    apply_geometric_brownian_motion,
    draw_stratified_standard_normals,
)
from option_valuation.results.result import EstimationResult
from option_valuation.underlyings.stock import Stock
from option_valuation.valuation.base import SeedLike, ValuationModel

logger = logging.getLogger(__name__)


class StratifiedMonteCarloValuationModel(ValuationModel):
    """
    Monte Carlo valuation with stratified sampling.

    Parameters
    ----------
    number_of_bins : int
        Number of strata B, must be > 1
    draws_per_bin : int
        Draws per stratum D, must be >= 1. With D == 1 the standard error
        falls back to the plain estimator over the B draws.
    seed : int, optional
        Random seed for reproducibility

    Examples
    --------
    >>> model = StratifiedMonteCarloValuationModel(number_of_bins=1000, draws_per_bin=10)
    >>> model.number_of_trials
    10000
    """

    def __init__(self, number_of_bins: int, draws_per_bin: int, seed: SeedLike = None):
        number_of_bins = require_integer("number_of_bins", number_of_bins)
        draws_per_bin = require_integer("draws_per_bin", draws_per_bin)
        if number_of_bins <= 1:
            raise ValidationError("number_of_bins", number_of_bins, "> 1")
        if draws_per_bin < 1:
            raise ValidationError("draws_per_bin", draws_per_bin, ">= 1")

        super().__init__(seed)
        self.number_of_bins = number_of_bins
        self.draws_per_bin = draws_per_bin

    @property
    def number_of_trials(self) -> int:
        """Total draws B * D."""
        return self.number_of_bins * self.draws_per_bin

    def value(
        self,
        option: Option,
        stock: Stock,
        interest_rate: float,
        rng: Optional[np.random.Generator] = None,
    ) -> EstimationResult:
        """
        Estimate the option value from stratified draws.

        Value = mean over bins of the bin-mean discounted payoff
        SE = √(mean over bins of bin sample variance) / √(B·D)
        """
        generator = self._generator(rng)
        maturity = option.time_to_maturity

        draws = draw_stratified_standard_normals(generator, self.number_of_bins, self.draws_per_bin)
        terminal_prices = apply_geometric_brownian_motion(stock, maturity, interest_rate, draws)

        discount_factor = np.exp(-interest_rate * maturity)
        discounted_payoffs = discount_factor * option.payoff_vectorized(terminal_prices)

        bin_means = discounted_payoffs.mean(axis=1)

        result = EstimationResult(
            value=float(bin_means.mean()),
            standard_error=stratified_standard_error(discounted_payoffs),
        )

        logger.debug(
            f"{self.name} valued {option} with {self.number_of_bins} bins x "
            f"{self.draws_per_bin} draws: {result}"
        )
        return result

    def __repr__(self) -> str:
        return (
            f"{self.name}(number_of_bins={self.number_of_bins}, "
            f"draws_per_bin={self.draws_per_bin}, seed={self.seed!r})"
        )
