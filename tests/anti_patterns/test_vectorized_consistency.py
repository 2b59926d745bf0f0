"""
Anti-pattern test: Vectorized payoffs must equal scalar payoffs.

Monte Carlo models only ever call payoff_vectorized(); a divergence from
payoff() silently misprices every simulation.
"""

import numpy as np
import pytest

from option_valuation.options.base import OptionType
from option_valuation.options.binary import BinaryOption
from option_valuation.options.vanilla import VanillaOption


@pytest.mark.anti_pattern
@pytest.mark.parametrize("option_class", [VanillaOption, BinaryOption])
@pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
def test_vectorized_equals_scalar_on_random_prices(option_class, option_type, reproducible_rng):
    option = option_class(option_type, strike_price=100.0, time_to_maturity=1.0)
    prices = 100.0 * np.exp(0.3 * reproducible_rng.standard_normal(10_000))
    # Exact-strike settlements are the edge case for binaries
    prices[:10] = 100.0

    scalar = np.array([option.payoff(float(p)) for p in prices])
    vectorized = option.payoff_vectorized(prices)

    np.testing.assert_array_equal(vectorized, scalar)


@pytest.mark.anti_pattern
@pytest.mark.parametrize("option_class", [VanillaOption, BinaryOption])
def test_payoffs_never_negative(option_class, reproducible_rng):
    prices = 100.0 * np.exp(0.5 * reproducible_rng.standard_normal(10_000))

    for option_type in OptionType:
        option = option_class(option_type, strike_price=100.0, time_to_maturity=1.0)
        assert (option.payoff_vectorized(prices) >= 0.0).all()
