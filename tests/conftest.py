"""
Centralized pytest fixtures for the option-valuation test suite.

Fixture Categories:
1. Market Parameters - Reference market and textbook examples
2. Underlyings and Options - Stock and the four reference options
3. Random Sources - Reproducible generators
"""

from dataclasses import dataclass

import numpy as np
import pytest

from option_valuation.options.base import OptionType
from option_valuation.options.binary import BinaryOption
from option_valuation.options.vanilla import VanillaOption
from option_valuation.underlyings.stock import Stock

# =============================================================================
# MARKET PARAMETERS
# =============================================================================

@dataclass(frozen=True)
class MarketParams:
    """Standard market parameters for option pricing tests."""

    spot: float
    strike: float
    rate: float
    volatility: float
    time_to_maturity: float


#: Reference run: S=100, K=100, T=1, σ=10%, r=5%
REFERENCE_MARKET = MarketParams(
    spot=100.0,
    strike=100.0,
    rate=0.05,
    volatility=0.10,
    time_to_maturity=1.0,
)

#: Reference analytical prices for REFERENCE_MARKET
REFERENCE_PRICES = {
    ("vanilla", OptionType.CALL): 6.80496,
    ("vanilla", OptionType.PUT): 1.92790,
    ("binary", OptionType.CALL): 0.640791,
    ("binary", OptionType.PUT): 0.310438,
}

#: Hull (2021) Ch. 15 worked example: S=42, K=40, r=10%, σ=20%, T=0.5
HULL_EXAMPLE = MarketParams(
    spot=42.0,
    strike=40.0,
    rate=0.10,
    volatility=0.20,
    time_to_maturity=0.5,
)


@pytest.fixture
def reference_market() -> MarketParams:
    """Reference market conditions."""
    return REFERENCE_MARKET


@pytest.fixture
def hull_example() -> MarketParams:
    """Hull textbook example with published call 4.76 and put 0.81."""
    return HULL_EXAMPLE


# =============================================================================
# UNDERLYINGS AND OPTIONS
# =============================================================================

@pytest.fixture
def stock() -> Stock:
    """Reference stock (fresh per test, current_price is mutable)."""
    return Stock(current_price=REFERENCE_MARKET.spot, volatility=REFERENCE_MARKET.volatility)


@pytest.fixture
def vanilla_call() -> VanillaOption:
    return VanillaOption(OptionType.CALL, REFERENCE_MARKET.strike, REFERENCE_MARKET.time_to_maturity)


@pytest.fixture
def vanilla_put() -> VanillaOption:
    return VanillaOption(OptionType.PUT, REFERENCE_MARKET.strike, REFERENCE_MARKET.time_to_maturity)


@pytest.fixture
def binary_call() -> BinaryOption:
    return BinaryOption(OptionType.CALL, REFERENCE_MARKET.strike, REFERENCE_MARKET.time_to_maturity)


@pytest.fixture
def binary_put() -> BinaryOption:
    return BinaryOption(OptionType.PUT, REFERENCE_MARKET.strike, REFERENCE_MARKET.time_to_maturity)


@pytest.fixture(
    params=[
        ("vanilla", OptionType.CALL),
        ("vanilla", OptionType.PUT),
        ("binary", OptionType.CALL),
        ("binary", OptionType.PUT),
    ],
    ids=["vanilla-call", "vanilla-put", "binary-call", "binary-put"],
)
def reference_option(request):
    """
    Each reference option with its expected analytical price.

    Returns
    -------
    tuple[Option, float]
    """
    kind, option_type = request.param
    option_class = VanillaOption if kind == "vanilla" else BinaryOption
    option = option_class(option_type, REFERENCE_MARKET.strike, REFERENCE_MARKET.time_to_maturity)
    return option, REFERENCE_PRICES[(kind, option_type)]


# =============================================================================
# RANDOM SOURCES
# =============================================================================

@pytest.fixture
def reproducible_rng() -> np.random.Generator:
    """Seeded generator for deterministic tests."""
    return np.random.default_rng(42)
