"""
option-valuation: European option pricing under Black-Scholes.

Analytical (closed-form) prices for vanilla and binary options, and Monte
Carlo estimates with antithetic and stratified variance reduction.

Quick Start
-----------
>>> from option_valuation import (
...     OptionType, Stock, VanillaOption, StratifiedMonteCarloValuationModel,
... )
>>> stock = Stock(current_price=100.0, volatility=0.1)
>>> option = VanillaOption(OptionType.CALL, strike_price=100.0, time_to_maturity=1.0)
>>> model = StratifiedMonteCarloValuationModel(number_of_bins=1000, draws_per_bin=10, seed=42)
>>> result = model.value(option, stock, interest_rate=0.05)
>>> round(option.calculate_price(stock, 0.05), 4)
6.805

Version: 0.1.0
"""

__version__ = "0.1.0"

# =============================================================================
# Errors
# =============================================================================
from option_valuation.errors import ValidationError

# =============================================================================
# Underlyings and Options
# =============================================================================
from option_valuation.underlyings.stock import Stock
from option_valuation.options.base import AnalyticalSolution, Option, OptionType
from option_valuation.options.vanilla import VanillaOption
from option_valuation.options.binary import BinaryOption

# =============================================================================
# Results
# =============================================================================
from option_valuation.results.result import EstimationResult, Result

# =============================================================================
# Valuation Models
# =============================================================================
from option_valuation.valuation.base import ValuationModel
from option_valuation.valuation.monte_carlo import MonteCarloValuationModel
from option_valuation.valuation.antithetic import AntitheticMonteCarloValuationModel
from option_valuation.valuation.stratified import StratifiedMonteCarloValuationModel
from option_valuation.valuation.analysis import compare_models, convergence_analysis

# =============================================================================
# Configuration
# =============================================================================
from option_valuation.config.settings import SETTINGS

__all__ = [
    # Version
    "__version__",
    # Errors
    "ValidationError",
    # Underlyings and options
    "Stock",
    "AnalyticalSolution",
    "Option",
    "OptionType",
    "VanillaOption",
    "BinaryOption",
    # Results
    "Result",
    "EstimationResult",
    # Models
    "ValuationModel",
    "MonteCarloValuationModel",
    "AntitheticMonteCarloValuationModel",
    "StratifiedMonteCarloValuationModel",
    "compare_models",
    "convergence_analysis",
    # Config
    "SETTINGS",
]
