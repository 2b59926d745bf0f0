"""
Option valuation models.

Provides:
- Plain Monte Carlo
- Antithetic-variate Monte Carlo
- Stratified Monte Carlo
- Convergence and model comparison tools
"""

from option_valuation.valuation.analysis import (
    compare_models,
    convergence_analysis,
    estimate_convergence_rate,
    format_comparison,
)
from option_valuation.valuation.antithetic import AntitheticMonteCarloValuationModel
from option_valuation.valuation.base import ValuationModel
from option_valuation.valuation.monte_carlo import MonteCarloValuationModel
from option_valuation.valuation.stratified import StratifiedMonteCarloValuationModel

__all__ = [
    # Models
    "AntitheticMonteCarloValuationModel",
    "MonteCarloValuationModel",
    "StratifiedMonteCarloValuationModel",
    "ValuationModel",
    # Analysis
    "compare_models",
    "convergence_analysis",
    "estimate_convergence_rate",
    "format_comparison",
]
