"""
Monte Carlo simulation primitives.

Provides:
- GBM terminal price evolution
- Plain and stratified standard normal sampling
- Plain and stratified standard error estimators
"""

from option_valuation.options.simulation.estimators import (
    sample_standard_error,
    stratified_standard_error,
)
from option_valuation.options.simulation.gbm import (
    apply_geometric_brownian_motion,
    draw_standard_normals,
    draw_stratified_standard_normals,
)

__all__ = [
    # GBM
    "apply_geometric_brownian_motion",
    "draw_standard_normals",
    "draw_stratified_standard_normals",
    # Estimators
    "sample_standard_error",
    "stratified_standard_error",
]
