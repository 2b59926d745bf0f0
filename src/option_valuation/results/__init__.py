"""
Valuation results.
"""

from option_valuation.results.result import EstimationResult, Result

__all__ = ["EstimationResult", "Result"]
