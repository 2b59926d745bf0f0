"""
Convergence and comparison tools for valuation models.

MC standard error should shrink at rate 1/√N, and every model should agree
with the analytical price within a few standard errors.
"""

from typing import Callable, Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from option_valuation.config.tolerances import MC_CONFIDENCE_MULTIPLIER
from option_valuation.options.base import Option
from option_valuation.results.result import EstimationResult, Result
from option_valuation.underlyings.stock import Stock
from option_valuation.valuation.base import ValuationModel

ANALYTICAL_LABEL = "Analytical solution"


def compare_models(
    models: Iterable[ValuationModel],
    option: Option,
    stock: Stock,
    interest_rate: float,
) -> pd.DataFrame:
    """
    Value one option with several models.

    Parameters
    ----------
    models : Iterable[ValuationModel]
        Models to run, in display order
    option : Option
        Option to value
    stock : Stock
        Underlying stock
    interest_rate : float
        Annual risk-free rate

    Returns
    -------
    pd.DataFrame
        One row per model (plus a leading analytical row when the option
        supports it) with columns model, price, standard_error, error.
        ``error`` is the deviation from the analytical price (NaN when there
        is none); ``standard_error`` is NaN for exact prices.
    """
    analytical = option.analytical_solution()
    analytical_price = (
        analytical.calculate_price(stock, interest_rate) if analytical is not None else np.nan
    )

    rows = []
    if analytical is not None:
        rows.append(
            {
                "model": ANALYTICAL_LABEL,
                "price": analytical_price,
                "standard_error": np.nan,
                "error": 0.0,
            }
        )

    for model in models:
        result = model.value(option, stock, interest_rate)
        rows.append(
            {
                "model": model.name,
                "price": result.value,
                "standard_error": _standard_error_of(result),
                "error": result.value - analytical_price,
            }
        )

    return pd.DataFrame(rows, columns=["model", "price", "standard_error", "error"])


def convergence_analysis(
    model_factory: Callable[[int], ValuationModel],
    option: Option,
    stock: Stock,
    interest_rate: float,
    trial_counts: Sequence[int] = (1_000, 5_000, 10_000, 50_000, 100_000),
    confidence: float = MC_CONFIDENCE_MULTIPLIER,
) -> pd.DataFrame:
    """
    Analyze convergence of a model family to the analytical price.

    Parameters
    ----------
    model_factory : Callable[[int], ValuationModel]
        Builds a model for a given trial count,
        e.g. ``lambda n: MonteCarloValuationModel(n, seed=42)``
    option : Option
        Option to value; must support analytical pricing
    stock : Stock
        Underlying stock
    interest_rate : float
        Annual risk-free rate
    trial_counts : Sequence[int]
        Trial counts to run
    confidence : float, default 3.0
        Standard errors allowed between estimate and analytical price

    Returns
    -------
    pd.DataFrame
        Columns n_trials, estimate, standard_error, analytical_price,
        absolute_error, relative_error, within_tolerance

    Raises
    ------
    ValueError
        If the option has no analytical price
    """
    analytical = option.analytical_solution()
    if analytical is None:
        raise ValueError(
            f"CRITICAL: convergence analysis needs an analytical price; "
            f"{type(option).__name__} has none"
        )

    analytical_price = analytical.calculate_price(stock, interest_rate)

    rows = []
    for n_trials in trial_counts:
        result = model_factory(n_trials).value(option, stock, interest_rate)
        standard_error = _standard_error_of(result)
        error = abs(result.value - analytical_price)

        rows.append(
            {
                "n_trials": n_trials,
                "estimate": result.value,
                "standard_error": standard_error,
                "analytical_price": analytical_price,
                "absolute_error": error,
                "relative_error": error / analytical_price if analytical_price > 0 else float("inf"),
                "within_tolerance": error <= confidence * standard_error,
            }
        )

    return pd.DataFrame(rows)


def estimate_convergence_rate(convergence: pd.DataFrame) -> float:
    """
    Estimate the convergence rate of the standard error.

    Log-log regression: log(SE) = rate * log(N) + const.
    Theory predicts rate = -0.5.

    Parameters
    ----------
    convergence : pd.DataFrame
        Output of convergence_analysis()

    Returns
    -------
    float
        Estimated rate (should be ~-0.5)
    """
    log_n = np.log(convergence["n_trials"].to_numpy(dtype=float))
    log_se = np.log(convergence["standard_error"].to_numpy(dtype=float) + 1e-12)

    slope, _ = np.polyfit(log_n, log_se, 1)
    return float(slope)


def _standard_error_of(result: Result) -> float:
    if isinstance(result, EstimationResult):
        return result.standard_error
    return np.nan


def format_comparison(comparison: pd.DataFrame, title: Optional[str] = None) -> str:
    """Render compare_models() output as fixed-width text."""
    table = comparison.to_string(
        index=False,
        na_rep="",
        float_format=lambda x: f"{x:.5f}",
    )
    if title is None:
        return table
    return f"{title}\n{table}"
