"""
Geometric Brownian Motion (GBM) terminal price generation.

Implements the sampling primitives shared by every Monte Carlo model:
- Exact terminal-price evolution under the risk-neutral measure
- Independent standard normal draws
- Stratified standard normal draws (equal-probability strata of [0, 1))

GBM SDE: dS = rS dt + σS dW

See: Glasserman (2003) "Monte Carlo Methods in Financial Engineering", Ch. 3-4
"""

from typing import TYPE_CHECKING, Union

import numpy as np
from scipy import stats

if TYPE_CHECKING:
    from option_valuation.underlyings.stock import Stock

ArrayOrFloat = Union[np.ndarray, float]


def apply_geometric_brownian_motion(
    stock: "Stock",
    time_period: float,
    interest_rate: float,
    standard_normal_draws: ArrayOrFloat,
) -> ArrayOrFloat:
    """
    Evolve the stock price to the end of ``time_period``.

    Exact log-normal step:
    S(T) = S(0) * exp((r - σ²/2)T + σ√T * Z)

    Parameters
    ----------
    stock : Stock
        Underlying stock (current price and volatility)
    time_period : float
        Horizon in years
    interest_rate : float
        Risk-free rate (annualized, decimal)
    standard_normal_draws : np.ndarray or float
        Standard normal draw(s) Z, any shape

    Returns
    -------
    np.ndarray or float
        Terminal price(s), same shape as the draws

    Examples
    --------
    >>> from option_valuation.underlyings.stock import Stock
    >>> stock = Stock(current_price=100, volatility=0.1)
    >>> round(float(apply_geometric_brownian_motion(stock, 1.0, 0.05, 0.0)), 4)
    104.6028
    """
    volatility = stock.volatility
    drift = (interest_rate - 0.5 * volatility**2) * time_period
    diffusion = volatility * np.sqrt(time_period)

    return stock.current_price * np.exp(drift + diffusion * np.asarray(standard_normal_draws))


def draw_standard_normals(rng: np.random.Generator, n_draws: int) -> np.ndarray:
    """
    Draw independent standard normal variates.

    Parameters
    ----------
    rng : np.random.Generator
        Random source
    n_draws : int
        Number of draws

    Returns
    -------
    np.ndarray
        Draws, shape (n_draws,)
    """
    if n_draws <= 0:
        raise ValueError(f"CRITICAL: n_draws must be > 0, got {n_draws}")
    return rng.standard_normal(n_draws)


def draw_stratified_standard_normals(
    rng: np.random.Generator,
    number_of_bins: int,
    draws_per_bin: int,
) -> np.ndarray:
    """
    Draw standard normals stratified over equal-probability bins.

    [0, 1) is split into ``number_of_bins`` intervals [i/B, (i+1)/B). Each bin
    receives ``draws_per_bin`` uniform draws, mapped to the normal scale by
    the inverse CDF (probability integral transform), so every bin holds
    exactly D draws from its own 1/B slice of the normal distribution.

    Parameters
    ----------
    rng : np.random.Generator
        Random source
    number_of_bins : int
        Number of strata B
    draws_per_bin : int
        Draws per stratum D

    Returns
    -------
    np.ndarray
        Draws, shape (number_of_bins, draws_per_bin); row i lies in stratum i
    """
    if number_of_bins <= 0:
        raise ValueError(f"CRITICAL: number_of_bins must be > 0, got {number_of_bins}")
    if draws_per_bin <= 0:
        raise ValueError(f"CRITICAL: draws_per_bin must be > 0, got {draws_per_bin}")

    lower_bounds = np.arange(number_of_bins, dtype=float)[:, np.newaxis] / number_of_bins
    upper_bounds = lower_bounds + 1.0 / number_of_bins

    uniforms = lower_bounds + rng.random((number_of_bins, draws_per_bin)) / number_of_bins
    # Rounding can land exactly on the upper bound; ppf(1.0) is +inf
    uniforms = np.minimum(uniforms, np.nextafter(upper_bounds, 0.0))

    return stats.norm.ppf(uniforms)
