"""
Centralized tolerance framework for option valuation.

Tolerances are derived from precision requirements, not ad hoc tuning.

Tolerance Tiers:
    Tier 1 (Analytical): Closed-form Black-Scholes, deterministic results
    Tier 2 (Reference): Published reference prices quoted to ~5 decimals
    Tier 3 (Stochastic): CLT-derived bounds for Monte Carlo estimates

References:
    Hull (2021) Ch. 15 - Black-Scholes-Merton model
    Glasserman (2003) Ch. 1, 4 - Monte Carlo error and variance reduction
"""

from typing import Final

import numpy as np

# =============================================================================
# Tier 1: Analytical Tolerances (Deterministic)
# =============================================================================

#: Identities that hold exactly in closed form (parity, bounds)
#: Tolerance: ~1e-10 allows for float64 accumulation errors
ANALYTICAL_TOLERANCE: Final[float] = 1e-10

#: Put-call parity: C - P = S - K*exp(-rT)
PUT_CALL_PARITY_TOLERANCE: Final[float] = 1e-8


# =============================================================================
# Tier 2: Reference Price Tolerances
# =============================================================================

#: Textbook reference prices are quoted to 5 decimals
REFERENCE_PRICE_TOLERANCE: Final[float] = 1e-3


# =============================================================================
# Tier 3: Stochastic Tolerances (CLT-Derived)
# =============================================================================

#: Number of standard errors a Monte Carlo estimate may deviate from the
#: analytical price (3 SE gives a 99.7% two-sided interval)
MC_CONFIDENCE_MULTIPLIER: Final[float] = 3.0

#: z-score of the two-sided 95% confidence interval reported on results
CONFIDENCE_Z_95: Final[float] = 1.96


def mc_tolerance(n_trials: int, sigma: float = 0.20, confidence: float = MC_CONFIDENCE_MULTIPLIER) -> float:
    """
    Calculate CLT-derived Monte Carlo tolerance.

    Standard error of a MC estimate is sigma/sqrt(N); ``confidence`` standard
    errors bound the estimate with high probability.

    Parameters
    ----------
    n_trials : int
        Number of Monte Carlo trials
    sigma : float
        Estimated standard deviation of the discounted payoff
    confidence : float
        Number of standard errors (default 3 for 99.7% CI)

    Returns
    -------
    float
        Tolerance for MC vs analytical comparison

    Examples
    --------
    >>> round(mc_tolerance(10_000), 4)
    0.006
    """
    if n_trials <= 0:
        raise ValueError(f"CRITICAL: n_trials must be > 0, got {n_trials}")
    return float(confidence * sigma / np.sqrt(n_trials))


#: Antithetic / stratified SE may exceed plain SE by at most this fraction
#: on a single seed before the variance reduction is considered broken
MAX_VARIANCE_REDUCTION_SLACK: Final[float] = 0.10


# =============================================================================
# Tolerance Registry (For Dynamic Access)
# =============================================================================

TOLERANCE_REGISTRY: dict[str, float] = {
    "analytical": ANALYTICAL_TOLERANCE,
    "put_call_parity": PUT_CALL_PARITY_TOLERANCE,
    "reference_price": REFERENCE_PRICE_TOLERANCE,
    "mc_confidence_multiplier": MC_CONFIDENCE_MULTIPLIER,
    "confidence_z_95": CONFIDENCE_Z_95,
    "max_variance_reduction_slack": MAX_VARIANCE_REDUCTION_SLACK,
}


def get_tolerance(name: str) -> float:
    """
    Get tolerance by name from registry.

    Parameters
    ----------
    name : str
        Tolerance name (see TOLERANCE_REGISTRY keys)

    Returns
    -------
    float
        Tolerance value

    Raises
    ------
    KeyError
        If tolerance name not found
    """
    if name not in TOLERANCE_REGISTRY:
        available = ", ".join(sorted(TOLERANCE_REGISTRY.keys()))
        raise KeyError(f"Unknown tolerance '{name}'. Available: {available}")
    return TOLERANCE_REGISTRY[name]
