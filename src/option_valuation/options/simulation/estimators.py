"""
Standard error estimators for Monte Carlo samples.

Standard error of a MC mean is σ/√N, with σ estimated by the unbiased
(ddof=1) sample standard deviation. For stratified samples the variance is
estimated within each stratum and pooled, since within-stratum variance is
what stratification reduces.
"""

import numpy as np


def sample_standard_error(values: np.ndarray) -> float:
    """
    Standard error of the mean of independent observations.

    SE = s / √N, s = sample standard deviation (divisor N - 1)

    Parameters
    ----------
    values : np.ndarray
        Observations, shape (N,), N >= 2

    Returns
    -------
    float
        Standard error
    """
    values = np.asarray(values, dtype=float)
    n = values.size
    if n < 2:
        raise ValueError(f"CRITICAL: need at least 2 observations, got {n}")

    return float(values.std(ddof=1) / np.sqrt(n))


def stratified_standard_error(values: np.ndarray) -> float:
    """
    Standard error of a stratified mean with equal draws per stratum.

    SE = √(mean_i s_i²) / √(B·D), s_i² = sample variance of stratum i
    (divisor D - 1), B strata, D draws per stratum.

    With a single draw per stratum there is no within-stratum variance; the
    B observations are then treated as one sample (divisor B - 1), an upper
    bound on the stratified error.

    Parameters
    ----------
    values : np.ndarray
        Observations, shape (B, D), one row per stratum

    Returns
    -------
    float
        Standard error
    """
    values = np.asarray(values, dtype=float)
    if values.ndim != 2:
        raise ValueError(f"CRITICAL: values must be 2-D (bins, draws), got shape {values.shape}")

    number_of_bins, draws_per_bin = values.shape
    if number_of_bins < 1 or draws_per_bin < 1:
        raise ValueError(f"CRITICAL: values must be non-empty, got shape {values.shape}")
    if draws_per_bin == 1:
        return sample_standard_error(values.ravel())

    pooled_variance = values.var(axis=1, ddof=1).mean()
    return float(np.sqrt(pooled_variance) / np.sqrt(values.size))
