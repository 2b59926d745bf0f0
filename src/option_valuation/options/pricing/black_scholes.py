"""
Black-Scholes closed-form prices for vanilla and binary European options.

Options call into these functions from calculate_price(); they are also
usable directly with plain floats.

References
----------
Black, F., & Scholes, M. (1973). The pricing of options and corporate liabilities.
Hull, J. C. (2021). Options, Futures, and Other Derivatives (11th ed.), Ch. 15, 26.
"""

import numpy as np
from scipy import stats

from option_valuation.config.tolerances import PUT_CALL_PARITY_TOLERANCE
from option_valuation.errors import require_positive
from option_valuation.options.base import OptionType


def _validate_inputs(
    spot: float,
    strike: float,
    volatility: float,
    time_to_maturity: float,
) -> None:
    """Validate Black-Scholes inputs."""
    require_positive("spot", spot)
    require_positive("strike", strike)
    require_positive("volatility", volatility)
    require_positive("time_to_maturity", time_to_maturity)


def calculate_d1_d2(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_maturity: float,
) -> tuple[float, float]:
    """
    Calculate d1 and d2 parameters.

    d1 = (ln(S/K) + (r + σ²/2)T) / (σ√T)
    d2 = d1 - σ√T

    Parameters
    ----------
    spot : float
        Current spot price
    strike : float
        Strike price
    rate : float
        Risk-free rate (decimal)
    volatility : float
        Volatility (decimal)
    time_to_maturity : float
        Time to maturity (years)

    Returns
    -------
    tuple[float, float]
        (d1, d2)
    """
    _validate_inputs(spot, strike, volatility, time_to_maturity)

    vol_sqrt_t = volatility * np.sqrt(time_to_maturity)

    d1 = (np.log(spot / strike) + (rate + 0.5 * volatility**2) * time_to_maturity) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t

    return float(d1), float(d2)


def vanilla_price(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_maturity: float,
    option_type: OptionType,
) -> float:
    """
    Price a vanilla European option.

    C = S*N(d1) - K*e^(-rT)*N(d2)
    P = K*e^(-rT)*N(-d2) - S*N(-d1)

    Parameters
    ----------
    spot : float
        Current spot price
    strike : float
        Strike price
    rate : float
        Risk-free rate (decimal)
    volatility : float
        Volatility (decimal)
    time_to_maturity : float
        Time to maturity (years)
    option_type : OptionType
        Call or put

    Returns
    -------
    float
        Option price

    Examples
    --------
    >>> round(vanilla_price(100, 100, 0.05, 0.1, 1.0, OptionType.CALL), 4)
    6.805
    """
    d1, d2 = calculate_d1_d2(spot, strike, rate, volatility, time_to_maturity)
    discount_factor = np.exp(-rate * time_to_maturity)

    if option_type == OptionType.CALL:
        price = stats.norm.cdf(d1) * spot - stats.norm.cdf(d2) * strike * discount_factor
    else:
        price = stats.norm.cdf(-d2) * strike * discount_factor - stats.norm.cdf(-d1) * spot

    # Deep out-of-the-money prices can round a hair below zero
    return max(float(price), 0.0)


def binary_price(
    spot: float,
    strike: float,
    rate: float,
    volatility: float,
    time_to_maturity: float,
    option_type: OptionType,
) -> float:
    """
    Price a cash-or-nothing binary option paying 1 when in the money.

    Call = e^(-rT)*N(d2)
    Put  = e^(-rT)*N(-d2)

    Parameters
    ----------
    spot : float
        Current spot price
    strike : float
        Strike price
    rate : float
        Risk-free rate (decimal)
    volatility : float
        Volatility (decimal)
    time_to_maturity : float
        Time to maturity (years)
    option_type : OptionType
        Call or put

    Returns
    -------
    float
        Option price, in [0, e^(-rT)]
    """
    _, d2 = calculate_d1_d2(spot, strike, rate, volatility, time_to_maturity)
    discount_factor = np.exp(-rate * time_to_maturity)

    return float(discount_factor * stats.norm.cdf(option_type.direction * d2))


def put_call_parity_check(
    call_price: float,
    put_price: float,
    spot: float,
    strike: float,
    rate: float,
    time_to_maturity: float,
    tolerance: float = PUT_CALL_PARITY_TOLERANCE,
) -> tuple[bool, float]:
    """
    Verify put-call parity holds.

    C - P = S - K*e^(-rT)

    Parameters
    ----------
    call_price : float
        Call option price
    put_price : float
        Put option price
    spot : float
        Spot price
    strike : float
        Strike price
    rate : float
        Risk-free rate
    time_to_maturity : float
        Time to maturity
    tolerance : float
        Acceptable absolute error

    Returns
    -------
    tuple[bool, float]
        (parity_holds, error)
    """
    forward_value = spot - strike * np.exp(-rate * time_to_maturity)
    error = float(abs((call_price - put_price) - forward_value))
    return error <= tolerance, error
