"""
Base classes for European options.

Provides the option type enumeration, the abstract Option with its payoff
contract, and the AnalyticalSolution capability implemented by options that
have a closed-form Black-Scholes price.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Optional, Protocol

import numpy as np

from option_valuation.errors import require_positive

if TYPE_CHECKING:
    from option_valuation.underlyings.stock import Stock


class OptionType(Enum):
    """Option type enumeration."""

    CALL = "call"
    PUT = "put"

    @property
    def direction(self) -> int:
        """Payoff direction: +1 for calls, -1 for puts."""
        return 1 if self is OptionType.CALL else -1

    @property
    def label(self) -> str:
        """Display label ("Call" / "Put")."""
        return self.value.capitalize()


class AnalyticalSolution(Protocol):
    """Protocol for options priced in closed form."""

    def calculate_price(self, stock: "Stock", interest_rate: float) -> float:
        """Closed-form price of the option on ``stock`` at ``interest_rate``."""
        ...


class Option(ABC):
    """
    Abstract base class for European options.

    All option implementations must:
    1. Implement payoff() for a single terminal price
    2. Never return a negative payoff

    Options are immutable once constructed.

    Parameters
    ----------
    option_type : OptionType
        Call or put
    strike_price : float
        Strike price, must be > 0
    time_to_maturity : float
        Time to maturity in years, must be > 0

    Raises
    ------
    ValidationError
        If strike_price or time_to_maturity is not strictly positive
    """

    def __init__(self, option_type: OptionType, strike_price: float, time_to_maturity: float):
        if not isinstance(option_type, OptionType):
            raise TypeError(f"CRITICAL: option_type must be an OptionType, got {option_type!r}")

        self._option_type = option_type
        self._strike_price = float(require_positive("strike_price", strike_price))
        self._time_to_maturity = float(require_positive("time_to_maturity", time_to_maturity))

    @property
    def option_type(self) -> OptionType:
        """Call or put."""
        return self._option_type

    @property
    def strike_price(self) -> float:
        """Strike price."""
        return self._strike_price

    @property
    def time_to_maturity(self) -> float:
        """Time to maturity in years."""
        return self._time_to_maturity

    @abstractmethod
    def payoff(self, underlying_price: float) -> float:
        """
        Calculate option payoff at maturity.

        Parameters
        ----------
        underlying_price : float
            Price of the underlying at maturity

        Returns
        -------
        float
            Payoff (intrinsic value), always >= 0
        """
        pass

    def payoff_vectorized(self, underlying_prices: np.ndarray) -> np.ndarray:
        """
        Calculate payoffs for many terminal prices at once.

        The default loops over payoff(); subclasses override with array
        arithmetic. Must produce identical results to calling payoff() in a loop.

        Parameters
        ----------
        underlying_prices : np.ndarray
            Terminal prices of the underlying

        Returns
        -------
        np.ndarray
            Payoffs, same shape as input
        """
        prices = np.asarray(underlying_prices, dtype=float)
        payoffs = np.fromiter(
            (self.payoff(float(p)) for p in prices.ravel()),
            dtype=float,
            count=prices.size,
        )
        return payoffs.reshape(prices.shape)

    def supports_analytical(self) -> bool:
        """
        Check if this option has a closed-form price.

        Returns
        -------
        bool
            True if calculate_price() is available
        """
        return False

    def calculate_price(self, stock: "Stock", interest_rate: float) -> float:
        """
        Price the option analytically.

        Raises
        ------
        NotImplementedError
            If no closed form exists for this option
        """
        raise NotImplementedError(
            f"calculate_price() not implemented for {type(self).__name__}. "
            f"Check supports_analytical() first."
        )

    def analytical_solution(self) -> Optional[AnalyticalSolution]:
        """Return the closed-form pricer for this option, or None if there is none."""
        return self if self.supports_analytical() else None

    def __str__(self) -> str:
        return (
            f"{type(self).__name__} | Option type: {self._option_type.label} | "
            f"Strike price: {self._strike_price} | Time to maturity: {self._time_to_maturity}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(option_type={self._option_type}, "
            f"strike_price={self._strike_price}, time_to_maturity={self._time_to_maturity})"
        )
