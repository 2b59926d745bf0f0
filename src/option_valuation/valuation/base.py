"""
Base valuation model abstract class.

All valuation models implement value(option, stock, interest_rate) and are
configured once at construction. Models hold no per-call state: every call
draws from its own generator, so one model instance can value many options,
from many threads, as long as callers do not share an explicit ``rng``.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

import numpy as np

from option_valuation.options.base import Option
from option_valuation.results.result import Result
from option_valuation.underlyings.stock import Stock

SeedLike = Union[int, np.random.SeedSequence, None]


class ValuationModel(ABC):
    """
    Abstract base class for option valuation models.

    Subclasses: MonteCarloValuationModel, AntitheticMonteCarloValuationModel,
    StratifiedMonteCarloValuationModel

    Parameters
    ----------
    seed : int or np.random.SeedSequence, optional
        Seed for the generator built on each call. None draws fresh OS
        entropy every call.
    """

    def __init__(self, seed: SeedLike = None):
        self.seed = seed

    @property
    def name(self) -> str:
        """Display name of the model."""
        return type(self).__name__

    @abstractmethod
    def value(
        self,
        option: Option,
        stock: Stock,
        interest_rate: float,
        rng: Optional[np.random.Generator] = None,
    ) -> Result:
        """
        Value the option.

        Parameters
        ----------
        option : Option
            Option to value (payoff and maturity)
        stock : Stock
            Underlying stock (current price and volatility)
        interest_rate : float
            Annual continuously compounded risk-free rate
        rng : np.random.Generator, optional
            Random source for this call. Overrides the model seed.

        Returns
        -------
        Result
            Value of the option
        """
        pass

    def _generator(self, rng: Optional[np.random.Generator]) -> np.random.Generator:
        """Return ``rng`` if given, else a fresh generator seeded from the model seed."""
        if rng is not None:
            return rng
        return np.random.default_rng(self.seed)

    def __repr__(self) -> str:
        return f"{self.name}(seed={self.seed!r})"
