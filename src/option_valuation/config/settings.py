"""
Frozen configuration settings for option valuation.

All configuration is immutable (frozen dataclasses) to ensure reproducibility.
Defaults reproduce the reference valuation run: an at-the-money one-year
option on a 10%-volatility stock with a 5% risk-free rate, valued with
1000 strata of 10 draws.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

# =============================================================================
# Environment overrides
# =============================================================================

SEED_ENV_VAR = "OPTION_VALUATION_SEED"
LOG_LEVEL_ENV_VAR = "OPTION_VALUATION_LOG_LEVEL"


def _resolve_seed() -> Optional[int]:
    """
    Resolve the default random seed.

    Priority:
    1. OPTION_VALUATION_SEED environment variable (if set)
    2. Default: None (fresh OS entropy on every valuation)

    Returns
    -------
    int or None
        Seed for numpy.random.default_rng
    """
    env_seed = os.environ.get(SEED_ENV_VAR)
    if env_seed:
        return int(env_seed)
    return None


def _resolve_log_level() -> str:
    """Resolve log level from OPTION_VALUATION_LOG_LEVEL, defaulting to WARNING."""
    return os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()


# =============================================================================
# Simulation Configuration
# =============================================================================

@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable Monte Carlo configuration.

    Attributes
    ----------
    number_of_bins : int
        Strata for the stratified model
    draws_per_bin : int
        Draws inside each stratum
    seed : int, optional
        Random seed. Override with OPTION_VALUATION_SEED environment variable.

    Notes
    -----
    The plain model runs ``number_of_bins * draws_per_bin`` trials. The
    antithetic model evaluates two payoffs per draw, so it runs half as many
    trials to spend the same number of underlying evaluations.
    """

    number_of_bins: int = 1000
    draws_per_bin: int = 10
    seed: Optional[int] = field(default_factory=_resolve_seed)

    @property
    def number_of_trials(self) -> int:
        """Total trials of the plain model."""
        return self.number_of_bins * self.draws_per_bin

    @property
    def antithetic_trials(self) -> int:
        """Trials of the antithetic model at equal underlying evaluations."""
        return self.number_of_trials // 2


# =============================================================================
# Market / Contract Configuration
# =============================================================================

@dataclass(frozen=True)
class MarketConfig:
    """
    Immutable market configuration.

    Attributes
    ----------
    spot_price : float
        Current price of the underlying stock
    volatility : float
        Annualized volatility (decimal)
    annual_risk_free_rate : float
        Continuously compounded risk-free rate (decimal)
    """

    spot_price: float = 100.0
    volatility: float = 0.1
    annual_risk_free_rate: float = 0.05


@dataclass(frozen=True)
class ContractConfig:
    """
    Immutable option contract configuration.

    Attributes
    ----------
    strike_price : float
        Strike shared by every option in the reference book
    time_to_maturity : float
        Time to maturity in years
    """

    strike_price: float = 100.0
    time_to_maturity: float = 1.0


# =============================================================================
# Master Configuration
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Master frozen configuration combining all sub-configs.

    Usage
    -----
    >>> from option_valuation.config.settings import SETTINGS
    >>> SETTINGS.simulation.number_of_trials
    10000
    """

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    market: MarketConfig = field(default_factory=MarketConfig)
    contract: ContractConfig = field(default_factory=ContractConfig)
    log_level: str = field(default_factory=_resolve_log_level)


# Singleton instance - import this
SETTINGS = Settings()
