"""
Configuration: frozen settings and centralized tolerances.
"""

from option_valuation.config.settings import (
    SETTINGS,
    ContractConfig,
    MarketConfig,
    Settings,
    SimulationConfig,
)

__all__ = [
    "SETTINGS",
    "ContractConfig",
    "MarketConfig",
    "Settings",
    "SimulationConfig",
]
