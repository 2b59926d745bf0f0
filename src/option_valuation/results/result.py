"""
Valuation result types.

A Result is an immutable snapshot of one valuation call. Analytical prices
are exact and carry no error term; simulation-based models return an
EstimationResult that also carries the standard error of the estimate.
"""

from dataclasses import dataclass

from option_valuation.config.tolerances import CONFIDENCE_Z_95
from option_valuation.errors import require_non_negative


@dataclass(frozen=True)
class Result:
    """
    Immutable valuation result.

    Attributes
    ----------
    value : float
        Option value, >= 0
    """

    value: float

    def __post_init__(self) -> None:
        """Validate result."""
        require_non_negative("value", self.value)

    def __str__(self) -> str:
        return f"Price: {self.value:.5f}"


@dataclass(frozen=True)
class EstimationResult(Result):
    """
    Immutable Monte Carlo estimation result.

    Attributes
    ----------
    value : float
        Estimated option value (mean discounted payoff), >= 0
    standard_error : float
        Standard error of the estimate, >= 0
    """

    standard_error: float

    def __post_init__(self) -> None:
        """Validate estimate and its standard error."""
        super().__post_init__()
        require_non_negative("standard_error", self.standard_error)

    @property
    def confidence_interval(self) -> tuple[float, float]:
        """95% confidence interval (z = 1.96)."""
        half_width = CONFIDENCE_Z_95 * self.standard_error
        return (self.value - half_width, self.value + half_width)

    @property
    def ci_width(self) -> float:
        """Width of 95% confidence interval."""
        return self.confidence_interval[1] - self.confidence_interval[0]

    @property
    def relative_error(self) -> float:
        """Relative standard error (SE / value)."""
        if abs(self.value) < 1e-10:
            return float("inf")
        return self.standard_error / abs(self.value)

    def __str__(self) -> str:
        return f"{super().__str__()} | Standard Error: {self.standard_error:.5f}"
