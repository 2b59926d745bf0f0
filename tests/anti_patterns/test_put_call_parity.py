"""
Anti-pattern test: Put-call parity verification.

[T1] Any Black-Scholes implementation MUST satisfy put-call parity.
C - P = S - K*e^(-rT)

[T1] Binary call and put together pay 1 in every state.
C_bin + P_bin = e^(-rT)
"""

import numpy as np
import pytest

from option_valuation.config.tolerances import PUT_CALL_PARITY_TOLERANCE
from option_valuation.options.base import OptionType
from option_valuation.options.pricing.black_scholes import (
    binary_price,
    put_call_parity_check,
    vanilla_price,
)

PARITY_CASES = [
    # (spot, strike, rate, volatility, maturity)
    (100.0, 100.0, 0.05, 0.10, 1.0),
    (42.0, 40.0, 0.10, 0.20, 0.5),
    (80.0, 120.0, 0.03, 0.35, 2.0),
    (150.0, 100.0, -0.01, 0.15, 0.25),
    (100.0, 100.0, 0.05, 0.10, 10.0),
]


class TestPutCallParity:
    """Test put-call parity for option pricing."""

    @pytest.mark.anti_pattern
    @pytest.mark.parametrize("spot,strike,rate,volatility,maturity", PARITY_CASES)
    def test_vanilla_parity(self, spot, strike, rate, volatility, maturity):
        call_price = vanilla_price(spot, strike, rate, volatility, maturity, OptionType.CALL)
        put_price = vanilla_price(spot, strike, rate, volatility, maturity, OptionType.PUT)

        holds, error = put_call_parity_check(call_price, put_price, spot, strike, rate, maturity)

        assert holds, (
            f"PUT-CALL PARITY VIOLATION:\n"
            f"  C - P = {call_price - put_price:.10f}\n"
            f"  Expected: {spot - strike * np.exp(-rate * maturity):.10f}\n"
            f"  Error: {error:.2e}\n"
            f"  Tolerance: {PUT_CALL_PARITY_TOLERANCE}"
        )

    @pytest.mark.anti_pattern
    @pytest.mark.parametrize("spot,strike,rate,volatility,maturity", PARITY_CASES)
    def test_binary_parity(self, spot, strike, rate, volatility, maturity):
        call_price = binary_price(spot, strike, rate, volatility, maturity, OptionType.CALL)
        put_price = binary_price(spot, strike, rate, volatility, maturity, OptionType.PUT)

        assert call_price + put_price == pytest.approx(
            np.exp(-rate * maturity), abs=PUT_CALL_PARITY_TOLERANCE
        )

    @pytest.mark.anti_pattern
    def test_parity_check_detects_violation(self):
        """A mispriced put must be flagged."""
        call_price = vanilla_price(100.0, 100.0, 0.05, 0.1, 1.0, OptionType.CALL)
        wrong_put = 2.00020

        holds, error = put_call_parity_check(call_price, wrong_put, 100.0, 100.0, 0.05, 1.0)

        assert not holds
        assert error == pytest.approx(0.0723, abs=1e-3)
