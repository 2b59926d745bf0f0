"""
Command-line option valuation run.

Values a reference book (vanilla and binary calls and puts on one stock)
with every valuation model and prints each model next to the analytical
price.

Usage:
    option-valuation                          # Reference run (settings defaults)
    option-valuation --seed 42                # Reproducible run
    option-valuation --bins 2000 --draws-per-bin 20 --volatility 0.2
    python -m option_valuation --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from option_valuation.config.settings import SETTINGS, Settings
from option_valuation.errors import ValidationError, require_integer, require_non_negative
from option_valuation.options.base import Option, OptionType
from option_valuation.options.binary import BinaryOption
from option_valuation.options.vanilla import VanillaOption
from option_valuation.underlyings.stock import Stock
from option_valuation.valuation.analysis import compare_models, format_comparison
from option_valuation.valuation.antithetic import AntitheticMonteCarloValuationModel
from option_valuation.valuation.base import ValuationModel
from option_valuation.valuation.monte_carlo import MonteCarloValuationModel
from option_valuation.valuation.stratified import StratifiedMonteCarloValuationModel

logger = logging.getLogger(__name__)


def _seed(value: str) -> int:
    seed = int(value)
    if seed < 0:
        raise argparse.ArgumentTypeError(f"seed must be >= 0, got {seed}")
    return seed


def build_options(strike_price: float, time_to_maturity: float) -> list[Option]:
    """Vanilla and binary calls and puts sharing one strike and maturity."""
    return [
        VanillaOption(OptionType.CALL, strike_price, time_to_maturity),
        VanillaOption(OptionType.PUT, strike_price, time_to_maturity),
        BinaryOption(OptionType.CALL, strike_price, time_to_maturity),
        BinaryOption(OptionType.PUT, strike_price, time_to_maturity),
    ]


def build_models(
    number_of_bins: int,
    draws_per_bin: int,
    seed: Optional[int] = None,
) -> list[ValuationModel]:
    """
    Build the three Monte Carlo models at an equal budget of underlying evaluations.

    Parameters
    ----------
    number_of_bins : int
        Strata of the stratified model
    draws_per_bin : int
        Draws per stratum
    seed : int, optional
        Root seed; each model gets an independent child stream
        (non-negative, as numpy.random.SeedSequence requires)

    Returns
    -------
    list[ValuationModel]
        Plain (B*D trials), antithetic (B*D/2 pairs, at least 2), stratified (B x D)
    """
    if seed is not None:
        seed = require_integer("seed", seed)
        require_non_negative("seed", seed)

    number_of_trials = number_of_bins * draws_per_bin
    plain_seed, antithetic_seed, stratified_seed = np.random.SeedSequence(seed).spawn(3)

    return [
        MonteCarloValuationModel(number_of_trials, seed=plain_seed),
        AntitheticMonteCarloValuationModel(max(2, number_of_trials // 2), seed=antithetic_seed),
        StratifiedMonteCarloValuationModel(number_of_bins, draws_per_bin, seed=stratified_seed),
    ]


def run(args: argparse.Namespace) -> str:
    """Value the reference book and return the report text."""
    stock = Stock(current_price=args.spot, volatility=args.volatility)
    options = build_options(args.strike, args.maturity)
    models = build_models(args.bins, args.draws_per_bin, args.seed)

    logger.info(
        f"Valuing {len(options)} options with {len(models)} models "
        f"({args.bins} bins x {args.draws_per_bin} draws, seed={args.seed})"
    )

    sections = []
    for option in options:
        comparison = compare_models(models, option, stock, args.rate)
        sections.append(format_comparison(comparison, title=f"Valuing {option}"))
        logger.info(f"  Completed: {option}")

    return "\n\n".join(sections)


def build_parser(settings: Settings = SETTINGS) -> argparse.ArgumentParser:
    """Argument parser with defaults taken from ``settings``."""
    parser = argparse.ArgumentParser(
        prog="option-valuation",
        description="Value European options analytically and by Monte Carlo",
    )
    parser.add_argument("--spot", type=float, default=settings.market.spot_price, help="Current stock price")
    parser.add_argument("--volatility", type=float, default=settings.market.volatility, help="Annual volatility")
    parser.add_argument(
        "--rate", type=float, default=settings.market.annual_risk_free_rate, help="Annual risk-free rate"
    )
    parser.add_argument("--strike", type=float, default=settings.contract.strike_price, help="Strike price")
    parser.add_argument(
        "--maturity", type=float, default=settings.contract.time_to_maturity, help="Time to maturity (years)"
    )
    parser.add_argument(
        "--bins", type=int, default=settings.simulation.number_of_bins, help="Strata for stratified sampling"
    )
    parser.add_argument(
        "--draws-per-bin", type=int, default=settings.simulation.draws_per_bin, help="Draws per stratum"
    )
    parser.add_argument("--seed", type=_seed, default=settings.simulation.seed, help="Random seed")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        report = run(args)
    except ValidationError as e:
        logger.error(f"Invalid input: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
