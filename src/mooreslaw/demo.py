"""Demonstration of the Moore's Law projections on historical transistor counts.

Usage:
    python -m mooreslaw.demo [--base-count N] [--years Y] [--target-count N]
                             [--observed-years Y] [--forecast-years Y]
                             [--doubling-period T] [--verbose]

Examples:
    # Intel 4004 (1971) → 2025 and Apple M1 Ultra scale
    python -m mooreslaw.demo

    # Slower 3-year doubling cadence
    python -m mooreslaw.demo --doubling-period 3
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from mooreslaw.core.domain import MetricBaseline, forecast_technology
from mooreslaw.core.math import (
    DEFAULT_DOUBLING_PERIOD,
    ProjectionConfig,
    effective_period,
    project_count,
    years_to_reach,
)

logger = logging.getLogger(__name__)


# Intel 4004 (1971): ~2,300 transistors
INTEL_4004_TRANSISTORS = 2300

# 1971 → 2025
YEARS_SINCE_1971 = 54

# Apple M1 Ultra: ~114 billion transistors
M1_ULTRA_TRANSISTORS = 114_000_000_000

# 1971 → 2022 (M1 Ultra release)
M1_ULTRA_OBSERVED_YEARS = 51.0

# Circa 2010 baselines with their own doubling cadence
TECHNOLOGY_BASELINES = {
    "transistorCount": MetricBaseline(base_value=2_000_000_000.0, doubling_period=2.0),
    "cpuClockSpeed": MetricBaseline(base_value=3.0, doubling_period=6.0),  # GHz
    "memoryCapacity": MetricBaseline(base_value=8.0, doubling_period=3.0),  # GB
    "storageCapacity": MetricBaseline(base_value=1000.0, doubling_period=1.5),  # GB
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mooreslaw-demo",
        description="Print example Moore's Law projections.",
    )
    parser.add_argument("--base-count", type=int, default=INTEL_4004_TRANSISTORS,
                        help="Starting transistor count (default: Intel 4004)")
    parser.add_argument("--years", type=float, default=YEARS_SINCE_1971,
                        help="Years to project the starting count forward")
    parser.add_argument("--target-count", type=int, default=M1_ULTRA_TRANSISTORS,
                        help="Target transistor count (default: Apple M1 Ultra)")
    parser.add_argument("--observed-years", type=float, default=M1_ULTRA_OBSERVED_YEARS,
                        help="Years between starting and target counts, for calibration")
    parser.add_argument("--forecast-years", type=float, default=10.0,
                        help="Horizon for the multi-metric technology forecast")
    parser.add_argument("--doubling-period", type=float, default=DEFAULT_DOUBLING_PERIOD,
                        help="Years per doubling (default: %(default)s)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> None:
    """Compute and print every example projection."""
    config = ProjectionConfig(doubling_period=args.doubling_period)
    logger.debug(f"Using doubling period {config.doubling_period} years")

    estimated = project_count(args.base_count, args.years, config.doubling_period)
    print(f"Estimated number of transistors after {args.years:g} years: {estimated}")

    years_needed = years_to_reach(args.base_count, args.target_count, config.doubling_period)
    print(f"Years required to reach {args.target_count} transistors: {years_needed}")

    observed_period = effective_period(args.base_count, args.target_count, args.observed_years)
    print(f"Actual doubling period based on historical data: {observed_period} years")

    forecast = forecast_technology(TECHNOLOGY_BASELINES, args.forecast_years, config)
    print(f"\nTechnology forecast for +{args.forecast_years:g} years:")
    for metric, value in forecast.sorted_items():
        print(f"{metric}: {value}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        run(args)
    except ValueError as e:
        logger.error(f"Projection failed: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
