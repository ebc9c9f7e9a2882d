"""Progressive overload math.

Deterministic, stateless helpers shared by generation and propagation.

NOTE: Generation rounds after every weekly step (project_weight) while
propagation rounds the compounded value once (propagate_weight). The two
drift apart over long horizons and the stored numbers depend on it.
"""

import math

from simple_lifts.plans.constants import WEEKLY_GROWTH_FACTOR, WEIGHT_INCREMENT


def round_to_increment(weight: float, increment: int = WEIGHT_INCREMENT) -> int:
    """Round a weight to the nearest plate-friendly increment.

    Halves round up (122.5 -> 125), matching the stored reference numbers.

    Args:
        weight: Raw weight in lbs
        increment: Rounding increment in lbs

    Returns:
        Weight rounded to the nearest multiple of increment
    """
    return int(math.floor(weight / increment + 0.5)) * increment


def increase_by_growth(weight: float, growth_factor: float = WEEKLY_GROWTH_FACTOR) -> int:
    """Apply one week of growth and round the result."""
    return round_to_increment(weight * growth_factor)


def project_weight(starting_weight: float, weeks: int) -> int:
    """Project a template weight forward by rounding after each week.

    Args:
        starting_weight: Week-0 weight
        weeks: Number of weekly steps to apply

    Returns:
        Projected weight (multiple of 5)
    """
    if weeks < 0:
        raise ValueError(f"weeks must be >= 0, got {weeks}")

    if weeks == 0:
        return round_to_increment(starting_weight)

    # Later weeks compound from the weight as entered, not the rounded week-0 value
    weight: float = starting_weight
    for _ in range(weeks):
        weight = increase_by_growth(weight)
    return int(weight)


def propagate_weight(corrected_weight: float, weeks_after: int) -> int:
    """Compound a corrected weight forward and round once."""
    if weeks_after < 0:
        raise ValueError(f"weeks_after must be >= 0, got {weeks_after}")
    return round_to_increment(corrected_weight * math.pow(WEEKLY_GROWTH_FACTOR, weeks_after))
