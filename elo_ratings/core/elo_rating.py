"""
Core implementation of the Elo rating math.
"""

import math
from typing import Sequence, Union

import numpy as np

from ..config import PERFORMANCE_CONSTANT


def expected_score(rating_a: float, rating_b: float) -> float:
    """
    Calculate the expected score for player A against player B.

    Args:
        rating_a: Elo rating of player A
        rating_b: Elo rating of player B

    Returns:
        Expected score for player A (between 0 and 1)
    """
    # http://en.wikipedia.org/wiki/Elo_rating_system#Mathematical_details
    difference = rating_b - rating_a
    return 1.0 / (1.0 + 10.0 ** (difference / PERFORMANCE_CONSTANT))


def expected_scores(rating: float, opponent_ratings: Union[Sequence[float], np.ndarray]) -> np.ndarray:
    """
    Calculate the expected scores of one player against many opponents.

    Args:
        rating: Elo rating of the player
        opponent_ratings: Elo ratings of the opponents

    Returns:
        Array of expected scores, one per opponent
    """
    opponents = np.asarray(opponent_ratings, dtype=float)
    return 1.0 / (1.0 + np.power(10.0, (opponents - rating) / PERFORMANCE_CONSTANT))


def update_elo(rating: float, expected: float, actual: float, k_factor: float) -> float:
    """
    Update an Elo rating based on the expected and actual outcomes.

    The result is not rounded or clamped.

    Args:
        rating: Current Elo rating
        expected: Expected outcome (between 0 and 1)
        actual: Actual outcome (0 for loss, 0.5 for draw, 1 for win)
        k_factor: K-factor for Elo calculation (determines how much ratings change)

    Returns:
        Updated Elo rating
    """
    return rating + k_factor * (actual - expected)


def round_half_up(value: float) -> float:
    """Round to the nearest integer, with halves going toward +inf."""
    # inf and nan pass through unchanged
    if not math.isfinite(value):
        return value
    # value + 0.5 can round up in floating point, so compare the fraction
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def clamp_rating(rating: float, minimum: float, maximum: float) -> float:
    """Clamp a rating into [minimum, maximum]."""
    if rating < minimum:
        return minimum
    elif rating > maximum:
        return maximum
    return rating
