"""
Elo rating calculator with a configurable K-factor policy and rating bounds.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULT_MAXIMUM, DEFAULT_MINIMUM, K_FACTOR_METHODS
from .core import (
    Outcome,
    clamp_rating,
    expected_score,
    expected_scores,
    make_k_factor_policy,
    round_half_up,
    update_elo,
)

logger = logging.getLogger(__name__)


class RatingCalculator:
    """
    Computes expected scores and updated ratings.

    The calculator only holds configuration: a K-factor policy and the
    rating floor and ceiling. Scoring methods never change it, so the same
    instance can be used for any number of players. Setters are not
    synchronized; serialize reconfiguration of a shared instance.
    """

    def __init__(
        self,
        k_factor: Any = None,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ):
        """
        Initialize a RatingCalculator.

        Args:
            k_factor: A constant K-factor, a {threshold: k_factor} mapping with
                an optional "default" key, or a policy object. Falsy values
                select the default K-factor of 32.
            minimum: Lowest rating the calculator will return (default: -inf)
            maximum: Highest rating the calculator will return (default: inf)
        """
        self.k_factor = make_k_factor_policy(k_factor)
        self.minimum = DEFAULT_MINIMUM if minimum is None else minimum
        self.maximum = DEFAULT_MAXIMUM if maximum is None else maximum

    @staticmethod
    def get_methods() -> Tuple[str, ...]:
        """Names of the supported K-factor methods."""
        return K_FACTOR_METHODS

    @property
    def k_factor_method(self) -> str:
        """The K-factor method in use: "simple" or "table"."""
        return self.k_factor.method

    def get_k_factor(self, rating: Optional[float] = None) -> Optional[float]:
        """
        Get the K-factor for a rating.

        Args:
            rating: Rating to look up; ignored by constant policies, and
                treated as 0 by tables when omitted

        Returns:
            The K-factor, or None if a table has no matching entry
        """
        return self.k_factor.lookup(rating)

    def get_min(self) -> float:
        """Lowest rating the calculator will return."""
        return self.minimum

    def get_max(self) -> float:
        """Highest rating the calculator will return."""
        return self.maximum

    def set_k_factor(self, k_factor: Any) -> "RatingCalculator":
        """
        Replace the K-factor policy.

        Args:
            k_factor: A constant, a threshold mapping, a policy object, or a
                falsy value to reset to the default K-factor of 32

        Returns:
            The calculator, for chaining
        """
        self.k_factor = make_k_factor_policy(k_factor)
        logger.debug("K-factor policy set to %r", self.k_factor)
        return self

    def set_min(self, minimum: float) -> "RatingCalculator":
        """Set the rating floor. Returns the calculator."""
        self.minimum = minimum
        logger.debug("Minimum rating set to %s", minimum)
        return self

    def set_max(self, maximum: float) -> "RatingCalculator":
        """Set the rating ceiling. Returns the calculator."""
        self.maximum = maximum
        logger.debug("Maximum rating set to %s", maximum)
        return self

    def expected_score(self, rating: float, opponent_rating: float) -> float:
        """
        Probability that a player beats an opponent.

        Args:
            rating: Rating of the player
            opponent_rating: Rating of the opponent

        Returns:
            Expected score for the player (between 0 and 1)
        """
        return expected_score(rating, opponent_rating)

    def both_expected_scores(self, rating_a: float, rating_b: float) -> Tuple[float, float]:
        """
        Expected scores of both players.

        Returns:
            Tuple of (expected score for A, expected score for B)
        """
        return (
            self.expected_score(rating_a, rating_b),
            self.expected_score(rating_b, rating_a),
        )

    def expected_scores(self, rating: float, opponent_ratings: Sequence[float]) -> np.ndarray:
        """Expected scores of one player against each of several opponents."""
        return expected_scores(rating, opponent_ratings)

    def new_rating(self, expected: float, actual: float, previous: float) -> float:
        """
        Calculate a player's rating after a match.

        The K-factor is looked up with the previous rating. The result is
        rounded half up to an integer and clamped to the calculator's bounds.

        Args:
            expected: Expected score for the match
            actual: Actual score (1 for a win, 0.5 for a tie, 0 for a loss)
            previous: Rating before the match

        Returns:
            The new rating
        """
        k_factor = self.get_k_factor(previous)
        if k_factor is None:
            logger.warning("No K-factor for rating %s; rating left unchanged", previous)
            k_factor = 0

        rating = round_half_up(update_elo(previous, expected, actual, k_factor))
        if rating < self.minimum or rating > self.maximum:
            logger.debug("Rating %s clamped to [%s, %s]", rating, self.minimum, self.maximum)

        return clamp_rating(rating, self.minimum, self.maximum)

    def new_rating_if_won(self, rating: float, opponent_rating: float) -> float:
        """
        Rating after beating an opponent.

        Args:
            rating: Rating of the player before the match
            opponent_rating: Rating of the opponent

        Returns:
            The new rating, rounded and clamped
        """
        odds = self.expected_score(rating, opponent_rating)
        return self.new_rating(odds, Outcome.WON, rating)

    def new_rating_if_lost(self, rating: float, opponent_rating: float) -> float:
        """
        Rating after losing to an opponent.

        Args:
            rating: Rating of the player before the match
            opponent_rating: Rating of the opponent

        Returns:
            The new rating, rounded and clamped
        """
        odds = self.expected_score(rating, opponent_rating)
        return self.new_rating(odds, Outcome.LOST, rating)

    def new_rating_if_tied(self, rating: float, opponent_rating: float) -> float:
        """
        Rating after a tie with an opponent.

        Args:
            rating: Rating of the player before the match
            opponent_rating: Rating of the opponent

        Returns:
            The new rating, rounded and clamped
        """
        odds = self.expected_score(rating, opponent_rating)
        return self.new_rating(odds, Outcome.TIED, rating)

    def new_ratings(self, rating_a: float, rating_b: float, outcome: float) -> Tuple[float, float]:
        """
        Calculate both players' ratings after a match between them.

        Args:
            rating_a: Rating of player A
            rating_b: Rating of player B
            outcome: Outcome of the match (0 for B wins, 0.5 for draw, 1 for A wins)

        Returns:
            Tuple of (new rating for A, new rating for B)
        """
        expected_a, expected_b = self.both_expected_scores(rating_a, rating_b)

        return (
            self.new_rating(expected_a, outcome, rating_a),
            self.new_rating(expected_b, 1.0 - outcome, rating_b),
        )

    def __repr__(self) -> str:
        return (
            f"RatingCalculator(k_factor={self.k_factor!r}, "
            f"minimum={self.minimum!r}, maximum={self.maximum!r})"
        )
