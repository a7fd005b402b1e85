"""
End-to-end tests for the RatingCalculator.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from elo_ratings import RatingCalculator


WIKIPEDIA_OPPONENTS = [
    (1609, 0.506),
    (1477, 0.686),
    (1388, 0.785),
    (1586, 0.539),
    (1720, 0.351),
]


@pytest.mark.parametrize("opponent, score", WIKIPEDIA_OPPONENTS)
def test_expected_scores_match_wikipedia(opponent, score):
    calculator = RatingCalculator(32)
    assert abs(calculator.expected_score(1613, opponent) - score) < 0.001


def test_tournament_rating_matches_wikipedia():
    calculator = RatingCalculator(32)

    expected_total = sum(calculator.expected_score(1613, opponent) for opponent, _ in WIKIPEDIA_OPPONENTS)
    assert abs(expected_total - 2.867) < 0.001

    # Two wins, two losses and a draw
    assert calculator.new_rating(2.867, 3, 1613) == 1617


def test_end_to_end_match():
    elo = RatingCalculator(24, 200, 3000)

    alice, bob = 1600, 1300
    expected_alice = elo.expected_score(alice, bob)
    expected_bob = elo.expected_score(bob, alice)

    assert abs(expected_alice - 0.849) < 0.001
    assert abs(expected_bob - 0.151) < 0.001

    # Alice wins, as expected
    assert elo.new_rating(expected_alice, 1, alice) == 1604
    assert elo.new_rating(expected_bob, 0, bob) == 1296

    # Bob wins, unexpectedly
    assert elo.new_rating(expected_alice, 0, alice) == 1580
    assert elo.new_rating(expected_bob, 1, bob) == 1320


def test_ratings_stay_within_bounds():
    elo = RatingCalculator(32, 100, 2800)

    alice = 2000
    for _ in range(100):
        alice = elo.new_rating(1, 0, alice)
    assert alice == 100

    bob = 200
    for _ in range(100):
        bob = elo.new_rating(0, 1, bob)
    assert bob == 2800


def test_bounds_hold_for_any_match():
    elo = RatingCalculator({"default": 64, 0: 40, 2100: 24, 2400: 16}, 100, 2800)

    for rating in range(0, 3001, 150):
        for opponent in range(0, 3001, 300):
            for result in (
                elo.new_rating_if_won(rating, opponent),
                elo.new_rating_if_tied(rating, opponent),
                elo.new_rating_if_lost(rating, opponent),
            ):
                assert 100 <= result <= 2800


def test_series_of_matches_with_table():
    elo = RatingCalculator({"default": 100, 0: 50, 1000: 25}, -2000, 2000)

    rating = 950
    history = []
    for _ in range(3):
        rating = elo.new_rating_if_won(rating, 2000)
        history.append(rating)

    assert history == [1000, 1025, 1050]


def test_concurrent_scoring_is_consistent():
    elo = RatingCalculator({0: 32, 2100: 24, 2400: 16}, 0, 3000)
    pairs = [(rating, rating + delta) for rating in range(1000, 2600, 50) for delta in (-200, 0, 200)]

    expected = [elo.new_ratings(a, b, 1.0) for a, b in pairs]

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda pair: elo.new_ratings(pair[0], pair[1], 1.0), pairs))

    assert results == expected
