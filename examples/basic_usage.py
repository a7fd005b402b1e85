"""
Basic usage example for the Elo rating calculator.
"""

from elo_ratings import USCF_K_FACTOR_TABLE, RatingCalculator


def main():
    # FIDE-like setup: constant K-factor with a rating floor and ceiling
    elo = RatingCalculator(20, 1000, 2850)

    alice = 1600
    bob = 1300

    odds_alice, odds_bob = elo.both_expected_scores(alice, bob)
    print(f"Alice is expected to score {odds_alice:.3f}, Bob {odds_bob:.3f}")

    print(f"If Alice wins: {elo.new_ratings(alice, bob, 1.0)}")
    print(f"If they tie:   {elo.new_ratings(alice, bob, 0.5)}")
    print(f"If Bob wins:   {elo.new_ratings(alice, bob, 0.0)}")

    # USCF-style K-factor table keyed by rating thresholds
    elo.set_k_factor(USCF_K_FACTOR_TABLE).set_min(100).set_max(3000)

    for rating in (1500, 2200, 2500):
        print(f"K-factor at {rating}: {elo.get_k_factor(rating)}")
        print(f"  win vs 2300 -> {elo.new_rating_if_won(rating, 2300)}")
        print(f"  loss vs 2300 -> {elo.new_rating_if_lost(rating, 2300)}")

    # Expected scores against a whole field of opponents
    field = [1609, 1477, 1388, 1586, 1720]
    scores = elo.expected_scores(1613, field)
    print(f"Expected total vs field: {scores.sum():.3f}")


if __name__ == "__main__":
    main()
