"""
Core Elo rating functionality: the rating math, K-factor policies and outcomes.
"""

from .elo_rating import clamp_rating, expected_score, expected_scores, round_half_up, update_elo
from .k_factor import ConstantKFactor, KFactorPolicy, KFactorTable, make_k_factor_policy
from .outcomes import Outcome
