"""
Elo Ratings - expected scores and rating updates with the Elo formula.
"""

import logging

from .calculator import RatingCalculator
from .config import DEFAULT_K_FACTOR, PERFORMANCE_CONSTANT, USCF_K_FACTOR_TABLE
from .core import (
    ConstantKFactor,
    KFactorTable,
    Outcome,
    expected_score,
    expected_scores,
    make_k_factor_policy,
    update_elo,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "RatingCalculator",
    "Outcome",
    "ConstantKFactor",
    "KFactorTable",
    "make_k_factor_policy",
    "expected_score",
    "expected_scores",
    "update_elo",
    "PERFORMANCE_CONSTANT",
    "DEFAULT_K_FACTOR",
    "USCF_K_FACTOR_TABLE",
]
