"""
Central configuration for the Elo rating calculator.

Shared defaults and preset constants live here so the core math and the
calculator agree on them.
"""

import math

# http://en.wikipedia.org/wiki/Elo_rating_system#Performance_rating
PERFORMANCE_CONSTANT = 400

# --- K-factor ---
DEFAULT_K_FACTOR = 32

# Key used in K-factor tables for ratings below the lowest threshold
DEFAULT_TABLE_KEY = "default"

# Supported K-factor methods
K_FACTOR_METHODS = (
    "simple",  # Constant K-factor
    "table",   # K-factor looked up from rating thresholds
)

# USCF-style table: 32 below 2100, 24 below 2400, 16 above
USCF_K_FACTOR_TABLE = {
    0: 32,
    2100: 24,
    2400: 16,
}

# --- Rating bounds ---
DEFAULT_MINIMUM = -math.inf
DEFAULT_MAXIMUM = math.inf
