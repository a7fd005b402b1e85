"""
Match outcomes scored from a player's point of view.
"""

from enum import Enum


class Outcome(float, Enum):
    """Actual score a player receives for a match result."""

    WON = 1.0
    TIED = 0.5
    LOST = 0.0
