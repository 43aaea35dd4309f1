# Path: aalp/process/classifier/scoring/__init__.py
"""
Scoring Module

Components for ranking rules against a selection:
- DistanceCalculator: Missing-plus-prohibited distance per rule
- Tiebreaker: Deterministic nearest-rule selection
"""

from .distance import DistanceCalculator
from .tiebreaker import Tiebreaker

__all__ = [
    'DistanceCalculator',
    'Tiebreaker',
]
