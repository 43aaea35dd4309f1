# Path: aalp/process/classifier/scoring/tiebreaker.py
"""
Tiebreaker

Picks the nearest rule when several share the minimal distance.
"""

from typing import Callable

from ....core.logger.ipo_logging import get_process_logger
from ..models.match_result import RuleDistance


class Tiebreaker:
    """
    Resolves ties between equally distant rules.

    The rule declared first in the dictionary wins, whatever order the
    candidates arrive in.

    Example:
        tiebreaker = Tiebreaker()
        nearest, method = tiebreaker.nearest(
            distances,
            declaration_index=rule_set.declaration_index
        )
    """

    def __init__(self):
        """Initialize tiebreaker."""
        self.logger = get_process_logger('classifier.tiebreaker')

    def nearest(
        self,
        distances: list[RuleDistance],
        declaration_index: Callable[[str], int]
    ) -> tuple[RuleDistance, str]:
        """
        Select the rule with minimal distance.

        Args:
            distances: Candidate distances (any order)
            declaration_index: Rule key -> declaration position

        Returns:
            Tuple of (nearest rule distance, tiebreaker method used)

        Raises:
            ValueError: If there are no candidates
        """
        if not distances:
            raise ValueError("No rules to choose from")

        best = min(item.distance for item in distances)
        tied = [item for item in distances if item.distance == best]

        if len(tied) == 1:
            return tied[0], "single_nearest"

        self.logger.debug(
            f"Resolving tie between {len(tied)} rules at distance {best} "
            f"by declaration order"
        )
        winner = min(tied, key=lambda item: declaration_index(item.rule_key))
        return winner, "declaration_order"


__all__ = ['Tiebreaker']
