# Path: aalp/process/classifier/scoring/distance.py
"""
Distance Calculator

Measures how far a selection is from each classification rule.
"""

from typing import Iterable

from ..models.classification_rule import ClassificationRule
from ..models.match_result import RuleDistance


class DistanceCalculator:
    """
    Computes rule distances.

    distance(rule) = |required - selected| + |selected & prohibited|

    Selected codes the rule neither requires nor prohibits cost nothing,
    so distance is zero exactly when the rule matches.

    Example:
        calculator = DistanceCalculator()
        result = calculator.distance(rule, {'provides', 'receives'})
        result.distance  # 1 if 'has-counterparty' is the only gap
    """

    def distance(
        self,
        rule: ClassificationRule,
        selected_codes: Iterable[str]
    ) -> RuleDistance:
        """
        Distance breakdown for one rule.

        Args:
            rule: Rule to measure against
            selected_codes: Codes the learner selected

        Returns:
            RuleDistance with missing and wrongly-included codes
        """
        codes = frozenset(selected_codes)
        return RuleDistance(
            rule_key=rule.key,
            missing=rule.required - codes,
            extra=codes & rule.prohibited,
        )

    def distances(
        self,
        rules: Iterable[ClassificationRule],
        selected_codes: Iterable[str]
    ) -> list[RuleDistance]:
        """Distance breakdown for every rule, in the order given."""
        codes = frozenset(selected_codes)
        return [self.distance(rule, codes) for rule in rules]


__all__ = ['DistanceCalculator']
