# Path: aalp/process/classifier/hints/hint_builder.py
"""
Hint Builder

Turns a classification outcome into ordered, corrective hints. The trigger
logic lives here; the wording comes from HintMessages.
"""

from typing import Any, Optional

from ....constants import DOMAIN_NAMES, HintKind
from ....core.logger.ipo_logging import get_process_logger
from ..engine.assertion_catalog import AssertionCatalog
from ..engine.rule_set import RuleSet
from ..models.classification_rule import ClassificationRule
from ..models.match_result import Hint, RuleDistance
from ..models.selection import SelectedAssertions
from .hint_messages import HintMessages


class HintBuilder:
    """
    Builds hints for a non-correct classification.

    Order of hints:
    1. One per required assertion of the nearest rule that is missing
    2. One per selected assertion the nearest rule prohibits
    3. "Would classify as X" when the selection matches one wrong rule
    4. "Fits several" when it matches more than one rule
    5. Parameter mismatches against the expected (or nearest) rule

    Codes inside steps 1, 2 and 5 follow catalog declaration order.

    Example:
        builder = HintBuilder(catalog, rule_set)
        hints = builder.build(selection, nearest, matches=[], expected_key='cash-sale')
    """

    def __init__(
        self,
        catalog: AssertionCatalog,
        rule_set: RuleSet,
        messages: Optional[HintMessages] = None,
        include_parameter_hints: bool = True,
        max_hints: Optional[int] = None
    ):
        """
        Initialize hint builder.

        Args:
            catalog: Assertion catalog (labels, domains, ordering)
            rule_set: Rule set (names of classifications)
            messages: Hint wording; defaults to the built-in templates
            include_parameter_hints: Whether to emit parameter mismatch hints
            max_hints: Cap on the number of hints returned (None = no cap)
        """
        self.logger = get_process_logger('classifier.hint_builder')
        self.catalog = catalog
        self.rule_set = rule_set
        self.messages = messages or HintMessages()
        self.include_parameter_hints = include_parameter_hints
        self.max_hints = max_hints

    def build(
        self,
        selection: SelectedAssertions,
        nearest: Optional[RuleDistance],
        matches: list[str],
        expected_key: Optional[str] = None
    ) -> list[Hint]:
        """
        Build hints for one classification outcome.

        Args:
            selection: Normalized selection
            nearest: Nearest rule and its distance breakdown
            matches: Rule keys the selection satisfies
            expected_key: Correct classification for the problem, if known

        Returns:
            Hints in display order
        """
        hints: list[Hint] = []

        if nearest is not None:
            hints.extend(self.missing_hints(nearest))
            hints.extend(self.prohibited_hints(nearest))

        if len(matches) == 1 and matches[0] != expected_key:
            hints.append(self.wrong_classification_hint(matches[0]))
        elif len(matches) > 1:
            hints.append(self.ambiguous_hint(matches))

        if self.include_parameter_hints:
            target = self._parameter_target(nearest, expected_key)
            if target is not None:
                hints.extend(self.parameter_hints(target, selection))

        if self.max_hints is not None and len(hints) > self.max_hints:
            self.logger.debug(f"Truncating {len(hints)} hints to {self.max_hints}")
            hints = hints[:self.max_hints]

        return hints

    def _parameter_target(
        self,
        nearest: Optional[RuleDistance],
        expected_key: Optional[str]
    ) -> Optional[ClassificationRule]:
        if expected_key is not None and expected_key in self.rule_set:
            return self.rule_set.get(expected_key)
        if nearest is not None:
            return self.rule_set.get(nearest.rule_key)
        return None

    # =========================================================================
    # INDIVIDUAL HINTS
    # =========================================================================

    def _assertion_values(self, code: str) -> dict[str, Any]:
        domain = None
        if code in self.catalog:
            domain = DOMAIN_NAMES[self.catalog.get(code).domain]
        return {
            'code': code,
            'label': self.catalog.label_for(code),
            'domain': domain or 'other',
        }

    def missing_hints(self, nearest: RuleDistance) -> list[Hint]:
        """One hint per required-but-missing assertion."""
        return [
            Hint(
                kind=HintKind.MISSING_ASSERTION,
                message=self.messages.render(
                    self.messages.missing_for(code), **self._assertion_values(code)
                ),
                assertion_code=code,
                rule_key=nearest.rule_key,
            )
            for code in self.catalog.sort_codes(nearest.missing)
        ]

    def prohibited_hints(self, nearest: RuleDistance) -> list[Hint]:
        """One hint per selected assertion the nearest rule prohibits."""
        return [
            Hint(
                kind=HintKind.PROHIBITED_ASSERTION,
                message=self.messages.render(
                    self.messages.prohibited_for(code), **self._assertion_values(code)
                ),
                assertion_code=code,
                rule_key=nearest.rule_key,
            )
            for code in self.catalog.sort_codes(nearest.extra)
        ]

    def wrong_classification_hint(self, rule_key: str) -> Hint:
        """The selection classifies as a different rule."""
        rule = self.rule_set.get(rule_key)
        return Hint(
            kind=HintKind.WRONG_CLASSIFICATION,
            message=self.messages.render(
                self.messages.wrong_classification, key=rule.key, name=rule.name
            ),
            rule_key=rule.key,
        )

    def ambiguous_hint(self, rule_keys: list[str]) -> Hint:
        """The selection fits several rules."""
        names = ', '.join(self.rule_set.get(key).name for key in rule_keys)
        return Hint(
            kind=HintKind.AMBIGUOUS_CLASSIFICATION,
            message=self.messages.render(self.messages.ambiguous, names=names),
        )

    def parameter_hints(
        self,
        rule: ClassificationRule,
        selection: SelectedAssertions
    ) -> list[Hint]:
        """One hint per selected assertion whose parameters the rule rejects."""
        mismatches = rule.parameter_mismatches(selection)
        hints = []
        for code in self.catalog.sort_codes(mismatches):
            requirements = ', '.join(
                f"{param} = {value}" for param, value in mismatches[code].items()
            )
            hints.append(Hint(
                kind=HintKind.PARAMETER_MISMATCH,
                message=self.messages.render(
                    self.messages.parameter_mismatch,
                    requirements=requirements,
                    **self._assertion_values(code),
                ),
                assertion_code=code,
                rule_key=rule.key,
            ))
        return hints

    def unknown_code_hints(self, codes: list[str]) -> list[Hint]:
        """One hint per selected code the catalog does not know."""
        return [
            Hint(
                kind=HintKind.UNKNOWN_ASSERTION,
                message=self.messages.render(self.messages.unknown_assertion, code=code),
                assertion_code=code,
            )
            for code in codes
        ]

    def empty_selection_hint(self) -> Hint:
        """Nothing was selected."""
        return Hint(
            kind=HintKind.EMPTY_SELECTION,
            message=self.messages.render(self.messages.empty_selection),
        )


__all__ = ['HintBuilder']
