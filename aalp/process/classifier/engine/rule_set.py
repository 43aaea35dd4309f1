# Path: aalp/process/classifier/engine/rule_set.py
"""
Classification Rule Set

Static registry of classification rules in declaration order, plus the
exact-match test. Rules are validated against the assertion catalog when
the set is built; any inconsistency raises MalformedRule.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from ....core.logger.ipo_logging import get_input_logger
from ....exceptions import MalformedRule
from ..models.classification_rule import ClassificationRule
from .assertion_catalog import AssertionCatalog


class RuleSet:
    """
    Ordered, immutable collection of classification rules.

    A rule matches a selection when every required assertion is selected
    and no prohibited one is. Extra assertions that the rule neither
    requires nor prohibits are tolerated.

    Example:
        rule_set = RuleSet(rules, catalog)
        rule_set.all_matches({'provides', 'receives', 'has-counterparty'})
        # ['cash-sale', 'cash-inventory-purchase', ...]
    """

    def __init__(
        self,
        rules: Iterable[ClassificationRule],
        catalog: Optional[AssertionCatalog] = None
    ):
        """
        Build and validate the rule set.

        Args:
            rules: Rules in declaration order
            catalog: Catalog to check assertion codes against. Without it,
                     only the catalog-independent checks run.

        Raises:
            MalformedRule: If any rule is inconsistent
        """
        self.logger = get_input_logger('classifier.rule_set')

        by_key: dict[str, ClassificationRule] = {}
        for rule in rules:
            if rule.key in by_key:
                self._reject(rule.key, "duplicate rule key")
            by_key[rule.key] = rule

        self._rules = tuple(by_key.values())
        self._by_key = MappingProxyType(by_key)
        self._order = MappingProxyType(
            {key: index for index, key in enumerate(by_key)}
        )

        for rule in self._rules:
            self._validate_rule(rule, catalog)

        self.logger.info(f"Rule set built with {len(self._rules)} classifications")

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def _reject(self, rule_key: str, reason: str) -> None:
        self.logger.error(f"Malformed rule '{rule_key}': {reason}")
        raise MalformedRule(rule_key, reason)

    def _validate_rule(
        self,
        rule: ClassificationRule,
        catalog: Optional[AssertionCatalog]
    ) -> None:
        """Run every consistency check on one rule."""
        if not rule.required:
            self._reject(rule.key, "required set is empty")

        overlap = rule.required & rule.prohibited
        if overlap:
            self._reject(
                rule.key,
                f"codes both required and prohibited: {sorted(overlap)}"
            )

        for code in rule.required_parameters:
            if code not in rule.required:
                self._reject(
                    rule.key,
                    f"required parameters given for non-required assertion '{code}'"
                )

        accounts = set(rule.accounts)
        for account, linkage in rule.account_linkage.items():
            if linkage.account != account:
                self._reject(
                    rule.key,
                    f"linkage for '{account}' declares account '{linkage.account}'"
                )
            if account not in accounts:
                self._reject(
                    rule.key,
                    f"linkage for '{account}' which is not in the journal entry"
                )

        if catalog is None:
            return

        for label, codes in (('required', rule.required), ('prohibited', rule.prohibited)):
            unknown = sorted(code for code in codes if code not in catalog)
            if unknown:
                self._reject(rule.key, f"unknown {label} assertion codes: {unknown}")

        for code, params in rule.required_parameters.items():
            definition = catalog.get(code)
            for param in params:
                if param not in definition.parameters:
                    self._reject(
                        rule.key,
                        f"assertion '{code}' has no parameter '{param}'"
                    )

        for linkage in rule.account_linkage.values():
            for source in linkage.sources:
                if source.assertion not in catalog:
                    self._reject(
                        rule.key,
                        f"linkage for '{linkage.account}' points at unknown "
                        f"assertion '{source.assertion}'"
                    )
                if source.assertion not in rule.required:
                    self.logger.warning(
                        f"Rule '{rule.key}': linkage for '{linkage.account}' uses "
                        f"non-required assertion '{source.assertion}'"
                    )

    # =========================================================================
    # ACCESS
    # =========================================================================

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[ClassificationRule]:
        return iter(self._rules)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    @property
    def keys(self) -> tuple[str, ...]:
        """Rule keys in declaration order."""
        return tuple(self._by_key)

    def get(self, key: str) -> ClassificationRule:
        """
        Get a rule by key.

        Raises:
            KeyError: If no rule has that key
        """
        try:
            return self._by_key[key]
        except KeyError:
            raise KeyError(f"Unknown classification: {key}") from None

    def declaration_index(self, key: str) -> int:
        """Position of a rule in declaration order."""
        return self._order[key]

    def for_level(self, level: int) -> list[ClassificationRule]:
        """Rules unlocked at or below a level, in declaration order."""
        return [rule for rule in self._rules if rule.level <= level]

    # =========================================================================
    # MATCHING
    # =========================================================================

    @staticmethod
    def matches(rule: ClassificationRule, selected_codes: Iterable[str]) -> bool:
        """
        Exact-match test.

        True iff every required code is selected and no prohibited code is.

        Args:
            rule: Rule to test
            selected_codes: Codes the learner selected

        Returns:
            Whether the rule matches
        """
        codes = frozenset(selected_codes)
        return rule.required <= codes and not (rule.prohibited & codes)

    def all_matches(self, selected_codes: Iterable[str]) -> list[str]:
        """
        Every rule key that matches, in declaration order.

        Args:
            selected_codes: Codes the learner selected

        Returns:
            Matching rule keys (possibly empty, possibly several)
        """
        codes = frozenset(selected_codes)
        return [rule.key for rule in self._rules if self.matches(rule, codes)]


__all__ = ['RuleSet']
