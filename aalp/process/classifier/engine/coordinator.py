# Path: aalp/process/classifier/engine/coordinator.py
"""
Classification Coordinator

The main orchestrator of the classification engine and the entry point the
HTTP and simulation layers call.
"""

from pathlib import Path
from typing import Any, Optional

from ....config_loader import ConfigLoader
from ....constants import AccountType, MatchStatus
from ....core.logger.ipo_logging import get_process_logger
from ....exceptions import LinkageError, UnknownAssertionCode
from ..hints.hint_builder import HintBuilder
from ..hints.hint_messages import HintMessages
from ..journal.account_chart import AccountChart
from ..journal.entry_checker import ConstructedEntry, EntryCheckResult, JournalEntryChecker
from ..journal.resolver import JournalEntryResolver
from ..models.assertion_definition import AssertionDefinition
from ..models.match_result import (
    ClassificationError,
    MatchResult,
    ResolvedJournalEntry,
    RuleDistance,
)
from ..models.selection import (
    SelectedAssertions,
    SelectionInput,
    as_selection,
    selected_codes,
)
from ..scoring import DistanceCalculator, Tiebreaker
from .assertion_catalog import AssertionCatalog
from .dictionary_loader import DictionaryLoader
from .rule_set import RuleSet


class ClassificationCoordinator:
    """
    Classifies learner selections against the rule set.

    The coordinator holds only immutable content (catalog, rules, hint
    wording); classify() reads nothing else, so one instance can serve
    concurrent callers.

    Status policy:
        - nothing selected                      -> incomplete
        - unknown assertion code selected       -> incorrect (+ error)
        - exactly the expected rule matches     -> correct
        - no rule matches                       -> incorrect
        - exactly one other rule matches        -> incorrect
        - more than one rule matches            -> indeterminate

    When several rules match by code, the list is narrowed to the rules
    whose required parameters the selection satisfies, provided at least
    one does.

    Example:
        coordinator = ClassificationCoordinator.from_dictionary()

        result = coordinator.classify(
            {'provides': {'unit': 'physical-unit'},
             'receives': {'unit': 'monetary-unit', 'quantity': 25},
             'has-counterparty': {}},
            expected_key='cash-sale',
        )
        result.status  # MatchStatus.CORRECT
    """

    def __init__(
        self,
        catalog: AssertionCatalog,
        rule_set: RuleSet,
        hint_messages: Optional[HintMessages] = None,
        account_chart: Optional[AccountChart] = None,
        max_hints: Optional[int] = None,
        include_parameter_hints: bool = True,
        max_level: Optional[int] = None
    ):
        """
        Initialize classification coordinator.

        Args:
            catalog: Assertion catalog
            rule_set: Rule set validated against the catalog
            hint_messages: Hint wording (defaults built in)
            account_chart: Accounts by level, for constructed entries
            max_hints: Cap on hints per result (None = no cap)
            include_parameter_hints: Whether to emit parameter mismatch hints
            max_level: Highest level offered to learners (None = no cap)
        """
        self.logger = get_process_logger('classifier.coordinator')

        self.catalog = catalog
        self.rule_set = rule_set
        self.account_chart = account_chart
        self.max_level = max_level

        self.distance_calculator = DistanceCalculator()
        self.tiebreaker = Tiebreaker()
        self.hint_builder = HintBuilder(
            catalog,
            rule_set,
            messages=hint_messages,
            include_parameter_hints=include_parameter_hints,
            max_hints=max_hints,
        )
        self.resolver = JournalEntryResolver()
        self.entry_checker = JournalEntryChecker()

    @classmethod
    def from_dictionary(
        cls,
        dictionary_path: Optional[Path] = None,
        **options: Any
    ) -> 'ClassificationCoordinator':
        """
        Build a coordinator from YAML content.

        Args:
            dictionary_path: Dictionary directory (defaults to bundled content)
            **options: Passed to the constructor (max_hints, ...)

        Raises:
            DictionaryLoadError: If content cannot be read
            MalformedRule: If the rules are inconsistent
        """
        loader = DictionaryLoader(dictionary_path)
        catalog = loader.load_catalog()
        rule_set = loader.load_rule_set(catalog)
        return cls(
            catalog,
            rule_set,
            hint_messages=loader.load_hint_messages(),
            account_chart=loader.load_account_chart(),
            **options,
        )

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> 'ClassificationCoordinator':
        """
        Build a coordinator from AALP configuration.

        Args:
            config: Configuration (defaults to the ConfigLoader singleton)
        """
        config = config or ConfigLoader()
        return cls.from_dictionary(
            config.get('dictionary_dir'),
            max_hints=config.get('max_hints'),
            include_parameter_hints=config.get('include_parameter_hints', True),
            max_level=config.get('max_level'),
        )

    # =========================================================================
    # CATALOG ACCESS
    # =========================================================================

    def list_for_level(self, level: int) -> dict:
        """
        Assertions unlocked at a level, grouped by domain.

        Levels above max_level are treated as max_level.
        """
        if self.max_level is not None:
            level = min(level, self.max_level)
        return self.catalog.list_for_level(level)

    def get_assertion(self, code: str) -> AssertionDefinition:
        """
        Get an assertion definition.

        Raises:
            UnknownAssertionCode: If the code is not in the catalog
        """
        return self.catalog.get(code)

    def all_matches(self, selected: SelectionInput) -> list[str]:
        """Rule keys whose required/prohibited sets the selection satisfies."""
        return self.rule_set.all_matches(selected_codes(as_selection(selected)))

    def accounts_for_level(self, level: int) -> dict[AccountType, list[str]]:
        """
        Accounts available for constructed entries at a level.

        Raises:
            ValueError: If no account chart was loaded
        """
        if self.account_chart is None:
            raise ValueError("No account chart loaded")
        return self.account_chart.accounts_for_level(level)

    # =========================================================================
    # CLASSIFY
    # =========================================================================

    def classify(
        self,
        selected: SelectionInput,
        expected_key: Optional[str] = None
    ) -> MatchResult:
        """
        Classify a learner's selected assertions.

        Args:
            selected: Assertion code -> parameter values (or a set of codes)
            expected_key: Correct classification for this problem. None
                          accepts any single match as correct.

        Returns:
            MatchResult. Runtime input problems are reported in its error
            field instead of being raised.

        Raises:
            KeyError: If expected_key is not a known classification
            TypeError: If selected is not a mapping or collection of codes
        """
        if expected_key is not None and expected_key not in self.rule_set:
            raise KeyError(f"Unknown classification: {expected_key}")

        selection = as_selection(selected)
        codes = selected_codes(selection)

        if not codes:
            self.logger.debug("Empty selection -> incomplete")
            return MatchResult(
                status=MatchStatus.INCOMPLETE,
                hints=(self.hint_builder.empty_selection_hint(),),
                expected_classification=expected_key,
            )

        unknown = self.catalog.unknown_codes(selection)
        if unknown:
            self.logger.info(f"Rejected selection with unknown codes: {unknown}")
            return MatchResult(
                status=MatchStatus.INCORRECT,
                hints=tuple(self.hint_builder.unknown_code_hints(unknown)),
                expected_classification=expected_key,
                error=ClassificationError.from_unknown_code(
                    UnknownAssertionCode(unknown[0])
                ),
            )

        selection = self.catalog.normalize_selection(selection)
        matches = self._refine_by_parameters(
            self.rule_set.all_matches(codes), selection
        )
        status = self._derive_status(matches, expected_key, selection)

        if status == MatchStatus.CORRECT:
            result = self._correct_result(matches[0], selection, codes, expected_key)
        else:
            nearest = self._nearest(matches, codes)
            hints = self.hint_builder.build(selection, nearest, matches, expected_key)
            result = MatchResult(
                status=status,
                matched_classifications=tuple(matches),
                nearest=nearest,
                hints=tuple(hints),
                expected_classification=expected_key,
            )

        self.logger.debug(
            f"Classified {sorted(codes)} -> {result.status.value} "
            f"(matches={list(result.matched_classifications)}, "
            f"nearest={result.nearest.rule_key if result.nearest else None})"
        )
        return result

    def _refine_by_parameters(
        self,
        matches: list[str],
        selection: SelectedAssertions
    ) -> list[str]:
        """Narrow several code-level matches using required parameters."""
        if len(matches) <= 1:
            return matches
        refined = [
            key for key in matches
            if self.rule_set.get(key).parameters_satisfied(selection)
        ]
        return refined or matches

    def _derive_status(
        self,
        matches: list[str],
        expected_key: Optional[str],
        selection: SelectedAssertions
    ) -> MatchStatus:
        """
        Status from the (refined) matches.

        A lone match only counts as correct when the selection also carries
        the rule's required parameter values.
        """
        if len(matches) > 1:
            return MatchStatus.INDETERMINATE
        if len(matches) == 1 and (expected_key is None or matches[0] == expected_key):
            if not self.rule_set.get(matches[0]).parameters_satisfied(selection):
                self.logger.debug(
                    f"Single match '{matches[0]}' fails its required parameters"
                )
                return MatchStatus.INCORRECT
            return MatchStatus.CORRECT
        return MatchStatus.INCORRECT

    def _nearest(self, matches: list[str], codes: frozenset[str]) -> RuleDistance:
        """Nearest rule: the first match if any, else minimal distance."""
        if matches:
            return self.distance_calculator.distance(self.rule_set.get(matches[0]), codes)
        distances = self.distance_calculator.distances(self.rule_set, codes)
        nearest, _ = self.tiebreaker.nearest(distances, self.rule_set.declaration_index)
        return nearest

    def _correct_result(
        self,
        rule_key: str,
        selection: SelectedAssertions,
        codes: frozenset[str],
        expected_key: Optional[str]
    ) -> MatchResult:
        """Build a correct result, resolving the journal entry."""
        rule = self.rule_set.get(rule_key)
        resolved_entry = None
        error = None
        try:
            resolved_entry = self.resolver.resolve(rule, selection)
        except LinkageError as e:
            error = ClassificationError.from_linkage(e)

        return MatchResult(
            status=MatchStatus.CORRECT,
            matched_classifications=(rule_key,),
            nearest=self.distance_calculator.distance(rule, codes),
            expected_classification=expected_key,
            resolved_entry=resolved_entry,
            error=error,
        )

    # =========================================================================
    # JOURNAL ENTRIES
    # =========================================================================

    def resolve_entry(
        self,
        rule_key: str,
        selected: SelectionInput
    ) -> ResolvedJournalEntry:
        """
        Show the journal entry a rule would produce for a selection.

        Raises:
            KeyError: If the rule is unknown
            UnknownAssertionCode: If the selection has unknown codes
            LinkageError: If a linked account cannot be resolved
        """
        selection = as_selection(selected)
        self.catalog.validate_selection(selection)
        return self.resolver.resolve(
            self.rule_set.get(rule_key),
            self.catalog.normalize_selection(selection),
        )

    def check_journal_entry(
        self,
        entry: ConstructedEntry,
        expected_key: str,
        expected_assertions: SelectionInput,
        expected_amount: Any = None
    ) -> EntryCheckResult:
        """
        Check a journal entry the learner constructed.

        Args:
            entry: Learner's debit account, credit account and amount
            expected_key: Correct classification for the problem
            expected_assertions: Correct assertion set for the problem
            expected_amount: Transaction amount

        Raises:
            KeyError: If the classification is unknown
        """
        return self.entry_checker.check(
            entry,
            self.rule_set.get(expected_key),
            as_selection(expected_assertions),
            expected_amount,
        )


__all__ = ['ClassificationCoordinator']
