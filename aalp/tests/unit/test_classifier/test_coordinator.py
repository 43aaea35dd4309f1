# Path: aalp/tests/unit/test_classifier/test_coordinator.py
"""
Tests for ClassificationCoordinator.classify and friends.
"""

import pytest

from aalp.constants import Domain, ErrorKind, HintKind, MatchStatus
from aalp.exceptions import LinkageError, UnknownAssertionCode
from aalp.process.classifier.engine.coordinator import ClassificationCoordinator
from aalp.process.classifier.engine.rule_set import RuleSet
from aalp.process.classifier.models import ClassificationRule


ASSET_PURCHASE = ['asset-existence', 'asset-control', 'consideration-given']


class TestClassifyScenarios:
    """Core classification scenarios."""

    def test_exact_match_is_correct(self, coordinator):
        """Selecting exactly the required set is correct."""
        result = coordinator.classify(ASSET_PURCHASE, expected_key='asset-purchase')

        assert result.status == MatchStatus.CORRECT
        assert result.matched_classifications == ('asset-purchase',)
        assert result.nearest.rule_key == 'asset-purchase'
        assert result.nearest.distance == 0
        assert result.hints == ()
        assert coordinator.all_matches(ASSET_PURCHASE) == ['asset-purchase']

    def test_missing_one_required(self, coordinator):
        """One missing assertion gives one missing-assertion hint."""
        result = coordinator.classify(
            ['asset-existence', 'consideration-given'], expected_key='asset-purchase'
        )

        assert result.status == MatchStatus.INCORRECT
        assert result.nearest.rule_key == 'asset-purchase'
        assert result.nearest.distance == 1

        missing = result.hints_of_kind(HintKind.MISSING_ASSERTION)
        assert len(missing) == 1
        assert missing[0].assertion_code == 'asset-control'
        assert 'Asset Control' in missing[0].message

    def test_prohibited_included(self, coordinator):
        """A prohibited assertion blocks the match and costs one."""
        selection = ASSET_PURCHASE + ['revenue-earned']

        result = coordinator.classify(selection, expected_key='asset-purchase')

        assert coordinator.all_matches(selection) == []
        assert result.status == MatchStatus.INCORRECT
        assert result.nearest.rule_key == 'asset-purchase'
        assert result.nearest.distance == 1
        prohibited = result.hints_of_kind(HintKind.PROHIBITED_ASSERTION)
        assert [hint.assertion_code for hint in prohibited] == ['revenue-earned']

    @pytest.mark.parametrize('expected_key', [None, 'asset-purchase', 'expense'])
    def test_empty_selection_is_incomplete(self, coordinator, expected_key):
        """Nothing selected is incomplete whatever the expected key."""
        result = coordinator.classify({}, expected_key=expected_key)

        assert result.status == MatchStatus.INCOMPLETE
        assert result.matched_classifications == ()
        assert result.hints[0].kind == HintKind.EMPTY_SELECTION

    def test_other_rule_matched(self, coordinator):
        """Matching a different rule is incorrect with a classify-as hint."""
        result = coordinator.classify(
            ['benefit-consumed', 'consideration-given'], expected_key='asset-purchase'
        )

        assert result.matched_classifications == ('expense',)
        assert result.status == MatchStatus.INCORRECT
        assert (
            "Your assertions would classify this as Expense. Does that seem right?"
            in result.hint_messages
        )

    def test_no_expected_key_accepts_single_match(self, coordinator):
        """Practice mode: any single match is correct."""
        result = coordinator.classify(['benefit-consumed', 'consideration-given'])

        assert result.status == MatchStatus.CORRECT
        assert result.matched_classifications == ('expense',)
        assert result.expected_classification is None

    def test_unknown_expected_key_raises(self, coordinator):
        """An expected key that is not a rule is a programming error."""
        with pytest.raises(KeyError):
            coordinator.classify(ASSET_PURCHASE, expected_key='nope')

    def test_idempotent(self, coordinator):
        """Same inputs give equal results."""
        selection = {'asset-existence': {}, 'revenue-earned': {}}

        first = coordinator.classify(selection, expected_key='asset-purchase')
        second = coordinator.classify(selection, expected_key='asset-purchase')

        assert first == second

    def test_selection_not_mutated(self, coordinator):
        """The caller's selection is left untouched."""
        selection = {'provides': {'unit': 'monetary-unit', 'quantity': 10}}
        snapshot = {'provides': dict(selection['provides'])}

        coordinator.classify(selection, expected_key='linked-purchase')

        assert selection == snapshot


class TestUnknownCodes:
    """Selections containing codes outside the catalog."""

    def test_unknown_code_reported_in_result(self, coordinator):
        """classify() does not raise; the error is structured."""
        result = coordinator.classify(['asset-existence', 'telepathy'])

        assert result.status == MatchStatus.INCORRECT
        assert result.error.kind == ErrorKind.UNKNOWN_ASSERTION_CODE
        assert result.error.assertion_code == 'telepathy'
        assert result.hints_of_kind(HintKind.UNKNOWN_ASSERTION)[0].assertion_code == 'telepathy'

    def test_resolve_entry_raises_for_unknown(self, coordinator):
        """The explicit resolve path raises instead."""
        with pytest.raises(UnknownAssertionCode):
            coordinator.resolve_entry('linked-purchase', ['telepathy'])


class TestMultipleMatches:
    """Several rules satisfied at once."""

    @pytest.fixture
    def overlapping(self, sample_catalog):
        rules = [
            ClassificationRule(
                key='cash-buy', name='Cash Buy',
                required=frozenset({'provides', 'receives'}),
                required_parameters={'receives': {'unit': 'physical-unit'}},
            ),
            ClassificationRule(
                key='cash-sell', name='Cash Sell',
                required=frozenset({'provides', 'receives'}),
                required_parameters={'receives': {'unit': 'monetary-unit'}},
            ),
        ]
        return ClassificationCoordinator(sample_catalog, RuleSet(rules, sample_catalog))

    def test_parameters_pick_one_rule(self, overlapping):
        """Required parameters narrow code-level matches."""
        result = overlapping.classify(
            {'provides': {}, 'receives': {'unit': 'monetary-unit'}},
            expected_key='cash-sell',
        )

        assert result.status == MatchStatus.CORRECT
        assert result.matched_classifications == ('cash-sell',)

    def test_parameters_pick_wrong_rule(self, overlapping):
        """Narrowed to a different rule is incorrect with a parameter hint."""
        result = overlapping.classify(
            {'provides': {}, 'receives': {'unit': 'physical-unit'}},
            expected_key='cash-sell',
        )

        assert result.status == MatchStatus.INCORRECT
        assert result.matched_classifications == ('cash-buy',)
        parameter_hints = result.hints_of_kind(HintKind.PARAMETER_MISMATCH)
        assert parameter_hints[0].message == (
            "For Receives, you need to specify: unit = monetary-unit"
        )

    def test_unresolved_is_indeterminate(self, overlapping):
        """Without distinguishing parameters the result is indeterminate."""
        result = overlapping.classify(['provides', 'receives'], expected_key='cash-sell')

        assert result.status == MatchStatus.INDETERMINATE
        assert result.matched_classifications == ('cash-buy', 'cash-sell')
        assert result.nearest.rule_key == 'cash-buy'
        assert result.hints_of_kind(HintKind.AMBIGUOUS_CLASSIFICATION)


class TestJournalEntry:
    """Journal entry resolution through the coordinator."""

    SELECTION = {
        'provides': {'unit': 'monetary-unit', 'quantity': 1500},
        'receives': {'unit': 'physical-unit', 'quantity': 1500},
    }

    def test_correct_result_carries_entry(self, coordinator):
        """A correct classification resolves its journal entry."""
        result = coordinator.classify(self.SELECTION, expected_key='linked-purchase')

        assert result.status == MatchStatus.CORRECT
        line = result.resolved_entry.lines[0]
        assert line.debit.account == 'Asset'
        assert line.debit.amount == 1500
        assert line.debit.assertion_code == 'receives'
        assert line.credit.account == 'Cash/Payable'
        assert line.credit.amount == 1500
        assert line.credit.assertion_code == 'provides'
        assert line.debit.text == 'Asset $1,500'

    def test_single_match_with_wrong_parameters(self, coordinator):
        """Matching codes with contradicting parameters is not correct."""
        selection = {
            'provides': {'unit': 'physical-unit', 'quantity': 1500},
            'receives': {'unit': 'monetary-unit', 'quantity': 1500},
        }

        result = coordinator.classify(selection, expected_key='linked-purchase')

        assert coordinator.all_matches(selection) == ['linked-purchase']
        assert result.status == MatchStatus.INCORRECT
        assert result.matched_classifications == ('linked-purchase',)
        assert result.resolved_entry is None
        assert not result.hints_of_kind(HintKind.WRONG_CLASSIFICATION)
        assert [hint.message for hint in result.hints] == [
            "For Provides, you need to specify: unit = monetary-unit",
            "For Receives, you need to specify: unit = physical-unit",
        ]

    def test_single_match_with_wrong_parameters_in_practice_mode(self, coordinator):
        """Without an expected key the lone rule's parameters still apply."""
        result = coordinator.classify({
            'provides': {'unit': 'monetary-unit', 'quantity': 10},
            'receives': {'unit': 'monetary-unit', 'quantity': 10},
        })

        assert result.status == MatchStatus.INCORRECT
        assert result.hints_of_kind(HintKind.PARAMETER_MISMATCH)[0].assertion_code == 'receives'

    def test_incorrect_result_has_no_entry(self, coordinator):
        """Only correct results carry an entry."""
        result = coordinator.classify(['provides'], expected_key='linked-purchase')
        assert result.resolved_entry is None

    def test_linkage_error_in_result(self, coordinator):
        """Missing quantity becomes a structured error on a correct result."""
        selection = {
            'provides': {'unit': 'monetary-unit', 'quantity': 1500},
            'receives': {'unit': 'physical-unit'},
        }

        result = coordinator.classify(selection, expected_key='linked-purchase')

        assert result.status == MatchStatus.CORRECT
        assert result.resolved_entry is None
        assert result.error.kind == ErrorKind.LINKAGE_ERROR
        assert result.error.account == 'Asset'
        assert result.error.parameter == 'quantity'

    def test_resolve_entry_raises_linkage_error(self, coordinator):
        """resolve_entry() raises LinkageError directly."""
        with pytest.raises(LinkageError) as exc_info:
            coordinator.resolve_entry('linked-purchase', {
                'provides': {'quantity': 10},
                'receives': {'unit': 'physical-unit'},
            })

        assert exc_info.value.assertion_code == 'receives'


class TestCatalogAccess:
    """Catalog pass-through helpers."""

    def test_list_for_level_capped(self, sample_catalog, sample_rule_set):
        """Levels above max_level are treated as max_level."""
        capped = ClassificationCoordinator(sample_catalog, sample_rule_set, max_level=0)

        assert list(capped.list_for_level(4)) == [Domain.EXCHANGE]

    def test_get_assertion(self, coordinator):
        """get_assertion() delegates to the catalog."""
        assert coordinator.get_assertion('receives').code == 'receives'

    def test_accounts_need_chart(self, coordinator):
        """Without an account chart, accounts cannot be listed."""
        with pytest.raises(ValueError):
            coordinator.accounts_for_level(0)

    def test_to_dict(self, coordinator):
        """Results serialize to plain data."""
        data = coordinator.classify(
            ['asset-existence', 'consideration-given'], expected_key='asset-purchase'
        ).to_dict()

        assert data['status'] == 'incorrect'
        assert data['nearest']['missing'] == ['asset-control']
        assert data['hints'][0]['kind'] == 'missing_assertion'
        assert data['error'] is None
