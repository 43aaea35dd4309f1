# Path: aalp/tests/unit/test_classifier/test_scoring.py
"""
Tests for distance calculation and nearest-rule tiebreaking.
"""

import pytest

from aalp.process.classifier.models import RuleDistance
from aalp.process.classifier.scoring import DistanceCalculator, Tiebreaker


class TestDistanceCalculator:
    """Test DistanceCalculator."""

    def test_exact_match_is_zero(self, asset_purchase_rule):
        """Selecting exactly the required codes has distance 0."""
        result = DistanceCalculator().distance(
            asset_purchase_rule,
            {'asset-existence', 'asset-control', 'consideration-given'},
        )

        assert result.distance == 0
        assert result.is_match

    def test_missing_required(self, asset_purchase_rule):
        """Each missing required code adds one."""
        result = DistanceCalculator().distance(
            asset_purchase_rule, {'asset-existence', 'consideration-given'}
        )

        assert result.missing == frozenset({'asset-control'})
        assert result.extra == frozenset()
        assert result.distance == 1

    def test_prohibited_included(self, asset_purchase_rule):
        """Each selected prohibited code adds one."""
        result = DistanceCalculator().distance(
            asset_purchase_rule,
            {'asset-existence', 'asset-control', 'consideration-given', 'revenue-earned'},
        )

        assert result.extra == frozenset({'revenue-earned'})
        assert result.distance == 1

    def test_unrelated_codes_are_free(self, asset_purchase_rule):
        """Codes the rule ignores cost nothing."""
        result = DistanceCalculator().distance(
            asset_purchase_rule,
            {'asset-existence', 'asset-control', 'consideration-given', 'provides'},
        )

        assert result.distance == 0

    def test_distances_keeps_rule_order(self, sample_rules):
        """distances() returns one entry per rule, in order."""
        results = DistanceCalculator().distances(sample_rules, set())

        assert [r.rule_key for r in results] == [
            'asset-purchase', 'expense', 'linked-purchase',
        ]
        assert [r.distance for r in results] == [3, 2, 2]

    def test_to_dict_sorts_sets(self):
        """Serialized distances are stable."""
        distance = RuleDistance('r', missing=frozenset({'b', 'a'}))
        assert distance.to_dict() == {
            'rule_key': 'r', 'missing': ['a', 'b'], 'extra': [], 'distance': 2,
        }


class TestTiebreaker:
    """Test Tiebreaker."""

    def test_single_nearest(self):
        """A unique minimum wins outright."""
        distances = [
            RuleDistance('far', missing=frozenset({'a', 'b'})),
            RuleDistance('near', missing=frozenset({'a'})),
        ]

        nearest, method = Tiebreaker().nearest(distances, ['far', 'near'].index)

        assert nearest.rule_key == 'near'
        assert method == 'single_nearest'

    def test_tie_uses_declaration_order(self):
        """Equal distances resolve to the earliest declared rule."""
        distances = [
            RuleDistance('later', missing=frozenset({'a'})),
            RuleDistance('earlier', extra=frozenset({'b'})),
        ]

        nearest, method = Tiebreaker().nearest(distances, ['earlier', 'later'].index)

        assert nearest.rule_key == 'earlier'
        assert method == 'declaration_order'

    def test_no_candidates(self):
        """An empty candidate list is an error."""
        with pytest.raises(ValueError):
            Tiebreaker().nearest([], lambda key: 0)
