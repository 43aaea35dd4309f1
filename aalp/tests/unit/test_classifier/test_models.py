# Path: aalp/tests/unit/test_classifier/test_models.py
"""
Tests for selection helpers, result models and IPO logger naming.
"""

import logging
from decimal import Decimal

import pytest

from aalp.constants import ErrorKind, HintKind, MatchStatus
from aalp.core.logger.ipo_logging import (
    IPOFilter,
    get_layer_logger,
    get_input_logger,
    get_output_logger,
    get_process_logger,
)
from aalp.exceptions import LinkageError, UnknownAssertionCode
from aalp.process.classifier.models import (
    ClassificationError,
    Hint,
    MatchResult,
    ResolvedPosting,
    as_selection,
    format_amount,
    selected_codes,
)


class TestSelection:
    """Test selection normalization helpers."""

    def test_codes_become_empty_parameter_maps(self):
        """A plain set of codes means no parameters."""
        assert as_selection({'provides', 'receives'}) == {'provides': {}, 'receives': {}}

    def test_mapping_is_copied(self):
        """The returned selection is independent of the input."""
        original = {'provides': {'unit': 'monetary-unit'}}
        copy = as_selection(original)
        copy['provides']['unit'] = 'time-unit'

        assert original['provides']['unit'] == 'monetary-unit'

    def test_none_parameters(self):
        """None parameter maps are read as empty."""
        assert as_selection({'allows': None}) == {'allows': {}}

    @pytest.mark.parametrize('selected', ['provides', b'provides'])
    def test_bare_string_rejected(self, selected):
        """A single string is not read as a collection of letters."""
        with pytest.raises(TypeError, match='collection of codes'):
            as_selection(selected)

    def test_non_mapping_parameters_rejected(self):
        """Parameter values must be mappings."""
        with pytest.raises(TypeError, match="Parameters for 'provides'"):
            as_selection({'provides': 5})

    def test_selected_codes(self):
        """Codes are the selection keys."""
        assert selected_codes({'a': {}, 'b': {'x': 1}}) == frozenset({'a', 'b'})


class TestResultModels:
    """Test MatchResult and friends."""

    @pytest.mark.parametrize('amount,expected', [
        (1500, '1,500'),
        (Decimal('1500.00'), '1,500'),
        (12.5, '12.50'),
        ('about 20', 'about 20'),
    ])
    def test_format_amount(self, amount, expected):
        """Numbers get thousands separators; text is left alone."""
        assert format_amount(amount) == expected

    def test_unlinked_posting_text(self):
        """An unlinked posting shows only the account."""
        posting = ResolvedPosting(account='Work in Process')

        assert posting.text == 'Work in Process'
        assert posting.to_dict()['linkage'] is None

    def test_hints_of_kind(self):
        """Hints can be filtered by kind."""
        result = MatchResult(
            status=MatchStatus.INCORRECT,
            hints=(
                Hint(HintKind.MISSING_ASSERTION, 'a'),
                Hint(HintKind.PROHIBITED_ASSERTION, 'b'),
            ),
        )

        assert [h.message for h in result.hints_of_kind(HintKind.PROHIBITED_ASSERTION)] == ['b']
        assert result.hint_messages == ['a', 'b']
        assert not result.is_correct

    def test_errors_from_exceptions(self):
        """Structured errors carry the exception's details."""
        unknown = ClassificationError.from_unknown_code(UnknownAssertionCode('zap'))
        linkage = ClassificationError.from_linkage(
            LinkageError('Cash', 'provides', 'quantity')
        )

        assert unknown.kind == ErrorKind.UNKNOWN_ASSERTION_CODE
        assert unknown.to_dict()['assertion_code'] == 'zap'
        assert linkage.kind == ErrorKind.LINKAGE_ERROR
        assert linkage.account == 'Cash'
        assert "parameter 'quantity'" in linkage.message


class TestIPOLoggers:
    """Test IPO logger naming and filtering."""

    def test_layer_prefixes(self):
        """Loggers are named by layer."""
        assert get_input_logger('x').name == 'input.x'
        assert get_process_logger('x').name == 'process.x'
        assert get_output_logger('x').name == 'output.x'

    def test_unknown_layer_rejected(self):
        """Only input, process and output are layers."""
        with pytest.raises(ValueError):
            get_layer_logger('storage', 'x')

    def test_filter_matches_layer_only(self):
        """IPOFilter passes its own layer and nothing else."""
        layer_filter = IPOFilter('process')

        def record(name):
            return logging.LogRecord(name, logging.INFO, __file__, 1, 'msg', None, None)

        assert layer_filter.filter(record('process.classifier'))
        assert layer_filter.filter(record('process'))
        assert not layer_filter.filter(record('processor'))
        assert not layer_filter.filter(record('input.loader'))
