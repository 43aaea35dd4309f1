# Path: aalp/process/classifier/models/__init__.py
"""
Classifier Models

Data models for the classification engine:
- AssertionDefinition: One assertion and its parameter schema
- ClassificationRule: Required/prohibited assertions and journal entry
- MatchResult: Outcome of classifying a selection
- SelectedAssertions: A learner's answer
"""

from .assertion_definition import (
    ParameterOption,
    ParameterSpec,
    AssertionDefinition,
)

from .classification_rule import (
    JournalLineTemplate,
    LinkageSource,
    AccountLinkage,
    ClassificationRule,
)

from .match_result import (
    Hint,
    RuleDistance,
    ResolvedPosting,
    ResolvedJournalLine,
    ResolvedJournalEntry,
    ClassificationError,
    MatchResult,
    format_amount,
)

from .selection import (
    SelectedAssertions,
    SelectionInput,
    as_selection,
    selected_codes,
)

__all__ = [
    # Assertion Definition
    'ParameterOption',
    'ParameterSpec',
    'AssertionDefinition',
    # Classification Rule
    'JournalLineTemplate',
    'LinkageSource',
    'AccountLinkage',
    'ClassificationRule',
    # Match Result
    'Hint',
    'RuleDistance',
    'ResolvedPosting',
    'ResolvedJournalLine',
    'ResolvedJournalEntry',
    'ClassificationError',
    'MatchResult',
    'format_amount',
    # Selection
    'SelectedAssertions',
    'SelectionInput',
    'as_selection',
    'selected_codes',
]
