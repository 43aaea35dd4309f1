# Path: aalp/process/classifier/__init__.py
"""
Classifier Module

Matches a learner's selected assertions against classification rules.

Components:
- models/ - Assertion, rule and result data models
- engine/ - Catalog, rule set, dictionary loader and coordinator
- scoring/ - Rule distance and nearest-rule tiebreaking
- hints/ - Corrective hint generation
- journal/ - Journal entry resolution and constructed-entry checking
- api - Module-level functions backed by a shared coordinator

Example:
    from aalp.process.classifier import ClassificationCoordinator

    coordinator = ClassificationCoordinator.from_dictionary()
    result = coordinator.classify(selection, expected_key='cash-sale')
    for hint in result.hints:
        print(hint)
"""

from .models import (
    AssertionDefinition,
    ClassificationRule,
    ClassificationError,
    Hint,
    MatchResult,
    ResolvedJournalEntry,
    RuleDistance,
)
from .engine import AssertionCatalog, RuleSet, DictionaryLoader
from .engine.coordinator import ClassificationCoordinator
from .journal import ConstructedEntry, EntryCheckResult
from . import api

__all__ = [
    # Models
    'AssertionDefinition',
    'ClassificationRule',
    'ClassificationError',
    'Hint',
    'MatchResult',
    'ResolvedJournalEntry',
    'RuleDistance',
    # Engine
    'AssertionCatalog',
    'RuleSet',
    'DictionaryLoader',
    'ClassificationCoordinator',
    # Journal
    'ConstructedEntry',
    'EntryCheckResult',
    # API
    'api',
]
