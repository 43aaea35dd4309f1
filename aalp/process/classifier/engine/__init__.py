# Path: aalp/process/classifier/engine/__init__.py
"""
Classifier Engine

- AssertionCatalog: Registry of assertion definitions
- RuleSet: Registry of classification rules and the exact-match test
- DictionaryLoader: Builds both from YAML content

The ClassificationCoordinator lives in engine.coordinator and is exported
from the classifier package.
"""

from .assertion_catalog import AssertionCatalog
from .rule_set import RuleSet
from .dictionary_loader import DictionaryLoader

__all__ = [
    'AssertionCatalog',
    'RuleSet',
    'DictionaryLoader',
]
