# Path: aalp/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for AALP

Provides common test fixtures used across all test modules: environment
handling, singleton resets, and small in-memory catalogs and rule sets.
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root (parent of aalp/) to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from aalp.constants import Domain
from aalp.process.classifier.engine.assertion_catalog import AssertionCatalog
from aalp.process.classifier.engine.coordinator import ClassificationCoordinator
from aalp.process.classifier.engine.rule_set import RuleSet
from aalp.process.classifier.models import (
    AccountLinkage,
    AssertionDefinition,
    ClassificationRule,
    JournalLineTemplate,
    LinkageSource,
    ParameterSpec,
)


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'AALP_ENVIRONMENT': 'test',
        'AALP_DEBUG': 'true',

        # Content
        'AALP_DICTIONARY_DIR': str(temp_dir / 'dictionary'),

        # Logging
        'AALP_LOG_DIR': str(temp_dir / 'logs'),
        'AALP_LOG_LEVEL': 'DEBUG',
        'AALP_LOG_CONSOLE': 'false',

        # Engine
        'AALP_MAX_LEVEL': '2',
        'AALP_MAX_HINTS': '3',
        'AALP_INCLUDE_PARAMETER_HINTS': 'false',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# SAMPLE CONTENT FIXTURES
# ==============================================================================

def _amount_parameters() -> dict:
    return {
        'unit': ParameterSpec(
            key='unit', type='dropdown', label='Unit type',
            options=(
                {'value': 'monetary-unit', 'label': 'Cash/Money'},
                {'value': 'physical-unit', 'label': 'Goods/Services'},
            ),
        ),
        'quantity': ParameterSpec(
            key='quantity', type='number', label='Quantity', optional=True
        ),
    }


@pytest.fixture
def sample_definitions():
    """Assertion definitions used by the scenario rules."""
    return [
        AssertionDefinition(
            code='asset-existence', label='Asset Existence',
            domain=Domain.EXCHANGE, level=0,
        ),
        AssertionDefinition(
            code='asset-control', label='Asset Control',
            domain=Domain.EXCHANGE, level=0,
        ),
        AssertionDefinition(
            code='consideration-given', label='Consideration Given',
            domain=Domain.EXCHANGE, level=0,
        ),
        AssertionDefinition(
            code='revenue-earned', label='Revenue Earned',
            domain=Domain.FORWARD_LOOKING, level=1,
        ),
        AssertionDefinition(
            code='benefit-consumed', label='Benefit Consumed',
            domain=Domain.TRANSFORMATION, level=2,
        ),
        AssertionDefinition(
            code='provides', label='Provides',
            domain=Domain.EXCHANGE, level=0,
            parameters=_amount_parameters(),
        ),
        AssertionDefinition(
            code='receives', label='Receives',
            domain=Domain.EXCHANGE, level=0,
            parameters=_amount_parameters(),
        ),
    ]


@pytest.fixture
def sample_catalog(sample_definitions):
    """In-memory assertion catalog."""
    return AssertionCatalog(sample_definitions)


@pytest.fixture
def asset_purchase_rule():
    """Asset purchase: three required codes, revenue-earned prohibited."""
    return ClassificationRule(
        key='asset-purchase',
        name='Asset Purchase',
        required=frozenset({'asset-existence', 'asset-control', 'consideration-given'}),
        prohibited=frozenset({'revenue-earned'}),
        journal_entry=(JournalLineTemplate(debit='Asset', credit='Cash'),),
    )


@pytest.fixture
def expense_rule():
    """Expense: benefit consumed in exchange for consideration."""
    return ClassificationRule(
        key='expense',
        name='Expense',
        required=frozenset({'benefit-consumed', 'consideration-given'}),
        journal_entry=(JournalLineTemplate(debit='Expense', credit='Cash'),),
        level=2,
    )


@pytest.fixture
def linked_purchase_rule():
    """Purchase whose accounts take their amounts from receives/provides."""
    return ClassificationRule(
        key='linked-purchase',
        name='Linked Purchase',
        required=frozenset({'provides', 'receives'}),
        required_parameters={
            'provides': {'unit': 'monetary-unit'},
            'receives': {'unit': 'physical-unit'},
        },
        journal_entry=(JournalLineTemplate(debit='Asset', credit='Cash/Payable'),),
        account_linkage={
            'Asset': AccountLinkage(
                account='Asset',
                sources=(LinkageSource(assertion='receives'),),
            ),
            'Cash/Payable': AccountLinkage(
                account='Cash/Payable',
                sources=(LinkageSource(assertion='provides'),),
            ),
        },
    )


@pytest.fixture
def sample_rules(asset_purchase_rule, expense_rule, linked_purchase_rule):
    """Scenario rules in declaration order."""
    return [asset_purchase_rule, expense_rule, linked_purchase_rule]


@pytest.fixture
def sample_rule_set(sample_rules, sample_catalog):
    """In-memory rule set validated against the sample catalog."""
    return RuleSet(sample_rules, sample_catalog)


@pytest.fixture
def coordinator(sample_catalog, sample_rule_set):
    """Coordinator over the in-memory content."""
    return ClassificationCoordinator(sample_catalog, sample_rule_set)


@pytest.fixture(scope='session')
def bundled_coordinator():
    """Coordinator over the dictionary shipped with the package."""
    return ClassificationCoordinator.from_dictionary()


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    import logging
    from io import StringIO

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def reset_singletons():
    """Reset singleton instances between tests."""
    from aalp.config_loader import ConfigLoader
    from aalp.process.classifier import api

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
    api.set_default_coordinator(None)

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
    api.set_default_coordinator(None)
