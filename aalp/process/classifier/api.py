# Path: aalp/process/classifier/api.py
"""
Classifier API

Module-level functions the HTTP and simulation layers call. They delegate
to a default ClassificationCoordinator built once from ConfigLoader and the
bundled (or configured) dictionary.

Example:
    from aalp.process.classifier import api

    picker = api.list_for_level(1)
    result = api.classify({'provides': {}, 'receives': {}}, 'cash-sale')
"""

import threading
from typing import Any, Optional

from ...config_loader import ConfigLoader
from ...constants import AccountType
from ...core.logger import setup_ipo_logging
from .engine.coordinator import ClassificationCoordinator
from .journal.entry_checker import ConstructedEntry, EntryCheckResult
from .models.assertion_definition import AssertionDefinition
from .models.match_result import MatchResult, ResolvedJournalEntry
from .models.selection import SelectionInput


_default_coordinator: Optional[ClassificationCoordinator] = None
_lock = threading.Lock()


def configure_logging(config: Optional[ConfigLoader] = None) -> None:
    """Install IPO logging from AALP_LOG_* configuration."""
    config = config or ConfigLoader()
    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True),
    )


def get_default_coordinator() -> ClassificationCoordinator:
    """Return the shared coordinator, building it on first use."""
    global _default_coordinator
    if _default_coordinator is None:
        with _lock:
            if _default_coordinator is None:
                _default_coordinator = ClassificationCoordinator.from_config(ConfigLoader())
    return _default_coordinator


def set_default_coordinator(coordinator: Optional[ClassificationCoordinator]) -> None:
    """Replace the shared coordinator (None rebuilds it on next use)."""
    global _default_coordinator
    with _lock:
        _default_coordinator = coordinator


def reload_default_coordinator() -> ClassificationCoordinator:
    """Rebuild the shared coordinator from current configuration."""
    coordinator = ClassificationCoordinator.from_config(ConfigLoader())
    set_default_coordinator(coordinator)
    return coordinator


# =============================================================================
# PUBLIC FUNCTIONS
# =============================================================================

def list_for_level(level: int) -> dict:
    """Assertions unlocked at a level, grouped by domain in canonical order."""
    return get_default_coordinator().list_for_level(level)


def get_assertion(code: str) -> AssertionDefinition:
    """Look up one assertion. Raises UnknownAssertionCode."""
    return get_default_coordinator().get_assertion(code)


def all_matches(selected: SelectionInput) -> list[str]:
    """Every rule key the selection satisfies, in declaration order."""
    return get_default_coordinator().all_matches(selected)


def classify(selected: SelectionInput, expected_key: Optional[str] = None) -> MatchResult:
    """Classify a learner's selection against the expected classification."""
    return get_default_coordinator().classify(selected, expected_key)


def resolve_entry(rule_key: str, selected: SelectionInput) -> ResolvedJournalEntry:
    """Journal entry a rule produces for a selection. Raises LinkageError."""
    return get_default_coordinator().resolve_entry(rule_key, selected)


def check_journal_entry(
    entry: ConstructedEntry,
    expected_key: str,
    expected_assertions: SelectionInput,
    expected_amount: Any = None
) -> EntryCheckResult:
    """Check a learner-constructed journal entry."""
    return get_default_coordinator().check_journal_entry(
        entry, expected_key, expected_assertions, expected_amount
    )


def accounts_for_level(level: int) -> dict[AccountType, list[str]]:
    """Accounts available for constructed entries at a level."""
    return get_default_coordinator().accounts_for_level(level)


__all__ = [
    'configure_logging',
    'get_default_coordinator',
    'set_default_coordinator',
    'reload_default_coordinator',
    'list_for_level',
    'get_assertion',
    'all_matches',
    'classify',
    'resolve_entry',
    'check_journal_entry',
    'accounts_for_level',
]
