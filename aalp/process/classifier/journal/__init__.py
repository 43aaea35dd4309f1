# Path: aalp/process/classifier/journal/__init__.py
"""
Journal Module

- JournalEntryResolver: Fills a matched rule's entry from learner parameters
- JournalEntryChecker: Checks an entry the learner built by hand
- AccountChart: Accounts available per level
"""

from .resolver import JournalEntryResolver
from .account_chart import AccountChart, infer_account_type, strip_amount
from .entry_checker import (
    ConstructedEntry,
    EntryCheckResult,
    JournalEntryChecker,
    parse_amount,
)

__all__ = [
    'JournalEntryResolver',
    'AccountChart',
    'infer_account_type',
    'strip_amount',
    'ConstructedEntry',
    'EntryCheckResult',
    'JournalEntryChecker',
    'parse_amount',
]
