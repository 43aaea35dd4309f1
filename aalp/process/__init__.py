# Path: aalp/process/__init__.py
"""
Process Layer for AALP

The PROCESS layer holds the classification engine:
- classifier/ - assertion catalog, rule matching, hints, journal entries

All components follow the IPO pattern:
- Read content from the dictionary (INPUT)
- Match selections against rules (PROCESS)
- Produce results and journal entries for the caller (OUTPUT)
"""

from .classifier import ClassificationCoordinator, MatchResult

__all__ = [
    'ClassificationCoordinator',
    'MatchResult',
]
