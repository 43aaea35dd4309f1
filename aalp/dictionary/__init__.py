# Path: aalp/dictionary/__init__.py
"""
AALP Dictionary

YAML content bundled with the package:
- assertions.yaml - assertion definitions and parameter schemas
- classifications.yaml - classification rules
- hints.yaml - hint wording
- accounts.yaml - accounts available per level
"""

from pathlib import Path

DICTIONARY_ROOT: Path = Path(__file__).resolve().parent

__all__ = ['DICTIONARY_ROOT']
