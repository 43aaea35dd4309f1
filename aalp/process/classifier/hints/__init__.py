# Path: aalp/process/classifier/hints/__init__.py
"""
Hints Module

- HintMessages: Hint wording, loaded from the dictionary
- HintBuilder: Trigger logic that decides which hints apply
"""

from .hint_messages import HintMessages
from .hint_builder import HintBuilder

__all__ = [
    'HintMessages',
    'HintBuilder',
]
