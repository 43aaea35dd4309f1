# Path: aalp/core/logger/__init__.py
"""
AALP Logger Package

IPO-aware logging for the classification engine.

Provides separate log streams for:
- INPUT layer (dictionary loading, selection intake)
- PROCESS layer (matching, distance ranking, hint generation)
- OUTPUT layer (journal-entry rendering, result serialization)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_layer_logger,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_layer_logger',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
