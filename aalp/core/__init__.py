# Path: aalp/core/__init__.py
"""
AALP Core Package

Core utilities shared by the classification engine.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
