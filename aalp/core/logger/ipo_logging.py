# Path: aalp/core/logger/ipo_logging.py
"""
IPO-Aware Logging for AALP

Input-Process-Output separated logging for the classification engine.

Loggers are named '<layer>.<component>' (e.g. 'process.classifier.coordinator').
When a log directory is given, this module writes:
- input_activity.log (INPUT layer: dictionary loader, selection intake)
- process_activity.log (PROCESS layer: rule matching, hints)
- output_activity.log (OUTPUT layer: journal resolution, serialization)
- aalp_activity.log (everything combined)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LAYERS = ('input', 'process', 'output')

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name == self.layer or record.name.startswith(f'{self.layer}.')


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for AALP.

    Args:
        log_dir: Directory for log files. None disables file logging.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Example:
        setup_ipo_logging(
            log_dir=Path('/var/log/aalp'),
            log_level='DEBUG',
            console_output=False
        )
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Repeated calls replace handlers instead of stacking them
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        full_handler = logging.FileHandler(log_dir / 'aalp_activity.log')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer in LAYERS:
            layer_handler = logging.FileHandler(log_dir / f'{layer}_activity.log')
            layer_handler.setLevel(logging.DEBUG)
            layer_handler.setFormatter(formatter)
            layer_handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(layer_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)


def get_layer_logger(layer: str, name: str) -> logging.Logger:
    """
    Get a logger inside one IPO layer.

    Args:
        layer: One of LAYERS
        name: Component name (e.g., 'classifier.coordinator')

    Returns:
        Logger named '<layer>.<name>'

    Raises:
        ValueError: If the layer is not an IPO layer
    """
    if layer not in LAYERS:
        raise ValueError(f"Unknown IPO layer: {layer}")
    return logging.getLogger(f'{layer}.{name}')


def get_input_logger(name: str) -> logging.Logger:
    """Logger for the INPUT layer (dictionary loading, selection intake)."""
    return get_layer_logger('input', name)


def get_process_logger(name: str) -> logging.Logger:
    """
    Logger for the PROCESS layer (classification engine).

    Example:
        logger = get_process_logger('classifier.coordinator')
        logger.debug("Classified selection as correct")
    """
    return get_layer_logger('process', name)


def get_output_logger(name: str) -> logging.Logger:
    """Logger for the OUTPUT layer (journal resolution, serialization)."""
    return get_layer_logger('output', name)


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_layer_logger',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
