# Path: aalp/config_loader.py
"""
Configuration Loader for AALP

Loads configuration from a .env file and the process environment.
Singleton pattern ensures consistent configuration across all components.

Nothing is mandatory: every key has a default so the engine can run
straight from an installed package.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import MAX_LEVEL


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Engine Defaults
DEFAULT_MAX_LEVEL: int = MAX_LEVEL
DEFAULT_MAX_HINTS: int = 6

# Bundled dictionary shipped inside the package
DEFAULT_DICTIONARY_DIR: Path = Path(__file__).resolve().parent / 'dictionary'


class ConfigLoader:
    """
    Singleton configuration loader for AALP.

    Loads configuration from environment variables with type conversion
    and sensible defaults.

    Example:
        config = ConfigLoader()
        dictionary_dir = config.get('dictionary_dir')  # Returns Path object
        max_hints = config.get('max_hints')  # Returns int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env from the
        current working directory, then the project root, if present.
        """
        if ConfigLoader._initialized:
            return

        # aalp/config_loader.py -> project root is the parent of the package
        project_root = Path(__file__).resolve().parent.parent
        for env_path in (Path.cwd() / '.env', project_root / '.env'):
            if env_path.exists():
                load_dotenv(dotenv_path=env_path, interpolate=True)
                break

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('AALP_ENVIRONMENT', 'development'),
            'debug': self._get_bool('AALP_DEBUG', False),

            # ================================================================
            # CONTENT
            # ================================================================
            'dictionary_dir': (
                self._get_path('AALP_DICTIONARY_DIR') or DEFAULT_DICTIONARY_DIR
            ),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('AALP_LOG_DIR'),
            'log_level': self._get_env('AALP_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('AALP_LOG_CONSOLE', True),

            # ================================================================
            # ENGINE CONFIGURATION
            # ================================================================
            'max_level': self._get_int('AALP_MAX_LEVEL', DEFAULT_MAX_LEVEL),
            'max_hints': self._get_int('AALP_MAX_HINTS', DEFAULT_MAX_HINTS),
            'include_parameter_hints': self._get_bool(
                'AALP_INCLUDE_PARAMETER_HINTS', True
            ),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value).expanduser()

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"dictionary_dir={self._config.get('dictionary_dir')}, "
            f"environment={self._config.get('environment')})"
        )


__all__ = ['ConfigLoader']
