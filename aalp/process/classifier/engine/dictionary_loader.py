# Path: aalp/process/classifier/engine/dictionary_loader.py
"""
Dictionary Loader

Loads assertion, classification, hint and account content from YAML files
in the dictionary directory and converts it to Pydantic models.

Content errors raise instead of being skipped.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from ....constants import (
    ASSERTIONS_FILE,
    CLASSIFICATIONS_FILE,
    HINTS_FILE,
    ACCOUNTS_FILE,
)
from ....core.logger.ipo_logging import get_input_logger
from ....dictionary import DICTIONARY_ROOT
from ....exceptions import DictionaryLoadError, MalformedRule
from ..hints.hint_messages import HintMessages
from ..journal.account_chart import AccountChart
from ..models.assertion_definition import AssertionDefinition
from ..models.classification_rule import ClassificationRule
from .assertion_catalog import AssertionCatalog
from .rule_set import RuleSet


class DictionaryLoader:
    """
    Loads engine content from YAML files.

    Expected files in the dictionary directory:
        assertions.yaml       - assertion definitions (required)
        classifications.yaml  - classification rules (required)
        hints.yaml            - hint wording (optional, defaults built in)
        accounts.yaml         - accounts by level (optional)

    Example:
        loader = DictionaryLoader()
        catalog = loader.load_catalog()
        rule_set = loader.load_rule_set(catalog)
    """

    def __init__(self, dictionary_path: Optional[Path] = None):
        """
        Initialize dictionary loader.

        Args:
            dictionary_path: Path to dictionary directory.
                             Defaults to the dictionary bundled with aalp.
        """
        self.logger = get_input_logger('classifier.dictionary_loader')
        self.dictionary_path = Path(dictionary_path) if dictionary_path else DICTIONARY_ROOT

    # =========================================================================
    # FILE ACCESS
    # =========================================================================

    def _read_yaml(self, file_name: str, required: bool = True) -> Optional[dict]:
        """
        Read one YAML file.

        Args:
            file_name: File name inside the dictionary directory
            required: Raise if the file does not exist

        Returns:
            Parsed mapping, or None for a missing optional file

        Raises:
            DictionaryLoadError: If the file is missing (when required),
                                 unparseable, or not a mapping
        """
        file_path = self.dictionary_path / file_name

        if not file_path.exists():
            if required:
                raise DictionaryLoadError(f"Dictionary file not found: {file_path}")
            self.logger.info(f"Optional dictionary file not found: {file_path}")
            return None

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            self.logger.error(f"YAML parse error in {file_path}: {e}")
            raise DictionaryLoadError(f"YAML parse error in {file_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DictionaryLoadError(f"Expected a mapping at top level of {file_path}")

        return data

    # =========================================================================
    # ASSERTIONS
    # =========================================================================

    def load_assertions(self) -> list[AssertionDefinition]:
        """
        Load assertion definitions in file order.

        Raises:
            DictionaryLoadError: If any definition is invalid
        """
        data = self._read_yaml(ASSERTIONS_FILE)
        definitions = []

        for raw in data.get('assertions', []):
            try:
                definitions.append(self._parse_assertion(raw))
            except (ValidationError, KeyError, TypeError, AttributeError) as e:
                code = raw.get('code', '?') if isinstance(raw, dict) else '?'
                self.logger.error(f"Invalid assertion '{code}': {e}")
                raise DictionaryLoadError(f"Invalid assertion '{code}': {e}") from e

        self.logger.info(f"Loaded {len(definitions)} assertion definitions")
        return definitions

    def _parse_assertion(self, raw: dict) -> AssertionDefinition:
        """Parse one raw assertion mapping."""
        data = dict(raw)
        parameters = {}
        for key, spec in (data.get('parameters') or {}).items():
            spec = dict(spec)
            spec['key'] = key
            parameters[key] = spec
        data['parameters'] = parameters
        return AssertionDefinition.model_validate(data)

    def load_catalog(self) -> AssertionCatalog:
        """Load assertions and build the catalog."""
        try:
            return AssertionCatalog(self.load_assertions())
        except ValueError as e:
            raise DictionaryLoadError(str(e)) from e

    # =========================================================================
    # CLASSIFICATIONS
    # =========================================================================

    def load_rules(self) -> list[ClassificationRule]:
        """
        Load classification rules in file order.

        Raises:
            MalformedRule: If any rule fails schema validation
        """
        data = self._read_yaml(CLASSIFICATIONS_FILE)
        rules = []

        for raw in data.get('classifications', []):
            key = raw.get('key', '?') if isinstance(raw, dict) else '?'
            try:
                rules.append(self._parse_rule(raw))
            except (ValidationError, KeyError, TypeError, AttributeError) as e:
                self.logger.error(f"Invalid classification '{key}': {e}")
                raise MalformedRule(key, str(e)) from e

        self.logger.info(f"Loaded {len(rules)} classification rules")
        return rules

    def _parse_rule(self, raw: dict) -> ClassificationRule:
        """Parse one raw classification mapping."""
        data = dict(raw)
        data['required'] = frozenset(data.get('required') or ())
        data['prohibited'] = frozenset(data.get('prohibited') or ())
        data['account_linkage'] = {
            account: {'account': account, 'sources': self._parse_sources(sources)}
            for account, sources in (data.get('account_linkage') or {}).items()
        }
        return ClassificationRule.model_validate(data)

    def _parse_sources(self, sources: Any) -> list[dict]:
        """Accept a single source mapping or a list of them."""
        if isinstance(sources, dict):
            return [sources]
        return list(sources)

    def load_rule_set(self, catalog: AssertionCatalog) -> RuleSet:
        """Load rules and validate them against the catalog."""
        return RuleSet(self.load_rules(), catalog)

    # =========================================================================
    # HINTS & ACCOUNTS
    # =========================================================================

    def load_hint_messages(self) -> HintMessages:
        """Load hint wording, falling back to built-in defaults."""
        data = self._read_yaml(HINTS_FILE, required=False)
        if not data:
            return HintMessages()
        try:
            return HintMessages.model_validate(data)
        except ValidationError as e:
            raise DictionaryLoadError(f"Invalid hint messages: {e}") from e

    def load_account_chart(self) -> Optional[AccountChart]:
        """Load accounts by level, if the dictionary provides them."""
        data = self._read_yaml(ACCOUNTS_FILE, required=False)
        if not data or not data.get('levels'):
            return None
        try:
            return AccountChart(data['levels'])
        except (ValueError, TypeError, AttributeError) as e:
            raise DictionaryLoadError(f"Invalid account chart: {e}") from e


__all__ = ['DictionaryLoader']
