# Path: aalp/process/classifier/engine/assertion_catalog.py
"""
Assertion Catalog

Static registry of assertion definitions. Built once, read-only afterwards.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Any

from ....constants import Domain, DOMAIN_ORDER
from ....core.logger.ipo_logging import get_input_logger
from ....exceptions import UnknownAssertionCode
from ..models.assertion_definition import AssertionDefinition
from ..models.selection import SelectedAssertions


class AssertionCatalog:
    """
    Registry of assertion definitions in declaration order.

    Example:
        catalog = AssertionCatalog(definitions)

        # Assertions a level-1 learner can pick, grouped by domain
        picker = catalog.list_for_level(1)

        provides = catalog.get('provides')
    """

    def __init__(self, definitions: Iterable[AssertionDefinition]):
        """
        Build the catalog.

        Args:
            definitions: Assertion definitions in declaration order

        Raises:
            ValueError: If two definitions share a code
        """
        self.logger = get_input_logger('classifier.assertion_catalog')

        by_code: dict[str, AssertionDefinition] = {}
        for definition in definitions:
            if definition.code in by_code:
                raise ValueError(f"Duplicate assertion code: {definition.code}")
            by_code[definition.code] = definition

        self._definitions = tuple(by_code.values())
        self._by_code = MappingProxyType(by_code)
        self._order = MappingProxyType(
            {code: index for index, code in enumerate(by_code)}
        )

        self.logger.info(f"Assertion catalog built with {len(self._definitions)} assertions")

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[AssertionDefinition]:
        return iter(self._definitions)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    @property
    def codes(self) -> tuple[str, ...]:
        """All codes in declaration order."""
        return tuple(self._by_code)

    def get(self, code: str) -> AssertionDefinition:
        """
        Get an assertion definition by code.

        Raises:
            UnknownAssertionCode: If the code is not in the catalog
        """
        try:
            return self._by_code[code]
        except KeyError:
            raise UnknownAssertionCode(code) from None

    def label_for(self, code: str) -> str:
        """Display label of a code, falling back to the code itself."""
        definition = self._by_code.get(code)
        return definition.label if definition else code

    def declaration_index(self, code: str) -> int:
        """Position of a code in the catalog; unknown codes sort last."""
        return self._order.get(code, len(self._order))

    def sort_codes(self, codes: Iterable[str]) -> list[str]:
        """Order codes by catalog declaration (unknown codes last, by name)."""
        return sorted(codes, key=lambda code: (self.declaration_index(code), code))

    def list_for_level(self, level: int) -> dict[Domain, list[AssertionDefinition]]:
        """
        Assertions unlocked at a level, grouped by domain.

        Unlocking is cumulative: everything at or below the level is listed.
        Domains follow the canonical order and empty domains are left out;
        within a domain, assertions keep declaration order.

        Args:
            level: Learner's level

        Returns:
            Ordered mapping of domain -> assertion definitions
        """
        grouped: dict[Domain, list[AssertionDefinition]] = {}
        for domain in DOMAIN_ORDER:
            visible = [
                definition for definition in self._definitions
                if definition.domain == domain and definition.level <= level
            ]
            if visible:
                grouped[domain] = visible
        return grouped

    def unknown_codes(self, selection: Mapping[str, Any]) -> list[str]:
        """Selected codes absent from the catalog, in selection order."""
        return [code for code in selection if code not in self._by_code]

    def validate_selection(self, selection: Mapping[str, Any]) -> None:
        """
        Reject a selection containing codes the catalog does not know.

        Raises:
            UnknownAssertionCode: For the first unknown code
        """
        unknown = self.unknown_codes(selection)
        if unknown:
            raise UnknownAssertionCode(unknown[0])

    def normalize_selection(self, selection: SelectedAssertions) -> SelectedAssertions:
        """
        Drop parameter values that do not apply.

        Conditional parameters whose condition is not met are removed so
        parameter checks and journal linkage ignore them consistently.
        Unknown codes are passed through untouched.

        Args:
            selection: Selected code -> parameter values

        Returns:
            New selection dictionary
        """
        normalized: SelectedAssertions = {}
        for code, params in selection.items():
            definition = self._by_code.get(code)
            if definition is None:
                normalized[code] = dict(params)
            else:
                normalized[code] = definition.active_parameters(params)
        return normalized


__all__ = ['AssertionCatalog']
