# Path: aalp/process/classifier/models/classification_rule.py
"""
Classification Rule Model

Pydantic models for the named transaction shapes a selection can match.
Cross-checks against the assertion catalog (unknown codes, overlapping
required/prohibited sets) happen when a RuleSet is built.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....constants import AMOUNT_PARAMETER


# =============================================================================
# JOURNAL ENTRY TEMPLATE
# =============================================================================

class JournalLineTemplate(BaseModel):
    """One debit/credit pair of a rule's journal entry."""
    model_config = ConfigDict(frozen=True)

    debit: str = Field(description="Account debited")
    credit: str = Field(description="Account credited")


# =============================================================================
# ACCOUNT LINKAGE
# =============================================================================

class LinkageSource(BaseModel):
    """Assertion parameter that can supply an account's amount."""
    model_config = ConfigDict(frozen=True)

    assertion: str = Field(description="Assertion code to read from")
    parameter: str = Field(
        default=AMOUNT_PARAMETER,
        description="Parameter holding the amount"
    )
    detail_parameters: tuple[str, ...] = Field(
        default=('unit',),
        description="Extra parameters copied onto the resolved line"
    )


class AccountLinkage(BaseModel):
    """
    Explains which assertion determines an account's amount.

    Sources are tried in order; the first selected assertion with the
    parameter filled in wins.
    """
    model_config = ConfigDict(frozen=True)

    account: str = Field(description="Account label in the journal entry")
    sources: tuple[LinkageSource, ...] = Field(
        min_length=1,
        description="Candidate assertion parameters, in priority order"
    )

    @property
    def primary(self) -> LinkageSource:
        """The first (designated) source."""
        return self.sources[0]


# =============================================================================
# CLASSIFICATION RULE (main model)
# =============================================================================

class ClassificationRule(BaseModel):
    """
    A named classification defined by required and prohibited assertions.

    Example:
        rule = ClassificationRule(
            key="asset-purchase",
            name="Asset Purchase",
            required=frozenset({"asset-existence", "asset-control",
                                "consideration-given"}),
            prohibited=frozenset({"revenue-earned"}),
            journal_entry=(JournalLineTemplate(debit="Asset", credit="Cash"),),
        )
    """
    model_config = ConfigDict(frozen=True)

    # Identity
    key: str = Field(description="Unique rule key")
    name: str = Field(description="Display name used in feedback")
    description: str = Field(default='', description="What the transaction is")

    # Matching
    required: frozenset[str] = Field(description="Assertions that must be selected")
    prohibited: frozenset[str] = Field(
        default_factory=frozenset,
        description="Assertions that must not be selected"
    )
    required_parameters: Mapping[str, Mapping[str, Any]] = Field(
        default_factory=dict,
        validate_default=True,
        description="Parameter values that distinguish rules of the same shape"
    )

    # Bookkeeping consequence
    journal_entry: tuple[JournalLineTemplate, ...] = Field(
        default=(),
        description="Debit/credit lines, in order"
    )
    account_linkage: Mapping[str, AccountLinkage] = Field(
        default_factory=dict,
        validate_default=True,
        description="Account label -> assertion parameter that explains it"
    )

    # Metadata
    level: int = Field(default=0, ge=0, description="Level at which it unlocks")
    note: Optional[str] = Field(default=None, description="Teaching note")
    examples: tuple[str, ...] = Field(default=(), description="Example narratives")

    @field_validator('required_parameters')
    @classmethod
    def _freeze_required_parameters(cls, value: Mapping) -> Mapping:
        return MappingProxyType({
            code: MappingProxyType(dict(params))
            for code, params in value.items()
        })

    @field_validator('account_linkage')
    @classmethod
    def _freeze_linkage(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    @property
    def accounts(self) -> list[str]:
        """Account labels in journal-entry order, without duplicates."""
        seen: list[str] = []
        for line in self.journal_entry:
            for account in (line.debit, line.credit):
                if account not in seen:
                    seen.append(account)
        return seen

    def parameter_mismatches(
        self,
        selection: dict[str, dict[str, Any]]
    ) -> dict[str, dict[str, Any]]:
        """
        Required parameter values the selection gets wrong.

        Only assertions that are selected are checked; a missing assertion
        is reported by distance, not here.

        Args:
            selection: Selected assertion code -> parameter values

        Returns:
            Assertion code -> {parameter: expected value} for each mismatch
        """
        mismatches: dict[str, dict[str, Any]] = {}
        for code, expected in self.required_parameters.items():
            if code not in selection:
                continue
            entered = selection[code] or {}
            wrong = {
                param: value
                for param, value in expected.items()
                if entered.get(param) != value
            }
            if wrong:
                mismatches[code] = wrong
        return mismatches

    def parameters_satisfied(self, selection: dict[str, dict[str, Any]]) -> bool:
        """Check every required parameter value is present in the selection."""
        for code, expected in self.required_parameters.items():
            entered = selection.get(code)
            if entered is None:
                return False
            if any(entered.get(param) != value for param, value in expected.items()):
                return False
        return True


__all__ = [
    'JournalLineTemplate',
    'LinkageSource',
    'AccountLinkage',
    'ClassificationRule',
]
