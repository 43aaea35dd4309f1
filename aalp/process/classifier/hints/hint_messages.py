# Path: aalp/process/classifier/hints/hint_messages.py
"""
Hint Messages

Hint wording as data. Templates use str.format fields; which fields are
available depends on the hint kind:

    missing / prohibited:   code, label, domain
    wrong_classification:   key, name
    ambiguous:              names
    parameter_mismatch:     code, label, requirements
    unknown_assertion:      code
    empty_selection:        (none)

Per-code templates override the defaults for a single assertion.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class _SafeValues(dict):
    """Leave unknown template fields visible instead of failing."""

    def __missing__(self, key: str) -> str:
        return '{' + key + '}'


class HintMessages(BaseModel):
    """Catalog of hint templates."""
    model_config = ConfigDict(frozen=True)

    missing_default: str = Field(
        default="Look again at the {domain} assertions: does this transaction involve '{label}'?"
    )
    missing: dict[str, str] = Field(default_factory=dict)
    prohibited_default: str = Field(
        default="Re-examine your '{label}' assertion. Does it really describe this transaction?"
    )
    prohibited: dict[str, str] = Field(default_factory=dict)
    wrong_classification: str = Field(
        default="Your assertions would classify this as {name}. Does that seem right?"
    )
    ambiguous: str = Field(
        default=(
            "Your assertions fit more than one classification ({names}). "
            "What detail tells them apart?"
        )
    )
    parameter_mismatch: str = Field(
        default="For {label}, you need to specify: {requirements}"
    )
    unknown_assertion: str = Field(
        default="'{code}' is not an assertion you can use here."
    )
    empty_selection: str = Field(
        default="Select at least one assertion that describes the transaction."
    )

    @staticmethod
    def render(template: str, **values: Any) -> str:
        """Fill a template, tolerating fields it does not know."""
        return template.format_map(_SafeValues(values))

    def missing_for(self, code: str) -> str:
        """Template for a missing required assertion."""
        return self.missing.get(code, self.missing_default)

    def prohibited_for(self, code: str) -> str:
        """Template for a selected prohibited assertion."""
        return self.prohibited.get(code, self.prohibited_default)


__all__ = ['HintMessages']
