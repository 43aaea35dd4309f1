# Path: aalp/process/classifier/models/match_result.py
"""
Match Result Models

Models representing the outcome of classifying one selected-assertion set.
Results are plain values: two classify calls with the same inputs produce
equal results.
"""

from decimal import Decimal
from typing import Optional, Any
from dataclasses import dataclass, field

from ....constants import MatchStatus, HintKind, ErrorKind
from ....exceptions import LinkageError, UnknownAssertionCode


@dataclass(frozen=True)
class Hint:
    """
    One piece of corrective feedback.

    Attributes:
        kind: Trigger condition that produced the hint
        message: Rendered text
        assertion_code: Assertion the hint is about (if any)
        rule_key: Classification the hint is about (if any)
    """
    kind: HintKind
    message: str
    assertion_code: Optional[str] = None
    rule_key: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'kind': self.kind.value,
            'message': self.message,
            'assertion_code': self.assertion_code,
            'rule_key': self.rule_key,
        }


@dataclass(frozen=True)
class RuleDistance:
    """
    How far a selection is from satisfying one rule.

    Attributes:
        rule_key: Rule being measured
        missing: Required assertions that were not selected
        extra: Selected assertions the rule prohibits
        distance: len(missing) + len(extra)
    """
    rule_key: str
    missing: frozenset[str] = frozenset()
    extra: frozenset[str] = frozenset()

    @property
    def distance(self) -> int:
        return len(self.missing) + len(self.extra)

    @property
    def is_match(self) -> bool:
        """Zero distance means the rule matches."""
        return self.distance == 0

    def to_dict(self) -> dict:
        """Convert to dictionary (sets sorted for stable output)."""
        return {
            'rule_key': self.rule_key,
            'missing': sorted(self.missing),
            'extra': sorted(self.extra),
            'distance': self.distance,
        }


@dataclass(frozen=True)
class ResolvedPosting:
    """
    One side of a resolved journal line.

    Attributes:
        account: Account label
        amount: Amount as the learner entered it (None when unlinked)
        assertion_code: Assertion that explains the amount
        parameter_key: Parameter the amount was read from
        parameter_value: Raw parameter value
        details: Extra parameters of the linked assertion (e.g. unit)
    """
    account: str
    amount: Any = None
    assertion_code: Optional[str] = None
    parameter_key: Optional[str] = None
    parameter_value: Any = None
    details: tuple[tuple[str, Any], ...] = ()

    @property
    def is_linked(self) -> bool:
        return self.assertion_code is not None

    @property
    def text(self) -> str:
        """Display form, e.g. 'Cash $1,500'."""
        if self.amount is None:
            return self.account
        return f"{self.account} ${format_amount(self.amount)}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'account': self.account,
            'amount': self.amount,
            'text': self.text,
            'linkage': {
                'assertion_code': self.assertion_code,
                'parameter_key': self.parameter_key,
                'parameter_value': self.parameter_value,
                'details': dict(self.details),
            } if self.is_linked else None,
        }


@dataclass(frozen=True)
class ResolvedJournalLine:
    """A debit/credit pair with amounts filled in."""
    debit: ResolvedPosting
    credit: ResolvedPosting

    def to_dict(self) -> dict:
        return {
            'debit': self.debit.to_dict(),
            'credit': self.credit.to_dict(),
        }


@dataclass(frozen=True)
class ResolvedJournalEntry:
    """Journal entry of one rule, resolved against a selection."""
    rule_key: str
    lines: tuple[ResolvedJournalLine, ...] = ()

    def to_dict(self) -> dict:
        return {
            'rule_key': self.rule_key,
            'lines': [line.to_dict() for line in self.lines],
        }


@dataclass(frozen=True)
class ClassificationError:
    """
    Recoverable runtime error reported inside a result.

    Attributes:
        kind: Error kind
        message: Human-readable message
        assertion_code: Offending assertion (if any)
        parameter: Missing parameter (linkage errors)
        account: Unresolvable account (linkage errors)
    """
    kind: ErrorKind
    message: str
    assertion_code: Optional[str] = None
    parameter: Optional[str] = None
    account: Optional[str] = None

    @classmethod
    def from_unknown_code(cls, error: UnknownAssertionCode) -> 'ClassificationError':
        return cls(
            kind=ErrorKind.UNKNOWN_ASSERTION_CODE,
            message=str(error),
            assertion_code=error.code,
        )

    @classmethod
    def from_linkage(cls, error: LinkageError) -> 'ClassificationError':
        return cls(
            kind=ErrorKind.LINKAGE_ERROR,
            message=str(error),
            assertion_code=error.assertion_code,
            parameter=error.parameter,
            account=error.account,
        )

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.value,
            'message': self.message,
            'assertion_code': self.assertion_code,
            'parameter': self.parameter,
            'account': self.account,
        }


@dataclass(frozen=True)
class MatchResult:
    """
    Result of classifying one selected-assertion set.

    Attributes:
        status: correct, incorrect, incomplete or indeterminate
        matched_classifications: Rules the selection satisfies, in
            declaration order
        nearest: Closest rule with its distance breakdown
        hints: Corrective feedback, in display order
        resolved_entry: Journal entry of the matched rule (correct only)
        expected_classification: The answer the selection was checked against
        error: Structured runtime error, if one occurred
    """
    status: MatchStatus
    matched_classifications: tuple[str, ...] = ()
    nearest: Optional[RuleDistance] = None
    hints: tuple[Hint, ...] = ()
    resolved_entry: Optional[ResolvedJournalEntry] = None
    expected_classification: Optional[str] = None
    error: Optional[ClassificationError] = None

    @property
    def is_correct(self) -> bool:
        return self.status == MatchStatus.CORRECT

    @property
    def hint_messages(self) -> list[str]:
        """Hint texts in display order."""
        return [hint.message for hint in self.hints]

    def hints_of_kind(self, kind: HintKind) -> list[Hint]:
        """Hints produced by one trigger condition."""
        return [hint for hint in self.hints if hint.kind == kind]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'status': self.status.value,
            'matched_classifications': list(self.matched_classifications),
            'nearest': self.nearest.to_dict() if self.nearest else None,
            'hints': [hint.to_dict() for hint in self.hints],
            'resolved_entry': (
                self.resolved_entry.to_dict() if self.resolved_entry else None
            ),
            'expected_classification': self.expected_classification,
            'error': self.error.to_dict() if self.error else None,
        }


def format_amount(amount: Any) -> str:
    """Format an amount with thousands separators when it is numeric."""
    if isinstance(amount, bool):
        return str(amount)
    if isinstance(amount, int):
        return f"{amount:,}"
    if isinstance(amount, (float, Decimal)):
        if amount == int(amount):
            return f"{int(amount):,}"
        return f"{amount:,.2f}"
    return str(amount)


__all__ = [
    'Hint',
    'RuleDistance',
    'ResolvedPosting',
    'ResolvedJournalLine',
    'ResolvedJournalEntry',
    'ClassificationError',
    'MatchResult',
    'format_amount',
]
