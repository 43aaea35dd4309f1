# Path: aalp/process/classifier/journal/entry_checker.py
"""
Journal Entry Checker

Checks a journal entry the learner constructed by hand (debit account,
credit account, amount) against the expected classification, and explains
what went wrong using the problem's expected assertions.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ....constants import AccountType, MatchStatus
from ....core.logger.ipo_logging import get_process_logger
from ..models.classification_rule import ClassificationRule, JournalLineTemplate
from ..models.match_result import format_amount
from ..models.selection import SelectedAssertions
from .account_chart import infer_account_type, strip_amount


DEBIT_EFFECTS = {
    AccountType.ASSET: "would increase this asset",
    AccountType.LIABILITY: "would decrease this liability",
    AccountType.REVENUE: "would decrease revenue",
    AccountType.EXPENSE: "would increase this expense",
}

CREDIT_EFFECTS = {
    AccountType.ASSET: "would decrease this asset",
    AccountType.LIABILITY: "would increase this liability",
    AccountType.REVENUE: "would increase revenue",
    AccountType.EXPENSE: "would decrease this expense",
}

UNIT_DESCRIPTIONS = {
    'physical-unit': "a physical asset",
    'monetary-unit': "money (cash)",
}


@dataclass(frozen=True)
class ConstructedEntry:
    """
    A single-line journal entry built by the learner.

    Attributes:
        debit_account: Account the learner debited
        credit_account: Account the learner credited
        amount: Amount entered (number or numeric text), optional
    """
    debit_account: str
    credit_account: str
    amount: Any = None


@dataclass(frozen=True)
class EntryCheckResult:
    """Outcome of checking a constructed entry."""
    status: MatchStatus
    feedback: str
    hints: tuple[str, ...] = ()
    expected_line: Optional[JournalLineTemplate] = None

    @property
    def is_correct(self) -> bool:
        return self.status == MatchStatus.CORRECT

    def to_dict(self) -> dict:
        return {
            'status': self.status.value,
            'feedback': self.feedback,
            'hints': list(self.hints),
            'expected_line': (
                self.expected_line.model_dump() if self.expected_line else None
            ),
        }


def parse_amount(value: Any) -> Optional[Decimal]:
    """Read '1,500', '$1500' or 1500 as a Decimal; None if not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))
    text = str(value).replace(',', '').replace('$', '').strip()
    if not text:
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


class JournalEntryChecker:
    """
    Validates learner-constructed journal entries.

    Checks run in order (debit, credit, amount); the first failure is
    reported with hints derived from the expected assertions.

    Example:
        checker = JournalEntryChecker()
        result = checker.check(
            ConstructedEntry('Inventory', 'Cash', 500),
            rule=rule_set.get('cash-inventory-purchase'),
            expected_assertions=problem_assertions,
            expected_amount=500,
        )
    """

    def __init__(self):
        """Initialize checker."""
        self.logger = get_process_logger('classifier.entry_checker')

    def check(
        self,
        entry: ConstructedEntry,
        rule: ClassificationRule,
        expected_assertions: SelectedAssertions,
        expected_amount: Any = None
    ) -> EntryCheckResult:
        """
        Check a constructed entry against a rule's first journal line.

        Args:
            entry: Learner's entry
            rule: Expected classification
            expected_assertions: Correct assertion set for the problem
            expected_amount: Transaction amount (skips the amount check if None)

        Returns:
            EntryCheckResult
        """
        if not rule.journal_entry:
            raise ValueError(f"Rule '{rule.key}' has no journal entry to check against")

        expected = rule.journal_entry[0]
        expected_debit = strip_amount(expected.debit)
        expected_credit = strip_amount(expected.credit)
        debit = strip_amount(entry.debit_account)
        credit = strip_amount(entry.credit_account)

        if debit != expected_debit:
            self.logger.debug(f"Debit mismatch for '{rule.key}': {debit!r}")
            return EntryCheckResult(
                status=MatchStatus.INCORRECT,
                feedback=(
                    f'Debit account incorrect. You selected "{debit}", but this '
                    f"transaction affects a different account on the debit side."
                ),
                hints=tuple(self.debit_hints(debit, expected_assertions)),
                expected_line=expected,
            )

        if credit != expected_credit:
            self.logger.debug(f"Credit mismatch for '{rule.key}': {credit!r}")
            return EntryCheckResult(
                status=MatchStatus.INCORRECT,
                feedback=(
                    f'Credit account incorrect. You selected "{credit}", but this '
                    f"transaction affects a different account on the credit side."
                ),
                hints=tuple(self.credit_hints(credit, expected_assertions)),
                expected_line=expected,
            )

        if expected_amount is not None and entry.amount is not None:
            entered = parse_amount(entry.amount)
            if entered is None:
                return EntryCheckResult(
                    status=MatchStatus.INCORRECT,
                    feedback=f'"{entry.amount}" is not a valid amount.',
                    hints=("Enter the amount as a number.",),
                    expected_line=expected,
                )
            if entered != parse_amount(expected_amount):
                return EntryCheckResult(
                    status=MatchStatus.INCORRECT,
                    feedback=(
                        f"Amount is incorrect. You entered ${format_amount(entered)}, "
                        f"but the transaction amount is different."
                    ),
                    hints=("Check the narrative for the transaction amount.",),
                    expected_line=expected,
                )

        return EntryCheckResult(
            status=MatchStatus.CORRECT,
            feedback="Correct! Your journal entry accurately records this transaction.",
            expected_line=expected,
        )

    # =========================================================================
    # HINTS
    # =========================================================================

    def debit_hints(self, account: str, assertions: SelectedAssertions) -> list[str]:
        """Explain a wrong debit using what the entity receives."""
        account_type = infer_account_type(account)
        effect = DEBIT_EFFECTS.get(account_type)
        hints = [
            f"You selected {account}. Debiting {account} {effect}."
            if effect else f"You selected {account}."
        ]

        if 'receives' in assertions:
            params = assertions['receives'] or {}
            received = UNIT_DESCRIPTIONS.get(params.get('unit'), "something")
            if params.get('unit') == 'physical-unit' and params.get('asset-type'):
                received = f"{received} ({params['asset-type']})"
            hints.append(
                f"But the assertions show the entity receives {received}. "
                f"What account represents what's being received?"
            )

        if (
            account_type in (AccountType.REVENUE, AccountType.EXPENSE)
            and 'receives' in assertions
            and 'provides' in assertions
        ):
            hints.append(
                "This is an exchange transaction (providing one thing for another), "
                "not a revenue or expense transaction."
            )

        return hints

    def credit_hints(self, account: str, assertions: SelectedAssertions) -> list[str]:
        """Explain a wrong credit using what the entity provides or owes."""
        account_type = infer_account_type(account)
        effect = CREDIT_EFFECTS.get(account_type)
        hints = [
            f"You selected {account}. Crediting {account} {effect}."
            if effect else f"You selected {account}."
        ]

        if 'provides' in assertions:
            params = assertions['provides'] or {}
            provided = UNIT_DESCRIPTIONS.get(params.get('unit'), "something")
            hints.append(
                f"But the assertions show the entity provides {provided}. "
                f"What account represents what's being given up?"
            )

        if 'requires' in assertions:
            action = (assertions['requires'] or {}).get('action')
            obligation = f" to {action}" if action else ""
            hints.append(
                f"The assertions show this creates a future obligation{obligation}. "
                f"What account represents owing something?"
            )

        if account_type == AccountType.REVENUE and 'expects' not in assertions:
            hints.append(
                "Revenue is typically credited when earning income, but check the "
                "assertions - is this an income-generating transaction?"
            )

        return hints


__all__ = [
    'ConstructedEntry',
    'EntryCheckResult',
    'JournalEntryChecker',
    'parse_amount',
]
