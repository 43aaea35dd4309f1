# Path: aalp/process/classifier/journal/account_chart.py
"""
Account Chart

Accounts a learner may choose from when constructing a journal entry,
unlocked progressively by level, plus account-type inference from names.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ....constants import AccountType, ACCOUNT_TYPE_KEYWORDS


def strip_amount(account: str) -> str:
    """Remove a trailing amount: 'Cash $1,500' -> 'Cash'."""
    return account.split(' $', 1)[0].strip()


def infer_account_type(account: str) -> AccountType:
    """
    Infer the type of an account from its name.

    Args:
        account: Account label, with or without an amount

    Returns:
        AccountType (UNKNOWN when no keyword applies)
    """
    name = strip_amount(account).lower()
    for account_type, keywords in ACCOUNT_TYPE_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return account_type
    return AccountType.UNKNOWN


class AccountChart:
    """
    Accounts available per level, grouped by account type.

    Levels without an entry fall back to the closest lower declared level
    (or the lowest declared level when asked for anything below it).

    Example:
        chart = AccountChart({0: {'asset': ['Cash'], 'revenue': ['Revenue']}})
        chart.accounts_for_level(3)  # level 0 accounts
    """

    def __init__(self, accounts_by_level: Mapping[int, Mapping[str, Iterable[str]]]):
        """
        Build the chart.

        Args:
            accounts_by_level: level -> account type -> account labels

        Raises:
            ValueError: If no level is declared or a type is unknown
        """
        if not accounts_by_level:
            raise ValueError("Account chart needs at least one level")

        levels: dict[int, Mapping[AccountType, tuple[str, ...]]] = {}
        for level in sorted(accounts_by_level):
            by_type = {
                AccountType(account_type): tuple(accounts)
                for account_type, accounts in accounts_by_level[level].items()
            }
            levels[int(level)] = MappingProxyType(by_type)
        self._levels = MappingProxyType(levels)

    @property
    def levels(self) -> tuple[int, ...]:
        """Declared levels in ascending order."""
        return tuple(self._levels)

    def _resolve_level(self, level: int) -> int:
        declared = [candidate for candidate in self._levels if candidate <= level]
        return declared[-1] if declared else self.levels[0]

    def accounts_for_level(self, level: int) -> dict[AccountType, list[str]]:
        """Accounts grouped by type for a level."""
        by_type = self._levels[self._resolve_level(level)]
        return {account_type: list(accounts) for account_type, accounts in by_type.items()}

    def all_accounts(self, level: int) -> list[str]:
        """Flat list of accounts for a level, in declaration order."""
        accounts: list[str] = []
        for names in self.accounts_for_level(level).values():
            accounts.extend(names)
        return accounts

    def find(self, account: str, level: Optional[int] = None) -> Optional[AccountType]:
        """Declared type of an account, if the chart lists it."""
        levels = self.levels if level is None else (self._resolve_level(level),)
        name = strip_amount(account)
        for candidate in levels:
            for account_type, accounts in self._levels[candidate].items():
                if name in accounts:
                    return account_type
        return None


__all__ = [
    'AccountChart',
    'infer_account_type',
    'strip_amount',
]
