# Path: aalp/constants.py
"""
System-Wide Constants for AALP (Assertion-based Accounting Learning Platform)

Central repository for constant values used by the classification engine.
NO HARDCODED VALUES in module code - shared constants are defined here.

Constants are organized by category:
- Assertion Domains
- Parameter Types
- Match Status
- Hint Kinds
- Account Types
- Error Kinds
- Dictionary File Names
"""

from enum import Enum
from typing import Final


# ==============================================================================
# ASSERTION DOMAINS
# ==============================================================================

class Domain(str, Enum):
    """
    Assertion domains.

    Declaration order is the canonical display order used when the
    assertion picker groups assertions by domain.
    """
    EXCHANGE = 'exchange'
    FORWARD_LOOKING = 'forward-looking'
    TRANSFORMATION = 'transformation'
    LEGAL_REGULATORY = 'legal-regulatory'
    STATE_MODIFICATION = 'state-modification'


DOMAIN_ORDER: Final[tuple[Domain, ...]] = tuple(Domain)

DOMAIN_NAMES: Final[dict[Domain, str]] = {
    Domain.EXCHANGE: 'Exchange',
    Domain.FORWARD_LOOKING: 'Forward-Looking',
    Domain.TRANSFORMATION: 'Transformation',
    Domain.LEGAL_REGULATORY: 'Legal / Regulatory',
    Domain.STATE_MODIFICATION: 'State Modification',
}


# ==============================================================================
# PARAMETER TYPES
# ==============================================================================

class ParameterType(str, Enum):
    """Input type of an assertion parameter."""
    DROPDOWN = 'dropdown'
    NUMBER = 'number'
    TEXT = 'text'
    CURRENCY = 'currency'
    DATE = 'date'
    PERCENTAGE = 'percentage'


# 'slider' is the picker widget for percentage parameters
PARAMETER_TYPE_ALIASES: Final[dict[str, str]] = {
    'slider': ParameterType.PERCENTAGE.value,
}

# Parameter that carries the amount of an exchange or obligation
AMOUNT_PARAMETER: Final[str] = 'quantity'


# ==============================================================================
# LEVELS
# ==============================================================================

# Highest level the bundled dictionary unlocks content at
MAX_LEVEL: Final[int] = 4


# ==============================================================================
# MATCH STATUS
# ==============================================================================

class MatchStatus(str, Enum):
    """Outcome of classifying one selected-assertion set."""
    CORRECT = 'correct'
    INCORRECT = 'incorrect'
    INCOMPLETE = 'incomplete'
    INDETERMINATE = 'indeterminate'


# ==============================================================================
# HINT KINDS
# ==============================================================================

class HintKind(str, Enum):
    """Trigger condition that produced a hint."""
    MISSING_ASSERTION = 'missing_assertion'
    PROHIBITED_ASSERTION = 'prohibited_assertion'
    WRONG_CLASSIFICATION = 'wrong_classification'
    AMBIGUOUS_CLASSIFICATION = 'ambiguous_classification'
    PARAMETER_MISMATCH = 'parameter_mismatch'
    UNKNOWN_ASSERTION = 'unknown_assertion'
    EMPTY_SELECTION = 'empty_selection'


# ==============================================================================
# ACCOUNT TYPES
# ==============================================================================

class AccountType(str, Enum):
    """Account type inferred from an account name."""
    ASSET = 'asset'
    LIABILITY = 'liability'
    REVENUE = 'revenue'
    EXPENSE = 'expense'
    UNKNOWN = 'unknown'


# Checked in order; first pattern found in the lower-cased name wins
ACCOUNT_TYPE_KEYWORDS: Final[tuple[tuple[AccountType, tuple[str, ...]], ...]] = (
    (AccountType.ASSET, (
        'cash', 'receivable', 'inventory', 'equipment', 'prepaid', 'asset',
        'raw materials', 'work in process', 'finished goods',
    )),
    (AccountType.LIABILITY, ('payable', 'liability')),
    (AccountType.REVENUE, ('revenue',)),
    (AccountType.EXPENSE, ('expense', 'cost')),
)


# ==============================================================================
# ERROR KINDS
# ==============================================================================

class ErrorKind(str, Enum):
    """Structured runtime error kinds returned inside results."""
    UNKNOWN_ASSERTION_CODE = 'unknown_assertion_code'
    LINKAGE_ERROR = 'linkage_error'


# ==============================================================================
# DICTIONARY FILE NAMES
# ==============================================================================

ASSERTIONS_FILE: Final[str] = 'assertions.yaml'
CLASSIFICATIONS_FILE: Final[str] = 'classifications.yaml'
HINTS_FILE: Final[str] = 'hints.yaml'
ACCOUNTS_FILE: Final[str] = 'accounts.yaml'


__all__ = [
    'Domain',
    'DOMAIN_ORDER',
    'DOMAIN_NAMES',
    'ParameterType',
    'PARAMETER_TYPE_ALIASES',
    'AMOUNT_PARAMETER',
    'MAX_LEVEL',
    'MatchStatus',
    'HintKind',
    'AccountType',
    'ACCOUNT_TYPE_KEYWORDS',
    'ErrorKind',
    'ASSERTIONS_FILE',
    'CLASSIFICATIONS_FILE',
    'HINTS_FILE',
    'ACCOUNTS_FILE',
]
