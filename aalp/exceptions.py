# Path: aalp/exceptions.py
"""
Exceptions for the AALP classification engine.

Runtime input problems (UnknownAssertionCode, LinkageError) are recoverable:
classify() converts them into a structured error on the MatchResult.
MalformedRule and DictionaryLoadError are raised while the static content is
built and should stop start-up.
"""


class AALPError(Exception):
    """Base class for all AALP errors."""


class UnknownAssertionCode(AALPError, KeyError):
    """
    An assertion code is not present in the assertion catalog.

    Attributes:
        code: The code that could not be found
    """

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown assertion code: {self.code}"


class LinkageError(AALPError):
    """
    A journal-entry line cannot be resolved from the learner's parameters.

    Attributes:
        account: Account label whose amount could not be resolved
        assertion_code: Assertion the linkage points at
        parameter: Parameter the linkage needs from that assertion
        assertion_selected: False when the assertion itself is absent
    """

    def __init__(
        self,
        account: str,
        assertion_code: str,
        parameter: str,
        assertion_selected: bool = True
    ):
        self.account = account
        self.assertion_code = assertion_code
        self.parameter = parameter
        self.assertion_selected = assertion_selected
        if assertion_selected:
            message = (
                f"Cannot resolve '{account}': parameter '{parameter}' "
                f"of assertion '{assertion_code}' is missing"
            )
        else:
            message = (
                f"Cannot resolve '{account}': assertion '{assertion_code}' "
                f"(parameter '{parameter}') was not selected"
            )
        super().__init__(message)


class MalformedRule(AALPError, ValueError):
    """
    A classification rule is internally inconsistent.

    Attributes:
        rule_key: Key of the offending rule
        reason: What is wrong with it
    """

    def __init__(self, rule_key: str, reason: str):
        self.rule_key = rule_key
        self.reason = reason
        super().__init__(f"Malformed rule '{rule_key}': {reason}")


class DictionaryLoadError(AALPError):
    """Dictionary content could not be read or parsed."""


__all__ = [
    'AALPError',
    'UnknownAssertionCode',
    'LinkageError',
    'MalformedRule',
    'DictionaryLoadError',
]
