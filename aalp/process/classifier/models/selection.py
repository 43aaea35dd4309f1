# Path: aalp/process/classifier/models/selection.py
"""
Selected Assertion Set

A learner's answer: assertion code -> parameter values. Callers may also
pass a plain collection of codes, which is read as "selected without
parameters".
"""

from collections.abc import Mapping
from typing import Any, Iterable, Union

SelectedAssertions = dict[str, dict[str, Any]]

SelectionInput = Union[Mapping[str, Mapping[str, Any]], Iterable[str]]


def as_selection(selected: SelectionInput) -> SelectedAssertions:
    """
    Copy a selection into the canonical dict-of-dicts form.

    Args:
        selected: Mapping of code -> parameters, or an iterable of codes

    Returns:
        New dictionary; the caller's object is never modified

    Raises:
        TypeError: If given a bare string, or a parameter value that is
                   not a mapping
    """
    if isinstance(selected, (str, bytes)):
        raise TypeError(
            f"Selection must be a mapping or a collection of codes, not {selected!r}"
        )
    if isinstance(selected, Mapping):
        selection = {}
        for code, params in selected.items():
            if params is not None and not isinstance(params, Mapping):
                raise TypeError(
                    f"Parameters for '{code}' must be a mapping, got "
                    f"{type(params).__name__}"
                )
            selection[str(code)] = dict(params or {})
        return selection
    return {str(code): {} for code in selected}


def selected_codes(selection: Mapping[str, Any]) -> frozenset[str]:
    """Assertion codes present in a selection."""
    return frozenset(selection.keys())


__all__ = [
    'SelectedAssertions',
    'SelectionInput',
    'as_selection',
    'selected_codes',
]
