# Path: aalp/process/classifier/journal/resolver.py
"""
Journal Entry Resolver

Fills a rule's journal-entry template with the amounts the learner entered,
keeping a link from every debit/credit back to the assertion parameter that
produced it.
"""

from typing import Any

from ....core.logger.ipo_logging import get_output_logger
from ....exceptions import LinkageError
from ..models.classification_rule import AccountLinkage, ClassificationRule
from ..models.match_result import (
    ResolvedJournalEntry,
    ResolvedJournalLine,
    ResolvedPosting,
)
from ..models.selection import SelectedAssertions


def _is_filled(value: Any) -> bool:
    """A parameter counts as entered unless it is None or blank text."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


class JournalEntryResolver:
    """
    Resolves journal-entry templates against a selection.

    Accounts without a linkage rule resolve to the bare account label.
    Linked accounts take their amount from the first linkage source whose
    assertion is selected with the parameter filled in.

    Example:
        resolver = JournalEntryResolver()
        entry = resolver.resolve(rule, {'receives': {'unit': 'physical-unit',
                                                     'quantity': 500}, ...})
        entry.lines[0].debit.text  # 'Inventory $500'
    """

    def __init__(self):
        """Initialize resolver."""
        self.logger = get_output_logger('classifier.journal_resolver')

    def resolve(
        self,
        rule: ClassificationRule,
        selection: SelectedAssertions
    ) -> ResolvedJournalEntry:
        """
        Resolve every line of a rule's journal entry.

        Args:
            rule: Rule whose template to fill
            selection: Normalized selection

        Returns:
            ResolvedJournalEntry

        Raises:
            LinkageError: If a linked account cannot be resolved
        """
        postings: dict[str, ResolvedPosting] = {}

        def posting_for(account: str) -> ResolvedPosting:
            if account not in postings:
                postings[account] = self.resolve_account(rule, account, selection)
            return postings[account]

        lines = tuple(
            ResolvedJournalLine(
                debit=posting_for(line.debit),
                credit=posting_for(line.credit),
            )
            for line in rule.journal_entry
        )

        self.logger.debug(
            f"Resolved {len(lines)} journal line(s) for '{rule.key}'"
        )
        return ResolvedJournalEntry(rule_key=rule.key, lines=lines)

    def resolve_account(
        self,
        rule: ClassificationRule,
        account: str,
        selection: SelectedAssertions
    ) -> ResolvedPosting:
        """
        Resolve one account.

        Args:
            rule: Rule the account belongs to
            account: Account label
            selection: Normalized selection

        Returns:
            ResolvedPosting (unlinked if the rule has no linkage for it)

        Raises:
            LinkageError: If no linkage source can supply the amount
        """
        linkage = rule.account_linkage.get(account)
        if linkage is None:
            return ResolvedPosting(account=account)

        for source in linkage.sources:
            params = selection.get(source.assertion)
            if params is None:
                continue
            value = params.get(source.parameter)
            if not _is_filled(value):
                continue
            details = tuple(
                (key, params[key])
                for key in source.detail_parameters
                if _is_filled(params.get(key))
            )
            return ResolvedPosting(
                account=account,
                amount=value,
                assertion_code=source.assertion,
                parameter_key=source.parameter,
                parameter_value=value,
                details=details,
            )

        raise self._linkage_error(linkage, selection)

    def _linkage_error(
        self,
        linkage: AccountLinkage,
        selection: SelectedAssertions
    ) -> LinkageError:
        """Report the first selected-but-unfilled source, else the primary one."""
        for source in linkage.sources:
            if source.assertion in selection:
                error = LinkageError(
                    account=linkage.account,
                    assertion_code=source.assertion,
                    parameter=source.parameter,
                    assertion_selected=True,
                )
                break
        else:
            error = LinkageError(
                account=linkage.account,
                assertion_code=linkage.primary.assertion,
                parameter=linkage.primary.parameter,
                assertion_selected=False,
            )
        self.logger.warning(str(error))
        return error


__all__ = ['JournalEntryResolver']
