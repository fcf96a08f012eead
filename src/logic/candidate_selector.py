# src/logic/candidate_selector.py

import logging
from datetime import datetime
from typing import Any, Callable, NamedTuple, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

# --- Capabilities required from the merged inputs ---

class OperationLike(Protocol):
    hash: str
    date: datetime


class OperationHistory(Protocol):
    """
    Anything exposing confirmed and pending operations, each sorted by date
    descending. Account satisfies it, but the merge does not depend on it.
    """
    operations: Sequence[OperationLike]
    pending_operations: Sequence[OperationLike]


class MergeCandidate(NamedTuple):
    """The records expanded from the winning operation, and that operation's date."""
    records: list[Any]
    date: datetime


class CandidateSelector:
    """
    Merges the confirmed and pending operations of several accounts into a single
    stream, most recent first, one operation per call to `next_candidate`.

    Holds one confirmed cursor and one pending cursor per account. Cursors only
    move forward and live as long as this selector, which is meant to serve a
    single merge.
    """
    def __init__(
        self,
        accounts: Sequence[OperationHistory],
        expand: Callable[[Any], list[Any]]
    ):
        self._accounts = accounts
        self._expand = expand
        self._indexes: list[int] = [0] * len(accounts)
        self._pending_indexes: list[int] = [0] * len(accounts)
        # Hashes of confirmed operations, to recognise pending operations that already landed
        self._confirmed_hashes: list[set[str]] = [
            {op.hash for op in account.operations} for account in accounts
        ]

    def next_candidate(self) -> Optional[MergeCandidate]:
        """
        Returns the most recent operation not yet consumed, expanded into its records,
        or None when every sequence of every account is exhausted.

        Ties on date go to the earliest account, and within an account to the
        confirmed operation.
        """
        best_op = None
        best_account_i = 0
        best_from_pending = False

        for i, account in enumerate(self._accounts):
            op = self._confirmed_head(i, account)
            if op is not None and (best_op is None or op.date > best_op.date):
                best_op = op
                best_account_i = i
                best_from_pending = False

            op_pending = self._pending_head(i, account)
            if op_pending is not None and (best_op is None or op_pending.date > best_op.date):
                best_op = op_pending
                best_account_i = i
                best_from_pending = True

        if best_op is None:
            return None

        if best_from_pending:
            self._pending_indexes[best_account_i] += 1
        else:
            self._indexes[best_account_i] += 1
        return MergeCandidate(records=self._expand(best_op), date=best_op.date)

    def _confirmed_head(self, i: int, account: OperationHistory) -> Optional[OperationLike]:
        if self._indexes[i] < len(account.operations):
            return account.operations[self._indexes[i]]
        return None

    def _pending_head(self, i: int, account: OperationHistory) -> Optional[OperationLike]:
        """
        Returns the first pending operation that has not landed in the confirmed
        operations, skipping (for good) those that have.
        """
        pending = account.pending_operations
        while self._pending_indexes[i] < len(pending):
            op_pending = pending[self._pending_indexes[i]]
            if op_pending.hash not in self._confirmed_hashes[i]:
                return op_pending
            logger.debug(f"CandidateSelector: Pending operation {op_pending.hash} already confirmed in account #{i}, skipping it.")
            self._pending_indexes[i] += 1
        return None
