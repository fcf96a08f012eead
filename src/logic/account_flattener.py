# src/logic/account_flattener.py

import logging
from typing import Protocol, Sequence

from src.core.models.account import Account

logger = logging.getLogger(__name__)

class AccountFlattenerProtocol(Protocol):
    """
    Protocol (interface) for turning a tree of accounts into a flat list.
    The returned order must be stable, it is used to break ties between
    operations sharing the same date.
    """
    def flatten(self, accounts: Sequence[Account]) -> list[Account]:
        ...


class AccountFlattener:
    """
    Flattens accounts depth-first: every account is immediately followed by
    its sub-accounts (recursively), in the order they were given.
    """
    def flatten(self, accounts: Sequence[Account]) -> list[Account]:
        flattened: list[Account] = []
        for account in accounts:
            self._append_with_sub_accounts(account, flattened)
        logger.debug(f"AccountFlattener: Flattened {len(accounts)} top-level accounts into {len(flattened)} accounts.")
        return flattened

    def _append_with_sub_accounts(self, account: Account, flattened: list[Account]):
        flattened.append(account)
        for sub_account in account.sub_accounts:
            self._append_with_sub_accounts(sub_account, flattened)
