# src/logic/parser.py

import logging
from typing import Any, Optional
from pydantic import ValidationError, TypeAdapter

from src.core.models.account import Account
from src.core.models.operation import Operation
from src.logic.error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

class AccountParser:
    """
    Parses raw account dictionaries into validated Account objects.
    Accounts that fail validation are left out of the result and reported
    to the shared ErrorReporter.
    """
    def __init__(self, error_reporter: ErrorReporter, validate_sort_order: bool = False):
        self._single_account_adapter = TypeAdapter(Account)
        self._error_reporter = error_reporter
        self._validate_sort_order = validate_sort_order

    def parse_accounts(self, raw_accounts_data: list[dict[str, Any]]) -> list[Account]:
        """
        Parses a list of raw account dictionaries, preserving their order.
        """
        logger.debug(f"AccountParser: Parsing {len(raw_accounts_data)} raw accounts.")
        parsed_accounts: list[Account] = []

        for raw_account_data in raw_accounts_data:
            account_id = str(raw_account_data.get("id", "UNKNOWN_ID_BEFORE_PARSE"))
            try:
                account = self._single_account_adapter.validate_python(raw_account_data)
            except ValidationError as e:
                error_messages = "; ".join(
                    [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()]
                )
                error_reason = f"Validation error: {error_messages}"
                logger.warning(f"AccountParser: Rejected account {account_id}. {error_reason}")
                self._error_reporter.add_error(account_id, error_reason)
                continue

            if self._validate_sort_order:
                sort_error = self._find_sort_error(account)
                if sort_error:
                    logger.warning(f"AccountParser: Rejected account {account_id}. {sort_error}")
                    self._error_reporter.add_error(account_id, sort_error)
                    continue

            parsed_accounts.append(account)

        return parsed_accounts

    def _find_sort_error(self, account: Account) -> Optional[str]:
        """
        Returns a reason if the account, or one of its sub-accounts, has operations
        that are not sorted by date descending.
        """
        for field_name, operations in (
            ("operations", account.operations),
            ("pending_operations", account.pending_operations),
        ):
            position = _first_unsorted_position(operations)
            if position is not None:
                return (
                    f"Unsorted {field_name} in account '{account.id}': operation at index {position} "
                    f"is more recent than the one before it."
                )
        for sub_account in account.sub_accounts:
            sub_error = self._find_sort_error(sub_account)
            if sub_error:
                return sub_error
        return None


def _first_unsorted_position(operations: list[Operation]) -> Optional[int]:
    for i in range(1, len(operations)):
        if operations[i].date > operations[i - 1].date:
            return i
    return None
