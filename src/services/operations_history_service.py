# src/services/operations_history_service.py

import logging
from typing import Any, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

from src.core.config.settings import settings
from src.core.exceptions import InvalidArgumentError
from src.core.models.daily_operations import DailyOperations
from src.core.models.response import ErroredAccount
from src.logic.account_flattener import AccountFlattener
from src.logic.candidate_selector import OperationHistory
from src.logic.day_grouper import DayGrouper
from src.logic.error_reporter import ErrorReporter
from src.logic.operation_expander import OperationExpander
from src.logic.parser import AccountParser

logger = logging.getLogger(__name__)

class OperationsHistoryService:
    """
    Orchestrates grouping the operations history of accounts by day.
    It combines parsing of raw accounts, error reporting and the day grouping itself.
    """
    def __init__(
        self,
        parser: AccountParser,
        day_grouper: DayGrouper,
        error_reporter: ErrorReporter
    ):
        self._parser = parser
        self._day_grouper = day_grouper
        self._error_reporter = error_reporter

    def group_operations_by_day(
        self,
        accounts: Sequence[OperationHistory],
        count: int,
        with_sub_accounts: bool = False
    ) -> DailyOperations:
        """
        Returns the `count` most recent operation records of all accounts, grouped by day.
        """
        if count < 0:
            raise InvalidArgumentError(f"count must be a non-negative integer, got {count}")
        logger.info(f"Grouping operations by day. Accounts: {len(accounts)}, Count: {count}, With sub-accounts: {with_sub_accounts}")
        daily_operations = self._day_grouper.group(accounts, count, with_sub_accounts)
        logger.info(
            f"Finished grouping. Sections: {len(daily_operations.sections)}, "
            f"Operations: {daily_operations.total_operations}, Completed: {daily_operations.completed}"
        )
        return daily_operations

    def group_account_operations_by_day(
        self,
        account: OperationHistory,
        count: int,
        with_sub_accounts: bool = False
    ) -> DailyOperations:
        """Same as group_operations_by_day, for a single account."""
        return self.group_operations_by_day([account], count, with_sub_accounts)

    def process_raw_accounts(
        self,
        raw_accounts: list[dict[str, Any]],
        count: int,
        with_sub_accounts: bool = False
    ) -> Tuple[DailyOperations, list[ErroredAccount]]:
        """
        Parses raw accounts and groups the operations of the valid ones by day.
        Accounts that failed parsing are returned alongside, with their error reasons.
        """
        accounts = self._parser.parse_accounts(raw_accounts)
        daily_operations = self.group_operations_by_day(accounts, count, with_sub_accounts)
        errored_accounts = self._error_reporter.get_errors()
        if self._error_reporter.has_errors():
            logger.info(f"{len(errored_accounts)} of {len(raw_accounts)} accounts were rejected.")

        # Finally, clear the error reporter for the next request.
        self._error_reporter.clear()

        return daily_operations, errored_accounts


def build_operations_history_service(timezone: Optional[str] = None) -> OperationsHistoryService:
    """
    Builds a service wired with the default flattener and expander, configured from settings.
    """
    timezone = timezone or settings.DAY_BOUNDARY_TIMEZONE
    error_reporter = ErrorReporter()
    day_grouper = DayGrouper(
        flattener=AccountFlattener(),
        expander=OperationExpander(hide_none_operations=settings.HIDE_NONE_OPERATIONS),
        tz=ZoneInfo(timezone) if timezone else None
    )
    return OperationsHistoryService(
        parser=AccountParser(error_reporter=error_reporter, validate_sort_order=settings.VALIDATE_SORT_ORDER),
        day_grouper=day_grouper,
        error_reporter=error_reporter
    )


def group_operations_by_day(
    accounts: Sequence[OperationHistory],
    count: int,
    with_sub_accounts: bool = False
) -> DailyOperations:
    """
    Return a list of `count` operations of several accounts grouped by day.
    """
    return build_operations_history_service().group_operations_by_day(accounts, count, with_sub_accounts)


def group_account_operations_by_day(
    account: OperationHistory,
    count: int,
    with_sub_accounts: bool = False
) -> DailyOperations:
    """
    Return a list of `count` operations of an account grouped by day.
    """
    return group_operations_by_day([account], count, with_sub_accounts)
