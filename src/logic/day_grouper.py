# src/logic/day_grouper.py

import logging
from datetime import datetime, tzinfo
from typing import Optional, Sequence

from src.core.models.daily_operations import DailyOperations, DailyOperationsSection
from src.logic.account_flattener import AccountFlattener, AccountFlattenerProtocol
from src.logic.candidate_selector import CandidateSelector, OperationHistory
from src.logic.operation_expander import OperationExpander, OperationExpanderProtocol

logger = logging.getLogger(__name__)


def start_of_day(moment: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """
    Truncates a datetime to midnight of its calendar day.
    The day is the one observed in `tz`, or in the process local zone when `tz`
    is None. Naive datetimes are taken as local wall time and left naive.
    """
    if tz is not None:
        moment = moment.astimezone(tz)
    elif moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


class DayGrouper:
    """
    Pulls operations from a CandidateSelector, most recent first, and groups the
    resulting records by calendar day until `count` records have been collected.

    Every day closed before the budget is reached is truncated to fit it exactly.
    The last day returned is kept whole and may exceed `count`.
    """
    def __init__(
        self,
        flattener: Optional[AccountFlattenerProtocol] = None,
        expander: Optional[OperationExpanderProtocol] = None,
        tz: Optional[tzinfo] = None
    ):
        self._flattener = flattener or AccountFlattener()
        self._expander = expander or OperationExpander()
        self._tz = tz

    def group(
        self,
        accounts: Sequence[OperationHistory],
        count: int,
        with_sub_accounts: bool = False
    ) -> DailyOperations:
        """
        Returns at most `count` operation records grouped by day (see class docstring
        for the last-day exception), and whether every operation was consumed.
        """
        if with_sub_accounts:
            accounts = self._flattener.flatten(accounts)

        selector = CandidateSelector(accounts, self._expander.expand)
        next_candidate = selector.next_candidate()
        if next_candidate is None:
            return DailyOperations(sections=[], completed=True)

        sections: list[DailyOperationsSection] = []
        total_operations = 0
        day = start_of_day(next_candidate.date, self._tz)
        data: list = []

        while total_operations < count and next_candidate is not None:
            candidate_day = start_of_day(next_candidate.date, self._tz)
            if candidate_day < day:
                if data:
                    sliced_data = data[:count - total_operations]
                    sections.append(DailyOperationsSection(day=day, data=sliced_data))
                    total_operations += len(sliced_data)
                    logger.debug(f"DayGrouper: Closed day {day.isoformat()} with {len(sliced_data)} of {len(data)} records. Total: {total_operations}/{count}")
                day = candidate_day
                data = list(next_candidate.records)
            else:
                data.extend(next_candidate.records)
            next_candidate = selector.next_candidate()

        if data and total_operations < count:
            sections.append(DailyOperationsSection(day=day, data=data))
            logger.debug(f"DayGrouper: Added last day {day.isoformat()} with {len(data)} records.")

        return DailyOperations(sections=sections, completed=next_candidate is None)
