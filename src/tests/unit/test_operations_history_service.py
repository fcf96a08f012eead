# src/tests/unit/test_operations_history_service.py

import pytest
from datetime import datetime, timezone

from src.core.exceptions import InvalidArgumentError
from src.core.models.account import Account
from src.core.models.operation import Operation
from src.core.enums.operation_type import OperationType
from src.services.operations_history_service import (
    build_operations_history_service,
    group_operations_by_day,
    group_account_operations_by_day,
)


def make_op(op_hash: str, when: datetime, account_id: str = "A") -> Operation:
    return Operation(id=f"{account_id}-{op_hash}", hash=op_hash, account_id=account_id, type=OperationType.IN, date=when)

def at(day: int, hour: int) -> datetime:
    return datetime(2023, 1, day, hour, tzinfo=timezone.utc)

def raw_account(account_id: str, hours: list[int]) -> dict:
    return {
        "id": account_id,
        "operations": [
            {"id": f"{account_id}-{h}", "hash": f"0x{h}", "accountId": account_id, "type": "IN",
             "date": at(10, h).isoformat()}
            for h in hours
        ]
    }

@pytest.fixture
def service():
    """Provides a service built with the default components."""
    return build_operations_history_service()

@pytest.fixture
def account():
    return Account(
        id="A",
        operations=[make_op("a3", at(12, 9)), make_op("a2", at(11, 9)), make_op("a1", at(10, 9))],
        pending_operations=[make_op("p1", at(12, 20))],
        sub_accounts=[Account(id="T", operations=[make_op("t1", at(11, 20), "T")])]
    )


def test_negative_count_raises(service, account):
    """Test a negative count is rejected."""
    with pytest.raises(InvalidArgumentError):
        service.group_operations_by_day([account], -1)

def test_invalid_argument_is_value_error():
    """Test InvalidArgumentError can be caught as a ValueError."""
    with pytest.raises(ValueError):
        group_operations_by_day([], -5)

def test_empty_accounts(service):
    """Test no account gives an empty, completed result."""
    result = service.group_operations_by_day([], 10)
    assert result.sections == []
    assert result.completed is True

@pytest.mark.parametrize("count", [0, 1, 2, 3, 10])
@pytest.mark.parametrize("with_sub_accounts", [False, True])
def test_single_account_matches_list_of_one(account, count, with_sub_accounts):
    """Test the single-account entry point equals grouping a one-element list."""
    single = group_account_operations_by_day(account, count, with_sub_accounts)
    multiple = group_operations_by_day([account], count, with_sub_accounts)
    assert single == multiple

def test_service_single_account_method(service, account):
    """Test the service's single-account method groups the account with its sub-accounts."""
    result = service.group_account_operations_by_day(account, 10, with_sub_accounts=True)

    assert [[op.id for op in s.data] for s in result.sections] == [
        ["A-p1", "A-a3"],
        ["T-t1", "A-a2"],
        ["A-a1"],
    ]
    assert result.completed is True

def test_process_raw_accounts(service):
    """Test raw accounts are parsed, grouped, and rejected accounts are returned."""
    raw_accounts = [
        raw_account("A", [12, 8]),
        {"id": "broken", "operations": "not a list"},
        raw_account("B", [10]),
    ]
    daily_operations, errored = service.process_raw_accounts(raw_accounts, count=10)

    assert [[op.id for op in s.data] for s in daily_operations.sections] == [["A-12", "B-10", "A-8"]]
    assert daily_operations.completed is True
    assert [e.account_id for e in errored] == ["broken"]

def test_process_raw_accounts_clears_errors_between_calls(service):
    """Test errors of one call are not returned again by the next one."""
    _, first_errored = service.process_raw_accounts(
        [{"id": "broken", "operations": "not a list"}, raw_account("A", [1])], count=10
    )
    assert [e.account_id for e in first_errored] == ["broken"]
    _, errored = service.process_raw_accounts([raw_account("A", [1])], count=10)
    assert errored == []

def test_build_service_with_timezone():
    """Test the day boundary follows the timezone given to the builder."""
    account = Account(id="A", operations=[make_op("a2", at(10, 16)), make_op("a1", at(10, 14))])
    result = build_operations_history_service(timezone="Asia/Tokyo").group_operations_by_day([account], 10)
    assert len(result.sections) == 2

def test_settings_timezone_used(monkeypatch):
    """Test DAY_BOUNDARY_TIMEZONE from settings is picked up when no timezone is given."""
    from src.core.config.settings import settings
    monkeypatch.setattr(settings, "DAY_BOUNDARY_TIMEZONE", "Asia/Tokyo")
    account = Account(id="A", operations=[make_op("a2", at(10, 16)), make_op("a1", at(10, 14))])

    assert len(group_operations_by_day([account], 10).sections) == 2
