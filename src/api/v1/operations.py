# src/api/v1/operations.py

from fastapi import APIRouter, Depends
from src.core.models.daily_operations import DailyOperations
from src.core.models.request import GroupOperationsRequest, GroupAccountOperationsRequest
from src.core.models.response import DailyOperationsResponse, ErroredAccount
from src.services.operations_history_service import OperationsHistoryService, build_operations_history_service

router = APIRouter()

# Dependency for OperationsHistoryService and its components
def get_operations_history_service() -> OperationsHistoryService:
    """
    Provides a new instance of OperationsHistoryService per request,
    so that no error reporter state is shared between requests.
    """
    return build_operations_history_service()


def _to_response(daily_operations: DailyOperations, errored: list[ErroredAccount]) -> DailyOperationsResponse:
    return DailyOperationsResponse(
        sections=daily_operations.sections,
        completed=daily_operations.completed,
        total_operations=daily_operations.total_operations,
        errored_accounts=errored
    )


@router.post(
    "/operations/daily",
    response_model=DailyOperationsResponse,
    summary="Group the operations of several accounts by day",
    description="Merges the confirmed and pending operations of the given accounts, most recent first, "
                "drops pending operations that already landed, and returns up to `count` records "
                "grouped by day. The last day returned is never cut and may exceed `count`."
)
async def group_operations_endpoint(
    request: GroupOperationsRequest,
    service: OperationsHistoryService = Depends(get_operations_history_service)
) -> DailyOperationsResponse:
    """
    API endpoint to group the operations of several accounts by day.
    """
    daily_operations, errored = service.process_raw_accounts(
        raw_accounts=request.accounts,
        count=request.count,
        with_sub_accounts=request.with_sub_accounts
    )
    return _to_response(daily_operations, errored)


@router.post(
    "/operations/daily/account",
    response_model=DailyOperationsResponse,
    summary="Group the operations of a single account by day"
)
async def group_account_operations_endpoint(
    request: GroupAccountOperationsRequest,
    service: OperationsHistoryService = Depends(get_operations_history_service)
) -> DailyOperationsResponse:
    """
    API endpoint to group the operations of one account by day.
    """
    daily_operations, errored = service.process_raw_accounts(
        raw_accounts=[request.account],
        count=request.count,
        with_sub_accounts=request.with_sub_accounts
    )
    return _to_response(daily_operations, errored)
