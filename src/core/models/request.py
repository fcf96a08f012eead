# src/core/models/request.py

import logging
from pydantic import BaseModel, Field, ConfigDict

from src.core.config.settings import settings

logger = logging.getLogger(__name__)

_EXAMPLE_ACCOUNT = {
    "id": "js:2:ethereum:0xabc:",
    "name": "Ethereum 1",
    "currency": "ETH",
    "operations": [
        {
            "id": "op_003",
            "hash": "0x03",
            "accountId": "js:2:ethereum:0xabc:",
            "type": "OUT",
            "date": "2023-01-10T14:30:00Z",
            "value": "0.5",
            "fee": "0.001",
            "internalOperations": [
                {
                    "id": "op_003_i0",
                    "hash": "0x03",
                    "accountId": "js:2:ethereum:0xabc:",
                    "type": "IN",
                    "date": "2023-01-10T14:30:00Z",
                    "value": "0.1"
                }
            ]
        },
        {
            "id": "op_001",
            "hash": "0x01",
            "accountId": "js:2:ethereum:0xabc:",
            "type": "IN",
            "date": "2023-01-08T09:00:00Z",
            "value": "1.2"
        }
    ],
    "pendingOperations": [
        {
            "id": "op_004",
            "hash": "0x04",
            "accountId": "js:2:ethereum:0xabc:",
            "type": "OUT",
            "date": "2023-01-11T08:00:00Z",
            "value": "0.2",
            "fee": "0.001"
        }
    ],
    "subAccounts": []
}


class GroupOperationsRequest(BaseModel):
    """
    Represents the input payload for grouping the operations of several accounts by day.
    """
    accounts: list[dict] = Field(
        default_factory=list,
        description="Accounts (raw dictionaries) whose operations are merged, in tie-break order."
    )
    count: int = Field(
        default_factory=lambda: settings.DEFAULT_OPERATIONS_COUNT,
        ge=0,
        description="Maximum number of operation records to return (the last day may overshoot it)."
    )
    with_sub_accounts: bool = Field(
        default=False,
        alias="withSubAccounts",
        description="Whether sub-accounts are merged along with their parent account."
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra = {
            "example": {
                "accounts": [_EXAMPLE_ACCOUNT],
                "count": 20,
                "withSubAccounts": True
            }
        },
        extra='ignore'
    )


class GroupAccountOperationsRequest(BaseModel):
    """
    Single-account variant of GroupOperationsRequest.
    """
    account: dict = Field(..., description="The account (raw dictionary) whose operations are grouped.")
    count: int = Field(
        default_factory=lambda: settings.DEFAULT_OPERATIONS_COUNT,
        ge=0,
        description="Maximum number of operation records to return (the last day may overshoot it)."
    )
    with_sub_accounts: bool = Field(default=False, alias="withSubAccounts")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra = {
            "example": {
                "account": _EXAMPLE_ACCOUNT,
                "count": 20,
                "withSubAccounts": False
            }
        },
        extra='ignore'
    )
