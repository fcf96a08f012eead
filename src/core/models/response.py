# src/core/models/response.py

from typing import List
from pydantic import BaseModel, Field
from src.core.models.daily_operations import DailyOperationsSection

class ErroredAccount(BaseModel):
    """
    Represents an account that was rejected, along with the reason for rejection.
    """
    account_id: str = Field(..., description="The ID of the account that failed.")
    error_reason: str = Field(..., description="The reason why the account was rejected.")

class DailyOperationsResponse(BaseModel):
    """
    Represents the output response of the daily operations API.
    """
    sections: List[DailyOperationsSection] = Field(
        ...,
        description="Operation records grouped by day, most recent day first."
    )
    completed: bool = Field(
        ...,
        description="True when there is no more operation to pull from the accounts."
    )
    total_operations: int = Field(..., description="Number of records across all sections.")
    errored_accounts: List[ErroredAccount] = Field(
        default_factory=list,
        description="Accounts that failed validation and were left out of the merge, with error reasons."
    )

    class Config:
        json_schema_extra = {
            "example": {
                "sections": [
                    {
                        "day": "2023-01-11T00:00:00Z",
                        "data": [
                            {
                                "id": "op_004",
                                "hash": "0x04",
                                "account_id": "js:2:ethereum:0xabc:",
                                "type": "OUT",
                                "date": "2023-01-11T08:00:00Z",
                                "value": "0.2",
                                "fee": "0.001",
                                "senders": [],
                                "recipients": [],
                                "block_height": None,
                                "internal_operations": []
                            }
                        ]
                    }
                ],
                "completed": False,
                "total_operations": 1,
                "errored_accounts": [
                    {
                        "account_id": "broken_account",
                        "error_reason": "Validation error: operations: Field required"
                    }
                ]
            }
        }
