# src/core/models/operation.py

from decimal import Decimal
from typing import Optional
from pydantic import AwareDatetime, BaseModel, Field, condecimal, ConfigDict

from src.core.enums.operation_type import OperationType


class Operation(BaseModel):
    """
    Represents a single operation of an account, confirmed or pending.
    An operation may carry internal operations (e.g. contract-internal transfers)
    which are exposed to the user as separate records.
    """
    id: str = Field(..., description="Unique identifier for the operation")
    hash: str = Field(..., description="Transaction hash, identifies the operation within its account")
    account_id: str = Field(..., alias="accountId", description="Identifier of the account owning the operation")
    type: OperationType = Field(..., description="Type of operation (e.g., IN, OUT, FEES)")
    date: AwareDatetime = Field(..., description="Point in time the operation occurred (ISO format, with timezone)")
    value: condecimal(ge=0) = Field(default=Decimal(0), description="Amount moved by the operation")
    fee: condecimal(ge=0) = Field(default=Decimal(0), description="Network fee paid for the operation")
    senders: list[str] = Field(default_factory=list, description="Sending addresses")
    recipients: list[str] = Field(default_factory=list, description="Receiving addresses")
    block_height: Optional[int] = Field(None, alias="blockHeight", description="Block height, None while pending")
    internal_operations: list["Operation"] = Field(
        default_factory=list,
        alias="internalOperations",
        description="Operations nested inside this one, emitted after it"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        extra='ignore'
    )


Operation.model_rebuild()
