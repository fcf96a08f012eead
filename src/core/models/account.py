# src/core/models/account.py

from pydantic import BaseModel, Field, ConfigDict

from src.core.models.operation import Operation


class Account(BaseModel):
    """
    Represents an account and its operation history.
    Both `operations` (confirmed) and `pending_operations` are expected to be
    sorted by date, most recent first. This order is never enforced here.
    """
    id: str = Field(..., description="Unique identifier for the account")
    name: str = Field(default="", description="Display name of the account")
    currency: str = Field(default="", description="Ticker of the account currency")
    operations: list[Operation] = Field(
        default_factory=list,
        description="Confirmed operations, sorted by date descending"
    )
    pending_operations: list[Operation] = Field(
        default_factory=list,
        alias="pendingOperations",
        description="Operations broadcast but not yet confirmed, sorted by date descending"
    )
    sub_accounts: list["Account"] = Field(
        default_factory=list,
        alias="subAccounts",
        description="Child accounts (e.g. token accounts), possibly nested"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        extra='ignore'
    )


Account.model_rebuild()
