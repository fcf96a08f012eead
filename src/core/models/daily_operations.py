# src/core/models/daily_operations.py

from datetime import datetime
from pydantic import BaseModel, Field

from src.core.models.operation import Operation


class DailyOperationsSection(BaseModel):
    """Operations that happened on one calendar day, most recent first."""
    day: datetime = Field(..., description="The day, truncated to midnight")
    data: list[Operation] = Field(default_factory=list, description="Operation records of that day")


class DailyOperations(BaseModel):
    """
    Operations grouped by day, most recent day first.
    `completed` tells whether there is no more operation to pull.
    """
    sections: list[DailyOperationsSection] = Field(default_factory=list)
    completed: bool = Field(..., description="True when every operation of every account was consumed")

    @property
    def total_operations(self) -> int:
        """Number of records across all sections."""
        return sum(len(section.data) for section in self.sections)
