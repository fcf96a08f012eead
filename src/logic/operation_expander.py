# src/logic/operation_expander.py

from typing import Protocol

from src.core.models.operation import Operation
from src.core.enums.operation_type import OperationType


class OperationExpanderProtocol(Protocol):
    """
    Protocol (interface) for turning one operation into the records shown to the user.
    Records are grouped at the date of the operation they were expanded from.
    """
    def expand(self, operation: Operation) -> list[Operation]:
        ...


class OperationExpander:
    """
    Expands an operation into itself followed by its internal operations.
    Operations of type NONE only exist to carry internal operations and are
    dropped unless `hide_none_operations` is False.
    """
    def __init__(self, hide_none_operations: bool = True):
        self._hide_none_operations = hide_none_operations

    def expand(self, operation: Operation) -> list[Operation]:
        records: list[Operation] = []
        if not (self._hide_none_operations and operation.type == OperationType.NONE):
            records.append(operation)
        records.extend(operation.internal_operations)
        return records
