# src/core/enums/operation_type.py

from enum import Enum

class OperationType(str, Enum):
    """
    Defines the supported types of account operations.
    Inheriting from 'str' ensures that the enum values are strings,
    making them directly usable and comparable with string inputs.
    """
    IN = "IN"
    OUT = "OUT"
    FEES = "FEES"
    REWARD = "REWARD"
    DELEGATE = "DELEGATE"
    UNDELEGATE = "UNDELEGATE"
    OPT_IN = "OPT_IN"
    OPT_OUT = "OPT_OUT"
    NONE = "NONE" # Placeholder parent that only carries internal operations

    @classmethod
    def list(cls):
        """Returns a list of all operation type values."""
        return list(map(lambda c: c.value, cls))

    @classmethod
    def is_valid(cls, operation_type_str: str) -> bool:
        """Checks if a given string is a valid operation type."""
        return operation_type_str in cls.list()
