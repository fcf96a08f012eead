# src/core/exceptions.py

class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside of its documented domain."""
