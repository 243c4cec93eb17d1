"""Custom exceptions for structured text processing."""

from typing import Optional


class StructuredTextError(Exception):
    """Base exception for all structured text exceptions."""

    def __init__(self, message: str, code: Optional[str] = None):
        """Initialize exception.

        Args:
            message: Error message
            code: Optional error code
        """
        super().__init__(message)
        self.code = code


class CallerUsageError(StructuredTextError):
    """Raised when an engine operation receives a malformed argument."""

    def __init__(self, message: str = "Invalid argument"):
        """Initialize CallerUsageError."""
        super().__init__(message, "CALLER_USAGE")


class ContractViolation(StructuredTextError):
    """Raised when a processor breaks the processor contract.

    This signals a bug in the processor, never bad caller data. The call
    that detected it is aborted.
    """

    def __init__(self, message: str = "Processor contract violated"):
        """Initialize ContractViolation."""
        super().__init__(message, "CONTRACT_VIOLATION")
