"""Exception hierarchy for operation-response helpers."""

from __future__ import annotations


class OperationResponseError(Exception):
    """Base error raised by operation-response helpers."""


class InvalidOutcomeStateError(OperationResponseError, RuntimeError):
    """Raised when an outcome is used in a state its operation does not allow.

    Parameters
    ----------
    operation : str
        Name of the rejected operation.
    status_code : int | None
        Status code of the offending outcome.
    """

    def __init__(self, operation: str, status_code: int | None) -> None:
        self.operation = operation
        self.status_code = status_code
        super().__init__(
            f"{operation} requires a failed outcome; "
            f"got a successful outcome with status code {status_code}"
        )
