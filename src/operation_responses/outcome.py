"""Operation outcome value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from operation_responses.errors import InvalidOutcomeStateError
from operation_responses.schemas import ProblemDetails
from operation_responses.types import ValidationErrors


@dataclass(frozen=True)
class OperationOutcome[T]:
    """Result of a business operation with an HTTP-style status code.

    Parameters
    ----------
    succeeded : bool
        Whether the operation succeeded.
    status_code : int | None, default=None
        Response status. ``None`` and ``0`` both mean "unset".
    value : T | None, default=None
        Success value; ignored when ``succeeded`` is false.
    problem : ProblemDetails | None, default=None
        Failure details; ignored when ``succeeded`` is true.
    """

    succeeded: bool
    status_code: int | None = None
    value: T | None = None
    problem: ProblemDetails | None = None

    @property
    def failed(self) -> bool:
        return not self.succeeded

    @classmethod
    def success(
        cls, value: T | None = None, status_code: int | None = None
    ) -> OperationOutcome[T]:
        """Build a successful outcome with an explicit or unset status."""
        return cls(succeeded=True, status_code=status_code, value=value)

    @classmethod
    def ok(cls, value: T) -> OperationOutcome[T]:
        return cls.success(value, 200)

    @classmethod
    def created(cls, value: T) -> OperationOutcome[T]:
        return cls.success(value, 201)

    @classmethod
    def accepted(cls, value: T | None = None) -> OperationOutcome[T]:
        return cls.success(value, 202)

    @classmethod
    def no_content(cls) -> OperationOutcome[T]:
        return cls.success(None, 204)

    @classmethod
    def fail(
        cls,
        problem: ProblemDetails | None = None,
        status_code: int | None = None,
    ) -> OperationOutcome[T]:
        """Build a failed outcome; missing details are filled in at mapping time."""
        return cls(succeeded=False, status_code=status_code, problem=problem)

    @classmethod
    def _failure(
        cls,
        status_code: int,
        title: str,
        detail: str | None = None,
        errors: ValidationErrors | None = None,
    ) -> OperationOutcome[T]:
        problem = ProblemDetails.for_status(status_code, title, detail, errors)
        return cls.fail(problem, status_code)

    @classmethod
    def bad_request(cls, title: str, detail: str | None = None) -> OperationOutcome[T]:
        return cls._failure(400, title, detail)

    @classmethod
    def unauthorized(
        cls, title: str = "Unauthorized", detail: str | None = None
    ) -> OperationOutcome[T]:
        return cls._failure(401, title, detail)

    @classmethod
    def forbidden(
        cls, title: str = "Forbidden", detail: str | None = None
    ) -> OperationOutcome[T]:
        return cls._failure(403, title, detail)

    @classmethod
    def not_found(
        cls, title: str = "Not Found", detail: str | None = None
    ) -> OperationOutcome[T]:
        return cls._failure(404, title, detail)

    @classmethod
    def conflict(cls, title: str, detail: str | None = None) -> OperationOutcome[T]:
        return cls._failure(409, title, detail)

    @classmethod
    def unprocessable(
        cls,
        title: str,
        detail: str | None = None,
        errors: ValidationErrors | None = None,
    ) -> OperationOutcome[T]:
        return cls._failure(422, title, detail, errors)

    @classmethod
    def internal_error(
        cls, title: str = "Internal Server Error", detail: str | None = None
    ) -> OperationOutcome[T]:
        return cls._failure(500, title, detail)

    def retype_failure[TOut](
        self, value_type: type[TOut] | None = None
    ) -> OperationOutcome[TOut]:
        """Return this failure as an outcome of another value type."""
        return retype_failure(self, value_type)


UntypedOperationOutcome = OperationOutcome[object]


def retype_failure[TOut](
    outcome: OperationOutcome[Any],
    value_type: type[TOut] | None = None,
) -> OperationOutcome[TOut]:
    """Carry a failed outcome over to a different success-value type.

    Parameters
    ----------
    outcome : OperationOutcome
        Failed outcome to re-type.
    value_type : type, optional
        Target value type. Only used for static typing.

    Returns
    -------
    OperationOutcome
        New failed outcome with the same status code and the same
        ``problem`` instance, and no value.

    Raises
    ------
    InvalidOutcomeStateError
        If ``outcome`` succeeded.
    """
    del value_type
    if outcome.succeeded:
        raise InvalidOutcomeStateError("retype_failure", outcome.status_code)
    return OperationOutcome(
        succeeded=False,
        status_code=outcome.status_code,
        value=None,
        problem=outcome.problem,
    )
