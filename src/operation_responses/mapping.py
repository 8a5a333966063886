"""Framework-independent mapping from operation outcomes to responses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from operation_responses.options import DEFAULT_OPTIONS, MappingOptions
from operation_responses.outcome import OperationOutcome
from operation_responses.schemas import ProblemDetails

logger = logging.getLogger(__name__)

NO_CONTENT = 204


@dataclass(frozen=True)
class ResponseDescriptor:
    """HTTP response shape handed to a response-writing layer.

    Parameters
    ----------
    status_code : int
        Response status code. Never ``0``.
    body : object | None, default=None
        Payload to serialize; a success value or a ``ProblemDetails``.
    has_body : bool, default=False
        Whether the response carries a body. A ``None`` value can still be
        a body (serialized as JSON ``null``).
    media_type : str | None, default=None
        Content type of the body.
    """

    status_code: int
    body: object | None = None
    has_body: bool = False
    media_type: str | None = None

    @classmethod
    def empty(cls, status_code: int) -> ResponseDescriptor:
        return cls(status_code=status_code)

    @classmethod
    def with_body(
        cls,
        body: object | None,
        status_code: int,
        media_type: str | None = None,
    ) -> ResponseDescriptor:
        return cls(
            status_code=status_code,
            body=body,
            has_body=True,
            media_type=media_type,
        )

    @property
    def is_problem(self) -> bool:
        return isinstance(self.body, ProblemDetails)


def _resolve_status(status_code: int | None, fallback: int) -> int:
    """Substitute ``fallback`` for an unset (``None`` or ``0``) status code."""
    if not status_code:
        return fallback
    return status_code


def to_response(
    outcome: OperationOutcome[Any],
    options: MappingOptions = DEFAULT_OPTIONS,
) -> ResponseDescriptor:
    """Convert an operation outcome into a response descriptor.

    Parameters
    ----------
    outcome : OperationOutcome
        Typed or untyped outcome to convert. It is not mutated.
    options : MappingOptions, default=DEFAULT_OPTIONS
        Defaults for unset status codes and missing problem details.

    Returns
    -------
    ResponseDescriptor
        ``204`` without a body for no-content successes; otherwise a body
        response carrying the value or the resolved problem.
    """
    if outcome.succeeded:
        if outcome.status_code == NO_CONTENT:
            return ResponseDescriptor.empty(NO_CONTENT)
        return ResponseDescriptor.with_body(
            outcome.value,
            _resolve_status(outcome.status_code, options.default_success_status),
            options.json_media_type,
        )

    problem = outcome.problem
    if problem is None:
        status = _resolve_status(outcome.status_code, options.default_failure_status)
        logger.debug("failed outcome has no problem details; using status %d", status)
        problem = ProblemDetails(title=options.unknown_error_title, status=status)

    # The problem's own status takes precedence over the outcome's.
    status = _resolve_status(
        problem.status,
        _resolve_status(outcome.status_code, options.default_failure_status),
    )
    return ResponseDescriptor.with_body(problem, status, options.problem_media_type)
