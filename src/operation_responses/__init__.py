"""Top-level API for mapping operation outcomes to HTTP responses."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from operation_responses.errors import InvalidOutcomeStateError, OperationResponseError
from operation_responses.mapping import ResponseDescriptor, to_response
from operation_responses.options import (
    DEFAULT_OPTIONS,
    MappingOptions,
    build_mapping_options,
)
from operation_responses.outcome import (
    OperationOutcome,
    UntypedOperationOutcome,
    retype_failure,
)
from operation_responses.schemas import ProblemDetails

if TYPE_CHECKING:
    from fastapi.responses import Response

__version__ = "0.1.0"


def to_fastapi_response(
    outcome: OperationOutcome[Any],
    options: MappingOptions = DEFAULT_OPTIONS,
) -> Response:
    """Convert an outcome straight into a FastAPI response.

    Parameters
    ----------
    outcome : OperationOutcome
        Typed or untyped operation outcome.
    options : MappingOptions, default=DEFAULT_OPTIONS
        Mapping defaults.

    Returns
    -------
    fastapi.responses.Response
        Rendered response; requires the ``fastapi`` extra.
    """
    from .transport.fastapi_adapter import to_fastapi_response as _impl

    return _impl(outcome, options)


__all__ = [
    "DEFAULT_OPTIONS",
    "InvalidOutcomeStateError",
    "MappingOptions",
    "OperationOutcome",
    "OperationResponseError",
    "ProblemDetails",
    "ResponseDescriptor",
    "UntypedOperationOutcome",
    "build_mapping_options",
    "retype_failure",
    "to_fastapi_response",
    "to_response",
]
