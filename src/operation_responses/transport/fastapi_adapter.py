"""Render response descriptors as FastAPI responses."""

from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import TYPE_CHECKING, Any, Protocol, cast

from operation_responses.mapping import ResponseDescriptor, to_response
from operation_responses.options import DEFAULT_OPTIONS, MappingOptions
from operation_responses.outcome import OperationOutcome
from operation_responses.schemas import ProblemDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from fastapi.responses import Response


class _ResponsesModuleLike(Protocol):
    """Subset of fastapi.responses module API used by this module."""

    def Response(self, *, status_code: int) -> object: ...

    def JSONResponse(
        self,
        *,
        content: object,
        status_code: int,
        media_type: str | None,
    ) -> object: ...


class _EncodersModuleLike(Protocol):
    """Subset of fastapi.encoders module API used by this module."""

    def jsonable_encoder(self, obj: object) -> object: ...


_fastapi_responses_module: ModuleType | None = None
_fastapi_encoders_module: ModuleType | None = None
try:
    _fastapi_responses_module = importlib.import_module("fastapi.responses")
    _fastapi_encoders_module = importlib.import_module("fastapi.encoders")
except ModuleNotFoundError:  # pragma: no cover
    pass

responses = cast(_ResponsesModuleLike | None, _fastapi_responses_module)
encoders = cast(_EncodersModuleLike | None, _fastapi_encoders_module)


def _require_fastapi_runtime() -> None:
    """Ensure FastAPI is importable before rendering."""
    if responses is None or encoders is None:
        raise RuntimeError(
            "fastapi is required to render responses. Install with extra: .[fastapi]"
        )


def _encode_body(body: object | None) -> object:
    if isinstance(body, ProblemDetails):
        return body.to_payload()
    return cast(_EncodersModuleLike, encoders).jsonable_encoder(body)


def render_response(descriptor: ResponseDescriptor) -> Response:
    """Render a response descriptor as a FastAPI response.

    Parameters
    ----------
    descriptor : ResponseDescriptor
        Descriptor produced by :func:`operation_responses.to_response`.

    Returns
    -------
    fastapi.responses.Response
        Empty response for no-body descriptors, otherwise a JSON response.

    Raises
    ------
    RuntimeError
        If FastAPI is not installed.
    """
    _require_fastapi_runtime()
    responses_module = cast(_ResponsesModuleLike, responses)
    logger.debug(
        "rendering response status=%d has_body=%s",
        descriptor.status_code,
        descriptor.has_body,
    )
    if not descriptor.has_body:
        return cast(
            "Response", responses_module.Response(status_code=descriptor.status_code)
        )
    return cast(
        "Response",
        responses_module.JSONResponse(
            content=_encode_body(descriptor.body),
            status_code=descriptor.status_code,
            media_type=descriptor.media_type,
        ),
    )


def to_fastapi_response(
    outcome: OperationOutcome[Any],
    options: MappingOptions = DEFAULT_OPTIONS,
) -> Response:
    """Map an outcome and render it as a FastAPI response."""
    return render_response(to_response(outcome, options))
