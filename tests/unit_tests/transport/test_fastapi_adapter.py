"""Unit tests for rendering response descriptors as FastAPI responses."""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from operation_responses.mapping import ResponseDescriptor
from operation_responses.outcome import OperationOutcome
from operation_responses.schemas import ProblemDetails

pytest.importorskip("fastapi")

from operation_responses.transport import fastapi_adapter  # noqa: E402


@dataclass(frozen=True)
class _Item:
    id: int
    name: str


def test_render_empty_descriptor_has_no_body() -> None:
    """Render no-body descriptors as empty responses."""
    response = fastapi_adapter.render_response(ResponseDescriptor.empty(204))

    assert response.status_code == 204
    assert response.body == b""


def test_render_value_body_as_json() -> None:
    """Encode dataclass values through the FastAPI JSON encoder."""
    descriptor = ResponseDescriptor.with_body(
        _Item(id=1, name="book"), 201, "application/json"
    )

    response = fastapi_adapter.render_response(descriptor)

    assert response.status_code == 201
    assert response.media_type == "application/json"
    assert json.loads(response.body) == {"id": 1, "name": "book"}


def test_render_problem_body_as_problem_json() -> None:
    """Encode problems without unset members using the problem media type."""
    problem = ProblemDetails(title="Not Found", status=404, trace_id="abc")
    descriptor = ResponseDescriptor.with_body(problem, 404, "application/problem+json")

    response = fastapi_adapter.render_response(descriptor)

    assert response.status_code == 404
    assert response.headers["content-type"] == "application/problem+json"
    assert json.loads(response.body) == {
        "title": "Not Found",
        "status": 404,
        "trace_id": "abc",
    }


def test_to_fastapi_response_maps_then_renders() -> None:
    """Map a failed outcome and render the synthesized problem."""
    response = fastapi_adapter.to_fastapi_response(
        OperationOutcome(succeeded=False, status_code=0)
    )

    assert response.status_code == 500
    assert json.loads(response.body) == {"title": "Unknown error", "status": 500}


def test_render_requires_fastapi(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise a helpful error when FastAPI is unavailable."""
    monkeypatch.setattr(fastapi_adapter, "responses", None)

    with pytest.raises(RuntimeError, match=r"\.\[fastapi\]"):
        fastapi_adapter.render_response(ResponseDescriptor.empty(204))
