"""Unit tests for the top-level package API."""

from __future__ import annotations

import sys
import types

import pytest

import operation_responses


def test_public_exports_resolve() -> None:
    """Expose every name listed in ``__all__``."""
    for name in operation_responses.__all__:
        assert hasattr(operation_responses, name)
    assert operation_responses.__version__ == "0.1.0"


def test_top_level_examples() -> None:
    """Map the two canonical examples through the package root."""
    ok = operation_responses.to_response(
        operation_responses.OperationOutcome(succeeded=True, status_code=0, value="hi")
    )
    missing = operation_responses.to_response(
        operation_responses.OperationOutcome(succeeded=False, status_code=404)
    )

    assert (ok.body, ok.status_code) == ("hi", 200)
    assert missing.status_code == 404
    assert isinstance(missing.body, operation_responses.ProblemDetails)
    assert missing.body.to_payload() == {"title": "Unknown error", "status": 404}


def test_top_level_fastapi_wrapper_forwards(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Forward the FastAPI wrapper to the transport adapter implementation."""
    called: dict[str, object] = {}

    def fake_impl(outcome: object, options: object) -> str:
        called["outcome"] = outcome
        called["options"] = options
        return "response"

    fake_module = types.SimpleNamespace(to_fastapi_response=fake_impl)
    monkeypatch.setitem(
        sys.modules,
        "operation_responses.transport.fastapi_adapter",
        fake_module,
    )
    outcome = operation_responses.OperationOutcome.ok(1)

    out = operation_responses.to_fastapi_response(outcome)

    assert out == "response"
    assert called["outcome"] is outcome
    assert called["options"] is operation_responses.DEFAULT_OPTIONS
