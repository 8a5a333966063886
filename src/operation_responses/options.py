"""Typed option objects for outcome-to-response mapping."""

from __future__ import annotations

from dataclasses import dataclass

from operation_responses.schemas import MappingOptionsConfig


@dataclass(frozen=True)
class MappingOptions:
    """Defaults applied when an outcome leaves a detail unset."""

    default_success_status: int = 200
    default_failure_status: int = 500
    unknown_error_title: str = "Unknown error"
    json_media_type: str = "application/json"
    problem_media_type: str = "application/problem+json"


DEFAULT_OPTIONS = MappingOptions()


def build_mapping_options(
    *,
    default_success_status: int = DEFAULT_OPTIONS.default_success_status,
    default_failure_status: int = DEFAULT_OPTIONS.default_failure_status,
    unknown_error_title: str = DEFAULT_OPTIONS.unknown_error_title,
    json_media_type: str = DEFAULT_OPTIONS.json_media_type,
    problem_media_type: str = DEFAULT_OPTIONS.problem_media_type,
) -> MappingOptions:
    """Validate overrides and build typed mapping options.

    Omitted arguments keep the values of ``DEFAULT_OPTIONS``.

    Raises
    ------
    pydantic.ValidationError
        If a status code is not positive or a string option is blank.
    """
    config = MappingOptionsConfig(
        default_success_status=default_success_status,
        default_failure_status=default_failure_status,
        unknown_error_title=unknown_error_title,
        json_media_type=json_media_type,
        problem_media_type=problem_media_type,
    )
    return MappingOptions(**config.model_dump())
