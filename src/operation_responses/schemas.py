"""Pydantic schemas for problem payloads and mapping configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from operation_responses.types import JsonValue, ValidationErrors


class ProblemDetails(BaseModel):
    """RFC 9457 problem details payload.

    Unknown members are kept as extensions and serialized next to the
    standard members.
    """

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    title: str | None = None
    status: int | None = None
    detail: str | None = None
    instance: str | None = None
    errors: dict[str, list[str]] | None = None

    @classmethod
    def for_status(
        cls,
        status: int,
        title: str,
        detail: str | None = None,
        errors: ValidationErrors | None = None,
    ) -> ProblemDetails:
        """Build a problem whose ``status`` mirrors the response status."""
        return cls(title=title, status=status, detail=detail, errors=errors)

    @property
    def extensions(self) -> dict[str, JsonValue]:
        """Return extension members that are not part of the standard set."""
        return dict(self.model_extra or {})

    def to_payload(self) -> dict[str, JsonValue]:
        """Serialize to a JSON-ready mapping.

        Standard members left as ``None`` are omitted; extension members are
        always kept, including explicit ``None`` values.
        """
        unset = {
            name for name in type(self).model_fields if getattr(self, name) is None
        }
        return self.model_dump(mode="json", exclude=unset)


class MappingOptionsConfig(BaseModel):
    """Validated overrides for outcome-to-response mapping."""

    model_config = ConfigDict(extra="forbid")

    default_success_status: int = Field(ge=1)
    default_failure_status: int = Field(ge=1)
    unknown_error_title: str
    json_media_type: str
    problem_media_type: str

    @field_validator("unknown_error_title", "json_media_type", "problem_media_type")
    @classmethod
    def _validate_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("mapping option strings cannot be empty.")
        return value
