"""Shared type aliases for outcome and response modules."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
type ValidationErrors = dict[str, list[str]]
