# =============================================================================
# agentweb/models.py  -  Data Models (the "nouns" of the gateway)
# =============================================================================
#
# Three families of models live here (dataclasses, plus one pydantic model
# where argument types have to be checked):
#
#   1. ToolDescriptor / ToolResult
#      What the gateway advertises and what every tool call returns.
#
#   2. SearchQuery / BusinessLookup
#      One explicit parameter struct per tool that takes arguments.  The raw
#      argument mapping from the MCP client is turned into one of these
#      BEFORE any URL is built, so request construction never sees an
#      untyped bag of keys.
#
#   3. ApiSuccess / ApiFailure
#      The two outcomes of an HTTP round trip.  The client returns one of
#      them instead of raising, and the dispatcher branches on the type.
#
# The API payload itself has no model: AgentWeb owns that schema and we pass
# the JSON through untouched.
# =============================================================================

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from agentweb.errors import InvalidArguments


# -----------------------------------------------------------------------------
# ToolDescriptor - static tool metadata advertised to the MCP client
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and JSON Schema of one tool."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}})

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))


# -----------------------------------------------------------------------------
# ToolResult - the envelope for one tool call
# -----------------------------------------------------------------------------
# Always exactly ONE text block.  Errors carry the "Error: " prefix and the
# is_error flag so the host can tell a failed tool from a failed protocol.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResult:
    """Single text content block plus an error flag."""

    text: str
    is_error: bool = False

    @classmethod
    def from_payload(cls, payload: Any) -> "ToolResult":
        return cls(text=json.dumps(payload, indent=2, ensure_ascii=False))

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=f"Error: {message}", is_error=True)


# -----------------------------------------------------------------------------
# Per-tool parameter structs
# -----------------------------------------------------------------------------
class SearchQuery(BaseModel):
    """Filters for /v1/search.  Every field is optional.

    Types are checked (a list for `q` or "abc" for `lat` is rejected) but
    values are not bounded: whether lat/lng need a radius_km, and whether
    limit fits under the server's max of 50, is for the API to decide.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    q: str | None = None
    category: str | None = None
    city: str | None = None
    country: str | None = None
    lat: float | None = None
    lng: float | None = None
    radius_km: float | None = None
    limit: int | None = None
    offset: int | None = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any] | None) -> "SearchQuery":
        """Validate the recognised keys; anything else is dropped."""
        try:
            return cls.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise InvalidArguments(f"Invalid search arguments: {problems}") from None

    def ignored_keys(self, arguments: Mapping[str, Any] | None) -> list[str]:
        return sorted(set(arguments or {}) - set(self.field_names()))

    def to_params(self) -> dict[str, Any]:
        """Non-null fields in declaration order."""
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class BusinessLookup:
    """Arguments for /v1/business/{id}."""

    id: str

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any] | None) -> "BusinessLookup":
        business_id = (arguments or {}).get("id")
        if not business_id:
            raise InvalidArguments("Business ID is required")
        if not isinstance(business_id, (str, int)) or isinstance(business_id, bool):
            raise InvalidArguments("Business ID must be a string")
        return cls(id=str(business_id))


# -----------------------------------------------------------------------------
# HTTP outcomes
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ApiSuccess:
    """Parsed JSON body of a 2xx response."""

    data: Any


@dataclass(frozen=True)
class ApiFailure:
    """Anything that kept us from getting a JSON body: HTTP status, network, decoding."""

    message: str
    status_code: int | None = None


ApiResponse = ApiSuccess | ApiFailure
