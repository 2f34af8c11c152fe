"""
Endpoint definitions for the ConfigCat MCP server.

This module contains:
- Core types: HttpMethod, ParameterLocation, ParameterBinding, EndpointDescriptor
- Aggregated endpoint lists imported from domain modules

Domain-specific endpoints are isolated in the domains/ package.
To add a new domain: create domains/newdomain.py and import here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .models import Tool
from .schema import ArgumentSchema, compile_schema

PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")

# Arguments under this name are sent as the JSON request body.
REQUEST_BODY_FIELD = "requestBody"


class HttpMethod(str, Enum):
    """HTTP methods supported by the adapter."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class ParameterLocation(str, Enum):
    """Where a bound argument lands in the outgoing request."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"


@dataclass(frozen=True)
class ParameterBinding:
    name: str
    location: ParameterLocation


def path_param(name: str) -> ParameterBinding:
    return ParameterBinding(name, ParameterLocation.PATH)


def query_param(name: str) -> ParameterBinding:
    return ParameterBinding(name, ParameterLocation.QUERY)


def header_param(name: str) -> ParameterBinding:
    return ParameterBinding(name, ParameterLocation.HEADER)


@dataclass(frozen=True)
class EndpointDescriptor:
    """
    Definition of a ConfigCat API operation to expose as an MCP tool.

    This maps REST semantics to MCP tool semantics:
    - name: tool name, unique within a registry
    - description: human-readable description for LLM agents
    - input_schema: a pydantic model class or a JSON-Schema dictionary;
      the request body, if any, lives under the ``requestBody`` property
    - method: HTTP method
    - path_template: URL path, may contain {param} placeholders
    - bindings: where each named argument goes (path, query or header)

    The schema is compiled once when the descriptor is created.
    """

    name: str
    description: str
    input_schema: Any
    method: HttpMethod
    path_template: str
    bindings: tuple[ParameterBinding, ...] = ()
    schema: ArgumentSchema = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bindings", tuple(self.bindings))
        object.__setattr__(self, "schema", compile_schema(self.input_schema))

    def placeholders(self) -> list[str]:
        """Placeholder names in the path template, in order of appearance."""
        return PLACEHOLDER_RE.findall(self.path_template)

    def bindings_at(self, location: ParameterLocation) -> list[ParameterBinding]:
        return [b for b in self.bindings if b.location == location]

    def to_mcp_tool(self) -> Tool:
        """Convert this descriptor to an MCP Tool."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.schema.json_schema(),
        )


# -----------------------------------------------------------------------------
# Domain Endpoints (imported from isolated domain modules)
# -----------------------------------------------------------------------------

from .domains.configcat import CONFIGCAT_ENDPOINTS  # noqa: E402


# -----------------------------------------------------------------------------
# Combined Endpoints
# -----------------------------------------------------------------------------

DEFAULT_ENDPOINTS: list[EndpointDescriptor] = list(CONFIGCAT_ENDPOINTS)
