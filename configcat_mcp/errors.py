"""
Gateway Failure Types

Canonical failure taxonomy for the tool invocation pipeline.
Every stage raises one of these; the adapter boundary converts them
into ToolCallResult values, so none of them reach the caller.
"""

from __future__ import annotations

import json
from dataclasses import dataclass


class GatewayFailure(Exception):
    """Base class for all gateway failures."""

    failure_category: str = "unknown"

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ContractViolation(GatewayFailure):
    """The request violates MCP protocol requirements or internal invariants."""

    failure_category = "contract_violation"


class UnknownToolError(ContractViolation):
    """The requested tool name is not present in the registry."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool requested: {tool_name}")
        self.tool_name = tool_name


@dataclass(frozen=True)
class Violation:
    """One violated constraint: where, what kind, and a human description."""

    path: str
    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.path} ({self.kind}): {self.message}"


class ArgumentValidationError(GatewayFailure):
    """
    Caller-supplied arguments do not conform to the tool's input schema.

    Recovered locally: surfaced as a field-level error result.
    """

    failure_category = "validation_failure"

    def __init__(self, tool_name: str, violations: list[Violation] | tuple[Violation, ...]) -> None:
        self.tool_name = tool_name
        self.violations = tuple(violations)
        details = ", ".join(str(v) for v in self.violations)
        super().__init__(f"Invalid arguments for tool '{tool_name}': {details}")


class BindingError(GatewayFailure):
    """A path placeholder is still unresolved after binding."""

    failure_category = "binding_failure"

    def __init__(self, template: str, resolved: str) -> None:
        super().__init__(
            f"Failed to resolve path parameters: {resolved} (template: {template})"
        )
        self.template = template
        self.resolved = resolved


class UpstreamFailure(GatewayFailure):
    """
    The ConfigCat API answered with a non-2xx status.

    The message bundles status, reason, URL, the response body and the
    rate-limit headers so the caller sees everything in one line.
    """

    failure_category = "upstream_failure"

    def __init__(
        self,
        *,
        status_code: int,
        reason: str,
        url: str,
        body: str = "",
        rate_limit: dict[str, str | None] | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        self.body = body
        self.rate_limit = rate_limit or {"remaining": None, "reset": None}
        super().__init__(
            f"HTTP {status_code} {reason} for {url} - {body} - "
            f"rate: {json.dumps(self.rate_limit)}"
        )

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401


class TransportFailure(GatewayFailure):
    """Communication with the ConfigCat API failed at the transport layer."""

    failure_category = "transport_failure"


class ConfigurationError(GatewayFailure):
    """
    The system is misconfigured and cannot operate correctly.

    Raised at startup: missing credentials, descriptor tables whose path
    placeholders and bindings disagree, or duplicate tool names.
    """

    failure_category = "configuration_error"
