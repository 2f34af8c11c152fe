"""
Response Normalizer / Error Translator

Every invocation ends here: a successful HTTP response becomes a text
result, and every failure becomes a text result with isError set.
"""

from __future__ import annotations

import json

import httpx

from .config import API_PASS_ENV, API_USER_ENV, CREDENTIALS_HELP_URL
from .errors import (
    ArgumentValidationError,
    BindingError,
    GatewayFailure,
    TransportFailure,
    UpstreamFailure,
)
from .models import ToolCallResult

INVALID_CREDENTIALS_MESSAGE = (
    f"Invalid API credentials. Please check your {API_USER_ENV} and {API_PASS_ENV} "
    "environment variables. You can create your credentials on the Public API "
    f"credentials management page: {CREDENTIALS_HELP_URL}."
)

_UNAUTHORIZED_SIGNATURE = "HTTP 401 Unauthorized"


def render_response(response: httpx.Response) -> ToolCallResult:
    """Render a 2xx response: pretty JSON with the status, or raw text."""
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type and response.content:
        try:
            data = response.json()
        except json.JSONDecodeError:
            # Declared JSON that isn't: fall through to the raw text.
            pass
        else:
            return ToolCallResult.success(
                f"API Response (Status: {response.status_code}):\n{json.dumps(data, indent=2)}"
            )

    text = response.text
    if not text:
        text = f"(Status: {response.status_code} - No body content)"
    return ToolCallResult.success(text)


def describe_failure(error: BaseException) -> str:
    """The caller-facing message for a failed invocation."""
    match error:
        case UpstreamFailure() if error.is_unauthorized:
            return INVALID_CREDENTIALS_MESSAGE
        case ArgumentValidationError() | BindingError() | UpstreamFailure():
            return str(error)
        case TransportFailure() if _UNAUTHORIZED_SIGNATURE in str(error):
            return INVALID_CREDENTIALS_MESSAGE
        case GatewayFailure():
            return str(error)
    return f"Unexpected error: {error}"


def render_failure(error: BaseException) -> ToolCallResult:
    return ToolCallResult.failure(describe_failure(error))
