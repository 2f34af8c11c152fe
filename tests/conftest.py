"""
Shared test fixtures for the ConfigCat MCP tests.

Provides a mock transport, small descriptor tables and adapters wired
to the mock so no test ever reaches the real API.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from configcat_mcp.adapter import ConfigCatToolAdapter
from configcat_mcp.client import ConfigCatHttpClient
from configcat_mcp.config import Credentials
from configcat_mcp.endpoints import (
    EndpointDescriptor,
    HttpMethod,
    header_param,
    path_param,
    query_param,
)
from configcat_mcp.registry import EndpointRegistry

BASE_URL = "https://api.example.com"

PRODUCT_ID = "08d86d63-2726-47cd-8bfc-59608ecb91e2"
CONFIG_ID = "08d86d63-2731-4b8b-823a-56ddda9da038"


# -----------------------------------------------------------------------------
# Mock HTTP Transport
# -----------------------------------------------------------------------------


class MockTransport(httpx.AsyncBaseTransport):
    """
    Mock transport that returns predefined responses.

    Each response is a (status_code, payload) tuple, optionally followed by
    a headers dict. Dict and list payloads are sent as JSON; strings are
    sent verbatim as text/plain; None sends an empty body.
    """

    def __init__(self, responses: dict[str, tuple[Any, ...]] | None = None):
        self.responses = responses or {}
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        # Match by full URL first (for absolute fetches), then by path
        key = str(request.url).split("?")[0]
        if key not in self.responses:
            key = request.url.path
        if key not in self.responses:
            return httpx.Response(404, json={"error": "Not found"})

        status, payload, *rest = self.responses[key]
        headers = rest[0] if rest else {}
        if payload is None:
            return httpx.Response(status, headers=headers)
        if isinstance(payload, str):
            return httpx.Response(
                status, text=payload, headers={"content-type": "text/plain", **headers}
            )
        return httpx.Response(status, json=payload, headers=headers)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


class FailingTransport(httpx.AsyncBaseTransport):
    """Transport whose every request fails before a response arrives."""

    def __init__(self, message: str = "connection refused"):
        self.message = message

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(self.message, request=request)


# -----------------------------------------------------------------------------
# Test Data
# -----------------------------------------------------------------------------


MOCK_PRODUCT = {
    "productId": PRODUCT_ID,
    "name": "My Product",
    "description": "Demo product",
    "order": 0,
}

MOCK_CONFIG = {
    "configId": CONFIG_ID,
    "name": "Main Config",
    "description": None,
    "order": 0,
}


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="api-user", password="api-pass")


@pytest.fixture
def mock_transport() -> MockTransport:
    """Create a mock transport with common responses."""
    return MockTransport({
        "/v1/products": (200, [MOCK_PRODUCT]),
        f"/v1/products/{PRODUCT_ID}": (200, MOCK_PRODUCT),
        f"/v1/configs/{CONFIG_ID}": (200, MOCK_CONFIG),
        "/v1/products/abc-123": (200, {"productId": "abc-123"}),
        "/v1/products/missing": (404, "Product not found", {
            "X-Rate-Limit-Remaining": "42",
            "X-Rate-Limit-Reset": "1700000000",
        }),
        "/v1/products/locked": (401, "Unauthorized"),
        "/v1/settings/42": (204, None),
    })


@pytest.fixture
def sample_endpoints() -> list[EndpointDescriptor]:
    """A small descriptor table covering every binding location."""
    return [
        EndpointDescriptor(
            name="list-products",
            description="List products",
            input_schema={"type": "object", "properties": {}},
            method=HttpMethod.GET,
            path_template="/v1/products",
        ),
        EndpointDescriptor(
            name="get-product",
            description="Get a product by id",
            input_schema={
                "type": "object",
                "properties": {"productId": {"type": "string"}},
                "required": ["productId"],
            },
            method=HttpMethod.GET,
            path_template="/v1/products/{productId}",
            bindings=(path_param("productId"),),
        ),
        EndpointDescriptor(
            name="update-config",
            description="Update a config",
            input_schema={
                "type": "object",
                "properties": {
                    "configId": {"type": "string"},
                    "requestBody": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string", "maxLength": 255},
                            "description": {"type": ["string", "null"]},
                        },
                        "required": ["name"],
                    },
                },
                "required": ["configId", "requestBody"],
            },
            method=HttpMethod.PUT,
            path_template="/v1/configs/{configId}",
            bindings=(path_param("configId"),),
        ),
        EndpointDescriptor(
            name="list-auditlogs",
            description="List audit logs",
            input_schema={
                "type": "object",
                "properties": {
                    "productId": {"type": "string"},
                    "configId": {"type": "string"},
                    "auditLogType": {"type": "string", "enum": ["configCreated", "configChanged"]},
                },
                "required": ["productId"],
            },
            method=HttpMethod.GET,
            path_template="/v1/products/{productId}/auditlogs",
            bindings=(path_param("productId"), query_param("configId"), query_param("auditLogType")),
        ),
        EndpointDescriptor(
            name="get-setting-value-by-sdkkey",
            description="Get a setting value by SDK key",
            input_schema={
                "type": "object",
                "properties": {
                    "settingKeyOrId": {"type": "string"},
                    "X-CONFIGCAT-SDKKEY": {"type": "string"},
                },
                "required": ["settingKeyOrId", "X-CONFIGCAT-SDKKEY"],
            },
            method=HttpMethod.GET,
            path_template="/v1/settings/{settingKeyOrId}/value",
            bindings=(path_param("settingKeyOrId"), header_param("X-CONFIGCAT-SDKKEY")),
        ),
        EndpointDescriptor(
            name="delete-setting",
            description="Delete a setting",
            input_schema={
                "type": "object",
                "properties": {"settingId": {"type": "integer"}},
                "required": ["settingId"],
            },
            method=HttpMethod.DELETE,
            path_template="/v1/settings/{settingId}",
            bindings=(path_param("settingId"),),
        ),
    ]


@pytest.fixture
def http_client(credentials: Credentials, mock_transport: MockTransport) -> ConfigCatHttpClient:
    return ConfigCatHttpClient(BASE_URL, credentials, transport=mock_transport)


@pytest.fixture
def mock_adapter(
    sample_endpoints: list[EndpointDescriptor],
    http_client: ConfigCatHttpClient,
    mock_transport: MockTransport,
) -> tuple[ConfigCatToolAdapter, MockTransport]:
    """Create an adapter whose HTTP client talks to the mock transport."""
    adapter = ConfigCatToolAdapter(EndpointRegistry(sample_endpoints), http_client)
    return adapter, mock_transport
