"""
ConfigCat-to-MCP Adapter

Exposes ConfigCat Public Management API operations as MCP tools.

Each tools/call runs one linear pipeline:

    lookup -> validate -> bind -> execute -> normalize

Any stage may short-circuit to an error result. The adapter never lets an
exception escape call_tool(); callers always get a ToolCallResult.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

import httpx
from pydantic import ValidationError

from .binder import bind_request
from .client import ConfigCatHttpClient
from .config import CONFIGCAT_BASE_URL, Credentials
from .docs import LocalTool, load_docs_tool
from .endpoints import DEFAULT_ENDPOINTS, EndpointDescriptor
from .errors import ConfigurationError, UnknownToolError
from .models import (
    ErrorCode,
    InitializeResult,
    JsonRpcErrorResponse,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    Tool,
    ToolCallParams,
    ToolCallResult,
    make_error_response,
    make_success_response,
)
from .registry import EndpointRegistry
from .results import render_failure, render_response
from .schema import validate_arguments

logger = logging.getLogger(__name__)


class ConfigCatToolAdapter:
    """
    Adapts the ConfigCat API to the MCP protocol.

    Holds the read-only registry, the local tools and the HTTP client.
    Nothing here is mutated per call, so concurrent invocations are safe.
    """

    def __init__(
        self,
        registry: EndpointRegistry,
        http: ConfigCatHttpClient,
        local_tools: Iterable[LocalTool] = (),
    ) -> None:
        self.registry = registry
        self.http = http

        tools: dict[str, LocalTool] = {}
        for tool in local_tools:
            if tool.name in registry or tool.name in tools:
                raise ConfigurationError(f"Duplicate tool name: {tool.name}")
            tools[tool.name] = tool
        self.local_tools: Mapping[str, LocalTool] = MappingProxyType(tools)

    async def close(self) -> None:
        """Clean up HTTP client."""
        await self.http.close()

    def list_tools(self) -> list[Tool]:
        """Return all registered tools in MCP format."""
        tools = [descriptor.to_mcp_tool() for descriptor in self.registry]
        tools.extend(tool.to_mcp_tool() for tool in self.local_tools.values())
        return tools

    async def call_tool(self, name: str, arguments: Any = None) -> ToolCallResult:
        """Run one tool invocation. Never raises."""
        if not isinstance(arguments, Mapping):
            arguments = {}

        try:
            if name in self.local_tools:
                tool = self.local_tools[name]
                validated = validate_arguments(name, tool.schema, arguments)
                return await tool.handler(validated)
            return await self._call_endpoint(self.registry.lookup(name), arguments)
        except UnknownToolError as e:
            logger.warning("Error: %s", e)
            return render_failure(e)
        except Exception as e:  # noqa: BLE001 - nothing may escape the tool boundary
            result = render_failure(e)
            logger.error("Error during execution of tool '%s': %s", name, result.text)
            return result

    async def _call_endpoint(
        self, descriptor: EndpointDescriptor, arguments: Mapping[str, Any]
    ) -> ToolCallResult:
        validated = validate_arguments(descriptor.name, descriptor.schema, arguments)
        request = bind_request(descriptor, validated)

        logger.info('Executing tool "%s": %s %s', descriptor.name, request.method, request.path)
        response = await self.http.execute(request)
        return render_response(response)

    async def handle_request(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        """
        Single entry point for all MCP operations.

        Supported methods:
            initialize  -> server capabilities
            ping        -> empty result
            tools/list  -> available tools
            tools/call  -> execute tool
        """
        match request.method:
            case "initialize":
                return make_success_response(request.id, InitializeResult().model_dump())

            case "ping":
                return make_success_response(request.id, {})

            case "tools/list":
                list_result = ListToolsResult(tools=self.list_tools())
                return make_success_response(request.id, list_result.model_dump())

            case "tools/call":
                return await self._handle_tools_call(request)

            case _:
                return make_error_response(
                    request.id,
                    ErrorCode.METHOD_NOT_FOUND,
                    f"Unknown method: {request.method}",
                )

    async def _handle_tools_call(
        self, request: JsonRpcRequest
    ) -> JsonRpcResponse | JsonRpcErrorResponse:
        """Handle tools/call method."""
        if request.params is None:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                "Missing params for tools/call",
            )

        try:
            params = ToolCallParams(**request.params)
        except ValidationError as e:
            return make_error_response(
                request.id,
                ErrorCode.INVALID_PARAMS,
                f"Invalid params: {e}",
            )

        call_result = await self.call_tool(params.name, params.arguments)
        return make_success_response(request.id, call_result.model_dump())


# -----------------------------------------------------------------------------
# Factory Functions
# -----------------------------------------------------------------------------


async def create_configcat_adapter(
    credentials: Credentials,
    *,
    base_url: str = CONFIGCAT_BASE_URL,
    endpoints: Iterable[EndpointDescriptor] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    load_docs: bool = True,
) -> ConfigCatToolAdapter:
    """
    Create an adapter for the ConfigCat API.

    With ``load_docs`` the documentation index is fetched once here and the
    SDK documentation tool is added when it is available.
    """
    registry = EndpointRegistry(DEFAULT_ENDPOINTS if endpoints is None else endpoints)
    http = ConfigCatHttpClient(base_url, credentials, transport=transport)

    local_tools: list[LocalTool] = []
    if load_docs:
        docs_tool = await load_docs_tool(http)
        if docs_tool is not None:
            local_tools.append(docs_tool)

    return ConfigCatToolAdapter(registry, http, local_tools)
