"""
MCP Server

FastAPI application exposing the ConfigCat adapter as an MCP-compliant server.
Handles JSON-RPC 2.0 over HTTP POST, which is one of the transports MCP supports.

The adapter lives on ``app.state`` and is built in the lifespan handler:
credentials are loaded there, and the server refuses to start without them.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .adapter import ConfigCatToolAdapter, create_configcat_adapter
from .config import (
    CONFIGCAT_BASE_URL,
    SERVER_HOST,
    SERVER_NAME,
    SERVER_PORT,
    SERVER_VERSION,
    Credentials,
    load_credentials,
)
from .models import ErrorCode, JsonRpcRequest, make_error_response

logger = logging.getLogger(__name__)


def create_app(
    credentials: Credentials | None = None,
    *,
    base_url: str = CONFIGCAT_BASE_URL,
    transport: httpx.AsyncBaseTransport | None = None,
    load_docs: bool = True,
) -> FastAPI:
    """
    Build the FastAPI application.

    Without explicit ``credentials`` they are read from the environment
    at startup; a ConfigurationError then aborts the startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Manage adapter lifecycle - startup and shutdown."""
        adapter = await create_configcat_adapter(
            credentials or load_credentials(),
            base_url=base_url,
            transport=transport,
            load_docs=load_docs,
        )
        app.state.adapter = adapter
        logger.info(
            "%s %s ready with %d tools",
            SERVER_NAME,
            SERVER_VERSION,
            len(adapter.list_tools()),
        )
        try:
            yield
        finally:
            await adapter.close()
            app.state.adapter = None

    app = FastAPI(
        title=SERVER_NAME,
        description="Exposes the ConfigCat Public Management API as MCP tools.",
        version=SERVER_VERSION,
        lifespan=lifespan,
    )
    app.state.adapter = None

    def get_adapter(request: Request) -> ConfigCatToolAdapter:
        adapter = request.app.state.adapter
        if adapter is None:
            raise HTTPException(status_code=503, detail="Adapter not initialized")
        return adapter

    @app.post("/mcp")
    async def mcp_endpoint(request: Request) -> Response:
        """
        Main MCP endpoint accepting JSON-RPC 2.0 requests.

        Notifications (no id) are acknowledged with 202 and no body.
        """
        adapter = get_adapter(request)

        # Parse raw JSON to handle malformed requests gracefully
        try:
            body = await request.json()
        except ValueError:
            error = make_error_response(None, ErrorCode.PARSE_ERROR, "Invalid JSON")
            return JSONResponse(content=error.model_dump(), status_code=200)

        if not isinstance(body, dict):
            error = make_error_response(
                None, ErrorCode.INVALID_REQUEST, "Invalid request: expected a JSON object"
            )
            return JSONResponse(content=error.model_dump(), status_code=200)

        if "id" not in body and str(body.get("method", "")).startswith("notifications/"):
            return Response(status_code=202)

        # Validate as JSON-RPC request
        try:
            rpc_request = JsonRpcRequest(**body)
        except ValidationError as e:
            error = make_error_response(
                body.get("id") if isinstance(body.get("id"), int | str) else None,
                ErrorCode.INVALID_REQUEST,
                f"Invalid request: {e}",
            )
            return JSONResponse(content=error.model_dump(), status_code=200)

        response = await adapter.handle_request(rpc_request)
        return JSONResponse(content=response.model_dump(), status_code=200)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/tools")
    async def list_tools(request: Request) -> dict[str, Any]:
        """
        Convenience endpoint to list available tools.

        Not part of MCP spec - just useful for debugging and exploration.
        In production, use the MCP tools/list method instead.
        """
        adapter = get_adapter(request)
        return {"tools": [t.model_dump() for t in adapter.list_tools()]}

    return app


app = create_app()


def main() -> None:
    """Console entry point: run the server with uvicorn, logging to stderr."""
    import uvicorn

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    main()
