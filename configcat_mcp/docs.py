"""
SDK Documentation Tool

At startup the ConfigCat llms.txt index is fetched once and its
"SDK Reference" section is embedded in the description of a local
``update-sdk-documentation`` tool. Agents then call that tool with one of
the listed URLs to pull the relevant SDK page.

If the index cannot be fetched or the section is missing, the tool is
simply not offered.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from .client import ConfigCatHttpClient
from .config import LLMS_TXT_URL, SDK_REFERENCE_HEADER
from .errors import TransportFailure
from .models import Tool, ToolCallResult
from .schema import ArgumentSchema, compile_schema

logger = logging.getLogger(__name__)

DOCS_TOOL_NAME = "update-sdk-documentation"

_NEXT_SECTION_RE = re.compile(r"\n###\s+")

ToolHandler = Callable[[dict[str, Any]], Awaitable[ToolCallResult]]


@dataclass(frozen=True)
class LocalTool:
    """A tool answered in-process instead of by a ConfigCat endpoint."""

    name: str
    description: str
    input_schema: Any
    handler: ToolHandler
    schema: ArgumentSchema = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "schema", compile_schema(self.input_schema))

    def to_mcp_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.schema.json_schema(),
        )


def extract_markdown_section(content: str, header: str) -> str:
    """
    Slice one "### " section out of a markdown document.

    The section runs from ``header`` up to the next "### " heading, or to
    the end of the document. Returns "" if the header is absent.
    """
    start = content.find(header)
    if start == -1:
        return ""

    body_start = start + len(header)
    match = _NEXT_SECTION_RE.search(content, body_start)
    end = match.start() if match else len(content)
    return content[start:end].strip()


def build_docs_tool(http: ConfigCatHttpClient, sdk_docs: str) -> LocalTool:
    """Create the documentation tool around an already-extracted SDK list."""

    async def fetch_documentation(arguments: dict[str, Any]) -> ToolCallResult:
        url = arguments["url"]
        logger.info("Fetching documentation from: %s", url)
        try:
            response = await http.fetch(url)
        except TransportFailure as e:
            logger.error("Error fetching documentation: %s", e)
            return ToolCallResult.failure(f"Error: {e}")

        if not response.is_success:
            return ToolCallResult.failure(
                f"Error: Failed to fetch {url} - HTTP {response.status_code}: {response.reason_phrase}"
            )

        content = response.text
        logger.info("Successfully fetched %d characters from %s", len(content), url)
        return ToolCallResult.success(content)

    description = (
        "If the user asks for coding related to a feature flag (such as integrating the "
        "ConfigCat SDK, adding a feature flag, or removing a feature flag), always call the "
        f'tool "{DOCS_TOOL_NAME}" first to download the latest ConfigCat SDK documentation.\n\n'
        "1. Analyze the SDK URLs listed in the following SDK Reference list.\n"
        f'2. Then call the tool "{DOCS_TOOL_NAME}" with specific URL from the SDK Reference '
        "list to fetch relevant documentation page.\n\n"
        f"{sdk_docs}"
    )

    return LocalTool(
        name=DOCS_TOOL_NAME,
        description=description,
        input_schema={
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "format": "uri",
                    "description": "The URL to fetch SDK documentation from.",
                },
            },
            "required": ["url"],
        },
        handler=fetch_documentation,
    )


async def load_docs_tool(
    http: ConfigCatHttpClient,
    index_url: str = LLMS_TXT_URL,
) -> LocalTool | None:
    """Fetch the documentation index once; None if it is unusable."""
    try:
        response = await http.fetch(index_url)
    except TransportFailure as e:
        logger.error("Failed to fetch %s - %s", index_url, e)
        return None

    if not response.is_success:
        logger.error(
            "Failed to fetch %s - HTTP %d: %s",
            index_url,
            response.status_code,
            response.reason_phrase,
        )
        return None

    sdk_docs = extract_markdown_section(response.text, SDK_REFERENCE_HEADER)
    if not sdk_docs:
        logger.error("Failed to extract SDK Reference section from %s", index_url)
        return None

    return build_docs_tool(http, sdk_docs)
