"""
Tests for the SDK documentation tool.
"""

import pytest

from configcat_mcp.client import ConfigCatHttpClient
from configcat_mcp.config import Credentials
from configcat_mcp.docs import DOCS_TOOL_NAME, build_docs_tool, extract_markdown_section, load_docs_tool

from conftest import BASE_URL, FailingTransport, MockTransport

INDEX_URL = "https://docs.example.com/llms.txt"
PYTHON_DOCS_URL = "https://docs.example.com/sdk-reference/python.md"

LLMS_TXT = """# ConfigCat Docs

### Getting Started
- [Intro](https://docs.example.com/intro.md)

### SDK Reference
- [Python SDK](https://docs.example.com/sdk-reference/python.md)
- [Go SDK](https://docs.example.com/sdk-reference/go.md)

### Advanced
- [Targeting](https://docs.example.com/targeting.md)
"""


def make_client(transport) -> ConfigCatHttpClient:
    return ConfigCatHttpClient(BASE_URL, Credentials("u", "p"), transport=transport)


class TestExtractMarkdownSection:
    """Tests for slicing one section out of llms.txt."""

    def test_section_stops_at_next_heading(self):
        section = extract_markdown_section(LLMS_TXT, "### SDK Reference")

        assert section.startswith("### SDK Reference")
        assert "Python SDK" in section
        assert "Go SDK" in section
        assert "Targeting" not in section
        assert "Intro" not in section

    def test_last_section_runs_to_end(self):
        section = extract_markdown_section(LLMS_TXT, "### Advanced")
        assert section == "### Advanced\n- [Targeting](https://docs.example.com/targeting.md)"

    def test_missing_header(self):
        assert extract_markdown_section(LLMS_TXT, "### Nope") == ""


class TestLoadDocsTool:
    """Tests for the one-time index fetch at startup."""

    @pytest.mark.asyncio
    async def test_tool_built_from_index(self):
        http = make_client(MockTransport({INDEX_URL: (200, LLMS_TXT)}))

        tool = await load_docs_tool(http, INDEX_URL)

        assert tool is not None
        assert tool.name == DOCS_TOOL_NAME
        assert "Python SDK" in tool.description
        assert "Targeting" not in tool.description
        assert tool.to_mcp_tool().inputSchema["required"] == ["url"]
        await http.close()

    @pytest.mark.asyncio
    async def test_http_error_means_no_tool(self):
        http = make_client(MockTransport({INDEX_URL: (500, "oops")}))
        assert await load_docs_tool(http, INDEX_URL) is None
        await http.close()

    @pytest.mark.asyncio
    async def test_transport_error_means_no_tool(self):
        http = make_client(FailingTransport())
        assert await load_docs_tool(http, INDEX_URL) is None
        await http.close()

    @pytest.mark.asyncio
    async def test_missing_section_means_no_tool(self):
        http = make_client(MockTransport({INDEX_URL: (200, "# Docs\n\n### Other\n- nothing")}))
        assert await load_docs_tool(http, INDEX_URL) is None
        await http.close()


class TestDocsToolHandler:
    """Tests for fetching a documentation page."""

    @pytest.mark.asyncio
    async def test_returns_page_verbatim(self):
        transport = MockTransport({PYTHON_DOCS_URL: (200, "# Python SDK\n\npip install configcat-client")})
        tool = build_docs_tool(make_client(transport), "### SDK Reference")

        result = await tool.handler({"url": PYTHON_DOCS_URL})

        assert result.ok
        assert result.text == "# Python SDK\n\npip install configcat-client"
        assert "authorization" not in transport.last_request.headers

    @pytest.mark.asyncio
    async def test_http_error(self):
        tool = build_docs_tool(make_client(MockTransport()), "### SDK Reference")

        result = await tool.handler({"url": "https://docs.example.com/missing.md"})

        assert result.isError
        assert result.text == (
            "Error: Failed to fetch https://docs.example.com/missing.md - HTTP 404: Not Found"
        )

    @pytest.mark.asyncio
    async def test_transport_error(self):
        tool = build_docs_tool(make_client(FailingTransport("dns failure")), "### SDK Reference")

        result = await tool.handler({"url": PYTHON_DOCS_URL})

        assert result.isError
        assert result.text.startswith("Error: ")
        assert "dns failure" in result.text

    def test_url_must_be_a_uri(self):
        tool = build_docs_tool(make_client(MockTransport()), "### SDK Reference")
        _, violations = tool.schema.check({"url": "python docs please"})

        assert [(v.path, v.kind) for v in violations] == [("url", "invalid_string")]
