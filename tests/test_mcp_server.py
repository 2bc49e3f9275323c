import asyncio

import pytest
from fastmcp import Client

from core.errors import UpstreamCallError
from fakes import FakeSearcher
from tools import mcp_server
from tools.mcp_server import create_server


async def _call(server, tool_name, arguments):
    async with Client(server) as client:
        return await client.call_tool(tool_name, arguments, raise_on_error=False)


async def _tool_names(server):
    async with Client(server) as client:
        return {tool.name for tool in await client.list_tools()}


def test_server_registers_the_four_tools():
    names = asyncio.run(_tool_names(create_server(FakeSearcher())))

    assert names == {
        "search_with_grounding",
        "search_developer_resources",
        "search_documentation",
        "search_reddit",
    }


def test_successful_call_returns_one_text_block():
    searcher = FakeSearcher(answer="Answer\n\n## Sources\n1. [A](https://a.example)\n")

    result = asyncio.run(
        _call(create_server(searcher), "search_with_grounding", {"query": "q", "focus": "code"})
    )

    assert not result.is_error
    assert len(result.content) == 1
    assert result.content[0].text == "Answer\n\n## Sources\n1. [A](https://a.example)\n"
    assert searcher.requests[0].focus.value == "code"


def test_failed_call_is_flagged_as_error():
    searcher = FakeSearcher(error=UpstreamCallError("Failed to get grounded response: timeout"))

    result = asyncio.run(_call(create_server(searcher), "search_reddit", {"query": "q"}))

    assert result.is_error
    assert len(result.content) == 1
    assert result.content[0].text == "Error: Failed to get grounded response: timeout"


def test_main_exits_when_api_key_missing(clean_env, monkeypatch):
    monkeypatch.setattr(mcp_server, "load_dotenv", lambda: False)

    with pytest.raises(SystemExit) as excinfo:
        mcp_server.main()

    assert excinfo.value.code == 1
