import asyncio

from core.errors import UpstreamCallError
from core.models import (
    DeveloperResourcesInput,
    DocumentationInput,
    Focus,
    GroundedSearchInput,
    RedditInput,
    ToolOutcome,
)
from fakes import FakeSearcher
from tools.search_tools import (
    DEVELOPER_CONTEXT,
    DOCUMENTATION_CONTEXT,
    TOOL_HANDLERS,
    GroundedSearcher,
    dispatch,
    search_developer_resources,
    search_documentation,
    search_reddit,
    search_with_grounding,
)


def test_fake_satisfies_searcher_protocol(searcher):
    assert isinstance(searcher, GroundedSearcher)


def test_search_with_grounding_passes_input_through(searcher):
    outcome = asyncio.run(
        search_with_grounding(
            searcher, GroundedSearchInput(query="tokio vs async-std", context="new service", focus="troubleshooting")
        )
    )

    assert outcome == ToolOutcome.success("grounded answer")
    request = searcher.requests[0]
    assert request.query == "tokio vs async-std"
    assert request.context == "new service"
    assert request.focus is Focus.TROUBLESHOOTING
    assert request.language is None


def test_search_with_grounding_defaults_to_general_focus(searcher):
    asyncio.run(search_with_grounding(searcher, GroundedSearchInput(query="q")))

    assert searcher.requests[0].focus is Focus.GENERAL
    assert searcher.requests[0].context is None


def test_developer_resources_rewrites_query(searcher):
    asyncio.run(
        search_developer_resources(
            searcher, DeveloperResourcesInput(query="retry requests", language="Python", framework="httpx")
        )
    )

    request = searcher.requests[0]
    assert request.query == "retry requests Python httpx documentation examples tutorial github stackoverflow"
    assert request.focus is Focus.CODE
    assert request.context == DEVELOPER_CONTEXT
    assert request.language == "Python"
    assert request.framework == "httpx"


def test_documentation_with_technology(searcher):
    asyncio.run(search_documentation(searcher, DocumentationInput(query="middleware", technology="Starlette")))

    request = searcher.requests[0]
    assert request.query == "Starlette middleware official documentation"
    assert request.focus is Focus.DOCUMENTATION
    assert request.context == DOCUMENTATION_CONTEXT


def test_documentation_without_technology_keeps_query(searcher):
    asyncio.run(search_documentation(searcher, DocumentationInput(query="middleware")))

    assert searcher.requests[0].query == "middleware"


def test_reddit_with_subreddit(searcher):
    asyncio.run(search_reddit(searcher, RedditInput(query="neovim setups", subreddit="neovim")))

    request = searcher.requests[0]
    assert request.query == "neovim setups site:reddit.com/r/neovim"
    assert request.context.startswith("Search Reddit discussions about neovim setups in r/neovim.")
    assert request.focus is Focus.GENERAL


def test_blank_query_is_rejected_before_searching(searcher):
    outcome = asyncio.run(search_reddit(searcher, RedditInput(query="   ")))

    assert outcome == ToolOutcome(text="Error: query must not be empty", is_error=True)
    assert searcher.requests == []


def test_upstream_error_becomes_error_outcome():
    searcher = FakeSearcher(error=UpstreamCallError("Failed to get grounded response: 403 PERMISSION_DENIED"))

    outcome = asyncio.run(search_with_grounding(searcher, GroundedSearchInput(query="q")))

    assert outcome.is_error
    assert outcome.text == "Error: Failed to get grounded response: 403 PERMISSION_DENIED"


def test_unexpected_error_without_message():
    searcher = FakeSearcher(error=ValueError())

    outcome = asyncio.run(search_documentation(searcher, DocumentationInput(query="q")))

    assert outcome == ToolOutcome(text="Error: Unknown error occurred", is_error=True)


def test_registry_covers_all_tools():
    assert set(TOOL_HANDLERS) == {
        "search_with_grounding",
        "search_developer_resources",
        "search_documentation",
        "search_reddit",
    }


def test_dispatch_by_name(searcher):
    outcome = asyncio.run(dispatch(searcher, "search_reddit", {"query": "x", "subreddit": "rust"}))

    assert outcome == ToolOutcome.success("grounded answer")
    assert searcher.requests[0].query == "x site:reddit.com/r/rust"


def test_dispatch_unknown_tool(searcher):
    outcome = asyncio.run(dispatch(searcher, "search_everything", {"query": "x"}))

    assert outcome == ToolOutcome.failure("Unknown tool: search_everything")
    assert searcher.requests == []


def test_dispatch_rejects_unexpected_arguments(searcher):
    outcome = asyncio.run(dispatch(searcher, "search_documentation", {"query": "x", "subreddit": "rust"}))

    assert outcome.is_error
    assert outcome.text.startswith("Error: Invalid arguments for search_documentation")
