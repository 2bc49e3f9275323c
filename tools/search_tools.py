# =============================================================================
# tools/search_tools.py  —  Tool Handlers (one per MCP tool)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Maps each tool's input onto a SearchRequest, runs the search, and wraps
#   the result in a ToolOutcome.  The FastMCP server in tools/mcp_server.py
#   is a thin shell around these functions.
#
#   Tool                          Query rewrite                 Focus          Context
#   ─────────────────────────────────────────────────────────────────────────────────────
#   search_with_grounding         none                          caller's       caller's
#   search_developer_resources    build_developer_query         code           "developer resources"
#   search_documentation          build_documentation_query     documentation  fixed docs context
#   search_reddit                 build_reddit_query            general        build_reddit_context
#
# FAILURE CONTRACT:
#   A handler never raises.  Every failure on its call path comes back as
#   ToolOutcome.failure(...), i.e. the text "Error: <message>" flagged as an
#   error.  The transport layer only has to translate that flag.
#
# THE SEARCHER:
#   Handlers only need `await searcher.search(request) -> str`.  The real
#   implementation is GeminiGroundingClient; tests pass a fake.
# =============================================================================

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from core.errors import GroundingError
from core.models import (
    DeveloperResourcesInput,
    DocumentationInput,
    Focus,
    GroundedSearchInput,
    RedditInput,
    SearchRequest,
    ToolOutcome,
)
from core.queries import (
    build_developer_query,
    build_documentation_query,
    build_reddit_context,
    build_reddit_query,
)

logger = logging.getLogger(__name__)

DEVELOPER_CONTEXT = "developer resources"
DOCUMENTATION_CONTEXT = "official documentation and API references"
UNKNOWN_ERROR = "Unknown error occurred"


@runtime_checkable
class GroundedSearcher(Protocol):
    async def search(self, request: SearchRequest) -> str:
        """Return the formatted answer.  Raises on upstream failure."""
        ...


async def _run_search(
    searcher: GroundedSearcher,
    tool_name: str,
    query: str,
    build_request: Callable[[], SearchRequest],
) -> ToolOutcome:
    if not query or not query.strip():
        return ToolOutcome.failure("query must not be empty")

    request = build_request()
    try:
        text = await searcher.search(request)
    except GroundingError as exc:
        # Already logged where it was raised.
        return ToolOutcome.failure(str(exc) or UNKNOWN_ERROR)
    except Exception as exc:
        logger.exception("%s failed", tool_name)
        return ToolOutcome.failure(str(exc) or UNKNOWN_ERROR)

    return ToolOutcome.success(text)


async def search_with_grounding(
    searcher: GroundedSearcher, tool_input: GroundedSearchInput
) -> ToolOutcome:
    return await _run_search(
        searcher,
        "search_with_grounding",
        tool_input.query,
        lambda: SearchRequest(
            query=tool_input.query,
            context=tool_input.context,
            focus=Focus.coerce(tool_input.focus),
        ),
    )


async def search_developer_resources(
    searcher: GroundedSearcher, tool_input: DeveloperResourcesInput
) -> ToolOutcome:
    return await _run_search(
        searcher,
        "search_developer_resources",
        tool_input.query,
        lambda: SearchRequest(
            query=build_developer_query(
                tool_input.query, tool_input.language, tool_input.framework
            ),
            context=DEVELOPER_CONTEXT,
            focus=Focus.CODE,
            language=tool_input.language,
            framework=tool_input.framework,
        ),
    )


async def search_documentation(
    searcher: GroundedSearcher, tool_input: DocumentationInput
) -> ToolOutcome:
    return await _run_search(
        searcher,
        "search_documentation",
        tool_input.query,
        lambda: SearchRequest(
            query=build_documentation_query(tool_input.query, tool_input.technology),
            context=DOCUMENTATION_CONTEXT,
            focus=Focus.DOCUMENTATION,
        ),
    )


async def search_reddit(searcher: GroundedSearcher, tool_input: RedditInput) -> ToolOutcome:
    return await _run_search(
        searcher,
        "search_reddit",
        tool_input.query,
        lambda: SearchRequest(
            query=build_reddit_query(tool_input.query, tool_input.subreddit),
            context=build_reddit_context(tool_input.query, tool_input.subreddit),
        ),
    )


# -----------------------------------------------------------------------------
# Name → (input type, handler) registry
# -----------------------------------------------------------------------------
Handler = Callable[[GroundedSearcher, Any], Awaitable[ToolOutcome]]

TOOL_HANDLERS: dict[str, tuple[type, Handler]] = {
    "search_with_grounding": (GroundedSearchInput, search_with_grounding),
    "search_developer_resources": (DeveloperResourcesInput, search_developer_resources),
    "search_documentation": (DocumentationInput, search_documentation),
    "search_reddit": (RedditInput, search_reddit),
}


async def dispatch(
    searcher: GroundedSearcher, tool_name: str, arguments: Mapping[str, Any]
) -> ToolOutcome:
    """Run a tool by name with already schema-checked arguments."""
    entry = TOOL_HANDLERS.get(tool_name)
    if entry is None:
        return ToolOutcome.failure(f"Unknown tool: {tool_name}")

    input_type, handler = entry
    try:
        tool_input = input_type(**arguments)
    except TypeError as exc:
        return ToolOutcome.failure(f"Invalid arguments for {tool_name}: {exc}")

    return await handler(searcher, tool_input)
