# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the four grounded-search tools over MCP.  Each tool is a thin
#   wrapper around a handler in tools/search_tools.py: it logs the call,
#   dispatches it, and turns the ToolOutcome into an MCP result.
#
# HOW IT WORKS (the flow):
#   1. An agent decides it needs current information (e.g. library docs)
#   2. It calls a tool by name via MCP (e.g. "search_documentation")
#   3. FastMCP routes the call to the decorated function below
#   4. The handler rewrites the query, calls Gemini with Google Search
#      grounding, and formats answer + sources as markdown
#   5. The agent receives one text block (or one error text block)
#
# TOOL NAMING CONVENTIONS:
#   search_* → read-only, one upstream call per invocation, no side effects.
#
# ERROR RESULTS:
#   A failed call raises FastMCP's ToolError with the text "Error: <message>".
#   The transport turns that into a single text block flagged isError, which
#   the agent sees as a normal (failed) tool result rather than a crash.
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server        (or the gemini-grounding-server script)
#   Requires GEMINI_API_KEY in the environment or in a .env file.  Without it
#   the process logs the problem and exits with status 1 before any tool is
#   registered.
# =============================================================================

import logging
import sys
from typing import Literal, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from core.config import DEFAULT_LOG_LEVEL, DEFAULT_SERVER_NAME, load_settings
from core.errors import ConfigurationError
from tools.gemini_client import GeminiGroundingClient
from tools.search_tools import GroundedSearcher, dispatch

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the agent over STDOUT.
# Anything printed to stdout would corrupt the MCP JSON stream.
#
#   CYAN   → incoming tool calls with parameters
#   YELLOW → status / progress lines
#   GREEN  → responses (truncated; grounded answers can be long)
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

_MAX_LOGGED_RESPONSE_CHARS = 300


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the start of the tool response in GREEN, then return it."""
    preview = text if len(text) <= _MAX_LOGGED_RESPONSE_CHARS else text[:_MAX_LOGGED_RESPONSE_CHARS] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response ({len(text)} chars): {preview!r}{_RESET}")
    return text


FocusName = Literal["general", "code", "documentation", "troubleshooting"]


# =============================================================================
# Server factory
# =============================================================================
# The server is built AFTER settings load successfully, so a misconfigured
# process never exposes a single tool.  The searcher is injected: production
# passes a GeminiGroundingClient, tests pass a fake.
# =============================================================================
def create_server(searcher: GroundedSearcher, name: str = DEFAULT_SERVER_NAME) -> FastMCP:
    mcp = FastMCP(name)

    async def _invoke(tool_name: str, **params) -> str:
        _log_request(tool_name, **params)
        outcome = await dispatch(searcher, tool_name, params)
        if outcome.is_error:
            _log_status(f"{tool_name} failed: {outcome.text}")
            raise ToolError(outcome.text)
        return _log_response(tool_name, outcome.text)

    # =========================================================================
    # TOOL 1: search_with_grounding
    # =========================================================================
    # The general-purpose tool.  Query, context and focus go straight into
    # the prompt builder.
    # =========================================================================
    @mcp.tool()
    async def search_with_grounding(
        query: str,
        context: Optional[str] = None,
        focus: Optional[FocusName] = None,
    ) -> str:
        """Search for current information using Gemini with Google Search grounding.

        Returns a markdown answer followed by a numbered "## Sources" list of
        the web pages the answer was grounded on.

        Args:
            query: What to search for.
            context: Optional background that narrows the search
                (e.g. "migrating a Django 3 app").
            focus: What to prioritize: "general" (default), "code",
                "documentation" or "troubleshooting".
        """
        return await _invoke("search_with_grounding", query=query, context=context, focus=focus)

    # =========================================================================
    # TOOL 2: search_developer_resources
    # =========================================================================
    @mcp.tool()
    async def search_developer_resources(
        query: str,
        language: Optional[str] = None,
        framework: Optional[str] = None,
    ) -> str:
        """Search specifically for developer resources: code examples,
        tutorials, GitHub repositories and Stack Overflow answers.

        Args:
            query: The programming topic or problem.
            language: Optional programming language (e.g. "Python").
            framework: Optional framework or library (e.g. "FastAPI").
        """
        return await _invoke(
            "search_developer_resources", query=query, language=language, framework=framework
        )

    # =========================================================================
    # TOOL 3: search_documentation
    # =========================================================================
    @mcp.tool()
    async def search_documentation(query: str, technology: Optional[str] = None) -> str:
        """Search for official documentation and API references.

        Args:
            query: The API, feature or concept to look up.
            technology: Optional product or library name; when given the
                search targets its official documentation.
        """
        return await _invoke("search_documentation", query=query, technology=technology)

    # =========================================================================
    # TOOL 4: search_reddit
    # =========================================================================
    # Gemini can't browse Reddit directly, but Google has indexed most of it.
    # A site: restriction steers grounding toward those pages.
    # =========================================================================
    @mcp.tool()
    async def search_reddit(query: str, subreddit: Optional[str] = None) -> str:
        """Search Reddit discussions for community opinions and experiences.

        Args:
            query: The topic to look for.
            subreddit: Optional subreddit name without the "r/" prefix
                (e.g. "python").
        """
        return await _invoke("search_reddit", query=query, subreddit=subreddit)

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    load_dotenv()

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        configure_logging()
        logging.error(f"Failed to start server: {exc}")
        sys.exit(1)

    configure_logging(settings.log_level)

    client = GeminiGroundingClient.from_settings(settings)
    server = create_server(client, name=settings.server_name)

    _log_status(f"Gemini Grounding MCP Server running on stdio (model={settings.model})")
    server.run()


if __name__ == "__main__":
    main()
