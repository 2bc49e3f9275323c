# =============================================================================
# agent/research_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the Google ADK agent that answers developer questions by calling
#   the grounded-search MCP tools.
#
# HOW IT WORKS (simplified):
#
#   ┌──────────────────────────────────────────────────────────────────┐
#   │                       Google ADK Agent                           │
#   │  ┌─────────────┐    ┌──────────────┐    ┌───────────────────┐    │
#   │  │ Instruction │───▶│  LLM         │───▶│  MCPToolset       │    │
#   │  │ (prompt.py) │    │ (AGENT_MODEL)│    │  (stdio)          │    │
#   │  └─────────────┘    └──────────────┘    └───────────────────┘    │
#   └──────────────────────────────────────────────────────────────────┘
#                                                      │
#                                                      ▼
#                                          ┌──────────────────────────┐
#                                          │  FastMCP Server          │
#                                          │  (tools/mcp_server.py)   │
#                                          │  • search_with_grounding │
#                                          │  • search_developer_...  │
#                                          │  • search_documentation  │
#                                          │  • search_reddit         │
#                                          └──────────────────────────┘
#                                                      │
#                                                      ▼
#                                          ┌──────────────────────────┐
#                                          │  Gemini + Google Search  │
#                                          └──────────────────────────┘
#
# MODEL CHOICE:
#   AGENT_MODEL picks the reasoning model.  Provider-prefixed names such as
#   "openrouter/openai/gpt-4o" go through LiteLlm; bare Gemini names such as
#   "gemini-2.5-flash" are passed to ADK as-is (ADK speaks Gemini natively).
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess ("uv run python -m
#   tools.mcp_server") and talks to it over stdin/stdout.  The subprocess
#   gets this process's environment so GEMINI_API_KEY reaches it.
# =============================================================================

import os
from typing import Optional, Union

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_research_agent_prompt
from core.config import DEFAULT_AGENT_MODEL

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def resolve_model(model_name: str) -> Union[str, LiteLlm]:
    """Return a LiteLlm wrapper for provider-prefixed names, else the name."""
    if "/" in model_name:
        return LiteLlm(model=model_name)
    return model_name


def create_mcp_toolset() -> MCPToolset:
    return MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
            env=dict(os.environ),
        ),
    )


def create_agent(model_name: Optional[str] = None) -> Agent:
    """Create the developer research agent.

    Args:
        model_name: Reasoning model.  Defaults to AGENT_MODEL from the
            environment, then to openrouter/openai/gpt-4o.

    Returns:
        A configured Google ADK Agent whose only tools are the grounded
        search tools.
    """
    model_name = model_name or os.environ.get("AGENT_MODEL", "").strip() or DEFAULT_AGENT_MODEL

    return Agent(
        name="developer_research_agent",
        model=resolve_model(model_name),
        instruction=get_research_agent_prompt(),
        tools=[create_mcp_toolset()],
    )
