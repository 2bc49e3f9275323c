# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains a Google ADK research agent that USES the grounding
# tools.  It is a client of the MCP server, not part of it:
#
#   prompt.py          →  the agent's instruction prompt (date injected)
#   research_agent.py  →  builds the ADK Agent wired to tools/mcp_server.py
#
# THE AGENT'S JOB:
#   1. Receive a developer question ("How do I stream responses in httpx?")
#   2. Pick the right grounded-search tool (docs, code, reddit, general)
#   3. Read the cited answer that comes back
#   4. Present it with the sources intact
#
# The agent never calls Gemini's search directly.  Every web lookup goes
# through the MCP tools, so any other MCP client (Claude Desktop, an IDE)
# gets exactly the same behaviour.
# =============================================================================
