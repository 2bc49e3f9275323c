# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the "translation layer" between MCP and the core logic.
#
#   gemini_client.py  →  the only module that calls the Gemini API
#                        (google-genai, Google Search grounding enabled)
#   search_tools.py   →  one handler per tool: rewrite the query, build a
#                        SearchRequest, run it, return a ToolOutcome
#   mcp_server.py     →  FastMCP server exposing the handlers as MCP tools,
#                        plus the process entry point
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build prompts or format answers (that's in core/)
#   - They do NOT retry, cache or rank anything: one call in, one text out
#   - They do NOT know about Google ADK (the agent/ package is just one
#     possible MCP client)
#
# TOOL CONTRACT QUALITY:
#   Each tool has a descriptive name, typed parameters and a docstring the
#   calling LLM reads to decide WHEN to use it.  Keep those docstrings
#   specific; they are the tool's whole user interface.
# =============================================================================
