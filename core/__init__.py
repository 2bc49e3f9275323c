# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL request-shaping and response-normalization logic
# for the grounded-search tools:
#
#   models.py              →  SearchRequest, GroundedResponse tree, ToolOutcome
#   prompt_builder.py      →  SearchRequest → prompt string
#   queries.py             →  query rewrites for the specialised tools
#   response_formatter.py  →  GroundedResponse → markdown with "## Sources"
#   config.py / errors.py  →  settings and the error taxonomy
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports google-genai, FastMCP, Google ADK or any
#   other framework.  Every module here is pure Python and can be exercised
#   in a bare REPL with zero internet access.
# =============================================================================
