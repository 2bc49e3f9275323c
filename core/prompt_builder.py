# =============================================================================
# core/prompt_builder.py  —  Search Prompt Construction
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a SearchRequest into the single prompt string sent to Gemini.
#
# THE PROMPT, SECTION BY SECTION (blank line between sections):
#
#     Search for current, accurate information about: <query>
#
#     Current date: 2025-07-10
#
#     Context: <context>                      ← only if given
#
#     Programming Language: <language>        ← only if given
#     Framework/Library: <framework>          ← only if given
#
#     <focus block>                           ← one of four, see below
#
#     Please provide:
#     1. ...
#
# THE DATE STAMP:
#   Models default to the date of their training data.  Stamping today's
#   date into every prompt keeps "latest version" questions anchored to now.
#   It is the only impure input; pass `today` explicitly to pin it.
#
# FOCUS BLOCKS:
#   One block per Focus member, looked up in FOCUS_INSTRUCTIONS.  An absent
#   or unrecognized focus gets the GENERAL block.
# =============================================================================

from datetime import date, datetime, timezone
from typing import Optional

from core.models import Focus, SearchRequest


# System instruction sent alongside every prompt.
SEARCH_SYSTEM_INSTRUCTION = """You are a developer-focused search assistant. When searching for information:
- Prioritize official documentation, GitHub repositories, and Stack Overflow answers
- Include practical code examples when available
- Focus on current, up-to-date information
- Provide clear citations and source links
- Highlight any version-specific or compatibility information
- Format responses clearly with proper markdown syntax"""


FOCUS_INSTRUCTIONS: dict[Focus, str] = {
    Focus.CODE: """Focus on:
- Code examples and implementations
- Best practices and patterns
- GitHub repositories and open source projects
- Technical tutorials and guides""",
    Focus.DOCUMENTATION: """Focus on:
- Official documentation and API references
- Getting started guides and tutorials
- Version compatibility and requirements
- Configuration and setup instructions""",
    Focus.TROUBLESHOOTING: """Focus on:
- Common issues and solutions
- Error messages and debugging
- Stack Overflow discussions
- GitHub issues and bug reports""",
    Focus.GENERAL: """Provide comprehensive information including:
- Overview and key concepts
- Practical examples and use cases
- Recent developments and updates
- Relevant resources and documentation""",
}


CLOSING_INSTRUCTIONS = """Please provide:
1. A clear, comprehensive answer
2. Relevant code examples where applicable
3. Proper source citations with links
4. Any important version or compatibility notes"""


def current_date() -> date:
    """Today's calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def focus_instructions(focus: Optional[Focus]) -> str:
    return FOCUS_INSTRUCTIONS.get(Focus.coerce(focus), FOCUS_INSTRUCTIONS[Focus.GENERAL])


def build_prompt(request: SearchRequest, today: Optional[date] = None) -> str:
    """Compose the search prompt for one request.

    Args:
        request: The search request.  `query` is assumed non-empty; the
            tools layer rejects blank queries before getting here.
        today: Date to stamp into the prompt.  Defaults to the current
            UTC date.

    Returns:
        The prompt text.  Never raises.
    """
    stamp = (today or current_date()).isoformat()

    sections = [
        f"Search for current, accurate information about: {request.query}",
        f"Current date: {stamp}",
    ]

    if request.context:
        sections.append(f"Context: {request.context}")

    stack_lines = []
    if request.language:
        stack_lines.append(f"Programming Language: {request.language}")
    if request.framework:
        stack_lines.append(f"Framework/Library: {request.framework}")
    if stack_lines:
        sections.append("\n".join(stack_lines))

    sections.append(focus_instructions(request.focus))
    sections.append(CLOSING_INSTRUCTIONS)

    return "\n\n".join(sections)
