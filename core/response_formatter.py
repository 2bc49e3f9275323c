# =============================================================================
# core/response_formatter.py  —  Grounded Response → Markdown
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Flattens a GroundedResponse into the one text block the agent receives:
#
#     <answer text>
#
#     ## Sources
#     1. [Title](https://...)
#     3. [Source 3](https://...)          ← chunk 2 had no URI, 3 keeps its number
#
#     *Search queries used: <rendered search entry point>*
#
# TEXT EXTRACTION (first match wins, never merged):
#   1. the first candidate's content parts, concatenated
#   2. the response's top-level text
#   3. NO_CONTENT_FALLBACK
#
# SOURCES:
#   Taken from the first candidate's grounding metadata, whichever text branch
#   fired.  A source is numbered by its position in the full chunk list, so
#   chunks without a URI leave gaps rather than shifting later numbers.
#
# This never raises: every missing piece degrades to fallback text or an
# omitted section.
# =============================================================================

from typing import Optional

from core.models import GroundedResponse, GroundingMetadata

NO_CONTENT_FALLBACK = "No response content found"
SOURCES_HEADING = "## Sources"


def extract_text(response: GroundedResponse) -> str:
    candidate = response.first_candidate
    if candidate is not None and candidate.content is not None and candidate.content.parts is not None:
        return "".join(part.text or "" for part in candidate.content.parts)
    if response.text:
        return response.text
    return NO_CONTENT_FALLBACK


def format_sources(metadata: Optional[GroundingMetadata]) -> str:
    """Render the Sources list and search-queries line, or "" if there are none."""
    if metadata is None:
        return ""

    rendered = ""

    if metadata.grounding_chunks:
        rendered += f"\n\n{SOURCES_HEADING}\n"
        for index, chunk in enumerate(metadata.grounding_chunks, start=1):
            if chunk.web is None or not chunk.web.uri:
                continue
            title = chunk.web.title or f"Source {index}"
            rendered += f"{index}. [{title}]({chunk.web.uri})\n"

    entry_point = metadata.search_entry_point
    if entry_point is not None and entry_point.rendered_content:
        rendered += f"\n*Search queries used: {entry_point.rendered_content}*\n"

    return rendered


def format_grounded_response(response: GroundedResponse) -> str:
    candidate = response.first_candidate
    metadata = candidate.grounding_metadata if candidate is not None else None
    return extract_text(response) + format_sources(metadata)
