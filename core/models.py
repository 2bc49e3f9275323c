# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Three groups of dataclasses live here:
#
#   1. REQUEST SIDE  —  Focus, SearchRequest and the four tool inputs.
#      These are what the tools layer hands to the prompt builder.
#
#   2. RESPONSE SIDE —  GroundedResponse and its nested optional-field tree.
#      This mirrors the part of Gemini's GenerateContentResponse that we read:
#
#        GroundedResponse
#          ├── text
#          └── candidates[]
#                ├── content.parts[].text
#                └── grounding_metadata
#                      ├── grounding_chunks[].web.{uri, title}
#                      └── search_entry_point.rendered_content
#
#      Every field along that path is independently optional in the real
#      API, so every field here is Optional and from_raw() never assumes
#      anything is present.
#
#   3. TOOL RESULT   —  ToolOutcome, the tagged success/error value every
#      tool handler returns.
#
# Nothing in this module imports google-genai.  from_raw() accepts either an
# SDK response object (attribute access) or a plain dict (the JSON wire shape,
# camelCase keys), so the core stays framework-agnostic and easy to test.
# =============================================================================

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


# -----------------------------------------------------------------------------
# Focus — which kind of information the prompt tells the model to prioritize
# -----------------------------------------------------------------------------
class Focus(str, Enum):
    GENERAL = "general"
    CODE = "code"
    DOCUMENTATION = "documentation"
    TROUBLESHOOTING = "troubleshooting"

    @classmethod
    def coerce(cls, value: "Focus | str | None") -> "Focus":
        """Map a raw value onto a Focus, falling back to GENERAL."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.GENERAL


# -----------------------------------------------------------------------------
# SearchRequest — the single input to the prompt builder
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchRequest:
    """One grounded-search request, built per tool call and then discarded."""

    query: str
    context: Optional[str] = None
    focus: Focus = Focus.GENERAL
    language: Optional[str] = None         # e.g. "Python"
    framework: Optional[str] = None        # e.g. "FastAPI"


# -----------------------------------------------------------------------------
# Tool inputs — one per MCP tool, already schema-checked by the transport
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class GroundedSearchInput:
    query: str
    context: Optional[str] = None
    focus: Optional[str] = None


@dataclass(frozen=True)
class DeveloperResourcesInput:
    query: str
    language: Optional[str] = None
    framework: Optional[str] = None


@dataclass(frozen=True)
class DocumentationInput:
    query: str
    technology: Optional[str] = None


@dataclass(frozen=True)
class RedditInput:
    query: str
    subreddit: Optional[str] = None


# -----------------------------------------------------------------------------
# Defensive field access for from_raw()
# -----------------------------------------------------------------------------
def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(word.title() for word in rest)


def _lookup(raw: Any, name: str) -> Any:
    """Read `name` from a mapping (snake_case or camelCase key) or an attribute."""
    if raw is None:
        return None
    if isinstance(raw, Mapping):
        if name in raw:
            return raw[name]
        return raw.get(_camel(name))
    return getattr(raw, name, None)


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_list(value: Any) -> Optional[list]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


# -----------------------------------------------------------------------------
# GroundedResponse tree
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class WebReference:
    uri: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "WebReference":
        return cls(uri=_as_str(_lookup(raw, "uri")), title=_as_str(_lookup(raw, "title")))


@dataclass(frozen=True)
class GroundingChunk:
    """One citation: a web source the answer was grounded on."""

    web: Optional[WebReference] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "GroundingChunk":
        web = _lookup(raw, "web")
        return cls(web=WebReference.from_raw(web) if web is not None else None)


@dataclass(frozen=True)
class SearchEntryPoint:
    rendered_content: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "SearchEntryPoint":
        return cls(rendered_content=_as_str(_lookup(raw, "rendered_content")))


@dataclass(frozen=True)
class GroundingMetadata:
    grounding_chunks: Optional[list[GroundingChunk]] = None
    search_entry_point: Optional[SearchEntryPoint] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "GroundingMetadata":
        chunks = _as_list(_lookup(raw, "grounding_chunks"))
        entry_point = _lookup(raw, "search_entry_point")
        return cls(
            grounding_chunks=(
                [GroundingChunk.from_raw(chunk) for chunk in chunks]
                if chunks is not None
                else None
            ),
            search_entry_point=(
                SearchEntryPoint.from_raw(entry_point) if entry_point is not None else None
            ),
        )


@dataclass(frozen=True)
class Part:
    text: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "Part":
        return cls(text=_as_str(_lookup(raw, "text")))


@dataclass(frozen=True)
class Content:
    parts: Optional[list[Part]] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "Content":
        parts = _as_list(_lookup(raw, "parts"))
        return cls(parts=[Part.from_raw(part) for part in parts] if parts is not None else None)


@dataclass(frozen=True)
class Candidate:
    content: Optional[Content] = None
    grounding_metadata: Optional[GroundingMetadata] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "Candidate":
        content = _lookup(raw, "content")
        metadata = _lookup(raw, "grounding_metadata")
        return cls(
            content=Content.from_raw(content) if content is not None else None,
            grounding_metadata=(
                GroundingMetadata.from_raw(metadata) if metadata is not None else None
            ),
        )


@dataclass(frozen=True)
class GroundedResponse:
    """The slice of a grounded-generation response that the formatter reads."""

    candidates: Optional[list[Candidate]] = None
    text: Optional[str] = None

    @property
    def first_candidate(self) -> Optional[Candidate]:
        return self.candidates[0] if self.candidates else None

    @classmethod
    def from_raw(cls, raw: Any) -> "GroundedResponse":
        """Build the tree from an SDK response object or a JSON-shaped dict.

        Missing fields, None values and values of the wrong type all become
        None.  This never raises.
        """
        candidates = _as_list(_lookup(raw, "candidates"))
        return cls(
            candidates=(
                [Candidate.from_raw(candidate) for candidate in candidates]
                if candidates is not None
                else None
            ),
            text=_as_str(_lookup(raw, "text")),
        )


# -----------------------------------------------------------------------------
# ToolOutcome — what every tool handler returns
# -----------------------------------------------------------------------------
# The transport turns a success into one text block and a failure into one
# text block flagged isError.  Nothing else about the result is structured.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolOutcome:
    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolOutcome":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "ToolOutcome":
        return cls(text=f"Error: {message}", is_error=True)
