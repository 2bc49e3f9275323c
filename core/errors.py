# =============================================================================
# core/errors.py  —  Error Taxonomy
# =============================================================================
#
# Only two things can go wrong in this system:
#   - startup configuration is missing (fatal, the server never starts)
#   - the Gemini call itself fails (per-call, reported back to the agent)
#
# Everything else (missing parts, missing citations, odd response shapes)
# degrades to fallback text in core/response_formatter.py and is never raised.
# =============================================================================


class GroundingError(Exception):
    """Base class for every error raised by this project."""


class ConfigurationError(GroundingError):
    """A required setting (e.g. GEMINI_API_KEY) is missing or invalid."""


class UpstreamCallError(GroundingError):
    """The grounded-generation call failed (network, auth, quota, bad request)."""
