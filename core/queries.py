# =============================================================================
# core/queries.py  —  Query Rewriting for the Specialised Tools
# =============================================================================
#
# The specialised tools (developer resources, documentation, reddit) don't
# change HOW we search, only WHAT we ask.  Each one rewrites the user's query
# with search-engine hints before it reaches the prompt builder:
#
#   build_developer_query("async http", "Python", "httpx")
#     → "async http Python httpx documentation examples tutorial github stackoverflow"
#
#   build_documentation_query("routing", "FastAPI")
#     → "FastAPI routing official documentation"
#
#   build_reddit_query("best laptop", "programming")
#     → "best laptop site:reddit.com/r/programming"
#
# All pure string concatenation.
# =============================================================================

from typing import Optional

DEVELOPER_QUERY_SUFFIX = "documentation examples tutorial github stackoverflow"


def build_developer_query(
    query: str,
    language: Optional[str] = None,
    framework: Optional[str] = None,
) -> str:
    tokens = [query]
    if language:
        tokens.append(language)
    if framework:
        tokens.append(framework)
    tokens.append(DEVELOPER_QUERY_SUFFIX)
    return " ".join(tokens)


def build_documentation_query(query: str, technology: Optional[str] = None) -> str:
    if technology:
        return f"{technology} {query} official documentation"
    return query


def build_reddit_query(query: str, subreddit: Optional[str] = None) -> str:
    """Restrict a query to reddit, or to one subreddit when given."""
    if subreddit:
        return f"{query} site:reddit.com/r/{subreddit}"
    return f"{query} site:reddit.com"


def build_reddit_context(query: str, subreddit: Optional[str] = None) -> str:
    where = f" in r/{subreddit}" if subreddit else ""
    return (
        f"Search Reddit discussions about {query}{where}. "
        "Find indexed Reddit posts and comments with user opinions, "
        "experiences, and community insights."
    )
