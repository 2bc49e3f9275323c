import pytest

from fakes import FakeSearcher


@pytest.fixture
def searcher():
    return FakeSearcher(answer="grounded answer")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings variables so tests don't pick up a developer's own values."""
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "GROUNDING_SERVER_NAME", "LOG_LEVEL", "AGENT_MODEL"):
        monkeypatch.delenv(name, raising=False)
