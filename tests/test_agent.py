from datetime import date

from agent.prompt import get_research_agent_prompt
from agent.research_agent import resolve_model


def test_prompt_injects_date_and_names_every_tool():
    prompt = get_research_agent_prompt(today=date(2025, 7, 10))

    assert "TODAY'S DATE: 2025-07-10" in prompt
    for tool_name in (
        "search_with_grounding",
        "search_developer_resources",
        "search_documentation",
        "search_reddit",
    ):
        assert tool_name in prompt


def test_bare_gemini_model_is_passed_through():
    assert resolve_model("gemini-2.5-flash") == "gemini-2.5-flash"


def test_provider_prefixed_model_uses_litellm():
    model = resolve_model("openrouter/openai/gpt-4o")

    assert not isinstance(model, str)
    assert model.model == "openrouter/openai/gpt-4o"
