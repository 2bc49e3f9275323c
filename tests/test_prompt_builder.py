from datetime import date

from core.models import Focus, SearchRequest
from core.prompt_builder import (
    CLOSING_INSTRUCTIONS,
    FOCUS_INSTRUCTIONS,
    build_prompt,
    current_date,
    focus_instructions,
)

TODAY = date(2025, 7, 10)


def test_query_only_prompt_has_header_date_and_default_block():
    prompt = build_prompt(SearchRequest(query="rust async runtimes"), today=TODAY)

    assert prompt.startswith("Search for current, accurate information about: rust async runtimes")
    assert "Current date: 2025-07-10" in prompt
    assert FOCUS_INSTRUCTIONS[Focus.GENERAL] in prompt
    assert "Context:" not in prompt
    assert "Programming Language:" not in prompt
    assert "Framework/Library:" not in prompt
    assert prompt.endswith(CLOSING_INSTRUCTIONS)


def test_sections_appear_in_order():
    request = SearchRequest(
        query="q",
        context="ctx",
        focus=Focus.DOCUMENTATION,
        language="Python",
        framework="FastAPI",
    )
    prompt = build_prompt(request, today=TODAY)

    positions = [
        prompt.index("Search for current"),
        prompt.index("Current date: 2025-07-10"),
        prompt.index("Context: ctx"),
        prompt.index("Programming Language: Python"),
        prompt.index("Framework/Library: FastAPI"),
        prompt.index(FOCUS_INSTRUCTIONS[Focus.DOCUMENTATION]),
        prompt.index("Please provide:"),
    ]
    assert positions == sorted(positions)
    assert "Programming Language: Python\nFramework/Library: FastAPI" in prompt


def test_framework_without_language():
    prompt = build_prompt(SearchRequest(query="q", framework="Django"), today=TODAY)

    assert "Framework/Library: Django" in prompt
    assert "Programming Language:" not in prompt


def test_focus_blocks_are_mutually_exclusive():
    for focus, block in FOCUS_INSTRUCTIONS.items():
        prompt = build_prompt(SearchRequest(query="q", focus=focus), today=TODAY)
        assert block in prompt
        for other, other_block in FOCUS_INSTRUCTIONS.items():
            if other is not focus:
                assert other_block not in prompt


def test_code_focus_block_content():
    prompt = build_prompt(SearchRequest(query="q", focus=Focus.CODE), today=TODAY)

    assert "Code examples and implementations" in prompt
    assert "Official documentation and API references" not in prompt
    assert "Common issues and solutions" not in prompt


def test_every_focus_has_a_block():
    assert set(FOCUS_INSTRUCTIONS) == set(Focus)


def test_unrecognized_focus_falls_back_to_general():
    assert focus_instructions(None) == FOCUS_INSTRUCTIONS[Focus.GENERAL]
    assert focus_instructions("nonsense") == FOCUS_INSTRUCTIONS[Focus.GENERAL]
    assert focus_instructions("troubleshooting") == FOCUS_INSTRUCTIONS[Focus.TROUBLESHOOTING]


def test_empty_context_is_omitted():
    prompt = build_prompt(SearchRequest(query="q", context=""), today=TODAY)

    assert "Context:" not in prompt


def test_default_date_is_current_utc_date():
    prompt = build_prompt(SearchRequest(query="q"))

    assert f"Current date: {current_date().isoformat()}" in prompt


def test_same_request_and_date_give_same_prompt():
    request = SearchRequest(query="q", context="c", focus=Focus.CODE)

    assert build_prompt(request, today=TODAY) == build_prompt(request, today=TODAY)
