# =============================================================================
# main.py  —  Entry Point for the Developer Research Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/research_agent.py)
#   2. The agent starts the grounded-search MCP server as a subprocess
#   3. You type a developer question
#   4. The agent picks a search tool, Gemini answers with Google Search
#      grounding, and the cited answer is printed
#
# To use the tools from another MCP client instead (Claude Desktop, an IDE),
# skip this file and point the client at:  python -m tools.mcp_server
#
# ENVIRONMENT (.env is loaded automatically):
#   GEMINI_API_KEY      — required by the tool server
#   AGENT_MODEL         — reasoning model (default openrouter/openai/gpt-4o)
#   OPENROUTER_API_KEY  — needed when AGENT_MODEL is an openrouter/ model
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load .env BEFORE creating the agent: LiteLlm and the MCP subprocess both
# read their keys from the environment.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.research_agent import create_agent

APP_NAME = "developer_research"
USER_ID = "developer"


async def run_agent():
    """Run the research agent in an interactive console loop."""

    print("=" * 70)
    print("  DEVELOPER RESEARCH AGENT")
    print("  Powered by Google ADK + FastMCP + Gemini Search Grounding")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask a programming or technology question.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is researching...\n")
        print("-" * 70)

        # Events stream in as the agent works: tool calls first, then the
        # final text.  Only the last text part is the answer.
        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔎 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
