# =============================================================================
# agent/dust_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the ADK agent that answers dust-forecast questions.  The agent
#   owns no logic of its own: it has a system prompt, an LLM (via LiteLlm),
#   and one MCP connection to tools/mcp_server.py.
#
#   ┌──────────────────────┐   stdio (MCP)   ┌──────────────────────────┐
#   │  ADK Agent           │ ──────────────▶ │  FastMCP server          │
#   │  prompt + LiteLlm    │                 │  getWeeklyDustByDate     │
#   └──────────────────────┘                 └────────────┬─────────────┘
#                                                         │
#                                                         ▼
#                                              core/dust.py → data.go.kr
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess and talks to it over stdin/stdout.
#   The MCP stdio client only passes a minimal environment (PATH, HOME, ...)
#   to the subprocess, so DUST_API_KEY is forwarded explicitly.  The working
#   directory is the project root so the server's load_dotenv() finds .env.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_dust_advisor_prompt
from core.settings import load_settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Environment variables the tool server needs from the parent process.
_FORWARDED_ENV = ("DUST_API_KEY", "DUST_API_TIMEOUT")


def server_parameters() -> StdioServerParameters:
    """Describe how to launch the tool server as a stdio subprocess.

    "uv run" makes the subprocess use the project's .venv, so fastmcp and
    the core/ package are importable without manual activation.
    """
    env = {name: os.environ[name] for name in _FORWARDED_ENV if os.environ.get(name)}
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
        env=env or None,
    )


def create_agent() -> Agent:
    """Create and configure the dust forecast agent.

    The model string comes from DUST_AGENT_MODEL (default
    "openrouter/openai/gpt-4o").  LiteLlm reads the provider key, e.g.
    OPENROUTER_API_KEY, from the environment.

    Returns:
        A configured Google ADK Agent instance.
    """
    settings = load_settings()

    mcp_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="weekly_dust_advisor",
        model=LiteLlm(model=settings.agent_model),
        instruction=get_dust_advisor_prompt(),
        tools=[mcp_tools],
    )
