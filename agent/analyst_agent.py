# =============================================================================
# agent/analyst_agent.py - Google ADK Console Agent (with a LiteLlm model)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates a Google ADK agent that answers sent-count questions by calling
#   the tools in tools/mcp_server.py.
#
# YOU DON'T NEED THIS TO USE THE TOOLS:
#   The tool server works with any MCP host (Cursor, Claude Desktop, ...).
#   This agent is the in-repo console for trying the tools out without one.
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess ("uv run python -m
#   tools.mcp_server") and talks to it over stdin/stdout.  The tools are
#   discovered automatically.
#
# MODEL:
#   LiteLlm routes to any provider.  The default goes through OpenRouter and
#   reads OPENROUTER_API_KEY from the environment.  Override the model string
#   with AGENT_MODEL, e.g. AGENT_MODEL="openrouter/openai/gpt-4o-mini".
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_campaign_analyst_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def get_model_name() -> str:
    return os.environ.get("AGENT_MODEL") or DEFAULT_MODEL


def tool_server_params() -> StdioServerParameters:
    """How ADK should spawn the tool server.

    "uv run" makes the subprocess use the project's .venv, so fastmcp and
    the core/ package are importable without activating anything.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        cwd=project_root,
    )


def create_agent() -> Agent:
    """Create the campaign analytics agent.

    Returns:
        A configured Google ADK Agent with the sent-count tool server attached.
    """
    mcp_tools = MCPToolset(connection_params=tool_server_params())

    return Agent(
        name="campaign_analyst",
        model=LiteLlm(model=get_model_name()),
        instruction=get_campaign_analyst_prompt(),
        tools=[mcp_tools],
    )
