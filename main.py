# =============================================================================
# main.py - Command Line for the Campaign Sent-Count Tools
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py report --client-id 55 --channel email --channel sms
#   uv run python main.py mau dream11
#   uv run python main.py ask "How many WhatsApp messages did client 55 send?"
#
# WHAT EACH COMMAND DOES:
#   report  Calls the same coroutines the MCP tools run, without an MCP host.
#           One --channel gives the single-channel line; none or several give
#           the aggregate block.
#   mau     Prints the dummy MAU lookup as JSON.
#   ask     One question, one answer, through the ADK agent in
#           agent/analyst_agent.py (needs OPENROUTER_API_KEY).  The agent
#           spawns tools/mcp_server.py over stdio, so this path exercises the
#           real MCP transport.
#
# To serve the tools to Cursor or another MCP host, run
#   python -m tools.mcp_server
# instead.
# =============================================================================

import asyncio
import json

import click
from dotenv import load_dotenv

from core.models import CHANNELS, DEFAULT_END, DEFAULT_START, DEFAULT_TIMEZONE
from tools.mcp_server import (
    CHANNEL_TOOLS,
    get_all_channel_sent_counts,
    get_mau_data_by_client_name,
    make_channel_handler,
)

APP_NAME = "campaign_analyst"
USER_ID = "cli_user"


@click.group()
def cli() -> None:
    """Look up campaign sent counts from the command line."""
    # .env may carry CAMPAIGN_REPORT_URL, OPENROUTER_API_KEY, AGENT_MODEL.
    load_dotenv()


@cli.command()
@click.option("--client-id", required=True, type=int, help="Numeric client identifier.")
@click.option(
    "--channel", "channels", multiple=True, type=click.Choice(CHANNELS),
    help="Channel to report on; repeat for several.  Default: all four.",
)
@click.option("--start", default=DEFAULT_START, show_default=True)
@click.option("--end", default=DEFAULT_END, show_default=True)
@click.option("--timezone", default=DEFAULT_TIMEZONE, show_default=True)
def report(client_id: int, channels: tuple[str, ...], start: str, end: str, timezone: str) -> None:
    """Print sent counts for one or more channels."""
    if len(channels) == 1:
        handler = make_channel_handler(CHANNEL_TOOLS[channels[0]])
        text = asyncio.run(handler(client_id, start=start, end=end, timezone=timezone))
    else:
        text = asyncio.run(get_all_channel_sent_counts(
            client_id, list(channels) or None, start=start, end=end, timezone=timezone,
        ))
    click.echo(text)


@cli.command()
@click.argument("client_name")
def mau(client_name: str) -> None:
    """Print the MAU lookup for CLIENT_NAME as JSON."""
    result = get_mau_data_by_client_name(client_name)
    click.echo(json.dumps(result))
    if "error" in result:
        raise SystemExit(1)


def final_text(events) -> str:
    """Return the last text part the agent produced in an event stream.

    Tool calls seen along the way are echoed so the user can follow which
    lookups the agent made.
    """
    answer = ""
    for event in events:
        content = getattr(event, "content", None)
        if not content or not content.parts:
            continue
        for part in content.parts:
            if getattr(part, "function_call", None):
                click.echo(f"  🔧 {part.function_call.name}", err=True)
            if getattr(part, "text", None):
                answer = part.text
    return answer


async def _ask(question: str) -> list:
    # ADK is only needed for this command; keep `report` and `mau` light.
    from google.adk.runners import Runner
    from google.adk.sessions import InMemorySessionService
    from google.genai import types

    from agent.analyst_agent import create_agent

    session_service = InMemorySessionService()
    runner = Runner(agent=create_agent(), app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    message = types.Content(role="user", parts=[types.Part(text=question)])
    return [
        event
        async for event in runner.run_async(
            user_id=USER_ID, session_id=session.id, new_message=message,
        )
    ]


@cli.command()
@click.argument("question")
def ask(question: str) -> None:
    """Ask the ADK agent one QUESTION about sent counts."""
    answer = final_text(asyncio.run(_ask(question)))
    if not answer:
        click.echo("⚠️ No response generated.", err=True)
        raise SystemExit(1)
    click.echo(answer)


if __name__ == "__main__":
    cli()
