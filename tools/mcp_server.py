# =============================================================================
# tools/mcp_server.py - FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines ALL MCP tools the agent host can call.  Each tool is a thin
#   wrapper around a core/ function: it handles parameter defaults, logging
#   and output formatting, nothing else.
#
# THE TOOLS:
#   - getEmailSentCount / getSmsSentCount / getApnSentCount /
#     getWhatsappSentCount   → one channel's sent count as a text line
#   - getAllChannelSentCounts → several channels, one line each
#   - getMauDataByClientName  → dummy MAU lookup (static table, no network)
#
# ONE TABLE, ONE LOOP:
#   The four per-channel tools are identical apart from the channel.  Rather
#   than four hand-written functions, CHANNEL_TOOLS maps each channel literal
#   to a ChannelTool descriptor, and register_tools() walks that table once
#   at startup.
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server
#     b) From an agent host (Cursor, Claude Desktop, agent/analyst_agent.py)
#        via stdio transport
# =============================================================================

import json
import logging
import sys
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from fastmcp import FastMCP

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.channel_report import all_channel_report, channel_report
from core.mau import get_mau_data, list_known_clients
from core.models import (
    CHANNELS,
    DEFAULT_END,
    DEFAULT_START,
    DEFAULT_TIMEZONE,
    Channel,
    ReportWindow,
)

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the host over STDOUT.
# Anything we print to stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result):
    """Log the tool response in GREEN, then return it."""
    if isinstance(result, dict):
        shown = json.dumps(result, separators=(",", ":"))
    else:
        shown = result.replace("\n", " | ")
    logging.info(f"{_GREEN}  ← {tool_name} response: {shown}{_RESET}")
    return result


# =============================================================================
# Tool table
# =============================================================================
@dataclass(frozen=True)
class ChannelTool:
    """Registration details for one per-channel sent-count tool."""

    channel: str
    name: str
    description: str


def _tool_name(channel: str) -> str:
    # "email" → "getEmailSentCount", "whatsapp" → "getWhatsappSentCount"
    return f"get{channel[:1].upper()}{channel[1:]}SentCount"


def _describe(channel: str) -> str:
    label = channel.upper()
    return (
        f"Get the {label} broadcast campaign sent count for a client.\n\n"
        f"Args:\n"
        f"    client_id: Numeric client identifier.\n"
        f"    start: Window start, \"YYYY-MM-DD HH:MM:SS\" (default {DEFAULT_START}).\n"
        f"    end: Window end, \"YYYY-MM-DD HH:MM:SS\" (default {DEFAULT_END}).\n"
        f"    timezone: IANA timezone name (default {DEFAULT_TIMEZONE}).\n\n"
        f"Returns a single line of text with the count, or the reason it "
        f"could not be retrieved."
    )


CHANNEL_TOOLS: dict[str, ChannelTool] = {
    channel: ChannelTool(channel=channel, name=_tool_name(channel), description=_describe(channel))
    for channel in CHANNELS
}


def make_channel_handler(tool: ChannelTool) -> Callable[..., Awaitable[str]]:
    async def get_channel_sent_count(
        client_id: int,
        start: str = DEFAULT_START,
        end: str = DEFAULT_END,
        timezone: str = DEFAULT_TIMEZONE,
    ) -> str:
        _log_request(tool.name, client_id=client_id, start=start, end=end, timezone=timezone)
        window = ReportWindow(start=start, end=end, timezone=timezone)
        text = await channel_report(client_id, tool.channel, window)
        return _log_response(tool.name, text)

    get_channel_sent_count.__name__ = tool.name
    return get_channel_sent_count


# =============================================================================
# Aggregate tool: getAllChannelSentCounts
# =============================================================================
async def get_all_channel_sent_counts(
    client_id: int,
    channels: Optional[list[Channel]] = None,
    start: str = DEFAULT_START,
    end: str = DEFAULT_END,
    timezone: str = DEFAULT_TIMEZONE,
) -> str:
    """Get broadcast sent counts for several channels at once.

    Channels are looked up one after another, in the order given, and the
    result is one line per channel under a header naming the client.

    Args:
        client_id: Numeric client identifier.
        channels: Subset of "email", "sms", "apn", "whatsapp".  Omit to get
            all four.
        start: Window start, "YYYY-MM-DD HH:MM:SS" (default 2025-03-18 00:00:00).
        end: Window end, "YYYY-MM-DD HH:MM:SS" (default 2025-03-18 23:59:59).
        timezone: IANA timezone name (default Asia/Jakarta).
    """
    _log_request("getAllChannelSentCounts", client_id=client_id, channels=channels,
                 start=start, end=end, timezone=timezone)
    window = ReportWindow(start=start, end=end, timezone=timezone)
    text = await all_channel_report(client_id, channels, window)
    return _log_response("getAllChannelSentCounts", text)


# =============================================================================
# Ancillary tool: getMauDataByClientName
# =============================================================================
def get_mau_data_by_client_name(client_name: str) -> dict:
    """Get monthly active users (MAU) for a client by name.

    Args:
        client_name: The client's name, e.g. "dream11".  Case-insensitive.

    Returns:
        {"mau": <number>} for a known client, otherwise {"error": <message>}.
    """
    _log_request("getMauDataByClientName", client_name=client_name)
    result = get_mau_data(client_name)
    if "error" in result:
        _log_status(f"Unknown client. Known: {list_known_clients()}")
    return _log_response("getMauDataByClientName", result)


# =============================================================================
# Registration
# =============================================================================
def register_tools(server: FastMCP) -> FastMCP:
    """Register every tool on ``server`` and return it."""
    for tool in CHANNEL_TOOLS.values():
        server.tool(name=tool.name, description=tool.description)(make_channel_handler(tool))
    server.tool(name="getAllChannelSentCounts")(get_all_channel_sent_counts)
    server.tool(name="getMauDataByClientName")(get_mau_data_by_client_name)
    return server


def create_server() -> FastMCP:
    """Create a FastMCP server with all tools registered."""
    return register_tools(FastMCP("Campaign Sent Count Fetcher"))


mcp = create_server()


# =============================================================================
# Server entry point
# =============================================================================
# python -m tools.mcp_server starts the server on stdio.
# =============================================================================
def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
