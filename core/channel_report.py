# =============================================================================
# core/channel_report.py - Per-Channel & Aggregate Sent-Count Reports
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Composes the report client and the extractor into the pipeline every
#   sent-count tool runs:
#
#       fetch_channel_report(...)  →  extract_sent_count(...)  →  text
#
#   and formats the result into the lines the agent sees.
#
# STRICTLY SEQUENTIAL:
#   The aggregate report awaits each channel's lookup before starting the
#   next one.  Total latency grows linearly with the number of channels.
#   There is no asyncio.gather() fan-out here.
#
# NEVER RAISES FOR BAD DATA:
#   Transport, shape and value failures all come back as a SentCountResult
#   with a reason, and every one of them is formatted as a warning line.
# =============================================================================

from typing import Iterable, Optional

import httpx

from core.models import CHANNELS, DEFAULT_WINDOW, ReportWindow, SentCountResult
from core.report_client import fetch_channel_report
from core.sent_count import extract_sent_count

_OK = "✅"
_WARN = "⚠️"
_BOX = "📦"


async def fetch_sent_count(
    client_id: int,
    channel: str,
    window: ReportWindow = DEFAULT_WINDOW,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> SentCountResult:
    """Run one channel through the fetch → extract pipeline."""
    response = await fetch_channel_report(
        client_id,
        channel,
        window.start,
        window.end,
        window.timezone,
        http_client=http_client,
    )
    return extract_sent_count(response)


def format_channel_result(channel: str, client_id: int, result: SentCountResult) -> str:
    """Format a single-channel tool response.

    >>> format_channel_result("email", 55, SentCountResult.found(4821))
    '✅ EMAIL sent count for client ID 55 is 4821.'
    """
    label = channel.upper()
    if result.ok:
        return f"{_OK} {label} sent count for client ID {client_id} is {result.value}."
    return (
        f"{_WARN} Unable to retrieve {label} sent count for client ID {client_id}. "
        f"Reason: {result.reason}"
    )


def format_aggregate_line(channel: str, result: SentCountResult) -> str:
    """Format one line of the multi-channel report."""
    label = channel.upper()
    if result.ok:
        return f"{_OK} {label}: {result.value}"
    return f"{_WARN} {label} failed. Reason: {result.reason}"


async def channel_report(
    client_id: int,
    channel: str,
    window: ReportWindow = DEFAULT_WINDOW,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Fetch and format one channel's sent count."""
    result = await fetch_sent_count(client_id, channel, window, http_client=http_client)
    return format_channel_result(channel, client_id, result)


async def collect_sent_counts(
    client_id: int,
    channels: Iterable[str],
    window: ReportWindow = DEFAULT_WINDOW,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> list[tuple[str, SentCountResult]]:
    """Look up each channel in order, one at a time.

    Returns:
        (channel, result) pairs in the order the channels were given.
    """
    results = []
    for channel in channels:
        result = await fetch_sent_count(client_id, channel, window, http_client=http_client)
        results.append((channel, result))
    return results


async def all_channel_report(
    client_id: int,
    channels: Optional[Iterable[str]] = None,
    window: ReportWindow = DEFAULT_WINDOW,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Build the aggregate report: a header line, then one line per channel.

    Args:
        client_id: Numeric tenant identifier.
        channels: Channels to report on, in output order.  None or empty
            means every supported channel in canonical order.
        window: The time range to query.
        http_client: Optional shared client for all lookups.

    Returns:
        A newline-joined text block.
    """
    selected = list(channels) if channels else list(CHANNELS)
    results = await collect_sent_counts(client_id, selected, window, http_client=http_client)

    lines = [f"{_BOX} Sent counts for client ID {client_id}:"]
    lines.extend(format_aggregate_line(channel, result) for channel, result in results)
    return "\n".join(lines)
