"""Tests for core.channel_report: the fetch → extract → format pipeline."""
from __future__ import annotations

import asyncio
import json

import httpx

from core.channel_report import (
    all_channel_report,
    channel_report,
    collect_sent_counts,
    format_aggregate_line,
    format_channel_result,
)
from core.models import ReportWindow, SentCountResult
from core.sent_count import SERIES_MISSING

from tests.payloads import total_sent_body


# ── Formatting ──────────────────────────────────────────────────────────


class TestFormatting:
    def test_channel_success(self):
        text = format_channel_result("email", 55, SentCountResult.found(4821))
        assert text == "✅ EMAIL sent count for client ID 55 is 4821."

    def test_channel_failure(self):
        text = format_channel_result("apn", 9, SentCountResult.failed("Missing total_sent data."))
        assert text == (
            "⚠️ Unable to retrieve APN sent count for client ID 9. "
            "Reason: Missing total_sent data."
        )

    def test_aggregate_lines(self):
        assert format_aggregate_line("email", SentCountResult.found(100)) == "✅ EMAIL: 100"
        assert format_aggregate_line("sms", SentCountResult.failed("x")) == "⚠️ SMS failed. Reason: x"


# ── Single channel ──────────────────────────────────────────────────────


class TestChannelReport:
    def test_success(self, fake_reports):
        fake_reports["responses"]["email"] = httpx.Response(200, json=total_sent_body(4821))
        text = asyncio.run(channel_report(55, "email"))
        assert "EMAIL sent count for client ID 55 is 4821." in text

    def test_empty_body(self, fake_reports):
        fake_reports["responses"]["email"] = httpx.Response(200, json={})
        text = asyncio.run(channel_report(55, "email"))
        assert text.startswith("⚠️ Unable to retrieve EMAIL")
        assert text.endswith(f"Reason: {SERIES_MISSING}")

    def test_http_error(self, fake_reports):
        fake_reports["responses"]["sms"] = httpx.Response(502)
        text = asyncio.run(channel_report(55, "sms"))
        assert text.endswith("Reason: API error: 502")

    def test_window_is_sent(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            return httpx.Response(200, json=total_sent_body(1))

        window = ReportWindow(start="2025-01-01 00:00:00", end="2025-01-31 23:59:59", timezone="UTC")

        async def run():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await channel_report(3, "apn", window, http_client=client)

        asyncio.run(run())
        assert seen[0]["cid"] == 3
        assert seen[0]["input"]["start"] == "2025-01-01 00:00:00"
        assert seen[0]["input"]["end"] == "2025-01-31 23:59:59"
        assert seen[0]["input"]["tz"] == "UTC"


# ── Aggregate ───────────────────────────────────────────────────────────


class TestAllChannelReport:
    def test_mixed_results_in_order(self, fake_reports):
        fake_reports["responses"]["email"] = httpx.Response(200, json=total_sent_body(100))
        fake_reports["responses"]["sms"] = httpx.Response(200, json={"data": []})

        text = asyncio.run(all_channel_report(55, ["email", "sms"]))

        assert text.splitlines() == [
            "📦 Sent counts for client ID 55:",
            "✅ EMAIL: 100",
            f"⚠️ SMS failed. Reason: {SERIES_MISSING}",
        ]

    def test_defaults_to_all_channels(self, fake_reports):
        text = asyncio.run(all_channel_report(55))
        assert fake_reports["calls"] == ["email", "sms", "apn", "whatsapp"]
        assert len(text.splitlines()) == 5

    def test_empty_subset_means_all(self, fake_reports):
        asyncio.run(all_channel_report(55, []))
        assert fake_reports["calls"] == ["email", "sms", "apn", "whatsapp"]

    def test_caller_order_is_kept(self, fake_reports):
        text = asyncio.run(all_channel_report(55, ["whatsapp", "email"]))
        assert fake_reports["calls"] == ["whatsapp", "email"]
        lines = text.splitlines()
        assert lines[1].startswith("⚠️ WHATSAPP")
        assert lines[2].startswith("⚠️ EMAIL")

    def test_one_failure_does_not_stop_the_rest(self, fake_reports):
        def boom(request):
            raise httpx.ConnectError("connection reset", request=request)

        fake_reports["responses"]["sms"] = boom
        fake_reports["responses"]["apn"] = httpx.Response(200, json=total_sent_body(3))

        text = asyncio.run(all_channel_report(55, ["sms", "apn"]))
        assert text.splitlines()[1:] == [
            "⚠️ SMS failed. Reason: connection reset",
            "✅ APN: 3",
        ]

    def test_lookups_never_overlap(self):
        in_flight = 0
        peak = 0

        async def handler(request: httpx.Request) -> httpx.Response:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return httpx.Response(200, json=total_sent_body(1))

        async def run():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await collect_sent_counts(55, ["email", "sms", "apn"], http_client=client)

        results = asyncio.run(run())
        assert peak == 1
        assert [channel for channel, _ in results] == ["email", "sms", "apn"]
        assert all(result.value == 1 for _, result in results)
