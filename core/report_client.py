# =============================================================================
# core/report_client.py - Campaign Summary Report Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds the request body for one (client, channel, time window) lookup and
#   POSTs it to the campaign-summary analytics endpoint.
#
# RETURN CONTRACT:
#   fetch_channel_report() NEVER raises for transport problems.  It returns:
#     - the parsed JSON body, verbatim, on a 2xx response
#     - a ReportFailure carrying the status code on a non-2xx response
#     - a ReportFailure carrying the error message on a network failure
#   Checking whether the body has the shape we want is the extractor's job
#   (core/sent_count.py), not this module's.
#
# ENDPOINT TOGGLE:
#   Set CAMPAIGN_REPORT_URL to point at a different deployment (e.g. a local
#   stub).  Unset, the production load balancer URL below is used.
#
# NO RETRIES, NO CACHE:
#   Exactly one POST per call.  Repeating an identical lookup re-fetches.
#   The timeout is whatever httpx uses by default.
# =============================================================================

import logging
import os
from typing import Optional

import httpx

from core.models import ReportFailure, ReportRequest, ReportResponse

logger = logging.getLogger(__name__)

DEFAULT_REPORT_URL = (
    "http://vertica-csr-348419287.us-east-1.elb.amazonaws.com/v1/campaign-summary-reports"
)


def get_report_url() -> str:
    """Resolve the endpoint, honoring the CAMPAIGN_REPORT_URL override."""
    return os.environ.get("CAMPAIGN_REPORT_URL") or DEFAULT_REPORT_URL


def build_request_body(request: ReportRequest) -> dict:
    """Return the JSON body for a ReportRequest."""
    return request.to_payload()


def _new_client() -> httpx.AsyncClient:
    return httpx.AsyncClient()


async def fetch_channel_report(
    client_id: int,
    channel: str,
    start: str,
    end: str,
    timezone: str,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> ReportResponse:
    """POST one campaign-summary request and return the parsed body or a failure.

    Args:
        client_id: Numeric tenant identifier ("cid").
        channel: One of "email", "sms", "apn", "whatsapp".
        start: Window start, "YYYY-MM-DD HH:MM:SS".
        end: Window end, "YYYY-MM-DD HH:MM:SS".
        timezone: IANA zone name, e.g. "Asia/Jakarta".
        http_client: Optional client to send through.  When omitted a client
            is opened and closed around this one call.

    Returns:
        The decoded JSON body on success, otherwise a ReportFailure.
    """
    request = ReportRequest(
        client_id=client_id,
        channel=channel,
        start=start,
        end=end,
        timezone=timezone,
    )
    body = build_request_body(request)

    # A malformed CAMPAIGN_REPORT_URL surfaces as InvalidURL or a bare
    # ValueError from httpx's URL parser, neither of which is an HTTPError.
    raw_url = get_report_url()
    try:
        url = httpx.URL(raw_url)
    except (httpx.InvalidURL, ValueError) as e:
        logger.warning("Report URL %r is invalid: %s", raw_url, e)
        return ReportFailure(error_message=f"Invalid report URL {raw_url!r}: {e}")

    try:
        if http_client is not None:
            response = await http_client.post(url, json=body)
        else:
            async with _new_client() as client:
                response = await client.post(url, json=body)
    except httpx.HTTPError as e:
        message = str(e) or type(e).__name__
        logger.warning("Report request for cid=%s channel=%s failed: %s", client_id, channel, message)
        return ReportFailure(error_message=message)

    if not response.is_success:
        logger.warning(
            "Report request for cid=%s channel=%s returned HTTP %s",
            client_id, channel, response.status_code,
        )
        return ReportFailure(
            error_message=f"API error: {response.status_code}",
            status_code=response.status_code,
        )

    try:
        return response.json()
    except ValueError as e:
        # json.JSONDecodeError is a ValueError subclass.
        logger.warning("Report response for cid=%s channel=%s is not JSON: %s", client_id, channel, e)
        return ReportFailure(
            error_message=f"Invalid JSON response: {e}",
            status_code=response.status_code,
        )
