# =============================================================================
# core/sent_count.py - Sent-Count Extraction
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns whatever the report client returned into a SentCountResult: either
#   the numeric "total_sent" value, or a human-readable reason it isn't there.
#
# THE SHAPE WE EXPECT:
#
#   {
#     "data": [
#       {
#         "series": [
#           {"name": "total_sent", "data": [4821]},
#           ...
#         ]
#       }
#     ]
#   }
#
# TWO STEPS:
#   1. parse_report()        →  SeriesFound(series) | ShapeError(reason)
#   2. extract_sent_count()  →  find "total_sent", take data[0]
#
#   Both are pure functions.  Same input, same output, no I/O.
#
# DUPLICATE "total_sent" ENTRIES:
#   The first matching entry wins.  Later duplicates are ignored, not summed.
# =============================================================================

from numbers import Number

from core.models import (
    ParsedReport,
    ReportFailure,
    ReportResponse,
    SentCountResult,
    SeriesFound,
    ShapeError,
)

SERIES_MISSING = "series array is missing or not in expected format."
TOTAL_SENT_NOT_FOUND = "total_sent not found or data array missing."
TOTAL_SENT_EMPTY = "Missing total_sent data."

TOTAL_SENT = "total_sent"


def parse_report(response: ReportResponse) -> ParsedReport:
    """Locate ``response["data"][0]["series"]``.

    A ReportFailure passes its own message through as the reason so the
    transport error reaches the user instead of a generic shape complaint.
    """
    if isinstance(response, ReportFailure):
        return ShapeError(response.error_message)

    if not isinstance(response, dict):
        return ShapeError(SERIES_MISSING)

    data = response.get("data")
    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        return ShapeError(SERIES_MISSING)

    series = data[0].get("series")
    if not isinstance(series, list):
        return ShapeError(SERIES_MISSING)

    return SeriesFound(series)


def _find_total_sent(series: list):
    for entry in series:
        if isinstance(entry, dict) and entry.get("name") == TOTAL_SENT:
            return entry
    return None


def extract_sent_count(response: ReportResponse) -> SentCountResult:
    """Extract the first ``total_sent`` value from an analytics response.

    Args:
        response: The parsed JSON body, or a ReportFailure.

    Returns:
        SentCountResult.found(value) when total_sent.data[0] is a number,
        otherwise SentCountResult.failed(reason).
    """
    parsed = parse_report(response)
    if isinstance(parsed, ShapeError):
        return SentCountResult.failed(parsed.reason)

    entry = _find_total_sent(parsed.series)
    if entry is None or not isinstance(entry.get("data"), list):
        return SentCountResult.failed(TOTAL_SENT_NOT_FOUND)

    values = entry["data"]
    value = values[0] if values else None
    if value is None:
        return SentCountResult.failed(TOTAL_SENT_EMPTY)

    # bool is a Number subclass; a true/false "count" is a malformed body.
    if isinstance(value, bool) or not isinstance(value, Number):
        return SentCountResult.failed(
            f"Error parsing response: total_sent value {value!r} is not a number"
        )

    return SentCountResult.found(value)
