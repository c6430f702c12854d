# =============================================================================
# core/models.py - Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through a sent-count lookup: the request we send to the analytics service,
# the failure we get back when the call goes wrong, and the extracted result
# the tool formats for the agent.
#
# All of them are frozen.  A request, a failure, or a result is created once
# per tool invocation and discarded after formatting; nothing mutates them.
#
# THE ParsedReport SUM TYPE:
#   The analytics response is opaque nested JSON.  Instead of poking through it
#   with chained lookups and catching whatever blows up, we first parse it into
#   exactly one of two shapes:
#     - SeriesFound(series)  →  data[0].series exists and is a list
#     - ShapeError(reason)   →  anything else, with a human-readable reason
#   Every failure path is then an explicit branch.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Union


# -----------------------------------------------------------------------------
# Channels
# -----------------------------------------------------------------------------
# The order of CHANNELS is the order the aggregate tool reports in when the
# caller does not pick a subset.
# -----------------------------------------------------------------------------
Channel = Literal["email", "sms", "apn", "whatsapp"]

CHANNELS: tuple[str, ...] = ("email", "sms", "apn", "whatsapp")

CAMPAIGN_TYPE = "broadcast"


# -----------------------------------------------------------------------------
# ReportWindow: the time range a lookup covers
# -----------------------------------------------------------------------------
# The defaults are a fixed illustrative window: one day in Jakarta time.
# Strings are passed through to the analytics service as-is.
# -----------------------------------------------------------------------------
DEFAULT_START = "2025-03-18 00:00:00"
DEFAULT_END = "2025-03-18 23:59:59"
DEFAULT_TIMEZONE = "Asia/Jakarta"


@dataclass(frozen=True)
class ReportWindow:
    """A date-time range ("YYYY-MM-DD HH:MM:SS") in an IANA timezone."""

    start: str = DEFAULT_START
    end: str = DEFAULT_END
    timezone: str = DEFAULT_TIMEZONE


DEFAULT_WINDOW = ReportWindow()


# -----------------------------------------------------------------------------
# ReportRequest: one POST to the campaign-summary endpoint
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ReportRequest:
    """Everything needed to ask the analytics service for one channel's sent count."""

    client_id: int                     # "cid" on the wire
    channel: str                       # one of CHANNELS
    start: str                         # "2025-03-18 00:00:00"
    end: str                           # "2025-03-18 23:59:59"
    timezone: str                      # "Asia/Jakarta"
    campaign_type: str = CAMPAIGN_TYPE

    def to_payload(self) -> dict:
        """Render the fixed-shape request body.

        The channel appears twice: once in ``input.combinations`` (what to
        filter on) and once in ``output.channel`` (what to report on).
        """
        return {
            "cid": self.client_id,
            "input": {
                "start": self.start,
                "end": self.end,
                "tz": self.timezone,
                "campaign_type": self.campaign_type,
                "tags": [],
                "combinations": [{"channel": self.channel, "msgid": []}],
            },
            "output": {
                "channel": [self.channel],
                "categories": ["d"],
                "total": ["sent"],
            },
        }


# -----------------------------------------------------------------------------
# ReportFailure: the transport went wrong
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ReportFailure:
    """A failed analytics call: non-2xx status or a network-level error."""

    error_message: str
    status_code: Optional[int] = None  # None for network-level failures


# Parsed JSON body on success (returned verbatim), or a ReportFailure.
ReportResponse = Union[ReportFailure, Any]


# -----------------------------------------------------------------------------
# ParsedReport: SeriesFound | ShapeError
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SeriesFound:
    """The response had a ``data[0].series`` list."""

    series: list = field(default_factory=list)


@dataclass(frozen=True)
class ShapeError:
    """The response did not have the shape we need."""

    reason: str


ParsedReport = Union[SeriesFound, ShapeError]


# -----------------------------------------------------------------------------
# SentCountResult: what the tool layer formats
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SentCountResult:
    """Either a sent count or the reason there isn't one, never both."""

    value: Optional[Union[int, float]] = None
    reason: Optional[str] = None

    def __post_init__(self):
        if (self.value is None) == (self.reason is None):
            raise ValueError(
                "SentCountResult needs exactly one of value or reason, "
                f"got value={self.value!r}, reason={self.reason!r}"
            )

    @classmethod
    def found(cls, value: Union[int, float]) -> "SentCountResult":
        return cls(value=value)

    @classmethod
    def failed(cls, reason: str) -> "SentCountResult":
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.value is not None
