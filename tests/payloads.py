"""Canned campaign-summary response bodies shared by the test modules."""


def total_sent_body(value) -> dict:
    """A campaign-summary response with a single total_sent series."""
    return {"data": [{"series": [{"name": "total_sent", "data": [value]}]}]}
