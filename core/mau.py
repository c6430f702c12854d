# =============================================================================
# core/mau.py - Dummy MAU (Monthly Active Users) Lookup
# =============================================================================
#
# A static table keyed by lower-cased client name.  No network call.
#
# This sits next to the sent-count pipeline only because it is exposed on the
# same tool server.  It has nothing to do with the analytics endpoint.
# =============================================================================

_MOCK_MAU: dict[str, int] = {
    "dream11": 14050600,
    "myntra": 8130000,
}

MAU_NOT_FOUND = "Unable to get MAU data for the specified client."


def get_mau_data(client_name: str) -> dict:
    """Return ``{"mau": n}`` for a known client, or ``{"error": ...}``.

    The lookup is case-insensitive: "Dream11" and "dream11" are the same client.
    """
    mau = _MOCK_MAU.get(client_name.strip().lower())
    if mau is None:
        return {"error": MAU_NOT_FOUND}
    return {"mau": mau}


def list_known_clients() -> list[str]:
    """List the client names the dummy table knows about."""
    return list(_MOCK_MAU.keys())
