# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the sent-count tool server:
# the analytics report client, the sent-count extractor, the per-channel and
# aggregate report pipeline, and the dummy MAU table.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The only third-party import is httpx, for the one outbound
#   call.  Extraction and formatting are pure and testable offline.
# =============================================================================
