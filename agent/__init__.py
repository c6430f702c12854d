# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains an optional Google ADK console agent.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is a stand-in for an external MCP host.  It:
#     1. Receives a question ("How many emails did client 55 send?")
#     2. Calls the sent-count tools over MCP
#     3. Presents the tool output to the user
#
#   It holds no business logic (that's in core/) and no tool code (that's in
#   tools/).  The tool server never imports anything from here.
# =============================================================================
