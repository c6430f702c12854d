# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between the MCP host and core/.  It:
#     1. Declares the tool names and typed parameters the host sees
#     2. Fills in default date windows
#     3. Logs every call and response to stderr
#     4. Delegates the actual work to core/
#
#   Tool names and docstrings matter: the host's LLM reads them to decide
#   which tool to call and what to pass.
# =============================================================================
