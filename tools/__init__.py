# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP tool wrappers for the ID reader.
#
# Each tool:
#   1. Uses the server's NamespaceStore
#   2. Calls into core/
#   3. Returns formatted text, or raises a ToolError "[<kind>] <message>"
#
# Business logic stays in core/.
# =============================================================================
