# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and core/.  It:
#     1. Imports a plain function from core/
#     2. Registers it under a stable tool name with a description the LLM
#        can act on
#     3. Logs calls and responses to stderr
#
# WHAT TOOLS DO NOT DO:
#   - No HTTP, parsing or formatting (that's core/dust.py)
#   - No knowledge of Google ADK (any MCP host can connect)
# =============================================================================
