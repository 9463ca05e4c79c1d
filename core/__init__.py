# =============================================================================
# core/__init__.py
# =============================================================================
# Business logic for the weekly dust forecast tool.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The tool server and the agent wrap these functions; the
#   functions themselves run (and are tested) in a bare Python process.
# =============================================================================
