# =============================================================================
# agent/__init__.py
# =============================================================================
# The Google ADK agent that fronts the dust forecast tool.
#
# ARCHITECTURAL ROLE:
#   The agent turns a free-form question ("이번 주 서울 미세먼지 어때?") into
#   a tool call with a concrete date, then explains the result.  It does not
#   fetch or parse anything itself; that's tools/ and core/.
# =============================================================================
