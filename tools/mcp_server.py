# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the weekly dust forecast lookup as a single MCP tool,
#   "getWeeklyDustByDate".  The tool is a thin wrapper around
#   core.dust.get_weekly_dust_report: it logs the call and returns the text.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (the ADK agent in agent/, or any other host) lists
#      the tools and sees getWeeklyDustByDate with its description
#   2. The LLM decides it needs a forecast and calls the tool with a date
#   3. FastMCP routes the call to the decorated function below
#   4. core/ does the HTTP request and formatting; we return its string
#
# RETURN TYPE:
#   The tool returns a plain STRING, not a dict.  Every outcome, including
#   every failure, is already a readable Korean sentence or report, so
#   there is nothing structured left for the agent to unpack.
#
# RUNNING THIS SERVER:
#   a) Standalone (stdio):   python -m tools.mcp_server
#   b) Over HTTP:            MCP_TRANSPORT=http MCP_PORT=8000 python -m tools.mcp_server
#   c) Spawned by the agent via stdio transport (agent/dust_agent.py)
# =============================================================================

import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP

from core.dust import get_weekly_dust_report
from core.settings import load_settings

# Pick up DUST_API_KEY and friends from a local .env, if there is one.
load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# Log to STDERR: with the stdio transport, STDOUT carries the MCP JSON
# messages and any stray log line there corrupts the protocol.
#
# ANSI colours: CYAN for incoming calls, YELLOW for status, GREEN for
# responses.
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the first line of the tool response in GREEN, then return it."""
    first_line = result.splitlines()[0] if result else ""
    logging.info(f"{_GREEN}  ← {tool_name} response: {first_line}{_RESET}")
    return result


# The server identity clients see when they connect.
mcp = FastMCP("weekly-dust-forecast")


# =============================================================================
# TOOL: getWeeklyDustByDate
# =============================================================================
# The description is what the LLM reads to decide WHEN to call the tool and
# HOW to format the argument, so it states the date format explicitly.
# The camelCase tool name is the published contract for existing clients.
# =============================================================================
@mcp.tool(
    name="getWeeklyDustByDate",
    description="날짜로 대기질 전망과 주간예보 정보를 조회합니다. 날짜 형식: yyyy-MM-dd",
)
def get_weekly_dust_by_date(date: str) -> str:
    """Return the weekly fine-dust outlook announced on ``date``.

    Args:
        date: Announcement date, "yyyy-MM-dd" (e.g. "2024-01-01").
              "yyyyMMdd" is accepted too.

    Returns:
        A multi-line report (announcement date, outlook, four daily
        forecasts), a list of dates that do have data, or an error message.
    """
    _log_request("getWeeklyDustByDate", date=date)

    settings = load_settings()
    if not settings.api_key:
        _log_status("DUST_API_KEY is not configured")

    report = get_weekly_dust_report(date, settings)
    return _log_response("getWeeklyDustByDate", report)


def main() -> None:
    """Run the server with the transport chosen in the environment."""
    settings = load_settings()
    if settings.transport == "stdio":
        mcp.run()
    else:
        _log_status(f"Serving over {settings.transport} on {settings.host}:{settings.port}")
        mcp.run(transport=settings.transport, host=settings.host, port=settings.port)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    main()
