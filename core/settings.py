# =============================================================================
# core/settings.py  —  Runtime Configuration
# =============================================================================
#
# Everything configurable lives in environment variables.  The entry points
# (tools/mcp_server.py, main.py) call load_dotenv() first, so a local .env
# file works the same as exported variables.
#
# load_settings() reads the environment at CALL time, not import time.
# That way a key exported after the server module was imported still takes
# effect, and tests can monkeypatch the environment per test.
# =============================================================================

from dataclasses import dataclass
import os


DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"


@dataclass(frozen=True)
class Settings:
    """Configuration for the dust forecast tool and its server."""

    api_key: str | None                # data.go.kr service key (DUST_API_KEY)
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    transport: str = "stdio"           # FastMCP transport
    host: str = "127.0.0.1"            # Only used by network transports
    port: int = 8000
    agent_model: str = DEFAULT_AGENT_MODEL


def _read_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _read_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def load_settings() -> Settings:
    """Build Settings from the current environment.

    Unparseable numbers fall back to their defaults, as does a
    non-positive timeout.
    """
    api_key = os.environ.get("DUST_API_KEY", "").strip() or None
    return Settings(
        api_key=api_key,
        timeout=_read_float("DUST_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
        transport=os.environ.get("MCP_TRANSPORT", "stdio").strip() or "stdio",
        host=os.environ.get("MCP_HOST", "127.0.0.1"),
        port=_read_int("MCP_PORT", 8000),
        agent_model=os.environ.get("DUST_AGENT_MODEL", DEFAULT_AGENT_MODEL),
    )
