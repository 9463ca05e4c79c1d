"""Tests for the agent wiring: prompt and MCP subprocess parameters."""
from datetime import date

from agent.dust_agent import PROJECT_ROOT, server_parameters
from agent.prompt import get_dust_advisor_prompt


class TestPrompt:
    def test_injects_given_date(self):
        prompt = get_dust_advisor_prompt(date(2025, 3, 1))
        assert "TODAY'S DATE: 2025-03-01" in prompt
        assert 'date="2025-03-01"' in prompt

    def test_names_the_tool(self):
        assert "getWeeklyDustByDate" in get_dust_advisor_prompt()


class TestServerParameters:
    def test_launches_server_module_from_project_root(self):
        params = server_parameters()
        assert params.command == "uv"
        assert params.args[-2:] == ["-m", "tools.mcp_server"]
        assert str(params.cwd) == PROJECT_ROOT
        assert params.env is None

    def test_forwards_api_key(self, monkeypatch):
        monkeypatch.setenv("DUST_API_KEY", "test-key")
        params = server_parameters()
        assert params.env == {"DUST_API_KEY": "test-key"}
