"""Shared fixtures: upstream payloads and settings."""
import json

import pytest

from core.settings import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Start every test without dust-related variables from the host."""
    for name in ("DUST_API_KEY", "DUST_API_TIMEOUT", "MCP_TRANSPORT", "MCP_HOST",
                 "MCP_PORT", "DUST_AGENT_MODEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(api_key="test-key", timeout=3.0)


@pytest.fixture
def forecast_item():
    return {
        "presnatnDt": "2024-01-01",
        "gwthcnd": "대기 정체로 전 권역에서 농도가 다소 높을 것으로 예상됩니다.",
        "frcstOneDt": "2024-01-02",
        "frcstOneCn": "서울 : 높음, 인천 : 높음, 경기북부 : 높음",
        "frcstTwoDt": "2024-01-03",
        "frcstTwoCn": "서울 : 낮음, 인천 : 낮음, 경기북부 : 낮음",
        "frcstThreeDt": "2024-01-04",
        "frcstThreeCn": "서울 : 낮음, 인천 : 낮음, 경기북부 : 낮음",
        "frcstFourDt": "2024-01-05",
        "frcstFourCn": "서울 : 낮음, 인천 : 낮음, 경기북부 : 낮음",
    }


def make_payload(items, total_count=None, result_code="00", result_msg="NORMAL_CODE"):
    """Build an upstream JSON body in the data.go.kr envelope."""
    body = {
        "totalCount": len(items) if total_count is None else total_count,
        "items": items,
        "pageNo": 1,
        "numOfRows": 100,
    }
    return json.dumps({
        "response": {
            "header": {"resultCode": result_code, "resultMsg": result_msg},
            "body": body,
        }
    }, ensure_ascii=False)


@pytest.fixture
def payload():
    return make_payload
