# =============================================================================
# core/dust.py  —  Weekly Fine-Dust Forecast Lookup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Looks up AirKorea's weekly PM10/PM2.5 outlook for a given announcement
#   date and turns it into a short Korean text report an agent can relay to
#   a user as-is.
#
# HOW IT WORKS (the flow):
#   1. normalize_date()      "20240101" -> "2024-01-01"
#   2. build_request_url()   fixed endpoint + fixed query parameters
#   3. fetch()               one blocking GET, error statuses included
#   4. interpret_response()  classify the body, format the report
#
# ERROR CONTRACT:
#   get_weekly_dust_report() NEVER raises.  Every failure (no key, network
#   down, HTML error page, upstream error code, empty dataset) comes back
#   as a human-readable string.
# =============================================================================

import json
import logging
import re
import sys
from typing import Any
from urllib.error import HTTPError
from urllib.parse import quote
import urllib.request

from core.models import FetchResult, WeeklyDustForecast, field_text
from core.settings import Settings, load_settings

logger = logging.getLogger(__name__)


ENDPOINT = (
    "https://apis.data.go.kr/B552584/ArpltnInforInqireSvc/getMinuDustWeekFrcstDspth"
)

_REQUEST_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "Mozilla/5.0",
}

_COMPACT_DATE = re.compile(r"[0-9]{8}")

# --- Messages returned to the caller ---
MSG_MISSING_KEY = "API 키가 설정되지 않았습니다. DUST_API_KEY 환경 변수를 확인하세요."
MSG_NOT_JSON = "API에서 JSON이 아닌 응답을 반환했습니다. (예: 인증 오류, 서버 오류 등)\n응답 내용: "
MSG_NO_BODY = "API 응답에 body 정보가 없습니다."
MSG_NO_ITEMS = "API 응답에 items 정보가 없습니다."
MSG_NO_DATA = "해당 날짜에 대한 미세먼지 주간예보 데이터가 없습니다."


def normalize_date(date: str) -> str:
    """Turn ``yyyyMMdd`` into ``yyyy-MM-dd``; leave anything else alone.

    Nothing beyond that is validated.  A malformed date goes to the API
    untouched and whatever it answers is reported back.
    """
    if _COMPACT_DATE.fullmatch(date):
        return f"{date[:4]}-{date[4:6]}-{date[6:8]}"
    return date


def build_request_url(date: str, api_key: str) -> str:
    # data.go.kr hands out keys that are already URL-encoded, so the key is
    # appended verbatim.  Encoding it again breaks authentication.
    return (
        f"{ENDPOINT}"
        f"?serviceKey={api_key}"
        f"&returnType=json"
        f"&numOfRows=100"
        f"&pageNo=1"
        f"&searchDate={quote(normalize_date(date), safe='-')}"
    )


def fetch(url: str, timeout: float) -> FetchResult:
    """Perform one GET and return the status with the decoded body.

    HTTP error statuses are returned, not raised, so the caller can show
    the upstream error body.  Connection failures and timeouts propagate.
    """
    req = urllib.request.Request(url, headers=_REQUEST_HEADERS, method="GET")
    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            return FetchResult(
                status=response.status,
                body=response.read().decode("utf-8", errors="replace"),
            )
    except HTTPError as error:
        raw = error.read() if error.fp is not None else b""
        error.close()
        return FetchResult(status=error.code, body=raw.decode("utf-8", errors="replace"))


def format_forecast(forecast: WeeklyDustForecast) -> str:
    """Render one forecast as the five-section text report."""
    sections = [
        f"📅 발표일: {forecast.announced_at}",
        f"🔹 예보문: {forecast.outlook}",
    ]
    for day in forecast.days:
        sections.append(f"[{day.offset}일 후 예보 - {day.date}]\n{day.text}")
    return "\n\n".join(sections) + "\n"


def format_available_dates(items: list[Any]) -> str:
    lines = [MSG_NO_DATA, "[조회 가능 날짜 목록]"]
    for item in items:
        announced = field_text(item, "presnatnDt", "날짜 정보 없음") if isinstance(item, dict) else "날짜 정보 없음"
        lines.append(f"- {announced}")
    return "\n".join(lines) + "\n"


def _as_object(node: Any) -> dict[str, Any]:
    return node if isinstance(node, dict) else {}


def _as_items(node: Any) -> list[Any]:
    if isinstance(node, list):
        return node
    # A single record sometimes arrives as a bare object instead of a list.
    if isinstance(node, dict):
        return [node]
    return []


def _as_int(node: Any) -> int:
    try:
        return int(node)
    except OverflowError:
        # 1e400 parses as an infinite float; clamp instead of zeroing.
        return -sys.maxsize if node < 0 else sys.maxsize
    except (TypeError, ValueError):
        return 0


def interpret_response(status: int, body: str) -> str:
    """Classify an upstream response and produce the text for the caller."""
    trimmed = body.strip()
    # HTML error pages and XML auth errors are common from data.go.kr.
    if not trimmed.startswith(("{", "[")):
        return MSG_NOT_JSON + trimmed

    if status >= 400:
        return f"API 오류 응답 (코드: {status}): {body}"

    try:
        payload = json.loads(trimmed)
    except json.JSONDecodeError as exc:
        logger.exception("JSON 처리 중 오류")
        return f"JSON 처리 중 오류가 발생했습니다: {exc}"

    response = _as_object(_as_object(payload).get("response"))
    header = _as_object(response.get("header"))
    result_code = field_text(header, "resultCode", "")
    result_msg = field_text(header, "resultMsg", "")
    logger.info("결과 코드: %s, 메시지: %s", result_code, result_msg)

    if result_code != "00" and "NORMAL" not in result_msg and "정상" not in result_msg:
        return f"API 오류: {result_msg}"

    body_node = response.get("body")
    if body_node is None:
        return MSG_NO_BODY

    items_node = _as_object(body_node).get("items")
    if items_node is None:
        return MSG_NO_ITEMS

    items = _as_items(items_node)
    if items and WeeklyDustForecast.has_forecast(items[0]):
        return format_forecast(WeeklyDustForecast.from_item(items[0]))

    if _as_int(_as_object(body_node).get("totalCount")) == 0 or not items:
        return MSG_NO_DATA
    return format_available_dates(items)


def get_weekly_dust_report(date: str, settings: Settings | None = None) -> str:
    """Look up the weekly dust forecast announced on ``date``.

    Args:
        date: "yyyy-MM-dd" or "yyyyMMdd".
        settings: Overrides the environment-derived settings (tests).

    Returns:
        The formatted report, or a sentence describing what went wrong.
    """
    settings = settings or load_settings()
    if not settings.api_key:
        logger.warning("DUST_API_KEY is not set; skipping upstream request")
        return MSG_MISSING_KEY

    try:
        url = build_request_url(date, settings.api_key)
        logger.info("API 요청 URL: %s", build_request_url(date, "***"))

        result = fetch(url, settings.timeout)
        logger.info("응답 코드: %s", result.status)
        logger.debug("API 응답: %s", result.body)
        return interpret_response(result.status, result.body)
    except Exception as exc:
        logger.exception("API 호출 중 오류")
        return f"API 호출 중 오류가 발생했습니다: {exc}"
