# =============================================================================
# core/models.py  —  Data Models
# =============================================================================
#
# The upstream API (AirKorea's weekly fine-dust forecast) returns a fixed
# JSON shape:
#
#   {"response": {
#       "header": {"resultCode": "00", "resultMsg": "NORMAL_CODE"},
#       "body":   {"totalCount": 1, "items": [ {...item...} ], ...}}}
#
# Each item carries an announcement date, a narrative outlook, and four
# day-offset forecasts.  The field names are abbreviated Korean
# romanizations, so we translate them into readable names here and nowhere
# else.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any


# Placeholder used whenever a field is missing or null in an item.
MISSING = "정보 없음"

# (offset in days, date field, content field) for the four forecast days.
DAY_FIELDS: tuple[tuple[int, str, str], ...] = (
    (1, "frcstOneDt", "frcstOneCn"),
    (2, "frcstTwoDt", "frcstTwoCn"),
    (3, "frcstThreeDt", "frcstThreeCn"),
    (4, "frcstFourDt", "frcstFourCn"),
)


def field_text(item: dict[str, Any], key: str, default: str = MISSING) -> str:
    """Read a field as text, falling back to ``default`` for missing/null."""
    value = item.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class DayOutlook:
    """One day-offset section of the weekly forecast."""

    offset: int                        # 1..4 days after the announcement
    date: str                          # "2024-01-02"
    text: str                          # Per-region grades, e.g. "서울 : 낮음, ..."


@dataclass(frozen=True)
class WeeklyDustForecast:
    """A single forecast item, with readable field names."""

    announced_at: str                  # presnatnDt
    outlook: str                       # gwthcnd — the narrative summary
    days: list[DayOutlook] = field(default_factory=list)

    @staticmethod
    def has_forecast(item: Any) -> bool:
        """True when an item carries actual forecast text.

        Some searchDate values return items that only list announcement
        dates.  Those are not forecasts and must not be rendered as one.
        """
        return isinstance(item, dict) and ("gwthcnd" in item or "frcstOneCn" in item)

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "WeeklyDustForecast":
        return cls(
            announced_at=field_text(item, "presnatnDt"),
            outlook=field_text(item, "gwthcnd"),
            days=[
                DayOutlook(
                    offset=offset,
                    date=field_text(item, date_key),
                    text=field_text(item, text_key),
                )
                for offset, date_key, text_key in DAY_FIELDS
            ],
        )


@dataclass(frozen=True)
class FetchResult:
    """Raw outcome of one HTTP GET: status code plus decoded body."""

    status: int
    body: str
