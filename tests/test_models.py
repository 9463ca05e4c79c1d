"""Tests for core.models."""
from core.models import MISSING, DayOutlook, WeeklyDustForecast, field_text


class TestFieldText:
    def test_missing_and_null_use_default(self):
        assert field_text({}, "presnatnDt") == MISSING
        assert field_text({"presnatnDt": None}, "presnatnDt") == MISSING
        assert field_text({}, "resultCode", "") == ""

    def test_numbers_become_text(self):
        assert field_text({"totalCount": 3}, "totalCount") == "3"


class TestWeeklyDustForecast:
    def test_has_forecast(self):
        assert WeeklyDustForecast.has_forecast({"gwthcnd": "..."})
        assert WeeklyDustForecast.has_forecast({"frcstOneCn": "..."})
        assert not WeeklyDustForecast.has_forecast({"presnatnDt": "2024-01-01"})
        assert not WeeklyDustForecast.has_forecast("2024-01-01")

    def test_from_item(self, forecast_item):
        forecast = WeeklyDustForecast.from_item(forecast_item)
        assert forecast.announced_at == "2024-01-01"
        assert [day.offset for day in forecast.days] == [1, 2, 3, 4]
        assert forecast.days[0] == DayOutlook(
            offset=1, date="2024-01-02", text="서울 : 높음, 인천 : 높음, 경기북부 : 높음"
        )
        assert forecast.days[3].date == "2024-01-05"
