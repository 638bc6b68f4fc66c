"""
Testes Unitários - DailyAggregator
"""
from datetime import date, timedelta

from domain.services.daily_aggregator import DailyAggregator
from domain.value_objects.forecast_sample import ForecastSample
from domain.value_objects.icon_kind import IconKind


def _samples_for_days(days: int, per_day: int = 8):
    start = date(2024, 1, 10)
    samples = []
    for day in range(days):
        iso_date = (start + timedelta(days=day)).isoformat()
        for slot in range(per_day):
            samples.append(ForecastSample(
                date=iso_date,
                temperature=20 + slot,
                condition="Clouds" if slot % 2 else "Clear"
            ))
    return samples


class TestDailyAggregator:
    """Agrupamento por data de calendário"""

    def test_example_two_days(self, example_samples):
        """Amostras de 10/01 e 11/01 → dois dias com min/max e ícone"""
        result = DailyAggregator.aggregate(example_samples)

        assert len(result) == 2

        first, second = result
        assert first.date == "2024-01-10"
        assert first.week_day_label == "qua."
        assert (first.min, first.max) == (25, 30)
        assert first.icon == IconKind.SUN

        assert second.date == "2024-01-11"
        assert second.week_day_label == "qui."
        assert (second.min, second.max) == (20, 20)
        assert second.icon == IconKind.RAIN

    def test_empty_samples(self):
        assert DailyAggregator.aggregate([]) == []

    def test_limits_to_six_days(self):
        """REGRA: no máximo 6 datas distintas, as primeiras que aparecem"""
        result = DailyAggregator.aggregate(_samples_for_days(8))

        assert len(result) == 6
        assert result[0].date == "2024-01-10"
        assert result[-1].date == "2024-01-15"

    def test_length_bounded_by_distinct_dates(self):
        result = DailyAggregator.aggregate(_samples_for_days(3))
        assert len(result) == 3

    def test_custom_max_days(self):
        result = DailyAggregator.aggregate(_samples_for_days(5), max_days=2)
        assert [day.date for day in result] == ["2024-01-10", "2024-01-11"]

    def test_min_never_greater_than_max(self):
        samples = [
            ForecastSample(date="2024-01-10", temperature=t)
            for t in (18.7, -3.2, 33.5, 0.4, 12.0)
        ]
        for day in DailyAggregator.aggregate(samples + _samples_for_days(4)):
            assert day.min <= day.max

    def test_first_seen_order_preserved(self):
        """Datas fora de ordem mantêm a ordem da primeira aparição"""
        samples = [
            ForecastSample(date="2024-01-12", temperature=20),
            ForecastSample(date="2024-01-10", temperature=21),
            ForecastSample(date="2024-01-12", temperature=22),
            ForecastSample(date="2024-01-11", temperature=23),
        ]
        result = DailyAggregator.aggregate(samples)

        assert [day.date for day in result] == ["2024-01-12", "2024-01-10", "2024-01-11"]
        assert (result[0].min, result[0].max) == (20, 22)

    def test_late_sample_of_known_day_still_counts_after_limit(self):
        """Uma vez com 6 dias, só datas NOVAS são ignoradas"""
        samples = _samples_for_days(6, per_day=1)
        samples.append(ForecastSample(date="2024-01-16", temperature=50))
        samples.append(ForecastSample(date="2024-01-10", temperature=-5))

        result = DailyAggregator.aggregate(samples)

        assert len(result) == 6
        assert result[0].min == -5

    def test_rounds_only_after_accumulating(self):
        samples = [
            ForecastSample(date="2024-01-10", temperature=24.5),
            ForecastSample(date="2024-01-10", temperature=29.4),
        ]
        day = DailyAggregator.aggregate(samples)[0]
        assert (day.min, day.max) == (25, 29)

    def test_skips_samples_without_date_or_temperature(self):
        samples = [
            ForecastSample(date=None, temperature=40),
            ForecastSample(date="2024-01-10", temperature=None),
            ForecastSample(date="2024-01-10", temperature=22, condition="Clear"),
        ]
        result = DailyAggregator.aggregate(samples)

        assert len(result) == 1
        assert (result[0].min, result[0].max) == (22, 22)

    def test_missing_condition_defaults_to_clear(self):
        samples = [ForecastSample(date="2024-01-10", temperature=22, condition=None)]
        assert DailyAggregator.aggregate(samples)[0].icon == IconKind.SUN

    def test_icon_uses_all_conditions_of_the_day(self):
        """Um único horário com garoa torna o dia chuvoso"""
        samples = [
            ForecastSample(date="2024-01-10", temperature=22, condition="Clear"),
            ForecastSample(date="2024-01-10", temperature=23, condition="Clouds"),
            ForecastSample(date="2024-01-10", temperature=21, condition="Drizzle"),
        ]
        assert DailyAggregator.aggregate(samples)[0].icon == IconKind.RAIN

    def test_skips_sample_with_non_iso_date(self):
        """Data fora do formato YYYY-MM-DD é descartada sem derrubar o resto"""
        samples = [
            ForecastSample(date="10/01/2024", temperature=20),
            ForecastSample(date="2024-01-11", temperature=18, condition="Rain"),
        ]
        result = DailyAggregator.aggregate(samples)

        assert [day.date for day in result] == ["2024-01-11"]
        assert result[0].week_day_label == "qui."

    def test_only_malformed_dates_gives_empty(self):
        assert DailyAggregator.aggregate([ForecastSample(date="10/01/2024", temperature=20)]) == []

    def test_skips_non_finite_temperatures(self):
        samples = [
            ForecastSample(date="2024-01-10", temperature=float("nan")),
            ForecastSample(date="2024-01-10", temperature=float("inf")),
            ForecastSample(date="2024-01-10", temperature=23),
        ]
        result = DailyAggregator.aggregate(samples)

        assert (result[0].min, result[0].max) == (23, 23)
