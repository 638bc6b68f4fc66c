"""Snapshot Builder - Constrói CityWeather a partir de condições atuais + previsão"""
import math
from typing import Optional, Sequence

from domain.constants import Labels, Weather
from domain.entities.city_weather import CityWeather
from domain.helpers.label_formatter import (
    capitalize_first,
    format_local_datetime,
    format_percent_label,
    format_wind_label,
    round_half_up,
)
from domain.helpers.weather_classifier import classify_icon
from domain.services.daily_aggregator import DailyAggregator
from domain.value_objects.current_conditions import CurrentConditions
from domain.value_objects.forecast_sample import ForecastSample


def _or_default(value: Optional[float], default: float) -> float:
    # NaN, infinito e inteiros fora do range de float contam como ausentes
    if value is None:
        return default
    try:
        return value if math.isfinite(value) else default
    except OverflowError:
        return default


class SnapshotBuilder:
    """
    Fronteira única de normalização: todos os defaults de campos ausentes
    são aplicados aqui, e todo arredondamento acontece na apresentação.
    """

    @staticmethod
    def build(
        current: CurrentConditions,
        forecast_samples: Sequence[ForecastSample]
    ) -> CityWeather:
        """
        Constrói CityWeather a partir das respostas já mapeadas

        Defaults para campos ausentes:
        - humidity 0, wind 0, temp 0
        - temp_min/temp_max = temp
        - condição "Clear", descrição vazia
        - dt 0, timezone 0

        Args:
            current: Condições atuais (campos opcionais)
            forecast_samples: Amostras de 3h na ordem da API

        Returns:
            CityWeather determinístico para as mesmas entradas
        """
        temp = _or_default(current.temp, 0.0)
        temp_min = _or_default(current.temp_min, temp)
        temp_max = _or_default(current.temp_max, temp)
        humidity = _or_default(current.humidity, 0.0)
        wind_speed = _or_default(current.wind_speed, 0.0)

        local_label = format_local_datetime(
            int(_or_default(current.dt, 0)),
            int(_or_default(current.timezone, 0))
        )

        condition = current.condition or Weather.DEFAULT_CONDITION

        return CityWeather(
            city_name=f"{current.name or ''}, {current.country or ''}",
            description=capitalize_first(current.description or ""),
            date_time_label=local_label,
            current_temp=round_half_up(temp),
            min_temp=round_half_up(temp_min),
            max_temp=round_half_up(temp_max),
            precipitation_label=SnapshotBuilder.precipitation_label(forecast_samples),
            humidity_label=format_percent_label(Labels.HUMIDITY, humidity),
            wind_label=format_wind_label(wind_speed),
            icon_kind=classify_icon([condition]),
            daily=tuple(DailyAggregator.aggregate(forecast_samples))
        )

    @staticmethod
    def precipitation_label(forecast_samples: Sequence[ForecastSample]) -> str:
        """
        Label de precipitação a partir da PRIMEIRA amostra da previsão

        Usa apenas o índice 0 (não é média). Sem amostras → "Chuva: --%".
        """
        if not forecast_samples:
            return Labels.PRECIPITATION_UNKNOWN
        pop = _or_default(forecast_samples[0].pop, 0.0)
        return format_percent_label(Labels.PRECIPITATION, pop * 100)
