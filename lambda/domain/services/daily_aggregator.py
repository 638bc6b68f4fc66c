"""Daily Aggregator - Agrupa amostras de 3h em resumos diários"""
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List

from domain.constants import Weather
from domain.entities.weather_day import WeatherDay
from domain.helpers.label_formatter import format_weekday_short, round_half_up
from domain.helpers.weather_classifier import classify_icon
from domain.value_objects.forecast_sample import ForecastSample
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _is_valid_sample(sample: ForecastSample) -> bool:
    """Data ISO (YYYY-MM-DD) e temperatura finita"""
    if sample.date is None or sample.temperature is None:
        return False
    try:
        date.fromisoformat(sample.date)
        return math.isfinite(sample.temperature)
    except (TypeError, ValueError, OverflowError):
        return False


@dataclass
class _DayAccumulator:
    """Min/max corrente e condições vistas em uma data"""
    temp_min: float
    temp_max: float
    conditions: List[str] = field(default_factory=list)

    def add(self, temperature: float, condition: str) -> None:
        self.temp_min = min(self.temp_min, temperature)
        self.temp_max = max(self.temp_max, temperature)
        self.conditions.append(condition)


class DailyAggregator:
    """
    Agrega a lista de previsão de 3 horas em até N dias
    """

    @staticmethod
    def aggregate(
        samples: Iterable[ForecastSample],
        max_days: int = Weather.MAX_DAILY_DAYS
    ) -> List[WeatherDay]:
        """
        Agrupa amostras por data de calendário

        REGRAS:
        1. Data = parte de data do dt_txt, sem conversão de fuso
        2. Min/max acumulados sobre valores brutos, arredondados só no fim
        3. Ícone classificado sobre TODAS as condições do dia
        4. Ordem = ordem em que cada data aparece primeiro na lista
        5. Apenas as primeiras `max_days` datas distintas

        Amostras sem data ISO válida ou sem temperatura finita são ignoradas.

        Args:
            samples: Amostras de previsão (ordem da API)
            max_days: Limite de dias distintos

        Returns:
            Lista de WeatherDay (vazia se não houver amostras)
        """
        # dict mantém a ordem de inserção: primeira aparição de cada data
        by_day: Dict[str, _DayAccumulator] = {}
        skipped = 0

        for sample in samples:
            if not _is_valid_sample(sample):
                skipped += 1
                continue

            condition = sample.condition or Weather.DEFAULT_CONDITION
            accumulator = by_day.get(sample.date)

            if accumulator is None:
                if len(by_day) >= max_days:
                    continue
                by_day[sample.date] = _DayAccumulator(
                    temp_min=sample.temperature,
                    temp_max=sample.temperature,
                    conditions=[condition]
                )
            else:
                accumulator.add(sample.temperature, condition)

        if skipped:
            logger.debug("Amostras de previsão ignoradas", ignoradas=skipped)

        return [
            WeatherDay(
                date=iso_date,
                week_day_label=format_weekday_short(iso_date),
                min=round_half_up(info.temp_min),
                max=round_half_up(info.temp_max),
                icon=classify_icon(info.conditions)
            )
            for iso_date, info in by_day.items()
        ]
