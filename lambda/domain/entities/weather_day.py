"""
WeatherDay Entity - Um dia agregado da previsão
"""
from dataclasses import dataclass

from domain.value_objects.icon_kind import IconKind


@dataclass(frozen=True)
class WeatherDay:
    """
    Resumo diário derivado de todas as amostras de 3h de uma data

    Invariante: min <= max (ambos vêm do mesmo conjunto de amostras)
    """
    date: str  # YYYY-MM-DD
    week_day_label: str  # ex: "qui."
    min: int  # °C
    max: int  # °C
    icon: IconKind
