"""
CityWeather Entity - Snapshot normalizado do clima de uma cidade
"""
from dataclasses import dataclass
from typing import Tuple

from domain.entities.weather_day import WeatherDay
from domain.value_objects.icon_kind import IconKind


@dataclass(frozen=True)
class CityWeather:
    """
    Snapshot completo: condições atuais + até 6 dias de previsão

    Construído uma vez por busca bem sucedida (atual + previsão) e
    substituído por inteiro na próxima seleção de cidade.
    """
    city_name: str  # "<nome>, <país>"
    description: str
    date_time_label: str  # "<dia-da-semana>, <HH:MM>" no horário local da cidade
    current_temp: int
    min_temp: int
    max_temp: int
    precipitation_label: str
    humidity_label: str
    wind_label: str
    icon_kind: IconKind
    daily: Tuple[WeatherDay, ...] = ()
