"""
OpenWeather Data Mapper - Transforma dados da API OpenWeather para value objects
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)

Apenas extrai campos; campos ausentes ou com tipo inesperado viram None.
Os defaults são responsabilidade do SnapshotBuilder (domínio).
"""
import math
from datetime import date
from typing import Any, Dict, List, Optional

from domain.value_objects.coordinates import Coordinates
from domain.value_objects.current_conditions import CurrentConditions
from domain.value_objects.forecast_sample import ForecastSample
from domain.value_objects.geo_candidate import GeoCandidate


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_number(value: Any) -> Optional[float]:
    # json aceita NaN/Infinity e inteiros sem limite; tratados como ausentes
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        finite = math.isfinite(value)
    except OverflowError:
        return None
    return value if finite else None


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _first_weather(item: Dict[str, Any]) -> Dict[str, Any]:
    weather_list = item.get('weather')
    if isinstance(weather_list, list) and weather_list:
        return _as_dict(weather_list[0])
    return {}


class OpenWeatherDataMapper:
    """
    Mapper para transformar respostas da API OpenWeather em value objects de domínio

    Responsabilidade: Traduzir formato OpenWeather → Domain
    Localização: Infrastructure (conhece detalhes da API externa)
    """

    @staticmethod
    def map_current_conditions(data: Dict[str, Any]) -> CurrentConditions:
        """
        Mapeia resposta /weather para CurrentConditions

        Args:
            data: Resposta raw da API OpenWeather (/weather endpoint)

        Returns:
            CurrentConditions com campos opcionais
        """
        data = _as_dict(data)
        main = _as_dict(data.get('main'))
        weather_info = _first_weather(data)

        dt = _as_number(data.get('dt'))
        timezone = _as_number(data.get('timezone'))

        return CurrentConditions(
            name=_as_text(data.get('name')),
            country=_as_text(_as_dict(data.get('sys')).get('country')),
            dt=int(dt) if dt is not None else None,
            timezone=int(timezone) if timezone is not None else None,
            description=_as_text(weather_info.get('description')),
            condition=_as_text(weather_info.get('main')),
            temp=_as_number(main.get('temp')),
            temp_min=_as_number(main.get('temp_min')),
            temp_max=_as_number(main.get('temp_max')),
            humidity=_as_number(main.get('humidity')),
            wind_speed=_as_number(_as_dict(data.get('wind')).get('speed'))
        )

    @staticmethod
    def map_forecast_samples(data: Dict[str, Any]) -> List[ForecastSample]:
        """
        Mapeia resposta /forecast (lista de 3 em 3 horas) para ForecastSample

        Cada item da lista gera exatamente uma amostra, na mesma posição,
        mesmo quando malformado (a precipitação depende do índice 0).

        Args:
            data: Resposta raw da API OpenWeather (/forecast endpoint)

        Returns:
            Lista de ForecastSample (vazia se 'list' ausente)
        """
        raw_forecasts = _as_dict(data).get('list')
        if not isinstance(raw_forecasts, list):
            return []

        return [
            OpenWeatherDataMapper._parse_forecast_item(_as_dict(forecast_raw))
            for forecast_raw in raw_forecasts
        ]

    @staticmethod
    def _parse_forecast_item(forecast_raw: Dict[str, Any]) -> ForecastSample:
        """
        Parse um item individual da lista de forecasts OpenWeather

        dt_txt vem como "YYYY-MM-DD HH:MM:SS"; a data é usada como veio,
        sem conversão de fuso.
        """
        return ForecastSample(
            date=OpenWeatherDataMapper._parse_date(forecast_raw.get('dt_txt')),
            temperature=_as_number(_as_dict(forecast_raw.get('main')).get('temp')),
            condition=_as_text(_first_weather(forecast_raw).get('main')),
            pop=_as_number(forecast_raw.get('pop'))
        )

    @staticmethod
    def _parse_date(dt_txt: Any) -> Optional[str]:
        if not isinstance(dt_txt, str):
            return None
        date_only = dt_txt.split(" ")[0]
        try:
            date.fromisoformat(date_only)
        except ValueError:
            return None
        return date_only

    @staticmethod
    def map_geo_candidates(data: Any) -> List[GeoCandidate]:
        """
        Mapeia resposta /geo/1.0/direct para GeoCandidate

        Entradas sem coordenadas numéricas válidas são descartadas.

        Args:
            data: Lista raw retornada pelo geocoding

        Returns:
            Candidatos na ordem da API
        """
        if not isinstance(data, list):
            return []

        candidates = []
        for place in data:
            place = _as_dict(place)
            lat = _as_number(place.get('lat'))
            lon = _as_number(place.get('lon'))
            if lat is None or lon is None or not Coordinates.is_valid(lat, lon):
                continue

            candidates.append(GeoCandidate(
                name=_as_text(place.get('name')) or "",
                lat=lat,
                lon=lon,
                country=_as_text(place.get('country')),
                state=_as_text(place.get('state'))
            ))

        return candidates
