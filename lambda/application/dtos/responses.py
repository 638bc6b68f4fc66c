"""Response DTOs - Contratos de saída dos use cases (JSON camelCase)"""

from dataclasses import dataclass
from typing import List, Dict, Any, Optional

from domain.entities.city_suggestion import CitySuggestion
from domain.entities.city_weather import CityWeather
from domain.entities.weather_day import WeatherDay


@dataclass
class WeatherDayResponse:
    """Response de um dia da previsão"""
    date: str
    week_day_label: str
    min: int
    max: int
    icon: str

    @staticmethod
    def from_entity(day: WeatherDay) -> 'WeatherDayResponse':
        return WeatherDayResponse(
            date=day.date,
            week_day_label=day.week_day_label,
            min=day.min,
            max=day.max,
            icon=day.icon.value
        )

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário para resposta JSON"""
        return {
            'date': self.date,
            'weekDayLabel': self.week_day_label,
            'min': self.min,
            'max': self.max,
            'icon': self.icon
        }


@dataclass
class CityWeatherResponse:
    """Response com o snapshot de clima de uma cidade"""
    city_name: str
    description: str
    date_time_label: str
    current_temp: int
    min_temp: int
    max_temp: int
    precipitation_label: str
    humidity_label: str
    wind_label: str
    icon_kind: str
    daily: List[Dict[str, Any]]

    @staticmethod
    def from_entity(weather: CityWeather) -> 'CityWeatherResponse':
        """
        Converte CityWeather entity para DTO de resposta

        Args:
            weather: CityWeather entity do domínio

        Returns:
            CityWeatherResponse DTO
        """
        return CityWeatherResponse(
            city_name=weather.city_name,
            description=weather.description,
            date_time_label=weather.date_time_label,
            current_temp=weather.current_temp,
            min_temp=weather.min_temp,
            max_temp=weather.max_temp,
            precipitation_label=weather.precipitation_label,
            humidity_label=weather.humidity_label,
            wind_label=weather.wind_label,
            icon_kind=weather.icon_kind.value,
            daily=[WeatherDayResponse.from_entity(day).to_dict() for day in weather.daily]
        )

    def to_dict(self) -> Dict[str, Any]:
        """Converte para dicionário para resposta JSON"""
        return {
            'cityName': self.city_name,
            'description': self.description,
            'dateTimeLabel': self.date_time_label,
            'currentTemp': self.current_temp,
            'minTemp': self.min_temp,
            'maxTemp': self.max_temp,
            'precipitationLabel': self.precipitation_label,
            'humidityLabel': self.humidity_label,
            'windLabel': self.wind_label,
            'iconKind': self.icon_kind,
            'daily': self.daily
        }


@dataclass
class CitySuggestionResponse:
    """Response de uma sugestão de cidade"""
    id: str
    label: str
    lat: float
    lon: float

    @staticmethod
    def from_entity(suggestion: CitySuggestion) -> 'CitySuggestionResponse':
        return CitySuggestionResponse(
            id=suggestion.id,
            label=suggestion.label,
            lat=suggestion.lat,
            lon=suggestion.lon
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'label': self.label,
            'lat': self.lat,
            'lon': self.lon
        }


@dataclass
class CitySuggestionsResponse:
    """Response com a lista de sugestões do autocomplete"""
    query: str
    suggestions: List[Dict[str, Any]]

    @staticmethod
    def from_suggestions(query: str, suggestions: List[CitySuggestion]) -> 'CitySuggestionsResponse':
        return CitySuggestionsResponse(
            query=query,
            suggestions=[CitySuggestionResponse.from_entity(s).to_dict() for s in suggestions]
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'query': self.query,
            'suggestions': self.suggestions
        }


@dataclass
class CitySearchWeatherResponse:
    """Response da busca direta: cidade escolhida + clima"""
    city: Dict[str, Any]
    weather: Optional[Dict[str, Any]]

    @staticmethod
    def from_entities(city: CitySuggestion, weather: CityWeather) -> 'CitySearchWeatherResponse':
        return CitySearchWeatherResponse(
            city=CitySuggestionResponse.from_entity(city).to_dict(),
            weather=CityWeatherResponse.from_entity(weather).to_dict()
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'city': self.city,
            'weather': self.weather
        }
