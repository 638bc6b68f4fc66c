"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.responses import (
    WeatherDayResponse,
    CityWeatherResponse,
    CitySuggestionResponse,
    CitySuggestionsResponse,
    CitySearchWeatherResponse
)

__all__ = [
    'WeatherDayResponse',
    'CityWeatherResponse',
    'CitySuggestionResponse',
    'CitySuggestionsResponse',
    'CitySearchWeatherResponse'
]
