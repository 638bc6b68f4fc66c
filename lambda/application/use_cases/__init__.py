"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .get_city_weather_use_case import GetCityWeatherUseCase
from .search_city_suggestions_use_case import SearchCitySuggestionsUseCase
from .search_single_city_use_case import SearchSingleCityUseCase
from .search_city_weather_use_case import SearchCityWeatherUseCase

__all__ = [
    'GetCityWeatherUseCase',
    'SearchCitySuggestionsUseCase',
    'SearchSingleCityUseCase',
    'SearchCityWeatherUseCase'
]
