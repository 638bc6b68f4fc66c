"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas dos providers externos (OpenWeather) e adapters HTTP
"""

from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.providers import (
    OpenWeatherProvider,
    OpenWeatherGeoProvider,
    WeatherProviderFactory
)

__all__ = [
    'get_aiohttp_session_manager',
    'OpenWeatherProvider',
    'OpenWeatherGeoProvider',
    'WeatherProviderFactory'
]
