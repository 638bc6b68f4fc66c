"""OpenWeather Provider Package"""

from infrastructure.adapters.output.providers.openweather.openweather_provider import (
    OpenWeatherProvider,
    get_openweather_provider
)
from infrastructure.adapters.output.providers.openweather.openweather_geo_provider import (
    OpenWeatherGeoProvider,
    get_openweather_geo_provider
)

__all__ = [
    'OpenWeatherProvider',
    'get_openweather_provider',
    'OpenWeatherGeoProvider',
    'get_openweather_geo_provider'
]
