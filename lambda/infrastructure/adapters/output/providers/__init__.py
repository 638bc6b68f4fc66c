"""Infrastructure Providers - Implementações de provedores de clima e geocoding"""

from infrastructure.adapters.output.providers.openweather import (
    OpenWeatherProvider,
    OpenWeatherGeoProvider,
)
from infrastructure.adapters.output.providers.weather_provider_factory import (
    WeatherProviderFactory,
    get_weather_provider_factory,
)

__all__ = [
    'OpenWeatherProvider',
    'OpenWeatherGeoProvider',
    'WeatherProviderFactory',
    'get_weather_provider_factory',
]
