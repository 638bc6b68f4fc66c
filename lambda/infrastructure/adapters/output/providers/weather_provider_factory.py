"""
Provider Factory - criação centralizada dos providers OpenWeather (clima + geocoding)
"""
from typing import Optional

from application.ports.output.geo_provider_port import IGeoProvider
from application.ports.output.weather_provider_port import IWeatherProvider
from infrastructure.adapters.output.providers.openweather import (
    get_openweather_geo_provider,
    get_openweather_provider,
)


class WeatherProviderFactory:
    """
    Factory simples para gerenciar os providers.
    Mantém lazy-loading e singleton para reuso em execução quente da Lambda;
    a API key só é exigida quando um provider é de fato usado.
    """

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key
        self._weather: Optional[IWeatherProvider] = None
        self._geo: Optional[IGeoProvider] = None

    def get_weather_provider(self) -> IWeatherProvider:
        """Retorna provider de clima (OpenWeather)."""
        if self._weather is None:
            self._weather = get_openweather_provider(api_key=self.api_key)
        return self._weather

    def get_geo_provider(self) -> IGeoProvider:
        """Retorna provider de geocoding (OpenWeather)."""
        if self._geo is None:
            self._geo = get_openweather_geo_provider(api_key=self.api_key)
        return self._geo


# Factory singleton global
_factory_instance: Optional[WeatherProviderFactory] = None


def get_weather_provider_factory(api_key: Optional[str] = None) -> WeatherProviderFactory:
    """
    Retorna singleton da factory
    """
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = WeatherProviderFactory(api_key=api_key)

    return _factory_instance
