"""OpenWeather Provider - Clima atual (/weather) e previsão de 3 horas (/forecast)"""

from typing import List, Optional

from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API
from domain.exceptions import WeatherProviderException
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.current_conditions import CurrentConditions
from domain.value_objects.forecast_sample import ForecastSample
from infrastructure.adapters.output.providers.openweather.mappers import OpenWeatherDataMapper
from infrastructure.adapters.output.providers.openweather.openweather_client import OpenWeatherClient
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenWeatherProvider(IWeatherProvider):
    """
    Provider para OpenWeather API 2.5

    Características:
    - Current weather por coordenadas
    - Previsão de 5 dias em passos de 3 horas
    - Unidades métricas e descrições em pt_br
    - Sem cache (cada seleção de cidade busca dados novos)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[OpenWeatherClient] = None
    ):
        """
        Inicializa provider

        Args:
            api_key: OpenWeather API key (settings se None)
            client: Cliente HTTP (criado a partir da api_key se None)

        Raises:
            ProviderConfigurationException: Se API key não configurada
        """
        self.client = client or OpenWeatherClient(api_key=api_key)
        self.base_url = settings.OPENWEATHER_BASE_URL.rstrip("/")

    @property
    def provider_name(self) -> str:
        return "OpenWeather"

    def _params(self, latitude: float, longitude: float) -> dict:
        return {
            **Coordinates(latitude=latitude, longitude=longitude).to_query_params(),
            'units': API.OPENWEATHER_UNITS,
            'lang': API.OPENWEATHER_LANG
        }

    @tracer.wrap(resource="openweather.get_current_conditions")
    async def get_current_conditions(
        self,
        latitude: float,
        longitude: float
    ) -> CurrentConditions:
        """
        Busca condições atuais

        Returns:
            CurrentConditions mapeado (campos ausentes = None)
        """
        data = await self.client.get_json(
            f"{self.base_url}/weather",
            self._params(latitude, longitude),
            WeatherProviderException
        )
        return OpenWeatherDataMapper.map_current_conditions(data)

    @tracer.wrap(resource="openweather.get_forecast_samples")
    async def get_forecast_samples(
        self,
        latitude: float,
        longitude: float
    ) -> List[ForecastSample]:
        """
        Busca previsão de 3 em 3 horas

        Returns:
            Lista de ForecastSample na ordem da API
        """
        data = await self.client.get_json(
            f"{self.base_url}/forecast",
            self._params(latitude, longitude),
            WeatherProviderException
        )
        samples = OpenWeatherDataMapper.map_forecast_samples(data)

        logger.debug("Previsão recebida", provider=self.provider_name, amostras=len(samples))
        return samples


# Factory singleton
_provider_instance: Optional[OpenWeatherProvider] = None


def get_openweather_provider(api_key: Optional[str] = None) -> OpenWeatherProvider:
    """
    Factory para obter singleton do provider
    Reutiliza entre invocações Lambda (warm starts)
    """
    global _provider_instance

    if _provider_instance is None:
        _provider_instance = OpenWeatherProvider(api_key=api_key)

    return _provider_instance
