"""
OpenWeather Geo Provider
Geocoding direto: nome de cidade → candidatos com coordenadas
"""
from typing import List, Optional

from ddtrace import tracer

from application.ports.output.geo_provider_port import IGeoProvider
from domain.exceptions import GeoProviderException
from domain.value_objects.geo_candidate import GeoCandidate
from infrastructure.adapters.output.providers.openweather.mappers import OpenWeatherDataMapper
from infrastructure.adapters.output.providers.openweather.openweather_client import OpenWeatherClient
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenWeatherGeoProvider(IGeoProvider):
    """Provider para o geocoding direto da OpenWeather (/geo/1.0/direct)"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[OpenWeatherClient] = None
    ):
        self.client = client or OpenWeatherClient(api_key=api_key)
        self.base_url = settings.OPENWEATHER_GEO_URL.rstrip("/")

    @property
    def provider_name(self) -> str:
        return "OpenWeather"

    @tracer.wrap(resource="openweather.search_cities")
    async def search_cities(self, query: str, limit: int) -> List[GeoCandidate]:
        """
        Busca candidatos pelo nome (sem filtro de país)
        """
        data = await self.client.get_json(
            f"{self.base_url}/direct",
            {'q': query, 'limit': limit},
            GeoProviderException
        )
        candidates = OpenWeatherDataMapper.map_geo_candidates(data)

        logger.debug(
            "Geocoding concluído",
            provider=self.provider_name,
            query=query,
            candidatos=len(candidates)
        )
        return candidates


# Singleton factory (reutilizado entre invocações Lambda)
_geo_provider_instance: Optional[OpenWeatherGeoProvider] = None


def get_openweather_geo_provider(api_key: Optional[str] = None) -> OpenWeatherGeoProvider:
    """Retorna instância singleton do provider de geocoding"""
    global _geo_provider_instance

    if _geo_provider_instance is None:
        _geo_provider_instance = OpenWeatherGeoProvider(api_key=api_key)

    return _geo_provider_instance
