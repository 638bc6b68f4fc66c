"""
Output Port: Geo Provider
Contrato para provedores de geocoding direto (nome → coordenadas)
"""
from abc import ABC, abstractmethod
from typing import List

from domain.value_objects.geo_candidate import GeoCandidate


class IGeoProvider(ABC):
    """Interface para provedores de geocoding"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: OpenWeather)"""
        raise NotImplementedError

    @abstractmethod
    async def search_cities(self, query: str, limit: int) -> List[GeoCandidate]:
        """
        Busca cidades candidatas pelo nome

        Args:
            query: Texto livre digitado pelo usuário
            limit: Máximo de candidatos pedidos à API

        Returns:
            Candidatos na ordem da API (sem filtro de país)

        Raises:
            GeoProviderException: Se o provider falhar
        """
        raise NotImplementedError
