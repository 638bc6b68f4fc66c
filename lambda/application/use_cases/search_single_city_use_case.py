"""Async Use Case: Busca direta de uma cidade (submit da busca)"""
from typing import Optional
from ddtrace import tracer

from application.ports.input.search_cities_port import ISearchSingleCityUseCase
from application.ports.output.geo_provider_port import IGeoProvider
from domain.constants import Suggestions
from domain.entities.city_suggestion import CitySuggestion
from domain.services.suggestion_resolver import SuggestionResolver


class SearchSingleCityUseCase(ISearchSingleCityUseCase):
    """Async use case: primeira cidade encontrada para a consulta"""

    def __init__(self, geo_provider: IGeoProvider):
        self.geo_provider = geo_provider

    @tracer.wrap(resource="use_case.search_single_city")
    async def execute(self, query: str) -> Optional[CitySuggestion]:
        """
        Returns:
            CitySuggestion ou None quando nenhum candidato sobrevive ao filtro

        Raises:
            GeoProviderException: Se o geocoding falhar
        """
        query = (query or "").strip()
        if not query:
            return None

        candidates = await self.geo_provider.search_cities(query, Suggestions.SINGLE_CITY_LIMIT)
        return SuggestionResolver.resolve_single(candidates)
