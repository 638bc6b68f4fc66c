"""Async Use Case: Autocomplete de cidades"""
from typing import List
from ddtrace import tracer

from application.ports.input.search_cities_port import ISearchCitySuggestionsUseCase
from application.ports.output.geo_provider_port import IGeoProvider
from domain.constants import Suggestions
from domain.entities.city_suggestion import CitySuggestion
from domain.services.suggestion_resolver import SuggestionResolver


class SearchCitySuggestionsUseCase(ISearchCitySuggestionsUseCase):
    """
    Async use case: sugestões de cidades para o texto digitado

    Consultas com menos de MIN_QUERY_LENGTH caracteres (após trim) não
    chamam a API e retornam lista vazia.
    """

    def __init__(self, geo_provider: IGeoProvider):
        self.geo_provider = geo_provider

    @tracer.wrap(resource="use_case.search_city_suggestions")
    async def execute(
        self,
        query: str,
        limit: int = Suggestions.DEFAULT_LIMIT
    ) -> List[CitySuggestion]:
        """
        Args:
            query: Texto livre digitado
            limit: Máximo de sugestões (também enviado à API)

        Returns:
            Sugestões únicas do país alvo

        Raises:
            GeoProviderException: Se o geocoding falhar
        """
        query = (query or "").strip()
        if len(query) < Suggestions.MIN_QUERY_LENGTH:
            return []

        candidates = await self.geo_provider.search_cities(query, limit)
        return SuggestionResolver.resolve(candidates, limit)
