"""Suggestion Resolver - Filtra, deduplica e limita candidatos do geocoding"""
from typing import List, Optional, Sequence

from domain.constants import Suggestions
from domain.entities.city_suggestion import CitySuggestion
from domain.value_objects.geo_candidate import GeoCandidate
from shared.config import settings


class SuggestionResolver:
    """
    Resolve lotes de sugestões de cidades

    Política first-wins: o primeiro candidato de cada nome (case-insensitive)
    é mantido, preservando a ordem de entrada.
    """

    @staticmethod
    def resolve(
        candidates: Sequence[GeoCandidate],
        limit: int,
        target_country: Optional[str] = None
    ) -> List[CitySuggestion]:
        """
        Gera sugestões únicas do país alvo

        Args:
            candidates: Candidatos na ordem retornada pela API
            limit: Tamanho máximo do resultado (aplicado após dedup)
            target_country: País alvo (default settings.TARGET_COUNTRY)

        Returns:
            Lista com no máximo `limit` sugestões
        """
        country = target_country or settings.TARGET_COUNTRY
        if limit <= 0:
            return []

        seen = set()
        suggestions: List[CitySuggestion] = []

        for index, candidate in enumerate(candidates):
            if candidate.country != country:
                continue

            name = candidate.name or ""
            key = name.lower()
            if not key or key in seen:
                continue
            seen.add(key)

            suggestions.append(SuggestionResolver._to_suggestion(candidate, index))
            if len(suggestions) >= limit:
                break

        return suggestions

    @staticmethod
    def resolve_single(
        candidates: Sequence[GeoCandidate],
        target_country: Optional[str] = None
    ) -> Optional[CitySuggestion]:
        """
        Primeira sugestão do lote (busca direta / Enter)

        Returns:
            CitySuggestion ou None quando nenhum candidato sobrevive ao filtro
        """
        suggestions = SuggestionResolver.resolve(
            candidates,
            Suggestions.SINGLE_CITY_LIMIT,
            target_country=target_country
        )
        return suggestions[0] if suggestions else None

    @staticmethod
    def _to_suggestion(candidate: GeoCandidate, index: int) -> CitySuggestion:
        state = f", {candidate.state}" if candidate.state else ""
        return CitySuggestion(
            id=f"{candidate.lat}-{candidate.lon}-{index}",
            label=f"{candidate.name}{state}, {candidate.country}",
            lat=candidate.lat,
            lon=candidate.lon
        )
