"""
Input Ports: Interfaces para busca de cidades
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from domain.entities.city_suggestion import CitySuggestion


class ISearchCitySuggestionsUseCase(ABC):
    """Interface para autocomplete de cidades"""

    @abstractmethod
    async def execute(self, query: str, limit: int) -> List[CitySuggestion]:
        """
        Retorna sugestões únicas do país alvo (no máximo `limit`)
        """
        pass


class ISearchSingleCityUseCase(ABC):
    """Interface para busca direta de uma cidade"""

    @abstractmethod
    async def execute(self, query: str) -> Optional[CitySuggestion]:
        """
        Retorna a primeira sugestão ou None quando nada é encontrado
        """
        pass
