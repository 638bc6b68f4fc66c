"""
CitySuggestion Entity - Cidade candidata para autocomplete ou busca direta
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class CitySuggestion:
    """Sugestão de cidade já filtrada e deduplicada"""
    id: str  # único dentro do lote ("<lat>-<lon>-<posição>")
    label: str  # "<nome>[, <estado>], <país>"
    lat: float
    lon: float
