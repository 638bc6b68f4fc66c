"""
Value Object: candidato retornado pelo geocoding
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GeoCandidate:
    """Cidade candidata vinda da API de geocoding direto"""
    name: str
    lat: float
    lon: float
    country: Optional[str] = None  # ISO 3166 (ex: "BR")
    state: Optional[str] = None
