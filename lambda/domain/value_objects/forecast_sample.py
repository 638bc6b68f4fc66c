"""
Value Object: amostra de previsão de 3 horas
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ForecastSample:
    """Leitura prevista com resolução de 3 horas"""
    date: Optional[str] = None  # YYYY-MM-DD (parte de data do dt_txt, sem conversão de fuso)
    temperature: Optional[float] = None  # °C
    condition: Optional[str] = None  # weather[0].main
    pop: Optional[float] = None  # probabilidade de precipitação (0-1)
