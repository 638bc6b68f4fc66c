"""
Value Object: condições atuais como recebidas do provider
Todos os campos são opcionais; os defaults são aplicados apenas no SnapshotBuilder
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CurrentConditions:
    """Observação meteorológica atual de uma localização"""
    name: Optional[str] = None
    country: Optional[str] = None
    dt: Optional[int] = None  # epoch em segundos (UTC)
    timezone: Optional[int] = None  # offset UTC da cidade em segundos
    description: Optional[str] = None
    condition: Optional[str] = None  # weather[0].main (ex: "Rain")
    temp: Optional[float] = None  # °C
    temp_min: Optional[float] = None  # °C
    temp_max: Optional[float] = None  # °C
    humidity: Optional[float] = None  # %
    wind_speed: Optional[float] = None  # m/s
