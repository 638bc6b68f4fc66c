"""
Value Object: par latitude/longitude
Liga a cidade escolhida na busca à consulta de clima
"""
import math
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Coordinates:
    """
    Coordenadas em graus decimais (WGS84)

    Validadas na criação: latitude em [-90, 90], longitude em [-180, 180].
    NaN e infinito são rejeitados pelas mesmas comparações.
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        if not (-90 <= self.latitude <= 90):
            raise ValueError(f"Latitude inválida: {self.latitude} (esperado entre -90 e 90)")
        if not (-180 <= self.longitude <= 180):
            raise ValueError(f"Longitude inválida: {self.longitude} (esperado entre -180 e 180)")

    def to_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    def to_query_params(self) -> Dict[str, float]:
        """Parâmetros lat/lon no formato aceito pela OpenWeather"""
        return {'lat': self.latitude, 'lon': self.longitude}

    def __str__(self) -> str:
        # Hemisférios explícitos para logs: "22.9194°S, 42.8186°W"
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"

    @classmethod
    def is_valid(cls, latitude: float, longitude: float) -> bool:
        """True quando o par é finito e está dentro dos limites"""
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            return False
        return -90 <= latitude <= 90 and -180 <= longitude <= 180
