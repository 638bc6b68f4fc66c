"""
Value Object para o tipo de ícone do clima
Taxonomia única usada tanto no clima atual quanto nos dias da previsão
"""
from enum import Enum


class IconKind(str, Enum):
    """Tipos de ícone suportados (ensolarado / nublado / chuvoso)"""
    SUN = "sun"
    CLOUD = "cloud"
    RAIN = "rain"
