"""
Weather Classifier - Classificação de ícone a partir das condições
"""
from typing import Iterable

from domain.constants import Weather
from domain.value_objects.icon_kind import IconKind


def classify_icon(condition_names: Iterable[str]) -> IconKind:
    """
    Retorna tipo de ícone (ensolarado/nublado/chuvoso)

    Concatena as condições (case-insensitive) e testa em ordem estrita de
    prioridade: família chuva > família nuvens > sol. Um dia com garoa e
    nuvens esparsas é chuvoso. Função total: condições desconhecidas ou
    lista vazia resultam em SUN.

    Args:
        condition_names: Condições (weather[].main) ex: ["Clouds", "Rain"]

    Returns:
        IconKind classificado
    """
    merged = " ".join(condition_names).lower()

    if any(keyword in merged for keyword in Weather.RAIN_KEYWORDS):
        return IconKind.RAIN

    if any(keyword in merged for keyword in Weather.CLOUD_KEYWORDS):
        return IconKind.CLOUD

    return IconKind.SUN
