"""
Label Formatter - Formatação fixa em pt-BR para a camada de apresentação
Sem framework de localização: tabelas de dias da semana em domain.constants
"""
import math
from datetime import date, datetime, timezone

from domain.constants import Labels, Weather


def round_half_up(value: float) -> int:
    """
    Arredonda para o inteiro mais próximo com empate para cima

    Diferente de round() (arredondamento bancário): 2.5 → 3, -2.5 → -2.
    Valores não finitos (NaN, ±inf) resultam em 0.

    Args:
        value: Valor a arredondar

    Returns:
        Inteiro arredondado
    """
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def meters_per_second_to_kmh(speed_ms: float) -> int:
    """Converte m/s → km/h arredondado"""
    return round_half_up(speed_ms * Weather.MS_TO_KMH)


def format_weekday_short(iso_date: str) -> str:
    """
    Cria label curto de dia da semana (ex.: "qui.")

    Args:
        iso_date: Data no formato YYYY-MM-DD

    Returns:
        Dia da semana abreviado com ponto final

    Raises:
        ValueError: Se a data não estiver no formato ISO
    """
    return Labels.WEEKDAYS_SHORT[date.fromisoformat(iso_date).weekday()]


def format_local_datetime(epoch_seconds: int, utc_offset_seconds: int) -> str:
    """
    Formata "<dia-da-semana>, <HH:MM>" no horário local da cidade

    O horário local é o epoch somado ao offset da cidade, lido como relógio
    UTC. Nunca depende do fuso do processo. Valores fora do range de datetime
    caem no epoch 0.

    Args:
        epoch_seconds: Timestamp da observação (UTC)
        utc_offset_seconds: Offset UTC da cidade em segundos

    Returns:
        Label como "quarta-feira, 14:05"
    """
    try:
        local = datetime.fromtimestamp(epoch_seconds + utc_offset_seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        local = datetime.fromtimestamp(0, tz=timezone.utc)
    return f"{Labels.WEEKDAYS_LONG[local.weekday()]}, {local:%H:%M}"


def capitalize_first(text: str) -> str:
    """Primeira letra maiúscula, resto inalterado"""
    return text[:1].upper() + text[1:]


def format_percent_label(label: str, value: float) -> str:
    """Label percentual (ex.: "Umidade: 80%")"""
    return f"{label}: {round_half_up(value)}%"


def format_wind_label(speed_ms: float) -> str:
    """Label de vento em km/h a partir de m/s"""
    return f"{Labels.WIND}: {meters_per_second_to_kmh(speed_ms)} km/h"
