"""
Domain Helpers - Funções utilitárias de classificação e formatação
"""
from domain.helpers.weather_classifier import classify_icon
from domain.helpers.label_formatter import (
    round_half_up,
    meters_per_second_to_kmh,
    format_weekday_short,
    format_local_datetime,
    capitalize_first,
    format_percent_label,
    format_wind_label,
)

__all__ = [
    'classify_icon',
    'round_half_up',
    'meters_per_second_to_kmh',
    'format_weekday_short',
    'format_local_datetime',
    'capitalize_first',
    'format_percent_label',
    'format_wind_label',
]
