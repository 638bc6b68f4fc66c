"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → value objects pertencem à infrastructure!
- infrastructure/adapters/output/providers/openweather/mappers/openweather_data_mapper.py
"""

from domain.services.daily_aggregator import DailyAggregator
from domain.services.snapshot_builder import SnapshotBuilder
from domain.services.suggestion_resolver import SuggestionResolver

__all__ = [
    'DailyAggregator',
    'SnapshotBuilder',
    'SuggestionResolver'
]
