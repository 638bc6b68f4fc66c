"""Output Ports - Interfaces para providers externos"""
from application.ports.output.weather_provider_port import IWeatherProvider
from application.ports.output.geo_provider_port import IGeoProvider

__all__ = ['IWeatherProvider', 'IGeoProvider']
