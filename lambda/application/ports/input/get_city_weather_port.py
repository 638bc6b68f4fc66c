"""
Input Port: Interface para buscar dados climáticos por coordenadas
"""
from abc import ABC, abstractmethod

from domain.entities.city_weather import CityWeather


class IGetCityWeatherUseCase(ABC):
    """Interface para caso de uso de buscar clima de uma cidade"""

    @abstractmethod
    async def execute(self, latitude: float, longitude: float) -> CityWeather:
        """
        Busca condições atuais + previsão e normaliza em um snapshot

        Args:
            latitude: Latitude da cidade
            longitude: Longitude da cidade

        Returns:
            CityWeather normalizado

        Raises:
            ValueError: Se coordenadas inválidas
            WeatherProviderException: Se qualquer uma das requisições falhar
        """
        pass
