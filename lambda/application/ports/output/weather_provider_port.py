"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod
from typing import List

from domain.value_objects.current_conditions import CurrentConditions
from domain.value_objects.forecast_sample import ForecastSample


class IWeatherProvider(ABC):
    """
    Interface genérica para provedores de dados meteorológicos.
    Implementações fazem apenas transporte + mapeamento para os value objects
    de entrada; nenhum default é aplicado aqui.
    """

    @abstractmethod
    async def get_current_conditions(
        self,
        latitude: float,
        longitude: float
    ) -> CurrentConditions:
        """
        Busca condições atuais

        Args:
            latitude: Latitude da localização
            longitude: Longitude da localização

        Returns:
            CurrentConditions com campos opcionais

        Raises:
            WeatherProviderException: Se o provider falhar
        """
        pass

    @abstractmethod
    async def get_forecast_samples(
        self,
        latitude: float,
        longitude: float
    ) -> List[ForecastSample]:
        """
        Busca previsão de 3 em 3 horas

        Returns:
            Lista de ForecastSample na ordem da API (vazia se ausente)

        Raises:
            WeatherProviderException: Se o provider falhar
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenWeather')"""
        pass
