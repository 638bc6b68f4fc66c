"""Async Use Case: Get City Weather (condições atuais + previsão de 3h em paralelo)"""
import asyncio
from ddtrace import tracer

from application.ports.input.get_city_weather_port import IGetCityWeatherUseCase
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.entities.city_weather import CityWeather
from domain.services.snapshot_builder import SnapshotBuilder
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetCityWeatherUseCase(IGetCityWeatherUseCase):
    """
    Async use case: snapshot de clima por coordenadas

    Fan-out/fan-in fixo de duas requisições. Não existe resultado parcial:
    se qualquer uma falhar, a operação inteira falha.
    """

    def __init__(self, weather_provider: IWeatherProvider):
        self.weather_provider = weather_provider

    @tracer.wrap(resource="use_case.get_city_weather")
    async def execute(self, latitude: float, longitude: float) -> CityWeather:
        """
        Execute use case asynchronously

        Args:
            latitude: Latitude da cidade
            longitude: Longitude da cidade

        Returns:
            CityWeather normalizado

        Raises:
            ValueError: Se coordenadas fora do range
            WeatherProviderException: Se qualquer requisição falhar
        """
        coordinates = Coordinates(latitude=latitude, longitude=longitude)

        # Execute TWO API calls in parallel
        results = await asyncio.gather(
            self.weather_provider.get_current_conditions(*coordinates.to_tuple()),
            self.weather_provider.get_forecast_samples(*coordinates.to_tuple()),
            return_exceptions=True  # aguardar ambas antes de propagar
        )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        current, forecast_samples = results

        weather = SnapshotBuilder.build(current, forecast_samples)

        logger.info(
            "Clima normalizado",
            provider=self.weather_provider.provider_name,
            cidade=weather.city_name,
            coordenadas=str(coordinates),
            amostras=len(forecast_samples),
            dias=len(weather.daily)
        )
        return weather
