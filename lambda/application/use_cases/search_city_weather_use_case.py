"""Async Use Case: Busca uma cidade pelo nome e carrega o clima dela"""
from typing import Tuple
from ddtrace import tracer

from application.use_cases.get_city_weather_use_case import GetCityWeatherUseCase
from application.use_cases.search_single_city_use_case import SearchSingleCityUseCase
from domain.constants import Labels
from domain.entities.city_suggestion import CitySuggestion
from domain.entities.city_weather import CityWeather
from domain.exceptions import CityNotFoundException


class SearchCityWeatherUseCase:
    """
    Async use case: composição busca direta → clima

    Os dois pipelines se ligam apenas pelas coordenadas da cidade escolhida.
    """

    def __init__(
        self,
        single_city_use_case: SearchSingleCityUseCase,
        city_weather_use_case: GetCityWeatherUseCase
    ):
        self.single_city_use_case = single_city_use_case
        self.city_weather_use_case = city_weather_use_case

    @tracer.wrap(resource="use_case.search_city_weather")
    async def execute(self, query: str) -> Tuple[CitySuggestion, CityWeather]:
        """
        Returns:
            Tupla (cidade escolhida, snapshot de clima)

        Raises:
            CityNotFoundException: Se nenhuma cidade for encontrada
            GeoProviderException: Se o geocoding falhar
            WeatherProviderException: Se o clima não puder ser carregado
        """
        city = await self.single_city_use_case.execute(query)
        if city is None:
            raise CityNotFoundException(
                Labels.CITY_NOT_FOUND,
                details={"query": (query or "").strip()}
            )

        weather = await self.city_weather_use_case.execute(city.lat, city.lon)
        return city, weather
