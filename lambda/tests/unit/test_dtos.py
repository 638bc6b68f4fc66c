"""
Testes Unitários - Response DTOs (JSON camelCase)
"""
import json

from application.dtos.responses import (
    CitySearchWeatherResponse,
    CitySuggestionResponse,
    CitySuggestionsResponse,
    CityWeatherResponse,
    WeatherDayResponse,
)
from domain.entities.city_suggestion import CitySuggestion
from domain.entities.city_weather import CityWeather
from domain.entities.weather_day import WeatherDay
from domain.value_objects.icon_kind import IconKind


def _make_weather() -> CityWeather:
    return CityWeather(
        city_name="Maricá, BR",
        description="Céu limpo",
        date_time_label="quarta-feira, 11:00",
        current_temp=28,
        min_temp=27,
        max_temp=31,
        precipitation_label="Chuva: 10%",
        humidity_label="Umidade: 70%",
        wind_label="Vento: 18 km/h",
        icon_kind=IconKind.SUN,
        daily=(
            WeatherDay(date="2024-01-10", week_day_label="qua.", min=25, max=30, icon=IconKind.SUN),
            WeatherDay(date="2024-01-11", week_day_label="qui.", min=20, max=20, icon=IconKind.RAIN),
        )
    )


class TestCityWeatherResponse:
    def test_to_dict_uses_camel_case(self):
        data = CityWeatherResponse.from_entity(_make_weather()).to_dict()

        assert data == {
            'cityName': "Maricá, BR",
            'description': "Céu limpo",
            'dateTimeLabel': "quarta-feira, 11:00",
            'currentTemp': 28,
            'minTemp': 27,
            'maxTemp': 31,
            'precipitationLabel': "Chuva: 10%",
            'humidityLabel': "Umidade: 70%",
            'windLabel': "Vento: 18 km/h",
            'iconKind': "sun",
            'daily': [
                {'date': "2024-01-10", 'weekDayLabel': "qua.", 'min': 25, 'max': 30, 'icon': "sun"},
                {'date': "2024-01-11", 'weekDayLabel': "qui.", 'min': 20, 'max': 20, 'icon': "rain"},
            ]
        }

    def test_is_json_serializable(self):
        json.dumps(CityWeatherResponse.from_entity(_make_weather()).to_dict())

    def test_weather_day_response(self):
        day = WeatherDay(date="2024-01-12", week_day_label="sex.", min=18, max=24, icon=IconKind.CLOUD)
        assert WeatherDayResponse.from_entity(day).to_dict()['icon'] == "cloud"


class TestSuggestionResponses:
    def test_suggestion_to_dict(self):
        suggestion = CitySuggestion(id="-22.9--42.8-0", label="Maricá, BR", lat=-22.9, lon=-42.8)

        assert CitySuggestionResponse.from_entity(suggestion).to_dict() == {
            'id': "-22.9--42.8-0",
            'label': "Maricá, BR",
            'lat': -22.9,
            'lon': -42.8
        }

    def test_suggestions_list(self):
        suggestion = CitySuggestion(id="1-2-0", label="Rio, BR", lat=1, lon=2)
        data = CitySuggestionsResponse.from_suggestions("Rio", [suggestion]).to_dict()

        assert data['query'] == "Rio"
        assert data['suggestions'][0]['label'] == "Rio, BR"

    def test_search_weather_response(self):
        suggestion = CitySuggestion(id="1-2-0", label="Maricá, BR", lat=1, lon=2)
        data = CitySearchWeatherResponse.from_entities(suggestion, _make_weather()).to_dict()

        assert data['city']['label'] == "Maricá, BR"
        assert data['weather']['cityName'] == "Maricá, BR"
