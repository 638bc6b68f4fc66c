"""
Configurações e fixtures compartilhadas para testes unitários
"""
import os
import sys
from typing import Any, Dict, List, Optional

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from domain.value_objects.forecast_sample import ForecastSample
from domain.value_objects.geo_candidate import GeoCandidate


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'weather-search-api'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:sa-east-1:123456789012:function:weather-search-api'
        self.memory_limit_in_mb = '256'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/weather-search-api'
        self.log_stream_name = '2026/10/19/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext"""
    return MockContext()


def build_api_gateway_event(
    path: str,
    query_parameters: Optional[Dict[str, str]] = None,
    method: str = 'GET'
) -> Dict[str, Any]:
    """
    Builder de eventos REST do API Gateway (proxy integration)

    Args:
        path: Request path (/api/weather)
        query_parameters: Query string params dict
        method: HTTP method
    """
    return {
        'resource': path,
        'path': path,
        'httpMethod': method,
        'headers': {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'x-session-id': 'test-session'
        },
        'multiValueHeaders': {},
        'pathParameters': None,
        'queryStringParameters': query_parameters,
        'multiValueQueryStringParameters': (
            {k: [v] for k, v in query_parameters.items()} if query_parameters else None
        ),
        'body': None,
        'isBase64Encoded': False,
        'requestContext': {
            'accountId': '123456789012',
            'apiId': 'test',
            'httpMethod': method,
            'path': path,
            'resourcePath': path,
            'stage': 'test',
            'requestId': 'test-request-id-12345',
            'identity': {'sourceIp': '127.0.0.1'}
        }
    }


@pytest.fixture
def api_event():
    """Fixture que expõe o builder de eventos"""
    return build_api_gateway_event


@pytest.fixture
def current_weather_payload():
    """
    Factory de payloads /weather da OpenWeather

    Usage:
        def test_something(current_weather_payload):
            data = current_weather_payload(wind_speed=10)
    """
    def _make(
        name: str = 'Maricá',
        country: str = 'BR',
        dt: int = 1704895200,  # 2024-01-10 14:00 UTC
        timezone: int = -10800,
        description: str = 'céu limpo',
        main: str = 'Clear',
        temp: float = 28.4,
        temp_min: float = 26.6,
        temp_max: float = 30.5,
        humidity: float = 70,
        wind_speed: float = 5.0
    ) -> Dict[str, Any]:
        return {
            'coord': {'lon': -42.8186, 'lat': -22.9194},
            'weather': [{'id': 800, 'main': main, 'description': description, 'icon': '01d'}],
            'main': {
                'temp': temp,
                'feels_like': temp + 1,
                'temp_min': temp_min,
                'temp_max': temp_max,
                'pressure': 1012,
                'humidity': humidity
            },
            'wind': {'speed': wind_speed, 'deg': 120},
            'dt': dt,
            'sys': {'country': country, 'sunrise': 1704875000, 'sunset': 1704923000},
            'timezone': timezone,
            'id': 3458498,
            'name': name,
            'cod': 200
        }

    return _make


def forecast_item(
    dt_txt: str,
    temp: float,
    main: Optional[str] = 'Clear',
    pop: Optional[float] = None
) -> Dict[str, Any]:
    """Item da lista /forecast no formato OpenWeather"""
    item: Dict[str, Any] = {
        'dt_txt': dt_txt,
        'main': {'temp': temp, 'humidity': 70},
        'weather': [{'main': main, 'description': ''}] if main is not None else []
    }
    if pop is not None:
        item['pop'] = pop
    return item


@pytest.fixture
def example_forecast_payload() -> Dict[str, Any]:
    """Três amostras: dois horários em 2024-01-10 e um em 2024-01-11"""
    return {
        'cod': '200',
        'cnt': 3,
        'list': [
            forecast_item('2024-01-10 12:00:00', 30, 'Clear', pop=0.1),
            forecast_item('2024-01-10 15:00:00', 25, 'Clear'),
            forecast_item('2024-01-11 12:00:00', 20, 'Rain'),
        ]
    }


@pytest.fixture
def example_samples() -> List[ForecastSample]:
    """Mesmas três amostras já mapeadas para o domínio"""
    return [
        ForecastSample(date='2024-01-10', temperature=30, condition='Clear', pop=0.1),
        ForecastSample(date='2024-01-10', temperature=25, condition='Clear'),
        ForecastSample(date='2024-01-11', temperature=20, condition='Rain'),
    ]


@pytest.fixture
def example_geo_candidates() -> List[GeoCandidate]:
    """Maricá duplicado (caixa diferente) + uma cidade fora do país alvo"""
    return [
        GeoCandidate(name='Maricá', country='BR', lat=-22.9, lon=-42.8, state='Rio de Janeiro'),
        GeoCandidate(name='maricá', country='BR', lat=-22.9, lon=-42.8),
        GeoCandidate(name='Paris', country='FR', lat=48.8, lon=2.3),
    ]


@pytest.fixture
def make_forecast_item():
    """Factory de itens da lista /forecast"""
    return forecast_item
