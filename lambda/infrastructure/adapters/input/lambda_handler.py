"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import asyncio
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - Use Cases (ASYNC)
from application.use_cases.get_city_weather_use_case import GetCityWeatherUseCase
from application.use_cases.search_city_suggestions_use_case import SearchCitySuggestionsUseCase
from application.use_cases.search_single_city_use_case import SearchSingleCityUseCase
from application.use_cases.search_city_weather_use_case import SearchCityWeatherUseCase
from application.dtos.responses import (
    CityWeatherResponse,
    CitySuggestionResponse,
    CitySuggestionsResponse,
    CitySearchWeatherResponse,
)

# Domain Layer
from domain.constants import Labels
from domain.exceptions import (
    CityNotFoundException,
    InvalidQueryException,
    WeatherProviderException,
    GeoProviderException,
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.providers.weather_provider_factory import get_weather_provider_factory

# Shared Layer - Utilities
from shared.config.settings import CORS_ORIGIN
from shared.utils.validators import QueryValidator, LimitValidator, CoordinatesValidator
from shared.config.logger_config import get_logger

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=CORS_ORIGIN))

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.exception_handler(CityNotFoundException)(exception_service.handle_city_not_found)
app.exception_handler(InvalidQueryException)(exception_service.handle_invalid_query)
app.exception_handler(WeatherProviderException)(exception_service.handle_weather_provider_error)
app.exception_handler(GeoProviderException)(exception_service.handle_geo_provider_error)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


# =============================
# Routes (Async execution with sync wrappers for AWS Powertools compatibility)
# =============================

@app.get("/api/cities/suggestions")
def get_city_suggestions_route():
    """
    GET /api/cities/suggestions?q=mar&limit=5

    Autocomplete: até `limit` cidades únicas do país alvo.
    Consultas com menos de 3 caracteres retornam lista vazia sem chamar a API.
    """
    query = app.current_event.get_query_string_value(name="q", default_value="") or ""
    limit = LimitValidator.validate(
        app.current_event.get_query_string_value(name="limit", default_value=None)
    )

    geo_provider = get_weather_provider_factory().get_geo_provider()
    use_case = SearchCitySuggestionsUseCase(geo_provider)
    suggestions = run_async(use_case.execute(query, limit))

    return CitySuggestionsResponse.from_suggestions(query.strip(), suggestions).to_dict()


@app.get("/api/cities/search")
def get_city_search_route():
    """
    GET /api/cities/search?q=Maricá

    Busca direta: primeira cidade do país alvo ou 404
    """
    query = QueryValidator.validate(
        app.current_event.get_query_string_value(name="q", default_value=None)
    )

    geo_provider = get_weather_provider_factory().get_geo_provider()
    use_case = SearchSingleCityUseCase(geo_provider)
    city = run_async(use_case.execute(query))

    if city is None:
        raise CityNotFoundException(Labels.CITY_NOT_FOUND, details={"query": query})

    return CitySuggestionResponse.from_entity(city).to_dict()


@app.get("/api/weather")
def get_weather_route():
    """
    GET /api/weather?lat=-22.91&lon=-42.82

    Snapshot de clima (condições atuais + até 6 dias) para as coordenadas
    """
    coordinates = CoordinatesValidator.validate(
        app.current_event.get_query_string_value(name="lat", default_value=None),
        app.current_event.get_query_string_value(name="lon", default_value=None)
    )

    weather_provider = get_weather_provider_factory().get_weather_provider()
    use_case = GetCityWeatherUseCase(weather_provider)
    weather = run_async(use_case.execute(coordinates.latitude, coordinates.longitude))

    return CityWeatherResponse.from_entity(weather).to_dict()


@app.get("/api/weather/search")
def get_weather_search_route():
    """
    GET /api/weather/search?q=Maricá

    Busca direta seguida do clima da cidade encontrada: {city, weather}
    """
    query = QueryValidator.validate(
        app.current_event.get_query_string_value(name="q", default_value=None)
    )

    factory = get_weather_provider_factory()
    use_case = SearchCityWeatherUseCase(
        single_city_use_case=SearchSingleCityUseCase(factory.get_geo_provider()),
        city_weather_use_case=GetCityWeatherUseCase(factory.get_weather_provider())
    )
    city, weather = run_async(use_case.execute(query))

    return CitySearchWeatherResponse.from_entities(city, weather).to_dict()


# =============================
# Lambda Handler (100% ASYNC)
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Available routes:
    - GET /api/cities/suggestions?q=<texto>&limit=<1..5>
    - GET /api/cities/search?q=<texto>
    - GET /api/weather?lat=<lat>&lon=<lon>
    - GET /api/weather/search?q=<texto>
    """
    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        session_id=headers.get('x-session-id', 'N/A')
    )

    response = app.resolve(event, context)

    if 'headers' not in response or response['headers'] is None:
        response['headers'] = {}

    response['headers']['Access-Control-Allow-Origin'] = CORS_ORIGIN
    response['headers']['Access-Control-Allow-Headers'] = 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Requested-With,X-Session-Id'
    response['headers']['Access-Control-Allow-Methods'] = 'GET,OPTIONS'
    response['headers']['Access-Control-Max-Age'] = '86400'

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    Reutilizado entre invocações Lambda (warm starts) para que a sessão
    aiohttp compartilhada continue válida.
    """
    global _global_event_loop

    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop

    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)

    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)

    Args:
        coro: Coroutine a ser executada

    Returns:
        Resultado da coroutine
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
