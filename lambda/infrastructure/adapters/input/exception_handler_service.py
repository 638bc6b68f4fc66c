"""
Exception Handler Service
Converte exceções de domínio em respostas HTTP com logging estruturado
"""
import json
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response

from domain.constants import Labels
from domain.exceptions import (
    CityNotFoundException,
    InvalidQueryException,
    WeatherProviderException,
    GeoProviderException,
)
from shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def _json_response(
        status_code: int,
        error_type: str,
        error: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ) -> Response:
        body = {"type": error_type, "error": error, "message": message}
        if details is not None:
            body["details"] = details
        return Response(
            status_code=status_code,
            content_type="application/json",
            body=json.dumps(body, ensure_ascii=False)
        )

    @staticmethod
    def handle_city_not_found(ex: CityNotFoundException) -> Response:
        """Handle 404 - Nenhuma cidade encontrada para a busca"""
        ExceptionHandlerService.logger.warning("City not found", error=str(ex), details=ex.details)
        return ExceptionHandlerService._json_response(
            404, "CityNotFoundException", "City not found", ex.message, ex.details
        )

    @staticmethod
    def handle_invalid_query(ex: InvalidQueryException) -> Response:
        """Handle 400 - Parâmetros de busca inválidos"""
        ExceptionHandlerService.logger.warning("Invalid query", error=str(ex), details=ex.details)
        return ExceptionHandlerService._json_response(
            400, "InvalidQueryException", "Invalid query", ex.message, ex.details
        )

    @staticmethod
    def handle_weather_provider_error(ex: WeatherProviderException) -> Response:
        """Handle 502 - Falha no provider de clima"""
        ExceptionHandlerService.logger.error(
            "Weather provider error", error=str(ex), details=ex.details, exc_info=True
        )
        return ExceptionHandlerService._json_response(
            502, "WeatherProviderException", "Weather provider error",
            Labels.WEATHER_UNAVAILABLE, ex.details
        )

    @staticmethod
    def handle_geo_provider_error(ex: GeoProviderException) -> Response:
        """Handle 502 - Falha no geocoding"""
        ExceptionHandlerService.logger.error(
            "Geo provider error", error=str(ex), details=ex.details, exc_info=True
        )
        return ExceptionHandlerService._json_response(
            502, "GeoProviderException", "Geo provider error",
            Labels.SUGGESTIONS_UNAVAILABLE, ex.details
        )

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return ExceptionHandlerService._json_response(
            400, "ValidationError", "Validation error", str(ex)
        )

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return ExceptionHandlerService._json_response(
            500, "InternalServerError", "Internal server error", "An unexpected error occurred"
        )
