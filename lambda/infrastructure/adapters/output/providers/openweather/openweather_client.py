"""
OpenWeather HTTP Client - GET JSON com tradução de erros para exceções de domínio
Compartilhado pelos providers de clima e de geocoding
"""
import asyncio
from typing import Any, Dict, Optional, Type
from urllib.parse import urlparse

import aiohttp

from domain.exceptions import DomainException, ProviderConfigurationException
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenWeatherClient:
    """
    Cliente HTTP mínimo para a OpenWeather

    - Injeta appid em todas as chamadas
    - Status >= 400, erros de conexão, timeouts e JSON inválido viram a
      exceção de domínio informada pelo provider
    - Sem retry
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        """
        Args:
            api_key: OpenWeather API key (settings se None)
            session_manager: Gerenciador de sessão (singleton se None)

        Raises:
            ProviderConfigurationException: Se API key não configurada
        """
        self.api_key = api_key or settings.OPENWEATHER_API_KEY
        if not self.api_key:
            raise ProviderConfigurationException("OPENWEATHER_API_KEY não configurada")

        self.session_manager = session_manager or get_aiohttp_session_manager()

    async def get_json(
        self,
        url: str,
        params: Dict[str, Any],
        exception_class: Type[DomainException]
    ) -> Any:
        """
        Executa GET e retorna o corpo JSON decodificado

        Args:
            url: URL completa do endpoint
            params: Query params (sem appid)
            exception_class: Exceção de domínio a lançar em caso de falha

        Returns:
            JSON decodificado (dict ou list)

        Raises:
            exception_class: Em qualquer falha de transporte ou decodificação
        """
        endpoint = urlparse(url).path
        query = {**params, 'appid': self.api_key}

        try:
            session = await self.session_manager.get_session()
            async with session.get(url, params=query) as response:
                status = response.status

                if status >= 400:
                    logger.warning(
                        "OpenWeather retornou status de erro",
                        endpoint=endpoint,
                        status=status
                    )
                    raise exception_class(
                        f"OpenWeather request failed with status {status}",
                        details={"endpoint": endpoint, "status": status}
                    )

                return await response.json(content_type=None)

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.warning("Falha de conexão com OpenWeather", endpoint=endpoint, error=str(ex))
            raise exception_class(
                f"OpenWeather request failed: {str(ex) or type(ex).__name__}",
                details={"endpoint": endpoint}
            ) from ex

        except ValueError as ex:
            logger.warning("JSON inválido da OpenWeather", endpoint=endpoint, error=str(ex))
            raise exception_class(
                "Invalid JSON returned from OpenWeather",
                details={"endpoint": endpoint}
            ) from ex
