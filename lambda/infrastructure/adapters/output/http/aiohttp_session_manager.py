"""
Aiohttp Session Manager - Singleton para a sessão HTTP compartilhada
Reutiliza a sessão entre invocações Lambda (warm starts) e entre providers
"""
import asyncio
from typing import Optional

import aiohttp

from domain.constants import API
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador singleton da sessão aiohttp usada pelos providers OpenWeather

    - Sessão persiste dentro do mesmo event loop
    - Recriada quando o event loop muda (asyncio.run cria loops novos)
    - Pool de conexões e timeouts definidos em domain.constants.API
    - Sem política de retry: falhas sobem para o provider

    Uso:
        manager = get_aiohttp_session_manager()
        session = await manager.get_session()
        async with session.get(url, params=params) as response:
            data = await response.json()
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(
        self,
        total_timeout: int = API.HTTP_TIMEOUT_TOTAL,
        connect_timeout: int = API.HTTP_TIMEOUT_CONNECT,
        sock_read_timeout: int = API.HTTP_TIMEOUT_READ,
        limit: int = API.HTTP_CONNECTION_LIMIT,
        limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST,
        ttl_dns_cache: int = API.DNS_CACHE_TTL
    ):
        self.timeout = aiohttp.ClientTimeout(
            total=total_timeout,
            connect=connect_timeout,
            sock_read=sock_read_timeout
        )
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    @classmethod
    def get_instance(cls) -> 'AiohttpSessionManager':
        """Retorna instância singleton do gerenciador"""
        if cls._instance is None:
            cls._instance = cls()
            logger.info(
                "AiohttpSessionManager singleton created",
                total_timeout=cls._instance.timeout.total,
                limit=cls._instance.limit
            )
        return cls._instance

    def _is_reusable(self, loop_id: int) -> bool:
        return (
            self._session is not None
            and not self._session.closed
            and self._session_loop_id == loop_id
        )

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        Returns:
            Sessão aiohttp vinculada ao event loop corrente

        Raises:
            RuntimeError: Se chamado fora de um event loop
        """
        current_loop_id = id(asyncio.get_running_loop())

        if self._is_reusable(current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self.close()

        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )
        self._session = aiohttp.ClientSession(timeout=self.timeout, connector=connector)
        self._session_loop_id = current_loop_id

        logger.debug("Aiohttp session created", loop_id=current_loop_id)
        return self._session

    async def close(self) -> None:
        """Fecha a sessão existente (cleanup ao fim do processo ou em testes)"""
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
            except aiohttp.ClientError as e:
                logger.warning(
                    "Error closing aiohttp session",
                    error=str(e),
                    loop_id=self._session_loop_id
                )
        self._session = None
        self._session_loop_id = None

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (útil para testes)"""
        cls._instance = None


def get_aiohttp_session_manager() -> AiohttpSessionManager:
    """Factory function para obter instância singleton do gerenciador"""
    return AiohttpSessionManager.get_instance()
