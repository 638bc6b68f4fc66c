"""
Configuração centralizada de logging para a aplicação
Logger AWS Lambda Powertools (JSON estruturado) com service name do Datadog
"""
import os
from typing import Optional

from aws_lambda_powertools import Logger


def get_logger(
    service_name: Optional[str] = None,
    child: bool = False,
    level: Optional[str] = None
) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Args:
        service_name: Nome do serviço (se None, usa DD_SERVICE do ambiente)
        child: Se True, cria um child logger (herda handlers do logger principal)
        level: Nível de log (se None, usa LOG_LEVEL do ambiente, padrão INFO)

    Returns:
        Logger configurado
    """
    if service_name is None:
        service_name = os.environ.get('DD_SERVICE', 'weather-search')

    if child:
        return Logger(service=service_name, child=True)

    return Logger(
        service=service_name,
        level=level or os.environ.get('LOG_LEVEL', 'INFO')
    )


# Logger principal da aplicação
logger = get_logger()
