"""Shared configuration"""
from .settings import TARGET_COUNTRY, CORS_ORIGIN
from .logger_config import get_logger, logger

__all__ = ['TARGET_COUNTRY', 'CORS_ORIGIN', 'get_logger', 'logger']
