"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CityNotFoundException(DomainException):
    """Raised when no city survives geocoding filtering/deduplication"""
    pass


class InvalidQueryException(DomainException):
    """Raised when search parameters (query, limit) are invalid"""
    pass


class WeatherProviderException(DomainException):
    """Raised when the weather provider fails (HTTP, timeout, bad JSON)"""
    pass


class GeoProviderException(DomainException):
    """Raised when the geocoding provider fails unexpectedly"""
    pass


class ProviderConfigurationException(DomainException):
    """Raised when a provider is missing required configuration (API key)"""
    pass
