"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Optional, Type

from domain.constants import Suggestions
from domain.exceptions import InvalidQueryException
from domain.value_objects.coordinates import Coordinates


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def validate_range(
        value: float,
        min_val: float,
        max_val: float,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> float:
        """
        Valida se valor numérico está dentro do range

        Args:
            value: Valor a validar
            min_val: Valor mínimo permitido
            max_val: Valor máximo permitido
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar

        Returns:
            Valor validado

        Raises:
            exception_class: Se valor fora do range
        """
        if not (min_val <= value <= max_val):
            message = f"{param_name} must be between {min_val} and {max_val}"
            if issubclass(exception_class, InvalidQueryException):
                raise exception_class(
                    message,
                    details={param_name: value, "min": min_val, "max": max_val}
                )
            raise exception_class(message)
        return value

    @staticmethod
    def validate_not_empty(
        value: Optional[str],
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> str:
        """
        Valida se string não está vazia

        Returns:
            String validada e trimmed

        Raises:
            exception_class: Se string vazia
        """
        if not value or not value.strip():
            raise exception_class(f"{param_name} cannot be empty")
        return value.strip()

    @staticmethod
    def parse_float(value: Optional[str], param_name: str) -> float:
        """
        Converte parâmetro de query string para float

        Raises:
            ValueError: Se ausente ou não numérico
        """
        if value is None or not value.strip():
            raise ValueError(f"{param_name} is required")
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"Invalid {param_name} format: {value}")

    @staticmethod
    def parse_int(value: Optional[str], param_name: str) -> int:
        """
        Converte parâmetro de query string para int

        Raises:
            InvalidQueryException: Se não for inteiro
        """
        try:
            return int(value)
        except (TypeError, ValueError):
            raise InvalidQueryException(
                f"Invalid {param_name} format: {value}",
                details={param_name: value}
            )


class QueryValidator:
    """Validate city search query"""

    @staticmethod
    def validate(query: Optional[str]) -> str:
        """
        Validate query text is present

        Returns:
            Trimmed query

        Raises:
            InvalidQueryException: If query is missing or blank
        """
        return GenericValidator.validate_not_empty(
            value=query,
            param_name="q",
            exception_class=InvalidQueryException
        )


class LimitValidator:
    """Validate suggestions limit parameter"""

    MIN_LIMIT = 1
    MAX_LIMIT = Suggestions.MAX_LIMIT

    @staticmethod
    def validate(limit: Optional[str]) -> int:
        """
        Validate limit is an integer within range (default when omitted)

        Raises:
            InvalidQueryException: If limit is not an integer or out of range
        """
        if limit is None or limit == "":
            return Suggestions.DEFAULT_LIMIT
        parsed = GenericValidator.parse_int(limit, "limit")
        GenericValidator.validate_range(
            value=parsed,
            min_val=LimitValidator.MIN_LIMIT,
            max_val=LimitValidator.MAX_LIMIT,
            param_name="limit",
            exception_class=InvalidQueryException
        )
        return parsed


class CoordinatesValidator:
    """Validate lat/lon query parameters"""

    @staticmethod
    def validate(lat: Optional[str], lon: Optional[str]) -> Coordinates:
        """
        Parse and validate coordinates

        Returns:
            Coordinates value object

        Raises:
            ValueError: If missing, non-numeric or out of range
        """
        return Coordinates(
            latitude=GenericValidator.parse_float(lat, "lat"),
            longitude=GenericValidator.parse_float(lon, "lon")
        )
