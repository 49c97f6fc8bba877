"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from vouch.domain.error import DomainError, ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_uuid(value: str, error: DomainError | None = None) -> UUID:
    """Parse an identifier taken from a request.

    Raises:
        DomainError: ``error`` if given, otherwise ValidationError
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise error or ValidationError(f"Invalid id: {value}")
