"""Base use case and shared request/response plumbing."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Model serialized with camelCase keys (``tagList``, ``createdAt``).

    Fields can still be populated by their Python names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
