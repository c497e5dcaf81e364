"""Base service class for domain services."""

from typing import Iterable
from uuid import UUID


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def contains_id(ids: Iterable[UUID], target: UUID | str) -> bool:
    """Membership check on canonical string form.

    Stores may hand back ids as UUIDs or strings, so identity or ``==`` on
    the raw objects is not reliable.
    """
    wanted = str(target)
    return any(str(existing) == wanted for existing in ids)
