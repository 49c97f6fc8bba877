"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Groups repository writes into one atomic transaction.

    Usage:
        async with unit_of_work.transaction():
            await invitation_repository.save_many(invitations)

    Writes inside the block are committed when it exits normally and rolled
    back when it raises.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        pass
