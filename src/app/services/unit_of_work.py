"""Unit of Work Interface

Transaction boundary shared by the repositories of one use case.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Wraps one database transaction

    Repositories flush into the transaction; the use case decides whether
    the whole batch of changes is committed or rolled back.
    """

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @abstractmethod
    async def commit(self) -> None:
        """Make every flushed change durable"""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every change since the last commit"""
        pass
