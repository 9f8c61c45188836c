"""Bill Sequence Repository Interface"""

from abc import ABC, abstractmethod


class BillSequenceRepository(ABC):
    """
    Hands out bill numbers

    Must run inside the transaction that inserts the bill so that a
    rolled-back bill gives its number back.
    """

    @abstractmethod
    async def next_value(self) -> int:
        """
        Increment the sequence and return the new value

        The first call on an empty database returns 1.
        """
        pass
