"""Abstract source of order-number sequence values."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderNumberSequence(ABC):

    @abstractmethod
    def next_value(self) -> int:
        """Atomically increment the counter and return the new value.

        Two callers, even concurrent ones, must never receive the same
        value, and a value once returned is never handed out again.
        """
