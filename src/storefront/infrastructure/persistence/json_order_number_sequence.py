"""JSON-file-backed order-number counter."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.exceptions import AllocationError
from storefront.domain.repository.order_number_sequence import OrderNumberSequence
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderNumberSequence(OrderNumberSequence):
    """Single-row counter: ``{"order_number": <last value handed out>}``."""

    KEY = "order_number"

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty={self.KEY: 0})

    def next_value(self) -> int:
        with self._file.lock:
            try:
                state = self._file.read()
                current = int(state.get(self.KEY, 0))
            except (OSError, ValueError, AttributeError) as exc:
                raise AllocationError(f"Order number counter unreadable: {exc}") from exc

            value = current + 1
            state[self.KEY] = value
            try:
                self._file.write(state)
            except OSError as exc:
                raise AllocationError(f"Order number counter not writable: {exc}") from exc
            return value
