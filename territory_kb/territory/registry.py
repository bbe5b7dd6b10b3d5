"""Process-wide TerritoryService instance.

Construction happens once, under a lock, before query traffic; afterwards
``get_service()`` is a plain read.
"""

from __future__ import annotations

import threading
from typing import Any

from territory_kb.models.territory import TerritoryDataset
from territory_kb.territory.service import TerritoryService

_lock = threading.Lock()
_service: TerritoryService | None = None


def configure(
    dataset: TerritoryDataset,
    *,
    replace: bool = False,
    **kwargs: Any,
) -> TerritoryService:
    """Build the shared service from a dataset.

    Raises:
        RuntimeError: If already configured and replace is False.
    """
    global _service
    with _lock:
        if _service is not None and not replace:
            raise RuntimeError("Territory service is already configured")
        _service = TerritoryService(dataset, **kwargs)
        return _service


def get_service() -> TerritoryService:
    """Return the shared service.

    Raises:
        RuntimeError: If configure() has not been called.
    """
    service = _service
    if service is None:
        raise RuntimeError(
            "Territory service is not configured. Call configure(dataset) first."
        )
    return service


def reset() -> None:
    """Drop the shared service (test helper)."""
    global _service
    with _lock:
        _service = None
