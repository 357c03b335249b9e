from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..datamodels import Story


class Source(ABC):
    """Abstract base class for a story search backend."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    @abstractmethod
    def search(self, query: str) -> List[Story]:
        """Return the stories matching ``query``.

        Raises a ``requests.RequestException`` on transport failures and a
        ``ResponseDecodeError`` when the body is not a usable result list.
        """
        pass
