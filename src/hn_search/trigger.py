from __future__ import annotations

import enum
import logging
from typing import Callable, Optional

logger = logging.getLogger("hn_search")


class TriggerState(enum.Enum):
    IDLE = "idle"
    ARMED = "armed"
    FIRED = "fired"


class SearchTrigger:
    """
    Decide when a search should run.

    The caller hands over the live query on every observation. ``on_fire`` runs
    once per distinct non-empty value; seeing the same value again, for example
    after a fetch updated the state and the view was redrawn, does nothing.
    """

    def __init__(self, on_fire: Callable[[str], None]):
        self.on_fire = on_fire
        self.state = TriggerState.IDLE
        self._query: Optional[str] = None

    @property
    def query(self) -> Optional[str]:
        return self._query

    def observe(self, query: Optional[str]) -> bool:
        """Feed the current query. Returns True if a search was fired."""
        if query == self._query:
            return False

        if not query:
            self._query = query
            self.state = TriggerState.IDLE
            return False

        self.state = TriggerState.ARMED
        logger.debug("Search armed for %r", query)
        try:
            self.on_fire(query)
        except Exception:
            # Nothing was started, so the same query may fire again.
            self.reset()
            raise
        self._query = query
        self.state = TriggerState.FIRED
        return True

    def reset(self) -> None:
        """Forget the last query so the next observation fires again."""
        self._query = None
        self.state = TriggerState.IDLE
