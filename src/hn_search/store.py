from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .datamodels import Action, RequestState
from .reducer import reduce

logger = logging.getLogger("hn_search")

Listener = Callable[[RequestState], None]


class StoryStore:
    """Holds the current RequestState and applies dispatched actions to it."""

    def __init__(
        self,
        initial: Optional[RequestState] = None,
        reducer: Callable[[RequestState, Action], RequestState] = reduce,
    ):
        self.state = initial or RequestState()
        self._reducer = reducer
        self._listeners: List[Listener] = []

    def dispatch(self, action: Action) -> None:
        logger.debug("Dispatching %r", action)
        self.state = self._reducer(self.state, action)
        for listener in list(self._listeners):
            listener(self.state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every dispatch. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
