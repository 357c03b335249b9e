from __future__ import annotations

from dataclasses import replace

from .datamodels import (
    Action,
    FetchFailure,
    FetchInit,
    FetchSuccess,
    RemoveStory,
    RequestState,
)
from .exceptions import UnknownActionError


def reduce(state: RequestState, action: Action) -> RequestState:
    """Return the state that results from applying ``action`` to ``state``."""
    if isinstance(action, FetchInit):
        return replace(state, is_loading=True, is_error=False)
    elif isinstance(action, FetchSuccess):
        # Results for a new search are never merged with the previous ones.
        return RequestState(items=action.payload, is_loading=False, is_error=False)
    elif isinstance(action, FetchFailure):
        return replace(state, is_loading=False, is_error=True)
    elif isinstance(action, RemoveStory):
        return replace(
            state, items=tuple(s for s in state.items if s.id != action.id)
        )
    raise UnknownActionError(action)
