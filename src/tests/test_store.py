from __future__ import annotations

from unittest.mock import MagicMock

from hn_search.datamodels import (
    FetchInit,
    FetchSuccess,
    RemoveStory,
    RequestState,
    Story,
)
from hn_search.store import StoryStore


def test_store_starts_empty():
    assert StoryStore().state == RequestState(items=(), is_loading=False, is_error=False)


def test_dispatch_applies_actions_in_order_and_notifies():
    store = StoryStore()
    seen = []
    store.subscribe(seen.append)
    story = Story(id="1", title="A", url="", author="pg")

    store.dispatch(FetchInit())
    store.dispatch(FetchSuccess([story]))
    store.dispatch(RemoveStory("1"))

    assert seen == [
        RequestState(is_loading=True),
        RequestState(items=(story,)),
        RequestState(),
    ]
    assert store.state == RequestState()


def test_unsubscribe_stops_notifications():
    store = StoryStore()
    listener = MagicMock()
    unsubscribe = store.subscribe(listener)
    store.dispatch(FetchInit())
    unsubscribe()
    store.dispatch(FetchInit())
    listener.assert_called_once_with(RequestState(is_loading=True))
