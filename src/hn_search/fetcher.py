from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

import requests

from .datamodels import Action, FetchFailure, FetchInit, FetchSuccess
from .exceptions import SearchError
from .sources.base import Source

logger = logging.getLogger("hn_search")

Dispatch = Callable[[Action], None]


class FetchController:
    """Runs one search and reports its lifecycle as actions."""

    def __init__(self, source: Source):
        self.source = source

    async def fetch_stories(self, query: Optional[str], dispatch: Dispatch) -> None:
        if not query:
            logger.debug("Skipping fetch for empty query")
            return

        dispatch(FetchInit())
        try:
            # requests blocks, so the call runs in a thread and we wait on it.
            stories = await asyncio.to_thread(self.source.search, query)
        except (requests.RequestException, SearchError, ValueError) as e:
            logger.warning("Search for %r failed: %s", query, e)
            dispatch(FetchFailure())
            return
        dispatch(FetchSuccess(stories))
