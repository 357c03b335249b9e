from __future__ import annotations

import logging
from typing import Any, Dict, List
from urllib.parse import quote

import requests

from ..config import API_ENDPOINT, HTTP_TIMEOUT, REQUEST_HEADERS
from ..datamodels import Story
from ..exceptions import ResponseDecodeError
from .base import Source

logger = logging.getLogger("hn_search")


class HackerNewsSource(Source):
    """Full-text story search against the Hacker News Algolia API."""

    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        self.endpoint = self.config.get("endpoint") or API_ENDPOINT
        self.timeout = self.config.get("timeout", HTTP_TIMEOUT)
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update(REQUEST_HEADERS)
        return s

    def build_url(self, query: str) -> str:
        return f"{self.endpoint}{quote(query)}"

    def search(self, query: str) -> List[Story]:
        url = self.build_url(query)
        logger.debug("Fetching %s", url)
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        try:
            body = resp.json()
        except ValueError as e:
            raise ResponseDecodeError(f"Response from {url} is not JSON") from e
        stories = decode_hits(body)
        logger.debug("Fetched %d stories for %r", len(stories), query)
        return stories


def decode_hits(body: Any) -> List[Story]:
    """Turn a search response body into stories, keeping the server's order."""
    if not isinstance(body, dict) or not isinstance(body.get("hits"), list):
        raise ResponseDecodeError("Response has no 'hits' list")
    return [_decode_hit(hit) for hit in body["hits"]]


def _decode_hit(hit: Any) -> Story:
    if not isinstance(hit, dict) or hit.get("objectID") in (None, ""):
        raise ResponseDecodeError(f"Malformed hit: {hit!r}")
    try:
        return Story(
            id=str(hit["objectID"]),
            title=hit.get("title") or "",
            url=hit.get("url") or "",
            author=hit.get("author") or "",
            points=int(hit.get("points") or 0),
            num_comments=int(hit.get("num_comments") or 0),
        )
    except (TypeError, ValueError) as e:
        raise ResponseDecodeError(f"Malformed hit: {hit!r}") from e
