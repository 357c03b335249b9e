from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

import pytest
import requests

from hn_search.datamodels import FetchFailure, FetchInit, FetchSuccess, Story
from hn_search.exceptions import ResponseDecodeError
from hn_search.fetcher import FetchController
from hn_search.sources.hackernews import HackerNewsSource, decode_hits

HITS_BODY = {
    "hits": [
        {
            "objectID": "1",
            "title": "React 19",
            "url": "https://react.dev",
            "author": "dan",
            "points": 120,
            "num_comments": 45,
        },
        {
            "objectID": "2",
            "title": None,
            "url": None,
            "author": "pg",
            "points": None,
            "num_comments": None,
        },
    ]
}


def make_response(body=None, status_error=None, json_error=None):
    resp = MagicMock()
    if status_error:
        resp.raise_for_status.side_effect = status_error
    if json_error:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def hn_source():
    return HackerNewsSource({"endpoint": "https://hn.test/search?query="})


def run_fetch(controller, query):
    actions = []
    asyncio.run(controller.fetch_stories(query, actions.append))
    return actions


def test_decode_hits_maps_fields():
    stories = decode_hits(HITS_BODY)
    assert stories[0] == Story(
        id="1",
        title="React 19",
        url="https://react.dev",
        author="dan",
        points=120,
        num_comments=45,
    )
    assert stories[1] == Story(id="2", title="", url="", author="pg")


@pytest.mark.parametrize(
    "body",
    [
        [],
        {},
        {"hits": "nope"},
        {"hits": [{"title": "no id"}]},
        {"hits": ["not a dict"]},
        {"hits": [{"objectID": "1", "points": "many"}]},
    ],
)
def test_decode_hits_rejects_malformed_bodies(body):
    with pytest.raises(ResponseDecodeError):
        decode_hits(body)


def test_search_requests_endpoint_plus_query(hn_source):
    with patch.object(hn_source.session, "get") as mock_get:
        mock_get.return_value = make_response(HITS_BODY)
        stories = hn_source.search("react hooks")

    mock_get.assert_called_once_with(
        "https://hn.test/search?query=react%20hooks", timeout=hn_source.timeout
    )
    assert [s.id for s in stories] == ["1", "2"]


def test_fetch_stories_dispatches_init_then_success(hn_source):
    controller = FetchController(hn_source)
    with patch.object(hn_source.session, "get") as mock_get:
        mock_get.return_value = make_response(HITS_BODY)
        actions = run_fetch(controller, "react")

    assert len(actions) == 2
    assert actions[0] == FetchInit()
    assert isinstance(actions[1], FetchSuccess)
    assert [s.id for s in actions[1].payload] == ["1", "2"]


@pytest.mark.parametrize(
    "response_kwargs",
    [
        {"status_error": requests.HTTPError("503 Server Error")},
        {"json_error": ValueError("Expecting value")},
        {"body": {"nbHits": 0}},
    ],
)
def test_fetch_stories_dispatches_failure(hn_source, response_kwargs):
    controller = FetchController(hn_source)
    with patch.object(hn_source.session, "get") as mock_get:
        mock_get.return_value = make_response(**response_kwargs)
        actions = run_fetch(controller, "react")

    assert actions == [FetchInit(), FetchFailure()]


def test_fetch_stories_dispatches_failure_on_network_error(hn_source):
    controller = FetchController(hn_source)
    with patch.object(hn_source.session, "get") as mock_get:
        mock_get.side_effect = requests.ConnectionError("connection refused")
        actions = run_fetch(controller, "react")

    assert actions == [FetchInit(), FetchFailure()]


@pytest.mark.parametrize("query", ["", None])
def test_fetch_stories_skips_empty_query(query):
    source = MagicMock()
    actions = run_fetch(FetchController(source), query)

    assert actions == []
    source.search.assert_not_called()
