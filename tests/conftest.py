from unittest.mock import Mock

import pytest


def make_response(payload=None, status_code=200, json_error=None):
    """Build a stand-in for requests.Response."""
    resp = Mock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def films_payload():
    return {
        "count": 2,
        "results": [
            {
                "episode_id": 4,
                "title": "A New Hope",
                "opening_crawl": "It is a period of civil war.",
                "release_date": "1977-05-25",
                "director": "George Lucas",
            },
            {
                "episode_id": 5,
                "title": "The Empire Strikes Back",
                "opening_crawl": "It is a dark time for the Rebellion.",
                "release_date": "1980-05-17",
            },
        ],
    }


@pytest.fixture
def keyed_payload():
    return {
        "-NxA1": {"title": "Arrival", "openingText": "Linguist meets heptapods.", "releaseDate": "2016-11-11"},
        "-NxB2": {"title": "Dune", "openingText": "Spice must flow.", "releaseDate": "2021-10-22"},
    }
