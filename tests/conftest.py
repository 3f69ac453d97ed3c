"""
Shared fixtures: a transport that records calls instead of sending them.
"""

from typing import Any, Dict, List, Optional

import pytest

from dbxclient.api.api import Api


class SpyTransport:
    """Records every fetch() call and answers with a canned body or error."""

    def __init__(self, response: bytes = b"{}", error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def fetch(self, uri, params=None, method="GET", headers=None):
        self.calls.append({"uri": uri, "params": params, "method": method, "headers": headers})
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]


CONTENT_URL = "https://content.test/0/"


@pytest.fixture
def transport():
    return SpyTransport()


@pytest.fixture
def api(transport):
    return Api(transport, content_url=CONTENT_URL)


@pytest.fixture
def dropbox_api(transport):
    return Api(transport, root="dropbox", content_url=CONTENT_URL)


@pytest.fixture
def make_transport():
    return SpyTransport
