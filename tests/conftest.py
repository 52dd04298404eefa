import json
import sys
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest
import streamlit as st

# Ensure project root is importable for tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


from persistence.api_client import ApiClient
from services.query_cache import QueryCache
from utils.i18n import set_language

API_URL = "http://api.test"


class FakeResponse:
    def __init__(
        self, status_code: int, payload: Any = None, headers: Optional[Dict[str, str]] = None
    ):
        self.status_code = status_code
        self._payload = payload
        self.headers = headers or {}
        text = json.dumps(payload) if payload is not None else ""
        self._text = text
        self.content = text.encode()

    def json(self) -> Any:
        if not self.content:
            raise ValueError("No JSON body")
        return self._payload

    @property
    def text(self) -> str:
        return self._text


class FakeSession:
    def __init__(self, responses: List[Tuple[str, str, FakeResponse]]):
        self._queue = list(responses)
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []

    def request(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.calls.append((method, url, kwargs))
        if not self._queue:
            raise AssertionError(f"Unexpected request {method} {url}")
        expected_method, expected_url, response = self._queue.pop(0)
        assert expected_method == method
        assert expected_url == url
        return response

    def queue(self, method: str, path: str, response: FakeResponse) -> None:
        self._queue.append((method, f"{API_URL}{path}", response))

    @property
    def empty(self) -> bool:
        return not self._queue


@pytest.fixture(autouse=True)
def english():
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession([])


@pytest.fixture
def api(session: FakeSession) -> ApiClient:
    return ApiClient(base_url=API_URL, token_provider=lambda: "tok-123", session=session)


@pytest.fixture
def cache():
    """A query cache in a scope of its own, on an empty st.cache_data store."""
    st.cache_data.clear()
    yield QueryCache(ttl_seconds=60.0, scope=uuid.uuid4().hex)
    st.cache_data.clear()


@pytest.fixture
def utc_tz(monkeypatch):
    """Pin the local zone so naive datetimes round-trip predictably."""
    import time

    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
