import json
from typing import Any, List, Optional, Tuple, Union

import pytest

from podcast_index import PodcastIndexClient, Transport


class FakeResponse:
    def __init__(self, status: int = 200, body: Union[bytes, str, Any] = b"{}") -> None:
        self.status = status
        if isinstance(body, str):
            body = body.encode()
        elif not isinstance(body, bytes):
            body = json.dumps(body).encode()
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        pass


class FakeSession:
    """Returns a sequence of responses (or raises exceptions) for each get()."""

    def __init__(self, responses: List[Union[FakeResponse, BaseException]]) -> None:
        self._responses = list(responses)
        self.calls: List[Tuple[str, dict]] = []
        self.closed = False

    def get(self, url, headers: Optional[dict] = None) -> FakeResponse:
        self.calls.append((str(url), dict(headers or {})))
        if not self._responses:
            raise RuntimeError("No more fake responses")
        resp = self._responses.pop(0)
        if isinstance(resp, BaseException):
            raise resp
        return resp

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    def __init__(self, start_ms: float = 1_700_000_000_000) -> None:
        self.now = start_ms

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_client(clock):
    """Build a client whose transport talks to a FakeSession."""

    def _make(*responses, observer=None):
        session = FakeSession(list(responses))
        transport = Transport(base_url="https://api.test/api/1.0", session=session, clock=clock)
        client = PodcastIndexClient("key", "secret", observer=observer, transport=transport)
        return client, session

    return _make
