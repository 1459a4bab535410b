import json

import httpx
import pytest

BASE_URL = "https://api.test"


class Recorder:
    """MockTransport handler that answers with a canned response and keeps the requests."""

    def __init__(self, status: int = 200, body=None, *, raw: bytes | None = None, exc=None):
        self.status = status
        self.body = body
        self.raw = raw
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        match self.exc:
            case None:
                pass
            case exc:
                raise exc
        match self.raw:
            case None:
                return httpx.Response(self.status, json=self.body)
            case raw:
                return httpx.Response(self.status, content=raw)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recorder():
    def make(*args, **kwargs) -> tuple[Recorder, httpx.MockTransport]:
        handler = Recorder(*args, **kwargs)
        return handler, httpx.MockTransport(handler)

    return make
