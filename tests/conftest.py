"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from public_api_checker.api.server import create_app
from public_api_checker.config import CheckerSettings

BASE_URL = "http://upstream.test/"


class Downstream:
    """Fake downstream: records requests and answers with a per-path status."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.statuses: dict[str, int] = {}
        self.default_status = 200
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        status = self.statuses.get(request.url.path, self.default_status)
        return httpx.Response(status, text="body")


@pytest.fixture
def downstream() -> Downstream:
    return Downstream()


@pytest.fixture
def http_client(downstream: Downstream) -> Generator[httpx.Client, None, None]:
    with httpx.Client(transport=httpx.MockTransport(downstream.handler)) as client:
        yield client


@pytest.fixture
def make_client(http_client: httpx.Client) -> Generator[Callable[..., TestClient], None, None]:
    """Factory for a TestClient whose outgoing checks hit the fake downstream."""
    opened: list[TestClient] = []

    def _make(**overrides: object) -> TestClient:
        cfg = CheckerSettings(**{"base_url": BASE_URL, **overrides})
        client = TestClient(create_app(cfg, http_client=http_client))
        client.__enter__()
        opened.append(client)
        return client

    yield _make

    for c in opened:
        c.__exit__(None, None, None)


@pytest.fixture
def client(make_client: Callable[..., TestClient]) -> TestClient:
    return make_client()
