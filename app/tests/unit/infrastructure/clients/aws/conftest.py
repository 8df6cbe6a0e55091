"""Fixtures for AWS client tests.

Provides factory-as-fixture pattern for creating configurable fake boto3
clients. Tests monkeypatch
`infrastructure.clients.aws.executor.get_boto3_client` to return them.
"""

from typing import Any, Dict, List, Optional

import pytest

from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.sqs import SqsClient


class FakeClient:
    """Configurable fake boto3 client for unit tests.

    API methods are looked up in `api_responses`; a callable response is
    invoked with the call's keyword arguments. Every call is recorded in
    `calls` as (method, kwargs).
    """

    def __init__(self, api_responses: Optional[Dict[str, Any]] = None):
        self._api_responses = api_responses or {}
        self.calls: List[tuple] = []

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._api_responses:
            raise AttributeError(name)
        resp = self._api_responses[name]

        def _call(*_args, **kwargs):
            self.calls.append((name, kwargs))
            if callable(resp):
                return resp(**kwargs)
            return resp

        return _call


@pytest.fixture
def make_fake_client():
    """Factory fixture for creating configurable fake boto3 clients.

    Usage:
        def test_something(make_fake_client, monkeypatch):
            client = make_fake_client(api_responses={"create_queue": {...}})
            monkeypatch.setattr(executor, "get_boto3_client", lambda *a, **k: client)
    """

    def _factory(api_responses: Optional[Dict[str, Any]] = None) -> FakeClient:
        return FakeClient(api_responses=api_responses)

    return _factory


@pytest.fixture
def patch_boto3_client(monkeypatch):
    """Route executor client creation to a given fake, recording the kwargs."""
    recorded: List[Dict[str, Any]] = []

    def _patch(client):
        def _get_boto3_client(service_name, **kwargs):
            recorded.append({"service_name": service_name, **kwargs})
            return client

        monkeypatch.setattr(
            "infrastructure.clients.aws.executor.get_boto3_client", _get_boto3_client
        )
        return recorded

    return _patch


@pytest.fixture
def sqs_client():
    return SqsClient(SessionProvider(region="ca-central-1"))
