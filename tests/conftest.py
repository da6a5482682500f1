"""Shared fixtures for faunaset tests."""

import pytest

from faunaset.api import set_default_client


class RecordingClient:
    """Resource-access client that records calls and replays canned bodies."""

    def __init__(self, body=None):
        self.body = body if body is not None else {'resources': []}
        self.calls = []

    def get(self, path, query=None, pagination=None):
        self.calls.append(('GET', path, dict(query or {}), dict(pagination or {})))
        return self.body

    def put(self, path):
        self.calls.append(('PUT', path))
        return {}

    def delete(self, path):
        self.calls.append(('DELETE', path))
        return {}


@pytest.fixture
def client():
    return RecordingClient()


@pytest.fixture
def events_client():
    return RecordingClient({
        'events': [
            {'resource': 'users/1', 'set': 'users/9/sets/followers',
             'action': 'create', 'ts': 1000000},
            {'resource': 'users/2', 'set': 'users/9/sets/followers',
             'action': 'delete', 'ts': 2500000},
        ],
    })


@pytest.fixture(autouse=True)
def reset_default_client():
    set_default_client(None)
    yield
    set_default_client(None)
