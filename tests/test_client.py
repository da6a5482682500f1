"""
Tests for the HTTP client.

Tests cover:
- URL construction from scheme/domain/port
- Query and pagination parameters merged into one request
- Unwrapping {"resource": ...} bodies
- Errors propagate unchanged
- End-to-end page/events through a mocked session
"""

from unittest.mock import Mock, patch

import pytest
import requests

from faunaset.infra import FaunaClient
from faunaset.query import each, union
from faunaset.domain import Set


def make_response(body=None, status=200):
    response = Mock()
    response.status_code = status
    response.content = b'{}' if body is not None else b''
    response.json.return_value = body
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error", response=response)
    else:
        response.raise_for_status = Mock()
    return response


class TestFaunaClient:
    """Tests for FaunaClient with mocked HTTP."""

    def test_base_url_default_port(self):
        client = FaunaClient(secret='s')
        assert client.base_url == "https://rest.fauna.org/v1"

    def test_base_url_custom_port(self):
        client = FaunaClient(domain='localhost', scheme='http', port=8444)
        assert client.base_url == "http://localhost:8444/v1"
        assert client.url('/users/1') == "http://localhost:8444/v1/users/1"

    def test_secret_sent_as_basic_auth(self):
        client = FaunaClient(secret='kqnPAi')
        assert client.session.auth == ('kqnPAi', '')

    def test_no_secret_no_auth(self):
        client = FaunaClient()
        assert client.session.auth is None

    def test_get_merges_query_and_pagination(self):
        client = FaunaClient(secret='s')
        with patch.object(client.session, 'request',
                          return_value=make_response({'resources': []})) as mock_request:
            client.get('query', {'q': 'union(a,b)'}, {'size': 10, 'before': 'c1'})

        mock_request.assert_called_once()
        args, kwargs = mock_request.call_args
        assert args == ('GET', 'https://rest.fauna.org/v1/query')
        assert kwargs['params'] == {'size': 10, 'before': 'c1', 'q': 'union(a,b)'}
        assert kwargs['timeout'] == 60

    def test_get_without_params(self):
        client = FaunaClient(secret='s')
        with patch.object(client.session, 'request',
                          return_value=make_response({'resources': []})) as mock_request:
            client.get('users/1/sets/a')

        assert mock_request.call_args.kwargs['params'] is None

    def test_get_unwraps_resource(self):
        client = FaunaClient(secret='s')
        body = {'resource': {'resources': ['users/1']}}
        with patch.object(client.session, 'request', return_value=make_response(body)):
            assert client.get('users/1/sets/a') == {'resources': ['users/1']}

    def test_get_unwrapped_body(self):
        client = FaunaClient(secret='s')
        with patch.object(client.session, 'request',
                          return_value=make_response({'events': []})):
            assert client.get('users/1/sets/a/events') == {'events': []}

    def test_put_and_delete(self):
        client = FaunaClient(secret='s')
        with patch.object(client.session, 'request', return_value=make_response()) as mock_request:
            assert client.put('users/1/sets/fav/posts/2') == {}
            assert client.delete('users/1/sets/fav/posts/2') == {}

        methods = [c.args[0] for c in mock_request.call_args_list]
        assert methods == ['PUT', 'DELETE']
        assert mock_request.call_args.args[1] == 'https://rest.fauna.org/v1/users/1/sets/fav/posts/2'

    def test_http_error_propagates(self):
        client = FaunaClient(secret='s')
        with patch.object(client.session, 'request', return_value=make_response({}, status=404)):
            with pytest.raises(requests.HTTPError):
                client.get('users/1/sets/missing')

    def test_connection_error_propagates(self):
        client = FaunaClient(secret='s')
        with patch.object(client.session, 'request',
                          side_effect=requests.ConnectionError("refused")):
            with pytest.raises(requests.ConnectionError):
                client.put('users/1/sets/fav/posts/2')

    def test_from_config(self):
        config = {'connection': {
            'secret': 'abc', 'domain': 'db.example.com', 'scheme': 'https',
            'port': 9443, 'timeout_seconds': 5, 'user_agent': 'tests',
        }}
        client = FaunaClient.from_config(config)

        assert client.base_url == "https://db.example.com:9443/v1"
        assert client.timeout == 5
        assert client.session.auth == ('abc', '')
        assert client.session.headers['User-Agent'] == 'tests'


class TestSetsOverHttp:
    """Set handles driving a real FaunaClient with a mocked session."""

    def test_expression_page(self):
        client = FaunaClient(secret='s')
        body = {'resource': {'resources': ['users/1', 'users/2'], 'after': 'next'}}
        with patch.object(client.session, 'request', return_value=make_response(body)) as mock_request:
            page = union('users/9/sets/a', 'users/9/sets/b').page({'size': 2}, client=client)

        assert list(page) == ['users/1', 'users/2']
        assert page.after == 'next'
        assert mock_request.call_args.kwargs['params'] == {
            'size': 2, 'q': 'union(users/9/sets/a,users/9/sets/b)',
        }

    def test_each_events(self):
        client = FaunaClient(secret='s')
        body = {'events': [{'resource': 'posts/1', 'action': 'create', 'ts': 10}]}
        with patch.object(client.session, 'request', return_value=make_response(body)) as mock_request:
            page = each('users/1/sets/follows', 'users/self/sets/posts').events(client=client)

        assert page[0].ref == 'posts/1/events/10/create'
        assert mock_request.call_args.kwargs['params'] == {
            'q': 'each(events(users/1/sets/follows),users/self/sets/posts)',
        }

    def test_plain_events_path(self):
        client = FaunaClient(secret='s')
        with patch.object(client.session, 'request',
                          return_value=make_response({'events': []})) as mock_request:
            page = Set('users/1/sets/followers').events(client=client)

        assert page.empty
        assert mock_request.call_args.args[1] == 'https://rest.fauna.org/v1/users/1/sets/followers/events'
        assert mock_request.call_args.kwargs['params'] is None
