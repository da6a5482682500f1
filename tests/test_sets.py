"""
Tests for set handles.

Tests cover:
- Request shapes for plain, expression and each sets
- Pagination options forwarded verbatim
- add/remove as free functions and CustomSet methods
- Default client fallback
- Transport errors propagate
"""

import pytest
import requests

from faunaset.api import set_default_client
from faunaset.domain import CustomSet, EachSet, EventsPage, QuerySet, Set, SetPage
from faunaset.query import add, each, intersection, match, remove, union


class TestPlainSet:
    """Tests for plain named sets."""

    def test_ref(self):
        assert Set('users/123/sets/followers').ref == 'users/123/sets/followers'

    def test_page_requests_ref_without_query(self, client):
        client.body = {'resources': ['users/1', 'users/2']}
        page = Set('users/123/sets/followers').page(client=client)

        assert client.calls == [('GET', 'users/123/sets/followers', {}, {})]
        assert isinstance(page, SetPage)
        assert list(page) == ['users/1', 'users/2']

    def test_events_requests_events_path(self, events_client):
        page = Set('users/9/sets/followers').events(client=events_client)

        assert events_client.calls == [('GET', 'users/9/sets/followers/events', {}, {})]
        assert isinstance(page, EventsPage)
        assert page.size == 2

    def test_pagination_forwarded_verbatim(self, client):
        pagination = {'size': 5, 'before': 'opaque-cursor', 'custom': [1, 2]}
        Set('users/1/sets/a').page(pagination, client=client)

        assert client.calls[0][3] == pagination

    def test_equality(self):
        assert Set('a') == Set('a')
        assert Set('a') != Set('b')
        assert Set('query?q=match(x)') != match('x')
        assert len({Set('a'), Set('a')}) == 1

    def test_foreign_types_get_the_reflected_comparison(self):
        class AnyRef:
            def __init__(self, ref):
                self.ref = ref

            def __eq__(self, other):
                return getattr(other, 'ref', None) == self.ref

        assert Set('a') == AnyRef('a')
        assert union('a', 'b') == AnyRef('query?q=union(a,b)')
        assert Set('a').__eq__('a') is NotImplemented
        assert union('a').__eq__(1) is NotImplemented
        assert Set('a') != 'a'


class TestQuerySet:
    """Tests for composed expression sets."""

    def test_ref_is_query_locator(self):
        assert union('a', 'b').ref == "query?q=union(a,b)"

    def test_page_sends_expr_as_q(self, client):
        q = union(match('a'), intersection(match('b'), match('c')))
        q.page(client=client)

        assert client.calls == [(
            'GET', 'query',
            {'q': "union(match(a),intersection(match(b),match(c)))"},
            {},
        )]

    def test_events_wraps_expr(self, events_client):
        match('x', 'y').events(client=events_client)

        assert events_client.calls == [('GET', 'query', {'q': "events(match(x,y))"}, {})]

    def test_page_and_events_share_serialization(self, client):
        q = union('a', 'b')
        q.page(client=client)
        client.body = {'events': []}
        q.events(client=client)

        assert client.calls[0][2] == {'q': "union(a,b)"}
        assert client.calls[1][2] == {'q': "events(union(a,b))"}

    def test_pagination_forwarded(self, client):
        union('a', 'b').page({'size': 100, 'after': 'xyz'}, client=client)

        assert client.calls[0][3] == {'size': 100, 'after': 'xyz'}

    def test_equality_by_expr(self):
        assert union('a', Set('b')) == union('a', 'b')
        assert union('a', 'b') != intersection('a', 'b')
        assert hash(union('a', 'b')) == hash(union('a', 'b'))


class TestEachSet:
    """Tests for each(...) sets."""

    def test_each_builds_each_set(self):
        q = each('users/1/sets/follows', 'users/self/sets/posts')
        assert isinstance(q, EachSet)
        assert q.function == 'each'

    def test_page_sends_plain_expr(self, client):
        each('users/1/sets/follows', 'users/self/sets/posts').page(client=client)

        assert client.calls[0][2] == {'q': "each(users/1/sets/follows,users/self/sets/posts)"}

    def test_events_wraps_first_operand_only(self, events_client):
        inner = Set('users/1/sets/follows')
        each(inner, 'users/self/sets/posts').events(client=events_client)

        assert events_client.calls == [(
            'GET', 'query',
            {'q': "each(events(users/1/sets/follows),users/self/sets/posts)"},
            {},
        )]

    def test_events_with_composed_inner(self, events_client):
        each(union('a', 'b'), 'f').events(client=events_client)

        assert events_client.calls[0][2] == {'q': "each(events(union(a,b)),f)"}


class TestMembership:
    """Tests for add/remove."""

    def test_add_puts_member_path(self, client):
        add(Set('users/1/sets/favorites'), Set('posts/99'), client=client)

        assert client.calls == [('PUT', 'users/1/sets/favorites/posts/99')]

    def test_remove_deletes_member_path(self, client):
        remove(Set('users/1/sets/favorites'), Set('posts/99'), client=client)

        assert client.calls == [('DELETE', 'users/1/sets/favorites/posts/99')]

    def test_plain_values_used_as_is(self, client):
        add('users/1/sets/favorites', 'posts/99', client=client)
        remove('users/1/sets/favorites', 'posts/99', client=client)

        assert client.calls == [
            ('PUT', 'users/1/sets/favorites/posts/99'),
            ('DELETE', 'users/1/sets/favorites/posts/99'),
        ]

    def test_custom_set_methods(self, client):
        favorites = CustomSet('users/1/sets/favorites')
        favorites.add('posts/1', client=client)
        favorites.remove(Set('posts/2'), client=client)

        assert client.calls == [
            ('PUT', 'users/1/sets/favorites/posts/1'),
            ('DELETE', 'users/1/sets/favorites/posts/2'),
        ]

    def test_custom_set_is_pageable(self, client):
        client.body = {'resources': ['posts/1']}
        assert list(CustomSet('users/1/sets/favorites').page(client=client)) == ['posts/1']

    def test_transport_error_propagates(self):
        class FailingClient:
            def put(self, path):
                raise requests.HTTPError("404 Client Error")

        with pytest.raises(requests.HTTPError):
            add('users/1/sets/favorites', 'posts/404', client=FailingClient())


class TestDefaultClient:
    """Tests for falling back to the process default client."""

    def test_page_uses_default_client(self, client):
        set_default_client(client)
        union('a', 'b').page()

        assert client.calls == [('GET', 'query', {'q': "union(a,b)"}, {})]

    def test_add_uses_default_client(self, client):
        set_default_client(client)
        CustomSet('users/1/sets/favorites').add('posts/1')

        assert client.calls == [('PUT', 'users/1/sets/favorites/posts/1')]

    def test_explicit_client_wins(self, client, events_client):
        set_default_client(client)
        Set('users/9/sets/followers').events(client=events_client)

        assert client.calls == []
        assert len(events_client.calls) == 1

    def test_query_set_constructed_directly(self, client):
        QuerySet('join', 'users/1/sets/follows', 'users/self/sets/posts').page(client=client)

        assert client.calls[0][2] == {'q': "join(users/1/sets/follows,users/self/sets/posts)"}
