"""
Set handles for faunaset.

Three kinds of set can be paged:
- Set: a plain named set, addressed directly by its ref
- QuerySet: a composed expression, sent to the shared ``query`` endpoint
- EachSet: a QuerySet mapping a function over set members

CustomSet adds membership mutation (add/remove) to a plain set.

Request shapes:
    plain.page       GET <ref>
    plain.events     GET <ref>/events
    expr.page        GET query?q=<expr>
    expr.events      GET query?q=events(<expr>)
    each.events      GET query?q=each(events(<first>),<rest>)
"""

from typing import Any, Dict, Optional

from ..api import get_default_client
from ..serializer import EACH, Expression, Referable, events_expression
from .page import EventsPage, SetPage

QUERY_ENDPOINT = 'query'


def ref_of(value: Any) -> Any:
    """Ref string of a ref-bearing value, or the value itself."""
    if isinstance(value, Referable):
        return value.ref
    return value


class Set:
    """
    A plain named set in the remote store.

    Example:
        followers = Set('users/123/sets/followers')
        for ref in followers.page({'size': 10}):
            print(ref)
    """

    def __init__(self, ref: str):
        self._ref = ref

    @property
    def ref(self) -> str:
        return self._ref

    def page(self, pagination: Optional[Dict[str, Any]] = None, client=None) -> SetPage:
        """
        Fetch one page of member refs.

        Args:
            pagination: Options such as size/before/after, forwarded verbatim
            client: Resource-access client (defaults to the process client)
        """
        return SetPage.find(self.ref, {}, pagination, client=client)

    def events(self, pagination: Optional[Dict[str, Any]] = None, client=None) -> EventsPage:
        """Fetch one page of membership events."""
        return EventsPage.find(f"{self.ref}/events", {}, pagination, client=client)

    def __eq__(self, other) -> bool:
        if isinstance(other, QuerySet):
            return False
        if not isinstance(other, Set):
            return NotImplemented
        return self.ref == other.ref

    def __hash__(self) -> int:
        return hash(self.ref)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ref!r})"


class QuerySet(Expression, Set):
    """
    A set computed by the service from a query expression.

    The expression string is built once and reused by ``ref``,
    ``page`` and ``events``.
    """

    def __init__(self, function: str, *params: Any):
        Expression.__init__(self, function, *params)

    @property
    def ref(self) -> str:
        # Identity only; requests carry expr() as the q parameter.
        return f"{QUERY_ENDPOINT}?q={self.expr()}"

    def page(self, pagination: Optional[Dict[str, Any]] = None, client=None) -> SetPage:
        return SetPage.find(QUERY_ENDPOINT, {'q': self.expr()}, pagination, client=client)

    def events(self, pagination: Optional[Dict[str, Any]] = None, client=None) -> EventsPage:
        return EventsPage.find(
            QUERY_ENDPOINT, {'q': events_expression(self)}, pagination, client=client
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        if not isinstance(other, QuerySet):
            return False
        return self.expr() == other.expr()

    def __hash__(self) -> int:
        return hash(self.expr())


class EachSet(QuerySet):
    """``each(set, fn...)``: maps functions over the members of a set."""

    def __init__(self, *params: Any):
        super().__init__(EACH, *params)


def add(set: Any, resource: Any, client=None) -> None:
    """
    Add ``resource`` to ``set`` with ``PUT <set>/<resource>``.

    Both arguments may be ref strings or ref-bearing values.
    """
    if client is None:
        client = get_default_client()
    client.put(f"{ref_of(set)}/{ref_of(resource)}")


def remove(set: Any, resource: Any, client=None) -> None:
    """Remove ``resource`` from ``set`` with ``DELETE <set>/<resource>``."""
    if client is None:
        client = get_default_client()
    client.delete(f"{ref_of(set)}/{ref_of(resource)}")


class CustomSet(Set):
    """A plain set whose membership callers manage directly."""

    def add(self, resource: Any, client=None) -> None:
        add(self, resource, client=client)

    def remove(self, resource: Any, client=None) -> None:
        remove(self, resource, client=client)
