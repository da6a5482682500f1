"""
Query DSL for faunaset.

Builds deferred set expressions. Nothing is sent to the service until
``page()`` or ``events()`` is called on the result.

Examples:
    from faunaset.query import union, intersection, match, each

    q = union(match("users.name", "alice"),
              intersection(match("tags", "python"), match("tags", "ml")))
    q.expr()
    # 'union(match(users.name,alice),intersection(match(tags,python),match(tags,ml)))'

    each("users/123/sets/follows", "users/self/sets/posts").events()
    # GET query?q=each(events(users/123/sets/follows),users/self/sets/posts)

    query(lambda q: q.difference("users/1/sets/a", q.match("tags", "spam")))
"""

from typing import Any, Callable, TypeVar

from .domain.set import CustomSet, EachSet, QuerySet, add, remove
from .serializer import DIFFERENCE, INTERSECTION, JOIN, MATCH, MERGE, UNION

__all__ = [
    'union',
    'intersection',
    'difference',
    'merge',
    'join',
    'match',
    'each',
    'query',
    'add',
    'remove',
    'CustomSet',
]

T = TypeVar('T')


def union(*params: Any) -> QuerySet:
    """Members of any operand set."""
    return QuerySet(UNION, *params)


def intersection(*params: Any) -> QuerySet:
    """Members of every operand set."""
    return QuerySet(INTERSECTION, *params)


def difference(*params: Any) -> QuerySet:
    """Members of the first set that are in none of the others."""
    return QuerySet(DIFFERENCE, *params)


def merge(*params: Any) -> QuerySet:
    return QuerySet(MERGE, *params)


def join(*params: Any) -> QuerySet:
    return QuerySet(JOIN, *params)


def match(*params: Any) -> QuerySet:
    """Resources whose indexed field matches a term, e.g. ``match(field, term)``."""
    return QuerySet(MATCH, *params)


def each(*params: Any) -> EachSet:
    """Map the remaining operands over the members of the first."""
    return EachSet(*params)


class QueryBuilder:
    """The DSL entry points, handed to a ``query()`` block."""

    union = staticmethod(union)
    intersection = staticmethod(intersection)
    difference = staticmethod(difference)
    merge = staticmethod(merge)
    join = staticmethod(join)
    match = staticmethod(match)
    each = staticmethod(each)


def query(block: Callable[[QueryBuilder], T]) -> T:
    """Evaluate ``block`` with the DSL entry points and return its result."""
    return block(QueryBuilder())
