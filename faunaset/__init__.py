"""
faunaset - A client-side query algebra for a remote resource-set database.

Compose set operations into one deferred expression, then page through
its current members or its event history.

Quick Start:
    import faunaset
    from faunaset.infra import FaunaClient

    faunaset.set_default_client(FaunaClient(secret="kqnPAi..."))

    # A plain named set
    followers = faunaset.Set("users/123/sets/followers")
    for ref in followers.page({"size": 20}):
        print(ref)

    # Composed expressions
    q = faunaset.union(
        faunaset.match("users.tags", "python"),
        faunaset.intersection("users/1/sets/follows", "users/2/sets/follows"),
    )
    print(q.expr())
    for event in q.events():
        print(event.action, event.resource, event.ts)

    # Membership
    favorites = faunaset.CustomSet("users/123/sets/favorites")
    favorites.add("posts/99")
    faunaset.remove(favorites, "posts/99")

Domain Objects:
    Set, QuerySet, EachSet, CustomSet - set handles
    SetPage, EventsPage - one page of refs or events
    Event - a single membership change
"""

__version__ = "0.3.0"

# Query DSL
from .query import (
    union,
    intersection,
    difference,
    merge,
    join,
    match,
    each,
    query,
    add,
    remove,
)

# Domain objects
from .domain import (
    Set,
    QuerySet,
    EachSet,
    CustomSet,
    SetPage,
    EventsPage,
    Event,
    PageDecodeError,
)

# Serialization
from .serializer import MalformedOperandError

# Timestamps
from .events import time_from_usecs, usecs_from_time

# Client
from .api import get_default_client, set_default_client, create_client

# Configuration
from .config import load_config, save_config

__all__ = [
    # Version
    "__version__",
    # Query DSL
    "union",
    "intersection",
    "difference",
    "merge",
    "join",
    "match",
    "each",
    "query",
    "add",
    "remove",
    # Domain objects
    "Set",
    "QuerySet",
    "EachSet",
    "CustomSet",
    "SetPage",
    "EventsPage",
    "Event",
    # Errors
    "PageDecodeError",
    "MalformedOperandError",
    # Timestamps
    "time_from_usecs",
    "usecs_from_time",
    # Client
    "get_default_client",
    "set_default_client",
    "create_client",
    # Configuration
    "load_config",
    "save_config",
]
