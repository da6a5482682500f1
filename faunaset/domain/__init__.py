"""
Domain layer for faunaset.

Contains the set handles and the values decoded from the service:
- Set, QuerySet, EachSet, CustomSet: addressable and composed sets
- SetPage, EventsPage: one page of refs or events
- Event: a single membership change

Sets are immutable; pages are decoded once and never mutated.
"""

from .event import Event
from .resource import Resource
from .page import Page, SetPage, EventsPage, PageDecodeError
from .set import Set, QuerySet, EachSet, CustomSet, add, remove, ref_of

__all__ = [
    'Event',
    'Resource',
    'Page',
    'SetPage',
    'EventsPage',
    'PageDecodeError',
    'Set',
    'QuerySet',
    'EachSet',
    'CustomSet',
    'add',
    'remove',
    'ref_of',
]
