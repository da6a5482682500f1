"""
Paginated result sets for faunaset.

A page is one batch of results for a set or expression:
- SetPage: resource refs, from a body with a ``resources`` list
- EventsPage: change events, from a body with an ``events`` list

Pages are decoded once, cached, and never mutated. A body without the
expected list is an error, not an empty page.
"""

import threading
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from .event import Event
from .resource import Resource


class PageDecodeError(ValueError):
    """Response body could not be decoded into a page."""
    pass


class Page(Resource):
    """
    Ordered, sized, repeatable sequence decoded from a response body.

    Subclasses name the body field they read (``field``) and decode
    each raw item (``_decode_item``). The body list is copied at construction
    and items are materialized on first access under a lock, both as
    tuples.
    """

    field: str = ''

    def __init__(self, struct: Mapping[str, Any]):
        if not isinstance(struct, Mapping):
            raise PageDecodeError(
                f"Expected an object response, got {type(struct).__name__}"
            )
        raw = struct.get(self.field)
        if raw is None:
            raise PageDecodeError(f"Response is missing the '{self.field}' field")
        if not isinstance(raw, list):
            raise PageDecodeError(
                f"Response field '{self.field}' must be a list, got {type(raw).__name__}"
            )
        super().__init__(struct)
        self._raw_items: Tuple[Any, ...] = tuple(raw)
        self._items: Optional[Tuple[Any, ...]] = None
        self._lock = threading.Lock()

    def _decode_item(self, raw: Any) -> Any:
        return raw

    @property
    def items(self) -> Tuple[Any, ...]:
        if self._items is None:
            with self._lock:
                if self._items is None:
                    self._items = tuple(self._decode_item(raw) for raw in self._raw_items)
        return self._items

    @property
    def before(self) -> Any:
        """Cursor for the preceding page, exactly as the service sent it."""
        return self.struct.get('before')

    @property
    def after(self) -> Any:
        """Cursor for the following page, exactly as the service sent it."""
        return self.struct.get('after')

    @property
    def empty(self) -> bool:
        return len(self._raw_items) == 0

    @property
    def length(self) -> int:
        return len(self._raw_items)

    @property
    def size(self) -> int:
        return len(self._raw_items)

    def __len__(self) -> int:
        return len(self._raw_items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"


class SetPage(Page):
    """A page of resource refs."""

    field = 'resources'

    @property
    def refs(self) -> Tuple[str, ...]:
        return self.items


class EventsPage(Page):
    """A page of events, oldest first as returned by the service."""

    field = 'events'

    def _decode_item(self, raw: Any) -> Event:
        try:
            return Event.from_api_response(raw)
        except ValueError as e:
            raise PageDecodeError(f"Malformed event record: {e}") from e

    @property
    def events(self) -> Tuple[Event, ...]:
        return self.items

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [event.to_dict() for event in self.events]
