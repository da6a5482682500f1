"""
Event domain object for faunaset.

An event is one recorded change to a set's membership:
- create: resource added to the set
- update: member resource changed
- delete: resource removed from the set

Events are immutable, identified by a derived ref, and serializable
for JSONL output.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
import json

from ..events import time_from_usecs


@dataclass(frozen=True)
class Event:
    """
    Represents one change record returned by an events page.

    Attributes:
        resource: Ref of the resource the event is about
        action: What happened (create, update, delete)
        raw_ts: Timestamp exactly as sent, in microseconds since the epoch
        set: Ref of the set the event belongs to, if the service sent one
    """

    resource: str
    action: str
    raw_ts: Any
    set: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> 'Event':
        """
        Create from a raw event record.

        Raises:
            ValueError: If resource, action or ts is missing, or ts is not
                a microsecond timestamp
        """
        if not isinstance(data, dict):
            raise ValueError(f"Event record must be an object, got {type(data).__name__}")

        missing = [key for key in ('resource', 'action', 'ts') if data.get(key) is None]
        if missing:
            raise ValueError(f"Event record missing {', '.join(missing)}: {data!r}")
        time_from_usecs(data['ts'])

        return cls(
            resource=data['resource'],
            action=data['action'],
            raw_ts=data['ts'],
            set=data.get('set'),
        )

    @property
    def ts(self) -> datetime:
        """Decoded timestamp (UTC)."""
        return time_from_usecs(self.raw_ts)

    @property
    def ref(self) -> str:
        """The event's own ref: ``<resource>/events/<ts>/<action>``."""
        return f"{self.resource}/events/{self.raw_ts}/{self.action}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'ref': self.ref,
            'resource': self.resource,
            'set': self.set,
            'action': self.action,
            'ts': self.ts.isoformat(),
        }

    def to_jsonl(self) -> str:
        """Convert to single-line JSON for streaming output."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __str__(self) -> str:
        return f"{self.action} {self.resource} at {self.ts.isoformat()}"
