"""
Base class for values decoded from the remote service.
"""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..api import get_default_client
from ..events import time_from_usecs


class Resource:
    """
    A raw response body with typed accessors.

    Subclasses decode their own fields from ``struct``. ``find`` fetches
    a body through a resource-access client and wraps it.
    """

    def __init__(self, struct: Mapping[str, Any]):
        self.struct: Dict[str, Any] = dict(struct)

    @classmethod
    def find(
        cls,
        ref: str,
        query: Optional[Dict[str, Any]] = None,
        pagination: Optional[Dict[str, Any]] = None,
        client=None,
    ):
        """
        Fetch ``ref`` and wrap the decoded body.

        Args:
            ref: Path relative to the service root
            query: Query parameters (e.g. ``{'q': 'union(a,b)'}``)
            pagination: Pagination options, forwarded verbatim
            client: Resource-access client (defaults to the process client)
        """
        if client is None:
            client = get_default_client()
        return cls(client.get(ref, query or {}, pagination or {}))

    @property
    def ref(self) -> Optional[str]:
        return self.struct.get('ref')

    @property
    def ts(self) -> Optional[datetime]:
        raw = self.struct.get('ts')
        return time_from_usecs(raw) if raw is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.struct)
