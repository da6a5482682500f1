"""
HTTP client infrastructure for faunaset.

Provides the resource-access service the set handles talk to:
- GET with query parameters and pagination options
- PUT / DELETE for membership changes
- Secret sent as HTTP basic auth username

Errors are not handled here: non-2xx responses raise requests.HTTPError
and connection problems raise requests.RequestException subclasses.
"""

import logging
from typing import Any, Dict, Optional, Protocol

import requests

logger = logging.getLogger(__name__)

# Path prefix for every API call
API_VERSION = 'v1'

DEFAULT_DOMAIN = 'rest.fauna.org'
DEFAULT_SCHEME = 'https'
DEFAULT_PORT = 443
DEFAULT_TIMEOUT = 60


class ResourceClient(Protocol):
    """What set handles need from a transport."""

    def get(
        self,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        pagination: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        ...

    def put(self, path: str) -> Dict[str, Any]:
        ...

    def delete(self, path: str) -> Dict[str, Any]:
        ...


class FaunaClient:
    """
    requests-based client for the resource-set REST API.

    Example:
        client = FaunaClient(secret="kqnPAi...")
        body = client.get("query", {"q": "union(users/1/sets/a,users/2/sets/b)"})
        client.put("users/1/sets/favorites/posts/99")
    """

    def __init__(
        self,
        secret: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
        scheme: str = DEFAULT_SCHEME,
        port: Optional[int] = DEFAULT_PORT,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = 'faunaset',
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize FaunaClient.

        Args:
            secret: Key or token secret, sent as the basic auth username
            domain: API host name
            scheme: http or https
            port: API port (omitted from URLs when it is the scheme default)
            timeout: HTTP request timeout in seconds
            user_agent: User-Agent header value
            session: Existing session to reuse
        """
        self.domain = domain
        self.scheme = scheme
        self.port = port
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
            'User-Agent': user_agent,
        })
        if secret:
            self.session.auth = (secret, '')

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'FaunaClient':
        """Create from the ``connection`` section of a loaded config."""
        conn = config.get('connection', {})
        return cls(
            secret=conn.get('secret') or None,
            domain=conn.get('domain', DEFAULT_DOMAIN),
            scheme=conn.get('scheme', DEFAULT_SCHEME),
            port=conn.get('port', DEFAULT_PORT),
            timeout=conn.get('timeout_seconds', DEFAULT_TIMEOUT),
            user_agent=conn.get('user_agent', 'faunaset'),
        )

    @property
    def base_url(self) -> str:
        default_port = {'http': 80, 'https': 443}.get(self.scheme)
        if self.port and self.port != default_port:
            return f"{self.scheme}://{self.domain}:{self.port}/{API_VERSION}"
        return f"{self.scheme}://{self.domain}/{API_VERSION}"

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(
        self,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        pagination: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        GET a path and return the decoded resource body.

        Args:
            path: Path relative to the API root, e.g. ``users/123/sets/followers``
            query: Query parameters
            pagination: Pagination options, merged into the parameters verbatim

        Returns:
            Decoded body, unwrapped from ``{"resource": ...}`` when wrapped
        """
        params: Dict[str, Any] = {}
        params.update(pagination or {})
        params.update(query or {})
        return self._request('GET', path, params)

    def put(self, path: str) -> Dict[str, Any]:
        return self._request('PUT', path)

    def delete(self, path: str) -> Dict[str, Any]:
        return self._request('DELETE', path)

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        logger.debug(f"{method} {path} params={params or {}}")
        response = self.session.request(
            method,
            self.url(path),
            params=params or None,
            timeout=self.timeout,
        )
        response.raise_for_status()
        if not response.content:
            return {}
        body = response.json()
        if isinstance(body, dict) and 'resource' in body:
            return body['resource']
        return body
