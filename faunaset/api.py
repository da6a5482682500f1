"""
Process-wide client for faunaset.

Set handles accept an explicit ``client``; when none is given they use
the default client returned here, built from configuration on first use.

Example:
    import faunaset
    from faunaset.infra import FaunaClient

    faunaset.set_default_client(FaunaClient(secret="kqnPAi..."))
    page = faunaset.union("users/1/sets/a", "users/2/sets/a").page()
"""

import logging
import threading
from typing import Any, Dict, Optional

from .config import load_config
from .exit_codes import ConfigError
from .infra import FaunaClient, ResourceClient

logger = logging.getLogger(__name__)

_default_client: Optional[ResourceClient] = None
_default_lock = threading.Lock()


def create_client(config: Optional[Dict[str, Any]] = None) -> FaunaClient:
    """
    Build a FaunaClient from configuration.

    Args:
        config: Loaded configuration (defaults to load_config())

    Raises:
        ConfigError: If no connection secret is configured
    """
    config = config if config is not None else load_config()
    secret = config.get('connection', {}).get('secret')
    if not secret:
        raise ConfigError(
            "No connection secret configured. Set connection.secret in "
            "~/.faunaset/config.json or FAUNASET_CONNECTION_SECRET."
        )
    client = FaunaClient.from_config(config)
    logger.debug(f"Created client for {client.base_url}")
    return client


def get_default_client() -> ResourceClient:
    """Return the process default client, creating it on first use."""
    global _default_client
    if _default_client is None:
        with _default_lock:
            if _default_client is None:
                _default_client = create_client()
    return _default_client


def set_default_client(client: Optional[ResourceClient]) -> None:
    """Replace the process default client (None resets it)."""
    global _default_client
    with _default_lock:
        _default_client = client
