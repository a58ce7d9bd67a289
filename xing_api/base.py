"""Shared plumbing for resource wrappers."""
from typing import Any, Mapping, Optional

from .client import Client


class Base:
    """Resource wrappers call ``request`` with a fixed path template."""

    @classmethod
    def request(cls, verb: str, path: str, options: Optional[Mapping[str, Any]] = None,
                client: Optional[Client] = None, **kwargs) -> Any:
        options = dict(options or {})
        client = client or options.pop('client', None)
        options.pop('client', None)
        if client is None:
            # a client built here is ours to close
            with Client() as owned:
                return owned.request(verb, path, options, **kwargs)
        return client.request(verb, path, options, **kwargs)
