"""Process-wide default credentials and transport settings."""
from dotenv import load_dotenv
import copy
import os
from threading import RLock
from typing import Callable, Optional

load_dotenv()

DEFAULT_SITE = 'https://api.xing.com'
LOG_LEVEL = os.getenv('XING_LOG_LEVEL', 'WARNING')


def _env_timeout() -> Optional[float]:
    raw = os.getenv('XING_API_TIMEOUT')
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f'XING_API_TIMEOUT must be a number of seconds, got {raw!r}') from e


class Configuration:
    """Credential defaults picked up by every new Client.

    Any field left as None stays absent; the client then reads None as well.
    """

    CREDENTIAL_FIELDS = ('consumer_key', 'consumer_secret', 'oauth_token', 'oauth_token_secret')

    def __init__(self, consumer_key: Optional[str] = None, consumer_secret: Optional[str] = None,
                 oauth_token: Optional[str] = None, oauth_token_secret: Optional[str] = None,
                 site: str = DEFAULT_SITE, timeout: Optional[float] = None):
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.oauth_token = oauth_token
        self.oauth_token_secret = oauth_token_secret
        self.site = site
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> 'Configuration':
        return cls(
            consumer_key=os.getenv('XING_CONSUMER_KEY'),
            consumer_secret=os.getenv('XING_CONSUMER_SECRET'),
            oauth_token=os.getenv('XING_OAUTH_TOKEN'),
            oauth_token_secret=os.getenv('XING_OAUTH_TOKEN_SECRET'),
            site=os.getenv('XING_API_SITE', DEFAULT_SITE),
            timeout=_env_timeout(),
        )

    def copy(self) -> 'Configuration':
        return copy.copy(self)

    def __repr__(self):
        # secrets stay out of reprs and logs
        present = [name for name in self.CREDENTIAL_FIELDS if getattr(self, name)]
        return f'Configuration(site={self.site!r}, timeout={self.timeout!r}, set={present})'


_lock = RLock()
_current: Configuration = Configuration.from_env()


def get_configuration() -> Configuration:
    """Return a snapshot of the current process-wide defaults."""
    with _lock:
        return _current.copy()


def configure(fn: Callable[[Configuration], None]) -> Configuration:
    """Let ``fn`` set default credentials for all clients built afterwards.

    ``fn`` receives a working copy; it replaces the stored defaults only once
    ``fn`` returns, so a failing callback leaves the old defaults in place.
    """
    global _current
    with _lock:
        working = _current.copy()
        fn(working)
        _current = working
        return working.copy()


def reset_configuration() -> Configuration:
    """Drop every default, including those seeded from the environment."""
    global _current
    with _lock:
        _current = Configuration()
        return _current.copy()
