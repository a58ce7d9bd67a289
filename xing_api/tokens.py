"""
Token types handed out by the OAuth handshake.

A RequestToken is short-lived and only good for the access-token exchange;
an AccessToken signs every subsequent API call.
"""
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from .consumer import Consumer


class RequestToken(NamedTuple):
    consumer: 'Consumer'
    token: str
    secret: str
    authorize_url: Optional[str] = None

    def get_access_token(self, verifier: str) -> 'AccessToken':
        return self.consumer.get_access_token(self, verifier)


class AccessToken(NamedTuple):
    consumer: 'Consumer'
    token: Optional[str]
    secret: Optional[str]

    def request(self, verb: str, path: str, body: Optional[str] = None, headers: Optional[dict] = None):
        """Send a request signed with the consumer and this token."""
        return self.consumer.request(verb, path, token=self, body=body, headers=headers)
