"""
OAuth 1.0a consumer for the XING API.

Signs the handshake legs and every API call with HMAC-SHA1 via requests-oauthlib,
sending the signature in the Authorization header.
"""
from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode

import requests
from requests_oauthlib import OAuth1

from .config import DEFAULT_SITE
from .errors import TransportError
from .logger import logger
from .tokens import AccessToken, RequestToken

REQUEST_TOKEN_PATH = '/v1/request_token'
AUTHORIZE_PATH = '/v1/authorize'
ACCESS_TOKEN_PATH = '/v1/access_token'


class Consumer:
    """Registered application identity plus the transport it talks through."""

    def __init__(self, key: Optional[str], secret: Optional[str], site: str = DEFAULT_SITE,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.key = key
        self.secret = secret
        self.site = site.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def url(self, path: str) -> str:
        return self.site + path

    def authorize_url(self, request_token: str) -> str:
        return f"{self.url(AUTHORIZE_PATH)}?{urlencode({'oauth_token': request_token})}"

    def get_request_token(self, callback: str) -> RequestToken:
        """First handshake leg: obtain an unauthorized request token.

        Args:
            callback: redirect target after authorization, or "oob" for PIN based flows

        Returns:
            RequestToken carrying the URL the user must visit
        """
        auth = OAuth1(self.key, client_secret=self.secret, callback_uri=callback)
        logger.debug('Fetching request token (callback=%s)', callback)
        credentials = self._fetch_token(self.url(REQUEST_TOKEN_PATH), auth)
        token = credentials['oauth_token']
        return RequestToken(self, token, credentials['oauth_token_secret'], self.authorize_url(token))

    def get_access_token(self, request_token: RequestToken, verifier: str) -> AccessToken:
        """Last handshake leg: trade an authorized request token for an access token."""
        auth = OAuth1(
            self.key,
            client_secret=self.secret,
            resource_owner_key=request_token.token,
            resource_owner_secret=request_token.secret,
            verifier=verifier,
        )
        logger.debug('Exchanging request token for access token')
        credentials = self._fetch_token(self.url(ACCESS_TOKEN_PATH), auth)
        return AccessToken(self, credentials['oauth_token'], credentials['oauth_token_secret'])

    def access_token(self, token: Optional[str], secret: Optional[str]) -> AccessToken:
        return AccessToken(self, token, secret)

    def request(self, verb: str, path: str, token: AccessToken, body: Optional[str] = None,
                headers: Optional[dict] = None) -> requests.Response:
        auth = OAuth1(
            self.key,
            client_secret=self.secret,
            resource_owner_key=token.token,
            resource_owner_secret=token.secret,
        )
        kwargs = {}
        if body is not None:
            kwargs['data'] = body
        if headers:
            kwargs['headers'] = {str(k): str(v) for k, v in headers.items()}
        return self._send(verb.upper(), self.url(path), auth, **kwargs)

    def _send(self, method: str, url: str, auth: OAuth1, **kwargs) -> requests.Response:
        try:
            return self.session.request(method, url, auth=auth, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning('%s %s failed: %s', method, url, e)
            raise TransportError(f'{method} {url} failed: {e}') from e

    def _fetch_token(self, url: str, auth: OAuth1) -> Dict[str, str]:
        response = self._send('POST', url, auth)
        if not response.ok:
            logger.warning('Token request to %s rejected with status %s', url, response.status_code)
            raise TransportError(
                f'Token request rejected with status {response.status_code}',
                status_code=response.status_code,
                body=response.text,
            )
        credentials = dict(parse_qsl(response.text))
        if 'oauth_token' not in credentials or 'oauth_token_secret' not in credentials:
            raise TransportError(
                'Token response lacked oauth_token/oauth_token_secret',
                status_code=response.status_code,
                body=response.text,
            )
        return credentials
