"""
XING API Client
Holds the OAuth credentials, runs the token handshake and dispatches signed requests.
"""
import json
from typing import Any, Dict, Mapping, Optional

import requests

from .config import Configuration, get_configuration
from .consumer import Consumer
from .errors import InvalidTokenPair, MalformedResponse, TransportError
from .logger import logger
from .options import RequestOptions
from .tokens import AccessToken, RequestToken

OUT_OF_BAND = 'oob'
BODYLESS_VERBS = frozenset({'GET', 'DELETE', 'HEAD', 'OPTIONS'})


class Client:
    """XING API client authorized through OAuth 1.0a."""

    def __init__(self, consumer_key: Optional[str] = None, consumer_secret: Optional[str] = None,
                 oauth_token: Optional[str] = None, oauth_token_secret: Optional[str] = None,
                 config: Optional[Configuration] = None, session: Optional[requests.Session] = None):
        """
        Initialize the client. No network traffic happens here.

        Args:
            consumer_key: application key (default: configured value)
            consumer_secret: application secret (default: configured value)
            oauth_token: access token (default: configured value)
            oauth_token_secret: access token secret (default: configured value)
            config: explicit defaults to use instead of the process-wide ones
            session: requests session to send through, e.g. one with proxies mounted
        """
        config = config or get_configuration()
        self.consumer_key = consumer_key if consumer_key is not None else config.consumer_key
        self.consumer_secret = consumer_secret if consumer_secret is not None else config.consumer_secret
        self.oauth_token = oauth_token if oauth_token is not None else config.oauth_token
        self.oauth_token_secret = (
            oauth_token_secret if oauth_token_secret is not None else config.oauth_token_secret
        )
        self.site = config.site
        self.timeout = config.timeout
        self.session = session or requests.Session()
        self.request_token_hash: Optional[Dict[str, str]] = None
        self._consumer: Optional[Consumer] = None

    @property
    def consumer(self) -> Consumer:
        if self._consumer is None:
            self._consumer = Consumer(
                self.consumer_key,
                self.consumer_secret,
                site=self.site,
                timeout=self.timeout,
                session=self.session,
            )
        return self._consumer

    @property
    def access_token(self) -> AccessToken:
        return self.consumer.access_token(self.oauth_token, self.oauth_token_secret)

    def get_request_token(self, callback: Optional[str] = OUT_OF_BAND) -> Dict[str, str]:
        """Start the OAuth handshake.

        Args:
            callback: URL XING redirects to after authorization; "oob" shows a PIN instead

        Returns:
            dict with request_token, request_token_secret and authorize_url
        """
        request_token = self.consumer.get_request_token(callback or OUT_OF_BAND)
        self.request_token_hash = {
            'request_token': request_token.token,
            'request_token_secret': request_token.secret,
            'authorize_url': request_token.authorize_url,
        }
        return dict(self.request_token_hash)

    def get_access_token(self, verifier: str,
                         request_token_hash: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Finish the OAuth handshake and keep the resulting access token.

        Args:
            verifier: PIN or oauth_verifier handed back after authorization
            request_token_hash: result of get_request_token; defaults to the cached one

        Returns:
            dict with access_token and access_token_secret

        Raises:
            InvalidTokenPair: no request token pair available, or one half missing
        """
        if not verifier:
            raise ValueError('verifier is required to obtain an access token')
        pair = request_token_hash if request_token_hash is not None else self.request_token_hash
        if pair is None:
            raise InvalidTokenPair('No request token given and none cached; call get_request_token first')
        if not pair.get('request_token'):
            raise InvalidTokenPair('request_token missing from request token pair')
        if not pair.get('request_token_secret'):
            raise InvalidTokenPair('request_token_secret missing from request token pair')

        request_token = RequestToken(self.consumer, pair['request_token'], pair['request_token_secret'])
        access_token = request_token.get_access_token(verifier)

        self.oauth_token = access_token.token
        self.oauth_token_secret = access_token.secret
        logger.info('Obtained access token')
        return {
            'access_token': access_token.token,
            'access_token_secret': access_token.secret,
        }

    def request(self, verb: str, path: str, options: Optional[Mapping[str, Any]] = None, **kwargs) -> Any:
        """Send a signed request and decode the JSON reply.

        Args:
            verb: HTTP verb, case-insensitive
            path: API path, e.g. "/v1/users/me"
            options: params, body and headers; any other key is a query param too
            **kwargs: merged over ``options``

        Returns:
            decoded JSON value

        Raises:
            TransportError: network failure or non-2xx status
            MalformedResponse: body is not JSON
        """
        merged = dict(options or {})
        merged.update(kwargs)
        return self.send(verb, path, RequestOptions.from_mapping(merged))

    def send(self, verb: str, path: str, options: Optional[RequestOptions] = None) -> Any:
        """Like request, with the options already built."""
        options = options or RequestOptions()
        verb = verb.upper()
        full_path = options.path_with_query(path)
        logger.debug('%s %s', verb, full_path)

        token = self.access_token
        if verb in BODYLESS_VERBS:
            if options.headers:
                response = token.request(verb, full_path, headers=options.headers)
            else:
                response = token.request(verb, full_path)
        else:
            response = token.request(verb, full_path, body=options.body, headers=options.headers)
        return self._decode(verb, full_path, response)

    def _decode(self, verb: str, path: str, response) -> Any:
        status = response.status_code
        body = response.text or '{}'
        if not 200 <= status < 300:
            logger.warning('%s %s returned status %s', verb, path, status)
            try:
                error = json.loads(body)
            except ValueError:
                error = None
            raise TransportError(f'{verb} {path} returned status {status}', status_code=status,
                                 body=response.text, error=error)
        try:
            return json.loads(body)
        except ValueError as e:
            raise MalformedResponse(f'{verb} {path} returned a non-JSON body', status_code=status,
                                    body=response.text) from e

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
