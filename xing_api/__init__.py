"""
xing_api - XING API Client
A Python client for the XING API, authorized through OAuth 1.0a.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .client import Client
from .config import Configuration, configure, get_configuration, reset_configuration
from .consumer import Consumer
from .errors import InvalidTokenPair, MalformedResponse, TransportError, XingApiError
from .options import RequestOptions
from .tokens import AccessToken, RequestToken
from . import contact

__all__ = [
    "Client",
    "Configuration",
    "configure",
    "get_configuration",
    "reset_configuration",
    "Consumer",
    "RequestOptions",
    "AccessToken",
    "RequestToken",
    "XingApiError",
    "InvalidTokenPair",
    "TransportError",
    "MalformedResponse",
    "contact",
]
