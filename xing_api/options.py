"""Per-call request options: query params, body and headers."""
from typing import Any, Iterable, Mapping, Optional, Tuple
from urllib.parse import urlencode

RESERVED_KEYS = ('params', 'body', 'headers')


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple)):
        return [_query_value(v) for v in value]
    return value


class RequestOptions:
    """Params, body and headers for one dispatched request.

    body: None means no body was supplied; "" is an empty body.
    headers: None or an empty mapping both mean no extra headers.
    """

    def __init__(self, params: Optional[Mapping[str, Any]] = None, body: Optional[str] = None,
                 headers: Optional[Mapping[str, Any]] = None):
        self.params = dict(params or {})
        self.body = body
        self.headers = dict(headers) if headers else None

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None) -> 'RequestOptions':
        """Build options from a flat mapping.

        Keys other than params/body/headers are query params too, so
        ``{'page': 2}`` and ``{'params': {'page': 2}}`` are equivalent.
        """
        options = dict(options or {})
        params = {k: v for k, v in options.items() if k not in RESERVED_KEYS}
        params.update(options.get('params') or {})
        return cls(params=params, body=options.get('body'), headers=options.get('headers'))

    def query_items(self) -> Iterable[Tuple[str, Any]]:
        for key, value in self.params.items():
            if value is None:
                continue
            yield str(key), _query_value(value)

    def query_string(self) -> str:
        return urlencode(list(self.query_items()), doseq=True)

    def path_with_query(self, path: str) -> str:
        query = self.query_string()
        if not query:
            return path
        separator = '&' if '?' in path else '?'
        return f'{path}{separator}{query}'

    def __repr__(self):
        return f'RequestOptions(params={self.params!r}, body={self.body!r}, headers={self.headers!r})'
