from __future__ import annotations
import json
import logging
import re
import sys
import threading
from typing import Any, Dict, Optional
from urllib.parse import urlencode
import requests
from .exceptions import (
    HttpAuthError,
    HttpRequestError,
    HttpResponseError,
    HttpThrottlingError,
    MissingRequiredArgument,
)
from .types import DataType, Method, QueryValue, RequestParams, RequestReturn
from .version import __version__

logger = logging.getLogger(__name__)


class HttpClient:
    """HTTP transport for a single shop domain.

    Encodes the body, attaches default headers and classifies error statuses.
    Retries, if any, belong to the caller. Safe to share between threads:
    each thread gets its own ``requests.Session``.
    """

    def __init__(self, domain: str, timeout: int = 30, user_agent_prefix: Optional[str] = None):
        self.domain = re.sub(r'^https?://', '', domain).rstrip('/')
        self.timeout = timeout
        self.user_agent_prefix = user_agent_prefix
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        session = getattr(self._local, 'session', None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    @session.setter
    def session(self, session: requests.Session) -> None:
        self._local.session = session

    def _user_agent(self) -> str:
        ua = f"Shopify API Library v{__version__} | Python {sys.version_info.major}.{sys.version_info.minor}"
        if self.user_agent_prefix:
            ua = f"{self.user_agent_prefix} | {ua}"
        return ua

    @staticmethod
    def _encode_body(data: Any, data_type: DataType) -> str:
        if isinstance(data, str):
            return data
        if data_type == DataType.JSON:
            return json.dumps(data)
        if data_type == DataType.URL_ENCODED:
            return urlencode(data)
        raise ValueError(f"GraphQL request bodies must be strings, got {type(data).__name__}")

    def request(self, params: RequestParams) -> RequestReturn:
        url = f"https://{self.domain}{params.path}"
        headers: Dict[str, str] = {
            'User-Agent': self._user_agent(),
            'Accept': 'application/json',
        }
        body: Optional[str] = None
        if params.method in (Method.POST, Method.PUT):
            if params.data is None or params.data == '':
                raise MissingRequiredArgument(f"Missing body for {params.method.value} request to {params.path}")
            body = self._encode_body(params.data, params.type)
            headers['Content-Type'] = params.type.value
        headers.update(params.extra_headers or {})

        logger.debug('%s %s', params.method.value, params.path)
        try:
            resp = self.session.request(params.method.value, url, params=params.query, headers=headers, data=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise HttpRequestError(f"Network error: {e}") from e

        if resp.status_code >= 400:
            self._raise_for_status(resp)

        return RequestReturn(body=self._decode(resp), headers=resp.headers, status_code=resp.status_code)

    @staticmethod
    def _raise_for_status(resp: requests.Response) -> None:
        code = resp.status_code
        text = resp.text[:200]
        logger.warning('Shopify responded %s for %s %s', code, resp.request.method if resp.request else '?', resp.url)
        if code in (401, 403):
            raise HttpAuthError(f"Auth error {code}: {text}", code, text)
        if code == 429:
            retry_after: Optional[float] = None
            try:
                retry_after = float(resp.headers.get('Retry-After', ''))
            except ValueError:
                pass
            raise HttpThrottlingError(f"Rate limit hit (429): {text}", code, text, retry_after=retry_after)
        if code >= 500:
            raise HttpResponseError(f"Server error {code}: {text}", code, text)
        raise HttpResponseError(f"Client error {code}: {text}", code, text)

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        if not resp.content:
            return None
        ctype = resp.headers.get('Content-Type', '')
        if 'application/json' in ctype:
            try:
                return resp.json()
            except ValueError as e:
                raise HttpRequestError('Failed to decode JSON response') from e
        return resp.text

    def get(self, path: str, query: Optional[Dict[str, QueryValue]] = None, extra_headers: Optional[Dict[str, str]] = None) -> RequestReturn:
        return self.request(RequestParams(Method.GET, path, query=query, extra_headers=extra_headers))

    def post(self, path: str, data: Any, type: DataType = DataType.JSON, query: Optional[Dict[str, QueryValue]] = None, extra_headers: Optional[Dict[str, str]] = None) -> RequestReturn:
        return self.request(RequestParams(Method.POST, path, query=query, data=data, type=type, extra_headers=extra_headers))

    def put(self, path: str, data: Any, type: DataType = DataType.JSON, query: Optional[Dict[str, QueryValue]] = None, extra_headers: Optional[Dict[str, str]] = None) -> RequestReturn:
        return self.request(RequestParams(Method.PUT, path, query=query, data=data, type=type, extra_headers=extra_headers))

    def delete(self, path: str, query: Optional[Dict[str, QueryValue]] = None, extra_headers: Optional[Dict[str, str]] = None) -> RequestReturn:
        return self.request(RequestParams(Method.DELETE, path, query=query, extra_headers=extra_headers))
