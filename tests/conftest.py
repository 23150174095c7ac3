import json
from typing import Any, Dict, List, Optional
import pytest
import requests
from requests.structures import CaseInsensitiveDict
from shopify_api.config import ShopifyConfig
from shopify_api.types import DataType, Method, RequestParams, RequestReturn

DOMAIN = 'shop.myshopify.com'
API_VERSION = '2023-01'


class FakeTransport:
    """Records dispatched requests and replays canned responses in order."""

    def __init__(self, responses: Optional[List[RequestReturn]] = None):
        self.responses = list(responses or [])
        self.requests: List[RequestParams] = []

    def request(self, params: RequestParams) -> RequestReturn:
        self.requests.append(params)
        if self.responses:
            return self.responses.pop(0)
        return RequestReturn(body={}, headers=CaseInsensitiveDict(), status_code=200)

    def post(self, path, data, type=DataType.JSON, query=None, extra_headers=None) -> RequestReturn:
        return self.request(RequestParams(Method.POST, path, query=query, data=data, type=type, extra_headers=extra_headers))


def reply(body: Any = None, headers: Optional[Dict[str, str]] = None, status_code: int = 200) -> RequestReturn:
    return RequestReturn(body=body if body is not None else {}, headers=CaseInsensitiveDict(headers or {}), status_code=status_code)


@pytest.fixture
def config():
    return ShopifyConfig(api_version=API_VERSION)


@pytest.fixture
def private_config():
    return ShopifyConfig(
        api_version=API_VERSION,
        is_private_app=True,
        api_secret_key='test_secret_key',
        private_app_storefront_access_token='storefront_secret',
    )


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def make_response():
    def _make(status_code: int = 200, body: Any = None, headers: Optional[Dict[str, str]] = None):
        resp = requests.Response()
        resp.status_code = status_code
        resp.url = f'https://{DOMAIN}/'
        resp.encoding = 'utf-8'
        h = CaseInsensitiveDict(headers or {})
        if body is None:
            resp._content = b''
        elif isinstance(body, (dict, list)):
            resp._content = json.dumps(body).encode('utf-8')
            h.setdefault('Content-Type', 'application/json; charset=utf-8')
        else:
            resp._content = str(body).encode('utf-8')
        resp.headers = h
        return resp
    return _make
