from __future__ import annotations
import dataclasses
import logging
from typing import Any, Dict, Iterator, Optional
from .access_token import get_access_token_header
from .config import ShopifyConfig
from .exceptions import MissingRequiredArgument
from .http_client import HttpClient
from .pagination import build_page_info, parse_link_header
from .paths import get_rest_path
from .types import ApiClientType, DataType, GetRequestParams, Method, QueryValue, RequestParams, RestRequestReturn

logger = logging.getLogger(__name__)


class RestClient:
    """Shopify Admin REST API client.

    Wraps an ``HttpClient`` transport: adds the access token header, versions
    the path and, for paginated GETs, attaches a ``PageInfo`` built from the
    ``Link`` response header.

    Example:
        client = RestClient('shop.myshopify.com', 'shpat_...', config=ShopifyConfig(api_version='2023-01'))
        resp = client.get('products', query={'limit': 50})
        while resp.page_info and resp.page_info.next_page:
            resp = client.get_page(resp.page_info.next_page)
    """

    def __init__(
        self,
        domain: str,
        access_token: Optional[str] = None,
        *,
        config: ShopifyConfig,
        api_type: ApiClientType = ApiClientType.ADMIN,
        transport: Optional[HttpClient] = None,
    ):
        if not config.is_private_app and not access_token:
            raise MissingRequiredArgument('Missing access token when creating REST client')
        self._domain = domain
        self._access_token = access_token
        self._config = config
        self._api_type = api_type
        self.transport = transport or HttpClient(domain, user_agent_prefix=config.user_agent_prefix)

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def config(self) -> ShopifyConfig:
        return self._config

    @property
    def api_type(self) -> ApiClientType:
        return self._api_type

    @classmethod
    def from_env(cls, domain: str, access_token: Optional[str] = None) -> 'RestClient':
        return cls(domain, access_token, config=ShopifyConfig.from_env())

    def request(self, params: RequestParams) -> RestRequestReturn:
        token_header = get_access_token_header(self.api_type, self.config, self.access_token)
        headers = {token_header.header: token_header.value, **(params.extra_headers or {})}
        path = get_rest_path(self.api_type, self.config.api_version, params.path)

        ret = self.transport.request(dataclasses.replace(params, path=path, extra_headers=headers))
        result = RestRequestReturn(body=ret.body, headers=ret.headers, status_code=ret.status_code)

        link = ret.headers.get('link')
        if params.query is not None and link is not None:
            result.page_info = build_page_info(params.query, parse_link_header(link), self.api_type)
        return result

    def get(self, path: str, query: Optional[Dict[str, QueryValue]] = None, extra_headers: Optional[Dict[str, str]] = None) -> RestRequestReturn:
        return self.request(RequestParams(Method.GET, path, query=query, extra_headers=extra_headers))

    def get_page(self, page: GetRequestParams, extra_headers: Optional[Dict[str, str]] = None) -> RestRequestReturn:
        """Fetch a page described by ``PageInfo.next_page`` / ``prev_page``."""
        return self.get(page.path, query=dict(page.query), extra_headers=extra_headers)

    def post(self, path: str, data: Any, type: DataType = DataType.JSON, query: Optional[Dict[str, QueryValue]] = None, extra_headers: Optional[Dict[str, str]] = None) -> RestRequestReturn:
        return self.request(RequestParams(Method.POST, path, query=query, data=data, type=type, extra_headers=extra_headers))

    def put(self, path: str, data: Any, type: DataType = DataType.JSON, query: Optional[Dict[str, QueryValue]] = None, extra_headers: Optional[Dict[str, str]] = None) -> RestRequestReturn:
        return self.request(RequestParams(Method.PUT, path, query=query, data=data, type=type, extra_headers=extra_headers))

    def delete(self, path: str, query: Optional[Dict[str, QueryValue]] = None, extra_headers: Optional[Dict[str, str]] = None) -> RestRequestReturn:
        return self.request(RequestParams(Method.DELETE, path, query=query, extra_headers=extra_headers))

    def iter_pages(self, path: str, query: Dict[str, QueryValue], max_pages: Optional[int] = None, extra_headers: Optional[Dict[str, str]] = None) -> Iterator[RestRequestReturn]:
        """Yield ``path`` page by page, following ``next_page`` links."""
        if max_pages is not None and max_pages <= 0:
            return
        resp = self.get(path, query=query, extra_headers=extra_headers)
        pages = 1
        yield resp
        while resp.page_info and resp.page_info.next_page:
            if max_pages is not None and pages >= max_pages:
                break
            logger.debug('Following next page of %s (%d fetched)', path, pages)
            resp = self.get_page(resp.page_info.next_page, extra_headers=extra_headers)
            pages += 1
            yield resp
