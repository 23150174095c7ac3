from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

QueryValue = Union[str, int]


class ApiClientType(str, Enum):
    ADMIN = 'admin'
    STOREFRONT = 'storefront'


class ShopifyHeader:
    ACCESS_TOKEN = 'X-Shopify-Access-Token'
    STOREFRONT_ACCESS_TOKEN = 'X-Shopify-Storefront-Access-Token'


class Method(str, Enum):
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'


class DataType(str, Enum):
    JSON = 'application/json'
    GRAPHQL = 'application/graphql'
    URL_ENCODED = 'application/x-www-form-urlencoded'


@dataclass(frozen=True)
class AccessTokenHeader:
    header: str
    value: str


@dataclass(frozen=True)
class GetRequestParams:
    """A replayable GET request: relative resource path plus query."""
    path: str
    query: Dict[str, QueryValue] = field(default_factory=dict)


@dataclass(frozen=True)
class RequestParams:
    method: Method
    path: str
    query: Optional[Dict[str, QueryValue]] = None
    data: Any = None
    type: DataType = DataType.JSON
    extra_headers: Optional[Dict[str, str]] = None


@dataclass
class PageInfo:
    limit: Optional[str] = None
    fields: Optional[List[str]] = None
    previous_page_url: Optional[str] = None
    next_page_url: Optional[str] = None
    prev_page: Optional[GetRequestParams] = None
    next_page: Optional[GetRequestParams] = None


@dataclass
class RequestReturn:
    body: Any
    headers: Mapping[str, str]
    status_code: int = 200


@dataclass
class RestRequestReturn(RequestReturn):
    page_info: Optional[PageInfo] = None
