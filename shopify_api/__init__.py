"""Typed client for the Shopify Admin REST and GraphQL / Storefront APIs.

Usage example:
    from shopify_api import RestClient, ShopifyConfig
    client = RestClient('shop.myshopify.com', 'shpat_...', config=ShopifyConfig(api_version='2023-01'))
    resp = client.get('products', query={'limit': 50})
    next_page = resp.page_info.next_page if resp.page_info else None
"""
from .config import ShopifyConfig  # noqa: F401
from .exceptions import (  # noqa: F401
    HttpAuthError,
    HttpRequestError,
    HttpResponseError,
    HttpThrottlingError,
    MissingAccessToken,
    MissingRequiredArgument,
    ShopifyError,
    UnsupportedSurfaceType,
)
from .graphql_client import GraphqlClient  # noqa: F401
from .http_client import HttpClient  # noqa: F401
from .rest_client import RestClient  # noqa: F401
from .types import ApiClientType, DataType, GetRequestParams, PageInfo, RestRequestReturn  # noqa: F401
from .version import __version__  # noqa: F401
