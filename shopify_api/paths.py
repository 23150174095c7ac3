from __future__ import annotations
from .exceptions import UnsupportedSurfaceType
from .types import ApiClientType

REST_BASE_PATHS = {
    ApiClientType.ADMIN: '/admin/api',
}

GRAPHQL_BASE_PATHS = {
    ApiClientType.ADMIN: '/admin/api',
    ApiClientType.STOREFRONT: '/api',
}


def get_rest_base_path(api_type: ApiClientType) -> str:
    try:
        return REST_BASE_PATHS[api_type]
    except (KeyError, TypeError):
        raise UnsupportedSurfaceType(f"Unsupported REST API client type '{api_type}'") from None


def get_graphql_base_path(api_type: ApiClientType) -> str:
    try:
        return GRAPHQL_BASE_PATHS[api_type]
    except (KeyError, TypeError):
        raise UnsupportedSurfaceType(f"Unsupported GraphQL API client type '{api_type}'") from None


def get_rest_path(api_type: ApiClientType, api_version: str, path: str) -> str:
    """``products`` -> ``/admin/api/2023-01/products.json``."""
    return f"{get_rest_base_path(api_type)}/{api_version}/{path}.json"


def get_graphql_path(api_type: ApiClientType, api_version: str) -> str:
    return f"{get_graphql_base_path(api_type)}/{api_version}/graphql.json"
