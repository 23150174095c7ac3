from __future__ import annotations
from typing import Optional
from .config import ShopifyConfig
from .exceptions import MissingAccessToken, UnsupportedSurfaceType
from .types import AccessTokenHeader, ApiClientType, ShopifyHeader


def get_access_token_header(api_type: ApiClientType, config: ShopifyConfig, access_token: Optional[str] = None) -> AccessTokenHeader:
    """Pick the header carrying the credential for ``api_type``.

    Private apps always authenticate with the configured secret for the api
    type, even when a per-session ``access_token`` is also supplied. Never
    returns a blank value: ``MissingAccessToken`` is raised instead.
    """
    if api_type == ApiClientType.ADMIN:
        header = ShopifyHeader.ACCESS_TOKEN
        value = config.api_secret_key if config.is_private_app else access_token
    elif api_type == ApiClientType.STOREFRONT:
        header = ShopifyHeader.STOREFRONT_ACCESS_TOKEN
        value = config.private_app_storefront_access_token if config.is_private_app else access_token
    else:
        raise UnsupportedSurfaceType(f"Unsupported API client type '{api_type}'")

    if not value:
        raise MissingAccessToken(f"Could not determine the access token header for API client type '{api_type}'")

    return AccessTokenHeader(header=header, value=value)
