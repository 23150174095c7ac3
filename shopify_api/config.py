"""Library configuration.

Values that were once process-wide (API version, private app secrets) live in
an immutable ``ShopifyConfig`` handed to each client, so a request always reads
one consistent snapshot.

Environment variables read by ``ShopifyConfig.from_env``:
    SHOPIFY_API_VERSION               e.g. 2023-01 or unstable (required)
    SHOPIFY_PRIVATE_APP               1/true/yes/on to authenticate as a private app
    SHOPIFY_API_SECRET_KEY            Admin API secret used by private apps
    SHOPIFY_STOREFRONT_ACCESS_TOKEN   Storefront token used by private apps
    SHOPIFY_USER_AGENT_PREFIX         optional prefix for the User-Agent header
"""
from __future__ import annotations
import os
import re
from dataclasses import dataclass
from typing import Optional
from .exceptions import MissingRequiredArgument, ShopifyError

API_VERSION_PATTERN = re.compile(r'^([0-9]{4}-[0-9]{2}|unstable)$')
TRUTHY = {'1', 'true', 'yes', 'on'}


def env(name: str, required: bool = True) -> Optional[str]:
    val = os.getenv(name)
    if required and (val is None or val.strip() == ''):
        raise MissingRequiredArgument(f"Missing required environment variable: {name}")
    return val


@dataclass(frozen=True)
class ShopifyConfig:
    api_version: str
    is_private_app: bool = False
    api_secret_key: Optional[str] = None
    private_app_storefront_access_token: Optional[str] = None
    user_agent_prefix: Optional[str] = None

    def __post_init__(self):
        if not self.api_version:
            raise MissingRequiredArgument('Missing API version')
        if not API_VERSION_PATTERN.match(self.api_version):
            raise ShopifyError(f"Invalid API version '{self.api_version}' (expected YYYY-MM or unstable)")

    @classmethod
    def from_env(cls) -> 'ShopifyConfig':
        private = (os.getenv('SHOPIFY_PRIVATE_APP') or '').strip().lower() in TRUTHY
        return cls(
            api_version=env('SHOPIFY_API_VERSION'),  # type: ignore[arg-type]
            is_private_app=private,
            api_secret_key=env('SHOPIFY_API_SECRET_KEY', required=False),
            private_app_storefront_access_token=env('SHOPIFY_STOREFRONT_ACCESS_TOKEN', required=False),
            user_agent_prefix=env('SHOPIFY_USER_AGENT_PREFIX', required=False),
        )
