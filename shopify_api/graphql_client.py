from __future__ import annotations
from typing import Any, Dict, Optional, Union
from .access_token import get_access_token_header
from .config import ShopifyConfig
from .exceptions import MissingRequiredArgument
from .http_client import HttpClient
from .paths import get_graphql_path
from .types import ApiClientType, DataType, RequestReturn


class GraphqlClient:
    """GraphQL client for the Admin and Storefront APIs."""

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
            raise MissingRequiredArgument('Missing access token when creating GraphQL client')
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
    def from_env(cls, domain: str, access_token: Optional[str] = None, api_type: ApiClientType = ApiClientType.ADMIN) -> 'GraphqlClient':
        return cls(domain, access_token, config=ShopifyConfig.from_env(), api_type=api_type)

    def query(self, data: Union[str, Dict[str, Any]], extra_headers: Optional[Dict[str, str]] = None) -> RequestReturn:
        """POST a query. ``data`` is either a raw GraphQL document or a
        ``{'query': ..., 'variables': ...}`` dict sent as JSON."""
        if not data:
            raise MissingRequiredArgument('Query missing.')

        token_header = get_access_token_header(self.api_type, self.config, self.access_token)
        headers = {token_header.header: token_header.value, **(extra_headers or {})}
        path = get_graphql_path(self.api_type, self.config.api_version)
        data_type = DataType.JSON if isinstance(data, dict) else DataType.GRAPHQL

        return self.transport.post(path, data, type=data_type, extra_headers=headers)
