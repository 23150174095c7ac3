"""Cursor pagination from the REST ``Link`` response header.

Shopify returns pages as::

    Link: <https://shop.myshopify.com/admin/api/2023-01/products.json?limit=10&page_info=abc>; rel="next",
          <https://shop.myshopify.com/admin/api/2023-01/products.json?limit=10&page_info=xyz>; rel="previous"

``page_info`` is an opaque cursor: it is forwarded as-is, never decoded.
"""
from __future__ import annotations
import logging
import re
from typing import Any, Dict, List, Mapping, NamedTuple, Optional
from urllib.parse import parse_qsl, urlsplit
from .paths import get_rest_base_path
from .types import ApiClientType, GetRequestParams, PageInfo

logger = logging.getLogger(__name__)

LINK_HEADER_REGEXP = re.compile(r'<([^<]+)>; rel="([^"]+)"')
LINK_SEPARATOR = ', '


class ParsedLink(NamedTuple):
    url: str
    rel: str


def parse_link_header(link: Optional[str]) -> List[ParsedLink]:
    """Split a ``Link`` header into (url, rel) pairs, in header order.

    Entries that do not look like ``<url>; rel="..."`` are skipped.
    """
    if not link:
        return []
    parsed: List[ParsedLink] = []
    for entry in link.split(LINK_SEPARATOR):
        match = LINK_HEADER_REGEXP.search(entry)
        if not match:
            logger.debug('Skipping unrecognised Link header entry: %r', entry)
            continue
        parsed.append(ParsedLink(url=match.group(1), rel=match.group(2).lower()))
    return parsed


def _page_query(page_url: str) -> Dict[str, str]:
    # repeated keys: last value wins, for detection and replay alike
    return dict(parse_qsl(urlsplit(page_url).query, keep_blank_values=True))


def build_request_params(page_url: str, api_type: ApiClientType) -> GetRequestParams:
    """Turn an absolute page URL back into a relative, replayable request."""
    pattern = rf'^{re.escape(get_rest_base_path(api_type))}/[^/]+/(.*)\.json$'
    path = re.sub(pattern, r'\1', urlsplit(page_url).path)
    return GetRequestParams(path=path, query=_page_query(page_url))  # type: ignore[arg-type]


def build_page_info(query: Mapping[str, Any], links: List[ParsedLink], api_type: ApiClientType) -> PageInfo:
    limit = query.get('limit')
    page_info = PageInfo(limit=str(limit) if limit is not None else None)

    for link in links:
        params = _page_query(link.url)
        link_fields = params.get('fields')
        page_token = params.get('page_info')

        if page_info.fields is None and link_fields:
            page_info.fields = link_fields.split(',')

        if not page_token:
            continue
        if link.rel == 'previous':
            page_info.previous_page_url = link.url
            page_info.prev_page = build_request_params(link.url, api_type)
        elif link.rel == 'next':
            page_info.next_page_url = link.url
            page_info.next_page = build_request_params(link.url, api_type)

    logger.debug('Pagination: limit=%s next=%s previous=%s', page_info.limit,
                 page_info.next_page is not None, page_info.prev_page is not None)
    return page_info
