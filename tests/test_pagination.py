import pytest
from shopify_api.exceptions import UnsupportedSurfaceType
from shopify_api.pagination import ParsedLink, build_page_info, build_request_params, parse_link_header
from shopify_api.paths import get_rest_path
from shopify_api.types import ApiClientType, GetRequestParams

BASE = 'https://shop.example.com/admin/api/2023-01/products.json'
NEXT_URL = f'{BASE}?limit=10&page_info=abc123'
PREV_URL = f'{BASE}?limit=10&page_info=xyz789'


def test_parse_empty_header():
    assert parse_link_header('') == []
    assert parse_link_header(None) == []


def test_parse_keeps_header_order():
    links = parse_link_header(f'<{NEXT_URL}>; rel="next", <{PREV_URL}>; rel="previous"')
    assert links == [ParsedLink(NEXT_URL, 'next'), ParsedLink(PREV_URL, 'previous')]


def test_parse_skips_malformed_entries():
    links = parse_link_header(f'garbage, <{NEXT_URL}>; rel=next, <{PREV_URL}>; rel="previous"')
    assert links == [ParsedLink(PREV_URL, 'previous')]


def test_parse_lowercases_rel():
    assert parse_link_header(f'<{NEXT_URL}>; rel="Next"')[0].rel == 'next'


def test_build_request_params_strips_prefix_and_version():
    params = build_request_params(NEXT_URL, ApiClientType.ADMIN)
    assert params == GetRequestParams(path='products', query={'limit': '10', 'page_info': 'abc123'})


def test_build_request_params_nested_path():
    url = 'https://shop.example.com/admin/api/unstable/products/42/images.json?page_info=t'
    assert build_request_params(url, ApiClientType.ADMIN).path == 'products/42/images'


def test_build_request_params_unsupported_type():
    with pytest.raises(UnsupportedSurfaceType):
        build_request_params(NEXT_URL, ApiClientType.STOREFRONT)


def test_page_info_next_only():
    page_info = build_page_info({'limit': 10}, parse_link_header(f'<{NEXT_URL}>; rel="next"'), ApiClientType.ADMIN)
    assert page_info.limit == '10'
    assert page_info.next_page_url == NEXT_URL
    assert page_info.next_page == GetRequestParams(path='products', query={'limit': '10', 'page_info': 'abc123'})
    assert page_info.previous_page_url is None
    assert page_info.prev_page is None
    assert page_info.fields is None


@pytest.mark.parametrize('header', [
    f'<{NEXT_URL}>; rel="next", <{PREV_URL}>; rel="previous"',
    f'<{PREV_URL}>; rel="previous", <{NEXT_URL}>; rel="next"',
])
def test_page_info_order_independent(header):
    page_info = build_page_info({'limit': 10}, parse_link_header(header), ApiClientType.ADMIN)
    assert page_info.next_page.query['page_info'] == 'abc123'
    assert page_info.prev_page.query['page_info'] == 'xyz789'
    assert page_info.previous_page_url == PREV_URL


def test_first_fields_wins():
    header = (
        f'<{BASE}?fields=id,title&page_info=p1>; rel="previous", '
        f'<{BASE}?fields=id,handle,vendor&page_info=n1>; rel="next"'
    )
    page_info = build_page_info({'limit': 5}, parse_link_header(header), ApiClientType.ADMIN)
    assert page_info.fields == ['id', 'title']


def test_fields_taken_from_link_without_page_token():
    header = f'<{BASE}?fields=id,title>; rel="next"'
    page_info = build_page_info({'limit': 5}, parse_link_header(header), ApiClientType.ADMIN)
    assert page_info.fields == ['id', 'title']
    assert page_info.next_page is None


def test_unknown_rel_ignored():
    header = f'<{NEXT_URL}>; rel="last"'
    page_info = build_page_info({'limit': 10}, parse_link_header(header), ApiClientType.ADMIN)
    assert page_info.next_page is None and page_info.prev_page is None


def test_empty_links_only_limit():
    page_info = build_page_info({'limit': 25}, [], ApiClientType.ADMIN)
    assert page_info.limit == '25'
    assert page_info.next_page is None and page_info.fields is None


def test_missing_limit_left_unset():
    page_info = build_page_info({}, parse_link_header(f'<{NEXT_URL}>; rel="next"'), ApiClientType.ADMIN)
    assert page_info.limit is None
    assert page_info.next_page is not None


def test_next_page_round_trips_through_rest_path():
    page_info = build_page_info({'limit': 10}, parse_link_header(f'<{NEXT_URL}>; rel="next"'), ApiClientType.ADMIN)
    path = get_rest_path(ApiClientType.ADMIN, '2023-01', page_info.next_page.path)
    assert path == '/admin/api/2023-01/products.json'


def test_repeated_keys_detection_matches_replay():
    header = f'<{BASE}?fields=a&fields=b&page_info=t>; rel="next"'
    page_info = build_page_info({'limit': 5}, parse_link_header(header), ApiClientType.ADMIN)
    assert page_info.fields == ['b']
    assert page_info.next_page.query['fields'] == 'b'


def test_repeated_page_token_uses_last_value():
    header = f'<{BASE}?page_info=&page_info=t>; rel="next"'
    page_info = build_page_info({'limit': 5}, parse_link_header(header), ApiClientType.ADMIN)
    assert page_info.next_page.query['page_info'] == 't'
