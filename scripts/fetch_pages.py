#!/usr/bin/env python
"""Fetch a paginated Shopify Admin REST resource and dump it to JSON.

Examples:
  python scripts/fetch_pages.py --resource products --limit 100 --max-pages 3 --out data/products.json
  python scripts/fetch_pages.py --resource orders --limit 50 --fields id,name,total_price --out data/orders.json

Environment:
  SHOPIFY_SHOP_DOMAIN, SHOPIFY_ACCESS_TOKEN (unless SHOPIFY_PRIVATE_APP is set),
  SHOPIFY_API_VERSION and the other variables read by ShopifyConfig.from_env.
"""
from __future__ import annotations
import argparse
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

# Carrega .env local se presente (sem depender de python-dotenv)
def _load_env_file(env_path: Path) -> None:
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip(); v = v.strip().strip('"').strip("'")
        existing = os.environ.get(k)
        if existing is None or existing.strip() == '':
            os.environ[k] = v

_load_env_file(Path('.env'))

from shopify_api import RestClient, ShopifyError
from shopify_api.config import env


def parse_args():
    p = argparse.ArgumentParser(description='Fetch a paginated Shopify REST resource')
    p.add_argument('--resource', required=True, help='Resource path, e.g. products or orders')
    p.add_argument('--limit', type=int, default=50)
    p.add_argument('--max-pages', type=int, default=1)
    p.add_argument('--fields', help='Comma separated field selection')
    p.add_argument('--out', required=True, help='Output JSON file path')
    p.add_argument('--verbose', action='store_true')
    return p.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    if args.verbose:
        logging.getLogger('shopify_api').setLevel(logging.DEBUG)
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    query: Dict[str, Any] = {'limit': args.limit}
    if args.fields:
        query['fields'] = args.fields

    try:
        client = RestClient.from_env(env('SHOPIFY_SHOP_DOMAIN'), os.getenv('SHOPIFY_ACCESS_TOKEN'))  # type: ignore[arg-type]
        # Shopify wraps collections under the last path segment: products -> {"products": [...]}
        key = args.resource.rstrip('/').split('/')[-1]
        items: List[Any] = []
        pages = 0
        for resp in client.iter_pages(args.resource, query, max_pages=args.max_pages):
            body = resp.body if isinstance(resp.body, dict) else {}
            items.extend(body.get(key, []))
            pages += 1
    except ShopifyError as e:
        raise SystemExit(f'[error] {e}')

    out_path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding='utf-8')
    if args.verbose:
        print(f'[done] {len(items)} items from {pages} page(s) -> {out_path}')

if __name__ == '__main__':
    main()
