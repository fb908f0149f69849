"""Tests for the Magento-backed tool handlers."""

import json

import httpx
import pytest

from magento_mcp import tools


def _text(content) -> str:
    assert len(content) == 1
    assert content[0].type == "text"
    return content[0].text


def test_get_product_by_sku_encodes_sku(magento, store_headers):
    upstream = magento(json={"sku": "24-MB 01/a"})
    _text(upstream.run(tools.get_product_by_sku, "24-MB 01/a", headers=store_headers))
    assert str(upstream.last.url).endswith("/rest/V1/mcpdata/product/sku/24-MB%2001%2Fa")


def test_get_products_by_ids_encodes_whole_list(magento, store_headers):
    upstream = magento(json=[])
    upstream.run(tools.get_products_by_ids, "1,2,3", headers=store_headers)
    assert str(upstream.last.url).endswith("/rest/V1/mcpdata/products/ids/1%2C2%2C3")


def test_get_product_categories_path(magento, store_headers):
    upstream = magento(json=[])
    upstream.run(tools.get_product_categories, "MH01", headers=store_headers)
    assert str(upstream.last.url).endswith("/rest/V1/mcpdata/product/categories/MH01")


def test_search_products_defaults(magento, store_headers):
    upstream = magento(json={"items": []})
    upstream.run(tools.search_products, headers=store_headers)

    url = str(upstream.last.url)
    assert "/rest/V1/mcpdata/products/search?" in url
    assert url.endswith("?query=&pageSize=10&currentPage=1")


def test_search_products_with_query(magento, store_headers):
    upstream = magento(json={"items": []})
    upstream.run(tools.search_products, "yoga mat", 25, 3, headers=store_headers)
    assert str(upstream.last.url).endswith("?query=yoga+mat&pageSize=25&currentPage=3")


def test_search_products_none_query_sent_empty(magento, store_headers):
    upstream = magento(json={"items": []})
    upstream.run(tools.search_products, None, headers=store_headers)
    assert "query=&" in str(upstream.last.url)


def test_get_bestsellers_without_status(magento, store_headers):
    upstream = magento(json=[])
    upstream.run(tools.get_bestsellers, date_range="last week", headers=store_headers)

    url = str(upstream.last.url)
    assert "/rest/V1/mcpdata/bestsellers?" in url
    assert "dateRange=last+week" in url
    assert "limit=10" in url
    assert "status" not in url


def test_get_bestsellers_with_status(magento, store_headers):
    upstream = magento(json=[])
    upstream.run(tools.get_bestsellers, "ytd", 5, "complete", headers=store_headers)
    assert str(upstream.last.url).endswith("?dateRange=ytd&limit=5&status=complete")


def test_get_bestsellers_empty_status_omitted(magento, store_headers):
    upstream = magento(json=[])
    upstream.run(tools.get_bestsellers, status="", headers=store_headers)
    assert str(upstream.last.url).endswith("?dateRange=today&limit=10")


def test_get_revenue_defaults(magento, store_headers):
    upstream = magento(json={"revenue": 0})
    upstream.run(tools.get_revenue, headers=store_headers)
    assert str(upstream.last.url).endswith("/rest/V1/mcpdata/revenue?dateRange=today&includeTax=true")


def test_get_revenue_custom_range_without_tax(magento, store_headers):
    upstream = magento(json={"revenue": 0})
    upstream.run(
        tools.get_revenue,
        "2024-01-01 to 2024-01-31",
        "processing",
        False,
        headers=store_headers,
    )
    assert str(upstream.last.url).endswith(
        "?dateRange=2024-01-01+to+2024-01-31&includeTax=false&status=processing"
    )


@pytest.mark.parametrize(
    "payload",
    [
        {"sku": "24-MB01", "name": "Joust Duffle Bag", "price": 34, "extension_attributes": {"qty": 100}},
        {"zeta": 1, "alpha": [1, 2, {"nested": None}], "label": "Sac à dos"},
        [],
        "plain string",
    ],
)
def test_result_is_pretty_printed_verbatim(magento, store_headers, payload):
    upstream = magento(json=payload)
    text = _text(upstream.run(tools.get_product_by_sku, "24-MB01", headers=store_headers))
    assert text == json.dumps(payload, indent=2, ensure_ascii=False)


def test_key_order_preserved(magento, store_headers):
    upstream = magento(json={"z": 1, "a": 2, "m": 3})
    text = _text(upstream.run(tools.get_revenue, headers=store_headers))
    assert list(json.loads(text)) == ["z", "a", "m"]


@pytest.mark.parametrize(
    "call",
    [
        lambda h, c: tools.get_product_by_sku("x", headers=h, client=c),
        lambda h, c: tools.get_products_by_ids("1,2", headers=h, client=c),
        lambda h, c: tools.search_products(headers=h, client=c),
        lambda h, c: tools.get_product_categories("x", headers=h, client=c),
        lambda h, c: tools.get_bestsellers(headers=h, client=c),
        lambda h, c: tools.get_revenue(headers=h, client=c),
    ],
)
def test_missing_headers_become_error_content(magento, call):
    upstream = magento()

    async def invoke(client):
        return await call({}, client)

    text = _text(upstream.run(invoke))
    assert text.startswith("Error: API call error: Missing required headers")
    assert upstream.requests == []


def test_upstream_404_becomes_error_content(magento, store_headers):
    upstream = magento(404, text="not found")
    text = _text(upstream.run(tools.get_product_by_sku, "nope", headers=store_headers))
    assert text.startswith("Error: ")
    assert "404" in text
    assert "not found" in text


def test_upstream_500_becomes_error_content(magento, store_headers):
    upstream = magento(500, text='{"message":"boom"}')
    text = _text(upstream.run(tools.get_bestsellers, headers=store_headers))
    assert text == 'Error: API call error: API call failed: 500 Internal Server Error - {"message":"boom"}'


def test_upstream_timeout_becomes_error_content(magento, store_headers):
    upstream = magento(raises=lambda request: httpx.ReadTimeout("timed out", request=request))
    text = _text(upstream.run(tools.get_revenue, headers=store_headers))
    assert text == "Error: API call error: timed out"


def test_fractional_paging_values_pass_through(magento, store_headers):
    upstream = magento(json={"items": []})
    upstream.run(tools.search_products, "bag", 10.5, 2.0, headers=store_headers)
    assert str(upstream.last.url).endswith("?query=bag&pageSize=10.5&currentPage=2")


def test_bestsellers_float_limit_renders_like_an_integer(magento, store_headers):
    upstream = magento(json=[])
    upstream.run(tools.get_bestsellers, "today", 5.0, headers=store_headers)
    assert str(upstream.last.url).endswith("?dateRange=today&limit=5")
