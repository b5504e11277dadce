# tests/test_pipeline.py
import csv
from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

import main
from stock_feed.delivery import DeliveryClient
from stock_feed.exceptions import EmptyFeedError
from stock_feed.pipelines.inventory_feed import StockFeedPipeline

from tests.conftest import PRIMARY_LOCATION, SECONDARY_LOCATION, make_product, make_response

RUN_DATE = date(2024, 6, 1)


class FakeShop:
    """Routes mocked session.get calls to canned Shopify payloads by endpoint."""

    def __init__(self, products, levels=None, metafield_value="2024-07-15", fail_on=None):
        self.products = products
        self.levels = levels or {}
        self.metafield_value = metafield_value
        self.fail_on = fail_on
        self.inventory_requests = []

    def __call__(self, url, params=None, timeout=None):
        resource = url.rsplit("/", 1)[-1]
        if self.fail_on and resource == self.fail_on:
            return make_response({}, status_code=503)
        if resource == "locations.json":
            return make_response(
                {
                    "locations": [
                        {"id": SECONDARY_LOCATION, "name": "Overflow"},
                        {"id": PRIMARY_LOCATION, "name": "Main Warehouse"},
                    ]
                }
            )
        if resource == "metafields.json":
            return make_response({"metafields": [{"value": self.metafield_value}]})
        if resource == "products.json":
            return make_response({"products": self.products})
        if resource == "inventory_levels.json":
            item_id = params["inventory_item_ids"]
            self.inventory_requests.append(item_id)
            return make_response({"inventory_levels": self.levels.get(item_id, [])})
        raise AssertionError(f"Unexpected request: {url}")


def inventory(item_id, primary, secondary):
    return [
        {"location_id": PRIMARY_LOCATION, "inventory_item_id": item_id, "available": primary},
        {"location_id": SECONDARY_LOCATION, "inventory_item_id": item_id, "available": secondary},
    ]


@pytest.fixture
def delivery():
    return MagicMock(spec=DeliveryClient)


@pytest.fixture
def make_pipeline(feed_config, shopify_client, mock_session, delivery, tmp_path):
    def _make(shop, test_mode=False):
        mock_session.get.side_effect = shop
        return StockFeedPipeline(
            feed_config,
            client=shopify_client,
            delivery=delivery,
            page_size=250,
            output_dir=tmp_path,
            run_date=RUN_DATE,
            test_mode=test_mode,
        )

    return _make


CATALOG = [
    make_product(1, "Oak Table", (11, "OAK-1", 111), (12, "ABC-2", 112), (13, "", 113)),
    make_product(2, "Hallway Runner", (21, "ABC-1", 211)),
    make_product(3, "Pine Bench", (31, "ABC-1", 311), (32, "OAK-2", 312)),
]

LEVELS = {
    111: inventory(111, 0, 4),
    311: inventory(311, 6, 0),
    312: [{"location_id": SECONDARY_LOCATION, "inventory_item_id": 312, "available": 2}],
}


def read_feed(path):
    with open(path, newline="", encoding="utf-8") as fh:
        return list(csv.DictReader(fh))


def test_full_run_writes_and_uploads_feed(make_pipeline, delivery, tmp_path):
    shop = FakeShop(CATALOG, LEVELS)

    path = make_pipeline(shop).run()

    assert path == tmp_path / "SUP123_2024-06-01.csv"
    delivery.upload.assert_called_once_with(path)

    records = read_feed(path)
    assert [r["product_code"] for r in records] == ["OAK-1", "ABC-1", "OAK-2"]
    assert records[0] == {
        "supplier_id": "SUP123",
        "product_code": "OAK-1",
        "quantity": "0",
        "qty_on_order": "4",
        "qty_backordered": "0",
        "item_next_availability_date": "15/07/2024",
        "item_discontinued": "0",
        "item_description": "Oak Table Machine Washable",
    }
    assert records[1]["item_next_availability_date"] == ""
    assert records[1]["item_description"] == "Pine Bench Machine Washable"
    assert records[2]["quantity"] == "0"
    assert records[2]["item_next_availability_date"] == "15/07/2024"
    assert records[2]["item_description"] == "Oak Table Large, 8 Seater"


def test_inventory_is_only_looked_up_for_qualifying_variants(make_pipeline):
    shop = FakeShop(CATALOG, LEVELS)

    make_pipeline(shop, test_mode=True).run()

    assert shop.inventory_requests == [111, 311, 312]


def test_test_mode_skips_upload(make_pipeline, delivery, tmp_path):
    path = make_pipeline(FakeShop(CATALOG, LEVELS), test_mode=True).run()

    assert path.exists()
    delivery.upload.assert_not_called()


def test_unparseable_metafield_leaves_dates_blank(make_pipeline):
    path = make_pipeline(FakeShop(CATALOG, LEVELS, metafield_value="soon"), test_mode=True).run()

    assert {r["item_next_availability_date"] for r in read_feed(path)} == {""}


def test_no_qualifying_rows_aborts_before_writing_or_uploading(make_pipeline, delivery, tmp_path):
    catalog = [make_product(1, "Oak Table", (11, "ABC-2", 111))]

    with pytest.raises(EmptyFeedError):
        make_pipeline(FakeShop(catalog)).run()

    assert list(tmp_path.iterdir()) == []
    delivery.upload.assert_not_called()


def test_catalog_failure_aborts_run(make_pipeline, delivery, tmp_path):
    with pytest.raises(requests.HTTPError):
        make_pipeline(FakeShop(CATALOG, LEVELS, fail_on="products.json")).run()

    assert list(tmp_path.iterdir()) == []
    delivery.upload.assert_not_called()


def test_locations_failure_zero_fills_quantities(make_pipeline):
    path = make_pipeline(FakeShop(CATALOG, LEVELS, fail_on="locations.json"), test_mode=True).run()

    records = read_feed(path)
    assert {(r["quantity"], r["qty_on_order"]) for r in records} == {("0", "0")}


def test_upload_failure_propagates(make_pipeline, delivery):
    delivery.upload.side_effect = OSError("connection reset")

    with pytest.raises(OSError):
        make_pipeline(FakeShop(CATALOG, LEVELS)).run()


def test_http_session_is_closed_after_run(make_pipeline, mock_session):
    make_pipeline(FakeShop(CATALOG, LEVELS), test_mode=True).run()

    mock_session.close.assert_called_once()


"""
Entry point
"""

def test_run_process_returns_one_on_any_failure(mocker):
    mocker.patch("main.setup_logger")
    pipeline_cls = mocker.patch("main.StockFeedPipeline")
    pipeline_cls.return_value.run.side_effect = EmptyFeedError("No data available to export.")

    assert main.run_process([]) == 1


def test_run_process_passes_cli_options(mocker, tmp_path):
    mocker.patch("main.setup_logger")
    pipeline_cls = mocker.patch("main.StockFeedPipeline")

    assert main.run_process(["--test", "--output-dir", str(tmp_path)]) == 0

    kwargs = pipeline_cls.call_args.kwargs
    assert kwargs["test_mode"] is True
    assert kwargs["output_dir"] == tmp_path
