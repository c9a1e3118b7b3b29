"""Pytest fixtures and configuration."""

import pytest

from catalog_import.models import (
    CreatedCategory,
    CreatedProduct,
    CreatedVariant,
    InventoryItemLink,
    RawCatalogItem,
    SalesChannel,
    StockLocation,
)


class FakeBackend:
    """In-memory CommerceBackend that records every call it receives."""

    def __init__(
        self,
        sales_channels=None,
        stock_locations=None,
        fail_on=None,
        fail_on_call=1,
        without_inventory=(),
    ):
        self.sales_channels = (
            [SalesChannel(id="sc_default", name="Default Sales Channel")]
            if sales_channels is None else sales_channels
        )
        self.stock_locations = (
            [StockLocation(id="sloc_main", name="Main Warehouse")]
            if stock_locations is None else stock_locations
        )
        self.fail_on = fail_on
        self.fail_on_call = fail_on_call
        self.without_inventory = set(without_inventory)
        self.calls = []
        self.category_calls = []
        self.product_batches = []
        self.inventory_batches = []
        self._product_seq = 0

    def _record(self, operation):
        self.calls.append(operation)
        if operation == self.fail_on and self.calls.count(operation) == self.fail_on_call:
            raise RuntimeError(f"{operation} exploded")

    def list_sales_channels(self, name):
        self._record("list_sales_channels")
        return [c for c in self.sales_channels if c.name == name]

    def list_stock_locations(self):
        self._record("list_stock_locations")
        return list(self.stock_locations)

    def create_product_categories(self, categories):
        self._record("create_product_categories")
        self.category_calls.append(list(categories))
        return [
            CreatedCategory(id=f"pcat_{idx}", name=c.name, handle=c.handle)
            for idx, c in enumerate(categories)
        ]

    def create_products(self, products):
        self._record("create_products")
        self.product_batches.append(list(products))
        created = []
        for product in products:
            self._product_seq += 1
            variant = product.variants[0]
            links = (
                [] if variant.sku in self.without_inventory
                else [InventoryItemLink(inventory_item_id=f"iitem_{variant.sku}")]
            )
            created.append(CreatedProduct(
                id=f"prod_{self._product_seq}",
                title=product.title,
                handle=product.handle,
                variants=[CreatedVariant(
                    id=f"variant_{self._product_seq}",
                    sku=variant.sku,
                    inventory_items=links,
                )],
            ))
        return created

    def create_inventory_levels(self, levels):
        self._record("create_inventory_levels")
        self.inventory_batches.append(list(levels))
        return [level.model_dump() for level in levels]


class FakeFetcher:
    url = "https://catalog.test/products"

    def __init__(self, items):
        self.items = items

    def fetch(self):
        return list(self.items)


def make_raw_item(idx, **overrides):
    data = {
        "id": idx,
        "title": f"Product {idx}",
        "price": 10.0,
        "brand": "Acme",
        "description": f"Description {idx}",
        "stock": 5,
        "category": "beauty",
        "sku": f"SKU-ACME-{idx}",
        "thumbnail": f"https://cdn.test/{idx}/thumb.png",
        "images": [f"https://cdn.test/{idx}/1.png"],
        "weight": 2,
        "dimensions": {"width": 10.5, "height": 4.2, "depth": 7.0},
    }
    data.update(overrides)
    return RawCatalogItem.model_validate(data)


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def sample_raw_item():
    """Return a single DummyJSON-shaped record."""
    return make_raw_item(
        1,
        title="Essence Mascara Lash Princess",
        price=9.99,
        brand="Essence",
        category="beauty",
        sku="BEA-ESS-ESS-001",
        stock=99,
        weight=4,
        dimensions={"width": 15.14, "height": 13.08, "depth": 22.99},
    )


@pytest.fixture
def scenario_items():
    """Three records covering shared categories, zero price and missing stock."""
    return [
        make_raw_item(1, title="Red Lipstick", category="Beauty", price=10.00, stock=50, sku=None),
        make_raw_item(2, title="Eyeshadow Palette", category="Beauty", price=25.50, stock=None, sku=None),
        make_raw_item(3, title="Chanel Coco Noir", category="Fragrances", price=0, stock=0, sku=None),
    ]


@pytest.fixture
def catalog_payload():
    """Return a raw catalog response body."""
    return {
        "products": [
            {
                "id": 1,
                "title": "Essence Mascara Lash Princess",
                "description": "A popular mascara.",
                "category": "beauty",
                "price": 9.99,
                "stock": 99,
                "brand": "Essence",
                "sku": "BEA-ESS-ESS-001",
                "weight": 4,
                "dimensions": {"width": 15.14, "height": 13.08, "depth": 22.99},
                "images": ["https://cdn.dummyjson.com/products/images/1.webp"],
                "thumbnail": "https://cdn.dummyjson.com/products/thumb/1.webp",
                "rating": 2.56,
                "tags": ["beauty", "mascara"],
            },
            {
                "id": 2,
                "title": "Eyeshadow Palette with Mirror",
                "price": 19.99,
            },
        ],
        "total": 194,
        "skip": 0,
        "limit": 30,
    }
