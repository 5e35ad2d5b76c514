"""Shared fixtures: every test gets its own products file."""

import json

import pytest
from fastapi.testclient import TestClient

from inventory_api.main import app
from inventory_api.services.product_service import ProductService, get_product_service


@pytest.fixture
def products_file(tmp_path):
    return tmp_path / "products.json"


@pytest.fixture
def seed(products_file):
    """Write raw records to the products file."""

    def _seed(records):
        products_file.write_text(json.dumps(records, indent=2), encoding="utf-8")
        return records

    return _seed


@pytest.fixture
def read_file(products_file):
    def _read():
        return json.loads(products_file.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def service(products_file):
    return ProductService(products_file)


@pytest.fixture
def client(products_file):
    app.dependency_overrides[get_product_service] = lambda: ProductService(products_file)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sample_product():
    return {"name": "Desk Lamp", "price": 19.99, "inStock": True}
