"""Collection store: file handling, id assignment and the linear operations."""

import pytest

from inventory_api.core.errors import ProductNotFoundError, StorageError
from inventory_api.models.product import ProductCreate, ProductUpdate


def _create(name="Lamp", price=10, in_stock=True):
    return ProductCreate.model_validate({"name": name, "price": price, "inStock": in_stock})


def test_missing_file_is_created_empty(service, products_file):
    assert not products_file.exists()
    assert service.list() == []
    assert products_file.read_text(encoding="utf-8") == "[]"


def test_missing_parent_directory_is_created(tmp_path):
    from inventory_api.services.product_service import ProductService

    nested = tmp_path / "nested" / "dir" / "products.json"
    assert ProductService(nested).list() == []
    assert nested.exists()


def test_whitespace_file_is_empty_collection(service, products_file):
    products_file.write_text("  \n\t", encoding="utf-8")
    assert service.list() == []


def test_corrupt_file_raises_storage_error(service, products_file):
    products_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError) as excinfo:
        service.list()
    assert excinfo.value.message == "Failed to read products data"
    assert excinfo.value.http_status == 500


def test_non_array_file_raises_storage_error(service, products_file):
    products_file.write_text("42", encoding="utf-8")
    with pytest.raises(StorageError):
        service.list()


def test_first_id_is_one(service):
    assert service.append(_create())["id"] == 1


def test_new_id_is_max_plus_one(service, seed):
    seed([
        {"id": 7, "name": "A", "price": 1, "inStock": True},
        {"id": 3, "name": "B", "price": 2, "inStock": False},
    ])
    assert service.append(_create())["id"] == 8


def test_id_is_not_reused_after_deleting_a_middle_record(service):
    for name in ("A", "B", "C"):
        service.append(_create(name=name))
    service.remove(2)
    assert service.append(_create(name="D"))["id"] == 4


def test_append_writes_pretty_printed_camel_case(service, products_file, read_file):
    service.append(_create(name="  Lamp  ", price=12.5, in_stock=False))
    assert read_file() == [{"id": 1, "name": "Lamp", "price": 12.5, "inStock": False}]
    assert '\n  {\n    "id": 1,' in products_file.read_text(encoding="utf-8")


def test_integer_price_stays_integer(service, read_file):
    service.append(_create(price=35))
    assert read_file()[0]["price"] == 35
    assert isinstance(read_file()[0]["price"], int)


def test_filter_by_stock(service, seed):
    seed([
        {"id": 1, "name": "A", "price": 1, "inStock": True},
        {"id": 2, "name": "B", "price": 2, "inStock": False},
        {"id": 3, "name": "C", "price": 3, "inStock": True},
    ])
    assert [p["id"] for p in service.filter_by_stock()] == [1, 3]


def test_get_by_id_missing(service, seed):
    seed([{"id": 1, "name": "A", "price": 1, "inStock": True}])
    with pytest.raises(ProductNotFoundError) as excinfo:
        service.get_by_id(5)
    assert excinfo.value.message == "Product with ID 5 not found"


def test_replace_at_only_touches_given_fields(service, seed, read_file):
    seed([{"id": 1, "name": "A", "price": 1, "inStock": True}])
    updated = service.replace_at(1, ProductUpdate.model_validate({"price": 9.5}))
    assert updated["name"] == "A"
    assert updated["price"] == 9.5
    assert updated["inStock"] is True
    assert read_file() == [{"id": 1, "name": "A", "price": 9.5, "inStock": True}]


def test_replace_at_missing_does_not_write(service, seed, products_file):
    seed([{"id": 1, "name": "A", "price": 1, "inStock": True}])
    before = products_file.read_text(encoding="utf-8")
    with pytest.raises(ProductNotFoundError):
        service.replace_at(2, ProductUpdate.model_validate({"name": "B"}))
    assert products_file.read_text(encoding="utf-8") == before


def test_remove_returns_removed_record(service, seed, read_file):
    seed([
        {"id": 1, "name": "A", "price": 1, "inStock": True},
        {"id": 2, "name": "B", "price": 2, "inStock": False},
    ])
    removed = service.remove(1)
    assert removed["name"] == "A"
    assert [item["id"] for item in read_file()] == [2]


def test_write_failure_raises_storage_error(service, monkeypatch):
    service.list()

    def _fail(*args, **kwargs):
        raise PermissionError("read-only")

    monkeypatch.setattr("inventory_api.services.product_service.json.dump", _fail)
    with pytest.raises(StorageError) as excinfo:
        service.append(_create())
    assert excinfo.value.message == "Failed to save products data"


def test_replace_at_keeps_keys_outside_the_product_fields(service, seed, read_file):
    seed([{"id": 1, "name": "A", "price": 1, "inStock": True, "sku": "X-1"}])
    service.replace_at(1, ProductUpdate.model_validate({"price": 2}))
    assert read_file() == [{"id": 1, "name": "A", "price": 2, "inStock": True, "sku": "X-1"}]


def test_record_missing_a_field_is_still_readable(service, seed):
    seed([{"id": 1, "name": "A", "price": 1}])
    assert service.list() == [{"id": 1, "name": "A", "price": 1}]
    assert service.filter_by_stock() == []


def test_array_of_non_objects_raises_storage_error(service, products_file):
    products_file.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(StorageError):
        service.list()


def test_huge_integer_price_is_stored_exactly(service, read_file):
    price = 10 ** 400
    assert service.append(_create(price=price))["price"] == price
    assert read_file()[0]["price"] == price
